"""Caller context supplied by the host for every invocation."""

from dataclasses import dataclass


@dataclass(frozen=True)
class CallerContext:
    """The authenticated identity attributed to the current call.

    Identities are opaque tokens; they are only ever compared for equality.
    """

    identity: str

    def current_caller(self) -> str:
        return self.identity
