"""Resolve the host-supplied caller identity for the current request."""

from flask import current_app, request

from equipment_registry.domain.caller import CallerContext
from equipment_registry.domain.exceptions import MissingCallerError


def caller_from_request() -> CallerContext:
    """Build a ``CallerContext`` from the configured identity header.

    The host authenticates callers before requests reach the registry, so the
    header value is taken verbatim: identities are opaque and never normalized.
    """
    header = current_app.config["CALLER_HEADER"]
    identity = request.headers.get(header)
    if not identity:
        raise MissingCallerError(header)
    return CallerContext(identity)
