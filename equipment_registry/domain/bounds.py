"""Storage range for integer fields.

Timestamps, levels and asset ids are stored in signed 64-bit columns. Values
outside that range are otherwise unvalidated but cannot be persisted.
"""

from equipment_registry.domain.exceptions import ValueOutOfRangeError

INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1


def fits_int64(value: int) -> bool:
    return INT64_MIN <= value <= INT64_MAX


def require_int64(**fields: int) -> None:
    """Raise ``ValueOutOfRangeError`` for the first field that cannot be stored."""
    for name, value in fields.items():
        if not fits_int64(value):
            raise ValueOutOfRangeError(name, value)
