"""Certification time-window rules.

Timestamps are integer Unix seconds. A window is valid only when it strictly
increases; a certification counts at ``current_time`` while it is active and
has not yet passed its expiration (the expiration second itself still counts).
"""

from equipment_registry.domain.exceptions import InvalidDateRangeError


def validate_date_range(certification_date: int, expiration_date: int) -> None:
    """Raise ``InvalidDateRangeError`` unless ``certification_date < expiration_date``."""
    if certification_date >= expiration_date:
        raise InvalidDateRangeError(certification_date, expiration_date)


def is_valid_at(is_active: bool, expiration_date: int, current_time: int) -> bool:
    return is_active and expiration_date >= current_time
