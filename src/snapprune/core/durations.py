# src/snapprune/core/durations.py
"""Human-friendly interval strings for retention policies.

Accepted forms: a bare number of seconds ("86400") or a number followed by
a single unit suffix ("90s", "30m", "6h", "1d", "2w"). Months and years are
deliberately absent: their length depends on the calendar, and policies
work in fixed seconds.
"""

import re

from snapprune.contracts.errors import DurationError

# Unit suffix -> seconds. Ordered largest first for format_duration().
_UNITS: dict[str, int] = {
    "w": 7 * 24 * 60 * 60,
    "d": 24 * 60 * 60,
    "h": 60 * 60,
    "m": 60,
    "s": 1,
}

_DURATION_PATTERN = re.compile(r"(?P<value>\d+)(?P<unit>[smhdw]?)")


def parse_duration(text: str) -> int:
    """Parse an interval string into a positive number of seconds.

    Args:
        text: Duration such as "86400", "1d" or "2W"

    Returns:
        Interval in seconds (always > 0)

    Raises:
        DurationError: If text is malformed or not positive
    """
    match = _DURATION_PATTERN.fullmatch(text.strip().lower())
    if match is None:
        raise DurationError(f"Invalid interval {text!r}: expected seconds or a number with one of the suffixes s, m, h, d, w")
    seconds = int(match.group("value")) * _UNITS[match.group("unit") or "s"]
    if seconds <= 0:
        raise DurationError(f"Invalid interval {text!r}: must be greater than zero")
    return seconds


def format_duration(seconds: int) -> str:
    """Render seconds using the largest unit that divides it exactly.

    >>> format_duration(604800)
    '1w'
    >>> format_duration(90)
    '90s'
    """
    for suffix, size in _UNITS.items():
        if seconds and seconds % size == 0:
            return f"{seconds // size}{suffix}"
    return f"{seconds}s"
