"""Gregorian date arithmetic for the month grid.

All functions are pure and work on plain integers so they accept year 0,
which :class:`datetime.date` cannot represent.
"""

MONTHS_IN_YEAR = 12
DAYS_IN_WEEK = 7

_MONTH_DAYS = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def _check_month(month: int) -> None:
    if not 1 <= month <= MONTHS_IN_YEAR:
        raise ValueError(f"month must be in 1..12, got {month}")


def is_leap_year(year: int) -> bool:
    """Return True for Gregorian leap years (every 4th year, except centuries not divisible by 400)."""
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def days_in_month(month: int, year: int) -> int:
    """Return the number of days in ``month`` of ``year``.

    Args:
        month: Month number, 1-12
        year: Non-negative year

    Returns:
        28, 29, 30 or 31

    Raises:
        ValueError: If month is outside 1..12
    """
    _check_month(month)
    if month == 2 and is_leap_year(year):
        return 29
    return _MONTH_DAYS[month - 1]


def weekday_offset_of_first(month: int, year: int) -> int:
    """Return the weekday of the 1st of the month, 0 = Sunday through 6 = Saturday.

    Uses the Gregorian form of Zeller's congruence with March as the first
    month of the computational year, so January and February count towards
    the previous year. Floor division keeps the result correct for year 0.

    Args:
        month: Month number, 1-12
        year: Non-negative year

    Returns:
        Zero-based weekday index of the first day of the month

    Raises:
        ValueError: If month is outside 1..12

    Example:
        >>> weekday_offset_of_first(1, 2024)  # Monday
        1
    """
    _check_month(month)
    shift = (14 - month) // 12
    y = year - shift
    m = month + 12 * shift - 2
    return (1 + y + y // 4 - y // 100 + y // 400 + (31 * m) // 12) % DAYS_IN_WEEK


__all__ = [
    "DAYS_IN_WEEK",
    "MONTHS_IN_YEAR",
    "days_in_month",
    "is_leap_year",
    "weekday_offset_of_first",
]
