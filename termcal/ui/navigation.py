"""Calendar state and month/year navigation for the interactive viewer."""

import logging
from datetime import date
from typing import NamedTuple, Optional

from ..utils.dates import MONTHS_IN_YEAR, days_in_month, weekday_offset_of_first

logger = logging.getLogger(__name__)

NO_HIGHLIGHT = 0
MIN_YEAR = 0


class DayMonthYear(NamedTuple):
    """A plain (day, month, year) triple; day may be NO_HIGHLIGHT."""

    day: int
    month: int
    year: int


class CalendarState:
    """Holds the displayed month/year, the highlighted day and the anchor 'today'.

    ``day`` is the highlighted day-of-month. It is not clamped when moving to
    a shorter month; the highlight simply matches no cell there.
    """

    def __init__(self, day: int, month: int, year: int, anchor: Optional[DayMonthYear] = None):
        """Initialize calendar state.

        Args:
            day: Highlighted day, or NO_HIGHLIGHT
            month: Displayed month, 1-12
            year: Displayed year, >= 0
            anchor: Triple restored by jump_to_today(), defaults to the host date
        """
        if not 1 <= month <= MONTHS_IN_YEAR:
            raise ValueError(f"month must be in 1..12, got {month}")
        if year < MIN_YEAR:
            raise ValueError(f"year must be >= {MIN_YEAR}, got {year}")

        self.day = day
        self.month = month
        self.year = year
        self._anchor = anchor or _host_today()

        logger.debug(f"Calendar state initialized: {self}")

    @classmethod
    def today(cls) -> "CalendarState":
        """Build a state showing the host's current date with today highlighted."""
        anchor = _host_today()
        return cls(anchor.day, anchor.month, anchor.year, anchor=anchor)

    @classmethod
    def from_date(
        cls, day: int, month: int, year: int, anchor: Optional[DayMonthYear] = None
    ) -> "CalendarState":
        """Build a state for an explicit day/month/year.

        Args:
            day: Highlighted day, NO_HIGHLIGHT for none
            month: Displayed month, 1-12
            year: Displayed year, >= 0
            anchor: Optional anchor triple, defaults to the host date

        Returns:
            New CalendarState
        """
        return cls(day, month, year, anchor=anchor)

    @property
    def anchor(self) -> DayMonthYear:
        """Get the triple restored by jump_to_today()."""
        return self._anchor

    @property
    def days_in_month(self) -> int:
        """Number of days in the displayed month."""
        return days_in_month(self.month, self.year)

    @property
    def first_weekday(self) -> int:
        """Weekday offset (0 = Sunday) of the 1st of the displayed month."""
        return weekday_offset_of_first(self.month, self.year)

    def as_triple(self) -> DayMonthYear:
        """Return the current (day, month, year)."""
        return DayMonthYear(self.day, self.month, self.year)

    def is_highlighted(self, day: int) -> bool:
        """Check if ``day`` of the displayed month is the highlighted day."""
        return self.day != NO_HIGHLIGHT and day == self.day

    def next_month(self) -> None:
        """Move to the following month, rolling December into January of the next year."""
        old = self.as_triple()
        if self.month == MONTHS_IN_YEAR:
            self.month = 1
            self.year += 1
        else:
            self.month += 1

        logger.debug(f"Next month: {old} -> {self.as_triple()}")

    def previous_month(self) -> None:
        """Move to the preceding month, rolling January into December of the previous year.

        January of year 0 is the earliest month and stays put.
        """
        old = self.as_triple()
        if self.month == 1:
            if self.year == MIN_YEAR:
                logger.debug("Previous month ignored at the earliest month")
                return
            self.month = MONTHS_IN_YEAR
            self.year -= 1
        else:
            self.month -= 1

        logger.debug(f"Previous month: {old} -> {self.as_triple()}")

    def next_year(self) -> None:
        """Move forward one year, keeping month and day."""
        old = self.as_triple()
        self.year += 1

        logger.debug(f"Next year: {old} -> {self.as_triple()}")

    def previous_year(self) -> None:
        """Move back one year, keeping month and day. No-op at year 0."""
        if self.year == MIN_YEAR:
            logger.debug("Previous year ignored at year 0")
            return

        old = self.as_triple()
        self.year -= 1

        logger.debug(f"Previous year: {old} -> {self.as_triple()}")

    def jump_to_today(self) -> None:
        """Restore day, month and year to the anchor captured at construction."""
        old = self.as_triple()
        self.day, self.month, self.year = self._anchor

        logger.debug(f"Jumped to today: {old} -> {self.as_triple()}")

    def __str__(self) -> str:
        """String representation of calendar state."""
        return f"CalendarState(day={self.day}, month={self.month}, year={self.year})"

    def __repr__(self) -> str:
        """Detailed string representation."""
        return (
            f"CalendarState(day={self.day!r}, month={self.month!r}, "
            f"year={self.year!r}, anchor={tuple(self._anchor)!r})"
        )


def _host_today() -> DayMonthYear:
    today = date.today()
    return DayMonthYear(today.day, today.month, today.year)


__all__ = ["MIN_YEAR", "NO_HIGHLIGHT", "CalendarState", "DayMonthYear"]
