"""Calendar date with the validation rules of the food report."""

from __future__ import annotations

import copy as _copy
from contextlib import suppress

_DAYS_IN_MONTH = {
    1: 31, 2: 28, 3: 31, 4: 30, 5: 31, 6: 30,
    7: 31, 8: 31, 9: 30, 10: 31, 11: 30, 12: 31,
}

INVALID_DATE_TEXT = "Invalid date sent"


class Date:
    """A month/day/year date; a zero part means the part has not been set.

    The year must be set before the month, and the month before the day.
    February always has 28 days.
    """

    __slots__ = ("_year", "_month", "_day")

    def __init__(self) -> None:
        self._year = 0
        self._month = 0
        self._day = 0

    @property
    def year(self) -> int:
        return self._year

    @property
    def month(self) -> int:
        return self._month

    @property
    def day(self) -> int:
        return self._day

    def set_year(self, year: int) -> None:
        """Set the year; it must lie in 1..9999."""
        if not 1 <= year <= 9999:
            raise ValueError(f"year out of range: {year}")
        self._year = year

    def set_month(self, month: int) -> None:
        """Set the month; the year must already be set."""
        if self._year == 0:
            raise ValueError("year must be set before the month")
        if not 1 <= month <= 12:
            raise ValueError(f"month out of range: {month}")
        self._month = month

    def set_day(self, day: int) -> None:
        """Set the day; the year and month must already be set."""
        if self._month == 0 or self._year == 0:
            raise ValueError("year and month must be set before the day")
        limit = _DAYS_IN_MONTH[self._month]
        if not 1 <= day <= limit:
            raise ValueError(f"day out of range for month {self._month}: {day}")
        self._day = day

    def assign(self, month: int, day: int, year: int) -> None:
        """Set month, day and year in that order, keeping any part that is rejected."""
        for setter, value in (
            (self.set_month, month),
            (self.set_day, day),
            (self.set_year, year),
        ):
            with suppress(ValueError):
                setter(value)

    def as_ymd(self) -> str:
        """Return the date as ``year/month/day``."""
        return f"{self._year}/{self._month}/{self._day}"

    def copy(self) -> Date:
        """Return an independent copy of this date."""
        return _copy.copy(self)

    def __str__(self) -> str:
        if 0 in (self._day, self._month, self._year):
            return INVALID_DATE_TEXT
        return f"{self._month}/{self._day}/{self._year}"

    def __repr__(self) -> str:
        return f"Date(year={self._year}, month={self._month}, day={self._day})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return (self._year, self._month, self._day) == (
            other._year,
            other._month,
            other._day,
        )

    def __hash__(self) -> int:
        return hash((self._year, self._month, self._day))