"""Calendar arithmetic on day/month/year dates."""

from __future__ import annotations

import time
from dataclasses import dataclass, replace
from enum import IntEnum

from .textutil import split

_DAY_NAMES = ("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat")
_MONTH_NAMES = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)
_MONTH_DAYS = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)
_SATURDAY = 6
_FRIDAY = 5
_RULE = "  _________________________________"


class DateCompare(IntEnum):
    """Result of comparing one date with another."""

    BEFORE = -1
    EQUAL = 0
    AFTER = 1


def is_leap_year(year: int) -> bool:
    """Gregorian leap-year rule."""
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def days_in_year(year: int) -> int:
    """Days counted for the year: 365 in a leap year, 364 otherwise."""
    return 365 if is_leap_year(year) else 364


def hours_in_year(year: int) -> int:
    """Hours in the days counted for the year."""
    return days_in_year(year) * 24


def minutes_in_year(year: int) -> int:
    """Minutes in the days counted for the year."""
    return hours_in_year(year) * 60


def seconds_in_year(year: int) -> int:
    """Seconds in the days counted for the year."""
    return minutes_in_year(year) * 60


def days_in_month(month: int, year: int) -> int:
    """Number of days in the month; 0 for a month outside 1..12."""
    if not 1 <= month <= 12:
        return 0
    if month == 2:
        return 29 if is_leap_year(year) else 28
    return _MONTH_DAYS[month - 1]


def hours_in_month(month: int, year: int) -> int:
    """Hours in the month."""
    return days_in_month(month, year) * 24


def minutes_in_month(month: int, year: int) -> int:
    """Minutes in the month."""
    return hours_in_month(month, year) * 60


def seconds_in_month(month: int, year: int) -> int:
    """Seconds in the month."""
    return minutes_in_month(month, year) * 60


def day_of_week_order(day: int, month: int, year: int) -> int:
    """Weekday index of the date: 0 is Sunday, 6 is Saturday."""
    a = (14 - month) // 12
    y = year - a
    m = month + 12 * a - 2
    return (day + y + y // 4 - y // 100 + y // 400 + (31 * m) // 12) % 7


def day_short_name(order: int) -> str:
    """Three-letter name of the weekday with index 0 (Sunday) to 6."""
    if not 0 <= order <= 6:
        raise ValueError(f"weekday index out of range: {order}")
    return _DAY_NAMES[order]


def month_short_name(month: int) -> str:
    """Three-letter name of the month 1 to 12."""
    if not 1 <= month <= 12:
        raise ValueError(f"month out of range: {month}")
    return _MONTH_NAMES[month - 1]


def month_calendar(month: int, year: int) -> str:
    """A printable calendar page for one month."""
    first = day_of_week_order(1, month, year)
    lines = [f"\n  _______________{month_short_name(month)}_______________\n\n"]
    lines.append("  Sun  Mon  Tue  Wed  Thu  Fri  Sat\n")
    lines.append("     " * first)
    column = first
    for day in range(1, days_in_month(month, year) + 1):
        lines.append(f"{day:5d}")
        column += 1
        if column == 7:
            column = 0
            lines.append("\n")
    lines.append(f"\n{_RULE}\n")
    return "".join(lines)


def year_calendar(year: int) -> str:
    """Printable calendar pages for all twelve months of the year."""
    head = f"\n{_RULE}\n\n           Calendar - {year}\n{_RULE}\n"
    return head + "".join(month_calendar(month, year) for month in range(1, 13))


def system_time_string() -> str:
    """Local time stamp used by the login record: weekday, month, year and time."""
    now = time.localtime()
    weekday = (now.tm_wday + 1) % 7
    return (
        f"{weekday}: {now.tm_mon}: {now.tm_year}_ "
        f"{now.tm_hour}: {now.tm_min} :{now.tm_sec} "
    )


@dataclass
class Date:
    """A calendar date; the increase/decrease methods change it in place."""

    day: int = 1
    month: int = 1
    year: int = 1900

    def __str__(self) -> str:
        return f"{self.day}/{self.month}/{self.year}"

    @classmethod
    def today(cls) -> Date:
        """The local system date."""
        now = time.localtime()
        return cls(now.tm_mday, now.tm_mon, now.tm_year)

    @classmethod
    def parse(cls, text: str) -> Date:
        """Read a date written as day/month/year."""
        parts = split(text, "/")
        if len(parts) != 3:
            raise ValueError(f"expected day/month/year, got {text!r}")
        try:
            day, month, year = (int(part) for part in parts)
        except ValueError as exc:
            raise ValueError(f"bad date {text!r}") from exc
        return cls(day, month, year)

    @classmethod
    def from_day_order(cls, order: int, year: int) -> Date:
        """The date that is the ``order``-th day of the year, counting from 1."""
        total = sum(days_in_month(month, year) for month in range(1, 13))
        if not 1 <= order <= total:
            raise ValueError(f"day {order} is outside year {year}")
        month = 1
        remaining = order
        while remaining > days_in_month(month, year):
            remaining -= days_in_month(month, year)
            month += 1
        return cls(remaining, month, year)

    def _assign(self, other: Date) -> Date:
        self.day, self.month, self.year = other.day, other.month, other.year
        return self

    def is_valid(self) -> bool:
        """Tell whether the day and month exist in the calendar."""
        if not 1 <= self.month <= 12:
            return False
        return 1 <= self.day <= days_in_month(self.month, self.year)

    def day_of_year(self) -> int:
        """Days from the start of the year up to and including this date."""
        return sum(days_in_month(month, self.year) for month in range(1, self.month)) + self.day

    def day_of_week(self) -> int:
        """Weekday index: 0 is Sunday, 6 is Saturday."""
        return day_of_week_order(self.day, self.month, self.year)

    def add_days(self, days: int) -> Date:
        """Move the date forward by ``days`` days in place."""
        remaining = days + self.day_of_year()
        month, year = 1, self.year
        while remaining > (month_days := days_in_month(month, year)):
            remaining -= month_days
            month += 1
            if month > 12:
                month = 1
                year += 1
        self.day, self.month, self.year = remaining, month, year
        return self

    def next_day(self) -> Date:
        """A new date one day later."""
        if self.is_last_day_in_month():
            if self.month == 12:
                return Date(1, 1, self.year + 1)
            return Date(1, self.month + 1, self.year)
        return Date(self.day + 1, self.month, self.year)

    def previous_day(self) -> Date:
        """A new date one day earlier."""
        if self.day == 1:
            if self.month == 1:
                return Date(31, 12, self.year - 1)
            return Date(days_in_month(self.month - 1, self.year), self.month - 1, self.year)
        return Date(self.day - 1, self.month, self.year)

    def _key(self) -> tuple[int, int, int]:
        return (self.year, self.month, self.day)

    def is_before(self, other: Date) -> bool:
        """Tell whether this date comes strictly before ``other``."""
        return self._key() < other._key()

    def is_equal(self, other: Date) -> bool:
        """Tell whether both dates name the same day."""
        return self._key() == other._key()

    def is_after(self, other: Date) -> bool:
        """Tell whether this date comes strictly after ``other``."""
        return self._key() > other._key()

    def compare(self, other: Date) -> DateCompare:
        """Where this date stands relative to ``other``."""
        if self.is_before(other):
            return DateCompare.BEFORE
        if self.is_equal(other):
            return DateCompare.EQUAL
        return DateCompare.AFTER

    def is_last_day_in_month(self) -> bool:
        """Tell whether the date is the last day of its month."""
        return self.day == days_in_month(self.month, self.year)

    def difference_in_days(self, other: Date, include_end_day: bool = False) -> int:
        """Days from this date to ``other``, negative when ``other`` is not later.

        With ``include_end_day`` the count grows by one day, away from zero;
        for two equal dates that gives -1.
        """
        start, end, sign = self, other, 1
        if not start.is_before(end):
            start, end, sign = end, start, -1
        days = 0
        while start.is_before(end):
            days += 1
            start = start.next_day()
        if include_end_day:
            days += 1
        return days * sign

    def increase_by_days(self, days: int) -> Date:
        """Move forward day by day, in place."""
        current = replace(self)
        for _ in range(days):
            current = current.next_day()
        return self._assign(current)

    def increase_by_weeks(self, weeks: int) -> Date:
        """Move forward by whole weeks, in place."""
        return self.increase_by_days(7 * weeks)

    def increase_by_months(self, months: int) -> Date:
        """Move forward by months, clamping the day to the month's length."""
        for _ in range(months):
            if self.month == 12:
                self.month = 1
                self.year += 1
            else:
                self.month += 1
            self.day = min(self.day, days_in_month(self.month, self.year))
        return self

    def increase_by_years(self, years: int) -> Date:
        """Add years to the year, in place."""
        self.year += years
        return self

    def increase_by_decades(self, decades: int) -> Date:
        """Add decades to the year, in place."""
        self.year += 10 * decades
        return self

    def increase_by_century(self) -> Date:
        """Add one hundred years, in place."""
        self.year += 100
        return self

    def increase_by_millennium(self) -> Date:
        """Add one thousand years, in place."""
        self.year += 1000
        return self

    def decrease_by_days(self, days: int) -> Date:
        """Move back day by day, in place."""
        current = replace(self)
        for _ in range(days):
            current = current.previous_day()
        return self._assign(current)

    def decrease_by_weeks(self, weeks: int) -> Date:
        """Move back by whole weeks, in place."""
        return self.decrease_by_days(7 * weeks)

    def decrease_by_months(self, months: int) -> Date:
        """Move back by months, clamping the day to the month's length."""
        for _ in range(months):
            if self.month == 1:
                self.month = 12
                self.year -= 1
            else:
                self.month -= 1
            self.day = min(self.day, days_in_month(self.month, self.year))
        return self

    def decrease_by_years(self, years: int) -> Date:
        """Subtract years from the year, in place."""
        self.year -= years
        return self

    def decrease_by_decades(self, decades: int) -> Date:
        """Subtract decades from the year, in place."""
        self.year -= 10 * decades
        return self

    def decrease_by_century(self) -> Date:
        """Subtract one hundred years, in place."""
        self.year -= 100
        return self

    def decrease_by_millennium(self) -> Date:
        """Subtract one thousand years, in place."""
        self.year -= 1000
        return self

    def is_end_of_week(self) -> bool:
        """Tell whether the date is a Saturday."""
        return self.day_of_week() == _SATURDAY

    def is_weekend(self) -> bool:
        """Tell whether the date is a Friday or a Saturday."""
        return self.day_of_week() in (_FRIDAY, _SATURDAY)

    def is_business_day(self) -> bool:
        """Tell whether the date is a working day (Sunday to Thursday)."""
        return not self.is_weekend()

    def days_until_end_of_week(self) -> int:
        """Days left until Saturday."""
        return _SATURDAY - self.day_of_week()

    def days_until_end_of_month(self) -> int:
        """Days up to and including the month's last day."""
        end = Date(days_in_month(self.month, self.year), self.month, self.year)
        return self.difference_in_days(end, True)

    def days_until_end_of_year(self) -> int:
        """Days up to and including 31 December."""
        return self.difference_in_days(Date(31, 12, self.year), True)


def business_days(start: Date, end: Date) -> int:
    """Working days from ``start`` up to, not including, ``end``."""
    current = replace(start)
    count = 0
    while current.is_before(end):
        if current.is_business_day():
            count += 1
        current = current.next_day()
    return count


def vacation_return_date(start: Date, vacation_days: int) -> Date:
    """The day back at work after ``vacation_days`` days, extended by the weekends met."""
    current = replace(start)
    weekends = 0
    for _ in range(vacation_days):
        if current.is_weekend():
            weekends += 1
        current = current.next_day()
    for _ in range(weekends):
        current = current.next_day()
    return current


def age_in_days(birth: Date) -> int:
    """Days lived from ``birth`` to today, counting both ends."""
    return birth.difference_in_days(Date.today(), True)