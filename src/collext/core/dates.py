"""Calendar helpers for :class:`datetime.datetime`.

Gregorian calendar throughout.  Weekdays are numbered 1 = Sunday …
7 = Saturday (see the module constants), which is also the numbering
used by :class:`~collext.core.models.DateInformation`.

Constructors and replacements return ``None`` for dates that do not
exist (``date_with(2023, 2, 29)``) instead of raising.  Month and year
arithmetic clamps the day to the length of the target month, so
``next_month`` of January 31 is the last day of February.  ``tzinfo``
is carried through unchanged; no time-zone conversion happens here.
"""

from __future__ import annotations

import calendar
from datetime import date, datetime, time, timedelta, tzinfo
from typing import Final

from collext.core.models import DateInformation

SUNDAY: Final = 1
MONDAY: Final = 2
TUESDAY: Final = 3
WEDNESDAY: Final = 4
THURSDAY: Final = 5
FRIDAY: Final = 6
SATURDAY: Final = 7


def weekday_number(value: date) -> int:
    """Weekday of *value* as 1 = Sunday … 7 = Saturday."""
    return value.isoweekday() % 7 + 1


# ---------------------------------------------------------------------------
# Components
# ---------------------------------------------------------------------------

def date_information(dt: datetime, tz: tzinfo | None = None) -> DateInformation:
    """Split *dt* into its calendar components.

    With *tz*, the components are read after converting *dt* to that
    time zone; a naive *dt* is taken to be in local time.
    """
    if tz is not None:
        dt = dt.astimezone(tz)
    return DateInformation(
        year=dt.year,
        month=dt.month,
        day=dt.day,
        hour=dt.hour,
        minute=dt.minute,
        second=dt.second,
        weekday=weekday_number(dt),
    )


def date_from_information(
    info: DateInformation,
    tz: tzinfo | None = None,
) -> datetime | None:
    """Build a datetime from *info*; ``info.weekday`` is ignored."""
    return date_with(
        info.year,
        info.month,
        info.day,
        info.hour,
        info.minute,
        info.second,
        tz=tz,
    )


def date_with(
    year: int,
    month: int,
    day: int,
    hour: int = 0,
    minute: int = 0,
    second: int = 0,
    *,
    tz: tzinfo | None = None,
) -> datetime | None:
    """Return the given datetime, or ``None`` if it does not exist."""
    try:
        return datetime(year, month, day, hour, minute, second, tzinfo=tz)
    except ValueError:
        return None


def quarter_number(dt: datetime) -> int:
    return (dt.month - 1) // 3 + 1


def day_number_of_year(dt: datetime) -> int:
    return dt.timetuple().tm_yday


def month_name(dt: datetime) -> str:
    """Full month name in the current locale (``"January"``)."""
    return calendar.month_name[dt.month]


def weekday_name(dt: datetime) -> str:
    """Full weekday name in the current locale (``"Monday"``)."""
    return calendar.day_name[dt.weekday()]


def weekday_name_short(dt: datetime) -> str:
    """Abbreviated weekday name in the current locale (``"Mon"``)."""
    return calendar.day_abbr[dt.weekday()]


# ---------------------------------------------------------------------------
# Comparisons
# ---------------------------------------------------------------------------

def is_today(dt: datetime, *, now: datetime | None = None) -> bool:
    """Return ``True`` if *dt* falls on the same calendar day as *now*.

    *now* defaults to the current time in ``dt``'s time zone.
    """
    if now is None:
        now = datetime.now(dt.tzinfo)
    return dt.date() == now.date()


def is_same_day(first: datetime, second: datetime) -> bool:
    return first.date() == second.date()


def is_before(first: datetime, second: datetime) -> bool:
    return first < second


def is_after(first: datetime, second: datetime) -> bool:
    return first > second


# ---------------------------------------------------------------------------
# Month boundaries & arithmetic
# ---------------------------------------------------------------------------

def with_time_zeroed(dt: datetime) -> datetime:
    """Return midnight of *dt*'s day."""
    return dt.replace(hour=0, minute=0, second=0, microsecond=0)


def first_of_month(dt: datetime) -> datetime:
    """Return midnight of the first day of *dt*'s month."""
    return with_time_zeroed(dt).replace(day=1)


def last_of_month(dt: datetime) -> datetime:
    """Return midnight of the last day of *dt*'s month."""
    days_in_month = calendar.monthrange(dt.year, dt.month)[1]
    return with_time_zeroed(dt).replace(day=days_in_month)


def add_months(dt: datetime, months: int) -> datetime | None:
    """Shift *dt* by *months* calendar months, clamping the day.

    Returns ``None`` when the result falls outside the supported year
    range.
    """
    year, month_index = divmod(dt.year * 12 + dt.month - 1 + months, 12)
    month = month_index + 1
    try:
        days_in_month = calendar.monthrange(year, month)[1]
        return dt.replace(year=year, month=month, day=min(dt.day, days_in_month))
    except ValueError:
        return None


def add_years(dt: datetime, years: int) -> datetime | None:
    """Shift *dt* by *years*; February 29 becomes February 28 if needed."""
    return add_months(dt, years * 12)


def add_days(dt: datetime, days: int) -> datetime | None:
    try:
        return dt + timedelta(days=days)
    except OverflowError:
        return None


def next_month(dt: datetime) -> datetime | None:
    return add_months(dt, 1)


def prev_month(dt: datetime) -> datetime | None:
    return add_months(dt, -1)


def months_between(first: datetime, second: datetime | None) -> int:
    """Number of calendar-month boundaries between the two dates.

    Only year and month are considered and the order of the arguments
    does not matter: January 31 and February 1 are one month apart,
    two dates in the same month are zero apart.  ``None`` gives ``0``.
    """
    if second is None:
        return 0
    return abs((second.year - first.year) * 12 + (second.month - first.month))


def days_between(first: datetime, second: datetime) -> int:
    """Signed number of whole days from *first* to *second*.

    Partial days are truncated toward zero.
    """
    delta = second - first
    if delta < timedelta(0):
        return -abs(delta).days
    return delta.days


# ---------------------------------------------------------------------------
# Weeks
# ---------------------------------------------------------------------------

def week_start(dt: datetime, first_weekday: int) -> datetime | None:
    """Move *dt* back to the most recent *first_weekday* (time kept).

    Returns ``None`` when that day precedes the first supported date.
    """
    offset = (weekday_number(dt) - first_weekday) % 7
    try:
        return dt - timedelta(days=offset)
    except OverflowError:
        return None


def _first_week_start(year: int, first_weekday: int) -> int:
    # Proleptic ordinal, so the years either side of the supported range
    # still have a week one.  Week one is the first week with at least
    # four days in the year, i.e. the week containing January 4.
    previous = year - 1
    anchor = previous * 365 + previous // 4 - previous // 100 + previous // 400 + 4
    anchor_weekday = (anchor - 1) % 7 + 1  # ordinal 1 is a Monday
    return anchor - (anchor_weekday % 7 + 1 - first_weekday) % 7


def week_number_of_year(dt: datetime, first_weekday: int = MONDAY) -> int:
    """Week of the year for weeks beginning on *first_weekday*.

    Week one is the first week holding at least four days of the new
    year; with Monday as the first weekday this is the ISO 8601 week
    number.  Days before week one belong to the last week of the
    previous year.
    """
    day = dt.toordinal()
    start = _first_week_start(dt.year, first_weekday)
    if day < start:
        start = _first_week_start(dt.year - 1, first_weekday)
    else:
        following = _first_week_start(dt.year + 1, first_weekday)
        if day >= following:
            start = following
    return (day - start) // 7 + 1


def week_number_of_month(dt: datetime, first_weekday: int = MONDAY) -> int:
    """Week of the month for weeks beginning on *first_weekday*.

    Uses the same four-day rule as :func:`week_number_of_year`, but days
    before week one are numbered ``0`` rather than carried over from the
    previous month.
    """
    offset = (weekday_number(dt.replace(day=1)) - first_weekday) % 7
    first_week = 1 if 7 - offset >= 4 else 0
    return (dt.day - 1 + offset) // 7 + first_week


def day_number_of_week_in_month(dt: datetime) -> int:
    """Occurrence of *dt*'s weekday within its month (the 2nd Tuesday gives 2)."""
    return (dt.day - 1) // 7 + 1


# ---------------------------------------------------------------------------
# Replacement
# ---------------------------------------------------------------------------

def with_year_replaced(dt: datetime, year: int) -> datetime | None:
    """Return *dt* in *year*; ``None`` if that day does not exist."""
    try:
        return dt.replace(year=year, microsecond=0)
    except ValueError:
        return None


def with_seconds_replaced(dt: datetime, seconds: int) -> datetime | None:
    """Return *dt* with its seconds set; ``None`` unless ``0 <= seconds < 60``."""
    try:
        return dt.replace(second=seconds, microsecond=0)
    except ValueError:
        return None


def with_time_replaced(dt: datetime, time_of_day: datetime | time) -> datetime:
    """Return *dt*'s day at the hour, minute and second of *time_of_day*."""
    return dt.replace(
        hour=time_of_day.hour,
        minute=time_of_day.minute,
        second=time_of_day.second,
        microsecond=0,
    )
