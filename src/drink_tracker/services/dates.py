"""Calendar helpers shared by the calculators and statistics."""

import calendar
from datetime import date, datetime, timedelta, tzinfo


def local_datetime(value: datetime, tz: tzinfo | None = None) -> datetime:
    """Return the naive wall-clock time of ``value`` in ``tz``.

    Aware timestamps are converted to ``tz`` when one is given; naive
    timestamps are taken as already local.
    """
    if tz is not None and value.tzinfo is not None:
        value = value.astimezone(tz)
    return value.replace(tzinfo=None)


def local_day(value: date | datetime, tz: tzinfo | None = None) -> date:
    """Return the calendar day a timestamp falls on."""
    if isinstance(value, datetime):
        return local_datetime(value, tz).date()
    return value


def _wall_clock(value: datetime, tz: tzinfo | None) -> datetime:
    local = value.astimezone(tz) if tz is not None else value.astimezone()
    return local.replace(tzinfo=None)


def comparable(
    first: datetime, second: datetime, tz: tzinfo | None = None
) -> tuple[datetime, datetime]:
    """Return both timestamps in a form that can be subtracted and compared.

    When only one is aware it is turned into naive wall-clock time in ``tz``
    (the system zone when ``tz`` is None), matching how naive timestamps are
    read.
    """
    if (first.tzinfo is None) == (second.tzinfo is None):
        return first, second
    if first.tzinfo is not None:
        return _wall_clock(first, tz), second
    return first, _wall_clock(second, tz)


def hours_between(start: datetime, end: datetime, tz: tzinfo | None = None) -> float:
    """Elapsed hours from ``start`` to ``end``, never negative."""
    start, end = comparable(start, end, tz)
    return max(0.0, (end - start).total_seconds() / 3600)


def days_in_month(year: int, month: int) -> int:
    return calendar.monthrange(year, month)[1]


def month_start(day: date) -> date:
    return day.replace(day=1)


def month_end(day: date) -> date:
    return day.replace(day=days_in_month(day.year, day.month))


def add_months(day: date, months: int) -> date:
    """Shift the first day of ``day``'s month by ``months``."""
    index = day.year * 12 + (day.month - 1) + months
    return date(index // 12, index % 12 + 1, 1)


def day_range(start: date, end: date) -> list[date]:
    """Every day from ``start`` to ``end`` inclusive."""
    return [start + timedelta(days=offset) for offset in range((end - start).days + 1)]


def now_in(tz: tzinfo | None = None) -> datetime:
    """Current aware time in ``tz``, or in the system zone."""
    if tz is not None:
        return datetime.now(tz=tz)
    return datetime.now().astimezone()
