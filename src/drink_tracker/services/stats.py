"""Calendar-bucketed statistics over the drink log."""

from collections import Counter, defaultdict
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from datetime import date, datetime, timedelta, tzinfo

from drink_tracker.domain.drinks import (
    ConsumptionEvent,
    DrinkCategory,
    category_order,
)
from drink_tracker.domain.stats import (
    CategoryBreakdown,
    DailyBucket,
    HourlyBucket,
    MonthlyBucket,
    PeriodStatistics,
    PeriodTotals,
    TimeRange,
)
from drink_tracker.services.dates import (
    add_months,
    day_range,
    days_in_month,
    local_datetime,
    local_day,
    month_end,
    month_start,
    now_in,
)
from drink_tracker.services.events import EventRepository
from drink_tracker.services.savings import (
    calculate_savings,
    period_budget,
    projected_savings,
)

DAYS_PER_WEEK = 7
DAYS_PER_YEAR = 365
HOURS_PER_DAY = 24
MONTHS_PER_YEAR = 12
DEFAULT_REDUCTION_PERCENT = 20.0


def _totals(events: Iterable[ConsumptionEvent]) -> PeriodTotals:
    grams = 0.0
    spend = 0.0
    count = 0
    for event in events:
        grams += event.pure_alcohol_grams
        spend += event.known_price
        count += 1
    return PeriodTotals(alcohol_grams=grams, spend=spend, count=count)


def _between(
    events: Iterable[ConsumptionEvent], start: date, end: date, tz: tzinfo | None
) -> list[ConsumptionEvent]:
    return [
        event for event in events if start <= local_day(event.timestamp, tz) <= end
    ]


def _group_by_day(
    events: Iterable[ConsumptionEvent], tz: tzinfo | None
) -> dict[date, list[ConsumptionEvent]]:
    grouped: dict[date, list[ConsumptionEvent]] = defaultdict(list)
    for event in events:
        grouped[local_day(event.timestamp, tz)].append(event)
    return grouped


def _daily_buckets(
    events: Iterable[ConsumptionEvent], days: list[date], tz: tzinfo | None
) -> list[DailyBucket]:
    grouped = _group_by_day(events, tz)
    buckets = []
    for day in days:
        totals = _totals(grouped.get(day, []))
        buckets.append(
            DailyBucket(
                day=day,
                weekday=day.weekday(),
                alcohol_grams=totals.alcohol_grams,
                spend=totals.spend,
                count=totals.count,
                is_alcohol_free=totals.count == 0,
            )
        )
    return buckets


def daily_total(
    events: Iterable[ConsumptionEvent], day: date | datetime, tz: tzinfo | None = None
) -> PeriodTotals:
    """Totals for the calendar day of ``day``; time of day is ignored."""
    target = local_day(day, tz)
    return _totals(_between(events, target, target, tz))


def range_total(
    events: Iterable[ConsumptionEvent],
    start: date | datetime,
    end: date | datetime,
    tz: tzinfo | None = None,
) -> PeriodTotals:
    """Totals from ``start``'s day through ``end``'s day inclusive."""
    return _totals(_between(events, local_day(start, tz), local_day(end, tz), tz))


def week_window(
    events: Iterable[ConsumptionEvent],
    ending_at: date | datetime,
    tz: tzinfo | None = None,
) -> list[DailyBucket]:
    """The seven days ending at ``ending_at``, oldest first."""
    end = local_day(ending_at, tz)
    start = end - timedelta(days=DAYS_PER_WEEK - 1)
    return _daily_buckets(events, day_range(start, end), tz)


def month_window(
    events: Iterable[ConsumptionEvent],
    containing: date | datetime,
    tz: tzinfo | None = None,
) -> list[DailyBucket]:
    """Every day of the calendar month containing ``containing``."""
    day = local_day(containing, tz)
    return _daily_buckets(events, day_range(month_start(day), month_end(day)), tz)


def hourly_window(
    events: Iterable[ConsumptionEvent], now: datetime, tz: tzinfo | None = None
) -> list[HourlyBucket]:
    """The 24 clock hours ending with the hour containing ``now``."""
    current = local_datetime(now, tz).replace(minute=0, second=0, microsecond=0)
    grouped: dict[datetime, list[ConsumptionEvent]] = defaultdict(list)
    for event in events:
        hour = local_datetime(event.timestamp, tz).replace(
            minute=0, second=0, microsecond=0
        )
        grouped[hour].append(event)

    buckets = []
    for offset in range(HOURS_PER_DAY - 1, -1, -1):
        start = current - timedelta(hours=offset)
        totals = _totals(grouped.get(start, []))
        buckets.append(
            HourlyBucket(
                hour=start.hour,
                start=start,
                alcohol_grams=totals.alcohol_grams,
                spend=totals.spend,
                count=totals.count,
            )
        )
    return buckets


def year_window(
    events: Iterable[ConsumptionEvent], now: date | datetime, tz: tzinfo | None = None
) -> list[MonthlyBucket]:
    """The twelve calendar months ending with the month containing ``now``."""
    current = month_start(local_day(now, tz))
    grouped: dict[tuple[int, int], list[ConsumptionEvent]] = defaultdict(list)
    for event in events:
        day = local_day(event.timestamp, tz)
        grouped[(day.year, day.month)].append(event)

    buckets = []
    for offset in range(MONTHS_PER_YEAR - 1, -1, -1):
        first = add_months(current, -offset)
        totals = _totals(grouped.get((first.year, first.month), []))
        buckets.append(
            MonthlyBucket(
                year=first.year,
                month=first.month,
                alcohol_grams=totals.alcohol_grams,
                spend=totals.spend,
                count=totals.count,
                is_alcohol_free=totals.count == 0,
            )
        )
    return buckets


def _range_bounds(
    events: Sequence[ConsumptionEvent],
    time_range: TimeRange,
    reference: date,
    tz: tzinfo | None,
) -> tuple[date, date] | None:
    if time_range is TimeRange.DAY:
        return reference, reference
    if time_range is TimeRange.WEEK:
        return reference - timedelta(days=DAYS_PER_WEEK - 1), reference
    if time_range is TimeRange.MONTH:
        return month_start(reference), month_end(reference)
    if time_range is TimeRange.YEAR:
        return date(reference.year, 1, 1), date(reference.year, 12, 31)
    if not events:
        return None
    earliest = min(local_day(event.timestamp, tz) for event in events)
    return earliest, reference


def events_in_range(
    events: Sequence[ConsumptionEvent],
    time_range: TimeRange,
    reference: date | datetime,
    tz: tzinfo | None = None,
) -> list[ConsumptionEvent]:
    """Records inside the selected period; ``ALL`` returns every record."""
    if time_range is TimeRange.ALL:
        return list(events)
    bounds = _range_bounds(events, time_range, local_day(reference, tz), tz)
    if bounds is None:
        return []
    return _between(events, bounds[0], bounds[1], tz)


def alcohol_free_day_count(
    events: Sequence[ConsumptionEvent],
    window: TimeRange,
    reference: date | datetime,
    tz: tzinfo | None = None,
) -> int:
    """Days in the window, up to ``reference``, with no drinks recorded.

    ``ALL`` starts at the earliest recorded day and is 0 without records.
    """
    ref_day = local_day(reference, tz)
    bounds = _range_bounds(events, window, ref_day, tz)
    if bounds is None:
        return 0
    start, end = bounds[0], min(bounds[1], ref_day)
    if end < start:
        return 0
    drinking_days = {local_day(event.timestamp, tz) for event in events}
    return sum(1 for day in day_range(start, end) if day not in drinking_days)


def category_breakdown(events: Iterable[ConsumptionEvent]) -> list[CategoryBreakdown]:
    """Per-category share of alcohol and spend, largest share first.

    Equal alcohol amounts keep the category enumeration order.
    """
    grouped: dict[DrinkCategory, list[ConsumptionEvent]] = defaultdict(list)
    for event in events:
        grouped[event.category].append(event)
    overall = _totals(event for items in grouped.values() for event in items)

    breakdown = []
    for category, items in grouped.items():
        totals = _totals(items)
        breakdown.append(
            CategoryBreakdown(
                category=category,
                alcohol_grams=totals.alcohol_grams,
                alcohol_share_percent=_share(
                    totals.alcohol_grams, overall.alcohol_grams
                ),
                spend=totals.spend,
                spend_share_percent=_share(totals.spend, overall.spend),
                count=totals.count,
            )
        )
    return sorted(
        breakdown,
        key=lambda item: (-item.alcohol_grams, category_order(item.category)),
    )


def _share(part: float, total: float) -> float:
    if total <= 0:
        return 0.0
    return part / total * 100


def most_frequent_category(
    events: Iterable[ConsumptionEvent],
) -> DrinkCategory | None:
    """Category logged most often; ties go to the earlier enumeration member."""
    counts = Counter(event.category for event in events)
    if not counts:
        return None
    return min(
        counts, key=lambda category: (-counts[category], category_order(category))
    )


def _days_for_average(
    events: Sequence[ConsumptionEvent],
    time_range: TimeRange,
    reference: date,
    tz: tzinfo | None,
) -> int:
    if time_range is TimeRange.DAY:
        return 1
    if time_range is TimeRange.WEEK:
        return DAYS_PER_WEEK
    if time_range is TimeRange.MONTH:
        return days_in_month(reference.year, reference.month)
    if time_range is TimeRange.YEAR:
        return DAYS_PER_YEAR
    bounds = _range_bounds(events, time_range, reference, tz)
    if bounds is None:
        return 0
    return max(1, (bounds[1] - bounds[0]).days + 1)


def period_statistics(
    events: Sequence[ConsumptionEvent],
    time_range: TimeRange,
    reference: date | datetime,
    tz: tzinfo | None = None,
) -> PeriodStatistics:
    """Summary of the selected period; zero-valued when it has no records."""
    ref_day = local_day(reference, tz)
    selected = events_in_range(events, time_range, ref_day, tz)
    totals = _totals(selected)
    days = _days_for_average(events, time_range, ref_day, tz)

    max_alcohol_at = None
    max_spend_at = None
    if selected:
        heaviest = max(selected, key=lambda event: event.pure_alcohol_grams)
        priciest = max(selected, key=lambda event: event.known_price)
        max_alcohol_at = heaviest.timestamp
        max_spend_at = priciest.timestamp

    return PeriodStatistics(
        time_range=time_range,
        total_alcohol_grams=totals.alcohol_grams,
        total_spend=totals.spend,
        count=totals.count,
        average_alcohol_per_day=totals.alcohol_grams / days if days else 0.0,
        average_spend_per_day=totals.spend / days if days else 0.0,
        category_breakdown=category_breakdown(selected),
        max_alcohol_at=max_alcohol_at,
        max_spend_at=max_spend_at,
        alcohol_free_days=alcohol_free_day_count(events, time_range, ref_day, tz),
    )


@dataclass
class StatsService:
    """Service for computing drink statistics from store snapshots."""

    repository: EventRepository
    timezone: tzinfo | None = None

    def _now(self, now: datetime | None) -> datetime:
        return now or now_in(self.timezone)

    def get_today(self, now: datetime | None = None) -> PeriodTotals:
        """Return today's totals."""
        return daily_total(self.repository.list_events(), self._now(now), self.timezone)

    def get_week_totals(self, now: datetime | None = None) -> PeriodTotals:
        """Return totals for the seven days ending today."""
        current = self._now(now)
        return range_total(
            self.repository.list_events(),
            current - timedelta(days=DAYS_PER_WEEK - 1),
            current,
            self.timezone,
        )

    def get_week(self, now: datetime | None = None) -> list[DailyBucket]:
        """Return daily buckets for the seven days ending today."""
        return week_window(self.repository.list_events(), self._now(now), self.timezone)

    def get_month(self, now: datetime | None = None) -> list[DailyBucket]:
        """Return daily buckets for the current calendar month."""
        return month_window(
            self.repository.list_events(), self._now(now), self.timezone
        )

    def get_hourly(self, now: datetime | None = None) -> list[HourlyBucket]:
        """Return hourly buckets for the last 24 hours."""
        return hourly_window(
            self.repository.list_events(), self._now(now), self.timezone
        )

    def get_year(self, now: datetime | None = None) -> list[MonthlyBucket]:
        """Return monthly buckets for the last 12 months."""
        return year_window(self.repository.list_events(), self._now(now), self.timezone)

    def get_statistics(
        self, time_range: TimeRange, reference: datetime | None = None
    ) -> PeriodStatistics:
        """Return the summary for the selected period."""
        return period_statistics(
            self.repository.list_events(),
            time_range,
            self._now(reference),
            self.timezone,
        )

    def get_most_frequent_category(
        self, time_range: TimeRange = TimeRange.MONTH, now: datetime | None = None
    ) -> DrinkCategory | None:
        """Return the most logged category in the period."""
        selected = events_in_range(
            self.repository.list_events(), time_range, self._now(now), self.timezone
        )
        return most_frequent_category(selected)

    def get_alcohol_free_days(
        self, time_range: TimeRange = TimeRange.MONTH, now: datetime | None = None
    ) -> int:
        """Return the number of alcohol-free days in the period so far."""
        return alcohol_free_day_count(
            self.repository.list_events(), time_range, self._now(now), self.timezone
        )

    def get_budget_savings(
        self,
        time_range: TimeRange,
        weekly_budget: float | None,
        reference: datetime | None = None,
    ) -> float | None:
        """Return unspent budget for the period, or None without a budget."""
        if weekly_budget is None or time_range is TimeRange.ALL:
            return None
        current = self._now(reference)
        events = self.repository.list_events()
        if time_range is TimeRange.YEAR:
            buckets = year_window(events, current, self.timezone)
            spending = sum(bucket.spend for bucket in buckets)
        else:
            selected = events_in_range(events, time_range, current, self.timezone)
            spending = _totals(selected).spend
        return calculate_savings(period_budget(weekly_budget, time_range), spending)

    def get_projected_monthly_savings(
        self,
        reduction_percent: float = DEFAULT_REDUCTION_PERCENT,
        now: datetime | None = None,
    ) -> float:
        """Return projected monthly savings from this month's spending."""
        selected = events_in_range(
            self.repository.list_events(),
            TimeRange.MONTH,
            self._now(now),
            self.timezone,
        )
        return projected_savings(selected, reduction_percent).monthly
