"""Domain models for statistics."""

from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum

from drink_tracker.domain.drinks import DrinkCategory


class TimeRange(Enum):
    """Period selector for statistics."""

    DAY = "day"
    WEEK = "week"
    MONTH = "month"
    YEAR = "year"
    ALL = "all"


@dataclass(frozen=True)
class PeriodTotals:
    """Summed drink totals for a period."""

    alcohol_grams: float = 0.0
    spend: float = 0.0
    count: int = 0


@dataclass(frozen=True)
class HourlyBucket:
    """Totals for one clock hour."""

    hour: int
    start: datetime
    alcohol_grams: float
    spend: float
    count: int


@dataclass(frozen=True)
class DailyBucket:
    """Totals for one calendar day."""

    day: date
    weekday: int
    alcohol_grams: float
    spend: float
    count: int
    is_alcohol_free: bool


@dataclass(frozen=True)
class MonthlyBucket:
    """Totals for one calendar month."""

    year: int
    month: int
    alcohol_grams: float
    spend: float
    count: int
    is_alcohol_free: bool


@dataclass(frozen=True)
class CategoryBreakdown:
    """Share of a period's alcohol and spend for one category."""

    category: DrinkCategory
    alcohol_grams: float
    alcohol_share_percent: float
    spend: float
    spend_share_percent: float
    count: int


@dataclass(frozen=True)
class PeriodStatistics:
    """Summary of a period for the statistics screen."""

    time_range: TimeRange
    total_alcohol_grams: float = 0.0
    total_spend: float = 0.0
    count: int = 0
    average_alcohol_per_day: float = 0.0
    average_spend_per_day: float = 0.0
    category_breakdown: list[CategoryBreakdown] = field(default_factory=list)
    max_alcohol_at: datetime | None = None
    max_spend_at: datetime | None = None
    alcohol_free_days: int = 0
