"""Spending, savings and weight projections."""

from collections.abc import Sequence

from drink_tracker.domain.drinks import KCAL_PER_ALCOHOL_GRAM, ConsumptionEvent
from drink_tracker.domain.health import ProjectedSavings
from drink_tracker.domain.stats import TimeRange

HEALTH_SAVINGS_PER_KG_YEAR = 2000.0
KCAL_PER_KG_FAT = 7700.0
AVERAGE_ANNUAL_INCOME = 5_000_000.0
MAX_PRODUCTIVITY_IMPROVEMENT = 0.03
WEEKS_PER_MONTH = 4.33
WEEKS_PER_YEAR = 52

_BUDGET_WEEK_FACTORS: dict[TimeRange, float] = {
    TimeRange.DAY: 1 / 7,
    TimeRange.WEEK: 1.0,
    TimeRange.MONTH: WEEKS_PER_MONTH,
    TimeRange.YEAR: float(WEEKS_PER_YEAR),
}


def calculate_savings(budget: float, actual_spending: float) -> float:
    """Unspent part of a budget, never negative."""
    return max(0.0, budget - actual_spending)


def projected_savings(
    events: Sequence[ConsumptionEvent], target_reduction_percent: float
) -> ProjectedSavings:
    """Project savings from cutting spend by ``target_reduction_percent``.

    The average is total spend divided by the number of drinks, so several
    drinks on one day each count as a separate day's spend.
    """
    if not any(event.price is not None for event in events):
        return ProjectedSavings(weekly=0.0, monthly=0.0, yearly=0.0)

    total_spending = sum(event.known_price for event in events)
    average_daily = total_spending / len(events)
    reduced_daily = max(0.0, average_daily * (target_reduction_percent / 100))
    return ProjectedSavings(
        weekly=reduced_daily * 7,
        monthly=reduced_daily * 30,
        yearly=reduced_daily * 365,
    )


def health_savings_estimate(reduced_alcohol_grams_per_week: float) -> float:
    """Daily value of avoided medical costs for a weekly ethanol reduction."""
    annual_grams = max(0.0, reduced_alcohol_grams_per_week) * WEEKS_PER_YEAR
    return annual_grams / 1000 * HEALTH_SAVINGS_PER_KG_YEAR / 365


def productivity_gains(reduced_alcohol_grams: float) -> float:
    """Daily income value of better productivity from drinking less."""
    daily_income = AVERAGE_ANNUAL_INCOME / 365
    improvement = min(
        MAX_PRODUCTIVITY_IMPROVEMENT, max(0.0, reduced_alcohol_grams) / 30 * 0.005
    )
    return daily_income * improvement


def project_long_term_savings(
    weekly_spending: float, reduction_target: float, timeframe_months: int
) -> float:
    """Cumulative savings over ``timeframe_months``.

    ``reduction_target`` is a fraction (0.2 for 20%).
    """
    weekly_reduction = weekly_spending * reduction_target
    return max(0.0, weekly_reduction * WEEKS_PER_MONTH * timeframe_months)


def calorie_reduction(reduced_alcohol_grams: float) -> float:
    return max(0.0, reduced_alcohol_grams) * KCAL_PER_ALCOHOL_GRAM


def weight_impact(reduced_calories_per_day: float, days: int) -> float:
    """Kilograms of body fat matching the calories saved over ``days``."""
    return max(0.0, reduced_calories_per_day * days / KCAL_PER_KG_FAT)


def weight_impact_from_alcohol(
    reduced_alcohol_grams_per_week: float, weeks: int
) -> float:
    """Kilograms lost by drinking ``reduced_alcohol_grams_per_week`` less."""
    saved = calorie_reduction(reduced_alcohol_grams_per_week) * weeks
    return saved / KCAL_PER_KG_FAT


def period_budget(weekly_budget: float, time_range: TimeRange) -> float:
    """Scale a weekly budget to a statistics period."""
    return weekly_budget * _BUDGET_WEEK_FACTORS.get(time_range, 1.0)


def budget_usage_ratio(spending: float, budget: float | None) -> float:
    """Share of the budget already spent, capped at 1.0."""
    if budget is None or budget <= 0:
        return 0.0
    return min(1.0, max(0.0, spending) / budget)
