"""BAC and metabolism estimates using a Widmark-style model.

Model:
- Rise: BAC = grams / (body_weight_g * r) * 100
- r = 0.68 (male), 0.55 (female), 0.615 (unspecified)
- Elimination: 0.015 BAC percentage points per hour
- Liver clears about 7 g of ethanol per hour

Several drinks are combined by summing each drink's independently decayed
BAC, not by pooling the ethanol.
"""

from collections.abc import Iterable
from datetime import datetime, timedelta, tzinfo

from drink_tracker.domain.drinks import (
    KCAL_PER_ALCOHOL_GRAM,
    ConsumptionEvent,
    ethanol_grams,
)
from drink_tracker.domain.health import (
    DailyLimitLevel,
    HealthRiskLevel,
    IntoxicationLevel,
)
from drink_tracker.domain.profile import BiologicalSex, UserPhysiology
from drink_tracker.services.dates import comparable, hours_between, local_day

ELIMINATION_PER_HOUR = 0.015
LIVER_GRAMS_PER_HOUR = 7.0
LEGAL_DRIVING_LIMIT_BAC = 0.03
WATER_ML_PER_10_GRAMS = 250.0

DISTRIBUTION_RATIOS: dict[BiologicalSex, float] = {
    BiologicalSex.MALE: 0.68,
    BiologicalSex.FEMALE: 0.55,
    BiologicalSex.UNSPECIFIED: 0.615,
}

# Lower bounds, inclusive; each band runs up to the next bound.
_INTOXICATION_BANDS: tuple[tuple[float, IntoxicationLevel], ...] = (
    (0.25, IntoxicationLevel.EXTREME),
    (0.15, IntoxicationLevel.SEVERE),
    (0.10, IntoxicationLevel.SIGNIFICANT),
    (0.06, IntoxicationLevel.MODERATE),
    (0.03, IntoxicationLevel.MILD),
)

_HEALTH_RISK_BANDS: tuple[tuple[float, HealthRiskLevel], ...] = (
    (280.0, HealthRiskLevel.VERY_HIGH),
    (140.0, HealthRiskLevel.HIGH),
    (70.0, HealthRiskLevel.MODERATE),
)

_DAILY_LIMIT_BANDS: tuple[tuple[float, DailyLimitLevel], ...] = (
    (1.0, DailyLimitLevel.HIGH),
    (0.75, DailyLimitLevel.RISKY),
    (0.5, DailyLimitLevel.MODERATE),
)


def pure_alcohol_grams(volume_ml: float, abv_percent: float) -> float:
    """Grams of ethanol in ``volume_ml`` of a drink at ``abv_percent``."""
    return ethanol_grams(volume_ml, abv_percent)


def distribution_ratio(sex: BiologicalSex) -> float:
    return DISTRIBUTION_RATIOS[sex]


def _peak_bac(alcohol_grams: float, sex: BiologicalSex, weight_kg: float) -> float:
    if weight_kg <= 0 or alcohol_grams <= 0:
        return 0.0
    return alcohol_grams / (weight_kg * 1000 * distribution_ratio(sex)) * 100


def estimate_bac(
    alcohol_grams: float,
    sex: BiologicalSex,
    weight_kg: float,
    hours_since_drinking: float,
) -> float:
    """BAC (%) left from one dose after ``hours_since_drinking``."""
    hours = max(0.0, hours_since_drinking)
    peak = _peak_bac(alcohol_grams, sex, weight_kg)
    if hours >= peak / ELIMINATION_PER_HOUR:
        return 0.0
    return max(0.0, peak - ELIMINATION_PER_HOUR * hours)


def _events_on_day(
    events: Iterable[ConsumptionEvent], now: datetime, tz: tzinfo | None
) -> list[ConsumptionEvent]:
    today = local_day(now, tz)
    return [event for event in events if local_day(event.timestamp, tz) == today]


def current_bac(
    events: Iterable[ConsumptionEvent],
    profile: UserPhysiology,
    now: datetime,
    tz: tzinfo | None = None,
) -> float:
    """Sum of per-drink BAC contributions for drinks logged on ``now``'s day."""
    total = 0.0
    for event in _events_on_day(events, now, tz):
        total += estimate_bac(
            event.pure_alcohol_grams,
            profile.biological_sex,
            profile.body_weight_kg,
            hours_between(event.timestamp, now, tz),
        )
    return total


def estimate_sobering_time(remaining_alcohol_grams: float) -> float:
    """Hours the liver needs to clear the remaining ethanol."""
    return max(0.0, remaining_alcohol_grams) / LIVER_GRAMS_PER_HOUR


def remaining_alcohol(
    event: ConsumptionEvent, now: datetime, tz: tzinfo | None = None
) -> float:
    """Grams of ethanol from ``event`` not yet metabolised at ``now``."""
    grams = event.pure_alcohol_grams
    elapsed = hours_between(event.timestamp, now, tz)
    metabolized = min(elapsed * LIVER_GRAMS_PER_HOUR, grams)
    return max(0.0, grams - metabolized)


def today_remaining_alcohol(
    events: Iterable[ConsumptionEvent], now: datetime, tz: tzinfo | None = None
) -> float:
    """Remaining ethanol from drinks logged on ``now``'s day."""
    todays = _events_on_day(events, now, tz)
    return sum((remaining_alcohol(event, now, tz) for event in todays), 0.0)


def intoxication_level(bac: float) -> IntoxicationLevel:
    for lower, level in _INTOXICATION_BANDS:
        if bac >= lower:
            return level
    return IntoxicationLevel.NONE


def health_risk(weekly_alcohol_grams: float) -> HealthRiskLevel:
    for lower, level in _HEALTH_RISK_BANDS:
        if weekly_alcohol_grams >= lower:
            return level
    return HealthRiskLevel.LOW


def safe_driving_delay(
    alcohol_grams: float, sex: BiologicalSex, weight_kg: float
) -> float:
    """Hours until BAC drops below the 0.03% driving limit."""
    initial = _peak_bac(alcohol_grams, sex, weight_kg)
    return max(0.0, (initial - LEGAL_DRIVING_LIMIT_BAC) / ELIMINATION_PER_HOUR)


def alcohol_calories(alcohol_grams: float) -> float:
    return max(0.0, alcohol_grams) * KCAL_PER_ALCOHOL_GRAM


def recommended_water_ml(alcohol_grams: float) -> float:
    """About a glass of water for every 10 g of ethanol."""
    return max(0.0, alcohol_grams) / 10.0 * WATER_ML_PER_10_GRAMS


def daily_limit_ratio(today_alcohol_grams: float, daily_limit: float) -> float:
    """Share of the daily limit used, capped at 1.0."""
    if daily_limit <= 0:
        return 0.0
    return min(1.0, max(0.0, today_alcohol_grams) / daily_limit)


def daily_limit_level(ratio: float) -> DailyLimitLevel:
    for lower, level in _DAILY_LIMIT_BANDS:
        if ratio >= lower:
            return level
    return DailyLimitLevel.SAFE


def bac_timeline(
    events: Iterable[ConsumptionEvent],
    profile: UserPhysiology,
    start: datetime,
    end: datetime,
    step_hours: float = 0.25,
    tz: tzinfo | None = None,
) -> list[tuple[datetime, float]]:
    """Return (time, BAC %) points between ``start`` and ``end`` for charting.

    Each point sums the contributions of drinks taken at or before it.
    """
    if step_hours <= 0:
        raise ValueError("step_hours must be > 0")
    doses = [(event.timestamp, event.pure_alcohol_grams) for event in events]
    start, end = comparable(start, end, tz)
    if not doses or end < start:
        return []

    points: list[tuple[datetime, float]] = []
    step = timedelta(hours=step_hours)
    moment = start
    while moment <= end:
        bac = 0.0
        for taken_at, grams in doses:
            taken, current = comparable(taken_at, moment, tz)
            if taken > current:
                continue
            bac += estimate_bac(
                grams,
                profile.biological_sex,
                profile.body_weight_kg,
                hours_between(taken, current),
            )
        points.append((moment, round(bac, 4)))
        moment += step
    return points
