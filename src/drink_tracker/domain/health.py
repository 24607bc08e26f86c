"""Domain models for health and savings metrics."""

from dataclasses import dataclass
from enum import Enum


class IntoxicationLevel(Enum):
    """Effect band for an estimated BAC."""

    NONE = "none"
    MILD = "mild"
    MODERATE = "moderate"
    SIGNIFICANT = "significant"
    SEVERE = "severe"
    EXTREME = "extreme"

    @property
    def description(self) -> str:
        return _INTOXICATION_TEXT[self][0]

    @property
    def recommendation(self) -> str:
        return _INTOXICATION_TEXT[self][1]


class HealthRiskLevel(Enum):
    """Long-term risk band for weekly ethanol intake."""

    LOW = "low"
    MODERATE = "moderate"
    HIGH = "high"
    VERY_HIGH = "very-high"

    @property
    def description(self) -> str:
        return _HEALTH_RISK_TEXT[self][0]

    @property
    def recommendation(self) -> str:
        return _HEALTH_RISK_TEXT[self][1]


class DailyLimitLevel(Enum):
    """How close today's intake is to the daily limit."""

    SAFE = "safe"
    MODERATE = "moderate"
    RISKY = "risky"
    HIGH = "high"


_HYDRATE = "Drink plenty of water."
_STOP = (
    "Stop drinking now and rest with plenty of water. "
    "Seek medical help if needed."
)

_INTOXICATION_TEXT: dict[IntoxicationLevel, tuple[str, str]] = {
    IntoxicationLevel.NONE: ("Little to no noticeable effect.", _HYDRATE),
    IntoxicationLevel.MILD: ("Slight relaxation.", _HYDRATE),
    IntoxicationLevel.MODERATE: (
        "Mild intoxication; reactions slightly slower.",
        "Drink water and eat something.",
    ),
    IntoxicationLevel.SIGNIFICANT: (
        "Noticeable intoxication; judgement and coordination impaired.",
        "Stop drinking, drink water and rest.",
    ),
    IntoxicationLevel.SEVERE: (
        "Heavy intoxication; memory loss or vomiting possible.",
        _STOP,
    ),
    IntoxicationLevel.EXTREME: (
        "Dangerous intoxication; risk of losing consciousness.",
        _STOP,
    ),
}

_HEALTH_RISK_TEXT: dict[HealthRiskLevel, tuple[str, str]] = {
    HealthRiskLevel.LOW: (
        "Relatively small impact on health.",
        "Keep the current pattern and schedule regular alcohol-free days.",
    ),
    HealthRiskLevel.MODERATE: (
        "Long-term health risks may increase.",
        "Plan 2-3 alcohol-free days a week and drink less per day.",
    ),
    HealthRiskLevel.HIGH: (
        "Elevated risk of liver damage and other harm.",
        "Cut down substantially and keep at least 3-4 alcohol-free days a week.",
    ),
    HealthRiskLevel.VERY_HIGH: (
        "Serious health risk; reducing intake is strongly advised.",
        "Talk to a healthcare professional about support to cut down.",
    ),
}


@dataclass(frozen=True)
class HealthSnapshot:
    """Point-in-time health metrics derived from the drink log."""

    weekly_alcohol_grams: float
    current_bac: float
    intoxication_level: IntoxicationLevel
    remaining_alcohol_grams: float
    sobering_hours: float
    safe_driving_hours: float
    health_risk: HealthRiskLevel
    today_alcohol_grams: float
    today_calories: float
    water_recommendation_ml: float
    daily_limit_ratio: float
    daily_limit_level: DailyLimitLevel


@dataclass(frozen=True)
class ProjectedSavings:
    """Projected spend reduction per period."""

    weekly: float
    monthly: float
    yearly: float
