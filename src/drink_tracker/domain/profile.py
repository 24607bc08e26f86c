"""Domain models for the user profile."""

from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum
from uuid import UUID, uuid4

LOW_RISK_DAILY_GRAMS = 20.0
MODERATE_RISK_DAILY_GRAMS = 40.0
WEEKLY_RECOMMENDED_GRAMS = 140.0
DEFAULT_WEIGHT_KG = 60.0
DEFAULT_WEEKLY_BUDGET = 5000.0


class BiologicalSex(Enum):
    """Sex used to pick the Widmark distribution ratio."""

    MALE = "male"
    FEMALE = "female"
    UNSPECIFIED = "unspecified"


class DrinkingGoal(Enum):
    """What the user wants to achieve with their drinking."""

    REDUCE = "reduce"
    MODERATE = "moderate"
    MAINTAIN = "maintain"


_SEX_LIMIT_FACTORS: dict[BiologicalSex, float] = {
    BiologicalSex.MALE: 1.0,
    BiologicalSex.FEMALE: 0.8,
    BiologicalSex.UNSPECIFIED: 0.9,
}


@dataclass(frozen=True)
class UserPhysiology:
    """Profile used for pharmacokinetic and budget estimates."""

    biological_sex: BiologicalSex = BiologicalSex.UNSPECIFIED
    body_weight_kg: float = DEFAULT_WEIGHT_KG
    goal: DrinkingGoal = DrinkingGoal.MODERATE
    id: UUID = field(default_factory=uuid4)
    display_name: str = ""
    birth_date: date | None = None
    height_cm: float | None = None
    weekly_budget: float | None = DEFAULT_WEEKLY_BUDGET
    updated_at: datetime | None = None

    def age(self, today: date) -> int | None:
        """Return age in whole years on ``today``."""
        if self.birth_date is None:
            return None
        years = today.year - self.birth_date.year
        if (today.month, today.day) < (self.birth_date.month, self.birth_date.day):
            years -= 1
        return max(0, years)

    @property
    def bmi(self) -> float | None:
        if self.height_cm is None or self.height_cm <= 0:
            return None
        height_m = self.height_cm / 100
        return self.body_weight_kg / (height_m * height_m)

    @property
    def recommended_daily_limit(self) -> float:
        """Daily ethanol limit (g) for the selected goal."""
        if self.goal is DrinkingGoal.REDUCE:
            return max(LOW_RISK_DAILY_GRAMS * 0.5, 10.0)
        if self.goal is DrinkingGoal.MAINTAIN:
            return min(MODERATE_RISK_DAILY_GRAMS, WEEKLY_RECOMMENDED_GRAMS / 7)
        return LOW_RISK_DAILY_GRAMS

    @property
    def adjusted_daily_limit(self) -> float:
        """Daily limit scaled for sex-dependent metabolism."""
        return self.recommended_daily_limit * _SEX_LIMIT_FACTORS[self.biological_sex]
