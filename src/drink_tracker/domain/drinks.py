"""Domain models for drink records and presets."""

from dataclasses import dataclass, replace
from datetime import datetime
from enum import Enum
from typing import Any
from uuid import UUID, uuid4

# Ethanol density used to turn volume into mass (g/mL).
ETHANOL_DENSITY_G_PER_ML = 0.8
STANDARD_DRINK_GRAMS = 10.0
KCAL_PER_ALCOHOL_GRAM = 7.0


class DrinkCategory(Enum):
    """Closed set of drink categories, in display order."""

    BEER = "beer"
    WINE = "wine"
    SPIRITS = "spirits"
    RICE_WINE = "rice-wine"
    COCKTAIL = "cocktail"
    HIGHBALL = "highball"
    CHU_HI = "chu-hi"
    OTHER = "other"


class DrinkRiskLevel(Enum):
    """Risk band of a single drink by its ethanol mass."""

    SAFE = "safe"
    MODERATE = "moderate"
    RISKY = "risky"
    HIGH = "high"


@dataclass(frozen=True)
class CategoryDefaults:
    """Typical strength and serving size of a drink category."""

    default_abv_percent: float
    default_volume_ml: float


CATEGORY_DEFAULTS: dict[DrinkCategory, CategoryDefaults] = {
    DrinkCategory.BEER: CategoryDefaults(5.0, 350.0),
    DrinkCategory.WINE: CategoryDefaults(12.0, 150.0),
    DrinkCategory.SPIRITS: CategoryDefaults(40.0, 45.0),
    DrinkCategory.RICE_WINE: CategoryDefaults(15.0, 180.0),
    DrinkCategory.COCKTAIL: CategoryDefaults(8.0, 250.0),
    DrinkCategory.HIGHBALL: CategoryDefaults(7.0, 350.0),
    DrinkCategory.CHU_HI: CategoryDefaults(5.0, 350.0),
    DrinkCategory.OTHER: CategoryDefaults(5.0, 250.0),
}

# Upper bounds (inclusive, grams) for the single-drink risk bands.
_DRINK_RISK_LIMITS: tuple[tuple[float, DrinkRiskLevel], ...] = (
    (20.0, DrinkRiskLevel.SAFE),
    (40.0, DrinkRiskLevel.MODERATE),
    (60.0, DrinkRiskLevel.RISKY),
)


def category_order(category: DrinkCategory) -> int:
    """Return the position of a category in the enumeration."""
    return list(DrinkCategory).index(category)


def default_abv(category: DrinkCategory) -> float:
    """Return the default ABV percentage for a category."""
    return CATEGORY_DEFAULTS[category].default_abv_percent


def default_volume(category: DrinkCategory) -> float:
    """Return the default serving volume (mL) for a category."""
    return CATEGORY_DEFAULTS[category].default_volume_ml


def ethanol_grams(volume_ml: float, abv_percent: float) -> float:
    """Grams of ethanol in ``volume_ml`` of a drink at ``abv_percent``."""
    return max(0.0, volume_ml * (abv_percent / 100) * ETHANOL_DENSITY_G_PER_ML)


def drink_risk_level(alcohol_grams: float) -> DrinkRiskLevel:
    """Classify a single drink by its ethanol mass."""
    for limit, level in _DRINK_RISK_LIMITS:
        if alcohol_grams <= limit:
            return level
    return DrinkRiskLevel.HIGH


@dataclass(frozen=True)
class ConsumptionEvent:
    """A single recorded drink.

    Callers validate ``volume_ml > 0`` and ``abv_percent >= 0`` before
    construction. ``price`` of ``None`` means the price is unknown.
    """

    id: UUID
    timestamp: datetime
    category: DrinkCategory
    volume_ml: float
    abv_percent: float
    price: float | None = None
    location: str | None = None
    note: str | None = None
    is_favorite: bool = False

    @classmethod
    def create(  # noqa: PLR0913
        cls,
        category: DrinkCategory,
        volume_ml: float,
        abv_percent: float | None = None,
        *,
        timestamp: datetime | None = None,
        price: float | None = None,
        location: str | None = None,
        note: str | None = None,
        is_favorite: bool = False,
    ) -> "ConsumptionEvent":
        """Create a new event with a fresh id and category defaults."""
        return cls(
            id=uuid4(),
            timestamp=timestamp or datetime.now().astimezone(),
            category=category,
            volume_ml=volume_ml,
            abv_percent=default_abv(category) if abv_percent is None else abv_percent,
            price=price,
            location=location,
            note=note,
            is_favorite=is_favorite,
        )

    @property
    def pure_alcohol_grams(self) -> float:
        """Mass of ethanol in the drink."""
        return ethanol_grams(self.volume_ml, self.abv_percent)

    @property
    def standard_drinks(self) -> float:
        return self.pure_alcohol_grams / STANDARD_DRINK_GRAMS

    @property
    def calories(self) -> float:
        return self.pure_alcohol_grams * KCAL_PER_ALCOHOL_GRAM

    @property
    def risk_level(self) -> DrinkRiskLevel:
        return drink_risk_level(self.pure_alcohol_grams)

    @property
    def known_price(self) -> float:
        """Price with unknown treated as zero, for summing."""
        return self.price or 0.0

    def edit(self, **changes: Any) -> "ConsumptionEvent":
        """Return an edited copy that keeps the same id."""
        changes.pop("id", None)
        return replace(self, **changes)


@dataclass(frozen=True)
class ConsumptionPreset:
    """Reusable template for quickly logging a drink."""

    id: UUID
    name: str
    category: DrinkCategory
    volume_ml: float
    abv_percent: float
    price: float | None = None
    location: str | None = None
    note: str | None = None
    color_hex: str | None = None
    is_default: bool = False

    @classmethod
    def create(  # noqa: PLR0913
        cls,
        name: str,
        category: DrinkCategory,
        volume_ml: float,
        abv_percent: float | None = None,
        *,
        price: float | None = None,
        location: str | None = None,
        note: str | None = None,
        color_hex: str | None = None,
        is_default: bool = False,
    ) -> "ConsumptionPreset":
        """Create a new preset with a fresh id and category defaults."""
        return cls(
            id=uuid4(),
            name=name,
            category=category,
            volume_ml=volume_ml,
            abv_percent=default_abv(category) if abv_percent is None else abv_percent,
            price=price,
            location=location,
            note=note,
            color_hex=color_hex,
            is_default=is_default,
        )

    @classmethod
    def from_event(cls, event: ConsumptionEvent, name: str) -> "ConsumptionPreset":
        """Build a user preset from a recorded drink."""
        return cls.create(
            name=name,
            category=event.category,
            volume_ml=event.volume_ml,
            abv_percent=event.abv_percent,
            price=event.price,
            location=event.location,
            note=event.note,
        )

    def to_event(self, at: datetime, *, keep_time: bool = False) -> ConsumptionEvent:
        """Create a drink record from this preset.

        The timestamp is moved to the start of ``at``'s day unless
        ``keep_time`` is set.
        """
        timestamp = at
        if not keep_time:
            timestamp = at.replace(hour=0, minute=0, second=0, microsecond=0)
        return ConsumptionEvent.create(
            category=self.category,
            volume_ml=self.volume_ml,
            abv_percent=self.abv_percent,
            timestamp=timestamp,
            price=self.price,
            location=self.location,
            note=self.note,
        )
