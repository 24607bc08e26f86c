"""Pydantic models for persisted drink data."""

from datetime import date, datetime
from uuid import UUID

from pydantic import BaseModel, TypeAdapter

from drink_tracker.domain.drinks import (
    ConsumptionEvent,
    ConsumptionPreset,
    DrinkCategory,
)
from drink_tracker.domain.profile import BiologicalSex, DrinkingGoal, UserPhysiology


class ConsumptionEventRecord(BaseModel):
    """Stored drink record."""

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
    def from_domain(cls, event: ConsumptionEvent) -> "ConsumptionEventRecord":
        return cls(
            id=event.id,
            timestamp=event.timestamp,
            category=event.category,
            volume_ml=event.volume_ml,
            abv_percent=event.abv_percent,
            price=event.price,
            location=event.location,
            note=event.note,
            is_favorite=event.is_favorite,
        )

    def to_domain(self) -> ConsumptionEvent:
        return ConsumptionEvent(
            id=self.id,
            timestamp=self.timestamp,
            category=self.category,
            volume_ml=self.volume_ml,
            abv_percent=self.abv_percent,
            price=self.price,
            location=self.location,
            note=self.note,
            is_favorite=self.is_favorite,
        )


class ConsumptionPresetRecord(BaseModel):
    """Stored quick-add preset."""

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
    def from_domain(cls, preset: ConsumptionPreset) -> "ConsumptionPresetRecord":
        return cls(
            id=preset.id,
            name=preset.name,
            category=preset.category,
            volume_ml=preset.volume_ml,
            abv_percent=preset.abv_percent,
            price=preset.price,
            location=preset.location,
            note=preset.note,
            color_hex=preset.color_hex,
            is_default=preset.is_default,
        )

    def to_domain(self) -> ConsumptionPreset:
        return ConsumptionPreset(
            id=self.id,
            name=self.name,
            category=self.category,
            volume_ml=self.volume_ml,
            abv_percent=self.abv_percent,
            price=self.price,
            location=self.location,
            note=self.note,
            color_hex=self.color_hex,
            is_default=self.is_default,
        )


class UserProfileRecord(BaseModel):
    """Stored user profile."""

    id: UUID
    display_name: str = ""
    biological_sex: BiologicalSex
    birth_date: date | None = None
    body_weight_kg: float
    height_cm: float | None = None
    goal: DrinkingGoal
    weekly_budget: float | None = None
    updated_at: datetime | None = None

    @classmethod
    def from_domain(cls, profile: UserPhysiology) -> "UserProfileRecord":
        return cls(
            id=profile.id,
            display_name=profile.display_name,
            biological_sex=profile.biological_sex,
            birth_date=profile.birth_date,
            body_weight_kg=profile.body_weight_kg,
            height_cm=profile.height_cm,
            goal=profile.goal,
            weekly_budget=profile.weekly_budget,
            updated_at=profile.updated_at,
        )

    def to_domain(self) -> UserPhysiology:
        return UserPhysiology(
            id=self.id,
            display_name=self.display_name,
            biological_sex=self.biological_sex,
            birth_date=self.birth_date,
            body_weight_kg=self.body_weight_kg,
            height_cm=self.height_cm,
            goal=self.goal,
            weekly_budget=self.weekly_budget,
            updated_at=self.updated_at,
        )


_EVENT_LIST = TypeAdapter(list[ConsumptionEventRecord])
_PRESET_LIST = TypeAdapter(list[ConsumptionPresetRecord])


def encode_events(events: list[ConsumptionEvent]) -> bytes:
    """Serialize drink records as a JSON list."""
    return _EVENT_LIST.dump_json(
        [ConsumptionEventRecord.from_domain(event) for event in events]
    )


def decode_events(raw: bytes) -> list[ConsumptionEvent]:
    return [record.to_domain() for record in _EVENT_LIST.validate_json(raw)]


def encode_presets(presets: list[ConsumptionPreset]) -> bytes:
    return _PRESET_LIST.dump_json(
        [ConsumptionPresetRecord.from_domain(preset) for preset in presets]
    )


def decode_presets(raw: bytes) -> list[ConsumptionPreset]:
    return [record.to_domain() for record in _PRESET_LIST.validate_json(raw)]


def encode_profile(profile: UserPhysiology) -> bytes:
    return UserProfileRecord.from_domain(profile).model_dump_json().encode()


def decode_profile(raw: bytes) -> UserPhysiology:
    return UserProfileRecord.model_validate_json(raw).to_domain()
