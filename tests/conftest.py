"""Shared test fixtures."""

from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from uuid import UUID, uuid4

import pytest

from drink_tracker.config import Settings
from drink_tracker.domain.drinks import (
    ConsumptionEvent,
    ConsumptionPreset,
    DrinkCategory,
)
from drink_tracker.domain.profile import UserPhysiology
from drink_tracker.services.events import (
    EventRepository,
    PresetRepository,
    ProfileRepository,
)


def make_event(  # noqa: PLR0913
    timestamp: datetime,
    category: DrinkCategory = DrinkCategory.BEER,
    volume_ml: float = 350.0,
    abv_percent: float = 5.0,
    price: float | None = None,
    **extra: object,
) -> ConsumptionEvent:
    return ConsumptionEvent(
        id=uuid4(),
        timestamp=timestamp,
        category=category,
        volume_ml=volume_ml,
        abv_percent=abv_percent,
        price=price,
        **extra,
    )


@dataclass
class InMemoryEventRepository(EventRepository):
    """In-memory drink repository for tests."""

    events: list[ConsumptionEvent] = field(default_factory=list)

    def list_events(self) -> list[ConsumptionEvent]:
        return list(self.events)

    def upsert_event(self, event: ConsumptionEvent) -> None:
        self.events = [item for item in self.events if item.id != event.id]
        self.events.append(event)

    def delete_event(self, event_id: UUID) -> None:
        self.events = [item for item in self.events if item.id != event_id]


@dataclass
class InMemoryPresetRepository(PresetRepository):
    """In-memory preset repository for tests."""

    presets: list[ConsumptionPreset] = field(default_factory=list)

    def list_presets(self) -> list[ConsumptionPreset]:
        return list(self.presets)

    def upsert_preset(self, preset: ConsumptionPreset) -> None:
        self.presets = [item for item in self.presets if item.id != preset.id]
        self.presets.append(preset)

    def delete_preset(self, preset_id: UUID) -> None:
        self.presets = [item for item in self.presets if item.id != preset_id]


@dataclass
class InMemoryProfileRepository(ProfileRepository):
    """In-memory profile repository for tests."""

    profile: UserPhysiology | None = None

    def get_profile(self) -> UserPhysiology:
        return self.profile or UserPhysiology()

    def save_profile(self, profile: UserPhysiology) -> None:
        self.profile = profile


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    return Settings(
        data_dir=str(tmp_path / "store"),
        timezone=None,
        persist_debounce_seconds=0.0,
        seed_default_presets=True,
    )


@pytest.fixture
def event_repository() -> InMemoryEventRepository:
    return InMemoryEventRepository()


@pytest.fixture
def profile_repository() -> InMemoryProfileRepository:
    return InMemoryProfileRepository()
