"""Drink log, preset and profile services."""

import logging
from dataclasses import dataclass, replace
from datetime import datetime, timedelta, tzinfo
from typing import Protocol
from uuid import UUID

from drink_tracker.domain.drinks import (
    ConsumptionEvent,
    ConsumptionPreset,
    DrinkCategory,
)
from drink_tracker.domain.profile import UserPhysiology
from drink_tracker.services.dates import local_datetime, local_day

_logger = logging.getLogger(__name__)

DEFAULT_PRESETS: tuple[tuple[str, DrinkCategory, float, float, float], ...] = (
    ("Draft beer (mug)", DrinkCategory.BEER, 500.0, 5.0, 600.0),
    ("Canned beer", DrinkCategory.BEER, 350.0, 5.0, 250.0),
    ("Glass of wine", DrinkCategory.WINE, 150.0, 12.0, 700.0),
    ("Highball", DrinkCategory.HIGHBALL, 350.0, 7.0, 500.0),
    ("Rice wine (1 go)", DrinkCategory.RICE_WINE, 180.0, 15.0, 500.0),
)


class EventRepository(Protocol):
    """Persistence interface for drink records."""

    def list_events(self) -> list[ConsumptionEvent]:
        """Return the latest committed drink records."""

    def upsert_event(self, event: ConsumptionEvent) -> None:
        """Insert a record or replace the one with the same id."""

    def delete_event(self, event_id: UUID) -> None:
        """Remove a record by id, if present."""


class PresetRepository(Protocol):
    """Persistence interface for quick-add presets."""

    def list_presets(self) -> list[ConsumptionPreset]:
        """Return all presets."""

    def upsert_preset(self, preset: ConsumptionPreset) -> None:
        """Insert a preset or replace the one with the same id."""

    def delete_preset(self, preset_id: UUID) -> None:
        """Remove a preset by id, if present."""


class ProfileRepository(Protocol):
    """Persistence interface for the user profile."""

    def get_profile(self) -> UserPhysiology:
        """Return the stored profile or a default one."""

    def save_profile(self, profile: UserPhysiology) -> None:
        """Persist the profile."""


@dataclass
class EventService:
    """Application service for the drink log."""

    repository: EventRepository
    timezone: tzinfo | None = None

    def list_events(self) -> list[ConsumptionEvent]:
        return self.repository.list_events()

    def add_event(self, event: ConsumptionEvent) -> ConsumptionEvent:
        """Record a new drink."""
        self.repository.upsert_event(event)
        _logger.info(
            "Drink logged: category=%s grams=%.1f",
            event.category.value,
            event.pure_alcohol_grams,
        )
        return event

    def replace_event(self, event: ConsumptionEvent) -> bool:
        """Replace the record with ``event.id``; False when it does not exist."""
        if self.get_event(event.id) is None:
            _logger.warning("Drink not found for update: id=%s", event.id)
            return False
        self.repository.upsert_event(event)
        return True

    def delete_event(self, event_id: UUID) -> None:
        self.repository.delete_event(event_id)

    def get_event(self, event_id: UUID) -> ConsumptionEvent | None:
        for event in self.repository.list_events():
            if event.id == event_id:
                return event
        return None

    def events_for_day(self, day: datetime) -> list[ConsumptionEvent]:
        """Records on ``day``'s calendar day, oldest first."""
        target = local_day(day, self.timezone)
        return sorted(
            (
                event
                for event in self.repository.list_events()
                if local_day(event.timestamp, self.timezone) == target
            ),
            key=lambda event: local_datetime(event.timestamp, self.timezone),
        )

    def recent_events(self, now: datetime) -> list[ConsumptionEvent]:
        """Today's records followed by yesterday's."""
        return self.events_for_day(now) + self.events_for_day(now - timedelta(days=1))

    def favorites(self) -> list[ConsumptionEvent]:
        """Records marked as favourites, for quick re-logging."""
        return [event for event in self.repository.list_events() if event.is_favorite]

    def set_favorite(self, event_id: UUID, is_favorite: bool) -> bool:
        event = self.get_event(event_id)
        if event is None:
            return False
        return self.replace_event(event.edit(is_favorite=is_favorite))


@dataclass
class PresetService:
    """Application service for quick-add presets."""

    repository: PresetRepository
    event_service: EventService

    def ensure_defaults(self) -> list[ConsumptionPreset]:
        """Seed the built-in presets when none exist yet."""
        existing = self.repository.list_presets()
        if existing:
            return existing
        for name, category, volume_ml, abv_percent, price in DEFAULT_PRESETS:
            self.repository.upsert_preset(
                ConsumptionPreset.create(
                    name=name,
                    category=category,
                    volume_ml=volume_ml,
                    abv_percent=abv_percent,
                    price=price,
                    is_default=True,
                )
            )
        _logger.info("Seeded default presets: count=%s", len(DEFAULT_PRESETS))
        return self.repository.list_presets()

    def list_presets(self) -> list[ConsumptionPreset]:
        return self.repository.list_presets()

    def save_preset(self, preset: ConsumptionPreset) -> None:
        self.repository.upsert_preset(preset)

    def delete_preset(self, preset_id: UUID) -> None:
        self.repository.delete_preset(preset_id)

    def save_event_as_preset(
        self, event: ConsumptionEvent, name: str
    ) -> ConsumptionPreset:
        """Create and store a preset from a recorded drink."""
        preset = ConsumptionPreset.from_event(event, name)
        self.repository.upsert_preset(preset)
        return preset

    def log_preset(
        self, preset: ConsumptionPreset, at: datetime, *, keep_time: bool = False
    ) -> ConsumptionEvent:
        """Record a drink from a preset."""
        return self.event_service.add_event(preset.to_event(at, keep_time=keep_time))


@dataclass
class ProfileService:
    """Application service for the user profile."""

    repository: ProfileRepository

    def get_profile(self) -> UserPhysiology:
        return self.repository.get_profile()

    def update_profile(self, profile: UserPhysiology, now: datetime) -> UserPhysiology:
        """Persist ``profile`` stamped with the update time."""
        updated = replace(profile, updated_at=now)
        self.repository.save_profile(updated)
        return updated
