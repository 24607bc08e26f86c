"""Dependency container wiring for the application."""

from collections.abc import Callable
from dataclasses import dataclass
from datetime import tzinfo
from pathlib import Path

from drink_tracker.adapters.kv_repositories import (
    KeyValueEventRepository,
    KeyValuePresetRepository,
    KeyValueProfileRepository,
)
from drink_tracker.adapters.kv_store import FileKeyValueStore, KeyValueStore
from drink_tracker.config import Settings, parse_timezone
from drink_tracker.services.events import EventService, PresetService, ProfileService
from drink_tracker.services.health import HealthService
from drink_tracker.services.stats import StatsService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    timezone: tzinfo | None
    store: KeyValueStore
    event_repository: KeyValueEventRepository
    preset_repository: KeyValuePresetRepository
    profile_repository: KeyValueProfileRepository
    event_service: EventService
    preset_service: PresetService
    profile_service: ProfileService
    stats_service: StatsService
    health_service: HealthService
    close_resources: Callable[[], None]


def build_container(
    settings: Settings | None = None, store: KeyValueStore | None = None
) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    timezone = parse_timezone(resolved_settings.timezone)
    resolved_store = store or FileKeyValueStore(Path(resolved_settings.data_dir))
    debounce = resolved_settings.persist_debounce_seconds

    event_repository = KeyValueEventRepository(resolved_store, debounce)
    preset_repository = KeyValuePresetRepository(resolved_store, debounce)
    profile_repository = KeyValueProfileRepository(resolved_store, debounce)

    event_service = EventService(event_repository, timezone)
    preset_service = PresetService(preset_repository, event_service)
    if resolved_settings.seed_default_presets:
        preset_service.ensure_defaults()
    profile_service = ProfileService(profile_repository)
    stats_service = StatsService(event_repository, timezone)
    health_service = HealthService(event_repository, profile_repository, timezone)

    def close_resources() -> None:
        event_repository.flush()
        preset_repository.flush()
        profile_repository.flush()

    return AppContainer(
        settings=resolved_settings,
        timezone=timezone,
        store=resolved_store,
        event_repository=event_repository,
        preset_repository=preset_repository,
        profile_repository=profile_repository,
        event_service=event_service,
        preset_service=preset_service,
        profile_service=profile_service,
        stats_service=stats_service,
        health_service=health_service,
        close_resources=close_resources,
    )
