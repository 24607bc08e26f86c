"""Tests for drink log, preset and profile services."""

from datetime import datetime, timedelta, timezone

from drink_tracker.domain.drinks import ConsumptionEvent, DrinkCategory
from drink_tracker.domain.profile import BiologicalSex, UserPhysiology
from drink_tracker.services.events import (
    DEFAULT_PRESETS,
    EventService,
    PresetService,
    ProfileService,
)
from tests.conftest import (
    InMemoryEventRepository,
    InMemoryPresetRepository,
    InMemoryProfileRepository,
    make_event,
)

EVENING = datetime(2025, 3, 10, 20, 0)


def test_add_and_get_event() -> None:
    service = EventService(InMemoryEventRepository())
    event = ConsumptionEvent.create(DrinkCategory.WINE, 150.0, timestamp=EVENING)

    service.add_event(event)

    assert service.get_event(event.id) == event
    assert service.list_events() == [event]


def test_replace_event_keeps_id() -> None:
    service = EventService(InMemoryEventRepository())
    event = service.add_event(make_event(EVENING))

    assert service.replace_event(event.edit(volume_ml=500.0)) is True
    stored = service.get_event(event.id)
    assert stored is not None
    assert stored.volume_ml == 500.0
    assert len(service.list_events()) == 1


def test_replace_unknown_event_is_noop() -> None:
    repo = InMemoryEventRepository()
    service = EventService(repo)

    assert service.replace_event(make_event(EVENING)) is False
    assert repo.events == []


def test_delete_event_and_unknown_id() -> None:
    service = EventService(InMemoryEventRepository())
    event = service.add_event(make_event(EVENING))

    service.delete_event(make_event(EVENING).id)
    assert len(service.list_events()) == 1

    service.delete_event(event.id)
    assert service.list_events() == []


def test_events_for_day_and_recent() -> None:
    today_late = make_event(EVENING + timedelta(hours=2))
    today_early = make_event(EVENING)
    yesterday = make_event(EVENING - timedelta(days=1))
    older = make_event(EVENING - timedelta(days=3))
    service = EventService(
        InMemoryEventRepository(events=[today_late, older, yesterday, today_early])
    )

    assert service.events_for_day(EVENING) == [today_early, today_late]
    assert service.recent_events(EVENING) == [today_early, today_late, yesterday]


def test_favorites() -> None:
    service = EventService(InMemoryEventRepository())
    event = service.add_event(make_event(EVENING))

    assert service.favorites() == []
    assert service.set_favorite(event.id, True) is True
    assert [item.id for item in service.favorites()] == [event.id]
    assert service.set_favorite(make_event(EVENING).id, True) is False


def test_ensure_default_presets_only_once() -> None:
    repo = InMemoryPresetRepository()
    service = PresetService(repo, EventService(InMemoryEventRepository()))

    presets = service.ensure_defaults()
    again = service.ensure_defaults()

    assert len(presets) == len(DEFAULT_PRESETS)
    assert all(preset.is_default for preset in presets)
    assert again == presets


def test_log_preset_creates_event_at_start_of_day() -> None:
    events = EventService(InMemoryEventRepository())
    service = PresetService(InMemoryPresetRepository(), events)
    preset = service.ensure_defaults()[0]

    logged = service.log_preset(preset, EVENING)
    timed = service.log_preset(preset, EVENING, keep_time=True)

    assert logged.timestamp == datetime(2025, 3, 10)
    assert timed.timestamp == EVENING
    assert logged.category is preset.category
    assert logged.price == preset.price
    assert logged.id != timed.id
    assert len(events.list_events()) == 2


def test_save_event_as_preset_and_delete() -> None:
    service = PresetService(
        InMemoryPresetRepository(), EventService(InMemoryEventRepository())
    )
    event = make_event(EVENING, DrinkCategory.SPIRITS, 45.0, 40.0, price=800.0)

    preset = service.save_event_as_preset(event, "Whisky")

    assert preset.name == "Whisky"
    assert preset.abv_percent == 40.0
    assert preset.is_default is False
    assert service.list_presets() == [preset]

    service.delete_preset(preset.id)
    assert service.list_presets() == []


def test_profile_defaults_and_update() -> None:
    repo = InMemoryProfileRepository()
    service = ProfileService(repo)

    assert service.get_profile().body_weight_kg == 60.0

    profile = UserPhysiology(biological_sex=BiologicalSex.FEMALE, body_weight_kg=55.0)
    updated = service.update_profile(profile, EVENING)

    assert updated.updated_at == EVENING
    assert service.get_profile() == updated


def test_events_for_day_orders_mixed_timestamp_kinds() -> None:
    tokyo = timezone(timedelta(hours=9))
    aware = make_event(datetime(2025, 3, 10, 12, 0, tzinfo=timezone.utc))
    naive = make_event(datetime(2025, 3, 10, 20, 0))
    service = EventService(
        InMemoryEventRepository(events=[aware, naive]), timezone=tokyo
    )

    assert service.events_for_day(datetime(2025, 3, 10, 23, 0)) == [naive, aware]
