"""Tests for persisted record models."""

import json
from datetime import date, datetime, timedelta, timezone
from uuid import uuid4

from drink_tracker.adapters.records import (
    decode_events,
    decode_presets,
    decode_profile,
    encode_events,
    encode_presets,
    encode_profile,
)
from drink_tracker.domain.drinks import (
    ConsumptionEvent,
    ConsumptionPreset,
    DrinkCategory,
)
from drink_tracker.domain.profile import BiologicalSex, DrinkingGoal, UserPhysiology


def test_event_round_trip_with_and_without_optionals() -> None:
    tokyo = timezone(timedelta(hours=9))
    full = ConsumptionEvent(
        id=uuid4(),
        timestamp=datetime(2025, 3, 10, 20, 15, 30, 123456, tzinfo=tokyo),
        category=DrinkCategory.RICE_WINE,
        volume_ml=180.0,
        abv_percent=15.5,
        price=550.0,
        location="Izakaya",
        note="warm",
        is_favorite=True,
    )
    bare = ConsumptionEvent(
        id=uuid4(),
        timestamp=datetime(2025, 3, 10, 21, 0),
        category=DrinkCategory.CHU_HI,
        volume_ml=350.0,
        abv_percent=5.0,
    )

    decoded = decode_events(encode_events([full, bare]))

    assert decoded == [full, bare]
    assert decoded[1].price is None
    assert decoded[1].timestamp.tzinfo is None


def test_event_category_is_stored_by_value() -> None:
    event = ConsumptionEvent.create(
        DrinkCategory.RICE_WINE, 180.0, timestamp=datetime(2025, 3, 10, 20, 0)
    )

    payload = json.loads(encode_events([event]))

    assert payload[0]["category"] == "rice-wine"
    assert payload[0]["id"] == str(event.id)


def test_preset_round_trip() -> None:
    presets = [
        ConsumptionPreset.create(
            "Highball", DrinkCategory.HIGHBALL, 350.0, price=500.0, is_default=True
        ),
        ConsumptionPreset.create(
            "Red wine", DrinkCategory.WINE, 150.0, color_hex="#8B0000", note="dry"
        ),
    ]

    assert decode_presets(encode_presets(presets)) == presets


def test_profile_round_trip() -> None:
    profile = UserPhysiology(
        biological_sex=BiologicalSex.FEMALE,
        body_weight_kg=55.5,
        goal=DrinkingGoal.REDUCE,
        display_name="Aki",
        birth_date=date(1992, 4, 1),
        height_cm=160.0,
        weekly_budget=None,
        updated_at=datetime(2025, 3, 10, 9, 0, tzinfo=timezone.utc),
    )

    assert decode_profile(encode_profile(profile)) == profile
    assert decode_profile(encode_profile(UserPhysiology())).weekly_budget == 5000.0


def test_empty_event_list_round_trip() -> None:
    assert decode_events(encode_events([])) == []
