"""Tests for health snapshots."""

from datetime import datetime, timedelta, timezone

import pytest

from drink_tracker.domain.health import (
    DailyLimitLevel,
    HealthRiskLevel,
    IntoxicationLevel,
)
from drink_tracker.domain.profile import BiologicalSex, UserPhysiology
from drink_tracker.services.health import HealthService
from tests.conftest import (
    InMemoryEventRepository,
    InMemoryProfileRepository,
    make_event,
)

NOW = datetime(2025, 3, 10, 22, 0)


def test_snapshot_without_drinks() -> None:
    service = HealthService(InMemoryEventRepository(), InMemoryProfileRepository())

    snapshot = service.get_snapshot(NOW)

    assert snapshot.current_bac == 0.0
    assert snapshot.intoxication_level is IntoxicationLevel.NONE
    assert snapshot.sobering_hours == 0.0
    assert snapshot.safe_driving_hours == 0.0
    assert snapshot.health_risk is HealthRiskLevel.LOW
    assert snapshot.daily_limit_level is DailyLimitLevel.SAFE


def test_snapshot_after_evening_drinks() -> None:
    events = InMemoryEventRepository(
        events=[
            make_event(NOW - timedelta(hours=1), volume_ml=500.0),
            make_event(NOW - timedelta(days=3), volume_ml=1000.0),
            make_event(NOW - timedelta(days=8), volume_ml=5000.0),
        ]
    )
    profiles = InMemoryProfileRepository(
        UserPhysiology(biological_sex=BiologicalSex.MALE, body_weight_kg=70.0)
    )

    snapshot = HealthService(events, profiles).get_snapshot(NOW)

    assert snapshot.today_alcohol_grams == pytest.approx(20.0)
    assert snapshot.weekly_alcohol_grams == pytest.approx(60.0)
    assert snapshot.current_bac == pytest.approx(20.0 / 47_600 * 100 - 0.015)
    assert snapshot.intoxication_level is IntoxicationLevel.NONE
    assert snapshot.remaining_alcohol_grams == pytest.approx(13.0)
    assert snapshot.sobering_hours == pytest.approx(13.0 / 7.0)
    assert snapshot.health_risk is HealthRiskLevel.LOW
    assert snapshot.today_calories == pytest.approx(140.0)
    assert snapshot.water_recommendation_ml == pytest.approx(500.0)
    assert snapshot.daily_limit_ratio == 1.0
    assert snapshot.daily_limit_level is DailyLimitLevel.HIGH


def test_snapshot_with_naive_records_and_default_now() -> None:
    events = InMemoryEventRepository(
        events=[make_event(datetime.now() - timedelta(hours=1))]
    )

    snapshot = HealthService(events, InMemoryProfileRepository()).get_snapshot()

    assert snapshot.weekly_alcohol_grams == pytest.approx(14.0)
    assert snapshot.current_bac >= 0.0
    assert snapshot.remaining_alcohol_grams <= 14.0


def test_snapshot_with_naive_records_and_aware_now() -> None:
    tokyo = timezone(timedelta(hours=9))
    events = InMemoryEventRepository(
        events=[make_event(datetime(2025, 3, 10, 21, 0), volume_ml=500.0)]
    )
    profiles = InMemoryProfileRepository(
        UserPhysiology(biological_sex=BiologicalSex.MALE, body_weight_kg=70.0)
    )
    service = HealthService(events, profiles, timezone=tokyo)

    snapshot = service.get_snapshot(datetime(2025, 3, 10, 22, 0, tzinfo=tokyo))

    assert snapshot.today_alcohol_grams == pytest.approx(20.0)
    assert snapshot.current_bac == pytest.approx(20.0 / 47_600 * 100 - 0.015)
    assert snapshot.remaining_alcohol_grams == pytest.approx(13.0)
