"""Health metrics service."""

from dataclasses import dataclass
from datetime import datetime, timedelta, tzinfo

from drink_tracker.domain.health import HealthSnapshot
from drink_tracker.services import pharmacokinetics
from drink_tracker.services.dates import now_in
from drink_tracker.services.events import EventRepository, ProfileRepository
from drink_tracker.services.stats import daily_total, range_total

DAYS_PER_WEEK = 7


@dataclass
class HealthService:
    """Derives point-in-time health metrics from the drink log and profile."""

    events: EventRepository
    profiles: ProfileRepository
    timezone: tzinfo | None = None

    def get_snapshot(self, now: datetime | None = None) -> HealthSnapshot:
        """Return BAC, sobering time and risk levels at ``now``."""
        current = now or now_in(self.timezone)
        events = self.events.list_events()
        profile = self.profiles.get_profile()

        weekly = range_total(
            events, current - timedelta(days=DAYS_PER_WEEK - 1), current, self.timezone
        ).alcohol_grams
        today = daily_total(events, current, self.timezone).alcohol_grams
        bac = pharmacokinetics.current_bac(events, profile, current, self.timezone)
        remaining = pharmacokinetics.today_remaining_alcohol(
            events, current, self.timezone
        )
        limit_ratio = pharmacokinetics.daily_limit_ratio(
            today, profile.adjusted_daily_limit
        )

        return HealthSnapshot(
            weekly_alcohol_grams=weekly,
            current_bac=bac,
            intoxication_level=pharmacokinetics.intoxication_level(bac),
            remaining_alcohol_grams=remaining,
            sobering_hours=pharmacokinetics.estimate_sobering_time(remaining),
            safe_driving_hours=pharmacokinetics.safe_driving_delay(
                remaining, profile.biological_sex, profile.body_weight_kg
            ),
            health_risk=pharmacokinetics.health_risk(weekly),
            today_alcohol_grams=today,
            today_calories=pharmacokinetics.alcohol_calories(today),
            water_recommendation_ml=pharmacokinetics.recommended_water_ml(today),
            daily_limit_ratio=limit_ratio,
            daily_limit_level=pharmacokinetics.daily_limit_level(limit_ratio),
        )
