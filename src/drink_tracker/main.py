"""Drink tracker CLI. Run from project root: python -m drink_tracker

Prints today's and this week's consumption summary from the configured store.
"""

import argparse
import sys
from datetime import timedelta

from drink_tracker.adapters.kv_store import InMemoryKeyValueStore
from drink_tracker.app_logging import configure_logging
from drink_tracker.config import Settings
from drink_tracker.containers import AppContainer, build_container
from drink_tracker.domain.drinks import ConsumptionEvent, DrinkCategory
from drink_tracker.domain.stats import TimeRange
from drink_tracker.services.dates import now_in


def seed_demo_events(container: AppContainer) -> None:
    """Log a small evening of drinks: two beers and a glass of wine."""
    now = now_in(container.timezone)
    for hours_ago, category, volume_ml, price in (
        (3.0, DrinkCategory.BEER, 350.0, 250.0),
        (2.0, DrinkCategory.BEER, 350.0, 250.0),
        (1.0, DrinkCategory.WINE, 150.0, 700.0),
    ):
        container.event_service.add_event(
            ConsumptionEvent.create(
                category,
                volume_ml,
                timestamp=now - timedelta(hours=hours_ago),
                price=price,
            )
        )


def print_summary(container: AppContainer) -> None:
    today = container.stats_service.get_today()
    week = container.stats_service.get_week_totals()
    snapshot = container.health_service.get_snapshot()
    favourite = container.stats_service.get_most_frequent_category()
    free_days = container.stats_service.get_alcohol_free_days(TimeRange.WEEK)

    print("Drink Tracker")
    print(
        f"Today: {today.count} drinks, {today.alcohol_grams:.1f} g alcohol, "
        f"spent {today.spend:.0f}"
    )
    print(
        f"Last 7 days: {week.count} drinks, {week.alcohol_grams:.1f} g alcohol, "
        f"spent {week.spend:.0f}, {free_days} alcohol-free days"
    )
    print(
        f"Estimated BAC: {snapshot.current_bac:.4f}% "
        f"({snapshot.intoxication_level.description})"
    )
    print(f"Hours until sober: {snapshot.sobering_hours:.1f}h")
    print(f"Weekly health risk: {snapshot.health_risk.description}")
    if favourite is not None:
        print(f"Most frequent this month: {favourite.value}")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Drink tracker: consumption, BAC and spending summary"
    )
    parser.add_argument(
        "--demo",
        action="store_true",
        help="Use an in-memory store seeded with sample drinks",
    )
    parser.add_argument("--timezone", type=str, help="IANA zone for calendar days")
    args = parser.parse_args(argv)

    settings = Settings()
    if args.timezone:
        settings = settings.model_copy(update={"timezone": args.timezone})
    configure_logging(settings.log_level)

    store = InMemoryKeyValueStore() if args.demo else None
    container = build_container(settings, store)
    try:
        if args.demo:
            seed_demo_events(container)
        print_summary(container)
    finally:
        container.close_resources()
    return 0


if __name__ == "__main__":
    sys.exit(main())
