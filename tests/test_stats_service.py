"""Tests for weekly aggregation and period comparison."""

import asyncio
from datetime import UTC, date, datetime
from zoneinfo import ZoneInfo

from fitness_tracker.domain.meals import MealRecord
from fitness_tracker.domain.nutrition import NutritionAnalysis
from fitness_tracker.domain.stats import WeeklySummary
from fitness_tracker.services.meals import MealEditor, MealLogService
from fitness_tracker.services.stats import (
    StatsService,
    aggregate_week,
    compare_periods,
    week_start_for,
)

WEEK_START = date(2024, 3, 10)


def _meal(when: datetime, calories: float, protein: float = 0, servings: float = 1.0) -> MealRecord:
    return MealRecord(
        id=None,
        name="Meal",
        logged_at=when,
        analysis=NutritionAnalysis(calories=calories, protein_g=protein),
        servings=servings,
    )


def _summary(average: int) -> WeeklySummary:
    return WeeklySummary(
        buckets=[], total_calories=0, average_calories=average, days_with_data=0
    )


def test_week_start_for_returns_sunday() -> None:
    assert week_start_for(date(2024, 3, 15)) == WEEK_START
    assert week_start_for(date(2024, 3, 10)) == WEEK_START
    assert week_start_for(date(2024, 3, 16), weeks_ago=1) == date(2024, 3, 3)


def test_aggregate_week_sums_and_averages() -> None:
    records = [
        _meal(datetime(2024, 3, 11, 8, tzinfo=UTC), 200, protein=10),
        _meal(datetime(2024, 3, 11, 19, tzinfo=UTC), 300, protein=15),
        _meal(datetime(2024, 3, 12, 12, tzinfo=UTC), 350, servings=2),
        _meal(datetime(2024, 3, 13, 12, tzinfo=UTC), 300),
        _meal(datetime(2024, 3, 20, 12, tzinfo=UTC), 999),
    ]

    summary = aggregate_week(records, WEEK_START)

    assert [bucket.day for bucket in summary.buckets] == [
        "Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat",
    ]
    assert summary.buckets[1].calories == 500
    assert summary.buckets[1].protein_g == 25
    assert summary.buckets[2].calories == 700
    assert summary.total_calories == 1500
    assert summary.days_with_data == 3
    assert summary.average_calories == 500


def test_aggregate_week_uses_calorie_override() -> None:
    record = MealRecord(
        id=None,
        name="Meal",
        logged_at=datetime(2024, 3, 11, 8, tzinfo=UTC),
        analysis=NutritionAnalysis(calories=400),
        servings=2,
        calorie_override=650,
    )

    summary = aggregate_week([record], WEEK_START)

    assert summary.buckets[1].calories == 650


def test_aggregate_week_empty() -> None:
    summary = aggregate_week([], WEEK_START)

    assert summary.total_calories == 0
    assert summary.average_calories == 0
    assert summary.days_with_data == 0
    assert len(summary.buckets) == 7


def test_aggregate_week_buckets_by_local_day() -> None:
    late_evening = _meal(datetime(2024, 3, 11, 2, tzinfo=UTC), 400)

    utc_summary = aggregate_week([late_evening], WEEK_START)
    local_summary = aggregate_week(
        [late_evening], WEEK_START, ZoneInfo("America/New_York")
    )

    assert utc_summary.buckets[1].calories == 400
    assert local_summary.buckets[0].calories == 400


def test_compare_periods() -> None:
    change = compare_periods(_summary(500), _summary(400))
    assert (change.value, change.is_positive) == (25, True)

    drop = compare_periods(_summary(300), _summary(400))
    assert (drop.value, drop.is_positive) == (25, False)

    same = compare_periods(_summary(400), _summary(400))
    assert (same.value, same.is_positive) == (0, True)


def test_compare_periods_with_empty_previous() -> None:
    assert compare_periods(_summary(500), _summary(0)).value == 100
    empty = compare_periods(_summary(0), _summary(0))
    assert (empty.value, empty.is_positive) == (0, True)


def test_get_trend_compares_with_previous_week(meal_repository, user_id) -> None:
    for when, calories in [
        (datetime(2024, 3, 11, 12, tzinfo=UTC), 500),
        (datetime(2024, 3, 12, 12, tzinfo=UTC), 500),
        (datetime(2024, 3, 5, 12, tzinfo=UTC), 400),
    ]:
        meal_repository.create_meal(user_id, _meal(when, calories))
    service = StatsService(meal_repository)

    trend = asyncio.run(service.get_trend(user_id, date(2024, 3, 15)))

    assert trend.week_start == WEEK_START
    assert trend.current.total_calories == 1000
    assert trend.previous.average_calories == 400
    assert (trend.change.value, trend.change.is_positive) == (25, True)


def test_late_saturday_meal_lands_in_its_local_week(meal_repository, user_id) -> None:
    new_york = ZoneInfo("America/New_York")
    editor = MealEditor(name="Late snack", base=NutritionAnalysis(calories=400))
    saved = asyncio.run(
        MealLogService(meal_repository).save(
            user_id, editor, datetime(2024, 3, 17, 1, tzinfo=UTC), tz=new_york
        )
    )
    service = StatsService(meal_repository)

    this_week = asyncio.run(service.get_week(user_id, WEEK_START, new_york))
    next_week = asyncio.run(service.get_week(user_id, date(2024, 3, 17), new_york))

    assert saved.logged_at.date() == date(2024, 3, 16)
    assert this_week.buckets[6].day == "Sat"
    assert this_week.buckets[6].calories == 400
    assert next_week.total_calories == 0


def test_get_week_reaches_rows_stored_under_another_offset(
    meal_repository, user_id
) -> None:
    meal_repository.create_meal(
        user_id, _meal(datetime(2024, 3, 17, 1, tzinfo=UTC), 400)
    )
    service = StatsService(meal_repository)

    summary = asyncio.run(
        service.get_week(user_id, WEEK_START, ZoneInfo("America/New_York"))
    )

    assert summary.buckets[6].calories == 400
    assert summary.days_with_data == 1
