"""Weekly nutrition statistics."""

import asyncio
from dataclasses import dataclass
from datetime import date, datetime, timedelta, tzinfo
from typing import Protocol
from uuid import UUID

from fitness_tracker.domain.meals import MealRecord
from fitness_tracker.domain.stats import (
    PeriodChange,
    WeeklyBucket,
    WeeklySummary,
    WeeklyTrend,
)
from fitness_tracker.services.meals import record_totals
from fitness_tracker.services.scaling import round_half_up

DAY_LABELS = ("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat")
DAYS_PER_WEEK = 7


class StatsRepository(Protocol):
    """Persistence interface for meal statistics."""

    def list_meals(self, user_id: UUID, start: date, end: date) -> list[MealRecord]:
        """Return meals logged between two local dates, inclusive."""


def week_start_for(today: date, weeks_ago: int = 0) -> date:
    """Return the Sunday starting the week ``weeks_ago`` weeks before today."""
    days_since_sunday = (today.weekday() + 1) % DAYS_PER_WEEK
    return today - timedelta(days=days_since_sunday + weeks_ago * DAYS_PER_WEEK)


def local_day(moment: datetime, tz: tzinfo | None = None) -> date:
    """Return the calendar date of a timestamp in the caller's timezone."""
    if tz is not None and moment.tzinfo is not None:
        return moment.astimezone(tz).date()
    return moment.date()


def aggregate_week(
    records: list[MealRecord], week_start: date | datetime, tz: tzinfo | None = None
) -> WeeklySummary:
    """Bucket meals into the seven days starting at ``week_start``."""
    if isinstance(week_start, datetime):
        week_start = local_day(week_start, tz)
    days = [week_start + timedelta(days=offset) for offset in range(DAYS_PER_WEEK)]
    sums = {day: [0.0, 0.0, 0.0, 0.0] for day in days}
    for record in records:
        bucket = sums.get(local_day(record.logged_at, tz))
        if bucket is None:
            continue
        totals = record_totals(record)
        bucket[0] += totals.protein_g
        bucket[1] += totals.carbs_g
        bucket[2] += totals.fat_g
        bucket[3] += totals.calories

    buckets = [
        WeeklyBucket(
            day=DAY_LABELS[(day.weekday() + 1) % DAYS_PER_WEEK],
            date=day,
            protein_g=sums[day][0],
            carbs_g=sums[day][1],
            fat_g=sums[day][2],
            calories=sums[day][3],
        )
        for day in days
    ]
    total_calories = sum(bucket.calories for bucket in buckets)
    days_with_data = sum(1 for bucket in buckets if bucket.calories > 0)
    average = round_half_up(total_calories / days_with_data) if days_with_data else 0
    return WeeklySummary(
        buckets=buckets,
        total_calories=total_calories,
        average_calories=average,
        days_with_data=days_with_data,
    )


def compare_periods(current: WeeklySummary, previous: WeeklySummary) -> PeriodChange:
    """Return the percentage change of the daily average between two periods."""
    current_avg = current.average_calories
    previous_avg = previous.average_calories
    if previous_avg == 0:
        if current_avg > 0:
            return PeriodChange(value=100, is_positive=True)
        return PeriodChange(value=0, is_positive=True)
    change = abs((current_avg - previous_avg) / previous_avg) * 100
    return PeriodChange(
        value=round_half_up(change), is_positive=current_avg >= previous_avg
    )


@dataclass
class StatsService:
    """Service for weekly trends in the user's local calendar."""

    repository: StatsRepository

    async def get_week(
        self, user_id: UUID, week_start: date, tz: tzinfo | None = None
    ) -> WeeklySummary:
        """Return the aggregated week starting at ``week_start``.

        The stored date is the local day at logging time; the query is padded
        by a day on each side so rows saved under another offset still reach
        the local-day bucketing.
        """
        start = week_start - timedelta(days=1)
        end = week_start + timedelta(days=DAYS_PER_WEEK)
        records = await asyncio.to_thread(
            self.repository.list_meals, user_id, start, end
        )
        return aggregate_week(records, week_start, tz)

    async def get_trend(
        self,
        user_id: UUID,
        today: date,
        weeks_ago: int = 0,
        tz: tzinfo | None = None,
    ) -> WeeklyTrend:
        """Return a week and its comparison with the week before."""
        start = week_start_for(today, weeks_ago)
        current = await self.get_week(user_id, start, tz)
        previous = await self.get_week(
            user_id, start - timedelta(days=DAYS_PER_WEEK), tz
        )
        return WeeklyTrend(
            week_start=start,
            current=current,
            previous=previous,
            change=compare_periods(current, previous),
        )
