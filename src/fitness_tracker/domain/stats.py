"""Domain models for weekly statistics."""

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class WeeklyBucket:
    """Summed macros for one calendar day of a week."""

    day: str
    date: date
    protein_g: float
    carbs_g: float
    fat_g: float
    calories: float


@dataclass(frozen=True)
class WeeklySummary:
    """Seven day buckets with totals and the daily average."""

    buckets: list[WeeklyBucket]
    total_calories: float
    average_calories: int
    days_with_data: int


@dataclass(frozen=True)
class PeriodChange:
    """Signed percentage change between two periods."""

    value: int
    is_positive: bool


@dataclass(frozen=True)
class WeeklyTrend:
    """A week compared against the week before it."""

    week_start: date
    current: WeeklySummary
    previous: WeeklySummary
    change: PeriodChange
