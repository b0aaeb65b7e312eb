"""Domain models for food, workout and chat logs."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class FoodLogEntry:
    """A food item logged by a user."""

    id: int
    food: str | None
    calories: float | None
    protein_g: float | None
    carbs_g: float | None
    fat_g: float | None
    meal: str | None
    timestamp: datetime


@dataclass(frozen=True)
class WorkoutEntry:
    """A workout logged by a user."""

    id: int
    exercise: str | None
    duration_min: float | None
    calories_burned: float | None
    intensity: str | None
    timestamp: datetime


@dataclass(frozen=True)
class ChatExchange:
    """A single coach chat turn."""

    user_message: str
    ai_response: str
    timestamp: datetime


@dataclass(frozen=True)
class DailyFoodTotals:
    """Summed macros for one day of food logs."""

    calories: float
    protein_g: float
    carbs_g: float
    fat_g: float


@dataclass(frozen=True)
class WorkoutTotals:
    """Summed workout effort for one day."""

    duration_min: float
    calories_burned: float
