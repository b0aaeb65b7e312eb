"""Food catalog domain models."""

from dataclasses import dataclass


@dataclass(frozen=True)
class FoodRecord:
    """Nutrition facts for a single catalog food."""

    name: str
    calories: float
    protein_g: float
    carbs_g: float
    fat_g: float
    fiber_g: float
    vitamins: str
    minerals: str
    benefits: str
    tips: str


@dataclass(frozen=True)
class DailyFood:
    """Featured food shown for a calendar day."""

    name: str
    emoji: str
    description: str
    calories: int
    fat: str
    fiber: str
    protein: str


@dataclass(frozen=True)
class FoodAnalysis:
    """Result of analyzing an uploaded food image."""

    food: FoodRecord
    image_url: str
