"""Nutrition domain models."""

from dataclasses import dataclass

GOAL_LOSE = "lose"
GOAL_MAINTAIN = "maintain"
GOAL_GAIN = "gain"


@dataclass(frozen=True)
class Profile:
    """User body metrics used for energy estimates."""

    age: float
    gender: str
    height_cm: float
    weight_kg: float
    activity_factor: float
    goal: str


@dataclass(frozen=True)
class MacroTargets:
    """Daily macronutrient targets in grams."""

    protein_g: int
    carbs_g: int
    fat_g: int


@dataclass(frozen=True)
class NutritionResult:
    """Energy estimates and macro targets derived from a profile."""

    bmr: int
    tdee: int
    target_calories: int
    macros: MacroTargets
    recommendation: str
