"""BMR, TDEE and macro target calculations (Mifflin-St Jeor)."""

import math

from nutriai.domain.errors import ValidationError
from nutriai.domain.nutrition import (
    GOAL_GAIN,
    GOAL_LOSE,
    GOAL_MAINTAIN,
    MacroTargets,
    NutritionResult,
    Profile,
)

CALORIE_ADJUSTMENT = 500
PROTEIN_SHARE = 0.30
CARBS_SHARE = 0.40
FAT_SHARE = 0.30
KCAL_PER_G_PROTEIN = 4
KCAL_PER_G_CARBS = 4
KCAL_PER_G_FAT = 9

_RECOMMENDATIONS = {
    GOAL_MAINTAIN: (
        "To maintain your weight, focus on eating balanced meals with plenty of "
        "vegetables, lean proteins, and whole grains. Stay consistent with your "
        "daily calorie target and maintain regular physical activity."
    ),
    GOAL_LOSE: (
        "For healthy weight loss, aim to lose 0.5-1 kg per week by maintaining "
        "this calorie deficit and combining it with regular exercise. Focus on "
        "protein-rich foods to preserve muscle mass. Incorporate both cardio and "
        "strength training for best results."
    ),
    GOAL_GAIN: (
        "To gain weight healthily, ensure you're getting enough protein (aim for "
        "1.6-2.2g per kg of body weight) and combine this calorie surplus with "
        "strength training for optimal muscle growth. Be patient - healthy muscle "
        "gain takes time!"
    ),
}


def build_profile(  # noqa: PLR0913
    age: object,
    gender: object,
    height: object,
    weight: object,
    activity: object,
    goal: object,
) -> Profile:
    """Validate raw request fields and return a profile."""
    if not all([age, gender, height, weight, activity, goal]):
        raise ValidationError("Missing required fields")
    return Profile(
        age=_to_number("age", age),
        gender=str(gender),
        height_cm=_to_number("height", height),
        weight_kg=_to_number("weight", weight),
        activity_factor=_to_number("activity", activity),
        goal=str(goal),
    )


def compute_nutrition(profile: Profile) -> NutritionResult:
    """Compute BMR, TDEE, target calories and macro grams for a profile."""
    bmr = calculate_bmr(profile)
    tdee = bmr * profile.activity_factor
    target = target_calories(tdee, profile.goal)
    macros = MacroTargets(
        protein_g=_round_half_up(target * PROTEIN_SHARE / KCAL_PER_G_PROTEIN),
        carbs_g=_round_half_up(target * CARBS_SHARE / KCAL_PER_G_CARBS),
        fat_g=_round_half_up(target * FAT_SHARE / KCAL_PER_G_FAT),
    )
    return NutritionResult(
        bmr=_round_half_up(bmr),
        tdee=_round_half_up(tdee),
        target_calories=_round_half_up(target),
        macros=macros,
        recommendation=recommendation_for(profile.goal, target),
    )


def calculate_bmr(profile: Profile) -> float:
    """Return basal metabolic rate in kcal/day."""
    base = 10 * profile.weight_kg + 6.25 * profile.height_cm - 5 * profile.age
    if profile.gender == "male":
        return base + 5
    return base - 161


def target_calories(tdee: float, goal: str) -> float:
    """Apply the goal-specific calorie adjustment to TDEE."""
    if goal == GOAL_LOSE:
        return tdee - CALORIE_ADJUSTMENT
    if goal == GOAL_GAIN:
        return tdee + CALORIE_ADJUSTMENT
    return tdee


def recommendation_for(goal: str, target: float) -> str:
    """Return the coaching text for a goal."""
    intro = (
        "Based on your profile, you should consume approximately "
        f"{_round_half_up(target)} calories per day. "
    )
    return intro + _RECOMMENDATIONS.get(goal, _RECOMMENDATIONS[GOAL_MAINTAIN])


def _to_number(field: str, value: object) -> float:
    if isinstance(value, bool):
        raise ValidationError(f"Field '{field}' must be a number")
    try:
        number = float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError) as exc:
        raise ValidationError(f"Field '{field}' must be a number") from exc
    if not math.isfinite(number):
        raise ValidationError(f"Field '{field}' must be a number")
    return number


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)
