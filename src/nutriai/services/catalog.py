"""Static food catalog, featured foods and motivational quotes."""

import random
from datetime import date
from types import MappingProxyType

from nutriai.domain.foods import DailyFood, FoodRecord

FOOD_CATALOG: MappingProxyType[str, FoodRecord] = MappingProxyType(
    {
        "salad": FoodRecord(
            name="Mixed Green Salad",
            calories=150,
            protein_g=8,
            carbs_g=12,
            fat_g=9,
            fiber_g=5,
            vitamins="A, C, K",
            minerals="Iron, Calcium",
            benefits=(
                "Rich in antioxidants, supports digestive health, low calorie "
                "density makes it great for weight management"
            ),
            tips=(
                "Add lean protein like grilled chicken or chickpeas for a complete "
                "meal. Use olive oil-based dressing for healthy fats."
            ),
        ),
        "chicken": FoodRecord(
            name="Grilled Chicken Breast",
            calories=165,
            protein_g=31,
            carbs_g=0,
            fat_g=3.6,
            fiber_g=0,
            vitamins="B3, B6",
            minerals="Phosphorus, Selenium",
            benefits=(
                "Excellent source of lean protein, supports muscle growth and "
                "repair, low in calories"
            ),
            tips=(
                "Pair with complex carbs and vegetables for a balanced meal. "
                "Marinate for added flavor without extra calories."
            ),
        ),
        "rice": FoodRecord(
            name="Brown Rice",
            calories=216,
            protein_g=5,
            carbs_g=45,
            fat_g=1.8,
            fiber_g=3.5,
            vitamins="B1, B3, B6",
            minerals="Magnesium, Manganese",
            benefits=(
                "Provides sustained energy, rich in fiber for digestive health, "
                "contains beneficial antioxidants"
            ),
            tips=(
                "Cook in batches for meal prep. Combine with protein and "
                "vegetables for complete nutrition."
            ),
        ),
        "avocado": FoodRecord(
            name="Avocado",
            calories=160,
            protein_g=2,
            carbs_g=9,
            fat_g=15,
            fiber_g=7,
            vitamins="K, E, C, B5, B6",
            minerals="Potassium, Magnesium",
            benefits=(
                "Heart-healthy monounsaturated fats, may help lower cholesterol, "
                "supports nutrient absorption"
            ),
            tips=(
                "Perfect for breakfast with eggs or as a healthy fat source in any "
                "meal. Store with pit to prevent browning."
            ),
        ),
        "salmon": FoodRecord(
            name="Grilled Salmon",
            calories=206,
            protein_g=22,
            carbs_g=0,
            fat_g=13,
            fiber_g=0,
            vitamins="D, B12, B6",
            minerals="Selenium, Potassium",
            benefits=(
                "Rich in omega-3 fatty acids, supports brain and heart health, "
                "reduces inflammation"
            ),
            tips=(
                "Aim for 2-3 servings per week. Pair with leafy greens and whole "
                "grains for optimal nutrition."
            ),
        ),
        "oatmeal": FoodRecord(
            name="Oatmeal",
            calories=154,
            protein_g=6,
            carbs_g=27,
            fat_g=3,
            fiber_g=4,
            vitamins="B1, B5",
            minerals="Manganese, Phosphorus, Magnesium",
            benefits=(
                "Lowers cholesterol, provides sustained energy, supports digestive "
                "health"
            ),
            tips=(
                "Top with berries, nuts, and a drizzle of honey for a complete "
                "breakfast. Add protein powder for extra protein."
            ),
        ),
        "eggs": FoodRecord(
            name="Scrambled Eggs",
            calories=140,
            protein_g=12,
            carbs_g=1,
            fat_g=10,
            fiber_g=0,
            vitamins="A, D, B12",
            minerals="Selenium, Choline",
            benefits=(
                "Complete protein source with all essential amino acids, supports "
                "eye health and brain function"
            ),
            tips=(
                "Cook with minimal oil. Pair with whole grain toast and vegetables "
                "for a balanced breakfast."
            ),
        ),
        "banana": FoodRecord(
            name="Banana",
            calories=105,
            protein_g=1.3,
            carbs_g=27,
            fat_g=0.4,
            fiber_g=3,
            vitamins="B6, C",
            minerals="Potassium, Magnesium",
            benefits=(
                "Quick energy source, supports heart health, helps regulate blood "
                "pressure"
            ),
            tips=(
                "Perfect pre or post-workout snack. Freeze for smoothies or nice "
                "cream."
            ),
        ),
        "broccoli": FoodRecord(
            name="Steamed Broccoli",
            calories=55,
            protein_g=4,
            carbs_g=11,
            fat_g=0.6,
            fiber_g=5,
            vitamins="C, K, A",
            minerals="Folate, Potassium",
            benefits=(
                "Cancer-fighting compounds, supports immune system, excellent for "
                "bone health"
            ),
            tips=(
                "Lightly steam to preserve nutrients. Season with garlic and lemon "
                "for enhanced flavor."
            ),
        ),
        "yogurt": FoodRecord(
            name="Greek Yogurt",
            calories=100,
            protein_g=17,
            carbs_g=6,
            fat_g=0.4,
            fiber_g=0,
            vitamins="B12, B2",
            minerals="Calcium, Phosphorus",
            benefits=(
                "High in probiotics for gut health, excellent protein source, "
                "supports bone health"
            ),
            tips=(
                "Choose plain varieties to avoid added sugars. Top with berries "
                "and nuts for a nutritious snack."
            ),
        ),
    }
)

DAILY_FOODS: tuple[DailyFood, ...] = (
    DailyFood(
        name="Avocado",
        emoji="\N{AVOCADO}",
        description=(
            "Rich in healthy fats, fiber, and various vitamins. Avocados are "
            "nutrient-dense fruits that provide heart-healthy monounsaturated fats "
            "and can help improve cholesterol levels."
        ),
        calories=160,
        fat="15g",
        fiber="7g",
        protein="2g",
    ),
    DailyFood(
        name="Blueberries",
        emoji="\N{BLUEBERRIES}",
        description=(
            "Packed with antioxidants, particularly anthocyanins. Excellent for "
            "brain health and may help reduce DNA damage."
        ),
        calories=84,
        fat="0.5g",
        fiber="4g",
        protein="1g",
    ),
    DailyFood(
        name="Salmon",
        emoji="\N{FISH}",
        description=(
            "Excellent source of omega-3 fatty acids, high-quality protein, and "
            "vitamin D. Supports heart health and brain function."
        ),
        calories=206,
        fat="13g",
        fiber="0g",
        protein="22g",
    ),
)

MOTIVATION_QUOTES: tuple[str, ...] = (
    "Your body is a reflection of your lifestyle. Make it count! \N{FLEXED BICEPS}",
    "Small daily improvements lead to stunning results over time. \N{GLOWING STAR}",
    "The only bad workout is the one that didn't happen. Keep moving! \N{RUNNER}",
    "Eat well, move daily, hydrate often, sleep well, and be kind to yourself. "
    "\N{GREEN HEART}",
    "Progress, not perfection. Every healthy choice matters! \N{DIRECT HIT}",
    "Your health is an investment, not an expense. Invest wisely! \N{GEM STONE}",
    "Consistency beats intensity. Show up every day! "
    "\N{CHART WITH UPWARDS TREND}",
    "Food is fuel. Choose premium for peak performance! \N{ROCKET}",
)


def daily_food(today: date | None = None) -> DailyFood:
    """Return the featured food for a calendar day."""
    day = (today or date.today()).day
    return DAILY_FOODS[day % len(DAILY_FOODS)]


def daily_motivation(today: date | None = None) -> str:
    """Return the motivational quote for a calendar day."""
    day = (today or date.today()).day
    return MOTIVATION_QUOTES[day % len(MOTIVATION_QUOTES)]


def pick_random_food(rng: random.Random | None = None) -> FoodRecord:
    """Return a uniformly random catalog entry."""
    chooser = rng or random
    return chooser.choice(list(FOOD_CATALOG.values()))
