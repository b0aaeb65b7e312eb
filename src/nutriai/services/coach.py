"""Keyword-matched nutrition coach replies."""

from dataclasses import dataclass

from nutriai.domain.errors import ValidationError
from nutriai.domain.logs import ChatExchange
from nutriai.services.logs import LogService


@dataclass(frozen=True)
class CoachTopic:
    """A canned coach answer and the keywords that trigger it."""

    name: str
    keywords: tuple[str, ...]
    response: str


# Order matters: the first topic with a matching keyword wins.
COACH_TOPICS: tuple[CoachTopic, ...] = (
    CoachTopic(
        name="protein",
        keywords=("protein", "amino acid", "muscle"),
        response=(
            "\N{EGG} Protein is crucial for muscle growth, repair, and overall body "
            "function. Adults should aim for 0.8-1.0g per kg of body weight, or "
            "1.6-2.2g per kg if you're very active or building muscle. Best sources "
            "include: lean meats (chicken, turkey), fish (especially salmon), eggs, "
            "Greek yogurt, legumes (lentils, chickpeas), tofu, and quinoa. Try to "
            "distribute protein throughout the day - aim for 20-30g per meal for "
            "optimal muscle protein synthesis. Don't forget that plant proteins can "
            "be just as effective when properly combined!"
        ),
    ),
    CoachTopic(
        name="weight_loss",
        keywords=("weight loss", "lose weight", "fat loss", "slim"),
        response=(
            "\N{DIRECT HIT} Sustainable weight loss comes from creating a moderate "
            "calorie deficit while maintaining proper nutrition. Here's your action "
            "plan: 1) Calculate your TDEE and eat 300-500 calories below it, "
            "2) Prioritize protein (1.6-2g per kg) to preserve muscle mass, "
            "3) Include strength training 3-4x per week, 4) Stay hydrated (2-3L "
            "water daily), 5) Get 7-9 hours of quality sleep, 6) Track your food "
            "intake for awareness, 7) Aim for 0.5-1kg loss per week. Remember: "
            "crash diets don't work long-term. Focus on building healthy habits you "
            "can maintain forever!"
        ),
    ),
    CoachTopic(
        name="carbs",
        keywords=("carb", "carbohydrate", "sugar", "glucose"),
        response=(
            "\N{COOKED RICE} Carbohydrates are your body's preferred energy source - "
            "they're not the enemy! Focus on complex carbs that provide sustained "
            "energy: whole grains (brown rice, quinoa, oats), sweet potatoes, "
            "fruits, vegetables, and legumes. These are rich in fiber, vitamins, and "
            "minerals. Simple carbs (white bread, sugary drinks) cause blood sugar "
            "spikes and crashes. Timing matters: consume carbs around your workouts "
            "for energy and recovery. Active individuals need 3-5g per kg "
            "bodyweight. If you're less active, 2-3g per kg is sufficient. Quality "
            "over quantity!"
        ),
    ),
    CoachTopic(
        name="hydration",
        keywords=("water", "hydrat", "drink", "fluid"),
        response=(
            "\N{DROPLET} Hydration is fundamental to every body function! Aim for "
            "2-3 liters daily, more if you exercise or live in hot climates. "
            "Benefits include: improved digestion, clearer skin, better energy "
            "levels, enhanced exercise performance, proper temperature regulation, "
            "and better appetite control. Signs of dehydration: dark urine, fatigue, "
            "headaches, dry mouth. Pro tips: drink a glass upon waking, keep a water "
            "bottle nearby, drink before each meal, set hourly reminders, eat "
            "water-rich foods (cucumbers, watermelon). During exercise, drink "
            "500-750ml per hour of activity. Electrolytes matter too - add a pinch "
            "of salt or use electrolyte tablets for long workouts!"
        ),
    ),
    CoachTopic(
        name="muscle",
        keywords=("muscle", "gain", "bulk", "mass"),
        response=(
            "\N{FLEXED BICEPS} Building muscle requires four key elements: "
            "1) **Nutrition**: Eat in a calorie surplus (250-500 cal above TDEE), "
            "consume 1.6-2.2g protein per kg bodyweight, don't fear carbs - they "
            "fuel your workouts. 2) **Training**: Lift weights 3-5x per week with "
            "progressive overload (gradually increase weight/reps), focus on "
            "compound movements (squats, deadlifts, bench press), train each muscle "
            "group 2x per week. 3) **Recovery**: Sleep 7-9 hours nightly (this is "
            "when muscles grow!), take 1-2 rest days weekly, manage stress. "
            "4) **Consistency**: Results take months, not weeks. Track your lifts, "
            "be patient, stay consistent. Muscle growth is a marathon, not a sprint!"
        ),
    ),
    CoachTopic(
        name="meal_plan",
        keywords=("meal plan", "diet plan", "what to eat", "meal prep"),
        response=(
            "\N{FORK AND KNIFE WITH PLATE} Here's a balanced daily meal plan "
            "template: **Breakfast** (7-8am): Oatmeal with berries, nuts, and "
            "protein powder OR eggs with whole grain toast and avocado. **Snack** "
            "(10am): Greek yogurt with fruit OR handful of almonds. **Lunch** "
            "(12-1pm): Grilled chicken/fish with quinoa and roasted vegetables OR "
            "large salad with lean protein and olive oil dressing. **Snack** "
            "(3-4pm): Apple with peanut butter OR protein shake. **Dinner** "
            "(6-7pm): Salmon with sweet potato and steamed broccoli OR lean beef "
            "stir-fry with brown rice. **Evening** (optional): Cottage cheese with "
            "berries if hungry. Meal prep Sunday strategy: cook 3-4 protein sources, "
            "prepare 3-4 carb sources, wash and chop vegetables, portion into "
            "containers. This ensures healthy choices all week!"
        ),
    ),
    CoachTopic(
        name="supplements",
        keywords=("supplement", "vitamin", "pill", "creatine", "protein powder"),
        response=(
            "\N{PILL} Supplements support your diet but never replace whole foods. "
            "Essential supplements to consider: 1) **Protein Powder**: Convenient "
            "protein source (whey for quick absorption, casein for slow release, "
            "plant-based for vegans). 2) **Creatine Monohydrate**: 5g daily, proven "
            "to increase strength and muscle mass. 3) **Vitamin D**: 2000-4000 IU "
            "daily if you have limited sun exposure. 4) **Omega-3**: 1-2g daily if "
            "you don't eat fatty fish regularly. 5) **Multivitamin**: Insurance "
            "policy for micronutrient gaps. 6) **Magnesium**: 200-400mg for sleep "
            "and recovery. NOT essential but helpful: Pre-workout (caffeine + "
            "beta-alanine), BCAAs (if you train fasted). Always choose third-party "
            "tested brands. Consult a doctor before starting any supplement regimen!"
        ),
    ),
    CoachTopic(
        name="fasting",
        keywords=("fast", "intermittent fasting", "if", "skip meal"),
        response=(
            "\N{ALARM CLOCK} Intermittent fasting is an eating pattern, not a diet. "
            "Popular methods: 16:8 (fast 16 hours, eat within 8-hour window), 18:6, "
            "5:2 (eat normally 5 days, reduce calories 2 days). Benefits: may "
            "improve insulin sensitivity, enhance fat burning, simplify eating "
            "schedule, reduce calorie intake naturally. Important: IF doesn't "
            "override calories - you still need to eat appropriate amounts. Not for "
            "everyone: avoid if pregnant, have eating disorder history, or have "
            "certain medical conditions. Start gradually: begin with 12-hour fast "
            "and extend. Stay hydrated during fasting. Break fasts with balanced "
            "meals, not junk food. IF works for some, not all - find what's "
            "sustainable for YOU!"
        ),
    ),
    CoachTopic(
        name="cardio",
        keywords=("cardio", "running", "aerobic", "endurance"),
        response=(
            "\N{RUNNER} Cardio is excellent for heart health, calorie burning, and "
            "endurance! Types: 1) **LISS** (Low-Intensity Steady State): 30-60 min "
            "at 60-70% max heart rate, great for recovery and fat burning. "
            "2) **HIIT** (High-Intensity Interval Training): Short bursts of max "
            "effort with rest periods, burns more calories in less time, boosts "
            "metabolism. 3) **MISS** (Moderate-Intensity): 20-40 min at 70-80% max "
            "heart rate, balanced approach. Frequency: 2-5x weekly depending on "
            "goals. For fat loss: combine with strength training. For muscle "
            "building: don't overdo it - 2-3 sessions weekly. Best options: running, "
            "cycling, swimming, rowing, jump rope, dancing. Find activities you "
            "enjoy for long-term adherence!"
        ),
    ),
    CoachTopic(
        name="sleep",
        keywords=("sleep", "rest", "recover", "tired"),
        response=(
            "\N{SLEEPING FACE} Sleep is when your body repairs and grows - it's NOT "
            "optional! Aim for 7-9 hours nightly. Benefits: muscle recovery, "
            "hormonal balance (testosterone, growth hormone), better performance, "
            "reduced injury risk, improved mental health, enhanced fat loss. Sleep "
            "hygiene tips: 1) Consistent sleep/wake times, 2) Dark, cool room "
            "(65-68\N{DEGREE SIGN}F), 3) No screens 1 hour before bed, 4) Avoid "
            "caffeine after 2pm, 5) No large meals 2-3 hours before sleep, "
            "6) Regular exercise (but not too close to bedtime), 7) Manage stress "
            "through meditation or journaling. Poor sleep = higher cortisol = more "
            "fat storage + less muscle growth. Prioritize sleep like you prioritize "
            "training!"
        ),
    ),
)

DEFAULT_RESPONSE = (
    "\N{WAVING HAND SIGN} I'm your AI nutrition coach! I can help you with: "
    "**Nutrition**: protein intake, macros, meal planning, supplements, hydration. "
    "**Weight Management**: fat loss, muscle building, body recomposition. "
    "**Training**: workout advice, cardio vs strength, exercise selection. "
    "**Health**: sleep, recovery, stress management, general wellness. What "
    "specific question can I help you with today? The more details you provide, "
    "the better I can assist you!"
)


def match_topic(message: str) -> CoachTopic | None:
    """Return the first topic with a keyword contained in the message."""
    lowered = message.lower()
    for topic in COACH_TOPICS:
        if any(keyword in lowered for keyword in topic.keywords):
            return topic
    return None


def respond(message: str) -> str:
    """Return the canned coach reply for a message."""
    topic = match_topic(message)
    if topic is None:
        return DEFAULT_RESPONSE
    return topic.response


@dataclass
class ChatService:
    """Answers coach messages and keeps per-user chat history."""

    log_service: LogService

    def reply(self, user_id: str, message: str | None) -> ChatExchange:
        """Answer a message and record the exchange."""
        if not message or not message.strip():
            raise ValidationError("Message is required")
        return self.log_service.record_chat(user_id, message, respond(message))
