"""
Habit recommendations tailored to the user's goal, sleep and stress.

Habits are collected from fixed groups (hydration, nutrition, recovery,
training, health) and returned by priority, highest first.  Equal
priorities keep collection order.
"""

from __future__ import annotations

from app.core.validation import clamp_int, clamp_to
from app.decision.macros import water_intake_liters
from app.schemas.enums import ExperienceLevel, FitnessGoal, HabitCategory
from app.schemas.habits import HabitRequest, RecommendedHabit

_POOR_SLEEP_BELOW = 6
_HIGH_STRESS_ABOVE = 6
_OVERWEIGHT_BMI = 25.0

_GOAL_NUTRITION_HABITS: dict[FitnessGoal, list[RecommendedHabit]] = {
    FitnessGoal.MUSCLE_GAIN: [
        RecommendedHabit(
            name="Eat protein at every meal",
            description="25-40g of protein per meal to maximize protein synthesis",
            icon="🥩",
            category=HabitCategory.NUTRITION,
            priority=9,
            reason="Spreading protein across meals optimizes muscle gain",
        ),
        RecommendedHabit(
            name="Never skip the post-workout meal",
            description="Protein plus carbs within 2h of training",
            icon="🍌",
            category=HabitCategory.NUTRITION,
            priority=8,
            reason="Maximizes recovery and muscle growth",
        ),
    ],
    FitnessGoal.FAT_LOSS: [
        RecommendedHabit(
            name="Log your meals",
            description="Track what you eat to stay in a deficit",
            icon="📝",
            category=HabitCategory.NUTRITION,
            priority=9,
            reason="Tracking is key to keeping the calorie deficit",
        ),
        RecommendedHabit(
            name="Eat slowly",
            description="Take at least 20 minutes per meal",
            icon="🍽️",
            category=HabitCategory.NUTRITION,
            priority=7,
            reason="Improves satiety and reduces overeating",
        ),
    ],
}

_SLEEP_HABITS = [
    RecommendedHabit(
        name="Sleep 7-8 hours",
        description="Go to bed and get up at the same time every day",
        icon="😴",
        category=HabitCategory.RECOVERY,
        priority=10,
        reason="Your sleep quality is low, and sleep drives recovery",
    ),
    RecommendedHabit(
        name="No screens 1h before bed",
        description="Avoid blue light to sleep better",
        icon="📵",
        category=HabitCategory.RECOVERY,
        priority=8,
        reason="Helps melatonin production",
    ),
]

_STRESS_HABIT = RecommendedHabit(
    name="10 minutes of meditation",
    description="Guided meditation or deep breathing every day",
    icon="🧘",
    category=HabitCategory.MINDSET,
    priority=9,
    reason="Your stress is high, which affects cortisol and recovery",
)

_WARM_UP_HABIT = RecommendedHabit(
    name="Warm up 5-10 min",
    description="Easy cardio plus mobility before training",
    icon="🔥",
    category=HabitCategory.TRAINING,
    priority=7,
    reason="Prevents injuries and improves performance",
)

_LOG_WEIGHTS_HABIT = RecommendedHabit(
    name="Log your training weights",
    description="Write down sets, reps and weight to keep progressing",
    icon="📊",
    category=HabitCategory.TRAINING,
    priority=8,
    reason="Tracked progression is key to improving",
)

_SUNSCREEN_HABIT = RecommendedHabit(
    name="Daily sunscreen",
    description="SPF 30+ even on cloudy days",
    icon="☀️",
    category=HabitCategory.SKIN,
    priority=6,
    reason="Protects the skin from premature aging",
)

_STEPS_HABIT = RecommendedHabit(
    name="Walk 10,000 steps",
    description="Extra everyday movement burns calories without effort",
    icon="🚶",
    category=HabitCategory.TRAINING,
    priority=8,
    reason="Daily steps raise energy expenditure significantly",
)

_STRETCH_HABIT = RecommendedHabit(
    name="Stretch after training",
    description="5-10 minutes of stretching after each workout",
    icon="🧘‍♂️",
    category=HabitCategory.RECOVERY,
    priority=6,
    reason="Improves flexibility and reduces soreness",
)

_SUPPLEMENTS_HABIT = RecommendedHabit(
    name="Take your supplements",
    description="Creatine, vitamin D and omega-3 every day",
    icon="💊",
    category=HabitCategory.NUTRITION,
    priority=7,
    reason="Basic supplements with proven benefits",
)


def body_mass_index(weight_kg: float, height_cm: float) -> float:
    height_m = clamp_to("height_cm", height_cm) / 100
    return clamp_to("weight_kg", weight_kg) / (height_m * height_m)


def recommend_habits(
    weight_kg: float,
    height_cm: float,
    fitness_goal: FitnessGoal,
    experience_level: ExperienceLevel = ExperienceLevel.BEGINNER,
    sleep_quality: int = 7,
    stress_level: int = 5,
) -> list[RecommendedHabit]:
    """Personalized habits, most important first."""
    goal = FitnessGoal(fitness_goal)
    sleep_quality = clamp_int("level", sleep_quality, "sleep_quality")
    stress_level = clamp_int("level", stress_level, "stress_level")
    liters = water_intake_liters(weight_kg, height_cm, goal)

    habits = [RecommendedHabit(
        name=f"Drink {liters:.1f}L of water",
        description="Daily hydration sized to your weight and goal",
        icon="💧",
        category=HabitCategory.HYDRATION,
        priority=10,
        reason="Hydration underpins performance and health",
    )]
    habits.extend(_GOAL_NUTRITION_HABITS.get(goal, []))

    if sleep_quality < _POOR_SLEEP_BELOW:
        habits.extend(_SLEEP_HABITS)
    if stress_level > _HIGH_STRESS_ABOVE:
        habits.append(_STRESS_HABIT)

    habits.append(_WARM_UP_HABIT)
    if ExperienceLevel(experience_level) is not ExperienceLevel.ADVANCED:
        habits.append(_LOG_WEIGHTS_HABIT)

    habits.append(_SUNSCREEN_HABIT)
    if body_mass_index(weight_kg, height_cm) > _OVERWEIGHT_BMI or goal is FitnessGoal.FAT_LOSS:
        habits.append(_STEPS_HABIT)

    habits.append(_STRETCH_HABIT)
    habits.append(_SUPPLEMENTS_HABIT)

    return sorted(habits, key=lambda h: -h.priority)


def habits_for(request: HabitRequest) -> list[RecommendedHabit]:
    """:func:`recommend_habits` for a validated request model."""
    return recommend_habits(
        request.weight_kg,
        request.height_cm,
        request.fitness_goal,
        request.experience_level,
        request.sleep_quality,
        request.stress_level,
    )
