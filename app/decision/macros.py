"""
Macro and hydration targets — a small parameterised formula library.

Energy
------
Basal metabolic rate uses Katch-McArdle when body fat is known, and
Mifflin-St Jeor otherwise:

    Katch-McArdle:    370 + 21.6 × lean_mass_kg
    Mifflin-St Jeor:  10 × kg + 6.25 × cm - 5 × age + s
                      s = +5 (male), -161 (female), -78 (other)

TDEE is BMR times an activity factor (1.725 on training days, 1.55 on
rest days); calories are TDEE times the goal multiplier, plus a flat
200 kcal on training days.

Macros
------
Protein is set per kilogram of body weight by goal; fat takes 28 % of
calories; carbohydrates fill the remainder (never negative).

Hydration
---------
40 ml/kg for an active adult, plus a goal bonus, scaled by height
(×1.1 above 180 cm, ×0.9 below 165 cm), rounded to 0.1 L.
"""

from __future__ import annotations

from typing import Optional

from app.core.validation import clamp_to, round_half_up
from app.schemas.enums import FitnessGoal, Gender, MealType
from app.schemas.nutrition import HydrationTarget, MacroTargets, MealMacros

# ======================================================================
# Tables
# ======================================================================

GOAL_CALORIE_MULTIPLIERS: dict[FitnessGoal, float] = {
    FitnessGoal.MUSCLE_GAIN: 1.15,
    FitnessGoal.FAT_LOSS: 0.80,
    FitnessGoal.RECOMPOSITION: 1.0,
    FitnessGoal.MAINTENANCE: 1.0,
}

PROTEIN_PER_KG: dict[FitnessGoal, float] = {
    FitnessGoal.MUSCLE_GAIN: 2.2,
    FitnessGoal.FAT_LOSS: 2.4,
    FitnessGoal.RECOMPOSITION: 2.0,
    FitnessGoal.MAINTENANCE: 1.8,
}

_MIFFLIN_SEX_OFFSET: dict[Gender, float] = {
    Gender.MALE: 5.0,
    Gender.FEMALE: -161.0,
    Gender.OTHER: -78.0,
}

_ACTIVITY_TRAINING_DAY = 1.725
_ACTIVITY_REST_DAY = 1.55
_TRAINING_DAY_BONUS_KCAL = 200
_FAT_CALORIE_SHARE = 0.28

_HYDRATION_BASE_ML_PER_KG = 40
_HYDRATION_GOAL_BONUS_ML: dict[FitnessGoal, int] = {
    FitnessGoal.MUSCLE_GAIN: 5,
    FitnessGoal.FAT_LOSS: 3,
    FitnessGoal.RECOMPOSITION: 4,
    FitnessGoal.MAINTENANCE: 0,
}

_GOAL_LABELS: dict[FitnessGoal, str] = {
    FitnessGoal.MUSCLE_GAIN: "muscle gain",
    FitnessGoal.FAT_LOSS: "fat loss",
    FitnessGoal.RECOMPOSITION: "recomposition",
    FitnessGoal.MAINTENANCE: "maintenance",
}

# (name, type, time, calories, protein, carbs, fats) shares per meal.
_TRAINING_DAY_MEALS: list[tuple[str, MealType, str, float, float, float, float]] = [
    ("Breakfast", MealType.BREAKFAST, "08:00", 0.25, 0.25, 0.25, 0.25),
    ("Lunch", MealType.LUNCH, "13:00", 0.25, 0.25, 0.20, 0.30),
    ("Pre-workout", MealType.PRE_WORKOUT, "17:00", 0.10, 0.10, 0.20, 0.05),
    ("Post-workout", MealType.POST_WORKOUT, "19:30", 0.20, 0.25, 0.25, 0.10),
    ("Dinner", MealType.DINNER, "21:00", 0.20, 0.15, 0.10, 0.30),
]

_REST_DAY_MEALS: list[tuple[str, MealType, str, float, float, float, float]] = [
    ("Breakfast", MealType.BREAKFAST, "08:00", 0.25, 0.25, 0.30, 0.25),
    ("Lunch", MealType.LUNCH, "13:00", 0.30, 0.30, 0.30, 0.30),
    ("Snack", MealType.SNACK, "17:00", 0.15, 0.15, 0.20, 0.15),
    ("Dinner", MealType.DINNER, "20:00", 0.30, 0.30, 0.20, 0.30),
]


# ======================================================================
# Energy
# ======================================================================


def basal_metabolic_rate(
    weight_kg: float,
    height_cm: float,
    age: int,
    gender: Gender,
    body_fat_percent: Optional[float] = None,
) -> float:
    """BMR in kcal/day (Katch-McArdle if body fat is known)."""
    weight_kg = clamp_to("weight_kg", weight_kg)
    if body_fat_percent is not None:
        body_fat_percent = clamp_to("body_fat_percent", body_fat_percent)
        lean_mass = weight_kg * (1 - body_fat_percent / 100)
        return 370 + 21.6 * lean_mass

    height_cm = clamp_to("height_cm", height_cm)
    age = clamp_to("age", age)
    return 10 * weight_kg + 6.25 * height_cm - 5 * age + _MIFFLIN_SEX_OFFSET[Gender(gender)]


def protein_target(weight_kg: float, fitness_goal: FitnessGoal) -> int:
    """Daily protein in grams for *fitness_goal*."""
    weight_kg = clamp_to("weight_kg", weight_kg)
    return round_half_up(weight_kg * PROTEIN_PER_KG[FitnessGoal(fitness_goal)])


def recommend_macros(
    weight_kg: float,
    height_cm: float,
    age: int,
    gender: Gender,
    fitness_goal: FitnessGoal,
    body_fat_percent: Optional[float] = None,
    is_training_day: bool = False,
) -> MacroTargets:
    """Compute daily calorie and macro targets.

    Returns:
        :class:`MacroTargets` with whole-number calories and grams.
    """
    goal = FitnessGoal(fitness_goal)
    weight_kg = clamp_to("weight_kg", weight_kg)

    bmr = basal_metabolic_rate(weight_kg, height_cm, age, gender, body_fat_percent)
    activity = _ACTIVITY_TRAINING_DAY if is_training_day else _ACTIVITY_REST_DAY
    tdee = bmr * activity

    calories = round_half_up(tdee * GOAL_CALORIE_MULTIPLIERS[goal])
    if is_training_day:
        calories += _TRAINING_DAY_BONUS_KCAL

    protein = protein_target(weight_kg, goal)
    fat_calories = calories * _FAT_CALORIE_SHARE
    carb_calories = max(calories - protein * 4 - fat_calories, 0.0)

    return MacroTargets(
        calories=calories,
        protein_grams=protein,
        carbs_grams=round_half_up(carb_calories / 4),
        fat_grams=round_half_up(fat_calories / 9),
        protein_per_kg=PROTEIN_PER_KG[goal],
        bmr=round_half_up(bmr),
        tdee=round_half_up(tdee),
        is_training_day=is_training_day,
    )


def distribute_meals(targets: MacroTargets, is_training_day: Optional[bool] = None) -> list[MealMacros]:
    """Split daily targets across meals.

    Five meals (with pre/post-workout) on training days, four otherwise.
    *is_training_day* defaults to the flag stored on *targets*.
    """
    if is_training_day is None:
        is_training_day = targets.is_training_day
    table = _TRAINING_DAY_MEALS if is_training_day else _REST_DAY_MEALS

    return [
        MealMacros(
            name=name,
            type=meal_type,
            calories=round_half_up(targets.calories * kcal),
            protein=round_half_up(targets.protein_grams * protein),
            carbs=round_half_up(targets.carbs_grams * carbs),
            fats=round_half_up(targets.fat_grams * fats),
            time=time,
        )
        for name, meal_type, time, kcal, protein, carbs, fats in table
    ]


# ======================================================================
# Hydration
# ======================================================================


def water_intake_liters(weight_kg: float, height_cm: float, fitness_goal: FitnessGoal) -> float:
    """Daily water target in liters, rounded to 0.1."""
    weight_kg = clamp_to("weight_kg", weight_kg)
    height_cm = clamp_to("height_cm", height_cm)
    ml_per_kg = _HYDRATION_BASE_ML_PER_KG + _HYDRATION_GOAL_BONUS_ML[FitnessGoal(fitness_goal)]

    if height_cm > 180:
        height_multiplier = 1.1
    elif height_cm < 165:
        height_multiplier = 0.9
    else:
        height_multiplier = 1.0

    total_ml = weight_kg * ml_per_kg * height_multiplier
    return round_half_up(total_ml / 100) / 10


def recommend_hydration(weight_kg: float, height_cm: float, fitness_goal: FitnessGoal) -> HydrationTarget:
    """Daily hydration target with practical tips."""
    goal = FitnessGoal(fitness_goal)
    weight_kg = clamp_to("weight_kg", weight_kg)
    liters = water_intake_liters(weight_kg, height_cm, goal)

    tips = [
        "Drink a glass as soon as you wake up",
        "Keep a bottle with you",
        "Drink before you feel thirsty",
    ]
    if goal is FitnessGoal.MUSCLE_GAIN:
        tips.append("Drink more during and after training")
        tips.append("Consider electrolytes after training")
    elif goal is FitnessGoal.FAT_LOSS:
        tips.append("Drink a glass before every meal")

    return HydrationTarget(
        daily_liters=liters,
        per_kg_ml=round_half_up(liters * 1000 / weight_kg),
        reason=(
            f"Based on your weight ({weight_kg:g} kg), height "
            f"({clamp_to('height_cm', height_cm):g} cm) and {_GOAL_LABELS[goal]} goal"
        ),
        tips=tips,
    )
