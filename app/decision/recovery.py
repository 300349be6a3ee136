"""
Post-workout recovery — what to drink, eat and take after a session,
and how long to wait before hitting the same muscles again.

Intensity factor (1-3): one point, plus one for each of 6+ exercises,
15+ sets and 60+ minutes, capped at 3.
"""

from __future__ import annotations

import logging
from typing import Optional

from pydantic import BaseModel, Field

from app.core.validation import clamp_int, clamp_to, round_half_up
from app.schemas.enums import FitnessGoal
from app.schemas.recovery import (
    RecoveryHydration,
    RecoveryNutrition,
    RecoveryRecommendation,
    RecoveryRequest,
    RecoverySupplement,
    RecoveryWindow,
)

logger = logging.getLogger(__name__)

# ======================================================================
# Configuration
# ======================================================================

_DEFAULT_CARBS_PER_KG: dict[FitnessGoal, float] = {
    FitnessGoal.MUSCLE_GAIN: 0.8,
    FitnessGoal.FAT_LOSS: 0.3,
    FitnessGoal.RECOMPOSITION: 0.5,
    FitnessGoal.MAINTENANCE: 0.5,
}

_NUTRITION_TIPS: dict[FitnessGoal, str] = {
    FitnessGoal.MUSCLE_GAIN: "Prioritize fast carbs plus protein to maximize muscle protein synthesis.",
    FitnessGoal.FAT_LOSS: "Focus on protein with moderate carbs to preserve muscle.",
    FitnessGoal.RECOMPOSITION: "Balance protein and carbs for optimal recovery.",
    FitnessGoal.MAINTENANCE: "Keep your usual post-workout macros.",
}

# (minimum intensity factor, tip), highest first.
_RECOVERY_TIPS: list[tuple[int, str]] = [
    (3, "Hard session. Prioritize quality sleep and avoid training the same muscles for 48-72h."),
    (2, "Good session. Rest at least 48h before working these muscles again."),
    (1, "Light session. You can train again tomorrow if you feel recovered."),
]

_POST_WORKOUT_TIMING = "Within 30-60 minutes after training"


class RecoveryConfig(BaseModel):
    # Intensity thresholds
    many_exercises: int = 6
    many_sets: int = 15
    long_workout_minutes: float = 60
    # Hydration
    during_ml_per_hour: float = 750
    post_workout_base_ml: int = 500
    post_workout_ml_per_intensity: int = 100
    daily_ml_per_kg: float = 38
    # Nutrition
    protein_per_kg: float = 0.4
    carbs_per_kg: dict[FitnessGoal, float] = Field(
        default_factory=lambda: dict(_DEFAULT_CARBS_PER_KG),
    )


DEFAULT_RECOVERY_CONFIG = RecoveryConfig()


def intensity_factor(
    workout_duration_minutes: float,
    exercise_count: int,
    total_sets: int,
    config: Optional[RecoveryConfig] = None,
) -> int:
    cfg = config or DEFAULT_RECOVERY_CONFIG
    points = 1 + sum((
        clamp_int("count", exercise_count, "exercise_count") >= cfg.many_exercises,
        clamp_int("count", total_sets, "total_sets") >= cfg.many_sets,
        clamp_to("minutes", workout_duration_minutes, "workout_duration_minutes") >= cfg.long_workout_minutes,
    ))
    return min(points, 3)


def _supplements(
    goal: FitnessGoal,
    intensity: int,
    protein_grams: int,
    carbs_grams: int,
) -> list[RecoverySupplement]:
    supplements = [
        RecoverySupplement(
            name="Whey protein",
            dosage=f"{protein_grams}g",
            timing=_POST_WORKOUT_TIMING,
            reason="Speeds up muscle protein synthesis and recovery.",
        ),
        RecoverySupplement(
            name="Creatine monohydrate",
            dosage="5g",
            timing="With your post-workout shake",
            reason="Improves recovery, strength and performance in the next sessions.",
        ),
    ]
    if goal is FitnessGoal.MUSCLE_GAIN:
        supplements.append(RecoverySupplement(
            name="Fast carbs (maltodextrin / cyclodextrin)",
            dosage=f"{carbs_grams}g",
            timing="With your post-workout shake",
            reason="Refills muscle glycogen and improves protein uptake.",
        ))
    if intensity >= 2:
        supplements.append(RecoverySupplement(
            name="Electrolytes",
            dosage="1 sachet",
            timing="During or after training",
            reason="Replaces minerals lost through heavy sweating.",
        ))
    return supplements


def recommend_recovery(
    workout_duration_minutes: float,
    exercise_count: int,
    total_sets: int,
    fitness_goal: FitnessGoal,
    body_weight_kg: float,
    config: Optional[RecoveryConfig] = None,
) -> RecoveryRecommendation:
    """Post-workout hydration, nutrition, supplements and rest window."""
    cfg = config or DEFAULT_RECOVERY_CONFIG
    goal = FitnessGoal(fitness_goal)
    minutes = clamp_to("minutes", workout_duration_minutes, "workout_duration_minutes")
    weight = clamp_to("weight_kg", body_weight_kg, "body_weight_kg")
    intensity = intensity_factor(minutes, exercise_count, total_sets, cfg)

    during_ml = round_half_up(minutes / 60 * cfg.during_ml_per_hour)
    post_ml = cfg.post_workout_base_ml + intensity * cfg.post_workout_ml_per_intensity
    bottle_liters = round_half_up(during_ml / 100) / 10

    protein = round_half_up(weight * cfg.protein_per_kg)
    carbs = round_half_up(weight * cfg.carbs_per_kg[goal])

    rest_hours = 48 if intensity >= 2 else 24
    tip = next(text for level, text in _RECOVERY_TIPS if intensity >= level)

    logger.debug("Recovery: intensity=%d, %d ml during, %d ml after", intensity, during_ml, post_ml)

    return RecoveryRecommendation(
        intensity_factor=intensity,
        hydration=RecoveryHydration(
            during_workout_ml=during_ml,
            post_workout_ml=post_ml,
            daily_total_ml=round_half_up(weight * cfg.daily_ml_per_kg),
            tip=f"Bring {bottle_liters:g}L of water to the gym. Drink {post_ml}ml right after.",
        ),
        nutrition=RecoveryNutrition(
            protein_grams=protein,
            carbs_grams=carbs,
            timing=_POST_WORKOUT_TIMING,
            tip=_NUTRITION_TIPS[goal],
        ),
        supplements=_supplements(goal, intensity, protein, carbs),
        recovery=RecoveryWindow(
            rest_hours=rest_hours,
            muscle_recovery_days=round_half_up(rest_hours / 24),
            sleep_hours=8 if goal is FitnessGoal.MUSCLE_GAIN else 7,
            tip=tip,
        ),
    )


def recovery_for(request: RecoveryRequest, config: Optional[RecoveryConfig] = None) -> RecoveryRecommendation:
    """:func:`recommend_recovery` for a validated request model."""
    return recommend_recovery(
        request.workout_duration_minutes,
        request.exercise_count,
        request.total_sets,
        request.fitness_goal,
        request.body_weight_kg,
        config,
    )
