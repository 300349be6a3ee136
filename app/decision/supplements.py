"""
Supplement recommendations by goal, training day and sleep quality.
"""

from __future__ import annotations

from app.core.validation import clamp_to
from app.schemas.enums import FitnessGoal, SupplementPriority, SupplementTiming
from app.schemas.supplements import SupplementPlan, SupplementRecommendation


def recommend_supplements(
    fitness_goal: FitnessGoal,
    is_training_day: bool,
    sleep_quality: float,
) -> SupplementPlan:
    """Build today's supplement list.

    Creatine, omega-3 and vitamin D3 are always included; whey, the
    pre-workout, ZMA and casein depend on the day and the goal.
    """
    goal = FitnessGoal(fitness_goal)
    sleep_quality = clamp_to("level", sleep_quality, "sleep_quality")
    recs: list[SupplementRecommendation] = []

    recs.append(SupplementRecommendation(
        name="Creatine monohydrate",
        timing=SupplementTiming.MORNING,
        dosage="5g",
        priority=SupplementPriority.ESSENTIAL,
        reason="Improves strength and performance. Take daily.",
    ))

    if is_training_day or goal is FitnessGoal.MUSCLE_GAIN:
        recs.append(SupplementRecommendation(
            name="Whey protein",
            timing=SupplementTiming.POST_WORKOUT if is_training_day else SupplementTiming.WITH_MEAL,
            dosage="25-30g",
            priority=SupplementPriority.ESSENTIAL,
            reason=(
                "Post-workout recovery. Take within 2h of training."
                if is_training_day else
                "Helps reach the daily protein target."
            ),
        ))

    if is_training_day:
        recs.append(SupplementRecommendation(
            name="Pre-workout",
            timing=SupplementTiming.PRE_WORKOUT,
            dosage="1 scoop",
            priority=SupplementPriority.RECOMMENDED,
            reason="Energy and focus for training. Take 30 min before.",
        ))

    recs.append(SupplementRecommendation(
        name="Omega-3",
        timing=SupplementTiming.WITH_MEAL,
        dosage="2 capsules",
        priority=SupplementPriority.RECOMMENDED,
        reason="Cardiovascular health and inflammation control.",
    ))

    if sleep_quality < 7:
        recs.append(SupplementRecommendation(
            name="ZMA",
            timing=SupplementTiming.BEFORE_BED,
            dosage="3 capsules",
            priority=SupplementPriority.RECOMMENDED,
            reason="Supports sleep quality and recovery.",
        ))

    if is_training_day and goal is FitnessGoal.MUSCLE_GAIN:
        recs.append(SupplementRecommendation(
            name="Casein",
            timing=SupplementTiming.BEFORE_BED,
            dosage="1 scoop",
            priority=SupplementPriority.OPTIONAL,
            reason="Slow-release protein overnight.",
        ))

    recs.append(SupplementRecommendation(
        name="Vitamin D3",
        timing=SupplementTiming.MORNING,
        dosage="1 capsule",
        priority=SupplementPriority.OPTIONAL,
        reason="Immune support and energy, especially in winter.",
    ))

    return SupplementPlan(recommendations=recs, total_supplements=len(recs))
