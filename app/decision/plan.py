"""
Daily plan — every decision for one day, computed in one pass.

Layers:
    1. **Readiness** — sleep / stress / soreness composite.
    2. **Training** — rule cascade using readiness.
    3. **Nutrition** — macros, meals and water, sized for the day the
       training decision produced (training day = should_train).
    4. **Supplements** and **priorities** — checklist for the day.
"""

from __future__ import annotations

import logging

from app.decision.macros import distribute_meals, recommend_hydration, recommend_macros
from app.decision.priorities import generate_priorities
from app.decision.readiness import evaluate_readiness
from app.decision.supplements import recommend_supplements
from app.decision.training import decide_training
from app.schemas.plan import DailyPlan, DailyPlanRequest

logger = logging.getLogger(__name__)


def generate_daily_plan(request: DailyPlanRequest) -> DailyPlan:
    """Compute the complete daily plan from one snapshot."""
    state, schedule, profile = request.state, request.schedule, request.profile

    readiness_score, readiness = evaluate_readiness(state, profile.experience_level)
    training = decide_training(state, schedule, profile.experience_level, readiness=readiness_score)
    trains = training.should_train

    macros = recommend_macros(
        profile.weight_kg, profile.height_cm, profile.age, profile.gender,
        profile.fitness_goal, profile.body_fat_percent, is_training_day=trains,
    )
    meals = distribute_meals(macros)
    hydration = recommend_hydration(profile.weight_kg, profile.height_cm, profile.fitness_goal)
    supplements = recommend_supplements(profile.fitness_goal, trains, state.sleep_quality)

    priorities = generate_priorities(
        is_workout_day=trains,
        hydration_progress_pct=request.hydration_progress_pct,
        meals_completed=request.meals_completed,
        total_meals=len(meals),
        supplements_taken=request.supplements_taken,
        total_supplements=supplements.total_supplements,
        sleep_quality=state.sleep_quality,
        stress_level=state.stress_level,
        fitness_goal=profile.fitness_goal,
    )

    logger.debug(
        "Daily plan: %s (readiness %.2f), %d kcal, %d meals, %d supplements",
        training.recommendation.value, readiness_score, macros.calories,
        len(meals), supplements.total_supplements,
    )

    return DailyPlan(
        readiness=readiness,
        training=training,
        macros=macros,
        meals=meals,
        hydration=hydration,
        supplements=supplements,
        priorities=priorities,
        should_rest=not trains,
    )
