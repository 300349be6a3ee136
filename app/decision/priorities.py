"""
Daily priorities — the fixed three-slot checklist.

Slot 1 is training (workout day) or recovery.  Slot 2 is nutrition
progress.  Slot 3 is a first-match cascade:

    hydration < 50 %          → drink water
    supplements pending       → take supplements
    stress ≥ 7                → manage stress
    otherwise                 → consistency affirmation (completed)

The output always has exactly three items ordered 1, 2, 3.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional

from app.core.validation import clamp_int, clamp_to, safe_ratio
from app.decision.rules import Rule, always, first_match
from app.schemas.enums import FitnessGoal, PriorityCategory
from app.schemas.priorities import DailyPriority, PrioritiesRequest

logger = logging.getLogger(__name__)

_HYDRATION_THRESHOLD_PCT = 50
_STRESS_THRESHOLD = 7
_POOR_SLEEP_THRESHOLD = 6

_WORKOUT_DESCRIPTIONS: dict[FitnessGoal, str] = {
    FitnessGoal.MUSCLE_GAIN: "Train hard, aim for controlled muscular failure",
    FitnessGoal.FAT_LOSS: "Keep the intensity up to burn calories",
    FitnessGoal.RECOMPOSITION: "Strength plus cardio to reshape your body",
    FitnessGoal.MAINTENANCE: "Maintenance session, enjoy the process",
}
_DEFAULT_WORKOUT_DESCRIPTION = "Follow today's plan"


# ======================================================================
# Slot 3 cascade
# ======================================================================


class FocusSlot(str, Enum):
    HYDRATION = "hydration"
    SUPPLEMENTS = "supplements"
    STRESS = "stress"
    CONSISTENCY = "consistency"


@dataclass(frozen=True)
class PrioritiesContext:
    hydration_progress_pct: float
    supplements_taken: int
    total_supplements: int
    stress_level: int


FOCUS_RULES: tuple[Rule[PrioritiesContext, FocusSlot], ...] = (
    Rule("hydration_under_50",
         lambda c: c.hydration_progress_pct < _HYDRATION_THRESHOLD_PCT,
         FocusSlot.HYDRATION),
    Rule("supplements_pending",
         lambda c: c.supplements_taken < c.total_supplements,
         FocusSlot.SUPPLEMENTS),
    Rule("stress_7_plus",
         lambda c: c.stress_level >= _STRESS_THRESHOLD,
         FocusSlot.STRESS),
    Rule("on_track", always, FocusSlot.CONSISTENCY),
)


def _hydration_priority(c: PrioritiesContext) -> DailyPriority:
    return DailyPriority(
        order=3,
        title="Drink water",
        description=f"Hydration at {c.hydration_progress_pct:.0f}% of today's target",
        category=PriorityCategory.HYDRATION,
        icon="💧",
    )


def _supplements_priority(c: PrioritiesContext) -> DailyPriority:
    return DailyPriority(
        order=3,
        title="Take your supplements",
        description=f"{c.supplements_taken}/{c.total_supplements} taken so far",
        category=PriorityCategory.SUPPLEMENTS,
        icon="💊",
    )


def _stress_priority(c: PrioritiesContext) -> DailyPriority:
    return DailyPriority(
        order=3,
        title="Manage stress",
        description="10 minutes of breathing or meditation",
        category=PriorityCategory.MINDSET,
        icon="🧠",
    )


def _consistency_priority(c: PrioritiesContext) -> DailyPriority:
    return DailyPriority(
        order=3,
        title="Stay consistent",
        description="You're on track. Keep following the plan.",
        category=PriorityCategory.MINDSET,
        icon="🔥",
        completed=True,
    )


# Exhaustive: one builder per FocusSlot.
FOCUS_BUILDERS: dict[FocusSlot, Callable[[PrioritiesContext], DailyPriority]] = {
    FocusSlot.HYDRATION: _hydration_priority,
    FocusSlot.SUPPLEMENTS: _supplements_priority,
    FocusSlot.STRESS: _stress_priority,
    FocusSlot.CONSISTENCY: _consistency_priority,
}


# ======================================================================
# Fixed slots
# ======================================================================


def _training_priority(
    is_workout_day: bool,
    sleep_quality: int,
    fitness_goal: Optional[FitnessGoal],
) -> DailyPriority:
    if is_workout_day:
        description = _DEFAULT_WORKOUT_DESCRIPTION
        if fitness_goal is not None:
            description = _WORKOUT_DESCRIPTIONS[FitnessGoal(fitness_goal)]
        return DailyPriority(
            order=1,
            title="Complete today's workout",
            description=description,
            category=PriorityCategory.TRAINING,
            icon="💪",
        )

    return DailyPriority(
        order=1,
        title="Recovery day",
        description=(
            "Prioritize 8 hours of sleep tonight"
            if sleep_quality < _POOR_SLEEP_THRESHOLD
            else "Gentle stretching and active rest"
        ),
        category=PriorityCategory.RECOVERY,
        icon="🧘",
    )


def _nutrition_priority(meals_completed: int, total_meals: int) -> DailyPriority:
    pct = safe_ratio(meals_completed, total_meals) * 100
    if pct < 100:
        return DailyPriority(
            order=2,
            title="Hit your meals",
            description=f"{meals_completed}/{total_meals} meals completed ({pct:.0f}%)",
            category=PriorityCategory.NUTRITION,
            icon="🍽️",
        )
    return DailyPriority(
        order=2,
        title="Meals completed",
        description=f"All {total_meals} meals logged today",
        category=PriorityCategory.NUTRITION,
        icon="✅",
        completed=True,
    )


# ======================================================================
# Main entry points
# ======================================================================


def generate_priorities(
    is_workout_day: bool,
    hydration_progress_pct: float,
    meals_completed: int,
    total_meals: int,
    supplements_taken: int,
    total_supplements: int,
    sleep_quality: int,
    stress_level: int,
    fitness_goal: Optional[FitnessGoal] = None,
) -> list[DailyPriority]:
    """Build the three ordered priorities for today."""
    meals_completed = clamp_int("count", meals_completed, "meals_completed")
    total_meals = clamp_int("count", total_meals, "total_meals")
    context = PrioritiesContext(
        hydration_progress_pct=clamp_to("percent", hydration_progress_pct, "hydration_progress_pct"),
        supplements_taken=clamp_int("count", supplements_taken, "supplements_taken"),
        total_supplements=clamp_int("count", total_supplements, "total_supplements"),
        stress_level=clamp_int("level", stress_level, "stress_level"),
    )
    sleep_quality = clamp_int("level", sleep_quality, "sleep_quality")

    rule = first_match(FOCUS_RULES, context)
    logger.debug("Priority slot 3: rule=%s", rule.name)

    return [
        _training_priority(is_workout_day, sleep_quality, fitness_goal),
        _nutrition_priority(meals_completed, total_meals),
        FOCUS_BUILDERS[rule.outcome](context),
    ]


def priorities_for(request: PrioritiesRequest) -> list[DailyPriority]:
    """:func:`generate_priorities` for a validated request model."""
    return generate_priorities(
        is_workout_day=request.is_workout_day,
        hydration_progress_pct=request.hydration_progress_pct,
        meals_completed=request.meals_completed,
        total_meals=request.total_meals,
        supplements_taken=request.supplements_taken,
        total_supplements=request.total_supplements,
        sleep_quality=request.sleep_quality,
        stress_level=request.stress_level,
        fitness_goal=request.fitness_goal,
    )
