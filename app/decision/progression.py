"""
Load progression — should the weight go up next session?

Only working sets count (warm-ups are ignored).  A set is "at target"
when it reached the top of the rep range.  With ``n`` target sets:

    every set at target          → +1 increment        (high confidence)
    at least ceil(0.8 n) sets    → +½ increment        (micro-progression)
    fewer than n / 2 sets        → keep the weight
    otherwise                    → keep the weight, almost there

The increment depends on the lift: 5 kg for lower-body compounds,
1.25 kg for isolation work, 2.5 kg for everything else.  Exercises are
classified by keywords in their display name.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence

from pydantic import BaseModel, Field

from app.core.validation import clamp_to
from app.decision.rules import Rule, always, first_match
from app.schemas.alerts import ExerciseProgressionRecord
from app.schemas.enums import Confidence, LiftCategory, SessionFeeling
from app.schemas.progression import ProgressionRequest, ProgressionSuggestion, SetLog

logger = logging.getLogger(__name__)

# ======================================================================
# Configuration
# ======================================================================

_DEFAULT_INCREMENTS_KG: dict[LiftCategory, float] = {
    LiftCategory.COMPOUND_UPPER: 2.5,
    LiftCategory.COMPOUND_LOWER: 5.0,
    LiftCategory.ISOLATION: 1.25,
    LiftCategory.DEFAULT: 2.5,
}

# Checked in this order; catalog names come in English and Spanish.
_CATEGORY_KEYWORDS: list[tuple[LiftCategory, tuple[str, ...]]] = [
    (LiftCategory.COMPOUND_LOWER, (
        "squat", "deadlift", "leg press", "hip thrust",
        "sentadilla", "peso muerto", "prensa",
    )),
    (LiftCategory.ISOLATION, (
        "curl", "extension", "lateral raise", "face pull", "fly", "kickback",
        "elevacion", "apertura",
    )),
    (LiftCategory.COMPOUND_UPPER, (
        "bench", "overhead press", "row", "pull-up", "chin-up", "dip",
        "press banca", "remo", "dominada",
    )),
]


class ProgressionConfig(BaseModel):
    increments_kg: dict[LiftCategory, float] = Field(
        default_factory=lambda: dict(_DEFAULT_INCREMENTS_KG),
    )
    micro_progression_ratio: float = Field(default=0.8, gt=0, le=1)
    struggling_ratio: float = Field(default=0.5, gt=0, le=1)


DEFAULT_PROGRESSION_CONFIG = ProgressionConfig()


def classify_exercise(exercise_name: str) -> LiftCategory:
    """Increment class of an exercise, from keywords in its name."""
    name = exercise_name.lower()
    for category, keywords in _CATEGORY_KEYWORDS:
        if any(k in name for k in keywords):
            return category
    return LiftCategory.DEFAULT


def progression_increment(exercise_name: str, config: Optional[ProgressionConfig] = None) -> float:
    cfg = config or DEFAULT_PROGRESSION_CONFIG
    return cfg.increments_kg[classify_exercise(exercise_name)]


# ======================================================================
# Rule table
# ======================================================================


class ProgressionBranch(str, Enum):
    ALL_SETS = "all_sets"
    MOST_SETS = "most_sets"
    STRUGGLING = "struggling"
    ALMOST = "almost"


@dataclass(frozen=True)
class ProgressionContext:
    sets_at_target: int
    target_sets: int
    cfg: ProgressionConfig


PROGRESSION_RULES: tuple[Rule[ProgressionContext, ProgressionBranch], ...] = (
    Rule("all_sets_at_target",
         lambda c: c.sets_at_target >= c.target_sets,
         ProgressionBranch.ALL_SETS),
    Rule("most_sets_at_target",
         lambda c: c.sets_at_target >= math.ceil(c.target_sets * c.cfg.micro_progression_ratio),
         ProgressionBranch.MOST_SETS),
    Rule("under_half_at_target",
         lambda c: c.sets_at_target < c.target_sets * c.cfg.struggling_ratio,
         ProgressionBranch.STRUGGLING),
    Rule("almost", always, ProgressionBranch.ALMOST),
)


def _working_sets(logs: Sequence[SetLog]) -> list[SetLog]:
    return [s for s in logs if not s.is_warmup]


def _sets_at_target(sets: Sequence[SetLog], target_reps_max: int) -> int:
    return sum(1 for s in sets if (s.reps_completed or 0) >= target_reps_max)


# ======================================================================
# Main entry points
# ======================================================================


def decide_progression(
    request: ProgressionRequest,
    config: Optional[ProgressionConfig] = None,
) -> ProgressionSuggestion:
    """Suggest next session's load for one exercise."""
    cfg = config or DEFAULT_PROGRESSION_CONFIG
    working = _working_sets(request.last_session_logs)

    if not working:
        return ProgressionSuggestion(
            exercise_id=request.exercise_id,
            should_progress=False,
            current_weight_kg=0.0,
            suggested_weight_kg=0.0,
            progression_amount_kg=0.0,
            reason="No data from the last session",
            confidence=Confidence.LOW,
            rule="no_working_sets",
        )

    weights = [s.weight_kg for s in working if s.weight_kg is not None and s.weight_kg > 0]
    if not weights:
        return ProgressionSuggestion(
            exercise_id=request.exercise_id,
            should_progress=False,
            current_weight_kg=0.0,
            suggested_weight_kg=0.0,
            progression_amount_kg=0.0,
            reason="No weight logged",
            confidence=Confidence.LOW,
            rule="no_weight_logged",
        )

    current = max(weights)
    increment = progression_increment(request.exercise_name, cfg)
    at_target = _sets_at_target(working, request.target_reps_max)
    target_sets = request.target_sets

    streak = 0
    if request.previous_session_logs is not None:
        previous = _working_sets(request.previous_session_logs)
        if _sets_at_target(previous, request.target_reps_max) >= target_sets:
            streak = 1

    rule = first_match(PROGRESSION_RULES, ProgressionContext(at_target, target_sets, cfg))
    branch = rule.outcome
    logger.debug(
        "Progression %s: %d/%d sets at target, rule=%s",
        request.exercise_id, at_target, target_sets, rule.name,
    )

    if branch is ProgressionBranch.ALL_SETS:
        amount = increment
        reason = f"All sets completed at {request.target_reps_max} reps! 💪"
        confidence = Confidence.HIGH
    elif branch is ProgressionBranch.MOST_SETS:
        amount = increment / 2
        reason = f"{at_target}/{target_sets} sets at the top of the range. Micro-progression suggested."
        confidence = Confidence.MEDIUM
    elif branch is ProgressionBranch.STRUGGLING:
        amount = 0.0
        reason = f"Stay at {current:g}kg until you complete every set"
        confidence = Confidence.HIGH
    else:
        amount = 0.0
        reason = f"{at_target}/{target_sets} sets completed. Almost there!"
        confidence = Confidence.MEDIUM

    return ProgressionSuggestion(
        exercise_id=request.exercise_id,
        should_progress=amount > 0,
        current_weight_kg=current,
        suggested_weight_kg=current + amount,
        progression_amount_kg=amount,
        reason=reason,
        confidence=confidence,
        streak=streak + 1 if branch is ProgressionBranch.ALL_SETS else None,
        rule=rule.name,
    )


def suggested_weight_for_exercise(
    exercise_name: str,
    last_weight_kg: float,
    all_sets_completed: bool,
    config: Optional[ProgressionConfig] = None,
) -> float:
    """Next load from the last one: one increment up after a full session."""
    last_weight_kg = clamp_to("count", last_weight_kg, "last_weight_kg")
    if not all_sets_completed or last_weight_kg == 0:
        return last_weight_kg
    return last_weight_kg + progression_increment(exercise_name, config)


def as_progression_record(
    suggestion: ProgressionSuggestion,
    last_feeling: Optional[SessionFeeling] = None,
) -> ExerciseProgressionRecord:
    """The per-exercise state the alert engine reads."""
    return ExerciseProgressionRecord(
        exercise_id=suggestion.exercise_id,
        functional_max_kg=suggestion.current_weight_kg,
        consecutive_successful_sessions=suggestion.streak or 0,
        last_feeling=last_feeling,
        should_progress=suggestion.should_progress,
    )
