"""
Training decision — train, go light, recover actively, or rest.

The decision is a priority-ordered rule cascade evaluated against one
day's snapshot; the first rule that matches wins:

    1. less than 5 h of sleep           → rest
    2. stress ≥ 9                       → active recovery (×0.3)
    3. soreness ≥ 9                     → rest
    4. 5+ consecutive training days     → rest (mandatory deload)
    5. not a scheduled day:
         readiness ≥ 8 and 2+ days off  → light workout (×0.6)
         otherwise                      → rest
    6. scheduled day, by readiness:
         ≥ 8 → full (×1.1)   ≥ 6 → full (×1.0)
         ≥ 4 → light (×0.7)  else → active recovery (×0.3)

The safety rules (1-4) ignore readiness entirely.  Each branch carries a
fixed justification string shown to the user verbatim.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from app.core.validation import clamp_to
from app.decision.readiness import ReadinessConfig, score_readiness
from app.decision.rules import Rule, always, first_match
from app.schemas.daily_state import DailyState, ScheduleContext
from app.schemas.enums import ExperienceLevel, Recommendation
from app.schemas.training import TrainingDecision

logger = logging.getLogger(__name__)

STRETCHING_FOCUS = "stretching/mobility"
LIGHT_FOCUS = "light cardio or accessories"


# ======================================================================
# Outcomes
# ======================================================================


class TrainingBranch(str, Enum):
    """Every outcome the cascade can produce."""
    SLEEP_DEPRIVED = "sleep_deprived"
    HIGH_STRESS = "high_stress"
    SEVERE_SORENESS = "severe_soreness"
    MANDATORY_DELOAD = "mandatory_deload"
    OFF_DAY_BONUS = "off_day_bonus"
    OFF_DAY_REST = "off_day_rest"
    PEAK = "peak"
    NORMAL = "normal"
    REDUCED = "reduced"
    DEPLETED = "depleted"


@dataclass(frozen=True)
class _Outcome:
    recommendation: Recommendation
    intensity_modifier: float
    reason: str
    suggested_focus: Optional[str] = None


# Exhaustive: one entry per TrainingBranch.
OUTCOMES: dict[TrainingBranch, _Outcome] = {
    TrainingBranch.SLEEP_DEPRIVED: _Outcome(
        Recommendation.REST, 0.0,
        "Less than 5 hours of sleep. Your body needs to recover.",
    ),
    TrainingBranch.HIGH_STRESS: _Outcome(
        Recommendation.ACTIVE_RECOVERY, 0.3,
        "Very high stress. Active recovery is the better choice today.",
        STRETCHING_FOCUS,
    ),
    TrainingBranch.SEVERE_SORENESS: _Outcome(
        Recommendation.REST, 0.0,
        "Severe soreness. Give your muscles time to recover.",
    ),
    TrainingBranch.MANDATORY_DELOAD: _Outcome(
        Recommendation.REST, 0.0,
        "5 consecutive training days. A rest day is mandatory.",
    ),
    TrainingBranch.OFF_DAY_BONUS: _Outcome(
        Recommendation.LIGHT_WORKOUT, 0.6,
        "Not a scheduled training day, but you feel great. Something light is fine.",
        LIGHT_FOCUS,
    ),
    TrainingBranch.OFF_DAY_REST: _Outcome(
        Recommendation.REST, 0.0,
        "Scheduled rest day. Recover for tomorrow.",
    ),
    TrainingBranch.PEAK: _Outcome(
        Recommendation.FULL_WORKOUT, 1.1,
        "You're at your best. Give it everything.",
    ),
    TrainingBranch.NORMAL: _Outcome(
        Recommendation.FULL_WORKOUT, 1.0,
        "Good condition. Train as planned.",
    ),
    TrainingBranch.REDUCED: _Outcome(
        Recommendation.LIGHT_WORKOUT, 0.7,
        "You're not at 100%. Reduce the intensity today.",
    ),
    TrainingBranch.DEPLETED: _Outcome(
        Recommendation.ACTIVE_RECOVERY, 0.3,
        "Your body is asking for rest. Go for active recovery.",
        STRETCHING_FOCUS,
    ),
}


# ======================================================================
# Rule table
# ======================================================================


@dataclass(frozen=True)
class TrainingContext:
    state: DailyState
    schedule: ScheduleContext
    readiness: float


def _off_day(c: TrainingContext) -> bool:
    return not c.schedule.is_scheduled_workout_day


TRAINING_RULES: tuple[Rule[TrainingContext, TrainingBranch], ...] = (
    Rule("sleep_under_5h",
         lambda c: c.state.sleep_hours < 5,
         TrainingBranch.SLEEP_DEPRIVED),
    Rule("stress_9_plus",
         lambda c: c.state.stress_level >= 9,
         TrainingBranch.HIGH_STRESS),
    Rule("soreness_9_plus",
         lambda c: c.state.soreness_level >= 9,
         TrainingBranch.SEVERE_SORENESS),
    Rule("five_consecutive_days",
         lambda c: c.schedule.consecutive_workout_days >= 5,
         TrainingBranch.MANDATORY_DELOAD),
    Rule("off_day_high_readiness",
         lambda c: _off_day(c) and c.readiness >= 8 and c.schedule.days_since_last_workout >= 2,
         TrainingBranch.OFF_DAY_BONUS),
    Rule("off_day",
         _off_day,
         TrainingBranch.OFF_DAY_REST),
    Rule("readiness_8_plus", lambda c: c.readiness >= 8, TrainingBranch.PEAK),
    Rule("readiness_6_plus", lambda c: c.readiness >= 6, TrainingBranch.NORMAL),
    Rule("readiness_4_plus", lambda c: c.readiness >= 4, TrainingBranch.REDUCED),
    Rule("readiness_low", always, TrainingBranch.DEPLETED),
)


# ======================================================================
# Main entry point
# ======================================================================


def decide_training(
    state: DailyState,
    schedule: ScheduleContext,
    experience_level: ExperienceLevel = ExperienceLevel.BEGINNER,
    readiness: Optional[float] = None,
    config: Optional[ReadinessConfig] = None,
) -> TrainingDecision:
    """Decide today's training recommendation.

    Args:
        state: Today's sleep / stress / soreness snapshot.
        schedule: Schedule and streak context.
        experience_level: Scales the readiness score.
        readiness: Precomputed readiness (0-10).  Computed from *state*
            when omitted.
        config: Optional readiness config override.

    Returns:
        :class:`TrainingDecision` for the first matching rule.
    """
    if readiness is None:
        readiness = score_readiness(
            state.sleep_hours, state.sleep_quality,
            state.stress_level, state.soreness_level,
            experience_level, config,
        )
    else:
        readiness = clamp_to("readiness", readiness)

    context = TrainingContext(state=state, schedule=schedule, readiness=readiness)
    rule = first_match(TRAINING_RULES, context)
    outcome = OUTCOMES[rule.outcome]

    logger.debug(
        "Training decision: rule=%s readiness=%.2f recommendation=%s",
        rule.name, readiness, outcome.recommendation.value,
    )

    return TrainingDecision(
        should_train=outcome.recommendation.trains,
        recommendation=outcome.recommendation,
        reason=outcome.reason,
        intensity_modifier=outcome.intensity_modifier,
        suggested_focus=outcome.suggested_focus,
        readiness_score=round(readiness, 2),
        rule=rule.name,
    )
