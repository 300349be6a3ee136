"""
Plateau detection for a single exercise.

Model
-----
Logs are grouped by session and reduced to the session's heaviest set,
ordered by the time of the first log in each session.  From that series:

* **weeks since progress**: whole weeks between ``as_of`` and the
  session where the current top weight was first reached (the first
  session when it never went up).
* **trend** over the last three sessions: ±2 % or more is improving or
  declining, anything smaller is stable.

An exercise is stagnant after two weeks without progress, or whenever
the trend is declining.  A suggestion is picked from an ordered table:
deload on a decline, a new exercise after four weeks, more volume when
there are at least four sessions, more intensity otherwise.

Fewer than four logs is too little history: the analysis reports
"not stagnant" with low confidence.
"""

from __future__ import annotations

import datetime
import logging
from dataclasses import dataclass
from typing import Optional, Sequence

from pydantic import BaseModel, Field

from app.core.validation import clamp_int
from app.decision.rules import Rule, always, first_match
from app.schemas.enums import AlertPriority, Confidence, PlateauFix, StrengthTrend
from app.schemas.stagnation import (
    CatalogExercise,
    ExerciseAlternative,
    ExerciseLogSummary,
    StagnationAnalysis,
    StagnationSuggestion,
    VolumeChange,
)

logger = logging.getLogger(__name__)

# ======================================================================
# Configuration
# ======================================================================


class StagnationConfig(BaseModel):
    min_logs: int = Field(default=4, ge=1)
    stagnant_weeks: int = 2
    change_exercise_weeks: int = 4
    volume_min_sessions: int = 4
    trend_window: int = Field(default=3, ge=2)
    trend_threshold_pct: float = 2.0
    # Confidence by number of sessions
    high_confidence_sessions: int = 8
    medium_confidence_sessions: int = 5
    max_alternatives: int = 3


DEFAULT_STAGNATION_CONFIG = StagnationConfig()

# One entry per PlateauFix.
SUGGESTIONS: dict[PlateauFix, StagnationSuggestion] = {
    PlateauFix.DELOAD: StagnationSuggestion(
        type=PlateauFix.DELOAD,
        title="Deload week recommended",
        description="Your performance has dropped. A week at 60% intensity can help you recover.",
        action_label="Schedule deload",
        priority=AlertPriority.HIGH,
    ),
    PlateauFix.CHANGE_EXERCISE: StagnationSuggestion(
        type=PlateauFix.CHANGE_EXERCISE,
        title="Change the exercise",
        description="4+ weeks without progress. A new variation can trigger new gains.",
        action_label="See alternatives",
        priority=AlertPriority.HIGH,
    ),
    PlateauFix.INCREASE_VOLUME: StagnationSuggestion(
        type=PlateauFix.INCREASE_VOLUME,
        title="Increase volume",
        description="Add 1-2 extra sets for 2 weeks to break through the plateau.",
        action_label="Apply change",
        priority=AlertPriority.MEDIUM,
    ),
    PlateauFix.INCREASE_INTENSITY: StagnationSuggestion(
        type=PlateauFix.INCREASE_INTENSITY,
        title="Raise the intensity",
        description="Try intensity techniques such as drop sets or rest-pause.",
        action_label="See techniques",
        priority=AlertPriority.LOW,
    ),
}


# ======================================================================
# Session series
# ======================================================================


@dataclass(frozen=True)
class SessionMax:
    started_at: datetime.datetime
    max_weight_kg: float


def session_max_weights(logs: Sequence[ExerciseLogSummary]) -> list[SessionMax]:
    """Heaviest positive weight per session, oldest session first."""
    sessions: dict[str, tuple[datetime.datetime, list[float]]] = {}
    for log in logs:
        weight = log.weight_kg or 0.0
        if weight <= 0:
            continue
        if log.workout_session_id in sessions:
            sessions[log.workout_session_id][1].append(weight)
        else:
            sessions[log.workout_session_id] = (log.created_at, [weight])

    series = [SessionMax(started, max(weights)) for started, weights in sessions.values()]
    return sorted(series, key=lambda s: s.started_at)


def weeks_since_progress(series: Sequence[SessionMax], as_of: datetime.datetime) -> int:
    """Whole weeks since the current top weight was first reached."""
    if len(series) < 2:
        return 0

    latest = series[-1].max_weight_kg
    since = series[0].started_at
    for i in range(len(series) - 2, -1, -1):
        if series[i].max_weight_kg < latest:
            since = series[i + 1].started_at
            break

    weeks = (as_of - since).total_seconds() // (7 * 24 * 3600)
    return max(int(weeks), 0)


def strength_trend(series: Sequence[SessionMax], config: Optional[StagnationConfig] = None) -> StrengthTrend:
    cfg = config or DEFAULT_STAGNATION_CONFIG
    if len(series) < cfg.trend_window:
        return StrengthTrend.STABLE

    recent = series[-cfg.trend_window:]
    first, last = recent[0].max_weight_kg, recent[-1].max_weight_kg
    change_pct = (last - first) / first * 100

    if change_pct >= cfg.trend_threshold_pct:
        return StrengthTrend.IMPROVING
    if change_pct <= -cfg.trend_threshold_pct:
        return StrengthTrend.DECLINING
    return StrengthTrend.STABLE


# ======================================================================
# Suggestion table
# ======================================================================


@dataclass(frozen=True)
class PlateauContext:
    weeks: int
    trend: StrengthTrend
    sessions: int
    cfg: StagnationConfig


SUGGESTION_RULES: tuple[Rule[PlateauContext, Optional[PlateauFix]], ...] = (
    Rule("recent_progress", lambda c: c.weeks < c.cfg.stagnant_weeks, None),
    Rule("declining", lambda c: c.trend is StrengthTrend.DECLINING, PlateauFix.DELOAD),
    Rule("long_plateau",
         lambda c: c.weeks >= c.cfg.change_exercise_weeks,
         PlateauFix.CHANGE_EXERCISE),
    Rule("enough_sessions_for_volume",
         lambda c: c.sessions >= c.cfg.volume_min_sessions,
         PlateauFix.INCREASE_VOLUME),
    Rule("early_plateau", always, PlateauFix.INCREASE_INTENSITY),
)


def _confidence(sessions: int, cfg: StagnationConfig) -> Confidence:
    if sessions >= cfg.high_confidence_sessions:
        return Confidence.HIGH
    if sessions >= cfg.medium_confidence_sessions:
        return Confidence.MEDIUM
    return Confidence.LOW


# ======================================================================
# Main entry points
# ======================================================================


def analyze_exercise_stagnation(
    exercise_id: str,
    exercise_name: str,
    logs: Sequence[ExerciseLogSummary],
    as_of: Optional[datetime.datetime] = None,
    config: Optional[StagnationConfig] = None,
) -> StagnationAnalysis:
    """Plateau analysis for one exercise's recent logs."""
    cfg = config or DEFAULT_STAGNATION_CONFIG
    as_of = as_of or datetime.datetime.now()

    if len(logs) < cfg.min_logs:
        weights = [log.weight_kg or 0.0 for log in logs]
        return StagnationAnalysis(
            exercise_id=exercise_id,
            exercise_name=exercise_name,
            is_stagnant=False,
            weeks_since_progress=0,
            current_weight_kg=weights[-1] if weights else 0.0,
            max_weight_kg=max(weights, default=0.0),
            trend=StrengthTrend.STABLE,
            confidence=Confidence.LOW,
        )

    series = session_max_weights(logs)
    weeks = weeks_since_progress(series, as_of)
    trend = strength_trend(series, cfg)

    rule = first_match(SUGGESTION_RULES, PlateauContext(weeks, trend, len(series), cfg))
    suggestion = SUGGESTIONS[rule.outcome] if rule.outcome is not None else None
    logger.debug(
        "Stagnation %s: %d sessions, %d weeks, trend=%s, rule=%s",
        exercise_id, len(series), weeks, trend.value, rule.name,
    )

    return StagnationAnalysis(
        exercise_id=exercise_id,
        exercise_name=exercise_name,
        is_stagnant=weeks >= cfg.stagnant_weeks or trend is StrengthTrend.DECLINING,
        weeks_since_progress=weeks,
        current_weight_kg=series[-1].max_weight_kg if series else 0.0,
        max_weight_kg=max((s.max_weight_kg for s in series), default=0.0),
        suggestion=suggestion,
        trend=trend,
        confidence=_confidence(len(series), cfg),
    )


def find_alternative_exercises(
    exercise_id: str,
    primary_muscle: str,
    catalog: Sequence[CatalogExercise],
    exclude_ids: Sequence[str] = (),
    config: Optional[StagnationConfig] = None,
) -> list[ExerciseAlternative]:
    """Up to three catalog exercises hitting the same primary muscle."""
    cfg = config or DEFAULT_STAGNATION_CONFIG
    excluded = {exercise_id, *exclude_ids}
    matches = [e for e in catalog if e.primary_muscle == primary_muscle and e.id not in excluded]
    return [
        ExerciseAlternative(
            id=e.id,
            name=e.name,
            primary_muscle=e.primary_muscle,
            reason=f"Same muscle group ({primary_muscle})",
        )
        for e in matches[:cfg.max_alternatives]
    ]


def suggest_volume_change(
    current_sets: int,
    reps_min: int,
    reps_max: int,
    weeks_stagnant: int,
) -> VolumeChange:
    """More sets (and reps, for longer plateaus) for the next block.

    Sets are capped at 6 after three stagnant weeks and at 5 after two,
    but a program already above the cap is never cut.
    """
    current_sets = clamp_int("sets", current_sets, "current_sets")
    reps_min = clamp_int("reps", reps_min, "reps_min")
    reps_max = max(clamp_int("reps", reps_max, "reps_max"), reps_min)
    weeks_stagnant = clamp_int("count", weeks_stagnant, "weeks_stagnant")

    if weeks_stagnant >= 3:
        return VolumeChange(
            sets=max(current_sets, min(current_sets + 2, 6)),
            reps_min=reps_min,
            reps_max=reps_max + 2,
            change="+2 sets, +2 max reps",
        )
    if weeks_stagnant >= 2:
        return VolumeChange(
            sets=max(current_sets, min(current_sets + 1, 5)),
            reps_min=reps_min,
            reps_max=reps_max,
            change="+1 set",
        )
    return VolumeChange(sets=current_sets, reps_min=reps_min, reps_max=reps_max, change="No change")
