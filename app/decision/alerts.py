"""
Proactive alerts — six independent detectors plus a merge step.

Each detector scans its own slice of recent history and returns zero or
more :class:`ProactiveAlert` records.  Detectors share no state and may
run in any order; reproducibility comes from the merge step, which
always concatenates them in the canonical order of :data:`DETECTORS`:

    consistency → stagnation/progression → nutrition → hydration
    → weight change → fatigue

and then stable-sorts by priority (high, medium, low) and keeps the
first ``settings.MAX_ALERTS``.  Within one priority, alerts therefore
keep detector order.

"No data" is never an error: a detector without the data it needs
returns an empty list.

Time-of-day curves
------------------
Nutrition and hydration compare actual progress against a linear
expected-by-now curve over a 07:00-21:00 day:

    expected(hour) = (hour - 7) / 14
"""

from __future__ import annotations

import datetime
import logging
import uuid
from typing import Callable, Optional, Sequence

from pydantic import BaseModel, Field

from app.core.config import settings
from app.core.validation import clamp, clamp_int, clamp_to, safe_ratio
from app.schemas.alerts import (
    AlertInputs,
    ExerciseProgressionRecord,
    ProactiveAlert,
    WorkoutSessionSummary,
)
from app.schemas.enums import (
    AlertColor,
    AlertPriority,
    AlertType,
    FitnessGoal,
    SessionFeeling,
)

logger = logging.getLogger(__name__)

TRAINING_PATH = "/training"
NUTRITION_PATH = "/nutrition"
UNKNOWN_EXERCISE = "Exercise"


# ======================================================================
# Configuration
# ======================================================================


class AlertConfig(BaseModel):
    """Detector thresholds."""

    # Consistency
    window_days: int = Field(default=7, ge=1)
    behind_ratio: float = 0.5
    # Stagnation / progression
    min_stagnant_exercises: int = 2
    max_named_exercises: int = 3
    # Time-of-day curve
    day_start_hour: int = 7
    day_length_hours: int = 14
    # Nutrition
    nutrition_start_hour: int = 12
    nutrition_alert_hour: int = 14
    nutrition_ratio: float = 0.5
    # Hydration
    hydration_start_hour: int = 10
    hydration_alert_hour: int = 12
    hydration_ratio: float = 0.6
    # Weight change
    weight_change_threshold_kg: float = 0.5
    # Fatigue
    fatigue_window: int = 3
    fatigue_min_hard: int = 2


DEFAULT_ALERT_CONFIG = AlertConfig()


# ======================================================================
# Helpers
# ======================================================================


def new_alert_id(alert_type: AlertType, suffix: str) -> str:
    """Collision-resistant alert id: ``<type>-<suffix>-<uuid4 hex>``."""
    return f"{alert_type.value}-{suffix}-{uuid.uuid4().hex}"


def _now() -> datetime.datetime:
    return datetime.datetime.now()


def _expected_progress(hour: int, cfg: AlertConfig) -> float:
    """Fraction of a daily target expected to be done by *hour*."""
    return (hour - cfg.day_start_hour) / cfg.day_length_hours


def _is_weight_sample(value: Optional[float]) -> bool:
    """A body-weight sample exists only when it is a positive number."""
    if value is None:
        return False
    return clamp(value, field="weight_kg") > 0


def _exercise_names(
    records: Sequence[ExerciseProgressionRecord],
    names: dict[str, str],
    limit: int,
) -> str:
    return ", ".join(names.get(r.exercise_id, UNKNOWN_EXERCISE) for r in records[:limit])


# ======================================================================
# Detectors
# ======================================================================


def consistency_alerts(
    scheduled_days_per_week: int,
    recent_sessions: Sequence[WorkoutSessionSummary],
    as_of: Optional[datetime.datetime] = None,
    config: Optional[AlertConfig] = None,
) -> list[ProactiveAlert]:
    """Compare completed sessions in the trailing window to the schedule.

    Below half of the scheduled count → high-priority "behind" alert;
    at or above the scheduled count → low-priority "perfect week".
    Nothing when no days are scheduled.
    """
    cfg = config or DEFAULT_ALERT_CONFIG
    as_of = as_of or _now()
    scheduled = clamp_int("days_per_week", scheduled_days_per_week, "scheduled_days_per_week")
    if scheduled == 0:
        return []

    # Inclusive on both ends: window_days calendar days ending today.
    window_start = as_of.date() - datetime.timedelta(days=cfg.window_days - 1)
    completed = sum(
        1 for s in recent_sessions
        if s.is_completed and window_start <= s.date <= as_of.date()
    )
    rate = completed / scheduled

    if rate < cfg.behind_ratio:
        return [ProactiveAlert(
            id=new_alert_id(AlertType.CONSISTENCY, "low"),
            type=AlertType.CONSISTENCY,
            priority=AlertPriority.HIGH,
            title="Training below target",
            description=f"Only {completed}/{scheduled} sessions this week. Should we adjust the plan?",
            action_label="Adjust plan",
            action_path=TRAINING_PATH,
            icon="⚠️",
            color=AlertColor.YELLOW,
            created_at=as_of,
            metadata={
                "completed_this_week": completed,
                "scheduled_days_per_week": scheduled,
                "completion_rate": rate,
            },
        )]

    if rate >= 1 and completed >= scheduled:
        return [ProactiveAlert(
            id=new_alert_id(AlertType.CONSISTENCY, "perfect"),
            type=AlertType.CONSISTENCY,
            priority=AlertPriority.LOW,
            title="Perfect week! 🎯",
            description=f"You completed {completed}/{scheduled} workouts. Keep it up!",
            icon="🏆",
            color=AlertColor.GREEN,
            created_at=as_of,
            metadata={
                "completed_this_week": completed,
                "scheduled_days_per_week": scheduled,
            },
        )]

    return []


def stagnation_alerts(
    records: Sequence[ExerciseProgressionRecord],
    exercise_names: Optional[dict[str, str]] = None,
    as_of: Optional[datetime.datetime] = None,
    config: Optional[AlertConfig] = None,
) -> list[ProactiveAlert]:
    """Flag plateaued exercises and exercises ready for more load.

    An exercise is stagnant when it has no consecutive successful
    sessions and last felt hard; two or more produce one medium alert.
    Any ``should_progress`` record produces one low-priority alert.
    """
    cfg = config or DEFAULT_ALERT_CONFIG
    as_of = as_of or _now()
    names = exercise_names or {}
    alerts: list[ProactiveAlert] = []

    stagnant = [
        r for r in records
        if r.consecutive_successful_sessions == 0 and r.last_feeling == SessionFeeling.HARD
    ]
    if len(stagnant) >= cfg.min_stagnant_exercises:
        alerts.append(ProactiveAlert(
            id=new_alert_id(AlertType.STAGNATION, "multiple"),
            type=AlertType.STAGNATION,
            priority=AlertPriority.MEDIUM,
            title="Possible plateau detected",
            description=(
                f"{_exercise_names(stagnant, names, cfg.max_named_exercises)} - "
                "consider changing variations or adjusting volume"
            ),
            action_label="See suggestions",
            action_path=TRAINING_PATH,
            icon="📊",
            color=AlertColor.YELLOW,
            created_at=as_of,
            metadata={"exercise_ids": [r.exercise_id for r in stagnant]},
        ))

    ready = [r for r in records if r.should_progress]
    if ready:
        alerts.append(ProactiveAlert(
            id=new_alert_id(AlertType.PROGRESS, "ready"),
            type=AlertType.PROGRESS,
            priority=AlertPriority.LOW,
            title="Ready to increase the load 💪",
            description=(
                f"{_exercise_names(ready, names, cfg.max_named_exercises)} - "
                "time to add weight"
            ),
            icon="📈",
            color=AlertColor.GREEN,
            created_at=as_of,
            metadata={"exercise_ids": [r.exercise_id for r in ready]},
        ))

    return alerts


def nutrition_alerts(
    today_protein_grams: float,
    target_protein_grams: float,
    as_of: Optional[datetime.datetime] = None,
    config: Optional[AlertConfig] = None,
) -> list[ProactiveAlert]:
    """Protein intake behind the time-of-day curve.

    Silent before noon.  From 14:00, fires when actual progress is under
    half of the expected progress.  A zero target counts as 0 % progress.
    """
    cfg = config or DEFAULT_ALERT_CONFIG
    as_of = as_of or _now()
    hour = as_of.hour
    if hour < cfg.nutrition_start_hour:
        return []

    today = clamp_to("count", today_protein_grams, "today_protein_grams")
    target = clamp_to("count", target_protein_grams, "target_protein_grams")
    progress = safe_ratio(today, target)
    expected = _expected_progress(hour, cfg)

    if hour >= cfg.nutrition_alert_hour and progress < expected * cfg.nutrition_ratio:
        deficit = round(max(target - today, 0.0))
        return [ProactiveAlert(
            id=new_alert_id(AlertType.NUTRITION, "protein-low"),
            type=AlertType.NUTRITION,
            priority=AlertPriority.MEDIUM,
            title="Protein behind target",
            description=(
                f"{today:g}g / {target:g}g - {deficit}g to go. "
                "Add a protein-rich meal."
            ),
            action_label="See suggestions",
            action_path=NUTRITION_PATH,
            icon="🥩",
            color=AlertColor.RED,
            created_at=as_of,
            metadata={
                "today_protein_grams": today,
                "target_protein_grams": target,
                "percentage": progress * 100,
                "deficit_grams": deficit,
            },
        )]

    return []


def hydration_alerts(
    consumed_ml: float,
    target_ml: float,
    as_of: Optional[datetime.datetime] = None,
    config: Optional[AlertConfig] = None,
) -> list[ProactiveAlert]:
    """Water intake behind the time-of-day curve.

    Silent before 10:00.  From 12:00, fires when actual progress is under
    60 % of the expected progress; states the liters still missing.
    """
    cfg = config or DEFAULT_ALERT_CONFIG
    as_of = as_of or _now()
    hour = as_of.hour
    if hour < cfg.hydration_start_hour:
        return []

    consumed = clamp_to("count", consumed_ml, "consumed_ml")
    target = clamp_to("count", target_ml, "target_ml")
    progress = safe_ratio(consumed, target)
    expected = _expected_progress(hour, cfg)

    if hour >= cfg.hydration_alert_hour and progress < expected * cfg.hydration_ratio:
        remaining = round(max(target - consumed, 0.0) / 1000, 1)
        return [ProactiveAlert(
            id=new_alert_id(AlertType.HYDRATION, "low"),
            type=AlertType.HYDRATION,
            priority=AlertPriority.MEDIUM,
            title="Low hydration 💧",
            description=f"{remaining}L left to reach your target. Drink some water!",
            action_label="Log water",
            action_path=NUTRITION_PATH,
            icon="💧",
            color=AlertColor.BLUE,
            created_at=as_of,
            metadata={
                "consumed_ml": consumed,
                "target_ml": target,
                "remaining_liters": remaining,
            },
        )]

    return []


def weight_change_alerts(
    current_weight_kg: Optional[float],
    previous_weight_kg: Optional[float],
    fitness_goal: FitnessGoal,
    as_of: Optional[datetime.datetime] = None,
    config: Optional[AlertConfig] = None,
) -> list[ProactiveAlert]:
    """Body-weight change since the previous sample.

    A change of at least 0.5 kg fires.  Priority is low when the
    direction matches the goal (gain for muscle gain, loss for fat loss),
    medium otherwise.  Needs two positive samples, compared as given.
    """
    cfg = config or DEFAULT_ALERT_CONFIG
    as_of = as_of or _now()
    if not _is_weight_sample(current_weight_kg) or not _is_weight_sample(previous_weight_kg):
        return []

    change = current_weight_kg - previous_weight_kg
    magnitude = abs(change)
    if magnitude < cfg.weight_change_threshold_kg:
        return []

    goal = FitnessGoal(fitness_goal)
    gained = change > 0
    on_goal = (
        (goal is FitnessGoal.MUSCLE_GAIN and gained)
        or (goal is FitnessGoal.FAT_LOSS and not gained)
    )
    direction = "up" if gained else "down"

    return [ProactiveAlert(
        id=new_alert_id(AlertType.WEIGHT_CHANGE, direction),
        type=AlertType.WEIGHT_CHANGE,
        priority=AlertPriority.LOW if on_goal else AlertPriority.MEDIUM,
        title=f"Weight {direction} {magnitude:.1f}kg",
        description=(
            "Good progress! Your macros have been recalculated automatically."
            if on_goal else
            "Macros recalculated for your new weight."
        ),
        icon="⬆️" if gained else "⬇️",
        color=AlertColor.GREEN if on_goal else AlertColor.YELLOW,
        created_at=as_of,
        metadata={
            "current_weight_kg": current_weight_kg,
            "previous_weight_kg": previous_weight_kg,
            "change_kg": round(change, 2),
        },
    )]


def fatigue_alerts(
    recent_sessions: Sequence[WorkoutSessionSummary],
    as_of: Optional[datetime.datetime] = None,
    config: Optional[AlertConfig] = None,
) -> list[ProactiveAlert]:
    """Two or more of the last three sessions felt hard → suggest rest."""
    cfg = config or DEFAULT_ALERT_CONFIG
    as_of = as_of or _now()

    latest = sorted(recent_sessions, key=lambda s: s.date)[-cfg.fatigue_window:]
    hard = sum(1 for s in latest if s.feeling == SessionFeeling.HARD)
    if hard < cfg.fatigue_min_hard:
        return []

    return [ProactiveAlert(
        id=new_alert_id(AlertType.FATIGUE, "high"),
        type=AlertType.FATIGUE,
        priority=AlertPriority.MEDIUM,
        title="Signs of fatigue",
        description="Your last workouts have been hard. Consider an extra rest day.",
        icon="😴",
        color=AlertColor.PURPLE,
        created_at=as_of,
        metadata={"hard_sessions": hard, "total_sessions": len(latest)},
    )]


# ======================================================================
# Merge
# ======================================================================

Detector = Callable[[AlertInputs, datetime.datetime, AlertConfig], list[ProactiveAlert]]

# Canonical invocation order; ties in priority keep this order.
DETECTORS: tuple[tuple[str, Detector], ...] = (
    ("consistency", lambda i, t, c: consistency_alerts(
        i.scheduled_days_per_week, i.recent_sessions, t, c)),
    ("stagnation", lambda i, t, c: stagnation_alerts(
        i.progression_records, i.exercise_names, t, c)),
    ("nutrition", lambda i, t, c: nutrition_alerts(
        i.today_protein_grams, i.target_protein_grams, t, c)),
    ("hydration", lambda i, t, c: hydration_alerts(
        i.consumed_ml, i.target_ml, t, c)),
    ("weight_change", lambda i, t, c: weight_change_alerts(
        i.current_weight_kg, i.previous_weight_kg, i.fitness_goal, t, c)),
    ("fatigue", lambda i, t, c: fatigue_alerts(i.recent_sessions, t, c)),
)


def rank_alerts(alerts: Sequence[ProactiveAlert], limit: Optional[int] = None) -> list[ProactiveAlert]:
    """Stable-sort by priority (high first) and keep the first *limit*."""
    limit = settings.MAX_ALERTS if limit is None else limit
    ranked = sorted(alerts, key=lambda a: a.priority.rank)
    return ranked[:max(limit, 0)]


def get_all_alerts(
    inputs: AlertInputs,
    config: Optional[AlertConfig] = None,
    limit: Optional[int] = None,
) -> list[ProactiveAlert]:
    """Run every detector, merge, rank and truncate.

    Args:
        inputs: History slices and counters assembled by the caller.
        config: Optional threshold override.
        limit: Maximum alerts returned (defaults to ``settings.MAX_ALERTS``).

    Returns:
        At most *limit* alerts, high priority first.
    """
    cfg = config or DEFAULT_ALERT_CONFIG
    as_of = inputs.as_of or _now()

    collected: list[ProactiveAlert] = []
    for name, detector in DETECTORS:
        found = detector(inputs, as_of, cfg)
        if found:
            logger.debug("Detector %s emitted %d alert(s)", name, len(found))
        collected.extend(found)

    ranked = rank_alerts(collected, limit)
    logger.debug("Alerts: %d collected, %d returned", len(collected), len(ranked))
    return ranked
