"""
Proactive alert schemas.

Alerts are recomputed from scratch on every call.  They are never
persisted by the engine; a caller may remember which ids the user
dismissed.
"""

from __future__ import annotations

import datetime
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.core.validation import clamp_int, clamp_to
from app.schemas.enums import (
    AlertColor,
    AlertPriority,
    AlertType,
    FitnessGoal,
    SessionFeeling,
)


# ======================================================================
# History slices (read-only inputs)
# ======================================================================


class WorkoutSessionSummary(BaseModel):
    """One workout session as stored by the workout-history store."""

    model_config = ConfigDict(frozen=True)

    id: str
    date: datetime.date
    completed_at: Optional[datetime.datetime] = None
    feeling: Optional[SessionFeeling] = None

    @property
    def is_completed(self) -> bool:
        return self.completed_at is not None


class ExerciseProgressionRecord(BaseModel):
    """Per-exercise progression state tracked by the history store."""

    model_config = ConfigDict(frozen=True)

    exercise_id: str
    functional_max_kg: float = 0.0
    consecutive_successful_sessions: int = 0
    last_feeling: Optional[SessionFeeling] = None
    should_progress: bool = False

    @field_validator("consecutive_successful_sessions")
    @classmethod
    def _clamp_sessions(cls, v: int) -> int:
        return clamp_int("count", v, "consecutive_successful_sessions")


class AlertInputs(BaseModel):
    """Everything the six detectors read, assembled by the caller."""

    scheduled_days_per_week: int = 4
    recent_sessions: list[WorkoutSessionSummary] = Field(default_factory=list)
    progression_records: list[ExerciseProgressionRecord] = Field(default_factory=list)
    exercise_names: dict[str, str] = Field(
        default_factory=dict,
        description="exercise_id -> display name",
    )
    today_protein_grams: float = 0.0
    target_protein_grams: float = 0.0
    consumed_ml: float = 0.0
    target_ml: float = 0.0
    current_weight_kg: Optional[float] = None
    previous_weight_kg: Optional[float] = None
    fitness_goal: FitnessGoal = FitnessGoal.MUSCLE_GAIN
    as_of: Optional[datetime.datetime] = Field(
        None,
        description="Evaluation time (defaults to now)",
    )

    @field_validator("scheduled_days_per_week")
    @classmethod
    def _clamp_days(cls, v: int) -> int:
        return clamp_int("days_per_week", v, "scheduled_days_per_week")

    @field_validator("today_protein_grams", "target_protein_grams", "consumed_ml", "target_ml")
    @classmethod
    def _clamp_amounts(cls, v: float) -> float:
        return clamp_to("count", v)

    @field_validator("current_weight_kg", "previous_weight_kg")
    @classmethod
    def _weight_or_missing(cls, v: Optional[float]) -> Optional[float]:
        # A non-positive sample means "no sample".  Real samples are kept
        # unclamped so the change between two of them is preserved.
        if v is None or v <= 0:
            return None
        return v


# ======================================================================
# Output
# ======================================================================


class ProactiveAlert(BaseModel):
    """A dismissible banner shown to the user."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Unique per generation")
    type: AlertType
    priority: AlertPriority
    title: str
    description: str
    action_label: Optional[str] = None
    action_path: Optional[str] = Field(
        None,
        description="Opaque navigation target, not interpreted by the engine",
    )
    icon: str
    color: AlertColor
    dismissible: bool = True
    created_at: datetime.datetime
    metadata: dict[str, Any] = Field(default_factory=dict)
