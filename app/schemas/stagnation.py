"""
Plateau analysis schemas.
"""

import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.core.validation import clamp_int
from app.schemas.enums import AlertPriority, Confidence, PlateauFix, StrengthTrend


class ExerciseLogSummary(BaseModel):
    """One logged set of one exercise, tagged with its session."""

    model_config = ConfigDict(frozen=True)

    exercise_id: str
    workout_session_id: str
    weight_kg: Optional[float] = None
    reps_completed: Optional[int] = None
    created_at: datetime.datetime


class StagnationRequest(BaseModel):
    exercise_id: str
    exercise_name: str
    logs: list[ExerciseLogSummary] = Field(default_factory=list)
    as_of: Optional[datetime.datetime] = Field(
        None,
        description="Evaluation time (defaults to now)",
    )


class StagnationSuggestion(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: PlateauFix
    title: str
    description: str
    action_label: str
    priority: AlertPriority


class StagnationAnalysis(BaseModel):
    model_config = ConfigDict(frozen=True)

    exercise_id: str
    exercise_name: str
    is_stagnant: bool
    weeks_since_progress: int = Field(..., ge=0)
    current_weight_kg: float
    max_weight_kg: float
    suggestion: Optional[StagnationSuggestion] = None
    trend: StrengthTrend
    confidence: Confidence


class CatalogExercise(BaseModel):
    """Minimal exercise-catalog entry."""

    id: str
    name: str
    primary_muscle: str


class ExerciseAlternative(BaseModel):
    id: str
    name: str
    primary_muscle: str
    reason: str


class AlternativesRequest(BaseModel):
    exercise_id: str
    primary_muscle: str
    catalog: list[CatalogExercise] = Field(default_factory=list)
    exclude_ids: list[str] = Field(default_factory=list)


class VolumeChange(BaseModel):
    """Adjusted sets and rep range for the next block."""

    model_config = ConfigDict(frozen=True)

    sets: int
    reps_min: int
    reps_max: int
    change: str

    @field_validator("sets", "reps_min", "reps_max")
    @classmethod
    def _at_least_one(cls, v: int) -> int:
        return clamp_int("sets", v)
