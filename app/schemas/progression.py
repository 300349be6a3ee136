"""
Load-progression schemas.

A progression request carries the working sets of the last session (and
optionally the one before it) for a single exercise.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator, model_validator

from app.core.validation import clamp_int
from app.schemas.enums import Confidence


class SetLog(BaseModel):
    """One logged set."""

    model_config = ConfigDict(frozen=True)

    set_number: int = 1
    weight_kg: Optional[float] = None
    reps_completed: Optional[int] = None
    is_warmup: bool = False


class ProgressionRequest(BaseModel):
    exercise_id: str
    exercise_name: str
    target_reps_min: int = 8
    target_reps_max: int = 12
    target_sets: int = 3
    last_session_logs: list[SetLog] = Field(default_factory=list)
    previous_session_logs: Optional[list[SetLog]] = Field(
        None,
        description="Session before the last one, used for the streak",
    )

    @field_validator("target_reps_min", "target_reps_max")
    @classmethod
    def _clamp_reps(cls, v: int, info: ValidationInfo) -> int:
        return clamp_int("reps", v, info.field_name)

    @field_validator("target_sets")
    @classmethod
    def _clamp_sets(cls, v: int) -> int:
        return clamp_int("sets", v, "target_sets")

    @model_validator(mode="after")
    def _ordered_rep_range(self) -> "ProgressionRequest":
        if self.target_reps_max < self.target_reps_min:
            self.target_reps_max = self.target_reps_min
        return self


class ProgressionSuggestion(BaseModel):
    """What to load on the bar next session."""

    model_config = ConfigDict(frozen=True)

    exercise_id: str
    should_progress: bool
    current_weight_kg: float = Field(..., ge=0.0)
    suggested_weight_kg: float = Field(..., ge=0.0)
    progression_amount_kg: float = Field(..., ge=0.0)
    reason: str
    confidence: Confidence
    streak: Optional[int] = Field(None, description="Consecutive sessions with every set at target")
    rule: str = Field(..., description="Name of the rule that produced this suggestion")
