"""
Training decision schemas.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from app.schemas.daily_state import DailyState, ScheduleContext
from app.schemas.enums import ExperienceLevel, Recommendation


class TrainingRequest(BaseModel):
    """Body of the training-decision endpoint."""

    state: DailyState
    schedule: ScheduleContext
    experience_level: ExperienceLevel = ExperienceLevel.BEGINNER


class TrainingDecision(BaseModel):
    """What to do today, and how hard."""

    model_config = ConfigDict(frozen=True)

    should_train: bool
    recommendation: Recommendation
    reason: str = Field(..., description="Human-readable justification")
    intensity_modifier: float = Field(
        ..., ge=0.0, le=1.2,
        description="Multiplier for planned load: 1.0 = as planned, 0 = rest",
    )
    suggested_focus: Optional[str] = None
    readiness_score: float = Field(..., ge=0.0, le=10.0)
    rule: str = Field(..., description="Name of the rule that produced this decision")

    @model_validator(mode="after")
    def _check_consistency(self) -> "TrainingDecision":
        if self.should_train != self.recommendation.trains:
            raise ValueError(
                f"should_train={self.should_train} contradicts "
                f"recommendation={self.recommendation.value}"
            )
        if (self.intensity_modifier == 0) != (self.recommendation is Recommendation.REST):
            raise ValueError("intensity_modifier must be 0 exactly when resting")
        return self
