"""
Daily priorities schemas.

The priorities widget always shows exactly three items:

1. training or recovery,
2. nutrition progress,
3. the first pending item among hydration, supplements and stress
   (or a consistency affirmation when nothing is pending).
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.core.validation import clamp_int, clamp_to
from app.schemas.enums import FitnessGoal, PriorityCategory


class PrioritiesRequest(BaseModel):
    """Completion counters for today."""

    is_workout_day: bool
    hydration_progress_pct: float = Field(..., description="Hydration progress 0-100+")
    meals_completed: int = 0
    total_meals: int = 0
    supplements_taken: int = 0
    total_supplements: int = 0
    sleep_quality: int = 7
    stress_level: int = 5
    fitness_goal: Optional[FitnessGoal] = None

    @field_validator("hydration_progress_pct")
    @classmethod
    def _clamp_pct(cls, v: float) -> float:
        return clamp_to("percent", v, "hydration_progress_pct")

    @field_validator("meals_completed", "total_meals", "supplements_taken", "total_supplements")
    @classmethod
    def _clamp_counts(cls, v: int) -> int:
        return clamp_int("count", v)

    @field_validator("sleep_quality", "stress_level")
    @classmethod
    def _clamp_levels(cls, v: int) -> int:
        return clamp_int("level", v)


class DailyPriority(BaseModel):
    """One line of the three-slot checklist."""

    model_config = ConfigDict(frozen=True)

    order: int = Field(..., ge=1, le=3)
    title: str
    description: str
    category: PriorityCategory
    icon: str
    completed: bool = False
