"""
Daily plan schemas — the full set of decisions for one day.
"""

from pydantic import BaseModel, Field, field_validator

from app.core.validation import clamp_int, clamp_to
from app.schemas.daily_state import DailyState, ScheduleContext, UserProfile
from app.schemas.nutrition import HydrationTarget, MacroTargets, MealMacros
from app.schemas.priorities import DailyPriority
from app.schemas.readiness import ReadinessResponse
from app.schemas.supplements import SupplementPlan
from app.schemas.training import TrainingDecision


class DailyPlanRequest(BaseModel):
    """Snapshot of the user's day plus today's completion counters."""

    state: DailyState
    schedule: ScheduleContext
    profile: UserProfile
    hydration_progress_pct: float = 0.0
    meals_completed: int = 0
    supplements_taken: int = 0

    @field_validator("hydration_progress_pct")
    @classmethod
    def _clamp_pct(cls, v: float) -> float:
        return clamp_to("percent", v, "hydration_progress_pct")

    @field_validator("meals_completed", "supplements_taken")
    @classmethod
    def _clamp_counts(cls, v: int) -> int:
        return clamp_int("count", v)


class DailyPlan(BaseModel):
    readiness: ReadinessResponse
    training: TrainingDecision
    macros: MacroTargets
    meals: list[MealMacros]
    hydration: HydrationTarget
    supplements: SupplementPlan
    priorities: list[DailyPriority] = Field(..., min_length=3, max_length=3)
    should_rest: bool
