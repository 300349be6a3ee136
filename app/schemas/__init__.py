"""Pydantic schemas for engine inputs, outputs and API bodies."""

from app.schemas.alerts import (
    AlertInputs,
    ExerciseProgressionRecord,
    ProactiveAlert,
    WorkoutSessionSummary,
)
from app.schemas.daily_state import DailyState, ScheduleContext, UserProfile
from app.schemas.habits import RecommendedHabit
from app.schemas.nutrition import HydrationTarget, MacroTargets, MealMacros
from app.schemas.plan import DailyPlan, DailyPlanRequest
from app.schemas.priorities import DailyPriority, PrioritiesRequest
from app.schemas.progression import ProgressionSuggestion, SetLog
from app.schemas.readiness import ReadinessResponse
from app.schemas.recovery import RecoveryRecommendation
from app.schemas.stagnation import ExerciseLogSummary, StagnationAnalysis
from app.schemas.supplements import SupplementPlan, SupplementRecommendation
from app.schemas.training import TrainingDecision

__all__ = [
    "AlertInputs",
    "ExerciseProgressionRecord",
    "ProactiveAlert",
    "WorkoutSessionSummary",
    "DailyState",
    "ScheduleContext",
    "UserProfile",
    "RecommendedHabit",
    "HydrationTarget",
    "MacroTargets",
    "MealMacros",
    "DailyPlan",
    "DailyPlanRequest",
    "DailyPriority",
    "PrioritiesRequest",
    "ProgressionSuggestion",
    "SetLog",
    "ReadinessResponse",
    "RecoveryRecommendation",
    "ExerciseLogSummary",
    "StagnationAnalysis",
    "SupplementPlan",
    "SupplementRecommendation",
    "TrainingDecision",
]
