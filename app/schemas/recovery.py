"""
Post-workout recovery schemas.
"""

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

from app.core.validation import clamp_int, clamp_to
from app.schemas.enums import FitnessGoal


class RecoveryRequest(BaseModel):
    """Summary of the workout that just finished."""

    workout_duration_minutes: float
    exercise_count: int = 0
    total_sets: int = 0
    fitness_goal: FitnessGoal = FitnessGoal.MUSCLE_GAIN
    body_weight_kg: float

    @field_validator("workout_duration_minutes")
    @classmethod
    def _clamp_minutes(cls, v: float) -> float:
        return clamp_to("minutes", v, "workout_duration_minutes")

    @field_validator("exercise_count", "total_sets")
    @classmethod
    def _clamp_counts(cls, v: int, info: ValidationInfo) -> int:
        return clamp_int("count", v, info.field_name)

    @field_validator("body_weight_kg")
    @classmethod
    def _clamp_weight(cls, v: float) -> float:
        return clamp_to("weight_kg", v, "body_weight_kg")


class RecoveryHydration(BaseModel):
    during_workout_ml: int
    post_workout_ml: int
    daily_total_ml: int
    tip: str


class RecoveryNutrition(BaseModel):
    protein_grams: int
    carbs_grams: int
    timing: str
    tip: str


class RecoverySupplement(BaseModel):
    name: str
    dosage: str
    timing: str
    reason: str


class RecoveryWindow(BaseModel):
    rest_hours: int = Field(..., description="Hours before training the same muscles again")
    muscle_recovery_days: int
    sleep_hours: int
    tip: str


class RecoveryRecommendation(BaseModel):
    model_config = ConfigDict(frozen=True)

    intensity_factor: int = Field(..., ge=1, le=3)
    hydration: RecoveryHydration
    nutrition: RecoveryNutrition
    supplements: list[RecoverySupplement]
    recovery: RecoveryWindow
