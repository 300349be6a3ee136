"""
Input snapshots for the daily decision engine.

These are immutable, caller-assembled views of the user's day.  The
engine never mutates or persists them.  Numeric fields are clamped to
their valid range on construction (see :mod:`app.core.validation`).
"""

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

from app.core.validation import clamp_int, clamp_to
from app.schemas.enums import ExperienceLevel, FitnessGoal, Gender


class DailyState(BaseModel):
    """Self-reported physiological state for today."""

    model_config = ConfigDict(frozen=True)

    sleep_hours: float = Field(..., description="Hours slept last night")
    sleep_quality: int = Field(..., description="Sleep quality 1-10")
    stress_level: int = Field(..., description="Stress level 1-10")
    soreness_level: int = Field(..., description="Muscle soreness 1-10")
    energy_level: int = Field(
        5,
        description="Perceived energy 1-10 (informational, not used by the decision)",
    )

    @field_validator("sleep_hours")
    @classmethod
    def _clamp_hours(cls, v: float) -> float:
        return clamp_to("hours", v, "sleep_hours")

    @field_validator("sleep_quality", "stress_level", "soreness_level", "energy_level")
    @classmethod
    def _clamp_levels(cls, v: int, info: ValidationInfo) -> int:
        return clamp_int("level", v, info.field_name)


class ScheduleContext(BaseModel):
    """Where today sits in the user's training schedule."""

    model_config = ConfigDict(frozen=True)

    is_scheduled_workout_day: bool
    days_since_last_workout: int = Field(0, description="Days since the last completed session")
    consecutive_workout_days: int = Field(0, description="Current streak of training days")
    scheduled_days_per_week: int = Field(4, description="Planned sessions per week (0-7)")

    @field_validator("days_since_last_workout", "consecutive_workout_days")
    @classmethod
    def _clamp_counts(cls, v: int, info: ValidationInfo) -> int:
        return clamp_int("count", v, info.field_name)

    @field_validator("scheduled_days_per_week")
    @classmethod
    def _clamp_days(cls, v: int) -> int:
        return clamp_int("days_per_week", v, "scheduled_days_per_week")


class UserProfile(BaseModel):
    """Profile data relevant to the engine."""

    model_config = ConfigDict(frozen=True)

    weight_kg: float
    height_cm: float = 175.0
    age: int = 25
    gender: Gender = Gender.MALE
    fitness_goal: FitnessGoal = FitnessGoal.MUSCLE_GAIN
    experience_level: ExperienceLevel = ExperienceLevel.BEGINNER
    body_fat_percent: float | None = None

    @field_validator("weight_kg")
    @classmethod
    def _clamp_weight(cls, v: float) -> float:
        return clamp_to("weight_kg", v)

    @field_validator("height_cm")
    @classmethod
    def _clamp_height(cls, v: float) -> float:
        return clamp_to("height_cm", v)

    @field_validator("age")
    @classmethod
    def _clamp_age(cls, v: int) -> int:
        return clamp_int("age", v)

    @field_validator("body_fat_percent")
    @classmethod
    def _clamp_body_fat(cls, v: float | None) -> float | None:
        if v is None:
            return None
        return clamp_to("body_fat_percent", v)
