"""
Daily habit schemas.
"""

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

from app.core.validation import clamp_int, clamp_to
from app.schemas.enums import ExperienceLevel, FitnessGoal, HabitCategory


class HabitRequest(BaseModel):
    weight_kg: float
    height_cm: float = 175.0
    fitness_goal: FitnessGoal = FitnessGoal.MUSCLE_GAIN
    experience_level: ExperienceLevel = ExperienceLevel.BEGINNER
    sleep_quality: int = 7
    stress_level: int = 5

    @field_validator("weight_kg")
    @classmethod
    def _clamp_weight(cls, v: float) -> float:
        return clamp_to("weight_kg", v)

    @field_validator("height_cm")
    @classmethod
    def _clamp_height(cls, v: float) -> float:
        return clamp_to("height_cm", v)

    @field_validator("sleep_quality", "stress_level")
    @classmethod
    def _clamp_levels(cls, v: int, info: ValidationInfo) -> int:
        return clamp_int("level", v, info.field_name)


class RecommendedHabit(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    description: str
    icon: str
    category: HabitCategory
    priority: int = Field(..., ge=1, le=10, description="Higher is more important")
    reason: str
