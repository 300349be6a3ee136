"""
Supplement recommendation schemas.
"""

from pydantic import BaseModel, Field

from app.schemas.enums import FitnessGoal, SupplementPriority, SupplementTiming


class SupplementRequest(BaseModel):
    fitness_goal: FitnessGoal = FitnessGoal.MUSCLE_GAIN
    is_training_day: bool = False
    sleep_quality: int = 7


class SupplementRecommendation(BaseModel):
    name: str
    timing: SupplementTiming
    dosage: str
    priority: SupplementPriority
    reason: str


class SupplementPlan(BaseModel):
    recommendations: list[SupplementRecommendation]
    total_supplements: int = Field(..., ge=0)

    def by_timing(self, timing: SupplementTiming) -> list[SupplementRecommendation]:
        """Recommendations taken at *timing*."""
        return [r for r in self.recommendations if r.timing == timing]

    def essentials(self) -> list[SupplementRecommendation]:
        return [r for r in self.recommendations if r.priority == SupplementPriority.ESSENTIAL]
