"""
Nutrition and hydration target schemas.
"""

from pydantic import BaseModel, Field

from app.schemas.daily_state import UserProfile
from app.schemas.enums import MealType


class MacroRequest(BaseModel):
    """Body of the macros endpoint."""

    profile: UserProfile
    is_training_day: bool = False
    include_meals: bool = True


class MacroTargets(BaseModel):
    """Daily energy and macro-nutrient targets."""

    calories: int = Field(..., ge=0)
    protein_grams: int = Field(..., ge=0)
    carbs_grams: int = Field(..., ge=0)
    fat_grams: int = Field(..., ge=0)
    protein_per_kg: float
    bmr: int = Field(..., description="Basal metabolic rate (kcal)")
    tdee: int = Field(..., description="Total daily energy expenditure (kcal)")
    is_training_day: bool


class MealMacros(BaseModel):
    """Share of the daily targets allotted to one meal."""

    name: str
    type: MealType
    calories: int
    protein: int
    carbs: int
    fats: int
    time: str = Field(..., description="Suggested time, HH:MM")


class MacroResponse(BaseModel):
    targets: MacroTargets
    meals: list[MealMacros] = Field(default_factory=list)


class HydrationRequest(BaseModel):
    """Body of the hydration endpoint."""

    profile: UserProfile


class HydrationTarget(BaseModel):
    """Daily water target."""

    daily_liters: float = Field(..., ge=0.0)
    per_kg_ml: int
    reason: str
    tips: list[str] = Field(default_factory=list)

    @property
    def daily_ml(self) -> int:
        return int(round(self.daily_liters * 1000))
