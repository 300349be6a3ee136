"""
Readiness schemas.

Readiness is a 0-10 composite of last night's sleep, current stress and
muscle soreness, scaled by training experience:

    sleep    = min(hours / 8, 1) × (quality / 10)
    stress   = (10 - stress) / 10
    soreness = (10 - soreness) / 10
    raw      = (0.40 × sleep + 0.35 × stress + 0.25 × soreness) × 10
    score    = clamp(raw × experience_multiplier, 0, 10)
"""

from pydantic import BaseModel, Field

from app.schemas.daily_state import DailyState
from app.schemas.enums import ExperienceLevel


class ReadinessRequest(BaseModel):
    """Body of the readiness endpoint."""

    state: DailyState
    experience_level: ExperienceLevel = ExperienceLevel.BEGINNER


class ReadinessComponents(BaseModel):
    """Normalised 0-1 sub-scores before weighting."""

    sleep: float = Field(..., ge=0.0, le=1.0)
    stress: float = Field(..., ge=0.0, le=1.0)
    soreness: float = Field(..., ge=0.0, le=1.0)


class ReadinessResponse(BaseModel):
    """Readiness assessment."""

    score: float = Field(
        ..., ge=0.0, le=10.0,
        description="Composite readiness 0 (exhausted) to 10 (fully ready)",
    )
    status: str = Field(
        ...,
        description="One of: low, moderate, good, peak",
    )
    components: ReadinessComponents
    experience_multiplier: float
