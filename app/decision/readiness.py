"""
Readiness — a single 0-10 number gating today's training intensity.

Model
-----
Three normalised signals are combined with fixed weights:

    sleep    = min(hours / 8, 1) × (quality / 10)      weight 0.40
    stress   = (10 - stress_level) / 10                weight 0.35
    soreness = (10 - soreness_level) / 10              weight 0.25

The weighted sum is scaled to 0-10 and multiplied by an experience
factor (beginners recover slower, advanced lifters faster):

    beginner ×0.9    intermediate ×1.0    advanced ×1.1

The result is clamped to [0, 10].  Inputs are clamped first (hours to
0-24, levels to 1-10), so the score is monotone: more sleep or better
sleep quality never lowers it, more stress or soreness never raises it.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field

from app.core.validation import clamp, clamp_to
from app.schemas.daily_state import DailyState
from app.schemas.enums import ExperienceLevel
from app.schemas.readiness import ReadinessComponents, ReadinessResponse

# ======================================================================
# Configuration
# ======================================================================

_DEFAULT_WEIGHTS: dict[str, float] = {
    "sleep": 0.40,
    "stress": 0.35,
    "soreness": 0.25,
}

_DEFAULT_EXPERIENCE_MULTIPLIERS: dict[ExperienceLevel, float] = {
    ExperienceLevel.BEGINNER: 0.9,
    ExperienceLevel.INTERMEDIATE: 1.0,
    ExperienceLevel.ADVANCED: 1.1,
}

# Hours of sleep that count as a full night.
_FULL_NIGHT_HOURS = 8.0

# Status labels: (label, low inclusive, high exclusive).
_READINESS_THRESHOLDS: list[tuple[str, float, float]] = [
    ("low", 0.0, 4.0),
    ("moderate", 4.0, 6.0),
    ("good", 6.0, 8.0),
    ("peak", 8.0, float("inf")),
]


class ReadinessConfig(BaseModel):
    """Configuration for the readiness computation."""

    weights: dict[str, float] = Field(
        default_factory=lambda: dict(_DEFAULT_WEIGHTS),
    )
    experience_multipliers: dict[ExperienceLevel, float] = Field(
        default_factory=lambda: dict(_DEFAULT_EXPERIENCE_MULTIPLIERS),
    )
    full_night_hours: float = Field(default=_FULL_NIGHT_HOURS, gt=0)


DEFAULT_READINESS_CONFIG = ReadinessConfig()


# ======================================================================
# Computation
# ======================================================================


def _components(
    sleep_hours: float,
    sleep_quality: float,
    stress_level: float,
    soreness_level: float,
    cfg: ReadinessConfig,
) -> ReadinessComponents:
    hours = clamp_to("hours", sleep_hours, "sleep_hours")
    quality = clamp_to("level", sleep_quality, "sleep_quality")
    stress = clamp_to("level", stress_level, "stress_level")
    soreness = clamp_to("level", soreness_level, "soreness_level")

    return ReadinessComponents(
        sleep=min(hours / cfg.full_night_hours, 1.0) * (quality / 10),
        stress=(10 - stress) / 10,
        soreness=(10 - soreness) / 10,
    )


def _weighted(components: ReadinessComponents, cfg: ReadinessConfig) -> float:
    w = cfg.weights
    return (
        components.sleep * w["sleep"]
        + components.stress * w["stress"]
        + components.soreness * w["soreness"]
    ) * 10


def score_readiness(
    sleep_hours: float,
    sleep_quality: float,
    stress_level: float,
    soreness_level: float,
    experience_level: ExperienceLevel = ExperienceLevel.BEGINNER,
    config: Optional[ReadinessConfig] = None,
) -> float:
    """Compute the 0-10 readiness score.

    Args:
        sleep_hours: Hours slept (clamped to 0-24).
        sleep_quality: 1-10.
        stress_level: 1-10, higher is more stressed.
        soreness_level: 1-10, higher is more sore.
        experience_level: Scales the raw score.
        config: Optional config override.

    Returns:
        Unrounded readiness in ``[0, 10]``.
    """
    cfg = config or DEFAULT_READINESS_CONFIG
    components = _components(sleep_hours, sleep_quality, stress_level, soreness_level, cfg)
    multiplier = cfg.experience_multipliers[ExperienceLevel(experience_level)]
    return clamp(_weighted(components, cfg) * multiplier, 0.0, 10.0, field="readiness")


def label_readiness(score: float) -> str:
    """Map a readiness score to its status label."""
    for label, low, high in _READINESS_THRESHOLDS:
        if low <= score < high:
            return label
    return "peak"


def evaluate_readiness(
    state: DailyState,
    experience_level: ExperienceLevel = ExperienceLevel.BEGINNER,
    config: Optional[ReadinessConfig] = None,
) -> tuple[float, ReadinessResponse]:
    """Score *state* once and return both forms of the result.

    Returns:
        ``(score, response)``: the unrounded score used by decisions, and
        the rounded breakdown shown to the user.
    """
    cfg = config or DEFAULT_READINESS_CONFIG
    components = _components(
        state.sleep_hours, state.sleep_quality,
        state.stress_level, state.soreness_level, cfg,
    )
    multiplier = cfg.experience_multipliers[ExperienceLevel(experience_level)]
    score = clamp(_weighted(components, cfg) * multiplier, 0.0, 10.0, field="readiness")

    response = ReadinessResponse(
        score=round(score, 2),
        status=label_readiness(score),
        components=ReadinessComponents(
            sleep=round(components.sleep, 3),
            stress=round(components.stress, 3),
            soreness=round(components.soreness, 3),
        ),
        experience_multiplier=multiplier,
    )
    return score, response


def assess_readiness(
    state: DailyState,
    experience_level: ExperienceLevel = ExperienceLevel.BEGINNER,
    config: Optional[ReadinessConfig] = None,
) -> ReadinessResponse:
    """Readiness score with its components and label, for display."""
    return evaluate_readiness(state, experience_level, config)[1]
