"""Daily decision engine — readiness, training, nutrition, priorities, alerts."""

from app.decision.alerts import AlertConfig, get_all_alerts
from app.decision.habits import recommend_habits
from app.decision.macros import recommend_hydration, recommend_macros
from app.decision.plan import generate_daily_plan
from app.decision.priorities import generate_priorities
from app.decision.progression import ProgressionConfig, decide_progression
from app.decision.readiness import ReadinessConfig, score_readiness
from app.decision.recovery import RecoveryConfig, recommend_recovery
from app.decision.stagnation import StagnationConfig, analyze_exercise_stagnation
from app.decision.supplements import recommend_supplements
from app.decision.training import decide_training

__all__ = [
    "AlertConfig",
    "ProgressionConfig",
    "ReadinessConfig",
    "RecoveryConfig",
    "StagnationConfig",
    "analyze_exercise_stagnation",
    "decide_progression",
    "decide_training",
    "generate_daily_plan",
    "generate_priorities",
    "get_all_alerts",
    "recommend_habits",
    "recommend_hydration",
    "recommend_macros",
    "recommend_recovery",
    "recommend_supplements",
    "score_readiness",
]
