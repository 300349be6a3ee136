"""
Decision endpoints — stateless wrappers around the decision engine.

Callers send the full snapshot in the request body; nothing is read
from or written to storage.
"""

from fastapi import APIRouter

from app.decision.alerts import get_all_alerts
from app.decision.habits import habits_for
from app.decision.macros import distribute_meals, recommend_hydration, recommend_macros
from app.decision.plan import generate_daily_plan
from app.decision.priorities import priorities_for
from app.decision.progression import decide_progression
from app.decision.readiness import assess_readiness
from app.decision.recovery import recovery_for
from app.decision.stagnation import analyze_exercise_stagnation, find_alternative_exercises
from app.decision.supplements import recommend_supplements
from app.decision.training import decide_training
from app.schemas.alerts import AlertInputs, ProactiveAlert
from app.schemas.habits import HabitRequest, RecommendedHabit
from app.schemas.nutrition import (
    HydrationRequest,
    HydrationTarget,
    MacroRequest,
    MacroResponse,
)
from app.schemas.plan import DailyPlan, DailyPlanRequest
from app.schemas.priorities import DailyPriority, PrioritiesRequest
from app.schemas.progression import ProgressionRequest, ProgressionSuggestion
from app.schemas.readiness import ReadinessRequest, ReadinessResponse
from app.schemas.recovery import RecoveryRecommendation, RecoveryRequest
from app.schemas.stagnation import (
    AlternativesRequest,
    ExerciseAlternative,
    StagnationAnalysis,
    StagnationRequest,
)
from app.schemas.supplements import SupplementPlan, SupplementRequest
from app.schemas.training import TrainingDecision, TrainingRequest

router = APIRouter()


@router.post(
    "/readiness",
    summary="Compute the 0-10 readiness score.",
    response_model=ReadinessResponse,
)
def post_readiness(body: ReadinessRequest):
    return assess_readiness(body.state, body.experience_level)


@router.post(
    "/training",
    summary="Decide today's training recommendation.",
    response_model=TrainingDecision,
)
def post_training(body: TrainingRequest):
    return decide_training(body.state, body.schedule, body.experience_level)


@router.post(
    "/priorities",
    summary="Build today's three priorities.",
    response_model=list[DailyPriority],
)
def post_priorities(body: PrioritiesRequest):
    return priorities_for(body)


@router.post(
    "/alerts",
    summary="Run the proactive alert detectors (top 3).",
    response_model=list[ProactiveAlert],
)
def post_alerts(body: AlertInputs):
    return get_all_alerts(body)


@router.post(
    "/macros",
    summary="Compute calorie and macro targets.",
    response_model=MacroResponse,
)
def post_macros(body: MacroRequest):
    p = body.profile
    targets = recommend_macros(
        p.weight_kg, p.height_cm, p.age, p.gender, p.fitness_goal,
        p.body_fat_percent, body.is_training_day,
    )
    meals = distribute_meals(targets) if body.include_meals else []
    return MacroResponse(targets=targets, meals=meals)


@router.post(
    "/hydration",
    summary="Compute the daily water target.",
    response_model=HydrationTarget,
)
def post_hydration(body: HydrationRequest):
    p = body.profile
    return recommend_hydration(p.weight_kg, p.height_cm, p.fitness_goal)


@router.post(
    "/supplements",
    summary="Recommend today's supplements.",
    response_model=SupplementPlan,
)
def post_supplements(body: SupplementRequest):
    return recommend_supplements(body.fitness_goal, body.is_training_day, body.sleep_quality)


@router.post(
    "/plan",
    summary="Compute the complete daily plan.",
    response_model=DailyPlan,
)
def post_plan(body: DailyPlanRequest):
    return generate_daily_plan(body)


@router.post(
    "/progression",
    summary="Suggest next session's load for one exercise.",
    response_model=ProgressionSuggestion,
)
def post_progression(body: ProgressionRequest):
    return decide_progression(body)


@router.post(
    "/stagnation",
    summary="Analyze one exercise for a plateau.",
    response_model=StagnationAnalysis,
)
def post_stagnation(body: StagnationRequest):
    return analyze_exercise_stagnation(body.exercise_id, body.exercise_name, body.logs, body.as_of)


@router.post(
    "/alternatives",
    summary="Catalog exercises for the same muscle group.",
    response_model=list[ExerciseAlternative],
)
def post_alternatives(body: AlternativesRequest):
    return find_alternative_exercises(body.exercise_id, body.primary_muscle, body.catalog, body.exclude_ids)


@router.post(
    "/recovery",
    summary="Post-workout recovery recommendation.",
    response_model=RecoveryRecommendation,
)
def post_recovery(body: RecoveryRequest):
    return recovery_for(body)


@router.post(
    "/habits",
    summary="Recommend daily habits.",
    response_model=list[RecommendedHabit],
)
def post_habits(body: HabitRequest):
    return habits_for(body)
