"""
Unit tests for the daily plan orchestrator.
"""

import pytest

from app.decision.macros import recommend_macros
from app.decision.plan import generate_daily_plan
from app.schemas.daily_state import DailyState, ScheduleContext, UserProfile
from app.schemas.enums import ExperienceLevel, FitnessGoal, Gender, Recommendation
from app.schemas.plan import DailyPlanRequest


def _make_request(sleep_hours: float = 8, **overrides) -> DailyPlanRequest:
    params = dict(
        state=DailyState(
            sleep_hours=sleep_hours, sleep_quality=9, stress_level=2, soreness_level=1,
        ),
        schedule=ScheduleContext(
            is_scheduled_workout_day=True,
            days_since_last_workout=1,
            consecutive_workout_days=1,
        ),
        profile=UserProfile(
            weight_kg=80,
            height_cm=180,
            age=31,
            gender=Gender.MALE,
            fitness_goal=FitnessGoal.MUSCLE_GAIN,
            experience_level=ExperienceLevel.ADVANCED,
        ),
    )
    params.update(overrides)
    return DailyPlanRequest(**params)


class TestTrainingDay:

    @pytest.fixture
    def plan(self):
        return generate_daily_plan(_make_request())

    def test_trains(self, plan):
        assert plan.training.recommendation is Recommendation.FULL_WORKOUT
        assert plan.should_rest is False

    def test_readiness_consistent(self, plan):
        assert plan.training.readiness_score == pytest.approx(plan.readiness.score, abs=0.01)

    def test_macros_sized_for_training(self, plan):
        assert plan.macros.is_training_day is True
        assert plan.macros.calories == 3721

    def test_five_meals(self, plan):
        assert len(plan.meals) == 5

    def test_pre_workout_supplement(self, plan):
        names = [r.name for r in plan.supplements.recommendations]
        assert "Pre-workout" in names
        assert "Casein" in names

    def test_priorities(self, plan):
        assert len(plan.priorities) == 3
        assert [p.order for p in plan.priorities] == [1, 2, 3]
        assert plan.priorities[0].title == "Complete today's workout"
        assert plan.priorities[2].title == "Drink water"


class TestRestDay:

    @pytest.fixture
    def plan(self):
        return generate_daily_plan(_make_request(sleep_hours=4))

    def test_rests(self, plan):
        assert plan.training.recommendation is Recommendation.REST
        assert plan.should_rest is True

    def test_macros_sized_for_rest(self, plan):
        expected = recommend_macros(80, 180, 31, Gender.MALE, FitnessGoal.MUSCLE_GAIN)
        assert plan.macros == expected
        assert plan.macros.is_training_day is False

    def test_four_meals(self, plan):
        assert len(plan.meals) == 4

    def test_no_pre_workout(self, plan):
        names = [r.name for r in plan.supplements.recommendations]
        assert "Pre-workout" not in names
        assert "Whey protein" in names  # muscle gain keeps whey on rest days

    def test_recovery_priority(self, plan):
        assert plan.priorities[0].title == "Recovery day"


class TestCounters:

    def test_pending_supplements_take_focus(self):
        request = _make_request(hydration_progress_pct=80, supplements_taken=0)
        plan = generate_daily_plan(request)
        assert plan.priorities[2].title == "Take your supplements"

    def test_all_done(self):
        request = _make_request(hydration_progress_pct=100, supplements_taken=6, meals_completed=5)
        plan = generate_daily_plan(request)
        assert plan.priorities[1].title == "Meals completed"
        assert plan.priorities[2].title == "Stay consistent"

    def test_negative_counters_clamped(self):
        request = _make_request(hydration_progress_pct=-20, meals_completed=-1)
        assert request.hydration_progress_pct == 0
        assert request.meals_completed == 0


class TestReadinessComputedOnce:

    def test_single_evaluation(self, monkeypatch):
        import app.decision.plan as plan_module
        import app.decision.training as training_module

        calls = []
        real = plan_module.evaluate_readiness

        def counting(*args, **kwargs):
            calls.append(args)
            return real(*args, **kwargs)

        def fail(*args, **kwargs):
            raise AssertionError("training recomputed readiness")

        monkeypatch.setattr(plan_module, "evaluate_readiness", counting)
        monkeypatch.setattr(training_module, "score_readiness", fail)

        plan = generate_daily_plan(_make_request())
        assert len(calls) == 1
        assert plan.training.readiness_score == plan.readiness.score
