"""
Unit tests for supplement recommendations.
"""

from app.decision.supplements import recommend_supplements
from app.schemas.enums import FitnessGoal, SupplementPriority, SupplementTiming


def _names(plan):
    return [r.name for r in plan.recommendations]


class TestRecommendSupplements:

    def test_muscle_gain_training_day(self):
        plan = recommend_supplements(FitnessGoal.MUSCLE_GAIN, True, 8)
        assert _names(plan) == [
            "Creatine monohydrate",
            "Whey protein",
            "Pre-workout",
            "Omega-3",
            "Casein",
            "Vitamin D3",
        ]
        assert plan.total_supplements == 6

    def test_fat_loss_rest_day_minimal(self):
        plan = recommend_supplements(FitnessGoal.FAT_LOSS, False, 8)
        assert _names(plan) == ["Creatine monohydrate", "Omega-3", "Vitamin D3"]

    def test_whey_timing_on_rest_day(self):
        plan = recommend_supplements(FitnessGoal.MUSCLE_GAIN, False, 8)
        whey = next(r for r in plan.recommendations if r.name == "Whey protein")
        assert whey.timing is SupplementTiming.WITH_MEAL

    def test_poor_sleep_adds_zma(self):
        plan = recommend_supplements(FitnessGoal.MAINTENANCE, False, 6)
        assert "ZMA" in _names(plan)
        assert [r.name for r in plan.by_timing(SupplementTiming.BEFORE_BED)] == ["ZMA"]

    def test_essentials(self):
        plan = recommend_supplements(FitnessGoal.RECOMPOSITION, True, 9)
        assert {r.name for r in plan.essentials()} == {"Creatine monohydrate", "Whey protein"}
        assert all(r.priority is SupplementPriority.ESSENTIAL for r in plan.essentials())
