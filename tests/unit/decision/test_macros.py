"""
Unit tests for macro, meal and hydration targets.
"""

import pytest

from app.decision.macros import (
    GOAL_CALORIE_MULTIPLIERS,
    PROTEIN_PER_KG,
    basal_metabolic_rate,
    distribute_meals,
    protein_target,
    recommend_hydration,
    recommend_macros,
    water_intake_liters,
)
from app.schemas.enums import FitnessGoal, Gender, MealType


# ======================================================================
# BMR
# ======================================================================


class TestBasalMetabolicRate:

    def test_mifflin_male(self):
        assert basal_metabolic_rate(80, 180, 30, Gender.MALE) == pytest.approx(1780.0)

    def test_mifflin_female(self):
        assert basal_metabolic_rate(60, 165, 30, Gender.FEMALE) == pytest.approx(1320.25)

    def test_other_sits_between(self):
        male = basal_metabolic_rate(70, 170, 30, Gender.MALE)
        female = basal_metabolic_rate(70, 170, 30, Gender.FEMALE)
        other = basal_metabolic_rate(70, 170, 30, Gender.OTHER)
        assert female < other < male

    def test_katch_mcardle_with_body_fat(self):
        # lean mass 64 kg → 370 + 21.6 × 64
        assert basal_metabolic_rate(80, 180, 30, Gender.MALE, 20) == pytest.approx(1752.4)

    def test_zero_weight_clamped(self):
        assert basal_metabolic_rate(0, 180, 30, Gender.MALE) == basal_metabolic_rate(30, 180, 30, Gender.MALE)


# ======================================================================
# Macros
# ======================================================================


class TestRecommendMacros:

    def test_training_day_muscle_gain(self):
        m = recommend_macros(80, 180, 31, Gender.MALE, FitnessGoal.MUSCLE_GAIN, is_training_day=True)
        assert m.bmr == 1775
        assert m.tdee == 3062
        assert m.calories == 3721
        assert m.protein_grams == 176
        assert m.fat_grams == 116
        assert m.carbs_grams == 494
        assert m.protein_per_kg == 2.2
        assert m.is_training_day is True

    def test_rest_day_maintenance(self):
        m = recommend_macros(80, 180, 31, Gender.MALE, FitnessGoal.MAINTENANCE)
        assert m.calories == 2751
        assert m.protein_grams == 144
        assert m.fat_grams == 86
        assert m.carbs_grams == 351

    def test_training_day_adds_calories(self):
        rest = recommend_macros(70, 175, 28, Gender.FEMALE, FitnessGoal.RECOMPOSITION)
        train = recommend_macros(70, 175, 28, Gender.FEMALE, FitnessGoal.RECOMPOSITION, is_training_day=True)
        assert train.calories > rest.calories + 200
        assert train.protein_grams == rest.protein_grams

    def test_fat_loss_is_a_deficit(self):
        cut = recommend_macros(90, 180, 40, Gender.MALE, FitnessGoal.FAT_LOSS)
        assert cut.calories < cut.tdee

    def test_carbs_never_negative(self):
        m = recommend_macros(300, 180, 30, Gender.MALE, FitnessGoal.FAT_LOSS, body_fat_percent=60)
        assert m.carbs_grams == 0

    def test_tables_cover_every_goal(self):
        assert set(GOAL_CALORIE_MULTIPLIERS) == set(FitnessGoal)
        assert set(PROTEIN_PER_KG) == set(FitnessGoal)

    @pytest.mark.parametrize("goal,expected", [
        (FitnessGoal.MUSCLE_GAIN, 165),
        (FitnessGoal.FAT_LOSS, 180),
        (FitnessGoal.RECOMPOSITION, 150),
        (FitnessGoal.MAINTENANCE, 135),
    ])
    def test_protein_target(self, goal, expected):
        assert protein_target(75, goal) == expected


# ======================================================================
# Meals
# ======================================================================


class TestDistributeMeals:

    def test_training_day_has_five_meals(self):
        m = recommend_macros(80, 180, 30, Gender.MALE, FitnessGoal.MUSCLE_GAIN, is_training_day=True)
        meals = distribute_meals(m)
        assert len(meals) == 5
        assert MealType.POST_WORKOUT in {meal.type for meal in meals}

    def test_rest_day_has_four_meals(self):
        m = recommend_macros(80, 180, 30, Gender.MALE, FitnessGoal.MUSCLE_GAIN)
        meals = distribute_meals(m)
        assert [meal.type for meal in meals] == [
            MealType.BREAKFAST, MealType.LUNCH, MealType.SNACK, MealType.DINNER,
        ]

    @pytest.mark.parametrize("training", [True, False])
    def test_calories_add_up(self, training):
        m = recommend_macros(80, 180, 30, Gender.MALE, FitnessGoal.MUSCLE_GAIN, is_training_day=training)
        total = sum(meal.calories for meal in distribute_meals(m))
        assert abs(total - m.calories) <= len(distribute_meals(m))

    def test_explicit_flag_overrides_targets(self):
        m = recommend_macros(80, 180, 30, Gender.MALE, FitnessGoal.MUSCLE_GAIN)
        assert len(distribute_meals(m, is_training_day=True)) == 5


# ======================================================================
# Hydration
# ======================================================================


class TestHydration:

    @pytest.mark.parametrize("weight,height,goal,liters", [
        (80, 175, FitnessGoal.MUSCLE_GAIN, 3.6),
        (80, 185, FitnessGoal.MUSCLE_GAIN, 4.0),
        (60, 160, FitnessGoal.FAT_LOSS, 2.3),
        (70, 170, FitnessGoal.MAINTENANCE, 2.8),
    ])
    def test_water_intake(self, weight, height, goal, liters):
        assert water_intake_liters(weight, height, goal) == pytest.approx(liters)

    def test_recommendation(self):
        target = recommend_hydration(80, 175, FitnessGoal.MUSCLE_GAIN)
        assert target.daily_liters == pytest.approx(3.6)
        assert target.daily_ml == 3600
        assert target.per_kg_ml == 45
        assert "80 kg" in target.reason
        assert "muscle gain" in target.reason
        assert len(target.tips) == 5

    def test_fat_loss_tips(self):
        target = recommend_hydration(80, 175, FitnessGoal.FAT_LOSS)
        assert any("before every meal" in tip for tip in target.tips)
