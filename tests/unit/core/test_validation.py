"""
Unit tests for input clamping.
"""

import math

import pytest
from pydantic import ValidationError

from app.core.validation import BOUNDS, clamp, clamp_int, clamp_to, safe_ratio
from app.schemas.daily_state import DailyState, ScheduleContext, UserProfile


class TestClamp:

    @pytest.mark.parametrize("value,expected", [(-3, 0), (0, 0), (7.5, 7.5), (30, 24)])
    def test_hours(self, value, expected):
        assert clamp_to("hours", value) == expected

    @pytest.mark.parametrize("value,expected", [(0, 1), (12, 10), (5, 5)])
    def test_levels(self, value, expected):
        assert clamp_int("level", value) == expected

    def test_open_upper_bound(self):
        assert clamp_to("count", 10_000) == 10_000
        assert clamp_to("count", -5) == 0

    def test_clamp_int_rounds(self):
        assert clamp_int("level", 6.6) == 7
        assert isinstance(clamp_int("level", 6.6), int)

    @pytest.mark.parametrize("bad", ["7", None, True, [1]])
    def test_wrong_type_raises(self, bad):
        with pytest.raises(TypeError):
            clamp(bad, 0, 10)

    def test_nan_raises(self):
        with pytest.raises(TypeError):
            clamp(math.nan, 0, 10)

    def test_field_name_in_message(self):
        with pytest.raises(TypeError, match="sleep_hours"):
            clamp_to("hours", "eight", "sleep_hours")

    def test_every_bound_is_ordered(self):
        for low, high in BOUNDS.values():
            if low is not None and high is not None:
                assert low <= high


class TestSafeRatio:

    def test_normal(self):
        assert safe_ratio(1, 4) == 0.25

    @pytest.mark.parametrize("denominator", [0, -1])
    def test_non_positive_denominator(self, denominator):
        assert safe_ratio(5, denominator) == 0.0


class TestModelClamping:

    def test_daily_state_clamps(self):
        state = DailyState(sleep_hours=-2, sleep_quality=15, stress_level=0, soreness_level=11)
        assert state.sleep_hours == 0
        assert state.sleep_quality == 10
        assert state.stress_level == 1
        assert state.soreness_level == 10

    def test_daily_state_rejects_text(self):
        with pytest.raises(ValidationError):
            DailyState(sleep_hours="lots", sleep_quality=5, stress_level=5, soreness_level=5)

    def test_schedule_clamps(self):
        schedule = ScheduleContext(
            is_scheduled_workout_day=True,
            consecutive_workout_days=-4,
            scheduled_days_per_week=9,
        )
        assert schedule.consecutive_workout_days == 0
        assert schedule.scheduled_days_per_week == 7

    def test_profile_clamps(self):
        profile = UserProfile(weight_kg=0, height_cm=300, age=5, body_fat_percent=90)
        assert profile.weight_kg == 30
        assert profile.height_cm == 230
        assert profile.age == 14
        assert profile.body_fat_percent == 60

    def test_profile_body_fat_optional(self):
        assert UserProfile(weight_kg=80).body_fat_percent is None

    def test_models_are_frozen(self):
        state = DailyState(sleep_hours=7, sleep_quality=7, stress_level=3, soreness_level=3)
        with pytest.raises(ValidationError):
            state.sleep_hours = 9
