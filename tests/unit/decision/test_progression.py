"""
Unit tests for load progression.
"""

import datetime

import pytest

from app.decision.alerts import stagnation_alerts
from app.decision.progression import (
    PROGRESSION_RULES,
    ProgressionConfig,
    as_progression_record,
    classify_exercise,
    decide_progression,
    progression_increment,
    suggested_weight_for_exercise,
)
from app.schemas.enums import AlertType, Confidence, LiftCategory, SessionFeeling
from app.schemas.progression import ProgressionRequest, SetLog


# ======================================================================
# Helpers
# ======================================================================


def _sets(reps: list[int], weight: float | None = 100.0, warmups: int = 0) -> list[SetLog]:
    logs = [
        SetLog(set_number=i + 1, weight_kg=weight / 2 if weight else None, reps_completed=15, is_warmup=True)
        for i in range(warmups)
    ]
    logs += [
        SetLog(set_number=warmups + i + 1, weight_kg=weight, reps_completed=r)
        for i, r in enumerate(reps)
    ]
    return logs


def _make_request(
    reps: list[int],
    target_sets: int = 3,
    name: str = "Bench Press",
    weight: float | None = 100.0,
    previous: list[int] | None = None,
    warmups: int = 0,
) -> ProgressionRequest:
    return ProgressionRequest(
        exercise_id="ex-1",
        exercise_name=name,
        target_reps_min=8,
        target_reps_max=12,
        target_sets=target_sets,
        last_session_logs=_sets(reps, weight, warmups),
        previous_session_logs=_sets(previous, weight) if previous is not None else None,
    )


# ======================================================================
# Classification
# ======================================================================


class TestClassifyExercise:

    @pytest.mark.parametrize("name,expected", [
        ("Back Squat", LiftCategory.COMPOUND_LOWER),
        ("Romanian Deadlift", LiftCategory.COMPOUND_LOWER),
        ("Leg Press", LiftCategory.COMPOUND_LOWER),
        ("Peso muerto", LiftCategory.COMPOUND_LOWER),
        ("Barbell Curl", LiftCategory.ISOLATION),
        ("Dumbbell Lateral Raise", LiftCategory.ISOLATION),
        ("Incline Bench Fly", LiftCategory.ISOLATION),
        ("Bench Press", LiftCategory.COMPOUND_UPPER),
        ("Barbell Row", LiftCategory.COMPOUND_UPPER),
        ("Plank", LiftCategory.DEFAULT),
    ])
    def test_categories(self, name, expected):
        assert classify_exercise(name) is expected

    @pytest.mark.parametrize("name,increment", [
        ("Squat", 5.0), ("Hammer Curl", 1.25), ("Bench Press", 2.5), ("Plank", 2.5),
    ])
    def test_increments(self, name, increment):
        assert progression_increment(name) == increment

    def test_custom_increments(self):
        cfg = ProgressionConfig(increments_kg={
            LiftCategory.COMPOUND_UPPER: 1.0,
            LiftCategory.COMPOUND_LOWER: 2.0,
            LiftCategory.ISOLATION: 0.5,
            LiftCategory.DEFAULT: 1.0,
        })
        assert progression_increment("Squat", cfg) == 2.0


# ======================================================================
# Decision
# ======================================================================


class TestDecideProgression:

    def test_all_sets_at_target(self):
        s = decide_progression(_make_request([12, 12, 12]))
        assert s.should_progress is True
        assert s.current_weight_kg == 100
        assert s.suggested_weight_kg == 102.5
        assert s.progression_amount_kg == 2.5
        assert s.confidence is Confidence.HIGH
        assert s.streak == 1
        assert s.reason == "All sets completed at 12 reps! 💪"
        assert s.rule == "all_sets_at_target"

    def test_lower_body_takes_bigger_jump(self):
        s = decide_progression(_make_request([12, 12, 12], name="Back Squat"))
        assert s.suggested_weight_kg == 105

    def test_streak_counts_previous_session(self):
        s = decide_progression(_make_request([12, 12, 12], previous=[12, 13, 12]))
        assert s.streak == 2

    def test_previous_session_short_keeps_streak_at_one(self):
        s = decide_progression(_make_request([12, 12, 12], previous=[12, 10, 9]))
        assert s.streak == 1

    def test_micro_progression(self):
        s = decide_progression(_make_request([12, 12, 12, 12, 10], target_sets=5))
        assert s.should_progress is True
        assert s.progression_amount_kg == 1.25
        assert s.suggested_weight_kg == 101.25
        assert s.confidence is Confidence.MEDIUM
        assert s.reason.startswith("4/5 sets")
        assert s.streak is None

    def test_struggling_keeps_weight(self):
        s = decide_progression(_make_request([12, 8, 8, 8], target_sets=4))
        assert s.should_progress is False
        assert s.suggested_weight_kg == 100
        assert s.confidence is Confidence.HIGH
        assert s.reason == "Stay at 100kg until you complete every set"

    def test_almost_there(self):
        s = decide_progression(_make_request([12, 12, 8, 8], target_sets=4))
        assert s.should_progress is False
        assert s.confidence is Confidence.MEDIUM
        assert s.reason == "2/4 sets completed. Almost there!"
        assert s.rule == "almost"

    def test_warmups_ignored(self):
        # Warm-ups reach 15 reps at 50 kg; counting them would make it 4/3.
        s = decide_progression(_make_request([12, 12, 8], warmups=2))
        assert s.rule == "almost"
        assert s.current_weight_kg == 100

    def test_heaviest_working_set_is_current(self):
        request = ProgressionRequest(
            exercise_id="ex-1",
            exercise_name="Bench Press",
            target_sets=2,
            last_session_logs=[
                SetLog(set_number=1, weight_kg=95, reps_completed=12),
                SetLog(set_number=2, weight_kg=97.5, reps_completed=12),
            ],
        )
        assert decide_progression(request).current_weight_kg == 97.5

    def test_only_warmups(self):
        request = _make_request([], warmups=2)
        s = decide_progression(request)
        assert s.should_progress is False
        assert s.confidence is Confidence.LOW
        assert s.reason == "No data from the last session"

    def test_no_weight_logged(self):
        s = decide_progression(_make_request([12, 12, 12], weight=None))
        assert s.confidence is Confidence.LOW
        assert s.reason == "No weight logged"
        assert s.suggested_weight_kg == 0

    def test_missing_reps_count_as_zero(self):
        request = ProgressionRequest(
            exercise_id="ex-1",
            exercise_name="Bench Press",
            target_sets=1,
            last_session_logs=[SetLog(weight_kg=100, reps_completed=None)],
        )
        assert decide_progression(request).should_progress is False

    def test_rule_order(self):
        assert [r.name for r in PROGRESSION_RULES] == [
            "all_sets_at_target", "most_sets_at_target", "under_half_at_target", "almost",
        ]


class TestProgressionRequest:

    def test_sets_clamped_to_one(self):
        assert _make_request([12], target_sets=0).target_sets == 1

    def test_rep_range_ordered(self):
        request = ProgressionRequest(
            exercise_id="x", exercise_name="x", target_reps_min=10, target_reps_max=6,
        )
        assert request.target_reps_max == 10


# ======================================================================
# Helpers
# ======================================================================


class TestSuggestedWeight:

    def test_full_session_adds_increment(self):
        assert suggested_weight_for_exercise("Deadlift", 140, True) == 145

    def test_incomplete_session_keeps_weight(self):
        assert suggested_weight_for_exercise("Deadlift", 140, False) == 140

    def test_zero_weight_stays_zero(self):
        assert suggested_weight_for_exercise("Deadlift", 0, True) == 0


class TestProgressionRecord:

    def test_record_feeds_progress_alert(self):
        suggestion = decide_progression(_make_request([12, 12, 12], name="Deadlift", previous=[12, 12, 12]))
        record = as_progression_record(suggestion, SessionFeeling.EASY)
        assert record.should_progress is True
        assert record.consecutive_successful_sessions == 2
        assert record.functional_max_kg == 100

        as_of = datetime.datetime(2026, 2, 8, 9)
        alerts = stagnation_alerts([record], {"ex-1": "Deadlift"}, as_of)
        assert [a.type for a in alerts] == [AlertType.PROGRESS]

    def test_struggling_record_has_no_streak(self):
        suggestion = decide_progression(_make_request([12, 8, 8, 8], target_sets=4))
        record = as_progression_record(suggestion, SessionFeeling.HARD)
        assert record.consecutive_successful_sessions == 0
        assert record.should_progress is False
