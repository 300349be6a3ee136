"""What would the engine tell you TODAY?

Runs the full daily plan and the proactive alerts on a hand-written
snapshot and prints the result.

Usage:
    python scripts/simulate_today.py
"""

import datetime
import sys
from pathlib import Path

project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from app.core.logging import configure_logging
from app.decision.alerts import get_all_alerts
from app.decision.plan import generate_daily_plan
from app.decision.progression import as_progression_record, decide_progression
from app.schemas.alerts import AlertInputs, ExerciseProgressionRecord, WorkoutSessionSummary
from app.schemas.daily_state import DailyState, ScheduleContext, UserProfile
from app.schemas.enums import SessionFeeling
from app.schemas.plan import DailyPlanRequest
from app.schemas.progression import ProgressionRequest, SetLog

NOW = datetime.datetime(2026, 2, 8, 16, 30)
TODAY = NOW.date()

PROFILE = UserProfile(
    weight_kg=78.4,
    height_cm=181,
    age=34,
    gender="male",
    fitness_goal="muscle_gain",
    experience_level="intermediate",
)

STATE = DailyState(sleep_hours=6.5, sleep_quality=7, stress_level=6, soreness_level=4, energy_level=6)

SCHEDULE = ScheduleContext(
    is_scheduled_workout_day=True,
    days_since_last_workout=1,
    consecutive_workout_days=2,
    scheduled_days_per_week=4,
)

# (days ago, completed, feeling)
SESSIONS = [
    (8, True, "correct"),
    (6, True, "hard"),
    (3, True, "correct"),
    (1, True, "hard"),
]

RECORDS = [
    ExerciseProgressionRecord(exercise_id="bench_press", functional_max_kg=92.5,
                              consecutive_successful_sessions=0, last_feeling="hard"),
    ExerciseProgressionRecord(exercise_id="overhead_press", functional_max_kg=55,
                              consecutive_successful_sessions=0, last_feeling="hard"),
]

DEADLIFT = ProgressionRequest(
    exercise_id="deadlift",
    exercise_name="Deadlift",
    target_reps_min=5,
    target_reps_max=5,
    target_sets=3,
    last_session_logs=[SetLog(set_number=i, weight_kg=160, reps_completed=5) for i in (1, 2, 3)],
)

NAMES = {
    "bench_press": "Bench Press",
    "overhead_press": "Overhead Press",
    "deadlift": "Deadlift",
}


def _sessions() -> list[WorkoutSessionSummary]:
    out = []
    for i, (days_ago, completed, feeling) in enumerate(SESSIONS):
        day = TODAY - datetime.timedelta(days=days_ago)
        out.append(WorkoutSessionSummary(
            id=f"s{i}",
            date=day,
            completed_at=datetime.datetime.combine(day, datetime.time(19, 0)) if completed else None,
            feeling=feeling,
        ))
    return out


def main() -> None:
    configure_logging()

    plan = generate_daily_plan(DailyPlanRequest(
        state=STATE,
        schedule=SCHEDULE,
        profile=PROFILE,
        hydration_progress_pct=35,
        meals_completed=2,
        supplements_taken=1,
    ))

    print(f"=== {TODAY.isoformat()} ===")
    print(f"Readiness: {plan.readiness.score:.2f} ({plan.readiness.status})")
    t = plan.training
    print(f"Training:  {t.recommendation.value} ×{t.intensity_modifier} — {t.reason}")
    if t.suggested_focus:
        print(f"           focus: {t.suggested_focus}")
    m = plan.macros
    print(f"Macros:    {m.calories} kcal  P{m.protein_grams} C{m.carbs_grams} F{m.fat_grams}")
    print(f"Water:     {plan.hydration.daily_liters} L")
    print(f"Supps:     {', '.join(r.name for r in plan.supplements.recommendations)}")
    print()
    print("Priorities:")
    for p in plan.priorities:
        mark = "x" if p.completed else " "
        print(f"  [{mark}] {p.order}. {p.icon} {p.title} — {p.description}")

    deadlift = decide_progression(DEADLIFT)
    print()
    print(f"Deadlift:  {deadlift.current_weight_kg:g} -> {deadlift.suggested_weight_kg:g} kg ({deadlift.reason})")

    alerts = get_all_alerts(AlertInputs(
        scheduled_days_per_week=SCHEDULE.scheduled_days_per_week,
        recent_sessions=_sessions(),
        progression_records=RECORDS + [as_progression_record(deadlift, SessionFeeling.EASY)],
        exercise_names=NAMES,
        today_protein_grams=48,
        target_protein_grams=m.protein_grams,
        consumed_ml=900,
        target_ml=plan.hydration.daily_ml,
        current_weight_kg=PROFILE.weight_kg,
        previous_weight_kg=77.6,
        fitness_goal=PROFILE.fitness_goal,
        as_of=NOW,
    ))
    print()
    print("Alerts:")
    for a in alerts:
        print(f"  [{a.priority.value:>6}] {a.icon} {a.title} — {a.description}")


if __name__ == "__main__":
    main()
