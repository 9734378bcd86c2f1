from __future__ import annotations

import pytest

from interval_timer.config import Settings
from interval_timer.engine import ManualTicker, Stopwatch
from interval_timer.models import ExerciseSpec, GroupItem, Phase, Program, StandaloneItem
from interval_timer.services import (
    PRESETS,
    create_default_exercise,
    format_exercise_details,
    format_stopwatch,
    format_time,
    phase_label,
    planned_program_seconds,
    strength,
    tabata,
    total_exercise_count,
)


@pytest.mark.parametrize(
    "seconds, expected",
    [(0, "00:00"), (9, "00:09"), (65, "01:05"), (3600, "60:00"), (-4, "00:00")],
)
def test_format_time(seconds: int, expected: str) -> None:
    assert format_time(seconds) == expected


def test_format_stopwatch_hundredths() -> None:
    assert format_stopwatch(61.23) == "01:01:23"
    assert format_stopwatch(0) == "00:00:00"


def test_phase_labels() -> None:
    assert phase_label(Phase.CYCLE_REST) == "CYCLE REST"
    assert phase_label(Phase.PREPARE) == "PREPARE"


def test_exercise_details() -> None:
    assert format_exercise_details(tabata(single_cycle=True)) == "45s work • 15s rest • 3 rounds"
    assert format_exercise_details(strength(repetitions=8, load=42.5)) == "8 reps • 42.5kg • 60s rest • 3 rounds • 3 cycles"


def test_presets_are_valid_specs() -> None:
    t = tabata()
    assert (t.prepare_time, t.work_time, t.rest_time, t.rounds, t.cycles, t.rest_between_cycles) == (5, 45, 15, 3, 4, 60)
    s = strength()
    assert s.is_manual and s.repetitions == 12 and s.load == 30
    assert set(PRESETS) == {"default", "tabata", "strength"}


def test_default_exercise_uses_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(
        "interval_timer.services.presets.get_settings",
        lambda: Settings(DEFAULT_WORK_TIME=20, DEFAULT_ROUNDS=8),
    )
    ex = create_default_exercise("Row")
    assert ex.name == "Row" and ex.work_time == 20 and ex.rounds == 8
    assert ex.mode == "timed"


def test_total_exercise_count_and_planned_seconds() -> None:
    work = ExerciseSpec(name="W", prepare_time=0, work_time=4, rest_time=0, rounds=1)
    program = Program(
        items=[StandaloneItem(exercise=work, rounds=2), GroupItem(exercises=[]), GroupItem(exercises=[work, work])],
        rest_between_items=0,
    )
    assert total_exercise_count(program) == 3
    # 2 * 5 + one item rest (1) + 2 * 5 + one exercise rest (10)
    assert planned_program_seconds(program) == 31


def test_planned_seconds_is_none_with_manual_or_broken_exercises() -> None:
    assert planned_program_seconds(Program(items=[StandaloneItem(exercise=strength())])) is None
    assert planned_program_seconds(Program(items=[StandaloneItem(exercise=ExerciseSpec(mode="timed"))])) is None


def test_stopwatch_excludes_stopped_time_and_records_laps() -> None:
    clock = ManualTicker()
    watch = Stopwatch(clock.now)
    assert watch.lap() is None
    watch.start()
    clock.advance(1.5)
    assert watch.lap() == 1.5
    watch.stop()
    clock.advance(10)
    watch.start()
    clock.advance(0.5)
    assert watch.elapsed == 2.0
    assert watch.lap() == 2.0
    assert watch.laps == [1.5, 2.0]
    watch.reset()
    assert watch.elapsed == 0 and watch.laps == [] and not watch.running
