from __future__ import annotations

from interval_timer.config import get_settings
from interval_timer.models.exercise import ExerciseSpec


def create_default_exercise(name: str = "New Exercise") -> ExerciseSpec:
    s = get_settings()
    return ExerciseSpec(
        name=name,
        mode="timed",
        prepare_time=s.DEFAULT_PREPARE_TIME,
        work_time=s.DEFAULT_WORK_TIME,
        rest_time=s.DEFAULT_REST_TIME,
        rounds=s.DEFAULT_ROUNDS,
        cycles=s.DEFAULT_CYCLES,
        rest_between_cycles=s.DEFAULT_REST_BETWEEN_CYCLES,
        repetitions=s.DEFAULT_REPETITIONS,
        load=s.DEFAULT_LOAD,
    )


def tabata(name: str = "Tabata", single_cycle: bool = False) -> ExerciseSpec:
    return ExerciseSpec(
        name=name,
        mode="timed",
        prepare_time=5,
        work_time=45,
        rest_time=15,
        rounds=3,
        cycles=1 if single_cycle else 4,
        rest_between_cycles=60,
    )


def strength(name: str = "Strength", repetitions: int = 12, load: float = 30, single_cycle: bool = False) -> ExerciseSpec:
    """Manual sets: work ends when the lifter marks the set complete."""
    return ExerciseSpec(
        name=name,
        mode="manual",
        prepare_time=5,
        rest_time=60,
        rounds=3,
        cycles=1 if single_cycle else 3,
        rest_between_cycles=60,
        repetitions=repetitions,
        load=load,
    )


PRESETS = {
    "default": create_default_exercise,
    "tabata": tabata,
    "strength": strength,
}
