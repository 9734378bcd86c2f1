from __future__ import annotations

from typing import Optional

from interval_timer.errors import ConfigurationError
from interval_timer.models.exercise import ExerciseSpec
from interval_timer.models.program import GroupItem, Program, StandaloneItem
from interval_timer.models.state import Phase


PHASE_LABELS = {
    Phase.PREPARE: "PREPARE",
    Phase.WORK: "WORK",
    Phase.REST: "REST",
    Phase.CYCLE_REST: "CYCLE REST",
    Phase.FINISHED: "FINISHED",
}

PHASE_COLORS = {
    Phase.PREPARE: "#2563eb",  # blue
    Phase.WORK: "#16a34a",  # green
    Phase.REST: "#ea580c",  # orange
    Phase.CYCLE_REST: "#9333ea",  # purple
    Phase.FINISHED: "#4b5563",  # gray
}

REST_COLOR = PHASE_COLORS[Phase.REST]


def format_time(seconds: float) -> str:
    """MM:SS, minutes are not wrapped at the hour."""
    total = max(int(seconds), 0)
    return f"{total // 60:02d}:{total % 60:02d}"


def format_stopwatch(seconds: float) -> str:
    """MM:SS:cc with hundredths."""
    centis = max(int(round(seconds * 100)), 0)
    minutes, rem = divmod(centis, 6000)
    return f"{minutes:02d}:{rem // 100:02d}:{rem % 100:02d}"


def phase_label(phase: Phase) -> str:
    return PHASE_LABELS.get(phase, "")


def phase_color(phase: Phase) -> str:
    return PHASE_COLORS.get(phase, PHASE_COLORS[Phase.FINISHED])


def pretty_load(load: float) -> str:
    return f"{load:g}kg"


def format_exercise_details(exercise: ExerciseSpec) -> str:
    details = []
    if exercise.mode == "timed":
        details.append(f"{exercise.work_time or 0}s work")
    else:
        details.append(f"{exercise.repetitions or 0} reps")
        if exercise.load:
            details.append(pretty_load(exercise.load))
    if exercise.rest_time > 0:
        details.append(f"{exercise.rest_time}s rest")
    if exercise.rounds > 1:
        details.append(f"{exercise.rounds} rounds")
    if exercise.cycles > 1:
        details.append(f"{exercise.cycles} cycles")
    return " • ".join(details)


def total_exercise_count(program: Program) -> int:
    total = 0
    for item in program.items:
        if isinstance(item, StandaloneItem):
            total += 1
        elif isinstance(item, GroupItem):
            total += len(item.exercises)
    return total


def planned_program_seconds(program: Program) -> Optional[int]:
    """Seconds of playback for a fully timed program, or None if any exercise is manual.

    Mirrors the scheduler: standalone rounds repeat without extra rest, groups
    rest between exercises and before each repeat, items rest between each
    other, and empty groups are skipped. Zero-length rests still cost a tick.
    """
    try:
        return _planned_seconds(program)
    except ConfigurationError:
        return None


def _planned_seconds(program: Program) -> Optional[int]:
    # Imported here: the engine package imports this module for its snapshots
    from interval_timer.engine.phase_clock import planned_ticks

    def rest(seconds: int) -> int:
        return max(seconds, 1)

    playable = [i for i in program.items if isinstance(i, StandaloneItem) or i.exercises]
    total = 0
    for item in playable:
        if isinstance(item, StandaloneItem):
            if item.exercise.is_manual:
                return None
            total += item.rounds * planned_ticks(item.exercise)
        else:
            if any(ex.is_manual for ex in item.exercises):
                return None
            one_pass = sum(planned_ticks(ex) for ex in item.exercises)
            rests_per_pass = len(item.exercises) - 1
            total += item.rounds * one_pass
            total += (item.rounds * rests_per_pass + item.rounds - 1) * rest(item.rest_between_exercises)
    if len(playable) > 1:
        total += (len(playable) - 1) * rest(program.rest_between_items)
    return total
