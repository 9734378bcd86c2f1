"""Pure phase transitions for a single exercise.

Every function takes the current ``PhaseState`` and returns a ``Transition``
holding the next state and the cues to play. Nothing here touches time,
timers or callbacks; ``ExerciseEngine`` owns those.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Tuple

from interval_timer.errors import ConfigurationError
from interval_timer.models.exercise import ExerciseSpec
from interval_timer.models.state import Phase, PhaseState
from .cues import CueKind


BASELINE = PhaseState()


@dataclass(frozen=True)
class Transition:
    state: PhaseState
    cues: Tuple[CueKind, ...] = field(default_factory=tuple)
    phase_changed: bool = False

    @property
    def finished(self) -> bool:
        return self.phase_changed and self.state.phase == Phase.FINISHED


def validate_spec(spec: ExerciseSpec) -> None:
    if spec.mode == "timed" and not spec.work_time:
        raise ConfigurationError(f"Timed exercise '{spec.name or spec.id}' needs a work_time.")
    if spec.mode == "manual" and not spec.repetitions:
        raise ConfigurationError(f"Manual exercise '{spec.name or spec.id}' needs repetitions.")


def work_seconds(spec: ExerciseSpec) -> int:
    # Manual work is measured, not counted down
    if spec.is_manual:
        return 0
    return spec.work_time or 0


def is_manual_work(state: PhaseState, spec: ExerciseSpec) -> bool:
    return state.phase == Phase.WORK and spec.is_manual


def start_state(spec: ExerciseSpec) -> PhaseState:
    validate_spec(spec)
    return PhaseState(
        phase=Phase.PREPARE,
        time_remaining=spec.prepare_time,
        current_round=1,
        current_cycle=1,
        running=True,
        active=True,
    )


def _leave_work(state: PhaseState, spec: ExerciseSpec) -> Transition:
    if state.current_round < spec.rounds:
        nxt = state.model_copy(update={
            "phase": Phase.REST,
            "time_remaining": spec.rest_time,
            "current_round": state.current_round + 1,
        })
        return Transition(nxt, (CueKind.END_OF_WORK,), True)
    if spec.cycles > 1 and state.current_cycle < spec.cycles:
        nxt = state.model_copy(update={
            "phase": Phase.CYCLE_REST,
            "time_remaining": spec.rest_between_cycles,
            "current_round": 1,
            "current_cycle": state.current_cycle + 1,
        })
        return Transition(nxt, (CueKind.END_OF_WORK,), True)
    nxt = state.model_copy(update={
        "phase": Phase.FINISHED,
        "time_remaining": 0,
        "running": False,
    })
    return Transition(nxt, (CueKind.END_OF_WORK, CueKind.FINISH), True)


def end_phase(state: PhaseState, spec: ExerciseSpec) -> Transition:
    """End the current phase as if its countdown reached zero."""
    if not state.active or state.phase == Phase.FINISHED:
        return Transition(state)
    if state.phase == Phase.WORK:
        return _leave_work(state, spec)
    # prepare, rest and cycle_rest all lead into work
    nxt = state.model_copy(update={"phase": Phase.WORK, "time_remaining": work_seconds(spec)})
    return Transition(nxt, (CueKind.GO,), True)


def tick(state: PhaseState, spec: ExerciseSpec, countdown_from: int = 3) -> Transition:
    """Apply one clock tick.

    A tick at ``time_remaining <= 1`` ends the phase, so a phase of N seconds
    takes N ticks and a zero-length phase still takes one.
    """
    if not (state.active and state.running) or state.phase == Phase.FINISHED:
        return Transition(state)
    if is_manual_work(state, spec):
        return Transition(state)
    if state.time_remaining <= 1:
        return end_phase(state, spec)
    cues: Tuple[CueKind, ...] = ()
    if state.time_remaining <= countdown_from:
        cues = (CueKind.COUNTDOWN,)
    return Transition(state.model_copy(update={"time_remaining": state.time_remaining - 1}), cues)


def planned_ticks(spec: ExerciseSpec) -> int:
    """Ticks from start() to finished for a timed exercise."""
    validate_spec(spec)
    if spec.is_manual:
        raise ConfigurationError("Manual exercises have no planned duration.")

    def ticks(seconds: int) -> int:
        return max(seconds, 1)

    per_cycle = spec.rounds * ticks(spec.work_time or 0) + (spec.rounds - 1) * ticks(spec.rest_time)
    return (
        ticks(spec.prepare_time)
        + spec.cycles * per_cycle
        + (spec.cycles - 1) * ticks(spec.rest_between_cycles)
    )
