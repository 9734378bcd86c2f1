from __future__ import annotations

import logging
import time
from typing import Callable, List, Optional

from interval_timer.config import Settings, get_settings
from interval_timer.models.exercise import ExerciseSpec
from interval_timer.models.state import EngineSnapshot, Phase, PhaseState
from interval_timer.services.formatting import format_time, phase_color, phase_label
from .cues import CuePlayer, NullCuePlayer, play_safely
from .phase_clock import BASELINE, Transition, end_phase, is_manual_work, start_state, tick
from .stopwatch import Stopwatch
from .ticker import TickHandle, Ticker


logger = logging.getLogger(__name__)


class ExerciseEngine:
    """Drives one exercise through its phases on a one-second tick.

    Ticks are scheduled through ``ticker.call_later``. Each scheduled tick
    remembers the generation it was armed in; any command that cancels the
    tick bumps the generation, so a callback that was already queued becomes
    a no-op instead of mutating state after pause/reset.
    """

    def __init__(
        self,
        spec: ExerciseSpec,
        ticker: Ticker,
        cues: CuePlayer | None = None,
        *,
        now: Callable[[], float] = time.monotonic,
        on_phase_change: Callable[[Phase], None] | None = None,
        on_complete: Callable[[], None] | None = None,
        settings: Settings | None = None,
    ) -> None:
        settings = settings or get_settings()
        self.spec = spec
        self._ticker = ticker
        self._cues = cues or NullCuePlayer()
        self._tick_seconds = settings.TICK_SECONDS
        self._countdown_from = settings.COUNTDOWN_CUE_SECONDS
        self.on_phase_change = on_phase_change
        self.on_complete = on_complete

        self._state: PhaseState = BASELINE
        self._handle: Optional[TickHandle] = None
        self._generation = 0
        self._duration = Stopwatch(now)
        # Measured length of every completed manual set, in order
        self.set_durations: List[float] = []

    # ----- read side -----

    @property
    def state(self) -> PhaseState:
        return self._state

    @property
    def phase(self) -> Phase:
        return self._state.phase

    @property
    def running(self) -> bool:
        return self._state.running

    @property
    def active(self) -> bool:
        return self._state.active

    @property
    def finished(self) -> bool:
        return self._state.phase == Phase.FINISHED

    @property
    def exercise_duration(self) -> float:
        return self._duration.elapsed

    def snapshot(self) -> EngineSnapshot:
        s = self._state
        return EngineSnapshot(
            exercise_id=self.spec.id,
            exercise_name=self.spec.name,
            mode=self.spec.mode,
            phase=s.phase,
            phase_label=phase_label(s.phase),
            phase_color=phase_color(s.phase),
            time_remaining=s.time_remaining,
            formatted_time=format_time(s.time_remaining),
            current_round=s.current_round,
            rounds=self.spec.rounds,
            current_cycle=s.current_cycle,
            cycles=self.spec.cycles,
            running=s.running,
            active=s.active,
            exercise_duration=self.exercise_duration,
        )

    # ----- commands -----

    def configure(self, spec: ExerciseSpec) -> None:
        self.reset()
        self.spec = spec

    def start(self) -> None:
        # Validation happens before any state is touched
        state = start_state(self.spec)
        self._cancel_tick()
        self._duration.reset()
        self.set_durations = []
        self._state = state
        logger.debug("Started exercise %s", self.spec.name or self.spec.id)
        self._arm()

    def pause(self) -> None:
        if not (self._state.active and self._state.running):
            return
        self._cancel_tick()
        self._state = self._state.model_copy(update={"running": False})
        self._duration.stop()

    def resume(self) -> None:
        s = self._state
        if not s.active or s.running or s.phase == Phase.FINISHED:
            logger.debug("resume() ignored in phase %s", s.phase.value)
            return
        self._state = s.model_copy(update={"running": True})
        if is_manual_work(self._state, self.spec):
            self._duration.start()
        self._arm()

    def reset(self) -> None:
        self._cancel_tick()
        self._state = BASELINE
        self._duration.reset()
        self.set_durations = []

    def advance(self) -> None:
        if not self._state.active or self._state.phase == Phase.FINISHED:
            logger.debug("advance() ignored in phase %s", self._state.phase.value)
            return
        if is_manual_work(self._state, self.spec):
            duration = self._duration.elapsed
            self.set_durations.append(duration)
            logger.info(
                "Manual set completed: %s duration=%.1fs round=%d cycle=%d",
                self.spec.name or self.spec.id,
                duration,
                self._state.current_round,
                self._state.current_cycle,
            )
        self._apply(end_phase(self._state, self.spec))

    # ----- internals -----

    def _should_tick(self) -> bool:
        s = self._state
        return s.active and s.running and s.phase != Phase.FINISHED and not is_manual_work(s, self.spec)

    def _cancel_tick(self) -> None:
        self._generation += 1
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

    def _arm(self) -> None:
        self._cancel_tick()
        if not self._should_tick():
            return
        generation = self._generation
        self._handle = self._ticker.call_later(self._tick_seconds, lambda: self._on_tick(generation))

    def _on_tick(self, generation: int) -> None:
        if generation != self._generation:
            return
        self._handle = None
        self._apply(tick(self._state, self.spec, self._countdown_from))

    def _apply(self, transition: Transition) -> None:
        self._state = transition.state
        if transition.phase_changed:
            self._duration.reset()
            if is_manual_work(self._state, self.spec) and self._state.running:
                self._duration.start()
        self._arm()
        for cue in transition.cues:
            play_safely(self._cues, cue)
        if transition.phase_changed and self.on_phase_change is not None:
            self.on_phase_change(self._state.phase)
        if transition.finished:
            logger.info("Exercise finished: %s", self.spec.name or self.spec.id)
            # Last statement: the callback may restart or replace this engine
            if self.on_complete is not None:
                self.on_complete()
