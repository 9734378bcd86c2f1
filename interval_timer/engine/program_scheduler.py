from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Callable, Optional

from interval_timer.config import Settings, get_settings
from interval_timer.errors import EmptyProgramError
from interval_timer.models.exercise import ExerciseSpec
from interval_timer.models.program import GroupItem, Program, StandaloneItem, is_playable, item_exercise
from interval_timer.models.state import PlaybackStatus, ProgramSnapshot
from .cues import CuePlayer, NullCuePlayer
from .exercise_engine import ExerciseEngine
from .phase_clock import validate_spec
from .ticker import TickHandle, Ticker


logger = logging.getLogger(__name__)

REST_STATUSES = (PlaybackStatus.REST_BETWEEN_EXERCISES, PlaybackStatus.REST_BETWEEN_ITEMS)


@dataclass
class PlaybackCursor:
    item_index: int = 0
    exercise_index_in_group: int = 0
    item_round: int = 1
    rest_time_remaining: int = 0


class ProgramScheduler:
    """Plays a Program item by item, one ExerciseEngine at a time.

    Standalone items repeat ``item.rounds`` times back to back; the exercise's
    own rest phases are the only rest between those repeats. Groups rest
    ``rest_between_exercises`` between each exercise and before every repeat
    of the group. ``rest_between_items`` separates consecutive items, never
    trailing the last one.

    A pause holds across those boundaries: a rest entered while paused does
    not count down, and an engine started while paused is paused at once.
    """

    def __init__(
        self,
        ticker: Ticker,
        cues: CuePlayer | None = None,
        *,
        now: Callable[[], float] = time.monotonic,
        on_complete: Callable[[], None] | None = None,
        settings: Settings | None = None,
    ) -> None:
        self.settings = settings or get_settings()
        self._ticker = ticker
        self._cues = cues or NullCuePlayer()
        self._now = now
        self.on_complete = on_complete

        self.program: Optional[Program] = None
        self.status = PlaybackStatus.IDLE
        self.cursor = PlaybackCursor()
        self._engine: Optional[ExerciseEngine] = None
        # One flag for rests and exercises; only resume_program clears it
        self._paused = False
        self._rest_handle: Optional[TickHandle] = None
        self._rest_generation = 0

    # ----- read side -----

    @property
    def active_engine(self) -> Optional[ExerciseEngine]:
        """The engine of the exercise being played, None during rests and when idle/finished."""
        if self.status == PlaybackStatus.EXERCISE:
            return self._engine
        return None

    @property
    def resting(self) -> bool:
        return self.status in REST_STATUSES

    @property
    def finished(self) -> bool:
        return self.status == PlaybackStatus.FINISHED

    @property
    def paused(self) -> bool:
        return self._paused and (self.resting or self.status == PlaybackStatus.EXERCISE)

    def current_exercise(self) -> Optional[ExerciseSpec]:
        if self.program is None or self.cursor.item_index >= len(self.program.items):
            return None
        item = self.program.items[self.cursor.item_index]
        return item_exercise(item, self.cursor.exercise_index_in_group)

    def snapshot(self) -> ProgramSnapshot:
        if self.program is None:
            return ProgramSnapshot(status=self.status)
        items = self.program.items
        item = items[self.cursor.item_index] if self.cursor.item_index < len(items) else None
        upcoming = self.current_exercise() if self.resting else None
        return ProgramSnapshot(
            program_name=self.program.name,
            status=self.status,
            item_index=self.cursor.item_index,
            item_count=len(items),
            exercise_index_in_group=self.cursor.exercise_index_in_group,
            group_size=len(item.exercises) if isinstance(item, GroupItem) else None,
            item_round=self.cursor.item_round,
            item_rounds=item.rounds if item is not None else 1,
            rest_time_remaining=self.cursor.rest_time_remaining,
            paused=self.paused,
            next_exercise_name=upcoming.name if upcoming is not None else None,
            exercise=self._engine.snapshot() if self._engine is not None and not self.resting else None,
        )

    # ----- commands -----

    def start_program(self, program: Program) -> None:
        first = self._next_playable(program, 0)
        if first is None:
            raise EmptyProgramError(f"Program '{program.name or program.id}' has no playable items.")
        for item in program.items:
            for exercise in (item.exercises if isinstance(item, GroupItem) else [item.exercise]):
                validate_spec(exercise)

        self.cancel()
        self.program = program
        self.cursor = PlaybackCursor(item_index=first)
        logger.info("Starting program %s with %d items", program.name or program.id, len(program.items))
        self._start_exercise()

    def pause_program(self) -> None:
        if self.status == PlaybackStatus.EXERCISE and self._engine is not None:
            self._paused = True
            self._engine.pause()
        elif self.resting:
            self._paused = True
            self._cancel_rest_tick()
        else:
            logger.debug("pause_program() ignored while %s", self.status.value)

    def resume_program(self) -> None:
        if self.status == PlaybackStatus.EXERCISE and self._engine is not None:
            self._paused = False
            self._engine.resume()
        elif self.resting:
            if not self._paused:
                return
            self._paused = False
            self._arm_rest()
        else:
            logger.debug("resume_program() ignored while %s", self.status.value)

    # Explicit entry points for outside controllers (e.g. a tab losing focus)
    pause = pause_program
    resume = resume_program

    def skip_rest(self) -> None:
        if not self.resting:
            logger.debug("skip_rest() ignored while %s", self.status.value)
            return
        self._cancel_rest_tick()
        self.cursor.rest_time_remaining = 0
        self._start_exercise()

    def advance(self) -> None:
        engine = self.active_engine
        if engine is None:
            logger.debug("advance() ignored while %s", self.status.value)
            return
        engine.advance()

    def cancel(self) -> None:
        self._teardown_engine()
        self._cancel_rest_tick()
        self._paused = False
        self.program = None
        self.cursor = PlaybackCursor()
        self.status = PlaybackStatus.IDLE

    # ----- traversal -----

    @staticmethod
    def _next_playable(program: Program, start: int) -> Optional[int]:
        for index in range(start, len(program.items)):
            if is_playable(program.items[index]):
                return index
            logger.info("Skipping empty group at item %d", index + 1)
        return None

    def _teardown_engine(self) -> None:
        if self._engine is not None:
            self._engine.reset()
            self._engine = None

    def _start_exercise(self) -> None:
        exercise = self.current_exercise()
        if exercise is None:
            # The group emptied out under us; treat it as complete
            logger.info("Item %d has nothing left to play", self.cursor.item_index + 1)
            self._advance_item()
            return
        self._teardown_engine()
        self._cancel_rest_tick()
        self.status = PlaybackStatus.EXERCISE
        self._engine = ExerciseEngine(
            exercise,
            self._ticker,
            self._cues,
            now=self._now,
            on_complete=self._on_exercise_complete,
            settings=self.settings,
        )
        self._launch(self._engine)

    def _launch(self, engine: ExerciseEngine) -> None:
        engine.start()
        if self._paused:
            engine.pause()

    def _on_exercise_complete(self) -> None:
        if self.program is None:
            return
        item = self.program.items[self.cursor.item_index]
        exercise = self.current_exercise()
        logger.info(
            "Exercise completed: %s, item %d, round %d",
            exercise.name if exercise is not None else "?",
            self.cursor.item_index + 1,
            self.cursor.item_round,
        )

        if isinstance(item, StandaloneItem):
            if self.cursor.item_round < item.rounds and self._engine is not None:
                self.cursor.item_round += 1
                self._launch(self._engine)
            else:
                self._advance_item()
            return

        is_last = self.cursor.exercise_index_in_group >= len(item.exercises) - 1
        if not is_last:
            self.cursor.exercise_index_in_group += 1
            self._enter_rest(PlaybackStatus.REST_BETWEEN_EXERCISES, item.rest_between_exercises)
        elif self.cursor.item_round < item.rounds:
            self.cursor.item_round += 1
            self.cursor.exercise_index_in_group = 0
            self._enter_rest(PlaybackStatus.REST_BETWEEN_EXERCISES, item.rest_between_exercises)
        else:
            self._advance_item()

    def _advance_item(self) -> None:
        if self.program is None:
            return
        nxt = self._next_playable(self.program, self.cursor.item_index + 1)
        if nxt is None:
            self._finish()
            return
        self.cursor = PlaybackCursor(item_index=nxt)
        self._enter_rest(PlaybackStatus.REST_BETWEEN_ITEMS, self.program.rest_between_items)

    def _finish(self) -> None:
        self._cancel_rest_tick()
        self._paused = False
        self.status = PlaybackStatus.FINISHED
        logger.info("Program complete: %s", self.program.name if self.program else "")
        if self.on_complete is not None:
            self.on_complete()

    # ----- rest countdown -----

    def _enter_rest(self, status: PlaybackStatus, seconds: int) -> None:
        self._teardown_engine()
        self.status = status
        self.cursor.rest_time_remaining = seconds
        self._arm_rest()

    def _cancel_rest_tick(self) -> None:
        self._rest_generation += 1
        if self._rest_handle is not None:
            self._rest_handle.cancel()
            self._rest_handle = None

    def _arm_rest(self) -> None:
        self._cancel_rest_tick()
        if not self.resting or self._paused:
            return
        generation = self._rest_generation
        self._rest_handle = self._ticker.call_later(
            self.settings.TICK_SECONDS, lambda: self._on_rest_tick(generation)
        )

    def _on_rest_tick(self, generation: int) -> None:
        if generation != self._rest_generation:
            return
        self._rest_handle = None
        # Same rule as the engine: a rest of N seconds lasts N ticks, zero lasts one
        if self.cursor.rest_time_remaining <= 1:
            self.cursor.rest_time_remaining = 0
            self._start_exercise()
            return
        self.cursor.rest_time_remaining -= 1
        self._arm_rest()
