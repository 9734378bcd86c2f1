from __future__ import annotations

from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field


class Phase(str, Enum):
    PREPARE = "prepare"
    WORK = "work"
    REST = "rest"
    CYCLE_REST = "cycle_rest"
    FINISHED = "finished"


class PlaybackStatus(str, Enum):
    IDLE = "idle"
    EXERCISE = "exercise"
    REST_BETWEEN_EXERCISES = "rest_between_exercises"
    REST_BETWEEN_ITEMS = "rest_between_items"
    FINISHED = "finished"


class PhaseState(BaseModel):
    model_config = {"frozen": True}

    phase: Phase = Phase.PREPARE
    time_remaining: int = Field(0, ge=0)
    current_round: int = Field(1, ge=1)
    current_cycle: int = Field(1, ge=1)
    running: bool = False
    active: bool = False


class EngineSnapshot(BaseModel):
    exercise_id: Optional[str] = None
    exercise_name: str = ""
    mode: str = "timed"
    phase: Phase
    phase_label: str
    phase_color: str
    time_remaining: int
    formatted_time: str
    current_round: int
    rounds: int
    current_cycle: int
    cycles: int
    running: bool
    active: bool
    exercise_duration: float = 0.0


class ProgramSnapshot(BaseModel):
    program_name: str = ""
    status: PlaybackStatus
    item_index: int = 0
    item_count: int = 0
    exercise_index_in_group: int = 0
    group_size: Optional[int] = None
    item_round: int = 1
    item_rounds: int = 1
    rest_time_remaining: int = 0
    paused: bool = False
    next_exercise_name: Optional[str] = None
    exercise: Optional[EngineSnapshot] = None

    @property
    def rest_between_exercises(self) -> bool:
        return self.status == PlaybackStatus.REST_BETWEEN_EXERCISES

    @property
    def rest_between_items(self) -> bool:
        return self.status == PlaybackStatus.REST_BETWEEN_ITEMS

    @property
    def finished(self) -> bool:
        return self.status == PlaybackStatus.FINISHED
