from .exercise import ExerciseSpec, ExerciseMode
from .program import StandaloneItem, GroupItem, ProgramItem, Program, item_exercise, is_playable
from .state import Phase, PlaybackStatus, PhaseState, EngineSnapshot, ProgramSnapshot

__all__ = [
    "ExerciseSpec",
    "ExerciseMode",
    "StandaloneItem",
    "GroupItem",
    "ProgramItem",
    "Program",
    "item_exercise",
    "is_playable",
    "Phase",
    "PlaybackStatus",
    "PhaseState",
    "EngineSnapshot",
    "ProgramSnapshot",
]
