from .cues import CueKind, CuePlayer, NullCuePlayer, RecordingCuePlayer, LoggingCuePlayer, TONES
from .ticker import Ticker, ManualTicker
from .stopwatch import Stopwatch
from .phase_clock import Transition, start_state, end_phase, tick, planned_ticks, validate_spec
from .exercise_engine import ExerciseEngine
from .program_scheduler import ProgramScheduler, PlaybackCursor

__all__ = [
    "CueKind",
    "CuePlayer",
    "NullCuePlayer",
    "RecordingCuePlayer",
    "LoggingCuePlayer",
    "TONES",
    "Ticker",
    "ManualTicker",
    "Stopwatch",
    "Transition",
    "start_state",
    "end_phase",
    "tick",
    "planned_ticks",
    "validate_spec",
    "ExerciseEngine",
    "ProgramScheduler",
    "PlaybackCursor",
]
