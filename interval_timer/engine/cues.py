from __future__ import annotations

import logging
from enum import Enum
from typing import List, NamedTuple, Protocol


logger = logging.getLogger(__name__)


class CueKind(str, Enum):
    GO = "go"
    END_OF_WORK = "end_of_work"
    COUNTDOWN = "countdown"
    FINISH = "finish"


class Tone(NamedTuple):
    frequency: int  # Hz
    duration_ms: int


TONES: dict[CueKind, Tone] = {
    CueKind.GO: Tone(1000, 300),
    CueKind.END_OF_WORK: Tone(800, 200),
    CueKind.COUNTDOWN: Tone(600, 100),
    CueKind.FINISH: Tone(1200, 1000),
}


class CuePlayer(Protocol):
    def play_cue(self, kind: CueKind) -> None: ...


class NullCuePlayer:
    def play_cue(self, kind: CueKind) -> None:
        return None


class RecordingCuePlayer:
    """Keeps every cue in order. Used by tests and by the Streamlit shell to surface cues."""

    def __init__(self) -> None:
        self.cues: List[CueKind] = []

    def play_cue(self, kind: CueKind) -> None:
        self.cues.append(kind)

    def drain(self) -> List[CueKind]:
        out, self.cues = self.cues, []
        return out


class LoggingCuePlayer:
    def play_cue(self, kind: CueKind) -> None:
        tone = TONES[kind]
        logger.info("cue %s (%d Hz, %d ms)", kind.value, tone.frequency, tone.duration_ms)


def play_safely(player: CuePlayer, kind: CueKind) -> None:
    # A cue must never block or fail a phase transition
    try:
        player.play_cue(kind)
    except Exception:
        logger.warning("Cue player failed for %s", kind.value, exc_info=True)
