from __future__ import annotations

from interval_timer.engine import ManualTicker, ProgramScheduler, RecordingCuePlayer
from interval_timer.engine.cues import CueKind
from interval_timer.models import GroupItem, Program, StandaloneItem
from interval_timer.services import create_default_exercise, planned_program_seconds, tabata, to_csv, to_markdown


def test_smoke_end_to_end() -> None:
    program = Program(
        name="Smoke",
        items=[
            StandaloneItem(exercise=tabata("Jumping jacks", single_cycle=True)),
            GroupItem(exercises=[create_default_exercise("Push-ups"), create_default_exercise("Sit-ups")], rounds=2),
        ],
        rest_between_items=30,
    )
    planned = planned_program_seconds(program)
    assert planned is not None and planned > 0

    ticker = ManualTicker()
    cues = RecordingCuePlayer()
    scheduler = ProgramScheduler(ticker, cues, now=ticker.now)
    scheduler.start_program(program)

    seconds = 0
    while not scheduler.finished and seconds <= planned:
        ticker.advance(1)
        seconds += 1

    assert scheduler.finished
    assert seconds == planned
    # one exercise run per standalone round plus two exercises per group round
    assert cues.cues.count(CueKind.FINISH) == 1 + 2 * 2

    csv_bytes = to_csv(program)
    md_text = to_markdown(program)
    assert isinstance(csv_bytes, (bytes, bytearray)) and len(csv_bytes) > 0
    assert isinstance(md_text, str) and len(md_text) > 0
