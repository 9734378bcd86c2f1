from __future__ import annotations

import csv
import io

from interval_timer.models import ExerciseSpec, GroupItem, Program, StandaloneItem
from interval_timer.services import strength, tabata, to_csv, to_markdown


def workout() -> Program:
    return Program(
        name="Leg day",
        items=[
            StandaloneItem(exercise=tabata("Jump squats", single_cycle=True), rounds=2),
            GroupItem(exercises=[strength("Back squat", repetitions=5, load=100), strength("Lunge", load=20)],
                      rounds=3, rest_between_exercises=90),
            GroupItem(exercises=[]),
        ],
        rest_between_items=120,
    )


def test_csv_has_one_row_per_exercise() -> None:
    csv_bytes = to_csv(workout())
    assert isinstance(csv_bytes, (bytes, bytearray)) and len(csv_bytes) > 0
    rows = list(csv.DictReader(io.StringIO(csv_bytes.decode("utf-8"))))
    assert [r["exercise_name"] for r in rows] == ["Jump squats", "Back squat", "Lunge"]
    assert rows[0]["item_type"] == "standalone" and rows[0]["item_rounds"] == "2"
    assert rows[0]["work_time"] == "45" and rows[0]["repetitions"] == ""
    assert rows[1]["mode"] == "manual" and rows[1]["load"] == "100.0"
    assert rows[2]["rest_between_exercises"] == "90"


def test_markdown_lists_items_and_details() -> None:
    md_text = to_markdown(workout())
    assert md_text.startswith("# Leg day (3 exercises)")
    assert "## 1. Jump squats × 2" in md_text
    assert "45s work" in md_text
    assert "- Back squat: 5 reps • 100kg" in md_text
    assert "## 2. Group × 3 (90s rest between exercises)" in md_text
    # manual exercises have no fixed length
    assert "Planned duration" not in md_text


def test_markdown_reports_planned_duration_for_timed_program() -> None:
    program = Program(
        name="Short",
        items=[StandaloneItem(exercise=ExerciseSpec(name="Burpees", prepare_time=5, work_time=10, rest_time=5, rounds=2))],
    )
    assert "### Planned duration: 00:30" in to_markdown(program)
