from __future__ import annotations

import csv
import io
from typing import List

from interval_timer.models.program import GroupItem, Program, StandaloneItem
from .formatting import format_exercise_details, format_time, planned_program_seconds, total_exercise_count


def to_csv(program: Program) -> bytes:
    output = io.StringIO()
    writer = csv.writer(output)
    writer.writerow([
        "item_index",
        "item_type",
        "item_rounds",
        "exercise_index",
        "exercise_name",
        "mode",
        "prepare_time",
        "work_time",
        "rest_time",
        "rounds",
        "cycles",
        "rest_between_cycles",
        "repetitions",
        "load",
        "rest_between_exercises",
    ])
    for i, item in enumerate(program.items):
        if isinstance(item, StandaloneItem):
            pairs = [(0, item.exercise)]
            group_rest = ""
        else:
            pairs = list(enumerate(item.exercises))
            group_rest = item.rest_between_exercises
        for j, ex in pairs:
            writer.writerow([
                i,
                item.type,
                item.rounds,
                j,
                ex.name,
                ex.mode,
                ex.prepare_time,
                ex.work_time if ex.work_time is not None else "",
                ex.rest_time,
                ex.rounds,
                ex.cycles,
                ex.rest_between_cycles,
                ex.repetitions if ex.repetitions is not None else "",
                ex.load if ex.load is not None else "",
                group_rest,
            ])
    return output.getvalue().encode("utf-8")


def to_markdown(program: Program) -> str:
    lines: List[str] = []
    title = program.name or "Program"
    lines.append(f"# {title} ({total_exercise_count(program)} exercises)\n")
    if program.rest_between_items:
        lines.append(f"Rest between items: {program.rest_between_items}s")
    for i, item in enumerate(program.items):
        if isinstance(item, StandaloneItem):
            lines.append(f"\n## {i + 1}. {item.exercise.name or 'Exercise'} × {item.rounds}")
            lines.append(f"- {format_exercise_details(item.exercise)}")
        elif isinstance(item, GroupItem):
            lines.append(
                f"\n## {i + 1}. Group × {item.rounds} ({item.rest_between_exercises}s rest between exercises)"
            )
            for ex in item.exercises:
                lines.append(f"- {ex.name or 'Exercise'}: {format_exercise_details(ex)}")
    planned = planned_program_seconds(program)
    if planned is not None:
        lines.append(f"\n### Planned duration: {format_time(planned)}")
    return "\n".join(lines) + "\n"
