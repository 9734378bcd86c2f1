from .formatting import (
    format_time,
    format_stopwatch,
    phase_label,
    phase_color,
    format_exercise_details,
    total_exercise_count,
    planned_program_seconds,
)
from .presets import create_default_exercise, tabata, strength, PRESETS
from .export import to_csv, to_markdown

__all__ = [
    "format_time",
    "format_stopwatch",
    "phase_label",
    "phase_color",
    "format_exercise_details",
    "total_exercise_count",
    "planned_program_seconds",
    "create_default_exercise",
    "tabata",
    "strength",
    "PRESETS",
    "to_csv",
    "to_markdown",
]
