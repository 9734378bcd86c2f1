from __future__ import annotations


class IntervalTimerError(Exception):
    pass


class ConfigurationError(IntervalTimerError, ValueError):
    """An exercise is missing a field its mode requires (e.g. timed without work_time)."""


class EmptyProgramError(IntervalTimerError, ValueError):
    """A program has no playable items."""
