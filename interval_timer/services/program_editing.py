"""Pure edits on a Program.

Programs are frozen; every function returns a new Program and leaves its
input untouched. Out-of-range indices and edits aimed at the wrong item kind
return the program unchanged, the same way a disabled button does nothing.
"""
from __future__ import annotations

from typing import List, Literal, Optional

from interval_timer.models.exercise import ExerciseSpec
from interval_timer.models.program import GroupItem, Program, ProgramItem, StandaloneItem


Direction = Literal["up", "down"]


def _with_items(program: Program, items: List[ProgramItem]) -> Program:
    return program.model_copy(update={"items": items})


def _group_at(program: Program, index: int) -> Optional[GroupItem]:
    if 0 <= index < len(program.items) and isinstance(program.items[index], GroupItem):
        return program.items[index]  # type: ignore[return-value]
    return None


def _swap(seq: list, index: int, direction: Direction) -> list:
    out = list(seq)
    other = index - 1 if direction == "up" else index + 1
    if 0 <= index < len(out) and 0 <= other < len(out):
        out[index], out[other] = out[other], out[index]
    return out


def add_standalone(program: Program, exercise: ExerciseSpec, rounds: int = 1) -> Program:
    return _with_items(program, [*program.items, StandaloneItem(exercise=exercise, rounds=rounds)])


def add_group(program: Program, rounds: int = 1, rest_between_exercises: int = 10) -> Program:
    group = GroupItem(exercises=[], rounds=rounds, rest_between_exercises=rest_between_exercises)
    return _with_items(program, [*program.items, group])


def remove_item(program: Program, item_index: int) -> Program:
    return _with_items(program, [it for i, it in enumerate(program.items) if i != item_index])


def move_item(program: Program, item_index: int, direction: Direction) -> Program:
    return _with_items(program, _swap(program.items, item_index, direction))


def set_item_rounds(program: Program, item_index: int, rounds: int) -> Program:
    if not 0 <= item_index < len(program.items):
        return program
    items = list(program.items)
    items[item_index] = items[item_index].model_copy(update={"rounds": rounds})
    return _with_items(program, items)


def set_group_rest(program: Program, item_index: int, rest_between_exercises: int) -> Program:
    group = _group_at(program, item_index)
    if group is None:
        return program
    items = list(program.items)
    items[item_index] = group.model_copy(update={"rest_between_exercises": rest_between_exercises})
    return _with_items(program, items)


def _replace_group_exercises(program: Program, item_index: int, exercises: List[ExerciseSpec]) -> Program:
    group = _group_at(program, item_index)
    if group is None:
        return program
    items = list(program.items)
    items[item_index] = group.model_copy(update={"exercises": exercises})
    return _with_items(program, items)


def add_exercise_to_group(program: Program, item_index: int, exercise: ExerciseSpec) -> Program:
    group = _group_at(program, item_index)
    if group is None:
        return program
    return _replace_group_exercises(program, item_index, [*group.exercises, exercise])


def replace_exercise(program: Program, item_index: int, exercise: ExerciseSpec,
                     exercise_index: Optional[int] = None) -> Program:
    """Swap in an edited exercise: inside a group when ``exercise_index`` is given, else a standalone item."""
    if not 0 <= item_index < len(program.items):
        return program
    item = program.items[item_index]
    if exercise_index is None:
        if not isinstance(item, StandaloneItem):
            return program
        items = list(program.items)
        items[item_index] = item.model_copy(update={"exercise": exercise})
        return _with_items(program, items)
    if not isinstance(item, GroupItem) or not 0 <= exercise_index < len(item.exercises):
        return program
    exercises = list(item.exercises)
    exercises[exercise_index] = exercise
    return _replace_group_exercises(program, item_index, exercises)


def remove_exercise_from_group(program: Program, item_index: int, exercise_index: int) -> Program:
    group = _group_at(program, item_index)
    if group is None:
        return program
    return _replace_group_exercises(
        program, item_index, [ex for i, ex in enumerate(group.exercises) if i != exercise_index]
    )


def move_exercise_in_group(program: Program, item_index: int, exercise_index: int, direction: Direction) -> Program:
    group = _group_at(program, item_index)
    if group is None:
        return program
    return _replace_group_exercises(program, item_index, _swap(group.exercises, exercise_index, direction))


def _take_exercise(items: List[ProgramItem], item_index: int,
                   exercise_index: Optional[int]) -> tuple[Optional[ExerciseSpec], int, bool]:
    """Pull an exercise out of ``items`` in place.

    Returns (exercise, rounds of its source item, whether the source item was removed).
    A group left empty is removed.
    """
    if not 0 <= item_index < len(items):
        return None, 1, False
    source = items[item_index]
    if exercise_index is None:
        if not isinstance(source, StandaloneItem):
            return None, 1, False
        del items[item_index]
        return source.exercise, source.rounds, True
    if not isinstance(source, GroupItem) or not 0 <= exercise_index < len(source.exercises):
        return None, 1, False
    remaining = [ex for i, ex in enumerate(source.exercises) if i != exercise_index]
    exercise = source.exercises[exercise_index]
    if not remaining:
        del items[item_index]
        return exercise, source.rounds, True
    items[item_index] = source.model_copy(update={"exercises": remaining})
    return exercise, source.rounds, False


def move_exercise_to_group(program: Program, from_item_index: int, to_group_index: int,
                           exercise_index_in_from: Optional[int] = None) -> Program:
    if from_item_index == to_group_index or _group_at(program, to_group_index) is None:
        return program
    items = list(program.items)
    exercise, _, removed = _take_exercise(items, from_item_index, exercise_index_in_from)
    if exercise is None:
        return program
    if removed and to_group_index > from_item_index:
        to_group_index -= 1
    target = items[to_group_index]
    if not isinstance(target, GroupItem):
        return program
    items[to_group_index] = target.model_copy(update={"exercises": [*target.exercises, exercise]})
    return _with_items(program, items)


def extract_exercise_to_standalone(program: Program, item_index: int, exercise_index: int) -> Program:
    """Lift a group exercise out into a standalone item placed right after the group.

    The standalone item inherits the group's rounds; an emptied group is dropped.
    """
    group = _group_at(program, item_index)
    if group is None or not 0 <= exercise_index < len(group.exercises):
        return program
    items = list(program.items)
    exercise, rounds, removed = _take_exercise(items, item_index, exercise_index)
    if exercise is None:
        return program
    insert_at = item_index if removed else item_index + 1
    items.insert(insert_at, StandaloneItem(exercise=exercise, rounds=rounds))
    return _with_items(program, items)


def drop_exercise(program: Program, source_item_index: int, source_exercise_index: Optional[int],
                  target_item_index: int, target_exercise_index: Optional[int] = None) -> Program:
    """Move an exercise onto a target slot.

    Dropped on a group it is inserted at ``target_exercise_index`` (or appended);
    dropped on a standalone item it becomes a standalone item placed before it,
    keeping the rounds of the item it came from.
    """
    if source_item_index == target_item_index:
        own_group = _group_at(program, source_item_index)
        if source_exercise_index is None or own_group is None or len(own_group.exercises) <= 1:
            return program
    items = list(program.items)
    exercise, rounds, removed = _take_exercise(items, source_item_index, source_exercise_index)
    if exercise is None:
        return program
    if removed and target_item_index > source_item_index:
        target_item_index -= 1
    if not 0 <= target_item_index < len(items):
        items.append(StandaloneItem(exercise=exercise, rounds=rounds))
        return _with_items(program, items)
    target = items[target_item_index]
    if isinstance(target, GroupItem):
        exercises = list(target.exercises)
        if target_exercise_index is None:
            exercises.append(exercise)
        else:
            exercises.insert(target_exercise_index, exercise)
        items[target_item_index] = target.model_copy(update={"exercises": exercises})
    else:
        items.insert(target_item_index, StandaloneItem(exercise=exercise, rounds=rounds))
    return _with_items(program, items)
