from __future__ import annotations

from interval_timer.models import ExerciseSpec, GroupItem, Program, StandaloneItem
from interval_timer.services import program_editing as edit


def ex(name: str) -> ExerciseSpec:
    return ExerciseSpec(name=name, mode="timed", work_time=20)


def names(program: Program) -> list:
    out = []
    for item in program.items:
        if isinstance(item, StandaloneItem):
            out.append(item.exercise.name)
        else:
            out.append([e.name for e in item.exercises])
    return out


def sample_program() -> Program:
    return Program(
        name="Edit me",
        items=[
            StandaloneItem(exercise=ex("A"), rounds=2),
            GroupItem(exercises=[ex("B"), ex("C")], rounds=3, rest_between_exercises=15),
            StandaloneItem(exercise=ex("D")),
        ],
    )


def test_add_and_remove_items() -> None:
    program = edit.add_standalone(Program(), ex("A"), rounds=2)
    program = edit.add_group(program)
    program = edit.add_exercise_to_group(program, 1, ex("B"))
    assert names(program) == ["A", ["B"]]
    assert program.items[0].rounds == 2
    assert edit.remove_item(program, 0).items[0].type == "group"
    assert edit.remove_item(program, 9) == program


def test_edits_never_mutate_input() -> None:
    program = sample_program()
    before = program.model_dump()
    edit.move_item(program, 0, "down")
    edit.extract_exercise_to_standalone(program, 1, 0)
    edit.drop_exercise(program, 0, None, 1, 0)
    edit.set_item_rounds(program, 1, 9)
    assert program.model_dump() == before


def test_move_item_stays_in_bounds() -> None:
    program = sample_program()
    assert names(edit.move_item(program, 0, "down")) == [["B", "C"], "A", "D"]
    assert names(edit.move_item(program, 2, "up")) == ["A", "D", ["B", "C"]]
    assert edit.move_item(program, 0, "up").items == program.items
    assert edit.move_item(program, 2, "down").items == program.items


def test_group_level_edits() -> None:
    program = sample_program()
    assert edit.set_group_rest(program, 1, 40).items[1].rest_between_exercises == 40
    assert edit.set_group_rest(program, 0, 40) == program
    assert edit.set_item_rounds(program, 0, 5).items[0].rounds == 5
    assert names(edit.move_exercise_in_group(program, 1, 0, "down")) == ["A", ["C", "B"], "D"]
    assert names(edit.remove_exercise_from_group(program, 1, 0)) == ["A", ["C"], "D"]


def test_replace_exercise_in_standalone_and_group() -> None:
    program = sample_program()
    assert names(edit.replace_exercise(program, 0, ex("Z"))) == ["Z", ["B", "C"], "D"]
    assert names(edit.replace_exercise(program, 1, ex("Z"), exercise_index=1)) == ["A", ["B", "Z"], "D"]
    assert edit.replace_exercise(program, 1, ex("Z")) == program


def test_extract_to_standalone_inherits_group_rounds() -> None:
    program = edit.extract_exercise_to_standalone(sample_program(), 1, 1)
    assert names(program) == ["A", ["B"], "C", "D"]
    assert program.items[2].rounds == 3


def test_extracting_last_exercise_drops_the_group() -> None:
    program = Program(items=[GroupItem(exercises=[ex("Solo")], rounds=4)])
    program = edit.extract_exercise_to_standalone(program, 0, 0)
    assert names(program) == ["Solo"]
    assert program.items[0].rounds == 4


def test_move_standalone_into_later_group_adjusts_index() -> None:
    program = edit.move_exercise_to_group(sample_program(), 0, 1)
    assert names(program) == [["B", "C", "A"], "D"]


def test_move_between_groups_removes_emptied_source() -> None:
    program = Program(items=[GroupItem(exercises=[ex("X")]), GroupItem(exercises=[ex("Y")])])
    assert names(edit.move_exercise_to_group(program, 0, 1, 0)) == [["Y", "X"]]
    assert edit.move_exercise_to_group(program, 0, 0, 0) == program


def test_drop_exercise_into_group_slot() -> None:
    program = edit.drop_exercise(sample_program(), 2, None, 1, 0)
    assert names(program) == ["A", ["D", "B", "C"]]


def test_drop_group_exercise_before_standalone() -> None:
    program = edit.drop_exercise(sample_program(), 1, 0, 2)
    assert names(program) == ["A", ["C"], "B", "D"]
    assert program.items[2].rounds == 3


def test_drop_on_itself_is_noop() -> None:
    program = sample_program()
    assert edit.drop_exercise(program, 0, None, 0) == program
    single = Program(items=[GroupItem(exercises=[ex("only")])])
    assert edit.drop_exercise(single, 0, 0, 0) == single


def test_reorder_within_group_by_drop() -> None:
    program = edit.drop_exercise(sample_program(), 1, 1, 1, 0)
    assert names(program) == ["A", ["C", "B"], "D"]


def test_edits_aimed_at_wrong_item_kind_are_noops() -> None:
    program = sample_program()
    assert edit.move_exercise_to_group(program, 1, 0, 0) == program
    assert edit.move_exercise_to_group(program, 0, 2) == program
    assert edit.extract_exercise_to_standalone(program, 0, 0) == program
    assert edit.extract_exercise_to_standalone(program, 1, 5) == program
