from __future__ import annotations

from typing import Annotated, List, Literal, Optional, Union
from pydantic import BaseModel, Field

from .exercise import ExerciseSpec, new_id


class StandaloneItem(BaseModel):
    model_config = {"frozen": True}

    type: Literal["standalone"] = "standalone"
    exercise: ExerciseSpec
    rounds: int = Field(1, ge=1)


class GroupItem(BaseModel):
    model_config = {"frozen": True}

    type: Literal["group"] = "group"
    exercises: List[ExerciseSpec] = Field(default_factory=list)
    rounds: int = Field(1, ge=1)
    rest_between_exercises: int = Field(10, ge=0)


ProgramItem = Annotated[Union[StandaloneItem, GroupItem], Field(discriminator="type")]


class Program(BaseModel):
    model_config = {"frozen": True}

    id: str = Field(default_factory=new_id)
    name: str = ""
    items: List[ProgramItem] = Field(default_factory=list)
    rest_between_items: int = Field(0, ge=0)


def item_exercise(item: StandaloneItem | GroupItem, index: int = 0) -> Optional[ExerciseSpec]:
    """Resolve the exercise an item plays at ``index``; None when the group has no such exercise."""
    if isinstance(item, StandaloneItem):
        return item.exercise
    if 0 <= index < len(item.exercises):
        return item.exercises[index]
    return None


def is_playable(item: StandaloneItem | GroupItem) -> bool:
    return isinstance(item, StandaloneItem) or bool(item.exercises)
