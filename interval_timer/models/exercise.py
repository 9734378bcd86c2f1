from __future__ import annotations

from uuid import uuid4
from pydantic import BaseModel, Field
from typing import Literal, Optional


ExerciseMode = Literal["timed", "manual"]


def new_id() -> str:
    return uuid4().hex


class ExerciseSpec(BaseModel):
    model_config = {
        "frozen": True,
        "json_schema_extra": {
            "examples": [
                {
                    "name": "Burpees",
                    "mode": "timed",
                    "prepare_time": 5,
                    "work_time": 45,
                    "rest_time": 15,
                    "rounds": 3,
                    "cycles": 4,
                    "rest_between_cycles": 60,
                },
                {
                    "name": "Back Squat",
                    "mode": "manual",
                    "prepare_time": 5,
                    "rest_time": 60,
                    "rounds": 3,
                    "cycles": 1,
                    "repetitions": 12,
                    "load": 30,
                },
            ]
        },
    }

    id: str = Field(default_factory=new_id)
    name: str = ""
    mode: ExerciseMode = "timed"
    prepare_time: int = Field(0, ge=0)
    work_time: Optional[int] = Field(None, ge=1, description="Seconds of work; required for timed mode")
    rest_time: int = Field(0, ge=0)
    rounds: int = Field(1, ge=1)
    cycles: int = Field(1, ge=1)
    rest_between_cycles: int = Field(0, ge=0)
    # Manual mode only; load is informational
    repetitions: Optional[int] = Field(None, ge=1)
    load: Optional[float] = Field(None, ge=0)

    @property
    def is_manual(self) -> bool:
        return self.mode == "manual"
