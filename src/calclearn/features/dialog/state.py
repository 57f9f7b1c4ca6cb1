"""Per-conversation session record.

The voice platform round-trips a loose attribute map with every request.  We
validate it once at the transport boundary into :class:`DrillSession` and write
it back after the turn; the dialog logic never touches the raw map.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Final

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ...core.exercise import Exercise

__all__ = [
    "DialogState",
    "DrillSession",
    "LAST_EXERCISE_KEY",
    "LAST_RESULT_KEY",
    "NAME_KEY",
]

logger = logging.getLogger(__name__)

NAME_KEY: Final = "NAME"
LAST_EXERCISE_KEY: Final = "LastExercise"
LAST_RESULT_KEY: Final = "LastAnswer"


class DialogState(str, Enum):
    NO_EXERCISE = "no_exercise"
    EXERCISE_PENDING = "exercise_pending"


class DrillSession(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    name: str | None = Field(default=None, alias=NAME_KEY)
    last_exercise: str | None = Field(default=None, alias=LAST_EXERCISE_KEY)
    last_result: int | None = Field(default=None, alias=LAST_RESULT_KEY)

    @field_validator("name", "last_exercise", mode="before")
    @classmethod
    def _coerce_text(cls, value: Any) -> Any:
        if value is None or isinstance(value, str):
            return value or None
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        logger.warning("dropping non-text session attribute", extra={"value": repr(value)})
        return None

    @field_validator("last_result", mode="before")
    @classmethod
    def _coerce_result(cls, value: Any) -> Any:
        if value is None or isinstance(value, bool):
            return None
        if isinstance(value, int):
            return value
        if isinstance(value, float) and value.is_integer():
            return int(value)
        if isinstance(value, str):
            try:
                return int(value.strip())
            except ValueError:
                pass
        logger.warning("dropping unparseable session result", extra={"value": repr(value)})
        return None

    @classmethod
    def from_attributes(cls, attributes: dict[str, Any] | None) -> DrillSession:
        return cls.model_validate(attributes or {})

    def to_attributes(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)

    @property
    def state(self) -> DialogState:
        if self.last_exercise is None or self.last_result is None:
            return DialogState.NO_EXERCISE
        return DialogState.EXERCISE_PENDING

    def pose(self, exercise: Exercise) -> None:
        """Remember *exercise* as the one awaiting an answer."""

        self.last_exercise = exercise.text
        self.last_result = exercise.result
