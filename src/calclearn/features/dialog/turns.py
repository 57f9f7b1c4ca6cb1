"""Typed turn events and their decoding from platform intents."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Final, Union

from .schemas import IntentPayload

__all__ = [
    "ANSWER_INTENT",
    "ANSWER_SLOT",
    "Launch",
    "NAME_INTENT",
    "NAME_SLOT",
    "ProvideAnswer",
    "ProvideName",
    "TurnEvent",
    "Unrecognized",
    "decode_intent",
    "parse_spoken_int",
]

logger = logging.getLogger(__name__)

NAME_INTENT: Final = "MyNameIsIntent"
ANSWER_INTENT: Final = "AnswerExerciseIntent"
NAME_SLOT: Final = "Name"
ANSWER_SLOT: Final = "Answer"


@dataclass(frozen=True)
class Launch:
    pass


@dataclass(frozen=True)
class ProvideName:
    name: str


@dataclass(frozen=True)
class ProvideAnswer:
    value: int


@dataclass(frozen=True)
class Unrecognized:
    pass


TurnEvent = Union[Launch, ProvideName, ProvideAnswer, Unrecognized]


def parse_spoken_int(raw: str | None) -> int | None:
    """Parse a resolved number slot; only plain ASCII digits with an optional minus."""

    if raw is None:
        return None
    text = raw.strip()
    digits = text[1:] if text.startswith("-") else text
    if not digits or not (digits.isascii() and digits.isdigit()):
        return None
    return int(text)


def decode_intent(intent: IntentPayload | None) -> TurnEvent:
    """Map a resolved intent onto a turn event.

    Intents whose required slot is missing or unusable become
    :class:`Unrecognized` so the dialog simply poses a fresh exercise.
    """

    if intent is None:
        return Unrecognized()
    if intent.name == NAME_INTENT:
        name = (intent.slot_value(NAME_SLOT) or "").strip()
        if name:
            return ProvideName(name=name)
    elif intent.name == ANSWER_INTENT:
        value = parse_spoken_int(intent.slot_value(ANSWER_SLOT))
        if value is not None:
            return ProvideAnswer(value=value)
    logger.debug("intent downgraded to unrecognized", extra={"intent": intent.name})
    return Unrecognized()
