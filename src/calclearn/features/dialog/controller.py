"""Turn handling for the arithmetic drill.

The controller keeps no state of its own.  Whether an exercise is pending is
read from the :class:`~.state.DrillSession` every turn, and every reply that
keeps the conversation open leaves an exercise in the session.

Dispatch order (first match wins):

1. ``ProvideName`` stores the name and poses the fixed ``100 plus 100``
   exercise.
2. ``ProvideAnswer`` grades against the pending exercise.  Without a pending
   exercise it is handled like rule 3.
3. ``Launch`` and ``Unrecognized`` pose a freshly generated exercise.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from ...core.exercise import BOOTSTRAP_EXERCISE, ExerciseGenerator
from .state import DialogState, DrillSession
from .turns import Launch, ProvideAnswer, ProvideName, TurnEvent

__all__ = ["DialogController", "DialogResponse"]

logger = logging.getLogger(__name__)

_WELCOME_SPEECH = "Willkommen. Bitte verrate mir doch deinen Namen"
_WELCOME_REPROMPT = "Ich warte auf deinen Namen, oder einen Namen deiner Wahl"


@dataclass(frozen=True)
class DialogResponse:
    speech: str
    reprompt: str
    expects_answer: bool = True


def _answer_reprompt(exercise: str) -> str:
    return f"Bitte sage mir was {exercise} ist, indem du sagst: die Antwort ist "


class DialogController:
    """Decides the reply for one turn and updates the session accordingly."""

    def __init__(self, generator: ExerciseGenerator, *, welcome_on_launch: bool = False) -> None:
        self.generator = generator
        # Greet and ask for a name on launch instead of posing an exercise.
        self.welcome_on_launch = welcome_on_launch

    def handle(self, turn: TurnEvent, session: DrillSession) -> DialogResponse:
        if isinstance(turn, ProvideName):
            return self._set_name(turn.name, session)
        if isinstance(turn, ProvideAnswer):
            if session.state is DialogState.EXERCISE_PENDING:
                return self._check_answer(turn.value, session)
            logger.info("answer without pending exercise; posing a new one")
        if isinstance(turn, Launch) and self.welcome_on_launch:
            return DialogResponse(speech=_WELCOME_SPEECH, reprompt=_WELCOME_REPROMPT)
        return self._ask_new_exercise(session)

    def _set_name(self, name: str, session: DrillSession) -> DialogResponse:
        # TODO: replace the fixed bootstrap exercise with a generated one once
        # the greeting flow is confirmed with product.
        exercise = BOOTSTRAP_EXERCISE
        session.name = name
        session.pose(exercise)
        logger.debug("name stored", extra={"exercise": exercise.text})
        return DialogResponse(
            speech=f"{name}, wieviel ist {exercise.text}",
            reprompt=_answer_reprompt(exercise.text),
        )

    def _check_answer(self, answer: int, session: DrillSession) -> DialogResponse:
        exercise = session.last_exercise
        result = session.last_result
        correct = answer == result
        if correct:
            speech = f"Richtig. {exercise} macht {answer}. Noch ein Spiel?"
        else:
            speech = f"Leider falsch. {exercise} ist leider NICHT {answer}. Die richtige Antwort ist {result}"
        logger.debug("answer graded", extra={"exercise": exercise, "answer": answer, "correct": correct})
        return DialogResponse(speech=speech, reprompt=_answer_reprompt(exercise or ""))

    def _ask_new_exercise(self, session: DrillSession) -> DialogResponse:
        exercise = self.generator.generate()
        session.pose(exercise)
        logger.debug("exercise posed", extra={"exercise": exercise.text, "result": exercise.result})
        speech = f"Wieviel ist {exercise.text}"
        return DialogResponse(
            speech=speech,
            reprompt=f"Ich wiederhole noch einmal die Aufgabe: {speech}",
        )
