from __future__ import annotations

from calclearn.features.dialog import ProvideAnswer, ProvideName, Unrecognized, decode_intent
from calclearn.features.dialog.schemas import IntentPayload


def _intent(name: str, **slots: str | None) -> IntentPayload:
    return IntentPayload.model_validate(
        {"name": name, "slots": {key: {"name": key, "value": value} for key, value in slots.items()}}
    )


def test_name_intent_with_value():
    assert decode_intent(_intent("MyNameIsIntent", Name=" Uwe ")) == ProvideName(name="Uwe")


def test_name_intent_without_value_is_unrecognized():
    assert decode_intent(_intent("MyNameIsIntent")) == Unrecognized()
    assert decode_intent(_intent("MyNameIsIntent", Name=None)) == Unrecognized()
    assert decode_intent(_intent("MyNameIsIntent", Name="  ")) == Unrecognized()


def test_answer_intent_parses_integer():
    assert decode_intent(_intent("AnswerExerciseIntent", Answer="12")) == ProvideAnswer(value=12)


def test_answer_intent_with_unresolved_number_is_unrecognized():
    assert decode_intent(_intent("AnswerExerciseIntent", Answer="?")) == Unrecognized()
    assert decode_intent(_intent("AnswerExerciseIntent")) == Unrecognized()


def test_other_intents_are_unrecognized():
    assert decode_intent(_intent("AMAZON.HelpIntent")) == Unrecognized()
    assert decode_intent(None) == Unrecognized()


def test_answer_intent_requires_plain_ascii_digits():
    for raw in ("+5", "1_000", "٣", "1.5", "-"):
        assert decode_intent(_intent("AnswerExerciseIntent", Answer=raw)) == Unrecognized(), raw
    assert decode_intent(_intent("AnswerExerciseIntent", Answer=" 07 ")) == ProvideAnswer(value=7)
    assert decode_intent(_intent("AnswerExerciseIntent", Answer="-2")) == ProvideAnswer(value=-2)
