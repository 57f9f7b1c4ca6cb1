from __future__ import annotations

import random

from calclearn.core.exercise import BOOTSTRAP_EXERCISE, ExerciseGenerator, generate_exercise


class _ScriptedRng(random.Random):
    """Returns queued operands and operator instead of random draws."""

    def __init__(self, a: int, b: int, operator: str) -> None:
        super().__init__(0)
        self._operands = [a, b]
        self._operator = operator

    def randrange(self, *args, **kwargs):  # type: ignore[override]
        return self._operands.pop(0)

    def choice(self, seq):  # type: ignore[override]
        assert self._operator in seq
        return self._operator


def test_generated_results_are_never_negative():
    rng = random.Random(2024)
    for _ in range(500):
        exercise = generate_exercise(rng)
        assert exercise.result >= 0
        assert 0 <= exercise.operand_a <= 9
        assert 0 <= exercise.operand_b <= 9
        assert exercise.operator in ("+", "-")


def test_subtraction_phrase_puts_larger_operand_first():
    rng = random.Random(7)
    seen = 0
    for _ in range(500):
        exercise = generate_exercise(rng)
        if exercise.operator != "-":
            continue
        seen += 1
        left, word, right = exercise.text.split(" ")
        assert word == "minus"
        assert int(left) >= int(right)
        assert exercise.result == int(left) - int(right)
    assert seen > 0


def test_results_match_operands_for_every_pair():
    for a in range(10):
        for b in range(10):
            plus = generate_exercise(_ScriptedRng(a, b, "+"))
            assert plus.result == a + b
            assert plus.text == f"{a} plus {b}"
            minus = generate_exercise(_ScriptedRng(a, b, "-"))
            assert minus.result == abs(a - b)
            assert minus.text == f"{max(a, b)} minus {min(a, b)}"


def test_equal_operands_subtract_to_zero():
    exercise = generate_exercise(_ScriptedRng(4, 4, "-"))
    assert exercise.result == 0
    assert exercise.text == "4 minus 4"


def test_generator_is_deterministic_for_seed():
    first = ExerciseGenerator(rng=random.Random(99))
    second = ExerciseGenerator(rng=random.Random(99))
    assert [first.generate() for _ in range(20)] == [second.generate() for _ in range(20)]


def test_generator_draws_both_operators():
    generator = ExerciseGenerator(rng=random.Random(5))
    operators = {generator.generate().operator for _ in range(200)}
    assert operators == {"+", "-"}


def test_bootstrap_exercise_is_fixed():
    assert BOOTSTRAP_EXERCISE.text == "100 plus 100"
    assert BOOTSTRAP_EXERCISE.result == 200
