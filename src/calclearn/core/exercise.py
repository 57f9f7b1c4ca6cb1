"""Exercise generation for the arithmetic drill.

Exercises are two single-digit operands joined by ``plus`` or ``minus``.
Subtractions are always phrased larger-minus-smaller so the spoken prompt never
asks for a negative result, which keeps grading a single integer comparison.
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Final, Literal

__all__ = [
    "BOOTSTRAP_EXERCISE",
    "Exercise",
    "ExerciseGenerator",
    "OPERATORS",
    "generate_exercise",
]

Operator = Literal["+", "-"]

OPERATORS: Final[tuple[Operator, ...]] = ("+", "-")
_OPERAND_RANGE: Final = 10  # operands are drawn from [0, 9]
_OPERATOR_WORDS: Final[dict[str, str]] = {"+": "plus", "-": "minus"}


@dataclass(frozen=True)
class Exercise:
    """A posed exercise; only ``text`` and ``result`` are kept in the session."""

    operand_a: int
    operand_b: int
    operator: Operator
    text: str
    result: int


# Fixed exercise posed right after the caller tells us their name.
BOOTSTRAP_EXERCISE: Final = Exercise(
    operand_a=100,
    operand_b=100,
    operator="+",
    text="100 plus 100",
    result=200,
)


def generate_exercise(rng: random.Random) -> Exercise:
    a = rng.randrange(_OPERAND_RANGE)
    b = rng.randrange(_OPERAND_RANGE)
    operator = rng.choice(OPERATORS)
    if operator == "-":
        hi, lo = max(a, b), min(a, b)
        return Exercise(
            operand_a=a,
            operand_b=b,
            operator=operator,
            text=f"{hi} {_OPERATOR_WORDS[operator]} {lo}",
            result=hi - lo,
        )
    return Exercise(
        operand_a=a,
        operand_b=b,
        operator=operator,
        text=f"{a} {_OPERATOR_WORDS[operator]} {b}",
        result=a + b,
    )


@dataclass
class ExerciseGenerator:
    """Wraps an RNG so exercise generation stays deterministic under a seed."""

    rng: random.Random

    def generate(self) -> Exercise:
        return generate_exercise(self.rng)
