from __future__ import annotations

import argparse
import random
import secrets
from collections.abc import Callable

from .core.exercise import ExerciseGenerator
from .features.dialog import (
    DialogController,
    DrillSession,
    Launch,
    ProvideAnswer,
    ProvideName,
    TurnEvent,
    Unrecognized,
)
from .features.dialog.turns import parse_spoken_int
from .ui.presenters import RichPresenter

_QUIT_WORDS = {"q", "quit"}
_NAME_PREFIXES = ("mein name ist ", "name ")


def parse_turn(line: str) -> TurnEvent:
    """Map a typed line onto a turn, standing in for the platform's slot resolution."""

    text = line.strip()
    value = parse_spoken_int(text)
    if value is not None:
        return ProvideAnswer(value=value)
    lowered = text.lower()
    for prefix in _NAME_PREFIXES:
        if lowered.startswith(prefix):
            name = text[len(prefix) :].strip()
            if name:
                return ProvideName(name=name)
    return Unrecognized()


def run_drill(
    seed: int | None = None,
    no_color: bool = False,
    welcome_on_launch: bool = False,
    presenter: RichPresenter | None = None,
    _input_fn: Callable[[str], str] = input,
) -> DrillSession:
    presenter = presenter or RichPresenter(no_color=no_color)
    actual_seed = seed if seed is not None else secrets.randbits(32)
    controller = DialogController(
        ExerciseGenerator(rng=random.Random(actual_seed)),
        welcome_on_launch=welcome_on_launch,
    )
    session = DrillSession()

    presenter.start_session()
    reply = controller.handle(Launch(), session)
    presenter.show_reply(reply)
    while reply.expects_answer:
        try:
            line = _input_fn("> ")
        except EOFError:
            break
        if line.strip().lower() in _QUIT_WORDS:
            break
        if not line.strip():
            presenter.show_reprompt(reply)
            continue
        reply = controller.handle(parse_turn(line), session)
        presenter.show_reply(reply)
    presenter.end_session()
    return session


def main() -> None:
    parser = argparse.ArgumentParser(prog="calclearn", description="Spoken arithmetic drill (terminal)")
    # If omitted, runs with a random seed for variety. Pass an int to reproduce.
    parser.add_argument("--seed", type=int, default=None, help="RNG seed (random if omitted)")
    parser.add_argument("--no-color", action="store_true", help="Disable colored output (default is colored)")
    parser.add_argument("--welcome", action="store_true", help="Greet and ask for a name before the first exercise")
    args = parser.parse_args()

    run_drill(seed=args.seed, no_color=args.no_color, welcome_on_launch=args.welcome)


if __name__ == "__main__":
    main()
