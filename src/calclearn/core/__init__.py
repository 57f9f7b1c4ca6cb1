"""Core drill primitives: exercise generation."""

from .exercise import BOOTSTRAP_EXERCISE, Exercise, ExerciseGenerator, generate_exercise

__all__ = ["BOOTSTRAP_EXERCISE", "Exercise", "ExerciseGenerator", "generate_exercise"]
