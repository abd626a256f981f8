"""
Quiz controller errors.
"""

from __future__ import annotations

from core.quiz.constants import Mode, Phase


class QuizError(Exception):
    """Base class for quiz controller errors."""


class InvalidTransitionError(QuizError):
    """
    An operation was invoked outside the mode/phase it is valid in.

    This is a defect in the caller: the presentation layer should have
    disabled or hidden the control according to the last render directive.
    """

    def __init__(self, operation: str, mode: Mode, phase: Phase, expected: str):
        self.operation = operation
        self.mode = mode
        self.phase = phase
        self.expected = expected
        super().__init__(
            f"{operation}() is only valid in {expected} "
            f"(current state: {mode.value}/{phase.value})"
        )
