"""Shared fixtures for quiz controller tests."""

import pytest

from core import quiz


class ReversedSample:
    """Random source that always returns the population reversed."""

    def __init__(self):
        self.calls = 0

    def sample(self, population, k):
        self.calls += 1
        return list(reversed(population))[:k]


# Quiz order produced by ReversedSample over ELEMENT_CATALOG
REVERSED_ORDER = ["Sodium", "Chlorine", "Gold", "Carbon"]


@pytest.fixture(autouse=True)
def clear_quiz_env(monkeypatch):
    """Keep developer .env settings out of the tests."""
    for name in ("ELEMENT_QUIZ_SEED", "ELEMENT_QUIZ_ASSETS_DIR", "ELEMENT_QUIZ_DEFAULT_MODE"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def rng():
    return ReversedSample()


@pytest.fixture
def controller(rng):
    return quiz.QuizController(rng=rng)


@pytest.fixture
def quiz_controller(controller):
    """Controller already switched into quiz mode (order: REVERSED_ORDER)."""
    controller.set_mode(quiz.Mode.QUIZ)
    return controller
