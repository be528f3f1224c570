"""
Shared fixtures for quiz generation tests.
"""

import json

import pytest

from quiz_generation.entities import GenerationRequest
from quiz_generation.services import CacheService, QuizGenerationService

PHOTOSYNTHESIS_QUESTIONS = [
    {
        "question": "What gas do plants absorb during photosynthesis?",
        "options": {"A": "Oxygen", "B": "Carbon dioxide", "C": "Nitrogen", "D": "Helium"},
        "answer": "B",
        "explanation": "Plants take in carbon dioxide and release oxygen.",
        "type": "multiple-choice",
        "difficulty": "easy",
    },
    {
        "question": "Where in the cell does photosynthesis take place?",
        "options": {"A": "Mitochondria", "B": "Nucleus", "C": "Chloroplast", "D": "Ribosome"},
        "answer": "C",
        "explanation": "Chloroplasts contain chlorophyll.",
        "type": "multiple-choice",
        "difficulty": "easy",
    },
    {
        "question": "Which pigment captures light energy?",
        "options": {"A": "Chlorophyll", "B": "Melanin", "C": "Keratin", "D": "Hemoglobin"},
        "answer": "A",
        "explanation": "Chlorophyll absorbs mostly blue and red light.",
        "type": "multiple-choice",
        "difficulty": "easy",
    },
]


class FakeProvider:
    """CompletionProvider that replays scripted outcomes.

    Each outcome is either a string (returned) or an exception (raised).
    The last outcome repeats once the script runs out.
    """

    def __init__(self, *outcomes):
        self.outcomes = list(outcomes)
        self.calls: list[dict] = []

    async def complete(self, model, prompt, max_tokens, temperature):
        self.calls.append(
            {"model": model, "prompt": prompt, "max_tokens": max_tokens, "temperature": temperature}
        )
        index = min(len(self.calls), len(self.outcomes)) - 1
        outcome = self.outcomes[index]
        if isinstance(outcome, BaseException):
            raise outcome
        return outcome


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self, now: float = 1000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class RecordingSleep:
    """Awaitable sleep that records delays instead of waiting."""

    def __init__(self):
        self.delays: list[float] = []

    async def __call__(self, seconds: float) -> None:
        self.delays.append(seconds)


@pytest.fixture
def questions_json():
    """Well-formed model output wrapped in chatter."""
    return "Here is your quiz:\n" + json.dumps(PHOTOSYNTHESIS_QUESTIONS, indent=2) + "\nGood luck!"


@pytest.fixture
def photosynthesis_request():
    """The three-question multiple-choice request."""
    return GenerationRequest(
        topic="Photosynthesis",
        difficulty="easy",
        num_questions=3,
        question_types=("multiple-choice",),
        user_id="student-1",
    )


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def sleep():
    return RecordingSleep()


@pytest.fixture
def cache(clock):
    return CacheService(default_ttl=3600, clock=clock)


@pytest.fixture
def make_service(cache, sleep):
    """Build a QuizGenerationService around a FakeProvider."""

    def _make(*outcomes, **kwargs):
        provider = FakeProvider(*outcomes)
        service = QuizGenerationService(provider=provider, cache=cache, sleep=sleep, **kwargs)
        return service, provider

    return _make
