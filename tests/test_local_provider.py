"""
Tests for offline generation.
"""

import asyncio
import json

from quiz_generation.api.dependencies import LOCAL_MODELS
from quiz_generation.entities import GenerationRequest
from quiz_generation.repositories import LocalQuestionProvider
from quiz_generation.services import QuizGenerationService


def test_local_service_end_to_end(cache, sleep):
    service = QuizGenerationService(
        provider=LocalQuestionProvider(),
        cache=cache,
        models=LOCAL_MODELS,
        sleep=sleep,
    )
    request = GenerationRequest(
        topic="Plate tectonics",
        difficulty="medium",
        num_questions=6,
        question_types=("multiple-choice", "true-false", "fill-in-the-blank"),
    )

    result = asyncio.run(service.generate_quiz(request))

    assert len(result.questions) == 6
    assert result.metadata.model_used == "local"
    assert [q.type for q in result.questions[:3]] == [
        "multiple-choice",
        "true-false",
        "fill-in-the-blank",
    ]
    assert all(q.difficulty == "medium" for q in result.questions)
    assert result.questions[1].options == {"A": "True", "B": "False", "C": "", "D": ""}
    assert result.questions[2].answer == "Plate tectonics"
    assert sleep.delays == []


def test_local_provider_reads_content():
    prompt = (
        "Generate 2 quiz questions based on the following content:\n"
        "Mitochondria produce ATP. at easy difficulty level.\n"
        "Include a mix of these question types: fill-in-the-blank."
    )

    response = asyncio.run(LocalQuestionProvider().complete("local", prompt, 100, 0.0))
    questions = json.loads(response)

    assert len(questions) == 2
    assert all(q["type"] == "fill-in-the-blank" for q in questions)
    assert "the provided material" in questions[0]["question"]


def test_local_provider_caps_count():
    prompt = 'Generate 45 quiz questions on the topic "Stars" at hard difficulty level.'

    questions = json.loads(asyncio.run(LocalQuestionProvider().complete("local", prompt, 100, 0.0)))

    assert len(questions) == 20
    assert questions[0]["type"] == "multiple-choice"
    assert questions[0]["difficulty"] == "hard"
