"""
Tests for the quiz generation pipeline.
"""

import asyncio
import json

import httpx
import openai
import pytest

from quiz_generation.config import CACHE_TTL_SECONDS
from quiz_generation.entities import GenerationRequest
from quiz_generation.errors import (
    AllModelsExhaustedError,
    GenerationTimeoutError,
    QuestionValidationError,
    RateLimitedError,
    ResponseParseError,
)
from quiz_generation.services import (
    CacheService,
    ModelConfig,
    QuizGenerationService,
    build_cache_key,
)

from conftest import PHOTOSYNTHESIS_QUESTIONS, FakeProvider


class RateLimit(Exception):
    code = "rate_limit_exceeded"


def test_photosynthesis_scenario(make_service, photosynthesis_request, questions_json):
    """First call generates, identical second call is served from cache."""
    service, provider = make_service(questions_json)

    first = asyncio.run(service.generate_quiz(photosynthesis_request))
    second = asyncio.run(service.generate_quiz(photosynthesis_request))

    assert len(first.questions) == 3
    assert first.metadata.cache_hit is False
    assert first.metadata.model_used == "gpt-4"
    assert first.metadata.content_length is None
    assert first.questions_as_dicts() == PHOTOSYNTHESIS_QUESTIONS

    assert second.metadata.cache_hit is True
    assert second.metadata.model_used == "cache"
    assert second.questions == first.questions
    assert len(provider.calls) == 1


def test_cache_shared_across_users(make_service, photosynthesis_request, questions_json):
    """Requester identity is not part of the cache key."""
    service, provider = make_service(questions_json)
    other_user = GenerationRequest(
        topic="Photosynthesis",
        difficulty="easy",
        num_questions=3,
        question_types=("multiple-choice",),
        user_id="student-2",
    )

    asyncio.run(service.generate_quiz(photosynthesis_request))
    result = asyncio.run(service.generate_quiz(other_user))

    assert result.metadata.cache_hit is True
    assert len(provider.calls) == 1


def test_cache_expires_after_an_hour(make_service, photosynthesis_request, questions_json, clock):
    service, provider = make_service(questions_json)

    asyncio.run(service.generate_quiz(photosynthesis_request))
    clock.advance(3601)
    result = asyncio.run(service.generate_quiz(photosynthesis_request))

    assert result.metadata.cache_hit is False
    assert len(provider.calls) == 2


def test_cache_key_format():
    request = GenerationRequest(
        topic="Cells",
        difficulty="medium",
        num_questions=4,
        question_types=("true-false", "multiple-choice"),
    )
    assert build_cache_key(request) == "quiz:Cells:medium:4:true-false,multiple-choice:no-content"


def test_cache_key_hashes_content():
    with_content = GenerationRequest(
        topic="Cells",
        difficulty="medium",
        num_questions=4,
        question_types=("multiple-choice",),
        content="The cell is the basic unit of life.",
    )
    key = build_cache_key(with_content)

    assert key.startswith("quiz:Cells:medium:4:multiple-choice:")
    assert len(key.rsplit(":", 1)[1]) == 32


def test_content_is_processed_into_prompt(make_service, questions_json):
    service, provider = make_service(questions_json)
    request = GenerationRequest(
        topic="Biology",
        difficulty="easy",
        num_questions=3,
        question_types=("multiple-choice",),
        content="  Chlorophyll\n\n absorbs   light.  ",
    )

    result = asyncio.run(service.generate_quiz(request))

    prompt = provider.calls[0]["prompt"]
    assert "based on the following content:\nChlorophyll absorbs light." in prompt
    assert 'on the topic "Biology"' not in prompt
    assert result.metadata.content_length == len("Chlorophyll absorbs light.")


def test_prompt_embeds_request_parameters(make_service, questions_json):
    service, provider = make_service(questions_json)
    request = GenerationRequest(
        topic="Volcanoes",
        difficulty="hard",
        num_questions=3,
        question_types=("multiple-choice", "true-false"),
        language="French",
    )

    asyncio.run(service.generate_quiz(request))

    call = provider.calls[0]
    assert call["model"] == "gpt-4"
    assert call["temperature"] == 0.7
    assert call["max_tokens"] == 4000
    assert "Generate 3 quiz questions" in call["prompt"]
    assert 'on the topic "Volcanoes"' in call["prompt"]
    assert "at hard difficulty level" in call["prompt"]
    assert "multiple-choice, true-false" in call["prompt"]
    assert "in French" in call["prompt"]


def test_retries_with_backoff_then_falls_back(make_service, photosynthesis_request, questions_json, sleep):
    """gpt-4 gets two attempts with a 2s backoff, then gpt-3.5-turbo is tried."""
    service, provider = make_service(RuntimeError("boom"), RuntimeError("boom"), questions_json)

    result = asyncio.run(service.generate_quiz(photosynthesis_request))

    assert [c["model"] for c in provider.calls] == ["gpt-4", "gpt-4", "gpt-3.5-turbo"]
    assert provider.calls[2]["temperature"] == 0.8
    assert sleep.delays == [2.0]
    assert result.metadata.model_used == "gpt-3.5-turbo"


def test_empty_response_counts_as_failed_attempt(make_service, photosynthesis_request, questions_json):
    service, provider = make_service("", questions_json)

    result = asyncio.run(service.generate_quiz(photosynthesis_request))

    assert len(provider.calls) == 2
    assert result.metadata.model_used == "gpt-4"


def test_all_models_exhausted(make_service, photosynthesis_request, cache):
    """Every attempt fails: AllModelsExhaustedError and nothing is cached."""
    service, provider = make_service(RuntimeError("boom"))

    with pytest.raises(AllModelsExhaustedError) as exc_info:
        asyncio.run(service.generate_quiz(photosynthesis_request))

    assert len(provider.calls) == 3
    assert len(exc_info.value.errors) == 3
    assert len(cache) == 0


def test_exhausted_by_rate_limit_surfaces_provider_kind(make_service, photosynthesis_request):
    service, _ = make_service(RateLimit("slow down"))

    with pytest.raises(RateLimitedError) as exc_info:
        asyncio.run(service.generate_quiz(photosynthesis_request))

    assert isinstance(exc_info.value, AllModelsExhaustedError)
    assert len(exc_info.value.errors) == 3
    assert isinstance(exc_info.value.__cause__, RateLimit)


def test_exhausted_by_timeouts_is_still_exhaustion(make_service, photosynthesis_request, cache):
    """Timeouts on every attempt keep the timeout kind and stay catchable as exhaustion."""
    request = httpx.Request("POST", "https://api.openai.com/v1/chat/completions")
    service, provider = make_service(openai.APITimeoutError(request=request))

    with pytest.raises(AllModelsExhaustedError) as exc_info:
        asyncio.run(service.generate_quiz(photosynthesis_request))

    assert isinstance(exc_info.value, GenerationTimeoutError)
    assert exc_info.value.message == "Request timeout. Please try again."
    assert len(exc_info.value.errors) == 3
    assert len(provider.calls) == 3
    assert len(cache) == 0


def test_stats_report_the_applied_ttl(photosynthesis_request, questions_json, clock, sleep):
    cache = CacheService(clock=clock)
    service = QuizGenerationService(provider=FakeProvider(questions_json), cache=cache, sleep=sleep)

    asyncio.run(service.generate_quiz(photosynthesis_request))
    assert cache.get_stats()["ttl"] == CACHE_TTL_SECONDS

    clock.advance(CACHE_TTL_SECONDS - 1)
    assert asyncio.run(service.generate_quiz(photosynthesis_request)).metadata.cache_hit is True

    clock.advance(2)
    assert asyncio.run(service.generate_quiz(photosynthesis_request)).metadata.cache_hit is False


def test_missing_json_array_is_parse_failure(make_service, photosynthesis_request, cache):
    service, provider = make_service("Sorry, I can't produce a quiz right now.")

    with pytest.raises(ResponseParseError):
        asyncio.run(service.generate_quiz(photosynthesis_request))

    assert len(provider.calls) == 1
    assert len(cache) == 0


def test_validation_failure_propagates(make_service, photosynthesis_request, cache):
    """A fill-in-the-blank question without an answer fails the whole call."""
    bad = [dict(PHOTOSYNTHESIS_QUESTIONS[0]), {"question": "Plants need ____.", "type": "fill-in-the-blank"}]
    service, _ = make_service(json.dumps(bad))

    with pytest.raises(QuestionValidationError) as exc_info:
        asyncio.run(service.generate_quiz(photosynthesis_request))

    assert exc_info.value.index == 2
    assert exc_info.value.field == "answer"
    assert len(cache) == 0


def test_custom_model_list(make_service, photosynthesis_request, questions_json):
    models = (ModelConfig(name="gpt-4o-mini", max_retries=1, temperature=0.2),)
    service, provider = make_service(questions_json, models=models)

    result = asyncio.run(service.generate_quiz(photosynthesis_request))

    assert provider.calls[0]["model"] == "gpt-4o-mini"
    assert result.metadata.model_used == "gpt-4o-mini"


def test_requires_a_model(make_service):
    with pytest.raises(ValueError):
        make_service("[]", models=())
