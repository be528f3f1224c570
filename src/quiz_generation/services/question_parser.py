"""Parsing and normalization of raw model output.

The model is asked for a JSON array, but the text around it is not trusted:
the first ``[...]`` span is extracted and every item is forced into the
GeneratedQuestion shape with type-appropriate defaults.
"""

import json
import logging
import re
from typing import Any

from quiz_generation.entities import OPTION_LABELS, QUESTION_TYPES, GeneratedQuestion
from quiz_generation.errors import ResponseParseError

logger = logging.getLogger(__name__)

_JSON_ARRAY_RE = re.compile(r"\[[\s\S]*\]")

DEFAULT_TYPE = "multiple-choice"
DEFAULT_EXPLANATION = "No explanation provided"
TRUE_FALSE_OPTIONS = {"A": "True", "B": "False", "C": "", "D": ""}


def parse_questions(response: str) -> list[Any]:
    """Extract and decode the JSON array of questions from model output.

    Raises:
        ResponseParseError: If no array is found, decoding fails, or the array is empty
    """
    match = _JSON_ARRAY_RE.search(response)
    if match is None:
        logger.error("No JSON array found in model response")
        raise ResponseParseError("No JSON array found in response")

    try:
        parsed = json.loads(match.group(0))
    except json.JSONDecodeError as e:
        logger.error("Failed to parse model response: %s", e)
        raise ResponseParseError(f"Invalid JSON in response: {e}") from e

    if not isinstance(parsed, list):
        raise ResponseParseError("Response is not an array")
    if not parsed:
        raise ResponseParseError("Empty questions array")

    return parsed


def _text(value: Any) -> str:
    return value.strip() if isinstance(value, str) else ""


def normalize_type(value: Any) -> str:
    return value if value in QUESTION_TYPES else DEFAULT_TYPE


def normalize_options(options: Any, question_type: Any) -> dict[str, str]:
    """Force options into the fixed A-D shape for the given raw type."""
    if question_type == "fill-in-the-blank":
        return {label: "" for label in OPTION_LABELS}

    if question_type == "true-false":
        return dict(TRUE_FALSE_OPTIONS)

    if isinstance(options, dict):
        return {label: _text(options.get(label)) or f"Option {label}" for label in OPTION_LABELS}

    return {label: "" for label in OPTION_LABELS}


def normalize_answer(answer: Any, question_type: Any) -> str:
    """Uppercase choice answers into A-D (default "A"); trim free-text answers."""
    if question_type == "fill-in-the-blank":
        return str(answer or "").strip()

    normalized = str(answer or "A").strip().upper()
    return normalized if normalized in OPTION_LABELS else "A"


def normalize_question(raw: Any, index: int, difficulty: str) -> GeneratedQuestion:
    """Normalize one parsed item.

    Args:
        raw: The decoded JSON item (anything; non-objects get all defaults)
        index: 1-based position, used for the default question text
        difficulty: The request difficulty, which always overrides the model's
    """
    item = raw if isinstance(raw, dict) else {}
    raw_type = item.get("type")

    return GeneratedQuestion(
        question=_text(item.get("question")) or f"Question {index}",
        options=normalize_options(item.get("options"), raw_type),
        answer=normalize_answer(item.get("answer"), raw_type),
        explanation=_text(item.get("explanation")) or DEFAULT_EXPLANATION,
        type=normalize_type(raw_type),
        difficulty=difficulty,
    )


def normalize_questions(items: list[Any], difficulty: str) -> list[GeneratedQuestion]:
    return [normalize_question(item, i, difficulty) for i, item in enumerate(items, start=1)]
