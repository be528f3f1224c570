"""Deterministic offline completion provider.

Used when MOCK_AI is enabled. It reads the request parameters back out of
the generation prompt and returns a JSON array in the same shape the real
models are asked for, so parsing, normalization and validation still run.
"""

import json
import re

from quiz_generation.entities import QUESTION_TYPES

_COUNT_RE = re.compile(r"Generate (\d+) quiz questions")
_TOPIC_RE = re.compile(r'on the topic "([^"]*)"')
_CONTENT_RE = re.compile(r"based on the following content:\n(.*)")
_DIFFICULTY_RE = re.compile(r"at (easy|medium|hard) difficulty level")
_TYPES_RE = re.compile(r"question types: ([^\n]*)\.")

MAX_LOCAL_QUESTIONS = 20


def _truncate(text: str, limit: int) -> str:
    return text if len(text) <= limit else text[: limit - 1] + "…"


class LocalQuestionProvider:
    """Offline implementation of the CompletionProvider protocol."""

    async def complete(
        self,
        model: str,
        prompt: str,
        max_tokens: int,
        temperature: float,
    ) -> str | None:
        count_match = _COUNT_RE.search(prompt)
        count = int(count_match.group(1)) if count_match else 1
        count = max(1, min(MAX_LOCAL_QUESTIONS, count))

        difficulty_match = _DIFFICULTY_RE.search(prompt)
        difficulty = difficulty_match.group(1) if difficulty_match else "easy"

        types_match = _TYPES_RE.search(prompt)
        types = [t.strip() for t in types_match.group(1).split(",")] if types_match else []
        types = [t for t in types if t in QUESTION_TYPES] or ["multiple-choice"]

        topic_match = _TOPIC_RE.search(prompt)
        content_match = _CONTENT_RE.search(prompt)
        if topic_match:
            subject = topic_match.group(1)
        elif content_match:
            subject = "the provided material"
        else:
            subject = "the topic"
        seed = _truncate(content_match.group(1), 40) if content_match else subject

        questions = [
            self._question(i, types[i % len(types)], subject, seed, difficulty)
            for i in range(count)
        ]
        return json.dumps(questions)

    @staticmethod
    def _question(index: int, question_type: str, subject: str, seed: str, difficulty: str) -> dict:
        base = f"Question {index + 1} about {subject}"

        if question_type == "true-false":
            return {
                "question": f"{base}: true or false?",
                "options": {"A": "True", "B": "False"},
                "answer": "A" if index % 2 == 0 else "B",
                "explanation": f"Auto-generated true/false for {subject}",
                "type": question_type,
                "difficulty": difficulty,
            }

        if question_type == "fill-in-the-blank":
            return {
                "question": f"{base}: the key idea is ____.",
                "options": {},
                "answer": seed,
                "explanation": f"Auto-generated fill-in-the-blank for {subject}",
                "type": question_type,
                "difficulty": difficulty,
            }

        labels = "ABCD"
        return {
            "question": f"{base}: what is a key idea related to {subject}?",
            "options": {label: f"{seed} ({label})" for label in labels},
            "answer": labels[index % len(labels)],
            "explanation": f"Auto-generated choices based on {subject}",
            "type": question_type,
            "difficulty": difficulty,
        }
