"""Prompt construction for quiz generation."""

from quiz_generation.entities import GenerationRequest

DIFFICULTY_GUIDELINES = """DIFFICULTY GUIDELINES:
- Easy: Basic facts, direct recall
- Medium: Application of concepts, simple analysis
- Hard: Complex analysis, synthesis, evaluation"""


def build_generation_prompt(request: GenerationRequest, content: str | None = None) -> str:
    """Build the natural-language prompt for one generation request.

    Args:
        request: The generation request
        content: Processed source content. When given it replaces the topic as context.

    Returns:
        The prompt text sent as the single user message
    """
    if content:
        context = f"based on the following content:\n{content}"
    else:
        context = f'on the topic "{request.topic}"'

    language_line = ""
    if request.language:
        language_line = f"Write every question, option and explanation in {request.language}.\n"

    return f"""
Generate {request.num_questions} quiz questions {context} at {request.difficulty} difficulty level.
Include a mix of these question types: {", ".join(request.question_types)}.
{language_line}
CRITICAL REQUIREMENTS:
1. For multiple-choice: Provide EXACTLY 4 distinct options labeled A, B, C, D
2. For true-false: Provide EXACTLY 2 options: A: "True", B: "False"
3. For fill-in-the-blank: Provide empty options object and the answer as text
4. All multiple-choice options must be meaningful and plausible
5. Questions should match the {request.difficulty} difficulty level
6. Include clear explanations for answers

{DIFFICULTY_GUIDELINES}

FORMAT REQUIREMENTS:
Return ONLY valid JSON array following this exact structure:
[
  {{
    "question": "Question text?",
    "options": {{ "A": "Option A", "B": "Option B", "C": "Option C", "D": "Option D" }},
    "answer": "A",
    "explanation": "Clear explanation",
    "type": "multiple-choice",
    "difficulty": "{request.difficulty}"
  }}
]

Ensure JSON is valid and properly formatted.
"""
