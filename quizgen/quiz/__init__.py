"""LLM-backed quiz generation and tutoring.

Responsibilities:
    - Prompt construction for quizzes, topic analysis, and explanations
    - JSON-mode chat completions against OpenAI-compatible APIs
    - Validation of model output into response schemas

Holds no conversation state; tutoring history is supplied by the client.
"""

from quizgen.quiz.config import LLMConfig, get_llm_config
from quizgen.quiz.generator import LLMServiceError, QuizGenerator, get_quiz_generator

__all__ = [
    "LLMConfig",
    "LLMServiceError",
    "QuizGenerator",
    "get_llm_config",
    "get_quiz_generator",
]
