"""Quiz generation and tutoring through a hosted chat completion API.

Every call is stateless: the full prompt (and, for tutoring, the client-kept
chat history) is sent each time. Structured results use JSON mode and are
validated with Pydantic before they leave this module.
"""

import json
import logging
from datetime import datetime, timezone
from typing import Any

from openai import AsyncOpenAI, OpenAIError
from pydantic import ValidationError

from quizgen.models.schemas import (
    AIChatRequest,
    AIHelpRequest,
    AIHelpResponse,
    GeneratedQuiz,
    Quiz,
    QuizMetadata,
    QuizRequest,
    TopicAnalysis,
    TutorReply,
)
from quizgen.quiz.config import LLMConfig, get_llm_config
from quizgen.quiz.prompts import (
    QUIZ_SYSTEM_PROMPT,
    build_help_prompt,
    build_quiz_prompt,
    build_topics_prompt,
    build_tutor_messages,
)

logger = logging.getLogger(__name__)

JSON_RESPONSE_FORMAT = {"type": "json_object"}


class LLMServiceError(Exception):
    """Raised when the model call fails or returns an unusable response."""

    pass


class QuizGenerator:
    """Service wrapping the chat completion client.

    Handles:
    - Prompt assembly for each operation
    - JSON-mode parsing and schema validation
    - Uniform error wrapping for the HTTP layer
    """

    def __init__(
        self,
        config: LLMConfig | None = None,
        client: AsyncOpenAI | None = None,
    ) -> None:
        """Initialize the generator.

        Args:
            config: Optional LLM configuration.
                    Loads from environment if not provided.
            client: Optional preconfigured client.
        """
        self._config = config or get_llm_config()
        self._client = client or AsyncOpenAI(
            api_key=self._config.api_key,
            base_url=self._config.base_url,
        )

    async def _complete(
        self,
        messages: list[dict[str, str]],
        temperature: float,
        max_tokens: int,
        json_mode: bool = False,
    ) -> str:
        """Send one chat completion request and return the reply text."""
        kwargs: dict[str, Any] = {}
        if json_mode:
            kwargs["response_format"] = JSON_RESPONSE_FORMAT

        response = await self._client.chat.completions.create(
            model=self._config.model_name,
            messages=messages,
            temperature=temperature,
            max_tokens=max_tokens,
            **kwargs,
        )

        content = response.choices[0].message.content if response.choices else None
        if not content:
            raise LLMServiceError("model returned an empty response")
        return content

    @staticmethod
    def _parse_json(content: str) -> dict[str, Any]:
        data = json.loads(content)
        if not isinstance(data, dict):
            raise LLMServiceError("model did not return a JSON object")
        return data

    async def generate_quiz(self, request: QuizRequest) -> GeneratedQuiz:
        """Generate quiz questions from source content.

        Args:
            request: Validated quiz parameters.

        Returns:
            The quiz and generation metadata.

        Raises:
            LLMServiceError: If the model call fails or the reply is malformed.
        """
        messages = [
            {"role": "system", "content": QUIZ_SYSTEM_PROMPT},
            {
                "role": "user",
                "content": build_quiz_prompt(request, self._config.quiz_max_content_chars),
            },
        ]

        try:
            content = await self._complete(
                messages, temperature=0.7, max_tokens=4000, json_mode=True
            )
            quiz = Quiz.model_validate(self._parse_json(content))
        except (OpenAIError, LLMServiceError, ValueError, ValidationError) as e:
            logger.error(f"Quiz generation error: {e}")
            raise LLMServiceError(f"Failed to generate quiz: {e}") from e

        logger.info(f"Generated {len(quiz.questions)} questions")

        return GeneratedQuiz(
            quiz=quiz,
            metadata=QuizMetadata(
                total_questions=len(quiz.questions),
                difficulty=request.difficulty,
                question_types=request.question_types,
                generated_at=datetime.now(timezone.utc),
            ),
        )

    async def analyze_topics(self, content: str) -> TopicAnalysis:
        """Identify the main topics and concepts in source content.

        Raises:
            LLMServiceError: If the model call fails or the reply is malformed.
        """
        prompt = build_topics_prompt(content, self._config.topics_max_content_chars)

        try:
            reply = await self._complete(
                [{"role": "user", "content": prompt}],
                temperature=0.5,
                max_tokens=1500,
                json_mode=True,
            )
            return TopicAnalysis.model_validate(self._parse_json(reply))
        except (OpenAIError, LLMServiceError, ValueError, ValidationError) as e:
            logger.error(f"Topic analysis error: {e}")
            raise LLMServiceError(f"Failed to analyze topics: {e}") from e

    async def explain_answer(self, request: AIHelpRequest) -> AIHelpResponse:
        """Explain why the correct answer to a question is right.

        Raises:
            LLMServiceError: If the model call fails.
        """
        try:
            explanation = await self._complete(
                [{"role": "user", "content": build_help_prompt(request)}],
                temperature=0.7,
                max_tokens=1500,
            )
        except (OpenAIError, LLMServiceError) as e:
            logger.error(f"AI help error: {e}")
            raise LLMServiceError(f"Failed to get AI help: {e}") from e

        logger.info(f"AI help generated for topic: {request.topic or 'general'}")

        return AIHelpResponse(
            detailed_explanation=explanation,
            question=request.question,
            correct_answer=request.correct_answer,
            topic=request.topic,
        )

    async def chat_with_tutor(self, request: AIChatRequest) -> TutorReply:
        """Answer a follow-up message in a tutoring conversation.

        Raises:
            LLMServiceError: If the model call fails.
        """
        try:
            message = await self._complete(
                build_tutor_messages(request),
                temperature=0.8,
                max_tokens=1000,
            )
        except (OpenAIError, LLMServiceError) as e:
            logger.error(f"Tutor chat error: {e}")
            raise LLMServiceError(f"Failed to chat with AI: {e}") from e

        return TutorReply(message=message)


# Module-level singleton instance
_quiz_generator: QuizGenerator | None = None


def get_quiz_generator() -> QuizGenerator:
    """Get or create the global quiz generator.

    Returns:
        The QuizGenerator instance.
    """
    global _quiz_generator
    if _quiz_generator is None:
        _quiz_generator = QuizGenerator()
    return _quiz_generator
