from datetime import datetime
from enum import Enum
from typing import Any, Generic, Literal, TypeVar

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

T = TypeVar("T")


class CamelModel(BaseModel):
    """Base model exchanging camelCase JSON with the frontend."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Difficulty(str, Enum):
    """Quiz difficulty levels."""

    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"


class QuestionType(str, Enum):
    """Question formats the generator can be asked for."""

    MULTIPLE_CHOICE = "multiple-choice"
    TRUE_FALSE = "true-false"
    FILL_IN_BLANK = "fill-in-blank"
    TOPIC_SPECIFIC = "topic-specific"


def _require_text(v: Any, message: str) -> Any:
    if isinstance(v, str) and not v.strip():
        raise ValueError(message)
    return v


# === Envelopes ===


class ApiResponse(BaseModel, Generic[T]):
    """Successful response envelope.

    Attributes:
        success: Always true.
        data: Endpoint payload.
    """

    success: bool = True
    data: T


class ErrorResponse(BaseModel):
    """Failure envelope returned with a 4xx/5xx status.

    Attributes:
        success: Always false.
        error: Human-readable error message.
    """

    success: bool = False
    error: str


class HealthResponse(BaseModel):
    status: str
    message: str


# === Upload ===


class ExtractedFile(CamelModel):
    """Text extracted from an uploaded file.

    Attributes:
        filename: Original name of the uploaded file.
        file_type: Declared media type.
        content: Normalized text content.
        content_length: Number of characters in ``content``.
    """

    filename: str
    file_type: str
    content: str
    content_length: int = Field(ge=0)


class TextUploadRequest(CamelModel):
    text: str | None = None


class ExtractedText(CamelModel):
    content: str
    content_length: int = Field(ge=0)


# === Quiz generation ===


class QuizRequest(CamelModel):
    """Request payload for quiz generation.

    Attributes:
        content: Source material to build questions from.
        number_of_questions: How many questions to generate (1-30).
        difficulty: Target difficulty.
        question_types: Question formats to include.
        specific_topics: Topics to focus on (empty covers everything).
        prioritize_important: Favor frequently mentioned concepts.
    """

    content: str
    number_of_questions: int = Field(default=10, ge=1, le=30)
    difficulty: Difficulty = Difficulty.MEDIUM
    question_types: list[QuestionType] = Field(
        default_factory=lambda: [QuestionType.MULTIPLE_CHOICE], min_length=1
    )
    specific_topics: list[str] = Field(default_factory=list)
    prioritize_important: bool = True

    @field_validator("content")
    @classmethod
    def content_not_blank(cls, v: str) -> str:
        return _require_text(v, "Content is required to generate quiz")


class QuizQuestion(CamelModel):
    """A single generated question.

    Only ``question`` and ``correct_answer`` are required; the model may add
    fields of its own, which are passed through.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="allow")

    id: int | str | None = None
    type: str | None = None
    difficulty: str | None = None
    topic: str | None = None
    question: str
    options: list[Any] | None = None
    correct_answer: str | bool | int | float
    explanation: str | None = None


class Quiz(CamelModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="allow")

    title: str = ""
    description: str = ""
    questions: list[QuizQuestion] = Field(default_factory=list)


class QuizMetadata(CamelModel):
    total_questions: int = Field(ge=0)
    difficulty: Difficulty
    question_types: list[QuestionType]
    generated_at: datetime


class GeneratedQuiz(CamelModel):
    quiz: Quiz
    metadata: QuizMetadata


# === Topic analysis ===


class TopicsRequest(CamelModel):
    content: str

    @field_validator("content")
    @classmethod
    def content_not_blank(cls, v: str) -> str:
        return _require_text(v, "Content is required for topic analysis")


class TopicAnalysis(CamelModel):
    """Topics and concepts identified in source material.

    Attributes:
        topics: Main topic names.
        key_concepts: Important concepts or definitions.
        suggested_difficulty: Recommended difficulty for the content.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="allow")

    topics: list[Any] = Field(default_factory=list)
    key_concepts: list[Any] = Field(default_factory=list)
    suggested_difficulty: str | None = None


# === Tutoring ===


class AIHelpRequest(CamelModel):
    """A question the student got wrong and wants explained."""

    question: str
    correct_answer: str
    user_answer: str | None = None
    explanation: str | None = None
    topic: str | None = None

    @field_validator("question", "correct_answer")
    @classmethod
    def required_not_blank(cls, v: str) -> str:
        return _require_text(v, "Question and correct answer are required")


class AIHelpResponse(CamelModel):
    detailed_explanation: str
    question: str
    correct_answer: str
    topic: str | None = None


class ChatTurn(BaseModel):
    """One earlier message in a tutoring conversation."""

    role: Literal["user", "assistant"]
    content: str


class AIChatRequest(CamelModel):
    """Follow-up message to the tutor about a quiz question.

    History is kept by the client and sent with every request.
    """

    question: str
    correct_answer: str
    user_message: str
    chat_history: list[ChatTurn] = Field(default_factory=list)
    topic: str | None = None

    @field_validator("question", "correct_answer", "user_message")
    @classmethod
    def required_not_blank(cls, v: str) -> str:
        return _require_text(v, "Question, correct answer, and user message are required")

    @field_validator("chat_history", mode="before")
    @classmethod
    def null_history_is_empty(cls, v: Any) -> Any:
        return [] if v is None else v


class TutorReply(CamelModel):
    message: str
