"""Pydantic models for API requests and responses.

Provides type safety, validation, and automatic OpenAPI documentation.
JSON bodies use camelCase field names.

Models:
    - ApiResponse / ErrorResponse: Success and failure envelopes
    - ExtractedFile / ExtractedText: Upload results
    - QuizRequest / GeneratedQuiz: Quiz generation
    - TopicsRequest / TopicAnalysis: Topic analysis
    - AIHelpRequest / AIChatRequest: Tutoring
"""

from quizgen.models.schemas import (
    AIChatRequest,
    AIHelpRequest,
    AIHelpResponse,
    ApiResponse,
    ChatTurn,
    Difficulty,
    ErrorResponse,
    ExtractedFile,
    ExtractedText,
    GeneratedQuiz,
    HealthResponse,
    QuestionType,
    Quiz,
    QuizMetadata,
    QuizQuestion,
    QuizRequest,
    TextUploadRequest,
    TopicAnalysis,
    TopicsRequest,
    TutorReply,
)

__all__ = [
    "AIChatRequest",
    "AIHelpRequest",
    "AIHelpResponse",
    "ApiResponse",
    "ChatTurn",
    "Difficulty",
    "ErrorResponse",
    "ExtractedFile",
    "ExtractedText",
    "GeneratedQuiz",
    "HealthResponse",
    "QuestionType",
    "Quiz",
    "QuizMetadata",
    "QuizQuestion",
    "QuizRequest",
    "TextUploadRequest",
    "TopicAnalysis",
    "TopicsRequest",
    "TutorReply",
]
