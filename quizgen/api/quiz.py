"""Quiz generation and tutoring endpoints."""

import logging

from fastapi import APIRouter, Depends

from quizgen.models.schemas import (
    AIChatRequest,
    AIHelpRequest,
    AIHelpResponse,
    ApiResponse,
    GeneratedQuiz,
    QuizRequest,
    TopicAnalysis,
    TopicsRequest,
    TutorReply,
)
from quizgen.quiz.generator import QuizGenerator, get_quiz_generator

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/quiz", tags=["quiz"])


@router.post("/generate", response_model=ApiResponse[GeneratedQuiz])
async def generate_quiz(
    request: QuizRequest,
    generator: QuizGenerator = Depends(get_quiz_generator),
) -> ApiResponse[GeneratedQuiz]:
    """Generate a quiz from source content.

    Raises:
        422: Invalid parameters (blank content, count outside 1-30,
            unknown difficulty or question type).
        502: The model call failed or returned malformed output.
    """
    logger.info(
        f"Generating quiz: {request.number_of_questions} questions, "
        f"{request.difficulty.value} difficulty"
    )
    quiz = await generator.generate_quiz(request)
    return ApiResponse(data=quiz)


@router.post("/analyze-topics", response_model=ApiResponse[TopicAnalysis])
async def analyze_topics(
    request: TopicsRequest,
    generator: QuizGenerator = Depends(get_quiz_generator),
) -> ApiResponse[TopicAnalysis]:
    """List the topics and key concepts found in source content."""
    topics = await generator.analyze_topics(request.content)
    return ApiResponse(data=topics)


@router.post("/ai-help", response_model=ApiResponse[AIHelpResponse])
async def ai_help(
    request: AIHelpRequest,
    generator: QuizGenerator = Depends(get_quiz_generator),
) -> ApiResponse[AIHelpResponse]:
    """Explain a question the student answered incorrectly."""
    logger.info(f"Generating AI help for question about: {request.topic or 'general topic'}")
    help_response = await generator.explain_answer(request)
    return ApiResponse(data=help_response)


@router.post("/ai-chat", response_model=ApiResponse[TutorReply])
async def ai_chat(
    request: AIChatRequest,
    generator: QuizGenerator = Depends(get_quiz_generator),
) -> ApiResponse[TutorReply]:
    """Continue a tutoring conversation about a question."""
    logger.info(f"AI chat: {request.user_message[:50]}...")
    reply = await generator.chat_with_tutor(request)
    return ApiResponse(data=reply)
