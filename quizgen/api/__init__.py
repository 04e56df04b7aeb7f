"""FastAPI endpoints for the quiz generator.

Every response is a JSON envelope: ``{"success": true, "data": ...}`` or
``{"success": false, "error": "..."}``.

Endpoints:
    - GET /api/health: Service health status
    - POST /api/upload/file: Extract text from a PDF, image, or text file
    - POST /api/upload/text: Accept pasted text
    - POST /api/quiz/generate: Generate quiz questions
    - POST /api/quiz/analyze-topics: Identify topics in content
    - POST /api/quiz/ai-help: Explain a missed question
    - POST /api/quiz/ai-chat: Follow-up tutoring chat
"""

from quizgen.api.app import app, create_app

__all__ = ["app", "create_app"]
