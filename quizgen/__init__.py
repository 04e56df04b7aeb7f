"""Quiz Generator - turns uploaded study material into quizzes.

Combines FastAPI for HTTP, pypdf and Tesseract for text extraction,
the OpenAI API for question generation, and Pydantic for data validation.

Components:
    - api: HTTP endpoints and error envelopes
    - extraction: PDF, image, and text extraction with temp-file cleanup
    - quiz: Prompt construction and LLM calls
    - models: Request/response schemas
"""

__version__ = "0.1.0"
