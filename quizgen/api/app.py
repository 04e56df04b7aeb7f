"""FastAPI application factory and configuration.

Main application entry point with lifespan management, middleware,
error envelopes, and router registration.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from quizgen.api.quiz import router as quiz_router
from quizgen.api.upload import router as upload_router
from quizgen.config import get_app_settings
from quizgen.extraction.extractors import configure_ocr
from quizgen.models.schemas import ErrorResponse, HealthResponse
from quizgen.quiz.generator import LLMServiceError

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
    """Manage application startup and shutdown lifecycle.

    Creates the uploads directory and configures OCR on startup.

    Args:
        app: The FastAPI application instance.

    Yields:
        Control to the application while it runs.
    """
    settings = get_app_settings()
    settings.upload_dir.mkdir(parents=True, exist_ok=True)
    configure_ocr(settings.tesseract_cmd)

    logger.info("Starting Quiz Generator API...")
    yield
    logger.info("Shutting down Quiz Generator API...")


def _error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(error=message).model_dump(),
    )


def _format_validation_errors(exc: RequestValidationError) -> str:
    """Turn Pydantic validation errors into one readable message."""
    messages = []
    for error in exc.errors():
        field = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
        message = str(error.get("msg", "Invalid value")).removeprefix("Value error, ")
        messages.append(f"{field}: {message}" if field else message)
    return "; ".join(messages) or "Invalid request"


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return _error_response(exc.status_code, str(exc.detail))


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    return _error_response(
        status.HTTP_422_UNPROCESSABLE_CONTENT, _format_validation_errors(exc)
    )


async def llm_exception_handler(request: Request, exc: LLMServiceError) -> JSONResponse:
    return _error_response(status.HTTP_502_BAD_GATEWAY, str(exc))


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f"Unhandled error on {request.method} {request.url.path}: {exc}")
    return _error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Returns:
        Configured FastAPI application instance.
    """
    application = FastAPI(
        title="Quiz Generator API",
        description=(
            "Extracts text from uploaded PDFs, images, and text files, and turns it "
            "into quizzes, topic analyses, and tutoring answers through an LLM."
        ),
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )

    application.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["*"],
    )

    application.add_exception_handler(StarletteHTTPException, http_exception_handler)
    application.add_exception_handler(RequestValidationError, validation_exception_handler)
    application.add_exception_handler(LLMServiceError, llm_exception_handler)
    application.add_exception_handler(Exception, unhandled_exception_handler)

    application.include_router(upload_router)
    application.include_router(quiz_router)

    @application.get("/api/health", response_model=HealthResponse)
    async def health_check() -> HealthResponse:
        """Check service health status."""
        return HealthResponse(status="ok", message="Quiz Generator API is running")

    return application


app = create_app()
