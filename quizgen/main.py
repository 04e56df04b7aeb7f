"""Main application entry point.

Runs the FastAPI server with uvicorn.
Environment variables are loaded from .env file.
"""

import logging
import sys

from dotenv import load_dotenv

# Load environment variables before any other imports that might need them
load_dotenv()

from quizgen.config import get_app_settings  # noqa: E402

settings = get_app_settings()

# Configure logging
logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)
logger = logging.getLogger(__name__)


def main() -> None:
    """Application entry point."""
    import uvicorn

    from quizgen.api.app import create_app

    app = create_app()

    logger.info(f"Quiz Generator server starting on http://{settings.host}:{settings.port}")
    logger.info(f"API available at http://{settings.host}:{settings.port}/api")

    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
