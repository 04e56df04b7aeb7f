"""Routes uploaded files to the matching extractor and cleans up after them."""

import asyncio
import logging
from collections.abc import Callable
from pathlib import Path

from quizgen.extraction.errors import ExtractionFailure, UnsupportedMediaType
from quizgen.extraction.extractors import (
    ProgressCallback,
    extract_image,
    extract_pdf,
    extract_text,
)
from quizgen.extraction.lifecycle import owned_file
from quizgen.extraction.media import MediaKind, UploadedFile
from quizgen.extraction.normalizer import normalize

logger = logging.getLogger(__name__)

Extractor = Callable[[Path, ProgressCallback | None], str]

EXTRACTORS: dict[MediaKind, Extractor] = {
    MediaKind.PDF: extract_pdf,
    MediaKind.IMAGE: extract_image,
    MediaKind.PLAIN_TEXT: extract_text,
}


async def extract(
    upload: UploadedFile,
    on_progress: ProgressCallback | None = None,
) -> str:
    """Extract and normalize the text of an uploaded file.

    The file at ``upload.temporary_path`` is deleted before this returns or
    raises, whatever the outcome.

    Args:
        upload: The uploaded file. Ownership passes to this call.
        on_progress: Optional progress observer passed to the extractor.

    Returns:
        Normalized text content.

    Raises:
        UnsupportedMediaType: No extractor handles the declared media type.
        ExtractionFailure: The extractor failed to read the file.
    """
    with owned_file(upload.temporary_path) as path:
        kind = upload.kind
        if kind is MediaKind.UNSUPPORTED:
            raise UnsupportedMediaType(upload.declared_media_type)

        extractor = EXTRACTORS[kind]
        logger.info(f"Extracting {kind.value} content from {upload.original_name}")

        try:
            raw_text = await asyncio.to_thread(extractor, path, on_progress)
        except ExtractionFailure:
            raise
        except Exception as e:
            raise ExtractionFailure(
                f"Failed to extract content from {upload.original_name}: {e}", cause=e
            ) from e

    return normalize(raw_text)
