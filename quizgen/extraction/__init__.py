"""Document text extraction for quiz generation.

Turns uploaded files into clean text ready to be placed in a prompt.

Responsibilities:
    - PDF text-layer extraction with pypdf
    - Image OCR with Tesseract (English)
    - Plain-text reading (UTF-8)
    - Whitespace normalization of the extracted text
    - Guaranteed removal of the temporary upload file

Dispatch is decided once per upload from its declared media type.
"""

from quizgen.extraction.errors import (
    ExtractionError,
    ExtractionFailure,
    UnsupportedMediaType,
)
from quizgen.extraction.lifecycle import delete_if_exists, owned_file
from quizgen.extraction.media import MediaKind, UploadedFile, classify_media_type
from quizgen.extraction.normalizer import normalize
from quizgen.extraction.orchestrator import extract

__all__ = [
    "ExtractionError",
    "ExtractionFailure",
    "MediaKind",
    "UnsupportedMediaType",
    "UploadedFile",
    "classify_media_type",
    "delete_if_exists",
    "extract",
    "normalize",
    "owned_file",
]
