"""Format-specific text extractors.

Each extractor reads a file from disk and returns its raw text. Normalization
is left to the orchestrator. Extractors are synchronous; the orchestrator runs
them in a worker thread.
"""

import io
import logging
from collections.abc import Callable
from pathlib import Path

import pytesseract
from PIL import Image
from pypdf import PdfReader

from quizgen.extraction.errors import ExtractionFailure

logger = logging.getLogger(__name__)

PDF_MAGIC_BYTES = b"%PDF"
OCR_LANGUAGE = "eng"
TEXT_ENCODING = "utf-8"

ProgressCallback = Callable[[str, float], None]


def configure_ocr(tesseract_cmd: str | None) -> None:
    """Point pytesseract at a specific tesseract binary, if one is given."""
    if tesseract_cmd:
        pytesseract.pytesseract.tesseract_cmd = tesseract_cmd
        logger.info(f"Using tesseract binary at {tesseract_cmd}")


def _report(on_progress: ProgressCallback | None, status: str, progress: float) -> None:
    """Forward a progress update, ignoring observer failures."""
    if on_progress is None:
        return
    try:
        on_progress(status, progress)
    except Exception as e:
        logger.warning(f"Progress observer failed on '{status}': {e}")


def _validate_pdf_bytes(file_content: bytes) -> None:
    """Validate PDF file content before parsing.

    Raises:
        ExtractionFailure: If the content is empty or lacks a PDF header.
    """
    if not file_content:
        raise ExtractionFailure("Failed to extract text from PDF: empty file")

    if not file_content.lstrip()[:10].startswith(PDF_MAGIC_BYTES):
        raise ExtractionFailure(
            "Failed to extract text from PDF: file does not start with PDF header"
        )


def extract_pdf(path: Path, on_progress: ProgressCallback | None = None) -> str:
    """Extract the embedded text layer of a PDF.

    Args:
        path: Location of the PDF file.
        on_progress: Optional observer for per-page progress.

    Returns:
        Text of all pages in page order, separated by a blank line.

    Raises:
        ExtractionFailure: If the file cannot be read or is not a valid PDF.
    """
    try:
        file_content = path.read_bytes()
    except OSError as e:
        raise ExtractionFailure(f"Failed to extract text from PDF: {e}", cause=e) from e

    _validate_pdf_bytes(file_content)

    try:
        reader = PdfReader(io.BytesIO(file_content))
        pages = len(reader.pages)
        if pages == 0:
            raise ExtractionFailure("Failed to extract text from PDF: document has no pages")

        text_parts: list[str] = []
        for i, page in enumerate(reader.pages):
            text_parts.append(page.extract_text() or "")
            _report(on_progress, "extracting pages", (i + 1) / pages)
    except ExtractionFailure:
        raise
    except Exception as e:
        logger.error(f"PDF extraction error for {path.name}: {e}")
        raise ExtractionFailure(f"Failed to extract text from PDF: {e}", cause=e) from e

    text = "\n\n".join(text_parts)

    if not text.strip():
        logger.warning("PDF contains no extractable text (may be scanned/image-based)")

    logger.info(f"PDF extracted: {pages} pages, {len(text)} characters")
    return text


def extract_image(path: Path, on_progress: ProgressCallback | None = None) -> str:
    """Run English OCR over a whole image.

    All recognized text is returned regardless of per-character confidence.

    Args:
        path: Location of the image file.
        on_progress: Optional observer; receives ``(status, fraction)``.

    Returns:
        Recognized text.

    Raises:
        ExtractionFailure: On image decode or recognition error.
    """
    logger.info("Running OCR on image...")
    _report(on_progress, "loading image", 0.0)

    try:
        with Image.open(path) as image:
            image.load()
            _report(on_progress, "recognizing text", 0.0)
            text = pytesseract.image_to_string(image, lang=OCR_LANGUAGE)
    except Exception as e:
        logger.error(f"OCR extraction error for {path.name}: {e}")
        raise ExtractionFailure(f"Failed to extract text from image: {e}", cause=e) from e

    _report(on_progress, "done", 1.0)
    logger.info(f"Image OCR complete: {len(text)} characters extracted")
    return text


def extract_text(path: Path, on_progress: ProgressCallback | None = None) -> str:
    """Read a plain text file verbatim.

    Args:
        path: Location of the text file.
        on_progress: Optional observer, notified once the file is read.

    Returns:
        The file content, unmodified.

    Raises:
        ExtractionFailure: If the file cannot be read or is not valid UTF-8.
    """
    try:
        content = path.read_text(encoding=TEXT_ENCODING)
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"Text file read error for {path.name}: {e}")
        raise ExtractionFailure(f"Failed to read text file: {e}", cause=e) from e

    _report(on_progress, "done", 1.0)
    logger.info(f"Text file read: {len(content)} characters")
    return content
