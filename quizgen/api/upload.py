"""Upload endpoints for content extraction.

Handles file upload, validation, temporary storage, and text extraction.
"""

import asyncio
import logging
import random
import re
import time
from pathlib import Path

from fastapi import APIRouter, Depends, HTTPException, UploadFile, status

from quizgen.config import ALLOWED_MEDIA_TYPES, AppSettings, get_app_settings
from quizgen.extraction import (
    ExtractionFailure,
    UnsupportedMediaType,
    UploadedFile,
    delete_if_exists,
    extract,
)
from quizgen.models.schemas import ApiResponse, ExtractedFile, ExtractedText, TextUploadRequest

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/upload", tags=["upload"])

_UNSAFE_FILENAME_CHARS = re.compile(r"[^A-Za-z0-9._-]+")


def _validate_media_type(file: UploadFile) -> str:
    """Check the declared media type against the allow-list.

    Parameters such as ``; charset=utf-8`` are dropped before the check.

    Returns:
        The bare, lowercased media type.

    Raises:
        HTTPException: 400 if the type is not allowed.
    """
    media_type = (file.content_type or "").split(";", 1)[0].strip().lower()
    if media_type not in ALLOWED_MEDIA_TYPES:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Invalid file type. Allowed: PDF, Images (JPEG, PNG, GIF, WebP), Text files",
        )
    return media_type


async def _read_and_validate_size(file: UploadFile, settings: AppSettings) -> bytes:
    """Read file content and validate size.

    Raises:
        HTTPException: 413 if file exceeds size limit.
    """
    content = await file.read()

    if len(content) > settings.max_file_size:
        size_mb = len(content) / (1024 * 1024)
        raise HTTPException(
            status_code=status.HTTP_413_CONTENT_TOO_LARGE,
            detail=(
                f"File size ({size_mb:.1f}MB) exceeds maximum allowed "
                f"({settings.max_file_size_mb:.0f}MB)"
            ),
        )

    return content


def _unique_upload_path(upload_dir: Path, filename: str) -> Path:
    """Build a collision-free path for an upload (timestamp + random suffix)."""
    safe_name = _UNSAFE_FILENAME_CHARS.sub("_", Path(filename).name) or "upload"
    unique_suffix = f"{int(time.time() * 1000)}-{random.randint(0, 10**9)}"
    return upload_dir / f"{unique_suffix}-{safe_name}"


async def _save_upload(content: bytes, filename: str, settings: AppSettings) -> Path:
    """Write upload bytes to the uploads directory."""
    settings.upload_dir.mkdir(parents=True, exist_ok=True)
    path = _unique_upload_path(settings.upload_dir, filename)

    try:
        await asyncio.to_thread(path.write_bytes, content)
    except OSError as e:
        delete_if_exists(path)
        logger.error(f"Failed to store upload {filename}: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to store uploaded file",
        ) from e

    return path


def _log_progress(stage: str, progress: float) -> None:
    logger.debug(f"Extraction progress: {stage} {progress:.0%}")


@router.post("/file", response_model=ApiResponse[ExtractedFile])
async def upload_file(
    file: UploadFile | None = None,
    settings: AppSettings = Depends(get_app_settings),
) -> ApiResponse[ExtractedFile]:
    """Upload a document and extract its text.

    Accepts a PDF, image, or plain text file, stores it temporarily,
    extracts and normalizes its text, then removes the stored copy.

    Args:
        file: The uploaded file (multipart/form-data field ``file``).

    Returns:
        Filename, media type, extracted content, and its length.

    Raises:
        400: No file, disallowed type, or unreadable content.
        413: File exceeds the size limit.
        415: No extractor for the media type.
    """
    if file is None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="No file uploaded",
        )

    filename = file.filename or "upload"
    media_type = _validate_media_type(file)
    content = await _read_and_validate_size(file, settings)

    logger.info(f"Processing file: {filename}")
    path = await _save_upload(content, filename, settings)

    upload = UploadedFile(
        temporary_path=path,
        declared_media_type=media_type,
        original_name=filename,
    )

    try:
        text = await extract(upload, on_progress=_log_progress)
    except UnsupportedMediaType as e:
        raise HTTPException(
            status_code=status.HTTP_415_UNSUPPORTED_MEDIA_TYPE,
            detail=str(e),
        ) from e
    except ExtractionFailure as e:
        logger.warning(f"Extraction failed for {filename}: {e}")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        ) from e

    return ApiResponse(
        data=ExtractedFile(
            filename=filename,
            file_type=media_type,
            content=text,
            content_length=len(text),
        )
    )


@router.post("/text", response_model=ApiResponse[ExtractedText])
async def upload_text(request: TextUploadRequest) -> ApiResponse[ExtractedText]:
    """Accept pasted text as quiz source content.

    Raises:
        400: Text is missing or blank.
    """
    text = (request.text or "").strip()
    if not text:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="No text content provided",
        )

    return ApiResponse(data=ExtractedText(content=text, content_length=len(text)))
