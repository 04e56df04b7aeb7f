"""Media type classification for uploaded files."""

from enum import Enum
from pathlib import Path

from pydantic import BaseModel

PDF_MEDIA_TYPE = "application/pdf"
IMAGE_MEDIA_PREFIX = "image/"
PLAIN_TEXT_MEDIA_TYPE = "text/plain"


class MediaKind(str, Enum):
    """Kinds of content the extraction pipeline knows how to read."""

    PDF = "pdf"
    IMAGE = "image"
    PLAIN_TEXT = "plain-text"
    UNSUPPORTED = "unsupported"


class UploadedFile(BaseModel):
    """A file written to the uploads directory, awaiting extraction.

    Attributes:
        temporary_path: Location of the uploaded bytes on disk.
        declared_media_type: MIME type reported by the client.
        original_name: Filename as sent by the client.
    """

    temporary_path: Path
    declared_media_type: str
    original_name: str

    @property
    def kind(self) -> MediaKind:
        return classify_media_type(self.declared_media_type)


def classify_media_type(media_type: str | None) -> MediaKind:
    """Map a declared MIME type onto a MediaKind.

    PDF and plain text match exactly; any ``image/*`` type is an image.
    """
    if not media_type:
        return MediaKind.UNSUPPORTED

    if media_type == PDF_MEDIA_TYPE:
        return MediaKind.PDF
    if media_type.startswith(IMAGE_MEDIA_PREFIX):
        return MediaKind.IMAGE
    if media_type == PLAIN_TEXT_MEDIA_TYPE:
        return MediaKind.PLAIN_TEXT

    return MediaKind.UNSUPPORTED
