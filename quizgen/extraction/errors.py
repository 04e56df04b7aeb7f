"""Exceptions raised by the extraction pipeline."""


class ExtractionError(Exception):
    """Base class for extraction errors."""

    pass


class UnsupportedMediaType(ExtractionError):
    """Raised when no extractor handles the declared media type."""

    def __init__(self, media_type: str) -> None:
        self.media_type = media_type
        super().__init__(f"Unsupported file type: {media_type}")


class ExtractionFailure(ExtractionError):
    """Raised when an extractor cannot read, decode, or recognize a file.

    Attributes:
        cause: The underlying exception, if any.
    """

    def __init__(self, message: str, cause: BaseException | None = None) -> None:
        self.cause = cause
        super().__init__(message)
