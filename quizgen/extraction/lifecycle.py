"""Temporary upload file cleanup."""

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

logger = logging.getLogger(__name__)


def delete_if_exists(path: str | Path) -> None:
    """Delete a file if it is still on disk.

    Cleanup is best-effort: failures are logged and never raised, so the
    outcome of extraction does not depend on whether deletion worked.

    Args:
        path: Location of the temporary file.
    """
    try:
        Path(path).unlink()
        logger.debug(f"Cleaned up temporary file: {path}")
    except FileNotFoundError:
        logger.debug(f"Temporary file already gone: {path}")
    except (OSError, ValueError) as e:
        # ValueError: paths with embedded NUL bytes
        logger.error(f"File cleanup error for {path}: {e}")


@contextmanager
def owned_file(path: str | Path) -> Iterator[Path]:
    """Take ownership of a temporary file for the duration of a block.

    The file is deleted when the block exits, whether it returns or raises.

    Args:
        path: Location of the temporary file.

    Yields:
        The file path.
    """
    file_path = Path(path)
    try:
        yield file_path
    finally:
        delete_if_exists(file_path)
