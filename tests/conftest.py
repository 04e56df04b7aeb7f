"""Pytest fixtures and shared test configuration.

Provides reusable fixtures for unit and integration tests.

Fixtures:
    - upload_dir: Temporary uploads directory
    - app_settings: Settings pointing at the temporary uploads directory
    - pdf_factory: Builds small, valid PDFs with a text layer
    - png_factory: Writes a small PNG image
    - quiz_generator: QuizGenerator stand-in with async methods
    - async_client: HTTPX client for API testing

Test files are generated on the fly, nothing is read from disk fixtures.
"""

from collections.abc import AsyncGenerator, Callable
from pathlib import Path
from unittest.mock import MagicMock

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient
from PIL import Image

from quizgen.api.app import create_app
from quizgen.config import AppSettings, get_app_settings
from quizgen.quiz.generator import QuizGenerator, get_quiz_generator


def build_pdf(pages: list[str]) -> bytes:
    """Build a minimal PDF with one line of Helvetica text per page."""
    page_ids = [4 + 2 * i for i in range(len(pages))]
    kids = " ".join(f"{pid} 0 R" for pid in page_ids)

    objects: list[bytes] = [
        b"<< /Type /Catalog /Pages 2 0 R >>",
        f"<< /Type /Pages /Kids [{kids}] /Count {len(pages)} >>".encode(),
        b"<< /Type /Font /Subtype /Type1 /BaseFont /Helvetica >>",
    ]
    for pid, text in zip(page_ids, pages):
        stream = f"BT /F1 24 Tf 72 720 Td ({text}) Tj ET".encode()
        objects.append(
            (
                f"<< /Type /Page /Parent 2 0 R /MediaBox [0 0 612 792] "
                f"/Resources << /Font << /F1 3 0 R >> >> /Contents {pid + 1} 0 R >>"
            ).encode()
        )
        objects.append(
            f"<< /Length {len(stream)} >>\nstream\n".encode() + stream + b"\nendstream"
        )

    out = bytearray(b"%PDF-1.4\n")
    offsets = []
    for number, obj in enumerate(objects, start=1):
        offsets.append(len(out))
        out += f"{number} 0 obj\n".encode() + obj + b"\nendobj\n"

    xref_offset = len(out)
    out += f"xref\n0 {len(objects) + 1}\n".encode()
    out += b"0000000000 65535 f \n"
    for offset in offsets:
        out += f"{offset:010d} 00000 n \n".encode()
    out += (
        f"trailer\n<< /Size {len(objects) + 1} /Root 1 0 R >>\n"
        f"startxref\n{xref_offset}\n%%EOF\n"
    ).encode()
    return bytes(out)


@pytest.fixture
def upload_dir(tmp_path: Path) -> Path:
    """Return an empty uploads directory."""
    path = tmp_path / "uploads"
    path.mkdir()
    return path


@pytest.fixture
def app_settings(upload_dir: Path) -> AppSettings:
    """Settings with a 1MB upload limit and a temporary uploads directory."""
    return AppSettings(upload_dir=upload_dir, max_file_size=1024 * 1024)


@pytest.fixture
def pdf_factory(tmp_path: Path) -> Callable[..., Path]:
    """Return a function writing a PDF with the given page texts."""

    def _make(*pages: str, name: str = "sample.pdf") -> Path:
        path = tmp_path / name
        path.write_bytes(build_pdf(list(pages)))
        return path

    return _make


@pytest.fixture
def png_factory(tmp_path: Path) -> Callable[..., Path]:
    """Return a function writing a small white PNG."""

    def _make(name: str = "scan.png") -> Path:
        path = tmp_path / name
        Image.new("RGB", (32, 32), "white").save(path, format="PNG")
        return path

    return _make


@pytest.fixture
def quiz_generator() -> MagicMock:
    """QuizGenerator stand-in; async methods are AsyncMocks."""
    return MagicMock(spec=QuizGenerator)


@pytest.fixture
def app(app_settings: AppSettings, quiz_generator: MagicMock) -> FastAPI:
    """Fresh application with settings and LLM dependencies overridden."""
    application = create_app()
    application.dependency_overrides[get_app_settings] = lambda: app_settings
    application.dependency_overrides[get_quiz_generator] = lambda: quiz_generator
    return application


@pytest.fixture
async def async_client(app: FastAPI) -> AsyncGenerator[AsyncClient]:
    """Create async HTTP client for API testing.

    Yields:
        Configured AsyncClient for making test requests.
    """
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
