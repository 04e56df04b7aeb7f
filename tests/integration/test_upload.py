"""Integration tests for upload endpoints.

Tests the real upload flow through the FastAPI app with generated files.
Only the OCR engine is mocked, so tesseract need not be installed.
"""

from collections.abc import Callable
from pathlib import Path
from unittest.mock import patch

import pytest
from httpx import AsyncClient

OCR_TARGET = "quizgen.extraction.extractors.pytesseract.image_to_string"


class TestFileUpload:
    """Integration tests for POST /api/upload/file."""

    async def test_upload_text_file(self, async_client: AsyncClient, upload_dir: Path) -> None:
        """Plain text is extracted, normalized, and the temp file removed."""
        response = await async_client.post(
            "/api/upload/file",
            files={"file": ("notes.txt", b"  Hello   World  \n\n\n\nBye  ", "text/plain")},
        )

        assert response.status_code == 200
        body = response.json()
        assert body == {
            "success": True,
            "data": {
                "filename": "notes.txt",
                "fileType": "text/plain",
                "content": "Hello World\n\nBye",
                "contentLength": 16,
            },
        }
        assert list(upload_dir.iterdir()) == []

    @pytest.mark.parametrize("media_type", ["text/plain; charset=utf-8", "Text/Plain"])
    async def test_media_type_parameters_are_ignored(
        self, async_client: AsyncClient, upload_dir: Path, media_type: str
    ) -> None:
        """Only the bare media type is checked and reported."""
        response = await async_client.post(
            "/api/upload/file",
            files={"file": ("notes.txt", b"hello", media_type)},
        )

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["fileType"] == "text/plain"
        assert data["content"] == "hello"
        assert list(upload_dir.iterdir()) == []

    async def test_upload_pdf(
        self,
        async_client: AsyncClient,
        upload_dir: Path,
        pdf_factory: Callable[..., Path],
    ) -> None:
        pdf = pdf_factory("Information security", "Access control").read_bytes()

        response = await async_client.post(
            "/api/upload/file",
            files={"file": ("lecture.pdf", pdf, "application/pdf")},
        )

        assert response.status_code == 200
        data = response.json()["data"]
        assert "Information security" in data["content"]
        assert "Access control" in data["content"]
        assert data["contentLength"] == len(data["content"])
        assert list(upload_dir.iterdir()) == []

    async def test_upload_image(
        self,
        async_client: AsyncClient,
        upload_dir: Path,
        png_factory: Callable[..., Path],
    ) -> None:
        image = png_factory().read_bytes()

        with patch(OCR_TARGET, return_value="The water   cycle\n\n\n\nEvaporation"):
            response = await async_client.post(
                "/api/upload/file",
                files={"file": ("board.png", image, "image/png")},
            )

        assert response.status_code == 200
        assert response.json()["data"]["content"] == "The water cycle\n\nEvaporation"
        assert list(upload_dir.iterdir()) == []

    async def test_corrupt_pdf_returns_400_and_cleans_up(
        self, async_client: AsyncClient, upload_dir: Path
    ) -> None:
        response = await async_client.post(
            "/api/upload/file",
            files={"file": ("corrupt.pdf", b"%PDF-1.4\n1 0 obj\n<<", "application/pdf")},
        )

        assert response.status_code == 400
        body = response.json()
        assert body["success"] is False
        assert "Failed to extract text from PDF" in body["error"]
        assert list(upload_dir.iterdir()) == []

    async def test_ocr_failure_returns_400_and_cleans_up(
        self,
        async_client: AsyncClient,
        upload_dir: Path,
        png_factory: Callable[..., Path],
    ) -> None:
        image = png_factory().read_bytes()

        with patch(OCR_TARGET, side_effect=RuntimeError("tesseract is not installed")):
            response = await async_client.post(
                "/api/upload/file",
                files={"file": ("board.png", image, "image/png")},
            )

        assert response.status_code == 400
        assert "tesseract is not installed" in response.json()["error"]
        assert list(upload_dir.iterdir()) == []

    async def test_invalid_utf8_text_returns_400(
        self, async_client: AsyncClient, upload_dir: Path
    ) -> None:
        response = await async_client.post(
            "/api/upload/file",
            files={"file": ("notes.txt", b"caf\xe9 \xff", "text/plain")},
        )

        assert response.status_code == 400
        assert "Failed to read text file" in response.json()["error"]
        assert list(upload_dir.iterdir()) == []

    @pytest.mark.parametrize(
        ("filename", "media_type"),
        [("data.json", "application/json"), ("page.html", "text/html"), ("x.bmp", "image/bmp")],
    )
    async def test_rejects_disallowed_type(
        self, async_client: AsyncClient, upload_dir: Path, filename: str, media_type: str
    ) -> None:
        response = await async_client.post(
            "/api/upload/file",
            files={"file": (filename, b"{}", media_type)},
        )

        assert response.status_code == 400
        body = response.json()
        assert body["success"] is False
        assert "Invalid file type" in body["error"]
        assert list(upload_dir.iterdir()) == []

    async def test_rejects_oversized_file(
        self, async_client: AsyncClient, upload_dir: Path
    ) -> None:
        """File over the configured 1MB limit is rejected with 413."""
        oversized = b"x" * (1024 * 1024 + 1)

        response = await async_client.post(
            "/api/upload/file",
            files={"file": ("big.txt", oversized, "text/plain")},
        )

        assert response.status_code == 413
        assert "exceeds maximum" in response.json()["error"]
        assert list(upload_dir.iterdir()) == []

    async def test_missing_file_returns_400(self, async_client: AsyncClient) -> None:
        response = await async_client.post(
            "/api/upload/file",
            files={"wrong_field": ("notes.txt", b"hello", "text/plain")},
        )

        assert response.status_code == 400
        assert response.json() == {"success": False, "error": "No file uploaded"}

    async def test_stored_name_is_sanitized(
        self, async_client: AsyncClient, upload_dir: Path
    ) -> None:
        """Path components in the client filename never escape the uploads dir."""
        written: list[Path] = []
        original_write = Path.write_bytes

        def spy(self: Path, data: bytes) -> int:
            written.append(self)
            return original_write(self, data)

        with patch.object(Path, "write_bytes", spy):
            response = await async_client.post(
                "/api/upload/file",
                files={"file": ("../../etc/notes.txt", b"hello", "text/plain")},
            )

        assert response.status_code == 200
        assert len(written) == 1
        assert written[0].parent == upload_dir
        assert written[0].name.endswith("-notes.txt")


class TestTextUpload:
    """Integration tests for POST /api/upload/text."""

    async def test_returns_trimmed_text(self, async_client: AsyncClient) -> None:
        response = await async_client.post(
            "/api/upload/text", json={"text": "  Newton's laws of motion  "}
        )

        assert response.status_code == 200
        assert response.json() == {
            "success": True,
            "data": {"content": "Newton's laws of motion", "contentLength": 23},
        }

    @pytest.mark.parametrize("payload", [{}, {"text": ""}, {"text": "   \n"}])
    async def test_rejects_blank_text(self, async_client: AsyncClient, payload: dict) -> None:
        response = await async_client.post("/api/upload/text", json=payload)

        assert response.status_code == 400
        assert response.json() == {"success": False, "error": "No text content provided"}


class TestServiceEndpoints:
    async def test_health(self, async_client: AsyncClient) -> None:
        response = await async_client.get("/api/health")

        assert response.status_code == 200
        assert response.json() == {"status": "ok", "message": "Quiz Generator API is running"}

    async def test_unknown_route_uses_error_envelope(self, async_client: AsyncClient) -> None:
        response = await async_client.get("/api/nothing-here")

        assert response.status_code == 404
        assert response.json()["success"] is False

    async def test_wrong_http_method_returns_405(self, async_client: AsyncClient) -> None:
        response = await async_client.get("/api/upload/file")

        assert response.status_code == 405

    async def test_cors_headers_present(self, async_client: AsyncClient) -> None:
        """Response includes CORS headers for cross-origin requests."""
        response = await async_client.get(
            "/api/health", headers={"Origin": "http://localhost:3000"}
        )

        assert "access-control-allow-origin" in response.headers
