"""Pytest configuration and fixtures for testing."""

import io
from typing import Callable, Dict, Generator, Iterable, Optional, Tuple

import pytest
from _pytest.monkeypatch import MonkeyPatch
from fastapi.testclient import TestClient
from PIL import Image
from pypdf import PdfWriter

from pdftools.api import deps
from pdftools.core.config import settings
from pdftools.main import create_app
from pdftools.services.pdf_service import PDFService

PageSize = Tuple[float, float]


@pytest.fixture(scope="session")
def monkeypatch_session() -> Generator[MonkeyPatch, None, None]:
    """A session-scoped monkeypatch to prevent scope mismatch errors."""
    mpatch = MonkeyPatch()
    yield mpatch
    mpatch.undo()


@pytest.fixture(scope="session", autouse=True)
def apply_test_settings(monkeypatch_session: MonkeyPatch) -> None:
    """Run the whole session with test settings."""
    test_settings = {
        "TESTING": True,
        "MAX_UPLOAD_SIZE_MB": 5,
        "THUMBNAIL_WIDTH": 200,
        "NOT_AVAILABLE_MARKER": "N/A",
    }
    for key, value in test_settings.items():
        monkeypatch_session.setattr(settings, key, value)


def build_pdf(
    sizes: Iterable[PageSize] = ((612, 792),),
    metadata: Optional[Dict[str, str]] = None,
) -> bytes:
    """Build a PDF with one blank page per ``(width, height)``."""
    writer = PdfWriter()
    for width, height in sizes:
        writer.add_blank_page(width=width, height=height)
    if metadata:
        writer.add_metadata(metadata)
    buffer = io.BytesIO()
    writer.write(buffer)
    return buffer.getvalue()


def build_image(
    width: int = 100, height: int = 50, image_format: str = "PNG"
) -> bytes:
    """Generate an RGB test image in memory."""
    img = Image.new("RGB", (width, height), color="red")
    buf = io.BytesIO()
    img.save(buf, format=image_format)
    return buf.getvalue()


@pytest.fixture
def make_pdf() -> Callable[..., bytes]:
    return build_pdf


@pytest.fixture
def make_image() -> Callable[..., bytes]:
    return build_image


@pytest.fixture
def ten_page_pdf() -> bytes:
    """Ten pages whose widths (100..109) identify them."""
    return build_pdf([(100 + i, 200) for i in range(10)])


@pytest.fixture
def test_pdf() -> bytes:
    return build_pdf()


@pytest.fixture
def test_image() -> bytes:
    return build_image()


@pytest.fixture
def pdf_service() -> PDFService:
    """A PDF service with empty repositories for each test."""
    return PDFService()


@pytest.fixture
def client(pdf_service: PDFService) -> Generator[TestClient, None, None]:
    """Create a test client backed by the per-test PDF service."""
    app = create_app()
    app.dependency_overrides[deps.get_pdf_service] = lambda: pdf_service

    with TestClient(app) as test_client:
        yield test_client
