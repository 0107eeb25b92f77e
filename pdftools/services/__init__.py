"""Services package initialization."""

from pdftools.services.file_service import FileService, file_service
from pdftools.services.pdf_service import PDFService

# Single service instance holding the in-memory workflow repositories
pdf_service = PDFService()

__all__ = [
    "file_service",
    "pdf_service",
    "FileService",
    "PDFService",
]
