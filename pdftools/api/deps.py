"""Dependencies for API endpoints."""

from urllib.parse import quote

from fastapi import Response

from pdftools.models.workflow import OutputDocument
from pdftools.services import file_service, pdf_service
from pdftools.services.file_service import FileService
from pdftools.services.pdf_service import PDFService


def get_pdf_service() -> PDFService:
    """Return the service that owns the workflow repositories."""
    return pdf_service


def get_file_service() -> FileService:
    return file_service


def content_disposition(filename: str) -> str:
    """Attachment header value, RFC 5987 encoded when not plain ASCII."""
    quoted = quote(filename)
    if quoted != filename:
        return f"attachment; filename*=utf-8''{quoted}"
    return f'attachment; filename="{filename}"'


def pdf_download(output: OutputDocument) -> Response:
    """
    Build the download response for a finished workflow.

    Args:
        output: The serialized PDF and its success message

    Returns:
        Response: ``application/pdf`` attachment with page count and status
        headers
    """
    return Response(
        content=output.data,
        media_type="application/pdf",
        headers={
            "Content-Disposition": content_disposition(output.filename),
            "X-Page-Count": str(output.page_count),
            "X-Status-Message": output.message,
        },
    )
