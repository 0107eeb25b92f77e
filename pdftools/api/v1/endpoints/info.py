from fastapi import APIRouter, Depends, File, UploadFile

from pdftools.api import deps
from pdftools.schemas.pdf import DocumentInfo
from pdftools.services.file_service import FileService
from pdftools.services.pdf_service import PDFService

router = APIRouter()


@router.post(
    "/",
    response_model=DocumentInfo,
    responses={
        400: {"description": "Bad Request - Empty or oversized file"},
        422: {"description": "Unprocessable - File is not a readable PDF"},
    },
)
def document_info(
    file: UploadFile = File(...),
    pdf_service: PDFService = Depends(deps.get_pdf_service),
    file_service: FileService = Depends(deps.get_file_service),
):
    """
    Report page count, metadata and a first-page preview of a PDF.

    Metadata the document does not carry is reported as "N/A".
    """
    return pdf_service.describe_document(file_service.read_upload(file))
