from fastapi import APIRouter, Depends, File, Response, UploadFile, status

from pdftools.api import deps
from pdftools.schemas.pdf import SplitRequest, SplitWorkflowResponse
from pdftools.services.file_service import FileService
from pdftools.services.pdf_service import PDFService

router = APIRouter()


@router.post(
    "/",
    response_model=SplitWorkflowResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"description": "Bad Request - Empty or oversized file"},
        422: {"description": "Unprocessable - File is not a readable PDF"},
    },
)
def start_split(
    file: UploadFile = File(...),
    pdf_service: PDFService = Depends(deps.get_pdf_service),
    file_service: FileService = Depends(deps.get_file_service),
):
    """
    Load a PDF for page extraction.

    Returns the page count, a first-page preview and the id of the split
    workflow to use for extraction.
    """
    return pdf_service.start_split(file_service.read_upload(file))


@router.get(
    "/{workflow_id}",
    response_model=SplitWorkflowResponse,
    responses={404: {"description": "Not Found - Workflow not found"}},
)
def get_split(
    workflow_id: str,
    pdf_service: PDFService = Depends(deps.get_pdf_service),
):
    """Return the loaded PDF's page count, preview and latest status."""
    return pdf_service.get_split(workflow_id)


@router.post(
    "/{workflow_id}/extract",
    response_class=Response,
    responses={
        200: {
            "description": "PDF with the selected pages",
            "content": {"application/pdf": {}},
        },
        400: {"description": "Bad Request - Empty range or no valid pages"},
        404: {"description": "Not Found - Workflow not found"},
    },
)
def extract_pages(
    workflow_id: str,
    request: SplitRequest,
    pdf_service: PDFService = Depends(deps.get_pdf_service),
):
    """
    Extract pages such as "1,3-5,7" from the loaded PDF.

    Page numbers are one-based; segments that are malformed or outside the
    document are ignored. The same workflow can be used for further
    extractions.
    """
    output = pdf_service.extract_pages(workflow_id, request.range)
    return deps.pdf_download(output)


@router.delete(
    "/{workflow_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={404: {"description": "Not Found - Workflow not found"}},
)
def discard_split(
    workflow_id: str,
    pdf_service: PDFService = Depends(deps.get_pdf_service),
):
    """Forget the loaded PDF."""
    pdf_service.discard(pdf_service.split_repository, workflow_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
