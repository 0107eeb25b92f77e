from typing import List

from fastapi import APIRouter, Depends, File, Response, UploadFile, status

from pdftools.api import deps
from pdftools.schemas.pdf import MergeWorkflowResponse
from pdftools.services.file_service import FileService
from pdftools.services.pdf_service import PDFService

router = APIRouter()


@router.post(
    "/",
    response_model=MergeWorkflowResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"description": "Bad Request - No files selected"}},
)
def start_merge(
    files: List[UploadFile] = File(...),
    pdf_service: PDFService = Depends(deps.get_pdf_service),
    file_service: FileService = Depends(deps.get_file_service),
):
    """Start a merge with the first selection of PDFs."""
    return pdf_service.start_merge(file_service.read_uploads(files))


@router.get(
    "/{workflow_id}",
    response_model=MergeWorkflowResponse,
    responses={404: {"description": "Not Found - Workflow not found"}},
)
def get_merge(
    workflow_id: str,
    pdf_service: PDFService = Depends(deps.get_pdf_service),
):
    """List the PDFs waiting to be merged, in merge order."""
    return pdf_service.get_merge(workflow_id)


@router.post(
    "/{workflow_id}/files",
    response_model=MergeWorkflowResponse,
    responses={404: {"description": "Not Found - Workflow not found"}},
)
def add_merge_files(
    workflow_id: str,
    files: List[UploadFile] = File(...),
    pdf_service: PDFService = Depends(deps.get_pdf_service),
    file_service: FileService = Depends(deps.get_file_service),
):
    """Append PDFs to the end of the merge list."""
    return pdf_service.add_merge_files(
        workflow_id, file_service.read_uploads(files)
    )


@router.delete(
    "/{workflow_id}/files/{index}",
    response_model=MergeWorkflowResponse,
    responses={
        400: {"description": "Bad Request - No file at that position"},
        404: {"description": "Not Found - Workflow not found"},
    },
)
def remove_merge_file(
    workflow_id: str,
    index: int,
    pdf_service: PDFService = Depends(deps.get_pdf_service),
):
    """Remove the PDF at zero-based position ``index``."""
    return pdf_service.remove_merge_file(workflow_id, index)


@router.post(
    "/{workflow_id}/merge",
    response_class=Response,
    responses={
        200: {
            "description": "Merged PDF",
            "content": {"application/pdf": {}},
        },
        400: {"description": "Bad Request - Nothing to merge"},
        404: {"description": "Not Found - Workflow not found"},
        422: {"description": "Unprocessable - A file is not a readable PDF"},
    },
)
def merge_pdfs(
    workflow_id: str,
    pdf_service: PDFService = Depends(deps.get_pdf_service),
):
    """
    Merge the listed PDFs into a single file.

    Pages keep their order within each file and files keep their list order.
    If any file cannot be read nothing is produced and the list is kept.
    """
    return deps.pdf_download(pdf_service.merge_pdfs(workflow_id))


@router.delete(
    "/{workflow_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={404: {"description": "Not Found - Workflow not found"}},
)
def discard_merge(
    workflow_id: str,
    pdf_service: PDFService = Depends(deps.get_pdf_service),
):
    pdf_service.discard(pdf_service.merge_repository, workflow_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
