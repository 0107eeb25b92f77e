from typing import List

from fastapi import APIRouter, Depends, File, Response, UploadFile, status

from pdftools.api import deps
from pdftools.schemas.pdf import ImageWorkflowResponse
from pdftools.services.file_service import FileService
from pdftools.services.pdf_service import PDFService

router = APIRouter()


@router.post(
    "/",
    response_model=ImageWorkflowResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"description": "Bad Request - No images selected"}},
)
def start_image_conversion(
    files: List[UploadFile] = File(...),
    pdf_service: PDFService = Depends(deps.get_pdf_service),
    file_service: FileService = Depends(deps.get_file_service),
):
    """Select PNG or JPEG images to convert into one PDF."""
    return pdf_service.start_image_conversion(
        file_service.read_uploads(files)
    )


@router.get(
    "/{workflow_id}",
    response_model=ImageWorkflowResponse,
    responses={404: {"description": "Not Found - Workflow not found"}},
)
def get_image_conversion(
    workflow_id: str,
    pdf_service: PDFService = Depends(deps.get_pdf_service),
):
    return pdf_service.get_image_conversion(workflow_id)


@router.put(
    "/{workflow_id}/files",
    response_model=ImageWorkflowResponse,
    responses={404: {"description": "Not Found - Workflow not found"}},
)
def replace_images(
    workflow_id: str,
    files: List[UploadFile] = File(...),
    pdf_service: PDFService = Depends(deps.get_pdf_service),
    file_service: FileService = Depends(deps.get_file_service),
):
    """Replace the current selection with new images."""
    return pdf_service.replace_images(
        workflow_id, file_service.read_uploads(files)
    )


@router.post(
    "/{workflow_id}/convert",
    response_class=Response,
    responses={
        200: {
            "description": "PDF with one page per image",
            "content": {"application/pdf": {}},
        },
        404: {"description": "Not Found - Workflow not found"},
        415: {"description": "Unsupported Media Type - Not PNG or JPEG"},
        422: {"description": "Unprocessable - An image cannot be decoded"},
    },
)
def convert_images(
    workflow_id: str,
    pdf_service: PDFService = Depends(deps.get_pdf_service),
):
    """
    Convert the selected images into a PDF.

    Each page has the pixel size of its image and the image fills it. One
    unsupported or unreadable image fails the whole batch.
    """
    return deps.pdf_download(pdf_service.convert_images(workflow_id))


@router.delete(
    "/{workflow_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={404: {"description": "Not Found - Workflow not found"}},
)
def discard_image_conversion(
    workflow_id: str,
    pdf_service: PDFService = Depends(deps.get_pdf_service),
):
    pdf_service.discard(pdf_service.image_repository, workflow_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
