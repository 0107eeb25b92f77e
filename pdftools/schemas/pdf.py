"""Pydantic schemas for PDF-related operations."""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from pdftools.schemas.base import StatusMessage
from pdftools.schemas.file import SourceFileInfo


class Preview(BaseModel):
    """First-page thumbnail of a PDF.

    Attributes:
        label: Caption such as "Preview - Page 1 of 3"
        page_count: Pages reported by the renderer
        width: Thumbnail width in pixels
        height: Thumbnail height in pixels
        image: PNG data URI
        error: Placeholder text when rendering failed
    """

    label: Optional[str] = None
    page_count: Optional[int] = None
    width: Optional[int] = None
    height: Optional[int] = None
    image: Optional[str] = None
    error: Optional[str] = None


class SplitRequest(BaseModel):
    """Request model for extracting pages.

    Attributes:
        range: Page selection such as "1,3-5,7"
    """

    range: str = ""

    model_config = ConfigDict(
        json_schema_extra={"example": {"range": "1,3-5,7"}}
    )


class SplitWorkflowResponse(BaseModel):
    """State of a split workflow after its PDF was loaded."""

    workflow_id: str
    filename: str
    size: int
    page_count: int
    range_placeholder: str
    preview: Preview
    status: StatusMessage


class MergeWorkflowResponse(BaseModel):
    """Pending files of a merge workflow."""

    workflow_id: str
    files: List[SourceFileInfo]
    status: Optional[StatusMessage] = None


class ImageWorkflowResponse(BaseModel):
    """Selected images of an image-to-PDF workflow."""

    workflow_id: str
    files: List[SourceFileInfo]
    status: Optional[StatusMessage] = None


class DocumentInfo(BaseModel):
    """Metadata report of one PDF.

    Every optional metadata field holds the not-available marker when the
    document does not carry it.
    """

    filename: str
    file_size: int
    file_size_display: str
    page_count: int
    title: str
    author: str
    subject: str
    creator: str
    producer: str
    creation_date: str
    modification_date: str
    preview: Preview
    status: StatusMessage = Field(
        default_factory=lambda: StatusMessage.success("PDF information loaded")
    )
