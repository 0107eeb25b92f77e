"""
PDF processing service.

This module contains the business logic of the four workflows (split, merge,
image conversion and document info), separated from the HTTP endpoints.
"""

import logging
from contextlib import contextmanager
from datetime import datetime
from typing import Iterator, List, Optional, Union

from pdftools.core.config import settings
from pdftools.core.exceptions import AppError, ValidationError
from pdftools.core.page_range import parse_page_range
from pdftools.core.pdf_generator import PDFGenerator
from pdftools.core.preview import render_preview
from pdftools.models.workflow import (
    ImageWorkflow,
    MergeWorkflow,
    OutputDocument,
    PendingFileList,
    SourceFile,
    SplitWorkflow,
    Workflow,
)
from pdftools.repositories.base import BaseRepository
from pdftools.repositories.workflow_repository import (
    ImageWorkflowRepository,
    MergeWorkflowRepository,
    SplitWorkflowRepository,
)
from pdftools.schemas.base import StatusMessage
from pdftools.schemas.file import describe_files
from pdftools.schemas.pdf import (
    DocumentInfo,
    ImageWorkflowResponse,
    MergeWorkflowResponse,
    SplitWorkflowResponse,
)

logger = logging.getLogger(__name__)

MERGED_FILENAME = "merged-document.pdf"
CONVERTED_FILENAME = "converted-images.pdf"


def split_filename(range_text: str) -> str:
    """Name of a split download, embedding the range the user typed."""
    return f"split-pages-{range_text.replace(',', '_')}.pdf"


def format_file_size(size: int) -> str:
    return f"{size / 1024:.2f} KB"


class PDFService:
    """Service for handling PDF-related operations."""

    def __init__(
        self,
        split_repository: Optional[SplitWorkflowRepository] = None,
        merge_repository: Optional[MergeWorkflowRepository] = None,
        image_repository: Optional[ImageWorkflowRepository] = None,
    ):
        """Initialize PDF service with one repository per workflow kind."""
        self.split_repository = split_repository or SplitWorkflowRepository()
        self.merge_repository = merge_repository or MergeWorkflowRepository()
        self.image_repository = image_repository or ImageWorkflowRepository()

    @contextmanager
    def _running(self, workflow: Workflow, operation: str) -> Iterator[None]:
        """Hold the workflow lock and record failures on its status line."""
        with workflow.lock:
            try:
                yield
            except AppError as e:
                workflow.status = StatusMessage.error(str(e))
                logger.warning(
                    "%s failed for workflow %s: %s", operation, workflow.id, e
                )
                raise

    @staticmethod
    def _progress(workflow: Workflow, noun: str):
        def report(position: int, total: int) -> None:
            message = f"Processing {noun} {position} of {total}..."
            workflow.status = StatusMessage.info(message)
            logger.info("Workflow %s: %s", workflow.id, message)

        return report

    def discard(self, repository: BaseRepository, workflow_id: str) -> None:
        """Drop a workflow and everything it holds."""
        repository.get_or_404(workflow_id)
        repository.remove(id=workflow_id)

    # Split

    def _split_response(self, workflow: SplitWorkflow) -> SplitWorkflowResponse:
        page_count = workflow.page_count
        return SplitWorkflowResponse(
            workflow_id=workflow.id,
            filename=workflow.source.filename,
            size=workflow.source.size,
            page_count=page_count,
            range_placeholder=f"e.g., 1-{page_count} or 1,3,5",
            preview=workflow.preview,
            status=workflow.status,
        )

    def start_split(self, source: SourceFile) -> SplitWorkflowResponse:
        """
        Load a PDF for page extraction.

        Args:
            source: The uploaded PDF

        Returns:
            SplitWorkflowResponse: Page count, preview and workflow id

        Raises:
            DocumentLoadError: If the file is not a readable PDF; no workflow
                is created in that case
        """
        logger.info("Loading %s for splitting", source.filename)
        document = PDFGenerator.load_document(source.data, name=source.filename)
        preview = render_preview(source.data)

        page_count = len(document.pages)
        workflow = self.split_repository.create(
            source=source,
            document=document,
            preview=preview,
            status=StatusMessage.success(
                f"PDF loaded successfully. Total pages: {page_count}"
            ),
        )
        return self._split_response(workflow)

    def get_split(self, workflow_id: str) -> SplitWorkflowResponse:
        return self._split_response(
            self.split_repository.get_or_404(workflow_id)
        )

    def extract_pages(self, workflow_id: str, range_text: str) -> OutputDocument:
        """
        Extract the selected pages of a loaded PDF into a new document.

        Args:
            workflow_id: ID of the split workflow
            range_text: Selection such as "1,3-5,7"

        Returns:
            OutputDocument: The new PDF, named after the selection

        Raises:
            NotFoundError: If the workflow does not exist
            ValidationError: If the selection is empty or selects no page
        """
        workflow = self.split_repository.get_or_404(workflow_id)

        with self._running(workflow, "Split"):
            range_text = (range_text or "").strip()
            if not range_text:
                raise ValidationError("Please enter page numbers to extract")

            page_indices = parse_page_range(range_text, workflow.page_count)
            if not page_indices:
                raise ValidationError("No valid pages found in range")

            workflow.status = StatusMessage.info("Splitting PDF...")
            logger.info(
                "Extracting pages %s from %s",
                page_indices,
                workflow.source.filename,
            )
            data = PDFGenerator.split_pages(workflow.document, page_indices)

            message = f"Successfully extracted {len(page_indices)} page(s)!"
            workflow.status = StatusMessage.success(message)

        return OutputDocument(
            filename=split_filename(range_text),
            data=data,
            page_count=len(page_indices),
            message=message,
        )

    # Merge

    @staticmethod
    def _merge_status(files: PendingFileList) -> Optional[StatusMessage]:
        if not files:
            return None
        return StatusMessage.info(f"{len(files)} file(s) ready to merge")

    def _merge_response(self, workflow: MergeWorkflow) -> MergeWorkflowResponse:
        return MergeWorkflowResponse(
            workflow_id=workflow.id,
            files=describe_files(workflow.files),
            status=workflow.status,
        )

    def start_merge(self, sources: List[SourceFile]) -> MergeWorkflowResponse:
        """Create a merge workflow from the first selection of PDFs."""
        if not sources:
            raise ValidationError("No files selected")

        files = PendingFileList(sources)
        workflow = self.merge_repository.create(
            files=files, status=self._merge_status(files)
        )
        return self._merge_response(workflow)

    def get_merge(self, workflow_id: str) -> MergeWorkflowResponse:
        return self._merge_response(
            self.merge_repository.get_or_404(workflow_id)
        )

    def add_merge_files(
        self, workflow_id: str, sources: List[SourceFile]
    ) -> MergeWorkflowResponse:
        """Append PDFs to the end of the pending list."""
        workflow = self.merge_repository.get_or_404(workflow_id)
        with self._running(workflow, "Add files"):
            workflow.files.extend(sources)
            workflow.status = self._merge_status(workflow.files)
        return self._merge_response(workflow)

    def remove_merge_file(
        self, workflow_id: str, index: int
    ) -> MergeWorkflowResponse:
        """Remove the pending PDF at zero-based ``index``."""
        workflow = self.merge_repository.get_or_404(workflow_id)
        with self._running(workflow, "Remove file"):
            removed = workflow.files.remove(index)
            logger.info(
                "Removed %s from merge workflow %s", removed.filename, workflow.id
            )
            workflow.status = self._merge_status(workflow.files)
        return self._merge_response(workflow)

    def merge_pdfs(self, workflow_id: str) -> OutputDocument:
        """
        Merge every pending PDF, in list order, into one document.

        All or nothing: if one file cannot be loaded no output is produced
        and the pending list is left as it was. On success the workflow is
        discarded.

        Raises:
            NotFoundError: If the workflow does not exist
            ValidationError: If the pending list is empty
            DocumentLoadError: If any pending file is not a readable PDF
        """
        workflow = self.merge_repository.get_or_404(workflow_id)

        with self._running(workflow, "Merge"):
            files = list(workflow.files)
            if not files:
                raise ValidationError("No PDF files to merge")

            workflow.status = StatusMessage.info("Merging PDFs...")
            logger.info(
                "Merging %s in workflow %s",
                [source.filename for source in files],
                workflow.id,
            )
            data, page_count = PDFGenerator.merge_documents(
                [(source.filename, source.data) for source in files],
                progress=self._progress(workflow, "file"),
            )

            message = f"Successfully merged {len(files)} PDFs!"
            workflow.status = StatusMessage.success(message)
            workflow.files.clear()

        self.merge_repository.remove(id=workflow.id)
        return OutputDocument(
            filename=MERGED_FILENAME,
            data=data,
            page_count=page_count,
            message=message,
        )

    # Image to PDF

    @staticmethod
    def _image_status(files: PendingFileList) -> Optional[StatusMessage]:
        if not files:
            return None
        return StatusMessage.info(f"{len(files)} image(s) selected")

    def _image_response(self, workflow: ImageWorkflow) -> ImageWorkflowResponse:
        return ImageWorkflowResponse(
            workflow_id=workflow.id,
            files=describe_files(workflow.files),
            status=workflow.status,
        )

    def start_image_conversion(
        self, sources: List[SourceFile]
    ) -> ImageWorkflowResponse:
        """Create an image workflow from the first selection of images."""
        if not sources:
            raise ValidationError("No images selected")

        files = PendingFileList(sources)
        workflow = self.image_repository.create(
            files=files, status=self._image_status(files)
        )
        return self._image_response(workflow)

    def get_image_conversion(self, workflow_id: str) -> ImageWorkflowResponse:
        return self._image_response(
            self.image_repository.get_or_404(workflow_id)
        )

    def replace_images(
        self, workflow_id: str, sources: List[SourceFile]
    ) -> ImageWorkflowResponse:
        """Replace the selected images with a new selection."""
        workflow = self.image_repository.get_or_404(workflow_id)
        with self._running(workflow, "Select images"):
            if not sources:
                raise ValidationError("No images selected")
            workflow.files.replace(sources)
            workflow.status = self._image_status(workflow.files)
        return self._image_response(workflow)

    def convert_images(self, workflow_id: str) -> OutputDocument:
        """
        Convert every selected image into one page of a new PDF.

        Raises:
            NotFoundError: If the workflow does not exist
            ValidationError: If no image is selected
            UnsupportedImageTypeError: If any image is neither PNG nor JPEG
            ImageConversionError: If any image cannot be decoded
        """
        workflow = self.image_repository.get_or_404(workflow_id)

        with self._running(workflow, "Image conversion"):
            files = list(workflow.files)
            if not files:
                raise ValidationError("No images to convert")

            workflow.status = StatusMessage.info("Converting images to PDF...")
            data, page_count = PDFGenerator.images_to_pdf(
                [
                    (source.filename, source.content_type, source.data)
                    for source in files
                ],
                progress=self._progress(workflow, "image"),
            )

            message = f"Successfully converted {len(files)} image(s) to PDF!"
            workflow.status = StatusMessage.success(message)
            workflow.files.clear()

        self.image_repository.remove(id=workflow.id)
        return OutputDocument(
            filename=CONVERTED_FILENAME,
            data=data,
            page_count=page_count,
            message=message,
        )

    # Info

    def describe_document(self, source: SourceFile) -> DocumentInfo:
        """
        Report page count and metadata of a PDF.

        Raises:
            DocumentLoadError: If the file is not a readable PDF
        """
        logger.info("Reading information of %s", source.filename)
        document = PDFGenerator.load_document(source.data, name=source.filename)
        metadata = PDFGenerator.read_metadata(document)
        marker = settings.NOT_AVAILABLE_MARKER

        def show(value: Union[str, datetime, None]) -> str:
            if value is None:
                return marker
            if isinstance(value, datetime):
                return value.isoformat()
            return value

        return DocumentInfo(
            filename=source.filename,
            file_size=source.size,
            file_size_display=format_file_size(source.size),
            page_count=len(document.pages),
            preview=render_preview(source.data),
            **{field: show(value) for field, value in metadata.items()},
        )
