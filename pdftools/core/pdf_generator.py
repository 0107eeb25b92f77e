"""PDF generation functionality."""

import io
import logging
from datetime import datetime
from typing import Callable, Dict, Optional, Sequence, Tuple, Type, Union

import img2pdf
from pypdf import PdfReader, PdfWriter

from pdftools.core.config import settings
from pdftools.core.exceptions import (
    AppError,
    ConversionError,
    DocumentLoadError,
    ImageConversionError,
    UnsupportedImageTypeError,
)

logger = logging.getLogger(__name__)

# Called with (position, total) before each item of a batch is processed
ProgressCallback = Callable[[int, int], None]

# One image pixel becomes one PDF unit, whatever DPI the file declares
NATIVE_SIZE_LAYOUT = img2pdf.get_fixed_dpi_layout_fun((72, 72))

TEXT_FIELDS = ("title", "author", "subject", "creator", "producer")
DATE_FIELDS = ("creation_date", "modification_date")


def _describe(exc: Exception) -> str:
    return str(exc) or exc.__class__.__name__


class PDFGenerator:
    """Handles PDF generation and manipulation operations."""

    @staticmethod
    def load_document(data: bytes, name: Optional[str] = None) -> PdfReader:
        """
        Parse PDF bytes into a document.

        Args:
            data: Raw PDF bytes
            name: Display name used in error messages

        Returns:
            A reader whose page tree has already been walked

        Raises:
            DocumentLoadError: If the bytes are not a readable, unencrypted PDF
        """
        prefix = f"Failed to load '{name}'" if name else "Failed to load PDF"
        try:
            reader = PdfReader(io.BytesIO(data))
            encrypted = reader.is_encrypted
            if not encrypted:
                # Force the page tree to be resolved now rather than mid-copy
                len(reader.pages)
        except Exception as e:
            raise DocumentLoadError(f"{prefix}: {_describe(e)}") from e

        if encrypted:
            raise DocumentLoadError(
                f"{prefix}: encrypted PDFs are not supported"
            )
        return reader

    @staticmethod
    def _write(writer: PdfWriter) -> bytes:
        buffer = io.BytesIO()
        try:
            writer.write(buffer)
        except Exception as e:
            logger.error("Failed to serialize PDF: %s", e, exc_info=True)
            raise ConversionError(f"Failed to write PDF: {_describe(e)}") from e
        return buffer.getvalue()

    @staticmethod
    def _copy_pages(
        writer: PdfWriter,
        pages,
        error: str,
        error_class: Type[AppError] = DocumentLoadError,
    ) -> None:
        try:
            for page in pages:
                writer.add_page(page)
        except Exception as e:
            logger.error("%s: %s", error, e, exc_info=True)
            raise error_class(f"{error}: {_describe(e)}") from e

    @staticmethod
    def split_pages(document: PdfReader, page_indices: Sequence[int]) -> bytes:
        """
        Copy the selected pages of a document into a new PDF.

        Args:
            document: Loaded source document
            page_indices: Zero-based indices, in output order

        Returns:
            Bytes of the new PDF
        """
        writer = PdfWriter()
        try:
            PDFGenerator._copy_pages(
                writer,
                (document.pages[index] for index in page_indices),
                "Failed to copy pages",
            )
            return PDFGenerator._write(writer)
        finally:
            writer.close()

    @staticmethod
    def merge_documents(
        documents: Sequence[Tuple[str, bytes]],
        progress: Optional[ProgressCallback] = None,
    ) -> Tuple[bytes, int]:
        """
        Concatenate every page of every document, in list order.

        Documents are loaded one at a time. A document that fails to load
        aborts the whole merge; nothing is returned for the ones before it.

        Args:
            documents: ``(name, data)`` pairs in output order
            progress: Optional callback receiving ``(position, total)``

        Returns:
            Tuple of the merged PDF bytes and its page count

        Raises:
            DocumentLoadError: If any input is not a readable PDF
        """
        total = len(documents)
        writer = PdfWriter()
        try:
            for position, (name, data) in enumerate(documents, 1):
                if progress is not None:
                    progress(position, total)
                reader = PDFGenerator.load_document(data, name=name)
                PDFGenerator._copy_pages(
                    writer, reader.pages, f"Failed to copy pages of '{name}'"
                )
                logger.debug(
                    "Added %d page(s) from %s", len(reader.pages), name
                )
            page_count = len(writer.pages)
            return PDFGenerator._write(writer), page_count
        finally:
            writer.close()

    @staticmethod
    def image_to_pdf(data: bytes, name: str = "image") -> bytes:
        """
        Convert one PNG or JPEG image into a single-page PDF.

        The page is exactly as large as the image in pixels and the image
        covers it from the origin, without margins or scaling.

        Raises:
            ImageConversionError: If the image cannot be decoded
        """
        try:
            return img2pdf.convert(
                data,
                layout_fun=NATIVE_SIZE_LAYOUT,
                rotation=img2pdf.Rotation.none,
            )
        except Exception as e:
            raise ImageConversionError(
                f"Failed to convert '{name}': {_describe(e)}"
            ) from e

    @staticmethod
    def images_to_pdf(
        images: Sequence[Tuple[str, str, bytes]],
        progress: Optional[ProgressCallback] = None,
    ) -> Tuple[bytes, int]:
        """
        Build one PDF with a page per image, in list order.

        Args:
            images: ``(name, content_type, data)`` triples
            progress: Optional callback receiving ``(position, total)``

        Returns:
            Tuple of the PDF bytes and its page count

        Raises:
            UnsupportedImageTypeError: If any declared kind is not PNG/JPEG
            ImageConversionError: If any image cannot be decoded
        """
        for _, content_type, _ in images:
            if content_type not in settings.SUPPORTED_IMAGE_TYPES:
                raise UnsupportedImageTypeError(content_type)

        total = len(images)
        writer = PdfWriter()
        try:
            for position, (name, _, data) in enumerate(images, 1):
                if progress is not None:
                    progress(position, total)
                page_pdf = PDFGenerator.image_to_pdf(data, name=name)
                PDFGenerator._copy_pages(
                    writer,
                    PDFGenerator.load_document(page_pdf, name=name).pages,
                    f"Failed to convert '{name}'",
                    ImageConversionError,
                )
            page_count = len(writer.pages)
            return PDFGenerator._write(writer), page_count
        finally:
            writer.close()

    @staticmethod
    def read_metadata(
        document: PdfReader,
    ) -> Dict[str, Union[str, datetime, None]]:
        """
        Read the document information dictionary.

        Returns:
            Mapping of field name to value; ``None`` for every field the
            document does not carry (or carries as an empty/unreadable value)
        """
        info = document.metadata
        fields: Dict[str, Union[str, datetime, None]] = {}

        for field in TEXT_FIELDS:
            value = getattr(info, field, None) if info is not None else None
            fields[field] = str(value) if value else None

        for field in DATE_FIELDS:
            try:
                value = getattr(info, field) if info is not None else None
            except ValueError as e:
                logger.warning("Ignoring unreadable %s: %s", field, e)
                value = None
            fields[field] = value

        return fields
