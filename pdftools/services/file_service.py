import logging
from typing import List, Optional

from fastapi import UploadFile

from pdftools.core.config import settings
from pdftools.core.exceptions import ServiceError, ValidationError
from pdftools.models.workflow import SourceFile

logger = logging.getLogger(__name__)

DEFAULT_CONTENT_TYPE = "application/octet-stream"


class FileService:
    def read_upload(self, file: UploadFile) -> SourceFile:
        """Read an uploaded file fully into memory.

        Args:
            file: Uploaded file

        Returns:
            SourceFile: The file's name, declared type and bytes

        Raises:
            ValidationError: If the file is empty or over the upload limit
            ServiceError: If the upload stream cannot be read
        """
        filename = file.filename or "unnamed"
        limit = settings.MAX_UPLOAD_SIZE_BYTES

        try:
            # One byte past the limit is enough to know it was exceeded
            data = file.file.read(limit + 1)
        except OSError as e:
            logger.error(
                "Error reading upload %s: %s", filename, e, exc_info=True
            )
            raise ServiceError(f"Failed to read file '{filename}'") from e

        if len(data) > limit:
            raise ValidationError(
                f"File '{filename}' exceeds the "
                f"{settings.MAX_UPLOAD_SIZE_MB} MB upload limit"
            )
        if not data:
            raise ValidationError(f"File '{filename}' is empty")

        logger.info("Read upload %s (%d bytes)", filename, len(data))
        return SourceFile(
            filename=filename,
            content_type=file.content_type or DEFAULT_CONTENT_TYPE,
            data=data,
        )

    def read_uploads(
        self, files: Optional[List[UploadFile]]
    ) -> List[SourceFile]:
        """Read several uploads, keeping their order."""
        return [self.read_upload(file) for file in files or []]


file_service = FileService()
