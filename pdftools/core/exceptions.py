"""Custom exceptions for the application.

Every exception carries the HTTP status code it maps to; the API layer turns
them into error responses without inspecting the message.
"""


class AppError(Exception):
    """Base exception for all application-specific exceptions."""

    status_code: int = 500


class ServiceError(AppError):
    """Raised when a service operation fails due to business logic."""

    status_code = 400


class NotFoundError(ServiceError):
    """Raised when a requested workflow is not found."""

    status_code = 404


class ValidationError(ServiceError):
    """Raised when input validation fails."""

    status_code = 400


class UnsupportedImageTypeError(ValidationError):
    """Raised when an image's declared kind is neither PNG nor JPEG."""

    status_code = 415

    def __init__(self, content_type: str):
        self.content_type = content_type
        super().__init__(f"Unsupported image type: {content_type}")


class DocumentLoadError(ServiceError):
    """Raised when PDF bytes cannot be parsed into a document."""

    status_code = 422


class ImageConversionError(ServiceError):
    """Raised when an image cannot be decoded and embedded."""

    status_code = 422


class ConversionError(AppError):
    """Raised when the output document cannot be serialized."""

    pass
