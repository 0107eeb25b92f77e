"""Base schemas with common functionality."""

from enum import Enum

from pydantic import BaseModel


class StatusLevel(str, Enum):
    """Severity of a workflow status line."""

    INFO = "info"
    SUCCESS = "success"
    ERROR = "error"


class StatusMessage(BaseModel):
    """Single human-readable status line of a workflow.

    Attributes:
        level: Severity (informational/in-progress, success or error)
        message: Text shown to the user
    """

    level: StatusLevel
    message: str

    @classmethod
    def info(cls, message: str) -> "StatusMessage":
        return cls(level=StatusLevel.INFO, message=message)

    @classmethod
    def success(cls, message: str) -> "StatusMessage":
        return cls(level=StatusLevel.SUCCESS, message=message)

    @classmethod
    def error(cls, message: str) -> "StatusMessage":
        return cls(level=StatusLevel.ERROR, message=f"Error: {message}")
