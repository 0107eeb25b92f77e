"""Repository package for workflow state."""

from pdftools.repositories.base import BaseRepository
from pdftools.repositories.workflow_repository import (
    ImageWorkflowRepository,
    MergeWorkflowRepository,
    SplitWorkflowRepository,
)

__all__ = [
    "BaseRepository",
    "ImageWorkflowRepository",
    "MergeWorkflowRepository",
    "SplitWorkflowRepository",
]
