"""In-memory models for workflow state."""

from pdftools.models.workflow import (
    ImageWorkflow,
    MergeWorkflow,
    OutputDocument,
    PendingFileList,
    SourceFile,
    SplitWorkflow,
    Workflow,
)

__all__ = [
    "ImageWorkflow",
    "MergeWorkflow",
    "OutputDocument",
    "PendingFileList",
    "SourceFile",
    "SplitWorkflow",
    "Workflow",
]
