"""Repositories for the three stateful workflows."""

from pdftools.core.config import settings
from pdftools.models.workflow import ImageWorkflow, MergeWorkflow, SplitWorkflow
from pdftools.repositories.base import BaseRepository


class SplitWorkflowRepository(BaseRepository[SplitWorkflow]):
    def __init__(self, ttl_seconds: float = settings.WORKFLOW_TTL_SECONDS):
        super().__init__(SplitWorkflow, ttl_seconds)


class MergeWorkflowRepository(BaseRepository[MergeWorkflow]):
    def __init__(self, ttl_seconds: float = settings.WORKFLOW_TTL_SECONDS):
        super().__init__(MergeWorkflow, ttl_seconds)


class ImageWorkflowRepository(BaseRepository[ImageWorkflow]):
    def __init__(self, ttl_seconds: float = settings.WORKFLOW_TTL_SECONDS):
        super().__init__(ImageWorkflow, ttl_seconds)
