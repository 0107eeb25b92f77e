"""Base repository for workflow state.

This module provides a base repository class that keeps workflows in process
memory, keyed by their id, and drops the ones left idle for too long.
"""

import logging
import threading
import time
from typing import Dict, Generic, List, Optional, Type, TypeVar

from pdftools.core.exceptions import NotFoundError
from pdftools.models.workflow import Workflow

logger = logging.getLogger(__name__)

ModelType = TypeVar("ModelType", bound=Workflow)


class BaseRepository(Generic[ModelType]):
    """Base repository class with in-memory CRUD operations.

    Args:
        model: Workflow class stored by this repository
        ttl_seconds: Idle time after which a workflow is discarded
    """

    def __init__(self, model: Type[ModelType], ttl_seconds: float):
        self.model = model
        self.ttl_seconds = ttl_seconds
        self._items: Dict[str, ModelType] = {}
        self._lock = threading.Lock()

    @property
    def label(self) -> str:
        return self.model.__name__.replace("Workflow", "").lower()

    def _purge_expired(self) -> None:
        now = time.monotonic()
        expired = [
            key
            for key, item in self._items.items()
            if item.is_expired(self.ttl_seconds, now)
        ]
        for key in expired:
            logger.info("Discarding idle %s workflow %s", self.label, key)
            del self._items[key]

    def create(self, **kwargs) -> ModelType:
        """Create and store a new workflow."""
        obj = self.model(**kwargs)
        with self._lock:
            self._purge_expired()
            self._items[obj.id] = obj
        logger.info("Created %s workflow %s", self.label, obj.id)
        return obj

    def get(self, id: str) -> Optional[ModelType]:
        """Get a single workflow by ID, refreshing its idle timer."""
        with self._lock:
            self._purge_expired()
            obj = self._items.get(id)
        if obj is not None:
            obj.touch()
        return obj

    def get_or_404(self, id: str) -> ModelType:
        obj = self.get(id)
        if obj is None:
            raise NotFoundError(
                f"{self.label.capitalize()} workflow {id} not found"
            )
        return obj

    def get_multi(self) -> List[ModelType]:
        """Get every live workflow."""
        with self._lock:
            self._purge_expired()
            return list(self._items.values())

    def remove(self, *, id: str) -> Optional[ModelType]:
        """Remove a workflow by ID."""
        with self._lock:
            obj = self._items.pop(id, None)
        if obj is not None:
            logger.info("Removed %s workflow %s", self.label, id)
        return obj
