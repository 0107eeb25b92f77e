"""Models for per-workflow state.

Nothing here is persisted: a workflow lives in the in-memory repository from
the first file selection until it completes, is deleted, or expires.
"""

import threading
import time
import uuid
from dataclasses import dataclass, field
from typing import Iterator, List, Optional

from pypdf import PdfReader

from pdftools.core.exceptions import ValidationError
from pdftools.schemas.base import StatusMessage
from pdftools.schemas.pdf import Preview


@dataclass(frozen=True)
class SourceFile:
    """A user-selected file read fully into memory.

    Attributes:
        filename: Display name supplied by the client
        content_type: Declared MIME type of the upload
        data: Raw file bytes
    """

    filename: str
    content_type: str
    data: bytes = field(repr=False)

    @property
    def size(self) -> int:
        return len(self.data)


@dataclass(frozen=True)
class OutputDocument:
    """Serialized result of a workflow, ready to hand to the client."""

    filename: str
    data: bytes = field(repr=False)
    page_count: int
    message: str


class PendingFileList:
    """Ordered, editable queue of files awaiting one batch operation.

    Insertion order is output order. Removing an entry shifts every later
    entry down by one position and leaves the rest in place.
    """

    def __init__(self, files: Optional[List[SourceFile]] = None):
        self._files: List[SourceFile] = list(files or [])

    def __len__(self) -> int:
        return len(self._files)

    def __iter__(self) -> Iterator[SourceFile]:
        return iter(list(self._files))

    def __getitem__(self, index: int) -> SourceFile:
        return self._files[index]

    def append(self, source: SourceFile) -> None:
        self._files.append(source)

    def extend(self, sources: List[SourceFile]) -> None:
        self._files.extend(sources)

    def replace(self, sources: List[SourceFile]) -> None:
        self._files = list(sources)

    def remove(self, index: int) -> SourceFile:
        """Remove and return the entry at zero-based ``index``."""
        if not 0 <= index < len(self._files):
            raise ValidationError(
                f"No file at position {index}; "
                f"the list holds {len(self._files)} file(s)"
            )
        return self._files.pop(index)

    def clear(self) -> None:
        self._files.clear()


@dataclass(eq=False)
class Workflow:
    """Common state of every workflow.

    Attributes:
        id: Opaque identifier handed to the client
        status: Latest status line
        created_at: Monotonic creation time
        last_access: Monotonic time of the last read or edit
        lock: Serializes list edits against a running batch
    """

    id: str = field(default_factory=lambda: uuid.uuid4().hex)
    status: Optional[StatusMessage] = None
    created_at: float = field(default_factory=time.monotonic)
    last_access: float = field(default_factory=time.monotonic)
    lock: threading.Lock = field(
        default_factory=threading.Lock, repr=False, compare=False
    )

    def touch(self) -> None:
        self.last_access = time.monotonic()

    def is_expired(self, ttl_seconds: float, now: Optional[float] = None) -> bool:
        if now is None:
            now = time.monotonic()
        return now - self.last_access > ttl_seconds


@dataclass(eq=False)
class SplitWorkflow(Workflow):
    """A single loaded PDF awaiting page extraction."""

    source: Optional[SourceFile] = None
    document: Optional[PdfReader] = field(default=None, repr=False)
    preview: Optional[Preview] = field(default=None, repr=False)

    @property
    def page_count(self) -> int:
        return len(self.document.pages) if self.document is not None else 0


@dataclass(eq=False)
class MergeWorkflow(Workflow):
    """PDFs queued for concatenation."""

    files: PendingFileList = field(default_factory=PendingFileList)


@dataclass(eq=False)
class ImageWorkflow(Workflow):
    """PNG/JPEG images queued for conversion to one PDF."""

    files: PendingFileList = field(default_factory=PendingFileList)
