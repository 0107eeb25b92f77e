"""Tests for the in-memory workflow models."""

import pytest

from pdftools.core.exceptions import ValidationError
from pdftools.models.workflow import (
    MergeWorkflow,
    PendingFileList,
    SourceFile,
    SplitWorkflow,
)


def source(name: str) -> SourceFile:
    return SourceFile(filename=name, content_type="application/pdf", data=b"x" * 3)


@pytest.fixture
def pending() -> PendingFileList:
    return PendingFileList([source("a.pdf"), source("b.pdf"), source("c.pdf")])


class TestPendingFileList:
    def test_preserves_insertion_order(self, pending):
        pending.append(source("d.pdf"))
        pending.extend([source("e.pdf"), source("f.pdf")])

        assert [f.filename for f in pending] == [
            "a.pdf", "b.pdf", "c.pdf", "d.pdf", "e.pdf", "f.pdf",
        ]

    def test_remove_shifts_later_entries_down(self, pending):
        removed = pending.remove(1)

        assert removed.filename == "b.pdf"
        assert len(pending) == 2
        assert pending[0].filename == "a.pdf"
        assert pending[1].filename == "c.pdf"

    def test_remove_first_and_last(self, pending):
        pending.remove(2)
        pending.remove(0)

        assert [f.filename for f in pending] == ["b.pdf"]

    @pytest.mark.parametrize("index", [-1, 3, 100])
    def test_remove_out_of_range_leaves_list_untouched(self, pending, index):
        with pytest.raises(ValidationError, match=f"No file at position {index}"):
            pending.remove(index)

        assert [f.filename for f in pending] == ["a.pdf", "b.pdf", "c.pdf"]

    def test_replace_and_clear(self, pending):
        pending.replace([source("z.pdf")])
        assert [f.filename for f in pending] == ["z.pdf"]

        pending.clear()
        assert len(pending) == 0

    def test_iteration_is_a_snapshot(self, pending):
        names = []
        for item in pending:
            names.append(item.filename)
            pending.clear()

        assert names == ["a.pdf", "b.pdf", "c.pdf"]


def test_source_file_size():
    assert source("a.pdf").size == 3


def test_workflow_ids_are_unique():
    assert MergeWorkflow().id != MergeWorkflow().id


def test_workflow_expiry():
    workflow = MergeWorkflow()
    workflow.last_access -= 100

    assert workflow.is_expired(60)
    workflow.touch()
    assert not workflow.is_expired(60)


def test_split_workflow_without_document_has_no_pages():
    assert SplitWorkflow().page_count == 0
