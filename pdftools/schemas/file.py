from typing import List

from pydantic import BaseModel, ConfigDict


class SourceFileInfo(BaseModel):
    """Schema describing one pending upload, without its bytes."""

    position: int
    filename: str
    content_type: str
    size: int

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "position": 0,
                "filename": "chapter-1.pdf",
                "content_type": "application/pdf",
                "size": 1024,
            }
        },
    )


def describe_files(files) -> List[SourceFileInfo]:
    """Build the public view of a pending file list."""
    return [
        SourceFileInfo(
            position=position,
            filename=source.filename,
            content_type=source.content_type,
            size=source.size,
        )
        for position, source in enumerate(files)
    ]
