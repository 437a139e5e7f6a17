"""File library models: source roots, tree nodes and flat file records."""

from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import Any, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

CONTENT_SOURCE = "content"
AGENTS_SOURCE = "agents"

NodeKind = Literal["file", "directory"]


class SourceRoot(BaseModel):
    """One independently rooted directory merged into the library namespace."""

    model_config = ConfigDict(frozen=True)

    source_id: str = Field(..., min_length=1, pattern=r"^[^/]+$")
    directory: Path
    label: str = Field(default="", description="Group node name; defaults to the capitalised id")

    @model_validator(mode="before")
    @classmethod
    def _default_label(cls, data: Any) -> Any:
        if isinstance(data, dict) and not data.get("label"):
            data = {**data, "label": str(data.get("source_id") or "").capitalize()}
        return data


class FileNode(BaseModel):
    """Node of the navigation tree."""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "welcome.md",
                "path": "content/notes/welcome",
                "kind": "file",
                "last_modified": "2025-01-15T14:30:00Z",
                "source": "content",
            }
        }
    )

    name: str
    path: str
    kind: NodeKind
    children: Optional[List[FileNode]] = None
    last_modified: Optional[datetime] = None
    source: Optional[str] = None


class FileRecord(BaseModel):
    """A single document with its text and derived metadata."""

    slug: str = Field(..., description="Path relative to its source root, extension stripped")
    path: str = Field(..., description="User-facing path, usually '<source>/<slug>'")
    title: str
    content: str
    last_modified: datetime
    source: str
    file_name: Optional[str] = Field(None, description="Base name including extension")


class FileSummary(BaseModel):
    """Lightweight representation used for listings."""

    slug: str
    path: str
    title: str
    last_modified: datetime
    source: str
    file_name: Optional[str] = None


class FileDetail(BaseModel):
    """A resolved document plus the tree paths leading to it."""

    file: FileRecord
    expanded_paths: List[str] = Field(default_factory=list)


class SourceStatus(BaseModel):
    """Configured source root and whether it currently exists on disk."""

    source_id: str
    label: str
    directory: str
    exists: bool


FileNode.model_rebuild()

__all__ = [
    "CONTENT_SOURCE",
    "AGENTS_SOURCE",
    "NodeKind",
    "SourceRoot",
    "FileNode",
    "FileRecord",
    "FileSummary",
    "FileDetail",
    "SourceStatus",
]
