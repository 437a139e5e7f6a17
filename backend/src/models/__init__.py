"""Pydantic models for data validation and serialization."""

from .library import (
    AGENTS_SOURCE,
    CONTENT_SOURCE,
    FileDetail,
    FileNode,
    FileRecord,
    FileSummary,
    SourceRoot,
    SourceStatus,
)

__all__ = [
    "CONTENT_SOURCE",
    "AGENTS_SOURCE",
    "SourceRoot",
    "FileNode",
    "FileRecord",
    "FileSummary",
    "FileDetail",
    "SourceStatus",
]
