"""HTTP API routes for browsing and reading library files."""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from ...models.library import FileDetail, FileNode, FileSummary, SourceStatus
from ...services.library import LibraryService
from ...services.paths import ancestor_chain

logger = logging.getLogger(__name__)

router = APIRouter()


def get_library_service() -> LibraryService:
    """Build a service bound to the current configuration."""
    return LibraryService()


@router.get("/api/tree", response_model=list[FileNode], response_model_exclude_none=True)
def get_tree(library: LibraryService = Depends(get_library_service)):
    """Combined navigation tree, one group node per non-empty source."""
    return library.combined_tree()


@router.get("/api/files", response_model=list[FileSummary])
def list_files(
    limit: Optional[int] = Query(None, ge=1, description="Maximum number of files"),
    library: LibraryService = Depends(get_library_service),
):
    """List files from every source, most recently modified first."""
    return [
        FileSummary(**record.model_dump(exclude={"content"}))
        for record in library.recent_files(limit=limit)
    ]


@router.get("/api/files/{file_path:path}", response_model=FileDetail)
def get_file(file_path: str, library: LibraryService = Depends(get_library_service)):
    """Resolve a user-facing path such as ``agents/skills/config`` to its document."""
    record = library.get_file(file_path)
    if record is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail={
                "error": "not_found",
                "message": f"Document not found: {file_path}",
                "detail": {"path": file_path},
            },
        )
    return FileDetail(file=record, expanded_paths=ancestor_chain(record.path))


@router.get("/api/sources", response_model=list[SourceStatus])
def list_sources(library: LibraryService = Depends(get_library_service)):
    """Configured source roots and whether each exists."""
    return library.source_status()


__all__ = ["router", "get_library_service"]
