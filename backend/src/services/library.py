"""Merged view over the configured source roots: combined tree, recent files, lookup."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

from ..models.library import CONTENT_SOURCE, FileNode, FileRecord, SourceRoot, SourceStatus
from .config import AppConfig, get_config
from .paths import SUPPORTED_EXTENSIONS
from .walker import build_tree, list_records, read_record

logger = logging.getLogger(__name__)


def build_combined_tree(roots: Sequence[SourceRoot]) -> List[FileNode]:
    """Walk every root and wrap each non-empty result in a group node, in root order."""
    tree: List[FileNode] = []
    for root in roots:
        children = build_tree(root.directory, source=root.source_id, base_path=root.source_id)
        if not children:
            continue
        tree.append(
            FileNode(
                name=root.label,
                path=root.source_id,
                kind="directory",
                children=children,
                source=root.source_id,
            )
        )
    return tree


def get_all_records(roots: Sequence[SourceRoot]) -> List[FileRecord]:
    """Every file from every root, most recently modified first."""
    records: List[FileRecord] = []
    for root in roots:
        records.extend(list_records(root.directory, root.source_id))
    # sorted() is stable, so equal timestamps keep traversal order.
    return sorted(records, key=lambda record: record.last_modified, reverse=True)


def _find_root(roots: Sequence[SourceRoot], source_id: str) -> Optional[SourceRoot]:
    for root in roots:
        if root.source_id == source_id:
            return root
    return None


def _split_source(
    user_path: str, roots: Sequence[SourceRoot], default: Optional[SourceRoot]
) -> Tuple[Optional[SourceRoot], str]:
    for root in roots:
        prefix = f"{root.source_id}/"
        if user_path.startswith(prefix):
            return root, user_path[len(prefix) :]
    return default, user_path


def _probe(directory: Path, relative: str) -> Optional[Path]:
    """Return the first ``<relative><ext>`` file inside ``directory``, in extension order.

    Containment is checked on the normalised path, not the symlink target, so
    files linked into a root resolve the same way the walker lists them.
    """
    if not relative:
        return None
    base = Path(os.path.normpath(directory.absolute()))
    for extension in SUPPORTED_EXTENSIONS:
        candidate = Path(os.path.normpath(base / f"{relative}{extension}"))
        if not candidate.is_relative_to(base):
            logger.warning("Refusing path outside source root: %s", relative)
            return None
        try:
            if candidate.is_file():
                return candidate
        except OSError:
            # e.g. ENAMETOOLONG, which pathlib does not swallow on older Pythons
            continue
    return None


def _read(candidate: Path, *, slug: str, path: str, source: str) -> Optional[FileRecord]:
    try:
        return read_record(candidate, slug=slug, path=path, source=source)
    except OSError as exc:
        logger.warning("Failed to read %s: %s", candidate, exc)
        return None


def resolve_file(
    user_path: str,
    roots: Sequence[SourceRoot],
    default_source: str = CONTENT_SOURCE,
) -> Optional[FileRecord]:
    """
    Find the file a user-facing path denotes.

    A leading ``<source>/`` selects that root; anything else is looked up in
    ``default_source``. Extensions are tried in declaration order and the
    first hit wins. When nothing matches, the unmodified ``user_path`` is
    retried against the content root. Returns None when no file exists.
    """
    user_path = (user_path or "").strip().strip("/")
    if not user_path:
        return None

    default_root = _find_root(roots, default_source)
    selected, relative = _split_source(user_path, roots, default_root)

    if selected is not None:
        candidate = _probe(selected.directory, relative)
        if candidate is not None:
            return _read(candidate, slug=relative, path=user_path, source=selected.source_id)

    content_root = _find_root(roots, CONTENT_SOURCE)
    if content_root is None:
        return None
    # Skip the retry when it would repeat the lookup above.
    if selected is content_root and relative == user_path:
        return None
    candidate = _probe(content_root.directory, user_path)
    if candidate is not None:
        logger.debug("Resolved %s via fallback to %s", user_path, content_root.source_id)
        return _read(candidate, slug=user_path, path=user_path, source=content_root.source_id)
    return None


class LibraryService:
    """Read-only access to the configured source roots."""

    def __init__(self, config: AppConfig | None = None) -> None:
        self.config = config or get_config()
        self.roots = self.config.source_roots()

    def combined_tree(self) -> List[FileNode]:
        return build_combined_tree(self.roots)

    def recent_files(self, limit: int | None = None) -> List[FileRecord]:
        records = get_all_records(self.roots)
        if limit is not None:
            return records[:limit]
        return records

    def get_file(self, user_path: str) -> Optional[FileRecord]:
        record = resolve_file(user_path, self.roots, default_source=self.config.default_source)
        if record is None:
            logger.info("Document not found: %s", user_path)
        return record

    def source_status(self) -> List[SourceStatus]:
        return [
            SourceStatus(
                source_id=root.source_id,
                label=root.label,
                directory=str(root.directory),
                exists=root.directory.is_dir(),
            )
            for root in self.roots
        ]


__all__ = [
    "LibraryService",
    "build_combined_tree",
    "get_all_records",
    "resolve_file",
]
