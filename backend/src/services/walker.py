"""Recursive directory traversal producing navigation trees or flat file records."""

from __future__ import annotations

from datetime import datetime, timezone
import logging
import os
from pathlib import Path
from typing import Callable, List, Optional, Tuple, TypeVar

from ..models.library import FileNode, FileRecord
from .paths import is_supported_file, join_slug, strip_extension
from .titles import title_from_text

logger = logging.getLogger(__name__)

T = TypeVar("T")

# (absolute file path, path relative to the root) -> item, or None to skip
FileVisitor = Callable[[Path, str], Optional[T]]
# (directory name, path relative to the root, non-empty children) -> items to emit
DirectoryVisitor = Callable[[str, str, List[T]], List[T]]


def _sort_key(name: str) -> Tuple[str, str]:
    return name.lower(), name


def _mtime(path: Path) -> Optional[datetime]:
    try:
        return datetime.fromtimestamp(path.stat().st_mtime, tz=timezone.utc)
    except OSError:
        return None


def _scan(directory: Path) -> Tuple[List[str], List[str]]:
    """Split ``directory`` into sorted subdirectory names and supported file names."""
    subdirs: List[str] = []
    files: List[str] = []
    try:
        with os.scandir(directory) as entries:
            for entry in entries:
                try:
                    if entry.is_dir(follow_symlinks=False):
                        subdirs.append(entry.name)
                    elif (
                        entry.is_file()
                        and is_supported_file(entry.name)
                        and strip_extension(entry.name) != entry.name
                    ):
                        # a bare ".md" has no slug to address it by
                        files.append(entry.name)
                except OSError:
                    continue
    except OSError as exc:
        logger.warning("Cannot list directory %s: %s", directory, exc)
        return [], []
    return sorted(subdirs, key=_sort_key), sorted(files, key=_sort_key)


def walk(
    root: Path,
    on_file: FileVisitor,
    on_directory: DirectoryVisitor,
    relative_path: str = "",
) -> List[T]:
    """
    Walk ``root`` depth-first, directories before files, each group by name.

    ``on_file`` turns each supported file into an item. ``on_directory``
    receives the items collected beneath a subdirectory and returns what the
    parent should emit in its place. Subdirectories with no supported files
    anywhere beneath them are never passed to ``on_directory``.

    A missing root yields an empty list.
    """
    directory = root / relative_path if relative_path else root
    if not directory.is_dir():
        if not relative_path:
            logger.debug("Source root %s does not exist", root)
        return []

    subdirs, files = _scan(directory)
    items: List[T] = []
    for name in subdirs:
        child_path = join_slug(relative_path, name)
        children = walk(root, on_file, on_directory, child_path)
        if children:
            items.extend(on_directory(name, child_path, children))
    for name in files:
        item = on_file(directory / name, join_slug(relative_path, name))
        if item is not None:
            items.append(item)
    return items


def read_record(file_path: Path, *, slug: str, path: str, source: str) -> FileRecord:
    """
    Read ``file_path`` into a :class:`FileRecord`.

    Raises OSError when the file cannot be read.
    """
    content = file_path.read_text(encoding="utf-8", errors="replace")
    stat = file_path.stat()
    return FileRecord(
        slug=slug,
        path=path,
        title=title_from_text(content, file_path.name),
        content=content,
        last_modified=datetime.fromtimestamp(stat.st_mtime, tz=timezone.utc),
        source=source,
        file_name=file_path.name,
    )


def build_tree(root: Path, source: str | None = None, base_path: str = "") -> List[FileNode]:
    """Build the nested navigation tree for ``root``.

    Node paths are relative to ``root`` and prefixed with ``base_path`` when
    given; file node paths have their extension stripped.
    """

    def on_file(file_path: Path, relative: str) -> FileNode:
        return FileNode(
            name=file_path.name,
            path=join_slug(base_path, strip_extension(relative)),
            kind="file",
            last_modified=_mtime(file_path),
            source=source,
        )

    def on_directory(name: str, relative: str, children: List[FileNode]) -> List[FileNode]:
        return [
            FileNode(
                name=name,
                path=join_slug(base_path, relative),
                kind="directory",
                children=children,
                source=source,
            )
        ]

    return walk(root, on_file, on_directory)


def list_records(root: Path, source: str) -> List[FileRecord]:
    """List every supported file under ``root`` in traversal order."""

    def on_file(file_path: Path, relative: str) -> FileRecord | None:
        slug = strip_extension(relative)
        try:
            return read_record(file_path, slug=slug, path=join_slug(source, slug), source=source)
        except OSError as exc:
            logger.warning("Skipping unreadable file %s: %s", file_path, exc)
            return None

    def on_directory(name: str, relative: str, children: List[FileRecord]) -> List[FileRecord]:
        return children

    return walk(root, on_file, on_directory)


__all__ = ["walk", "build_tree", "list_records", "read_record"]
