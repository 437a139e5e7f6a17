"""Conversions between physical file names and logical slugs."""

from __future__ import annotations

from typing import Iterable, List

# Declaration order is also the probe order used when resolving slugs.
SUPPORTED_EXTENSIONS = (".md", ".json", ".txt", ".sh", ".py", ".js", ".ts")


def strip_extension(name: str, allowed_exts: Iterable[str] = SUPPORTED_EXTENSIONS) -> str:
    """Drop the last extension of ``name`` when it is one of ``allowed_exts``."""
    dot = name.rfind(".")
    # a leading dot (".md", "notes/.txt") starts a hidden name, not an extension
    if dot <= name.rfind("/") + 1:
        return name
    if name[dot:] in set(allowed_exts):
        return name[:dot]
    return name


def is_supported_file(name: str) -> bool:
    return name.endswith(SUPPORTED_EXTENSIONS)


def ancestor_chain(slash_path: str) -> List[str]:
    """
    Return every prefix of ``slash_path``, root first and the full path last.

    ``"a/b/c"`` gives ``["a", "a/b", "a/b/c"]``. Empty segments are ignored.
    """
    parts = [part for part in slash_path.split("/") if part]
    return ["/".join(parts[: index + 1]) for index in range(len(parts))]


def join_slug(*parts: str) -> str:
    """Join non-empty path segments with ``/``."""
    return "/".join(part for part in parts if part)


__all__ = [
    "SUPPORTED_EXTENSIONS",
    "strip_extension",
    "is_supported_file",
    "ancestor_chain",
    "join_slug",
]
