"""Human-readable titles for library files."""

from __future__ import annotations

from pathlib import Path
import re

from .paths import strip_extension

H1_PATTERN = re.compile(r"^#\s+(.+)$", re.MULTILINE)


def title_from_text(text: str, file_name: str) -> str:
    """
    Return the first top-level heading found anywhere in ``text``.

    The heading text is returned verbatim. Without a heading the title is
    ``file_name`` with its supported extension removed.
    """
    match = H1_PATTERN.search(text or "")
    if match:
        return match.group(1)
    return strip_extension(file_name)


def derive_title(file_path: Path) -> str:
    """Read ``file_path`` and derive its title."""
    text = file_path.read_text(encoding="utf-8", errors="replace")
    return title_from_text(text, file_path.name)


__all__ = ["H1_PATTERN", "title_from_text", "derive_title"]
