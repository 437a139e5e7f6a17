import os
from pathlib import Path
from typing import Dict

import pytest

from backend.src.models.library import SourceRoot
from backend.src.services.config import AppConfig


def write_file(path: Path, contents: str, mtime: float | None = None) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(contents, encoding="utf-8")
    if mtime is not None:
        os.utime(path, (mtime, mtime))
    return path


@pytest.fixture
def library_dirs(tmp_path: Path) -> Dict[str, Path]:
    """A content root and an agents root with a few files of mixed types."""
    content_dir = tmp_path / "content"
    agents_dir = tmp_path / "agents"

    files = {
        "welcome": write_file(content_dir / "notes" / "welcome.md", "# Welcome\nHello world"),
        "script": write_file(content_dir / "snippets" / "init.sh", "echo hi"),
        "overview": write_file(content_dir / "overview.md", "# Overview\nContent overview"),
        "config": write_file(agents_dir / "skills" / "config.json", '{"name":"memory"}'),
    }
    return {"content": content_dir, "agents": agents_dir, **files}


@pytest.fixture
def roots(library_dirs: Dict[str, Path]) -> list[SourceRoot]:
    return [
        SourceRoot(source_id="content", directory=library_dirs["content"]),
        SourceRoot(source_id="agents", directory=library_dirs["agents"]),
    ]


@pytest.fixture
def library_config(library_dirs: Dict[str, Path]) -> AppConfig:
    return AppConfig(content_dir=library_dirs["content"], agents_dir=library_dirs["agents"])


@pytest.fixture
def make_file():
    """Expose ``write_file`` to tests: ``make_file(path, contents, mtime=None)``."""
    return write_file
