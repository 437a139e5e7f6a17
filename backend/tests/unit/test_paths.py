import pytest

from backend.src.services.paths import (
    SUPPORTED_EXTENSIONS,
    ancestor_chain,
    is_supported_file,
    join_slug,
    strip_extension,
)


@pytest.mark.parametrize("extension", SUPPORTED_EXTENSIONS)
def test_strip_extension_round_trips(extension: str) -> None:
    name = f"notes/daily.log{extension}"

    stripped = strip_extension(name)

    assert stripped == "notes/daily.log"
    assert stripped + extension == name


def test_strip_extension_leaves_unsupported_names_alone() -> None:
    assert strip_extension("photo.png") == "photo.png"
    assert strip_extension("README") == "README"
    assert strip_extension("folder.md/README") == "folder.md/README"


def test_strip_extension_respects_custom_allow_list() -> None:
    assert strip_extension("notes.md", allowed_exts={".txt"}) == "notes.md"
    assert strip_extension("notes.txt", allowed_exts={".txt"}) == "notes"


def test_strip_extension_only_removes_last_extension() -> None:
    assert strip_extension("archive.md.json") == "archive.md"


@pytest.mark.parametrize(
    "name, expected",
    [
        ("a.md", True),
        ("data.json", True),
        ("notes.txt", True),
        ("run.sh", True),
        ("tool.py", True),
        ("app.js", True),
        ("types.ts", True),
        ("image.png", False),
        ("styles.css", False),
        ("Makefile", False),
        ("notes.MD", False),
    ],
)
def test_is_supported_file(name: str, expected: bool) -> None:
    assert is_supported_file(name) is expected


def test_ancestor_chain_lists_prefixes_root_first() -> None:
    assert ancestor_chain("content/notes/welcome") == [
        "content",
        "content/notes",
        "content/notes/welcome",
    ]


def test_ancestor_chain_ignores_empty_segments() -> None:
    assert ancestor_chain("/a//b/") == ["a", "a/b"]
    assert ancestor_chain("") == []


def test_join_slug_skips_empty_parts() -> None:
    assert join_slug("", "notes") == "notes"
    assert join_slug("content", "notes/welcome") == "content/notes/welcome"


def test_leading_dot_is_not_an_extension() -> None:
    assert strip_extension(".md") == ".md"
    assert strip_extension("notes/.txt") == "notes/.txt"
    assert strip_extension(".hidden.md") == ".hidden"
