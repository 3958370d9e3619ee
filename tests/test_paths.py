"""Unit tests for the slug and path helpers in ``skelo.paths``."""

from __future__ import annotations

import pytest

from skelo.paths import (
    build_parent_path,
    ensure_extension,
    join_path,
    path_slugify,
    slugify,
)


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("Test String", "test-string"),
        ("Test---String", "test-string"),
        ("-Test-", "test"),
        ("snake_case  words", "snake-case-words"),
        ("Héllo, World!", "hllo-world"),
        ("?!.", ""),
        (None, ""),
        (42, "42"),
    ],
)
def test_slugify(value: object, expected: str) -> None:
    """Slugs are lowercase, hyphenated, and stripped of other characters."""
    assert slugify(value) == expected


def test_slugify_is_stable_on_slugs() -> None:
    """Slugifying a slug returns it unchanged."""
    slug = slugify("Getting Started With Skelo")
    assert slugify(slug) == slug


def test_join_path_drops_empty_segments() -> None:
    """Falsy segments are skipped when joining."""
    assert join_path("parent", "item") == "parent/item"
    assert join_path(None, "item") == "item"
    assert join_path(None, None) == ""
    assert join_path("a", "", "b") == "a/b"


def test_join_path_keeps_internal_slashes() -> None:
    """Hrefs are joined verbatim without slug cleanup."""
    assert join_path("Docs A/", "Item") == "Docs A//Item"


def test_build_parent_path_slugifies_segments() -> None:
    """Category parent paths slugify every segment of both inputs."""
    assert build_parent_path("Docs A", "Sub Folder\\Deep") == "docs-a/sub-folder/deep"
    assert build_parent_path(None, None) == ""
    assert build_parent_path("docs-a", None) == "docs-a"


def test_path_slugify_uses_directory_portion() -> None:
    """The final segment is treated as a filename and dropped."""
    assert path_slugify("Guides/Getting Started/intro.md") == "guides/getting-started"
    assert path_slugify("Guides\\Deep Dive\\page") == "guides/deep-dive"
    assert path_slugify("intro") == ""
    assert path_slugify(None) == ""


@pytest.mark.parametrize("extension", ["md", ".md", " md "])
def test_ensure_extension_is_idempotent(extension: str) -> None:
    """The extension is appended once regardless of its leading dot."""
    assert ensure_extension("file", extension) == "file.md"
    assert ensure_extension("file.md", extension) == "file.md"


def test_ensure_extension_accepts_compound_extensions() -> None:
    """Multi-part extensions are matched as a whole suffix."""
    assert ensure_extension("sidebars", "tpl.jinja") == "sidebars.tpl.jinja"


@pytest.mark.parametrize("extension", ["", "   ", "md.", "m/d", "*"])
def test_ensure_extension_rejects_invalid_extensions(extension: str) -> None:
    """Empty, dot-terminated, or punctuated extensions are refused."""
    with pytest.raises(ValueError, match="Invalid extension"):
        ensure_extension("file", extension)


def test_ensure_extension_rejects_non_strings() -> None:
    """Non-string extensions are refused."""
    with pytest.raises(ValueError, match="must be a string"):
        ensure_extension("file", 3)  # type: ignore[arg-type]
