r"""Slug and path helpers shared by the outline builder and topic writer.

Sidebar hrefs are URL-like strings joined with ``/`` while topic documents
land on disk under a slugified directory tree. The helpers here keep both
conventions in one place so the builder, the topic writer, and the CLI agree
on how a label becomes a path.

Examples
--------
>>> from skelo.paths import join_path, slugify
>>> slugify("Getting Started")
'getting-started'
>>> join_path("guides", None, "getting-started")
'guides/getting-started'
"""

from __future__ import annotations

import posixpath
import re

WHITESPACE_PATTERN = re.compile(r"[\s_]+")
INVALID_SLUG_CHARS = re.compile(r"[^a-z0-9-]")
HYPHEN_RUN_PATTERN = re.compile(r"-{2,}")
EXTENSION_PATTERN = re.compile(r"^[A-Za-z0-9.]+$")


def slugify(value: object | None) -> str:
    """Convert ``value`` into a lowercase, hyphen-separated slug.

    ``None`` yields an empty string; any other non-string value is converted
    with :func:`str` first. Whitespace and underscore runs become a single
    hyphen, anything outside ``[a-z0-9-]`` is dropped, and hyphen runs are
    collapsed before leading and trailing hyphens are stripped.

    Examples
    --------
    >>> slugify("Test---String")
    'test-string'
    >>> slugify("-Test-")
    'test'
    >>> slugify(None)
    ''
    """
    if value is None:
        return ""
    text = str(value).lower()
    text = WHITESPACE_PATTERN.sub("-", text)
    text = INVALID_SLUG_CHARS.sub("", text)
    text = HYPHEN_RUN_PATTERN.sub("-", text)
    return text.strip("-")


def join_path(*segments: str | None) -> str:
    """Join the non-empty ``segments`` with ``/`` without further cleanup.

    Examples
    --------
    >>> join_path("parent", "item")
    'parent/item'
    >>> join_path(None, None)
    ''
    """
    return "/".join(segment for segment in segments if segment)


def _slug_segments(path: str) -> list[str]:
    """Split ``path`` on either slash style and slugify each non-empty part."""
    parts = path.replace("\\", "/").split("/")
    slugs = [slugify(part) for part in parts if part]
    return [slug for slug in slugs if slug]


def build_parent_path(parent_path: str | None, item_path: str | None) -> str:
    """Compose the parent path handed to a category's children.

    Both inputs are split into segments, each segment is slugified, and the
    result is re-joined with ``/``.

    Examples
    --------
    >>> build_parent_path("Docs A", "Sub Folder\\\\Deep")
    'docs-a/sub-folder/deep'
    """
    segments: list[str] = []
    for path in (parent_path, item_path):
        if path:
            segments.extend(_slug_segments(path))
    return "/".join(segments)


def path_slugify(path: str | None) -> str:
    """Return the slugified directory portion of ``path``.

    The final segment is treated as a filename and dropped.

    Examples
    --------
    >>> path_slugify("Guides/Getting Started/intro.md")
    'guides/getting-started'
    >>> path_slugify("intro")
    ''
    """
    if not path:
        return ""
    directory = posixpath.dirname(path.replace("\\", "/"))
    return "/".join(_slug_segments(directory))


def ensure_extension(path: str, extension: str) -> str:
    """Append ``extension`` to ``path`` unless it already ends with it.

    Parameters
    ----------
    path : str
        File path or template name to check.
    extension : str
        Extension with or without the leading dot; surrounding whitespace is
        ignored.

    Returns
    -------
    str
        ``path`` unchanged when it already carries the extension, otherwise
        ``path`` with the dotted extension appended.

    Raises
    ------
    ValueError
        If ``extension`` is not a string, is empty, contains characters other
        than letters, digits, and dots, or ends with a dot.

    Examples
    --------
    >>> ensure_extension("file", "md")
    'file.md'
    >>> ensure_extension("file.md", ".md")
    'file.md'
    """
    if not isinstance(extension, str):
        msg = "Invalid extension: extension must be a string."
        raise ValueError(msg)  # noqa: TRY004 - part of the extension contract
    trimmed = extension.strip()
    if not trimmed or not EXTENSION_PATTERN.match(trimmed):
        msg = (
            "Invalid extension: extension cannot be empty or contain special "
            f"characters (excluding '.'): {extension!r}"
        )
        raise ValueError(msg)
    if trimmed.endswith("."):
        msg = f"Invalid extension: extension cannot end with a dot: {extension!r}"
        raise ValueError(msg)
    suffix = trimmed if trimmed.startswith(".") else f".{trimmed}"
    if path.endswith(suffix):
        return path
    return f"{path}{suffix}"


__all__ = [
    "build_parent_path",
    "ensure_extension",
    "join_path",
    "path_slugify",
    "slugify",
]
