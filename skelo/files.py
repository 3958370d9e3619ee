"""Discover outline files from glob patterns."""

from __future__ import annotations

import collections.abc as cabc
import glob
import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)


def _check_patterns(patterns: object, name: str) -> list[str]:
    if patterns is None:
        return []
    if isinstance(patterns, str) or not isinstance(patterns, cabc.Iterable):
        msg = f"{name} should be a list of strings."
        raise TypeError(msg)
    checked = list(patterns)
    if not all(isinstance(pattern, str) for pattern in checked):
        msg = f"{name} should be a list of strings."
        raise TypeError(msg)
    return checked


def _glob_all(patterns: list[str], root: Path | None) -> list[str]:
    matches: set[str] = set()
    for pattern in patterns:
        if root is None:
            found = glob.glob(pattern, recursive=True)
        else:
            found = [
                os.path.join(root, match)
                for match in glob.glob(pattern, root_dir=root, recursive=True)
            ]
        matches.update(path for path in found if os.path.isfile(path))
    return sorted(matches)


def find_files(
    patterns: cabc.Iterable[str] | None,
    fallback_patterns: cabc.Iterable[str] | None = None,
    *,
    root: Path | None = None,
) -> list[str]:
    """Return files matching ``patterns``, or ``fallback_patterns`` if none match.

    The two pattern sets are never merged: fallback patterns are only
    consulted when the primary patterns produce no files. Results are sorted
    and de-duplicated so processing order is deterministic.

    Parameters
    ----------
    patterns : Iterable[str] or None
        Primary glob patterns; ``**`` matches across directories.
    fallback_patterns : Iterable[str] or None, optional
        Patterns used when ``patterns`` match nothing.
    root : Path or None, optional
        Directory the patterns are relative to; defaults to the working
        directory.

    Returns
    -------
    list[str]
        Matching file paths, or an empty list when nothing matches or
        globbing fails.

    Raises
    ------
    TypeError
        If either pattern argument is not a list of strings.
    """
    primary = _check_patterns(patterns, "Patterns")
    fallback = _check_patterns(fallback_patterns, "Fallback patterns")
    try:
        files = _glob_all(primary, root)
        if not files:
            files = _glob_all(fallback, root)
    except (OSError, ValueError) as exc:
        logger.error("Glob error: %s", exc)
        return []
    return files


__all__ = ["find_files"]
