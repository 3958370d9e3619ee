"""Detect top-level sidebar labels declared more than once across outlines."""

from __future__ import annotations

import collections.abc as cabc
import dataclasses as dc
import os
import typing as typ

from .models import OutlineValidationError, SidebarsFile
from .normalize import load_sidebars


@dc.dataclass(slots=True)
class LabelCount:
    """Occurrences of one top-level label, in total and per file."""

    count: int = 0
    per_file: dict[str, int] = dc.field(default_factory=dict)


@dc.dataclass(slots=True)
class DuplicateReport:
    """Result of :func:`find_duplicates`."""

    duplicated: frozenset[str]
    summary: dict[str, LabelCount]

    def duplicated_summary(self) -> dict[str, LabelCount]:
        """Return the summary entries for duplicated labels only."""
        return {
            label: counts
            for label, counts in self.summary.items()
            if label in self.duplicated
        }


def find_duplicates(
    files: cabc.Sequence[str | os.PathLike[str]],
    *,
    loader: typ.Callable[[str], SidebarsFile] = load_sidebars,
) -> DuplicateReport:
    """Count top-level sidebar labels across ``files`` and flag repeats.

    Only the labels of each file's top-level ``sidebars`` entries are counted;
    nested labels are ignored. A label repeated within one file counts once
    per occurrence.

    Parameters
    ----------
    files : Sequence[str or PathLike]
        Outline files to inspect, in processing order.
    loader : Callable[[str], SidebarsFile], optional
        Function that loads and normalizes one outline file.

    Returns
    -------
    DuplicateReport
        ``duplicated`` holds every label whose total count exceeds one and
        ``summary`` maps each label to its :class:`LabelCount`.

    Raises
    ------
    OutlineValidationError
        If ``files`` is not a sequence of paths, or a file's sidebars are not
        a sequence.
    """
    if isinstance(files, str | bytes) or not isinstance(files, cabc.Sequence):
        msg = "find_duplicates: files must be a list of file paths."
        raise OutlineValidationError(msg)
    if not all(isinstance(name, str | os.PathLike) for name in files):
        msg = "find_duplicates: files must be a list of file paths."
        raise OutlineValidationError(msg)

    summary: dict[str, LabelCount] = {}
    for name in files:
        filename = os.fspath(name)
        sidebars = loader(filename).sidebars
        if not isinstance(sidebars, cabc.Sequence):
            msg = f"find_duplicates: sidebars in '{filename}' must be a list."
            raise OutlineValidationError(msg)
        for entry in sidebars:
            counts = summary.setdefault(entry.label, LabelCount())
            counts.count += 1
            counts.per_file[filename] = counts.per_file.get(filename, 0) + 1

    duplicated = frozenset(
        label for label, counts in summary.items() if counts.count > 1
    )
    return DuplicateReport(duplicated=duplicated, summary=summary)


__all__ = ["DuplicateReport", "LabelCount", "find_duplicates"]
