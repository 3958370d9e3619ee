"""Discover, schema-check, and duplicate-check outline files.

:func:`validate_outlines` is the engine behind ``skelo validate`` and the
first half of ``skelo build``: it resolves the outline files for the given
patterns, validates them against the outline schema, and reports top-level
sidebar labels that more than one outline declares.
"""

from __future__ import annotations

import dataclasses as dc
import logging
import typing as typ

from skelo._constants import DEFAULT_SCHEMA_PATH
from skelo.files import find_files
from skelo.outline.duplicates import DuplicateReport, find_duplicates
from skelo.schema import (
    SchemaValidationResult,
    load_schema,
    resolve_schema_path,
    validate_files,
)

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from skelo.config import SkeloConfig

logger = logging.getLogger(__name__)

Discover = typ.Callable[..., list[str]]
Validate = typ.Callable[..., SchemaValidationResult]


@dc.dataclass(slots=True)
class ValidationReport:
    """Outcome of :func:`validate_outlines`.

    Attributes
    ----------
    files : list[str]
        Every discovered outline file.
    schema : SchemaValidationResult
        Schema-valid files and per-file errors for the rest.
    duplicates : DuplicateReport
        Top-level label counts across the schema-valid files.
    """

    files: list[str]
    schema: SchemaValidationResult
    duplicates: DuplicateReport

    @property
    def ok(self) -> bool:
        """Return ``True`` when no file is invalid and no label is duplicated."""
        return not self.schema.invalid_files and not self.duplicates.duplicated


def validate_outlines(
    patterns: cabc.Iterable[str] | None,
    config: SkeloConfig,
    *,
    discover: Discover = find_files,
    validate: Validate = validate_files,
) -> ValidationReport:
    """Validate the outline files selected by ``patterns``.

    Parameters
    ----------
    patterns : Iterable[str] or None
        Glob patterns from the command line; ``config.fallback_patterns`` are
        used when they match nothing.
    config : SkeloConfig
        Supplies the fallback patterns and the schema location.
    discover : Callable, optional
        File discovery collaborator.
    validate : Callable, optional
        Schema validation collaborator.

    Returns
    -------
    ValidationReport
        Discovery, schema, and duplicate results.

    Raises
    ------
    SchemaLoadError
        If neither the configured nor the bundled schema can be loaded.
    OutlineValidationError
        If a schema-valid file still fails outline normalization.
    """
    files = discover(patterns, config.fallback_patterns)
    if not files:
        logger.warning("No outline files found.")
    schema_path = resolve_schema_path(config.schema_path, DEFAULT_SCHEMA_PATH)
    schema_result = validate(files, load_schema(schema_path))
    duplicates = find_duplicates(schema_result.valid_files)
    return ValidationReport(files=files, schema=schema_result, duplicates=duplicates)


def log_report_warnings(report: ValidationReport) -> None:
    """Log one warning per invalid file and per duplicated label."""
    for filename, errors in report.schema.invalid_files.items():
        logger.warning("Invalid outline file %s: %s", filename, "; ".join(errors))
    for label, counts in sorted(report.duplicates.duplicated_summary().items()):
        per_file = ", ".join(
            f"{filename} ({count})" for filename, count in counts.per_file.items()
        )
        logger.warning(
            "Duplicated sidebar label %r excluded (%d occurrences): %s",
            label,
            counts.count,
            per_file,
        )


__all__ = ["ValidationReport", "log_report_warnings", "validate_outlines"]
