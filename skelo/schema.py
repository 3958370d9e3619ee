"""Validate outline files against the outline JSON schema.

Outline files are YAML, but the schema is plain JSON Schema, so every file is
parsed with ruamel.yaml and the resulting mapping is checked with
``jsonschema``. Failures are collected per file rather than raised, so a
single broken outline never stops the rest of the build.

Example
-------
>>> from skelo.schema import load_schema, validate_files
>>> from skelo._constants import DEFAULT_SCHEMA_PATH
>>> schema = load_schema(DEFAULT_SCHEMA_PATH)
>>> validate_files([], schema).valid_files
[]
"""

from __future__ import annotations

import collections.abc as cabc
import dataclasses as dc
import json
import logging
import os
import typing as typ
from pathlib import Path

from jsonschema import Draft202012Validator
from jsonschema.exceptions import SchemaError
from jsonschema.exceptions import ValidationError as JsonSchemaValidationError
from jsonschema.validators import validator_for
from ruamel.yaml.error import YAMLError

from skelo.outline.models import OutlineValidationError
from skelo.outline.normalize import read_outline_document

logger = logging.getLogger(__name__)


class SchemaLoadError(ValueError):
    """Raised when a schema file cannot be read or is not a JSON object."""


@dc.dataclass(slots=True)
class SchemaValidationResult:
    """Outcome of validating a batch of outline files.

    Attributes
    ----------
    valid_files : list[str]
        Files that parsed and satisfied the schema, in input order.
    invalid_files : dict[str, list[str]]
        Error descriptions keyed by the failing file.
    """

    valid_files: list[str] = dc.field(default_factory=list)
    invalid_files: dict[str, list[str]] = dc.field(default_factory=dict)


def load_schema(path: Path) -> dict[str, typ.Any]:
    """Read and parse the JSON schema stored at ``path``."""
    try:
        loaded = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as exc:
        msg = f"Error reading or parsing schema file at {path}: {exc}"
        raise SchemaLoadError(msg) from exc
    if not isinstance(loaded, dict):
        msg = f"Schema file at {path} must contain a JSON object."
        raise SchemaLoadError(msg)
    return loaded


def resolve_schema_path(candidate: Path | None, default: Path) -> Path:
    """Return ``candidate`` when it holds a usable schema, else ``default``.

    Raises
    ------
    SchemaLoadError
        If ``default`` itself does not hold a usable schema.
    """
    try:
        load_schema(default)
    except SchemaLoadError as exc:
        msg = f"Default schema location is invalid: {default}"
        raise SchemaLoadError(msg) from exc

    if candidate is None or candidate == default:
        return default
    if not candidate.exists():
        logger.warning(
            "Schema file not found: %s. Using default schema: %s", candidate, default
        )
        return default
    try:
        schema = load_schema(candidate)
        validator_for(schema, default=Draft202012Validator).check_schema(schema)
    except (SchemaLoadError, SchemaError) as exc:
        logger.warning(
            "Error parsing or validating JSON schema %s (%s). Using default schema: %s",
            candidate,
            exc,
            default,
        )
        return default
    return candidate


def _describe(error: JsonSchemaValidationError) -> str:
    path = "/".join(str(part) for part in error.absolute_path)
    return f"{path}: {error.message}" if path else error.message


def validate_files(
    files: cabc.Sequence[str | os.PathLike[str]], schema: cabc.Mapping[str, typ.Any]
) -> SchemaValidationResult:
    """Validate each outline file in ``files`` against ``schema``.

    Parameters
    ----------
    files : Sequence[str or PathLike]
        Outline files to check.
    schema : Mapping[str, Any]
        JSON schema; its ``$schema`` keyword selects the draft, defaulting to
        2020-12.

    Returns
    -------
    SchemaValidationResult
        Valid files plus per-file error descriptions for the rest. Read and
        parse failures are reported as errors, not raised.

    Raises
    ------
    TypeError
        If ``files`` is not a sequence of paths or ``schema`` is not a mapping.
    """
    if isinstance(files, str | bytes) or not isinstance(files, cabc.Sequence):
        msg = "Files must be a list of strings."
        raise TypeError(msg)
    if not isinstance(schema, cabc.Mapping):
        msg = "Schema must be an object."
        raise TypeError(msg)

    validator_cls = validator_for(schema, default=Draft202012Validator)
    validator = validator_cls(dict(schema))
    result = SchemaValidationResult()
    for name in files:
        filename = os.fspath(name)
        try:
            document = read_outline_document(filename)
        except (
            OSError,
            UnicodeDecodeError,
            YAMLError,
            OutlineValidationError,
        ) as exc:
            result.invalid_files[filename] = [str(exc)]
            continue
        errors = sorted(_describe(error) for error in validator.iter_errors(document))
        if errors:
            result.invalid_files[filename] = errors
        else:
            result.valid_files.append(filename)
    return result


__all__ = [
    "SchemaLoadError",
    "SchemaValidationResult",
    "load_schema",
    "resolve_schema_path",
    "validate_files",
]
