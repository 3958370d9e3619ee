"""Tests for outline schema loading and validation."""

from __future__ import annotations

import json
import logging
import typing as typ

import pytest

from skelo._constants import DEFAULT_SCHEMA_PATH
from skelo.schema import (
    SchemaLoadError,
    load_schema,
    resolve_schema_path,
    validate_files,
)

if typ.TYPE_CHECKING:
    from pathlib import Path


@pytest.fixture
def outline_schema() -> dict[str, typ.Any]:
    """Load the bundled outline schema."""
    return load_schema(DEFAULT_SCHEMA_PATH)


def test_valid_outline_passes(
    write_outline: typ.Callable[[str, str], Path],
    outline_schema: dict[str, typ.Any],
) -> None:
    """Every documented item shape is accepted."""
    outline = write_outline(
        "ok.outline.yaml",
        """
        path: docs-a
        sidebars:
          - Intro
          - Guides:
              - Install
              - label: Configure
                id: 12
                headings:
                  - Options
          - label: Site
            href: https://example.com
            title: Home
        """,
    )

    result = validate_files([str(outline)], outline_schema)

    assert result.valid_files == [str(outline)]
    assert result.invalid_files == {}


def test_invalid_outlines_are_collected(
    write_outline: typ.Callable[[str, str], Path],
    outline_schema: dict[str, typ.Any],
) -> None:
    """Schema violations and parse errors are reported per file."""
    missing = write_outline("missing.outline.yaml", "path: docs\n")
    both = write_outline(
        "both.outline.yaml",
        """
        sidebars:
          - label: Both
            items: [a]
            headings: [b]
        """,
    )
    broken = write_outline("broken.outline.yaml", "sidebars: [unclosed\n")
    good = write_outline("good.outline.yaml", "sidebars: [Intro]\n")

    result = validate_files(
        [str(missing), str(both), str(broken), str(good)], outline_schema
    )

    assert result.valid_files == [str(good)]
    assert set(result.invalid_files) == {str(missing), str(both), str(broken)}
    assert any("sidebars" in error for error in result.invalid_files[str(missing)])
    assert result.invalid_files[str(both)][0].startswith("sidebars/0")


def test_unreadable_file_is_invalid(
    tmp_path: Path, outline_schema: dict[str, typ.Any]
) -> None:
    """A missing file is reported instead of raised."""
    missing = str(tmp_path / "nope.outline.yaml")
    result = validate_files([missing], outline_schema)
    assert list(result.invalid_files) == [missing]


def test_undecodable_file_is_invalid(
    tmp_path: Path, outline_schema: dict[str, typ.Any]
) -> None:
    """A file that is not UTF-8 is reported beside the valid ones."""
    outlines = tmp_path / "outlines"
    outlines.mkdir()
    good = outlines / "good.outline.yaml"
    good.write_text("sidebars: [Intro]\n", encoding="utf-8")
    bad = outlines / "bad.outline.yaml"
    bad.write_bytes(b"sidebars:\n  - \xff Broken\n")

    result = validate_files([str(bad), str(good)], outline_schema)

    assert result.valid_files == [str(good)]
    assert list(result.invalid_files) == [str(bad)]


def test_validate_files_argument_types(outline_schema: dict[str, typ.Any]) -> None:
    """Bad argument types raise ``TypeError``."""
    with pytest.raises(TypeError, match="Files must be a list of strings"):
        validate_files("a.yaml", outline_schema)  # type: ignore[arg-type]
    with pytest.raises(TypeError, match="Schema must be an object"):
        validate_files([], ["not", "a", "schema"])  # type: ignore[arg-type]


def test_load_schema_errors(tmp_path: Path) -> None:
    """Unreadable, malformed, and non-object schemas raise ``SchemaLoadError``."""
    with pytest.raises(SchemaLoadError):
        load_schema(tmp_path / "absent.json")

    malformed = tmp_path / "malformed.json"
    malformed.write_text("{", encoding="utf-8")
    with pytest.raises(SchemaLoadError):
        load_schema(malformed)

    array = tmp_path / "array.json"
    array.write_text("[]", encoding="utf-8")
    with pytest.raises(SchemaLoadError, match="JSON object"):
        load_schema(array)


def test_resolve_schema_path_prefers_valid_candidate(tmp_path: Path) -> None:
    """A readable, well-formed candidate schema is used."""
    candidate = tmp_path / "custom.schema.json"
    candidate.write_text(json.dumps({"type": "object"}), encoding="utf-8")

    assert resolve_schema_path(candidate, DEFAULT_SCHEMA_PATH) == candidate
    assert resolve_schema_path(None, DEFAULT_SCHEMA_PATH) == DEFAULT_SCHEMA_PATH


def test_resolve_schema_path_falls_back_with_warning(
    tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    """Missing or invalid candidates fall back to the default schema."""
    invalid = tmp_path / "invalid.schema.json"
    invalid.write_text(json.dumps({"type": 12}), encoding="utf-8")

    with caplog.at_level(logging.WARNING, logger="skelo.schema"):
        assert (
            resolve_schema_path(tmp_path / "absent.json", DEFAULT_SCHEMA_PATH)
            == DEFAULT_SCHEMA_PATH
        )
        assert resolve_schema_path(invalid, DEFAULT_SCHEMA_PATH) == DEFAULT_SCHEMA_PATH

    assert "Schema file not found" in caplog.text
    assert "Error parsing or validating JSON schema" in caplog.text


def test_resolve_schema_path_requires_valid_default(tmp_path: Path) -> None:
    """An unusable default schema is an error."""
    with pytest.raises(SchemaLoadError, match="Default schema location is invalid"):
        resolve_schema_path(None, tmp_path / "absent.json")
