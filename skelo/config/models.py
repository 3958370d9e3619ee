"""Typed dataclasses describing skelo configuration."""

from __future__ import annotations

import dataclasses as dc
import typing as typ
from pathlib import Path

from skelo._constants import (
    DEFAULT_SCHEMA_PATH,
    DEFAULT_TEMPLATE_EXTENSION,
    DEFAULT_TEMPLATES_DIR,
    FALLBACK_PATTERNS,
)


class ConfigError(ValueError):
    """Raised when the skelo configuration file is invalid."""


@dc.dataclass(slots=True)
class TemplateNames:
    """Names of the templates used for generated artifacts."""

    sidebars: str = "sidebars"
    topic: str = "topic"
    heading: str = "heading"


@dc.dataclass(slots=True)
class SkeloConfig:
    """Resolved options shared by the ``build``, ``validate``, and ``outline`` commands.

    Attributes
    ----------
    docs : Path
        Documentation root that topic documents are written beneath.
    sidebars_filename : Path
        Destination of the generated sidebars file.
    fallback_patterns : list[str]
        Glob patterns used when the command line supplies none that match.
    templates : Path or None
        Template directory; ``None`` selects the bundled templates.
    template_extension : str
        Extension appended to template names.
    schema_filename : Path or None
        Outline JSON schema; ``None`` selects the bundled schema.
    template_names : TemplateNames
        Template names for the sidebars file, topics, and headings.
    verbose : bool
        Emit debug logging.
    sort_sidebars : bool
        Order layout keys alphabetically instead of by discovery order.
    overwrite_topics : bool
        Replace topic documents that already exist.
    """

    docs: Path = Path("docs")
    sidebars_filename: Path = Path("sidebars.js")
    fallback_patterns: list[str] = dc.field(
        default_factory=lambda: list(FALLBACK_PATTERNS)
    )
    templates: Path | None = None
    template_extension: str = DEFAULT_TEMPLATE_EXTENSION
    schema_filename: Path | None = None
    template_names: TemplateNames = dc.field(default_factory=TemplateNames)
    verbose: bool = False
    sort_sidebars: bool = False
    overwrite_topics: bool = False

    @property
    def templates_dir(self) -> Path:
        """Return the configured template directory or the bundled one."""
        return self.templates or DEFAULT_TEMPLATES_DIR

    @property
    def schema_path(self) -> Path:
        """Return the configured schema path or the bundled schema."""
        return self.schema_filename or DEFAULT_SCHEMA_PATH

    def with_overrides(self, **overrides: typ.Any) -> SkeloConfig:
        """Return a copy with every non-``None`` override applied."""
        unknown = set(overrides) - {field.name for field in dc.fields(self)}
        if unknown:
            msg = f"Unknown configuration options: {', '.join(sorted(unknown))}"
            raise ConfigError(msg)
        changes = {key: value for key, value in overrides.items() if value is not None}
        return dc.replace(self, **changes)


__all__ = ["ConfigError", "SkeloConfig", "TemplateNames"]
