"""Cyclopts CLI entrypoint for building documentation sidebars from outlines.

The ``skelo`` console script defined here turns outline YAML files into a
sidebars file plus Markdown topic skeletons (``skelo build``), checks outline
files without writing anything (``skelo validate``), writes a default
configuration file (``skelo init``), and recovers outline files from an
existing docs tree (``skelo outline``).

Examples
--------
Build using the default configuration and fallback patterns:

>>> from skelo.cli import main
>>> main()  # doctest: +SKIP

Validate a specific set of outlines:

>>> from skelo.cli import app
>>> app(["validate", "outlines/*.outline.yaml"])  # doctest: +SKIP
"""

from __future__ import annotations

import logging
import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from ._constants import DEFAULT_CONFIG_FILE
from .config import SkeloConfig, load_config, write_default_config
from .layout import build_layout, build_topic_writer
from .markdown_outline import (
    build_outline_documents,
    load_sidebars_mapping,
    write_outline_files,
)
from .sidebars_file import generate_sidebars_file
from .validation import log_report_warnings, validate_outlines

app = App(name="skelo", config=cyclopts.config.Env("SKELO_", command=False))  # type: ignore[unknown-argument]

ConfigOption = typ.Annotated[
    Path, Parameter(help="Path to the configuration file", env_var="SKELO_CONFIG")
]
VerboseOption = typ.Annotated[bool, Parameter(help="Verbose output")]


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


def _configure_logging(*, verbose: bool) -> None:
    """Set the skelo log level; called again once the config file is loaded."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")
    logging.getLogger("skelo").setLevel(level)


def _resolve_config(config: Path, **overrides: typ.Any) -> SkeloConfig:
    return load_config(config).with_overrides(**overrides)


@app.command(help="Build the sidebars file and topic skeletons from outline files.")
def build(
    *patterns: str,
    config: ConfigOption = DEFAULT_CONFIG_FILE,
    docs: typ.Annotated[
        Path | None, Parameter(help="Documentation directory for topic files")
    ] = None,
    sidebars_filename: typ.Annotated[
        Path | None, Parameter(help="Sidebars file to generate")
    ] = None,
    fallback_patterns: typ.Annotated[
        list[str] | None, Parameter(help="Fallback glob patterns for outline files")
    ] = None,
    templates: typ.Annotated[
        Path | None, Parameter(help="Templates directory")
    ] = None,
    template_extension: typ.Annotated[
        str | None, Parameter(help="Template file extension")
    ] = None,
    schema_filename: typ.Annotated[
        Path | None, Parameter(help="Outline JSON schema")
    ] = None,
    sort_sidebars: typ.Annotated[
        bool | None, Parameter(help="Sort sidebars alphabetically")
    ] = None,
    overwrite_topics: typ.Annotated[
        bool | None, Parameter(help="Overwrite existing topic documents")
    ] = None,
    verbose: VerboseOption = False,
) -> None:
    """Build the sidebars layout and write the generated artifacts.

    Parameters
    ----------
    *patterns : str
        Glob patterns selecting outline files; the configured fallback
        patterns apply when none match.
    config : Path, optional
        Configuration file merged under the command-line options.
    docs, sidebars_filename, fallback_patterns, templates, template_extension,
    schema_filename, sort_sidebars, overwrite_topics : optional
        Overrides for the matching configuration options.
    verbose : bool, optional
        Emit debug logging.

    Returns
    -------
    None
        Writes topic documents and the sidebars file and prints their paths.
    """
    _configure_logging(verbose=verbose)
    settings = _resolve_config(
        config,
        docs=docs,
        sidebars_filename=sidebars_filename,
        fallback_patterns=fallback_patterns,
        templates=templates,
        template_extension=template_extension,
        schema_filename=schema_filename,
        sort_sidebars=sort_sidebars,
        overwrite_topics=overwrite_topics,
        verbose=verbose or None,
    )
    _configure_logging(verbose=settings.verbose)
    writer = build_topic_writer(settings)
    layout = build_layout(list(patterns), settings, persister=writer)
    for path in writer.written:
        print(f"wrote {_format_path(path)}")
    sidebars_path = generate_sidebars_file(layout, settings)
    print(f"wrote {_format_path(sidebars_path)}")


@app.command(help="Validate outline files and report duplicated sidebar labels.")
def validate(
    *patterns: str,
    config: ConfigOption = DEFAULT_CONFIG_FILE,
    fallback_patterns: typ.Annotated[
        list[str] | None, Parameter(help="Fallback glob patterns for outline files")
    ] = None,
    schema_filename: typ.Annotated[
        Path | None, Parameter(help="Outline JSON schema")
    ] = None,
    verbose: VerboseOption = False,
) -> None:
    """Validate outline files without writing anything.

    Raises
    ------
    SystemExit
        With status 1 when any file is invalid or any label is duplicated.
    """
    _configure_logging(verbose=verbose)
    settings = _resolve_config(
        config,
        fallback_patterns=fallback_patterns,
        schema_filename=schema_filename,
        verbose=verbose or None,
    )
    _configure_logging(verbose=settings.verbose)
    report = validate_outlines(list(patterns), settings)
    log_report_warnings(report)
    for filename in report.schema.valid_files:
        print(f"valid {filename}")
    if not report.ok:
        raise SystemExit(1)


@app.command(help="Create a default configuration file.")
def init(
    config_file: typ.Annotated[
        Path, Parameter(help="Path to the configuration file")
    ] = DEFAULT_CONFIG_FILE,
) -> None:
    """Write the default configuration, keys sorted, to ``config_file``."""
    written = write_default_config(config_file)
    print(f"Configuration file created at {_format_path(written)}")


@app.command(help="Create outline files from an existing sidebars file and docs.")
def outline(
    target_outline_dir: typ.Annotated[
        Path, Parameter(help="Target directory for outline files")
    ],
    *,
    config: ConfigOption = DEFAULT_CONFIG_FILE,
    docs: typ.Annotated[
        Path | None, Parameter(help="Documentation directory to read")
    ] = None,
    sidebars_filename: typ.Annotated[
        Path | None,
        Parameter(help="Sidebars mapping to read (JSON or YAML)"),
    ] = None,
    verbose: VerboseOption = False,
) -> None:
    """Recover outline files from a sidebars mapping and its Markdown documents."""
    _configure_logging(verbose=verbose)
    settings = _resolve_config(
        config,
        docs=docs,
        sidebars_filename=sidebars_filename,
        verbose=verbose or None,
    )
    _configure_logging(verbose=settings.verbose)
    sidebars = load_sidebars_mapping(settings.sidebars_filename)
    documents = build_outline_documents(sidebars, settings.docs)
    for path in write_outline_files(documents, target_outline_dir):
        print(f"wrote {_format_path(path)}")


app.default(build)


def main() -> None:
    """Invoke the Cyclopts application that powers the ``skelo`` command.

    Examples
    --------
    >>> main()  # doctest: +SKIP
    """
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
