"""Assemble the sidebars layout from every valid outline file.

:func:`build_layout` drives the whole pipeline: discovery, schema
validation, duplicate detection, and sidebar tree building. The resulting
mapping goes from each top-level sidebar label to its built nodes. Labels
declared by more than one outline are left out entirely and reported as
warnings.

The assembler is best effort: a failure while reading or building logs an
error and yields an empty mapping so one broken outline cannot crash a
documentation build.

Example
-------
>>> from skelo.config import SkeloConfig
>>> from skelo.layout import build_layout, layout_to_data
>>> layout = build_layout(["outlines/*.yaml"], SkeloConfig())  # doctest: +SKIP
>>> layout_to_data(layout)  # doctest: +SKIP
{'Guides': ['guides/install', {'type': 'link', 'label': 'API', 'href': '/api'}]}
"""

from __future__ import annotations

import logging
import typing as typ

from jinja2 import TemplateError
from ruamel.yaml.error import YAMLError

from skelo.files import find_files
from skelo.outline import (
    BuildContext,
    LayoutMapping,
    build_items,
    load_sidebars,
    node_to_data,
)
from skelo.paths import build_parent_path
from skelo.schema import validate_files
from skelo.templates import TemplateRenderer
from skelo.topics import MarkdownTopicWriter
from skelo.validation import (
    Discover,
    Validate,
    log_report_warnings,
    validate_outlines,
)

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from skelo.config import SkeloConfig
    from skelo.outline import TopicPersister

logger = logging.getLogger(__name__)


def build_topic_writer(config: SkeloConfig) -> MarkdownTopicWriter:
    """Return the default topic persister for ``config``."""
    renderer = TemplateRenderer(
        config.templates_dir, template_extension=config.template_extension
    )
    return MarkdownTopicWriter(
        renderer,
        template_names=config.template_names,
        overwrite=config.overwrite_topics,
    )


def build_layout(
    patterns: cabc.Iterable[str] | None,
    config: SkeloConfig,
    *,
    discover: Discover = find_files,
    validate: Validate = validate_files,
    persister: TopicPersister | None = None,
) -> LayoutMapping:
    """Build the label-to-tree mapping for the outlines matching ``patterns``.

    Parameters
    ----------
    patterns : Iterable[str] or None
        Primary glob patterns; ``config.fallback_patterns`` apply when they
        match nothing.
    config : SkeloConfig
        Docs root, schema, template, and ordering options.
    discover : Callable, optional
        File discovery collaborator.
    validate : Callable, optional
        Schema validation collaborator.
    persister : TopicPersister, optional
        Receives every resolved topic; defaults to a
        :class:`~skelo.topics.MarkdownTopicWriter` built from ``config``.

    Returns
    -------
    LayoutMapping
        Built nodes keyed by top-level sidebar label, in discovery order or
        sorted when ``config.sort_sidebars`` is set. Schema-invalid files and
        duplicated labels are excluded. An empty mapping is returned when the
        build fails.
    """
    try:
        if persister is None:
            persister = build_topic_writer(config)
        return _assemble(
            patterns,
            config,
            discover=discover,
            validate=validate,
            persister=persister,
        )
    except (OSError, ValueError, TypeError, YAMLError, TemplateError) as exc:
        logger.error("Unable to build the sidebars layout: %s", exc)
        return {}


def _assemble(
    patterns: cabc.Iterable[str] | None,
    config: SkeloConfig,
    *,
    discover: Discover,
    validate: Validate,
    persister: TopicPersister,
) -> LayoutMapping:
    report = validate_outlines(patterns, config, discover=discover, validate=validate)
    log_report_warnings(report)

    layout: LayoutMapping = {}
    for filename in report.schema.valid_files:
        outline = load_sidebars(filename)
        context = BuildContext(
            parent_path=build_parent_path(None, outline.path),
            docs_root=config.docs,
            persister=persister,
        )
        for sidebar in outline.sidebars:
            if sidebar.label in report.duplicates.duplicated:
                continue
            layout[sidebar.label] = build_items(sidebar.items or (), context)

    if config.sort_sidebars:
        return dict(sorted(layout.items()))
    return layout


def layout_to_data(layout: LayoutMapping) -> dict[str, list[typ.Any]]:
    """Convert ``layout`` into plain JSON-ready data."""
    return {
        label: [node_to_data(node) for node in nodes]
        for label, nodes in layout.items()
    }


__all__ = ["build_layout", "build_topic_writer", "layout_to_data"]
