"""Outline normalization and sidebar tree building.

This subpackage holds the pure engine: it turns loosely typed outline YAML
into :class:`NormalizedItem` trees, classifies each item as a category,
topic, or link, builds the sidebar tree, and detects top-level labels that
several outline files declare. File discovery, schema validation, and
rendering live in the surrounding :mod:`skelo` modules.

Examples
--------
>>> from skelo.outline import BuildContext, build_items, normalize_item
>>> sidebar = normalize_item({"label": "Intro", "items": ["Start"]})
>>> build_items(sidebar.items, BuildContext(parent_path="docs-a"))
['docs-a/start']
"""

from .builder import (
    BuildContext,
    TopicPersister,
    build_items,
    topic_href,
    topic_identifier,
)
from .classify import classify
from .duplicates import DuplicateReport, LabelCount, find_duplicates
from .models import (
    CategoryNode,
    ItemType,
    LayoutMapping,
    LinkNode,
    NormalizedItem,
    OutlineValidationError,
    OutputNode,
    SidebarsFile,
    node_to_data,
)
from .normalize import load_sidebars, normalize_item, read_outline_document

__all__ = [
    "BuildContext",
    "CategoryNode",
    "DuplicateReport",
    "ItemType",
    "LabelCount",
    "LayoutMapping",
    "LinkNode",
    "NormalizedItem",
    "OutlineValidationError",
    "OutputNode",
    "SidebarsFile",
    "TopicPersister",
    "build_items",
    "classify",
    "find_duplicates",
    "load_sidebars",
    "node_to_data",
    "normalize_item",
    "read_outline_document",
    "topic_href",
    "topic_identifier",
]
