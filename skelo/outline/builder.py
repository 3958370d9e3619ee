"""Recursive construction of sidebar trees from normalized outline items.

The builder walks a list of :class:`~skelo.outline.models.NormalizedItem`
objects, classifies each one, and emits the matching output node:

* categories become :class:`~skelo.outline.models.CategoryNode` instances whose
  children are built with an extended parent path;
* links become :class:`~skelo.outline.models.LinkNode` instances;
* topics become their resolved href string, and the topic document is handed
  to the persister carried by the :class:`BuildContext`.

Keeping persistence behind the context means the tree can be built in tests
without touching the filesystem.

Example
-------
>>> from skelo.outline import BuildContext, build_items, normalize_item
>>> item = normalize_item({"Guides": ["Install"]})
>>> build_items(item.items, BuildContext(parent_path="docs-a"))
['docs-a/install']
"""

from __future__ import annotations

import dataclasses as dc
import logging
import typing as typ
from pathlib import Path

from skelo.paths import build_parent_path, join_path, slugify

from .classify import classify
from .models import (
    CategoryNode,
    ItemType,
    LinkNode,
    NormalizedItem,
    OutputNode,
)
from .normalize import normalize_item

if typ.TYPE_CHECKING:
    import collections.abc as cabc

logger = logging.getLogger(__name__)


class TopicPersister(typ.Protocol):
    """Collaborator that writes the document backing a topic."""

    def save(self, item: NormalizedItem, href: str, docs_root: Path) -> object:
        """Persist ``item`` below ``docs_root`` at the path derived from ``href``."""
        ...


@dc.dataclass(frozen=True, slots=True)
class BuildContext:
    """State threaded through a recursive :func:`build_items` call.

    Attributes
    ----------
    parent_path : str
        Slash-separated prefix applied to topic hrefs at this depth.
    docs_root : Path
        Root directory handed to the persister for topic documents.
    persister : TopicPersister or None
        Receives every resolved topic; ``None`` builds the tree without
        writing anything.
    """

    parent_path: str = ""
    docs_root: Path = Path("docs")
    persister: TopicPersister | None = None

    def child(self, item_path: str | None) -> BuildContext:
        """Return a context whose parent path includes ``item_path``."""
        return dc.replace(
            self, parent_path=build_parent_path(self.parent_path, item_path)
        )


def topic_identifier(item: NormalizedItem) -> str:
    """Return ``id``, else ``slug``, else the slugified label."""
    return item.id or item.slug or slugify(item.label)


def topic_href(item: NormalizedItem, parent_path: str | None) -> str:
    """Resolve the href for a topic below ``parent_path``.

    Examples
    --------
    >>> from skelo.outline import normalize_item
    >>> topic_href(normalize_item({"label": "T", "path": "sub"}), "root")
    'root/sub/t'
    """
    return join_path(parent_path, item.path, topic_identifier(item))


def build_items(
    items: cabc.Iterable[NormalizedItem], context: BuildContext
) -> list[OutputNode]:
    """Build output nodes for ``items``, skipping unclassifiable entries.

    Parameters
    ----------
    items : Iterable[NormalizedItem]
        Normalized outline items in sidebar order.
    context : BuildContext
        Parent path, docs root, and optional topic persister.

    Returns
    -------
    list[OutputNode]
        Category and link nodes plus topic href strings, in input order.
        Items classified as ``INVALID_ITEM`` or ``UNKNOWN`` are dropped, as
        are topics whose identifier is empty.
    """
    nodes: list[OutputNode] = []
    for raw in items:
        kind = classify(raw)
        if kind in (ItemType.INVALID_ITEM, ItemType.UNKNOWN):
            logger.debug("Skipping unclassifiable sidebar item %r", raw)
            continue
        item = raw if isinstance(raw, NormalizedItem) else normalize_item(raw)
        node = _build_node(kind, item, context)
        if node is not None:
            nodes.append(node)
    return nodes


def _build_node(
    kind: ItemType, item: NormalizedItem, context: BuildContext
) -> OutputNode | None:
    match kind:
        case ItemType.CATEGORY:
            return CategoryNode(
                label=item.label,
                items=tuple(build_items(item.items or (), context.child(item.path))),
            )
        case ItemType.LINK:
            return LinkNode(label=item.label, href=item.href or "", title=item.title)
        case ItemType.TOPIC:
            return _build_topic(item, context)
        case ItemType.INVALID_ITEM | ItemType.UNKNOWN:  # pragma: no cover
            msg = f"Cannot build a sidebar node for {kind.name}."
            raise ValueError(msg)
        case _:  # pragma: no cover - closed enum
            typ.assert_never(kind)


def _build_topic(item: NormalizedItem, context: BuildContext) -> str | None:
    if not topic_identifier(item):
        logger.warning("Skipping topic %r with an empty identifier", item.label)
        return None
    href = topic_href(item, context.parent_path)
    if context.persister is not None:
        context.persister.save(item, href, context.docs_root)
    return href


__all__ = [
    "BuildContext",
    "TopicPersister",
    "build_items",
    "topic_href",
    "topic_identifier",
]
