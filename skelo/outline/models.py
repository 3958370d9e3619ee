"""Typed structures shared by the outline normalizer and sidebar builder."""

from __future__ import annotations

import dataclasses as dc
import enum
import typing as typ


class OutlineValidationError(ValueError):
    """Raised when an outline item or outline file has an invalid shape."""


class ItemType(enum.Enum):
    """Variant tag derived from the shape of a sidebar item.

    ``INVALID_ITEM`` and ``UNKNOWN`` only exist during classification and are
    never emitted into a built sidebar tree.
    """

    CATEGORY = "category"
    TOPIC = "topic"
    LINK = "link"
    INVALID_ITEM = "invalid_item"
    UNKNOWN = "unknown"


@dc.dataclass(frozen=True, slots=True)
class NormalizedItem:
    """Canonical outline item produced by :func:`skelo.outline.normalize_item`.

    Attributes
    ----------
    label : str
        Trimmed, non-empty display label.
    items : tuple[NormalizedItem, ...] or None
        Children that turn the item into a category.
    headings : tuple[NormalizedItem, ...] or None
        Sub-headings rendered into a topic document.
    href : str or None
        Target of a link item.
    path, id, slug : str or None
        Optional inputs for topic path resolution.
    title : str or None
        Optional link title or document title.
    extra : dict[str, object]
        Any other properties from the source, passed through untouched.
    """

    label: str
    items: tuple[NormalizedItem, ...] | None = None
    headings: tuple[NormalizedItem, ...] | None = None
    href: str | None = None
    path: str | None = None
    id: str | None = None
    slug: str | None = None
    title: str | None = None
    extra: dict[str, typ.Any] = dc.field(default_factory=dict)

    def as_dict(self) -> dict[str, typ.Any]:
        """Return a plain mapping that :func:`normalize_item` accepts again."""
        payload: dict[str, typ.Any] = dict(self.extra)
        payload["label"] = self.label
        if self.items is not None:
            payload["items"] = [child.as_dict() for child in self.items]
        if self.headings is not None:
            payload["headings"] = [child.as_dict() for child in self.headings]
        for name in ("href", "path", "id", "slug", "title"):
            value = getattr(self, name)
            if value is not None:
                payload[name] = value
        return payload


@dc.dataclass(frozen=True, slots=True)
class LinkNode:
    """Link entry emitted verbatim into the sidebar tree."""

    label: str
    href: str
    title: str | None = None

    def as_dict(self) -> dict[str, typ.Any]:
        """Return the site-generator representation of the link."""
        payload: dict[str, typ.Any] = {
            "type": "link",
            "label": self.label,
            "href": self.href,
        }
        if self.title is not None:
            payload["title"] = self.title
        return payload


@dc.dataclass(frozen=True, slots=True)
class CategoryNode:
    """Collapsible group of nested sidebar nodes."""

    label: str
    items: tuple[OutputNode, ...] = ()

    def as_dict(self) -> dict[str, typ.Any]:
        """Return the site-generator representation of the category."""
        return {
            "type": "category",
            "label": self.label,
            "items": [node_to_data(child) for child in self.items],
        }


# Topics are emitted as their resolved href string.
OutputNode = CategoryNode | LinkNode | str

LayoutMapping = dict[str, list[OutputNode]]


def node_to_data(node: OutputNode) -> str | dict[str, typ.Any]:
    """Convert a built node into JSON-ready data."""
    match node:
        case str():
            return node
        case CategoryNode() | LinkNode():
            return node.as_dict()
        case _:  # pragma: no cover - closed union
            msg = f"Unsupported sidebar node: {node!r}"
            raise TypeError(msg)


@dc.dataclass(frozen=True, slots=True)
class SidebarsFile:
    """Normalized contents of a single outline file."""

    filename: str
    sidebars: tuple[NormalizedItem, ...]
    path: str | None = None
    extra: dict[str, typ.Any] = dc.field(default_factory=dict)


__all__ = [
    "CategoryNode",
    "ItemType",
    "LayoutMapping",
    "LinkNode",
    "NormalizedItem",
    "OutlineValidationError",
    "OutputNode",
    "SidebarsFile",
    "node_to_data",
]
