"""Derive the sidebar variant of an outline item from its shape."""

from __future__ import annotations

import collections.abc as cabc

from .models import ItemType, NormalizedItem


def _field(item: NormalizedItem | cabc.Mapping[str, object], name: str) -> object:
    if isinstance(item, NormalizedItem):
        return getattr(item, name)
    return item.get(name)


def classify(item: object) -> ItemType:
    """Return the :class:`ItemType` for ``item``.

    Rules are evaluated in order and the first match wins: anything that is
    not a normalized item or mapping is ``INVALID_ITEM``; a missing or blank
    label is ``UNKNOWN``; a non-empty ``href`` makes a ``LINK`` even when
    children are present; a non-empty ``items`` list makes a ``CATEGORY``;
    everything else, including ``items: []``, is a ``TOPIC``.

    Examples
    --------
    >>> classify({"label": "Docs", "href": "/docs", "items": ["a"]})
    <ItemType.LINK: 'link'>
    >>> classify({"label": "Empty", "items": []})
    <ItemType.TOPIC: 'topic'>
    """
    if not isinstance(item, NormalizedItem | cabc.Mapping):
        return ItemType.INVALID_ITEM

    label = _field(item, "label")
    if not isinstance(label, str) or not label.strip():
        return ItemType.UNKNOWN

    href = _field(item, "href")
    if isinstance(href, str) and href:
        return ItemType.LINK

    items = _field(item, "items")
    if isinstance(items, list | tuple) and items:
        return ItemType.CATEGORY

    return ItemType.TOPIC


__all__ = ["classify"]
