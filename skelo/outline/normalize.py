"""Normalize loosely typed outline YAML into :class:`NormalizedItem` trees.

Outline authors may write a sidebar entry as a bare string, as a single-key
mapping whose value lists the children, or as a full mapping with ``label``,
``items``, ``headings``, and ``href`` keys. :func:`normalize_item` folds all
of those shapes into one immutable structure and rejects anything it cannot
interpret. :func:`load_sidebars` applies it to every entry of an outline file.

Examples
--------
>>> from skelo.outline.normalize import normalize_item
>>> normalize_item({"Guides": ["Install", "Configure"]}).items[1].label
'Configure'
"""

from __future__ import annotations

import collections.abc as cabc
import os
import typing as typ
from pathlib import Path

from ruamel.yaml import YAML

from .models import NormalizedItem, OutlineValidationError, SidebarsFile

KNOWN_KEYS = frozenset(
    {"label", "items", "headings", "href", "path", "id", "slug", "title"}
)


def normalize_item(raw: object) -> NormalizedItem:
    """Return the canonical form of a raw outline entry.

    Parameters
    ----------
    raw : object
        A string, a mapping parsed from YAML, or an already normalized item.

    Returns
    -------
    NormalizedItem
        Immutable item whose ``items`` and ``headings`` are normalized
        recursively.

    Raises
    ------
    OutlineValidationError
        If ``raw`` is neither a string nor a mapping, uses the single-key
        shorthand with a non-list value, lacks a usable label, carries
        non-list ``items``/``headings``, or sets both ``items`` and
        ``headings``.
    """
    match raw:
        case NormalizedItem():
            payload: dict[str, typ.Any] = raw.as_dict()
        case str():
            payload = {"label": raw}
        case cabc.Mapping():
            payload = dict(raw)
        case _:
            msg = f"Item must be a string or an object, got {raw!r}."
            raise OutlineValidationError(msg)

    if "label" not in payload and len(payload) == 1:
        key, value = next(iter(payload.items()))
        if not isinstance(value, list):
            msg = (
                f"Single-key item {key!r} must map to a list of items, "
                f"got {type(value).__name__}."
            )
            raise OutlineValidationError(msg)
        payload = {"label": _shorthand_label(key), "items": value}

    label = _validate_label(payload.get("label"))
    items = _normalize_children(payload, "items", label)
    headings = _normalize_children(payload, "headings", label)
    if items is not None and headings is not None:
        msg = f"Item {label!r} cannot have both 'items' and 'headings'."
        raise OutlineValidationError(msg)

    return NormalizedItem(
        label=label,
        items=items,
        headings=headings,
        href=_optional_text(payload, "href", label),
        path=_optional_text(payload, "path", label),
        id=_optional_text(payload, "id", label),
        slug=_optional_text(payload, "slug", label),
        title=_optional_text(payload, "title", label),
        extra={key: value for key, value in payload.items() if key not in KNOWN_KEYS},
    )


def _shorthand_label(key: object) -> object:
    """Return a numeric YAML key such as ``2024`` as its text."""
    if isinstance(key, int | float) and not isinstance(key, bool):
        return str(key)
    return key


def _validate_label(value: object) -> str:
    """Return the trimmed label or raise when it is missing or blank."""
    if not isinstance(value, str) or not value.strip():
        msg = f"Item label must be a non-empty string, got {value!r}."
        raise OutlineValidationError(msg)
    return value.strip()


def _normalize_children(
    payload: cabc.Mapping[str, typ.Any], key: str, label: str
) -> tuple[NormalizedItem, ...] | None:
    """Normalize the child list stored under ``key``, if present."""
    if key not in payload or payload[key] is None:
        return None
    children = payload[key]
    if not isinstance(children, list | tuple):
        msg = f"Item {label!r} has '{key}' that is not a list."
        raise OutlineValidationError(msg)
    return tuple(normalize_item(child) for child in children)


def _optional_text(
    payload: cabc.Mapping[str, typ.Any], key: str, label: str
) -> str | None:
    """Return ``payload[key]`` as text; YAML numbers are stringified."""
    value = payload.get(key)
    match value:
        case None:
            return None
        case str():
            return value
        case bool():
            msg = f"Item {label!r} has a boolean '{key}'."
            raise OutlineValidationError(msg)
        case int() | float():
            return str(value)
        case _:
            msg = f"Item {label!r} has '{key}' that is not a string."
            raise OutlineValidationError(msg)


def read_outline_document(filename: str | os.PathLike[str]) -> dict[str, typ.Any]:
    """Parse an outline YAML file and return its top-level mapping.

    Raises
    ------
    OSError
        If the file cannot be read.
    ruamel.yaml.YAMLError
        If the content is not valid YAML.
    OutlineValidationError
        If the document is not a mapping.
    """
    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with Path(filename).open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle)
    if not isinstance(loaded, dict):
        msg = f"Outline file '{filename}' must contain a top-level mapping."
        raise OutlineValidationError(msg)
    return loaded


def load_sidebars(filename: str | os.PathLike[str]) -> SidebarsFile:
    """Load an outline file and normalize every top-level sidebar entry.

    Parameters
    ----------
    filename : str or PathLike
        Path to the outline YAML document.

    Returns
    -------
    SidebarsFile
        Normalized sidebars plus the file's ``path`` and any other top-level
        properties.

    Raises
    ------
    ValueError
        If ``filename`` is empty or not path-like.
    OutlineValidationError
        If ``sidebars`` is not a list or any entry fails normalization.
    """
    if not isinstance(filename, str | os.PathLike) or not str(filename):
        msg = "Invalid yaml_filename: expected a non-empty string."
        raise ValueError(msg)

    document = read_outline_document(filename)
    raw_sidebars = document.get("sidebars")
    if not isinstance(raw_sidebars, list):
        msg = f"'{filename}': sidebars must be a list of items."
        raise OutlineValidationError(msg)

    path = document.get("path")
    if path is not None and not isinstance(path, str):
        msg = f"'{filename}': path must be a string."
        raise OutlineValidationError(msg)

    return SidebarsFile(
        filename=str(filename),
        sidebars=tuple(normalize_item(entry) for entry in raw_sidebars),
        path=path,
        extra={
            key: value
            for key, value in document.items()
            if key not in {"sidebars", "path"}
        },
    )


__all__ = ["load_sidebars", "normalize_item", "read_outline_document"]
