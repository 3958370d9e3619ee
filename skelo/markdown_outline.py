r"""Recover outline files from an existing Markdown documentation tree.

This module powers ``skelo outline``. It reads a site generator's sidebars
mapping (JSON or YAML), opens the Markdown document behind every doc id, and
turns each document's front matter and headings back into outline items.
The result is one ``<slug>.outline.yaml`` file per sidebar, ready to be fed
to ``skelo build``.

Example
-------
>>> from skelo.markdown_outline import extract_markdown_structure
>>> extract_markdown_structure("# Install\n\n## Linux\n### Debian\n## macOS\n")
{'label': 'Install', 'headings': [{'label': 'Linux', 'items': ['Debian']}, 'macOS']}
"""

from __future__ import annotations

import collections.abc as cabc
import dataclasses as dc
import logging
import posixpath
import re
import typing as typ
from pathlib import Path

import frontmatter
from ruamel.yaml import YAML

from skelo._constants import OUTLINE_FILENAME_TEMPLATE, TOPIC_EXTENSION
from skelo.outline.models import OutlineValidationError
from skelo.paths import ensure_extension, slugify

logger = logging.getLogger(__name__)

HEADING_PATTERN = re.compile(r"^(#{1,6})[ \t]*(.*?)[ \t]*#*[ \t]*$", re.MULTILINE)
FENCED_BLOCK_PATTERN = re.compile(r"^(```|~~~).*?^\1[ \t]*$", re.MULTILINE | re.DOTALL)

OutlineEntry = str | dict[str, typ.Any]


@dc.dataclass(slots=True)
class _Heading:
    level: int
    text: str


def _collect_headings(content: str) -> list[_Heading]:
    """Return ATX headings outside fenced code blocks."""
    visible = FENCED_BLOCK_PATTERN.sub("", content)
    return [
        _Heading(level=len(match.group(1)), text=match.group(2).strip())
        for match in HEADING_PATTERN.finditer(visible)
        if match.group(2).strip()
    ]


def _build_tree(
    headings: list[_Heading], index: int, level: int
) -> tuple[list[OutlineEntry], int]:
    """Nest ``headings`` from ``index`` while they sit at ``level`` or deeper."""
    items: list[OutlineEntry] = []
    while index < len(headings) and headings[index].level >= level:
        heading = headings[index]
        index += 1
        if index < len(headings) and headings[index].level > heading.level:
            children, index = _build_tree(headings, index, headings[index].level)
            items.append({"label": heading.text, "items": children})
        else:
            items.append(heading.text)
    return items, index


def _text(value: object) -> str | None:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def extract_markdown_structure(markdown: str) -> OutlineEntry:
    """Return the outline entry describing a Markdown document.

    The label comes from ``sidebar_label``, then ``title`` in the front
    matter, then the first level-one heading. Level-two and deeper headings
    become a nested ``headings`` list. Remaining front matter keys are kept,
    and ``title`` is kept when it differs from the label. A document that
    yields nothing but a label is returned as the bare label string.

    Raises
    ------
    TypeError
        If ``markdown`` is not a string.
    OutlineValidationError
        If no title can be found in the front matter or the headings.
    """
    if not isinstance(markdown, str):
        msg = "Invalid input: Markdown content must be a string."
        raise TypeError(msg)

    post = frontmatter.loads(markdown)
    metadata: dict[str, typ.Any] = dict(post.metadata)
    sidebar_label = _text(metadata.pop("sidebar_label", None))
    front_title = _text(metadata.pop("title", None))

    headings = _collect_headings(post.content)
    top_level = next((heading for heading in headings if heading.level == 1), None)
    nested = [heading for heading in headings if heading.level > 1]

    title = top_level.text if top_level else front_title
    label = sidebar_label or front_title or title
    if not label:
        msg = (
            "Unable to determine title. Please provide a title in frontmatter "
            "or a heading."
        )
        raise OutlineValidationError(msg)

    outline: dict[str, typ.Any] = dict(metadata)
    outline["label"] = label
    if front_title and front_title != label:
        outline["title"] = front_title
    if nested:
        tree, _ = _build_tree(nested, 0, min(heading.level for heading in nested))
        outline["headings"] = tree

    if list(outline) == ["label"]:
        return label
    return outline


def load_sidebars_mapping(path: Path) -> dict[str, list[typ.Any]]:
    """Load a sidebars mapping (sidebar name to item list) from JSON or YAML."""
    loader = YAML(typ="safe")
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle)
    if not isinstance(loaded, dict) or not all(
        isinstance(items, list) for items in loaded.values()
    ):
        msg = f"Sidebars file '{path}' must map sidebar names to lists of items."
        raise OutlineValidationError(msg)
    return {str(name): items for name, items in loaded.items()}


def _doc_entry(doc_id: str, docs_dir: Path) -> OutlineEntry:
    """Return the outline entry for the Markdown document behind ``doc_id``."""
    source = docs_dir / ensure_extension(doc_id, TOPIC_EXTENSION)
    try:
        entry = extract_markdown_structure(source.read_text(encoding="utf-8"))
    except FileNotFoundError:
        logger.warning("Document not found for %r at %s", doc_id, source)
        entry = posixpath.basename(doc_id)

    directory, basename = posixpath.split(doc_id)
    label = entry if isinstance(entry, str) else entry["label"]
    location: dict[str, str] = {}
    if directory:
        location["path"] = directory
    if basename != slugify(label):
        location["id"] = basename
    if not location:
        return entry
    if isinstance(entry, str):
        return {"label": entry, **location}
    return {**entry, **location}


def _convert_item(item: object, docs_dir: Path) -> OutlineEntry | None:
    match item:
        case str():
            return _doc_entry(item, docs_dir)
        case {"type": "doc", "id": str() as doc_id}:
            return _doc_entry(doc_id, docs_dir)
        case {"type": "category", "label": str() as label, "items": list() as items}:
            return {"label": label, "items": _convert_items(items, docs_dir)}
        case {"type": "link", "label": str() as label, "href": str() as href}:
            link: dict[str, typ.Any] = {"label": label, "href": href}
            if isinstance(item.get("title"), str):
                link["title"] = item["title"]
            return link
        case _:
            logger.warning("Skipping unsupported sidebar item %r", item)
            return None


def _convert_items(items: cabc.Iterable[object], docs_dir: Path) -> list[OutlineEntry]:
    converted = (_convert_item(item, docs_dir) for item in items)
    return [entry for entry in converted if entry is not None]


def build_outline_documents(
    sidebars: cabc.Mapping[str, list[typ.Any]], docs_dir: Path
) -> dict[str, dict[str, typ.Any]]:
    """Convert a sidebars mapping into one outline document per sidebar.

    Parameters
    ----------
    sidebars : Mapping[str, list]
        Sidebar name to items: doc ids, ``doc``/``category``/``link`` objects.
    docs_dir : Path
        Directory holding the Markdown documents referenced by doc ids.

    Returns
    -------
    dict[str, dict]
        Outline documents keyed by sidebar name.
    """
    return {
        name: {"sidebars": [{"label": name, "items": _convert_items(items, docs_dir)}]}
        for name, items in sidebars.items()
    }


def _build_roundtrip_yaml() -> YAML:
    yaml = YAML()
    yaml.width = 120
    yaml.indent(mapping=2, sequence=4, offset=2)
    return yaml


def write_outline_files(
    documents: cabc.Mapping[str, cabc.Mapping[str, typ.Any]], target_dir: Path
) -> list[Path]:
    """Write each outline document to ``target_dir/<slug>.outline.yaml``."""
    yaml = _build_roundtrip_yaml()
    target_dir.mkdir(parents=True, exist_ok=True)
    written: list[Path] = []
    for name, document in documents.items():
        slug = slugify(name) or "sidebar"
        path = target_dir / OUTLINE_FILENAME_TEMPLATE.format(slug=slug)
        with path.open("w", encoding="utf-8") as handle:
            yaml.dump(dict(document), handle)
        written.append(path)
    return written


__all__ = [
    "build_outline_documents",
    "extract_markdown_structure",
    "load_sidebars_mapping",
    "write_outline_files",
]
