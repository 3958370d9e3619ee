"""Write Markdown skeletons for sidebar topics.

Each topic resolved by the sidebar builder gets a Markdown document beneath
the docs root. The document is rendered from the ``topic`` template, with
every outline heading rendered through the ``heading`` template first so the
nesting of ``headings`` becomes ``##``, ``###``, and deeper sections.
"""

from __future__ import annotations

import logging
import posixpath
import typing as typ
from pathlib import Path

from skelo._constants import TOPIC_EXTENSION
from skelo.config import TemplateNames
from skelo.paths import ensure_extension, path_slugify

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from skelo.outline.models import NormalizedItem
    from skelo.templates import TemplateRenderer

logger = logging.getLogger(__name__)

FIRST_HEADING_LEVEL = 2


def topic_document_path(docs_root: Path, href: str) -> Path:
    """Return the Markdown file location for a topic ``href``.

    Directory segments are slugified; the final segment is kept as written
    and given a ``.md`` extension when it lacks one.

    Examples
    --------
    >>> from pathlib import Path
    >>> topic_document_path(Path("docs"), "Guides/install").as_posix()
    'docs/guides/install.md'
    """
    directory = path_slugify(href)
    filename = ensure_extension(posixpath.basename(href), TOPIC_EXTENSION)
    if directory:
        return docs_root / directory / filename
    return docs_root / filename


class MarkdownTopicWriter:
    """Topic persister that renders templates into the docs tree."""

    def __init__(
        self,
        renderer: TemplateRenderer,
        *,
        template_names: TemplateNames | None = None,
        overwrite: bool = False,
    ) -> None:
        """Initialize the writer.

        Parameters
        ----------
        renderer : TemplateRenderer
            Renders the topic and heading templates.
        template_names : TemplateNames, optional
            Template names to use; defaults to ``topic`` and ``heading``.
        overwrite : bool, optional
            Replace existing documents instead of leaving them untouched.
        """
        self.renderer = renderer
        self.template_names = template_names or TemplateNames()
        self.overwrite = overwrite
        self.written: list[Path] = []

    def save(self, item: NormalizedItem, href: str, docs_root: Path) -> Path | None:
        """Render and write the document for ``item`` below ``docs_root``.

        Returns
        -------
        Path or None
            The written file, or ``None`` when an existing document was kept.
        """
        target = topic_document_path(docs_root, href)
        if target.exists() and not self.overwrite:
            logger.debug("Keeping existing topic %s", target)
            return None

        content = self.render_topic(item, href)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(content, encoding="utf-8")
        logger.debug("Wrote topic %s", target)
        self.written.append(target)
        return target

    def render_topic(self, item: NormalizedItem, href: str) -> str:
        """Return the rendered Markdown for ``item``."""
        headings = self._render_headings(item.headings or (), FIRST_HEADING_LEVEL)
        context = {
            "doc_id": posixpath.basename(href),
            "href": href,
            "label": item.label,
            "title": item.title or item.label,
            "description": item.extra.get("description"),
            "headings": "".join(headings).rstrip("\n"),
            "extra": item.extra,
        }
        return self.renderer.render(self.template_names.topic, context)

    def _render_headings(
        self, headings: cabc.Iterable[NormalizedItem], level: int
    ) -> list[str]:
        rendered: list[str] = []
        for heading in headings:
            rendered.append(
                self.renderer.render(
                    self.template_names.heading,
                    {"label": heading.label, "level": level},
                )
            )
            children = heading.items or heading.headings or ()
            rendered.extend(self._render_headings(children, level + 1))
        return rendered


__all__ = ["MarkdownTopicWriter", "topic_document_path"]
