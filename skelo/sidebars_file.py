"""Render the built layout into the site generator's sidebars file."""

from __future__ import annotations

import json
import typing as typ

from skelo.layout import layout_to_data
from skelo.templates import TemplateRenderer

if typ.TYPE_CHECKING:
    from pathlib import Path

    from skelo.config import SkeloConfig
    from skelo.outline import LayoutMapping


def generate_sidebars_file(
    layout: LayoutMapping,
    config: SkeloConfig,
    *,
    renderer: TemplateRenderer | None = None,
) -> Path:
    """Write ``layout`` to ``config.sidebars_filename`` via the sidebars template.

    The template receives ``sidebars`` (the layout as indented JSON) and
    ``layout`` (the same data as plain Python objects).

    Returns
    -------
    Path
        The written sidebars file.

    Raises
    ------
    FileNotFoundError
        If the sidebars template does not exist.
    OSError
        If the sidebars file cannot be written.
    """
    renderer = renderer or TemplateRenderer(
        config.templates_dir, template_extension=config.template_extension
    )
    data = layout_to_data(layout)
    content = renderer.render(
        config.template_names.sidebars,
        {"sidebars": json.dumps(data, indent=2, ensure_ascii=False), "layout": data},
    )
    output_path = config.sidebars_filename
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(content, encoding="utf-8")
    return output_path


__all__ = ["generate_sidebars_file"]
