"""Render Jinja templates for sidebars files and topic documents."""

from __future__ import annotations

import collections.abc as cabc
import typing as typ
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, StrictUndefined

from skelo._constants import DEFAULT_TEMPLATE_EXTENSION, DEFAULT_TEMPLATES_DIR
from skelo.paths import ensure_extension


def _build_environment(templates_dir: Path | None = None) -> Environment:
    loader = FileSystemLoader(str(templates_dir)) if templates_dir else None
    return Environment(
        loader=loader,
        autoescape=False,  # noqa: S701 - output is Markdown and JavaScript
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
        undefined=StrictUndefined,
    )


def _check_data(data: object, caller: str) -> cabc.Mapping[str, typ.Any]:
    if not isinstance(data, cabc.Mapping):
        msg = f"{caller}: data must be a mapping"
        raise TypeError(msg)
    return data


def render_literal(template_content: str, data: cabc.Mapping[str, typ.Any]) -> str:
    """Render ``template_content`` with ``data``.

    Raises
    ------
    TypeError
        If ``template_content`` is not a string or ``data`` is not a mapping.
    jinja2.TemplateError
        If the template cannot be compiled or rendered.

    Examples
    --------
    >>> render_literal("Hello, {{ name }}!", {"name": "World"})
    'Hello, World!'
    """
    if not isinstance(template_content, str):
        msg = "render_literal: template_content must be a string"
        raise TypeError(msg)
    context = _check_data(data, "render_literal")
    return _build_environment().from_string(template_content).render(**context)


class TemplateRenderer:
    """Render named templates from a template directory."""

    def __init__(
        self,
        templates_dir: Path | None = None,
        *,
        template_extension: str = DEFAULT_TEMPLATE_EXTENSION,
    ) -> None:
        """Initialize the renderer.

        Parameters
        ----------
        templates_dir : Path, optional
            Directory holding the templates; defaults to the bundled
            ``skelo/templates`` directory.
        template_extension : str, optional
            Extension appended to template names that lack it.
        """
        self.templates_dir = templates_dir or DEFAULT_TEMPLATES_DIR
        self.template_extension = template_extension
        self.env = _build_environment(self.templates_dir)

    def template_path(self, template_name: str) -> Path:
        """Return the file backing ``template_name``."""
        filename = ensure_extension(template_name, self.template_extension)
        return self.templates_dir / filename

    def render(self, template_name: str, data: cabc.Mapping[str, typ.Any]) -> str:
        """Render ``template_name`` with ``data``.

        Raises
        ------
        TypeError
            If ``template_name`` is not a string or ``data`` is not a mapping.
        FileNotFoundError
            If the template file does not exist.
        """
        if not isinstance(template_name, str) or not template_name:
            msg = "render: template_name must be a non-empty string"
            raise TypeError(msg)
        context = _check_data(data, "render")
        path = self.template_path(template_name)
        if not path.is_file():
            msg = f"Template file not found: {path}"
            raise FileNotFoundError(msg)
        template = self.env.get_template(
            ensure_extension(template_name, self.template_extension)
        )
        return template.render(**context)


__all__ = ["TemplateRenderer", "render_literal"]
