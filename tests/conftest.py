"""Shared fixtures for the skelo test suite."""

from __future__ import annotations

import typing as typ
from textwrap import dedent

import pytest

from skelo.config import SkeloConfig

if typ.TYPE_CHECKING:
    from pathlib import Path

    from skelo.outline import NormalizedItem


class RecordingPersister:
    """Topic persister that remembers every topic instead of writing it."""

    def __init__(self) -> None:
        self.saved: list[tuple[str, str]] = []
        self.roots: set[Path] = set()

    def save(self, item: NormalizedItem, href: str, docs_root: Path) -> None:
        self.saved.append((item.label, href))
        self.roots.add(docs_root)


@pytest.fixture
def write_outline(tmp_path: Path) -> typ.Callable[[str, str], Path]:
    """Return a helper that writes dedented outline YAML under ``tmp_path``."""

    def _write(name: str, content: str) -> Path:
        path = tmp_path / "outlines" / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(dedent(content).strip() + "\n", encoding="utf-8")
        return path

    return _write


@pytest.fixture
def recording_persister() -> RecordingPersister:
    """Provide a persister that records topics without touching disk."""
    return RecordingPersister()


@pytest.fixture
def skelo_config(tmp_path: Path) -> SkeloConfig:
    """Build a configuration rooted in a temporary docs tree."""
    return SkeloConfig(
        docs=tmp_path / "docs",
        sidebars_filename=tmp_path / "sidebars.js",
        fallback_patterns=[str(tmp_path / "outlines" / "*.outline.yaml")],
    )
