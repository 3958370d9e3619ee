"""Behaviour tests for turning Markdown documents back into outlines.

Backed by ``features/outline_recovery.feature``. The scenarios write Markdown
files and a sidebars mapping into a temporary directory, recover outline
files with :mod:`skelo.markdown_outline`, and check that the outlines either
describe the documents or rebuild the original hrefs.
"""

from __future__ import annotations

import typing as typ
from pathlib import Path

import pytest
from pytest_bdd import given, parsers, scenarios, then, when

from skelo.config import SkeloConfig
from skelo.layout import build_layout
from skelo.markdown_outline import build_outline_documents, write_outline_files
from skelo.outline import load_sidebars

FEATURE_FILE = (
    Path(__file__).resolve().parents[2] / "features" / "outline_recovery.feature"
)
scenarios(FEATURE_FILE)


class _NullPersister:
    def save(self, item: object, href: str, docs_root: Path) -> None:
        return None


@pytest.fixture
def scenario_state(tmp_path: Path) -> dict[str, typ.Any]:
    """Return a mutable dict shared across the steps of one scenario."""
    return {
        "docs": tmp_path / "docs",
        "outlines": tmp_path / "outlines",
        "sidebars": {},
    }


@given(parsers.parse('a document "{doc_id}" containing:'))
def given_document(
    scenario_state: dict[str, typ.Any], doc_id: str, docstring: str
) -> None:
    """Write a Markdown document below the docs root."""
    target: Path = scenario_state["docs"] / f"{doc_id}.md"
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(docstring + "\n", encoding="utf-8")


@given(parsers.parse('a sidebars mapping "{name}" listing "{doc_id}"'))
def given_sidebars(scenario_state: dict[str, typ.Any], name: str, doc_id: str) -> None:
    """Register a sidebar referencing one document."""
    scenario_state["sidebars"].setdefault(name, []).append(doc_id)


@when("outline files are recovered")
def when_recovered(scenario_state: dict[str, typ.Any]) -> None:
    """Convert the sidebars mapping into outline files."""
    documents = build_outline_documents(
        scenario_state["sidebars"], scenario_state["docs"]
    )
    scenario_state["written"] = write_outline_files(
        documents, scenario_state["outlines"]
    )


@when("the recovered outlines are built")
def when_rebuilt(scenario_state: dict[str, typ.Any]) -> None:
    """Build a layout from the recovered outline files."""
    config = SkeloConfig(docs=scenario_state["docs"])
    patterns = [str(path) for path in scenario_state["written"]]
    scenario_state["layout"] = build_layout(
        patterns, config, persister=_NullPersister()
    )


@then(
    parsers.parse('the outline "{name}" lists "{label}" with headings "{headings}"')
)
def then_outline_lists(
    scenario_state: dict[str, typ.Any], name: str, label: str, headings: str
) -> None:
    """Assert the recovered outline describes the document."""
    outline = load_sidebars(scenario_state["outlines"] / f"{name}.outline.yaml")
    (sidebar,) = outline.sidebars
    assert sidebar.items is not None
    (entry,) = sidebar.items
    assert entry.label == label
    assert entry.headings is not None
    assert [heading.label for heading in entry.headings] == headings.split(", ")


@then(parsers.parse('the rebuilt sidebar "{name}" holds the topic href "{href}"'))
def then_rebuilt_href(scenario_state: dict[str, typ.Any], name: str, href: str) -> None:
    """Assert the rebuilt layout resolves the original doc id."""
    assert scenario_state["layout"][name] == [href]
