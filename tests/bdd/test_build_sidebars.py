"""Behaviour tests for building sidebars from outline files.

The scenarios live in ``features/build_sidebars.feature``. Each one writes
outline YAML into a temporary directory, runs :func:`skelo.layout.build_layout`
with the default Markdown topic writer, and then inspects both the returned
layout and the docs tree.

Usage:
    pytest tests/bdd/test_build_sidebars.py -v
"""

from __future__ import annotations

import typing as typ
from pathlib import Path

import pytest
from pytest_bdd import given, parsers, scenarios, then, when

from skelo.config import SkeloConfig
from skelo.layout import build_layout

FEATURE_FILE = (
    Path(__file__).resolve().parents[2] / "features" / "build_sidebars.feature"
)
scenarios(FEATURE_FILE)


@pytest.fixture
def scenario_state(tmp_path: Path) -> dict[str, typ.Any]:
    """Return a mutable dict shared across the steps of one scenario."""
    return {
        "config": SkeloConfig(
            docs=tmp_path / "docs",
            sidebars_filename=tmp_path / "sidebars.js",
            fallback_patterns=[str(tmp_path / "outlines" / "*.outline.yaml")],
        ),
        "outlines": tmp_path / "outlines",
    }


@given(
    parsers.parse(
        'an outline "{name}" with path "{path}" declaring sidebar "{label}" '
        'with topic "{topic}"'
    )
)
def given_outline(
    scenario_state: dict[str, typ.Any], name: str, path: str, label: str, topic: str
) -> None:
    """Write a single-sidebar outline file."""
    outlines: Path = scenario_state["outlines"]
    outlines.mkdir(parents=True, exist_ok=True)
    (outlines / f"{name}.outline.yaml").write_text(
        f"path: {path}\nsidebars:\n  - {label}:\n      - {topic}\n",
        encoding="utf-8",
    )


@given(parsers.parse('the topic document "{relative}" already contains "{text}"'))
def given_existing_topic(
    scenario_state: dict[str, typ.Any], relative: str, text: str
) -> None:
    """Create a hand-written topic document before the build."""
    config: SkeloConfig = scenario_state["config"]
    target = config.docs / relative
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(f"{text}\n", encoding="utf-8")


@when("the sidebars layout is built")
def when_layout_built(scenario_state: dict[str, typ.Any]) -> None:
    """Build the layout using the fallback outline patterns."""
    scenario_state["layout"] = build_layout(None, scenario_state["config"])


@then(parsers.parse('the layout maps "{label}" to the topic href "{href}"'))
def then_layout_maps(scenario_state: dict[str, typ.Any], label: str, href: str) -> None:
    """Assert the sidebar holds exactly the expected topic."""
    assert scenario_state["layout"][label] == [href]


@then(parsers.parse('the layout has no sidebar "{label}"'))
def then_layout_excludes(scenario_state: dict[str, typ.Any], label: str) -> None:
    """Assert a sidebar label was excluded."""
    assert label not in scenario_state["layout"]


@then(parsers.parse('a topic document exists at "{relative}"'))
def then_topic_exists(scenario_state: dict[str, typ.Any], relative: str) -> None:
    """Assert the topic writer created the document."""
    config: SkeloConfig = scenario_state["config"]
    assert (config.docs / relative).is_file()


@then(parsers.parse('the topic document "{relative}" still contains "{text}"'))
def then_topic_preserved(
    scenario_state: dict[str, typ.Any], relative: str, text: str
) -> None:
    """Assert an existing document was not overwritten."""
    config: SkeloConfig = scenario_state["config"]
    assert (config.docs / relative).read_text(encoding="utf-8") == f"{text}\n"
