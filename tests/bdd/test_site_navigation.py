"""Behaviour tests for navigation across the generated workshop site.

The scenarios in ``site_navigation.feature`` generate the fixture workshop
from ``tests/conftest.py`` and then inspect the written pages with
BeautifulSoup: the first exercise points back to ``index.html``, the last has
no "next" control, the landing page lists every exercise in order, and no
page still links to a ``.md`` source.
"""

from __future__ import annotations

import typing as typ
from pathlib import Path

import pytest
from bs4 import BeautifulSoup
from pytest_bdd import given, scenarios, then, when

from workshop_pages.generator import SiteGenerator

if typ.TYPE_CHECKING:
    from workshop_pages.config import SiteConfig

FEATURE_FILE = Path(__file__).resolve().parents[2] / "features" / "site_navigation.feature"
scenarios(FEATURE_FILE)


@pytest.fixture
def scenario_state() -> dict[str, object]:
    """Return a mutable dict used to share scenario state across BDD steps."""
    return {}


def _page(scenario_state: dict[str, object], filename: str) -> BeautifulSoup:
    output_dir = typ.cast("Path", scenario_state["output_dir"])
    html = (output_dir / filename).read_text(encoding="utf-8")
    return BeautifulSoup(html, "html.parser")


@given("a workshop with three exercises")
def given_workshop(
    site_config: SiteConfig,
    exercises_dir: Path,
    tmp_path: Path,
    scenario_state: dict[str, object],
) -> None:
    """Record the fixture workshop configuration and source directory."""
    scenario_state["config"] = site_config
    scenario_state["source_dir"] = exercises_dir
    scenario_state["output_dir"] = tmp_path / "website"


@when("I generate the site")
def when_generate(scenario_state: dict[str, object]) -> None:
    """Run the full generation pipeline for the recorded workshop."""
    generator = SiteGenerator(
        typ.cast("SiteConfig", scenario_state["config"]),
        source_dir=typ.cast("Path", scenario_state["source_dir"]),
        output_dir=typ.cast("Path", scenario_state["output_dir"]),
    )
    scenario_state["result"] = generator.run()


@then("the first exercise links back to the landing page")
def then_first_links_home(scenario_state: dict[str, object]) -> None:
    """The first page's previous control targets ``index.html``."""
    nav = _page(scenario_state, "00-setup.html").select_one("nav.exercise-nav")
    assert nav is not None, "expected a bottom navigation strip"
    previous = nav.select_one("a.nav-prev")
    assert previous is not None
    assert previous["href"] == "index.html"
    assert "Home" in previous.get_text()


@then("the last exercise has no next link")
def then_last_has_no_next(scenario_state: dict[str, object]) -> None:
    """The final page only offers a way back."""
    nav = _page(scenario_state, "02-parser.html").select_one("nav.exercise-nav")
    assert nav is not None
    assert nav.select_one("a.nav-next") is None, "last exercise must not link forward"
    assert nav.select_one("a.nav-prev")["href"] == "01-build.html"


@then("the landing page lists the exercises in order")
def then_index_lists_exercises(scenario_state: dict[str, object]) -> None:
    """Cards on the landing page follow ascending exercise order."""
    cards = _page(scenario_state, "index.html").select(".exercise-card h3 a")
    assert [a["href"] for a in cards] == [
        "00-setup.html",
        "01-build.html",
        "02-parser.html",
    ]


@then("no generated page links to a markdown source")
def then_no_markdown_links(scenario_state: dict[str, object]) -> None:
    """Every relative link has been rewritten to an ``.html`` target."""
    output_dir = typ.cast("Path", scenario_state["output_dir"])
    for page in sorted(output_dir.glob("*.html")):
        soup = _page(scenario_state, page.name)
        stale = [a["href"] for a in soup.select("a[href]") if ".md" in a["href"]]
        assert not stale, f"{page.name} still links to markdown sources: {stale}"
