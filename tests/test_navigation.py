"""Unit tests for the sidebar navigation tree model."""

from __future__ import annotations

import pytest

from nadi_docs.errors import SiteConfigError
from nadi_docs.navigation import NavigationItem, NavigationSection, NavigationTree


@pytest.fixture
def tree() -> NavigationTree:
    """Return a tree with one current-generation and one legacy prefix."""
    return NavigationTree(
        {
            "/sdks/": [
                NavigationSection(
                    title="SDK Overview",
                    items=(NavigationItem("Introduction", "/sdks/"),),
                ),
                NavigationSection(
                    title="PHP",
                    items=(
                        NavigationItem("Installation", "/sdks/php/"),
                        NavigationItem("Sampling", "/sdks/php/sampling"),
                    ),
                    collapsible=True,
                    collapsed_by_default=True,
                ),
            ],
            "/1.0/": [
                NavigationSection(
                    title="Getting Started",
                    items=(NavigationItem("Introduction", "/1.0/introduction"),),
                )
            ],
        }
    )


def test_sections_for_returns_sections_in_rendering_order(
    tree: NavigationTree,
) -> None:
    titles = [section.title for section in tree.sections_for("/sdks/")]
    assert titles == ["SDK Overview", "PHP"], f"unexpected order {titles!r}"


def test_unknown_prefix_yields_empty_sequence(tree: NavigationTree) -> None:
    """Unknown prefixes fall back to the host default instead of failing."""
    assert tree.sections_for("/unknown/") == ()
    assert NavigationTree().sections_for("/guide/") == ()


def test_tree_is_not_mutated_through_source_mapping() -> None:
    """Changing the construction data afterwards must not leak into the tree."""
    source = {"/guide/": [NavigationSection("Guide", ())]}
    tree = NavigationTree(source)
    source["/guide/"].append(NavigationSection("Extra", ()))
    source["/other/"] = []

    assert [section.title for section in tree.sections_for("/guide/")] == ["Guide"]
    assert tree.prefixes() == ("/guide/",)


def test_collapsed_section_must_be_collapsible() -> None:
    with pytest.raises(SiteConfigError, match="not collapsible"):
        NavigationSection("Broken", (), collapsible=False, collapsed_by_default=True)


def test_section_items_are_stored_as_tuple() -> None:
    section = NavigationSection("Guide", [NavigationItem("Intro", "/guide/")])  # type: ignore[arg-type]
    assert section.items == (NavigationItem("Intro", "/guide/"),)


def test_target_paths_and_missing_targets(tree: NavigationTree) -> None:
    assert tree.target_paths() == (
        "/sdks/",
        "/sdks/php/",
        "/sdks/php/sampling",
        "/1.0/introduction",
    )
    missing = tree.missing_targets(["/sdks/", "/sdks/php/", "/1.0/introduction"])
    assert missing == [("/sdks/", "/sdks/php/sampling")]


def test_to_sidebar_matches_host_shape(tree: NavigationTree) -> None:
    """Non-collapsible sections omit ``collapsed`` entirely."""
    sidebar = tree.to_sidebar()
    assert sidebar["/sdks/"] == [
        {"text": "SDK Overview", "items": [{"text": "Introduction", "link": "/sdks/"}]},
        {
            "text": "PHP",
            "collapsed": True,
            "items": [
                {"text": "Installation", "link": "/sdks/php/"},
                {"text": "Sampling", "link": "/sdks/php/sampling"},
            ],
        },
    ]
    assert list(sidebar) == ["/sdks/", "/1.0/"]
