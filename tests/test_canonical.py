"""Unit tests for the canonical URL resolver.

These tests pin the per-page metadata contract: which routes receive a
``docsearch:version`` tag, how the canonical URL is rewritten onto the current
version and joined to the site base, and that re-running the resolver or
hitting a malformed page never leaves half-written metadata behind.

Usage
-----
Run ``pytest tests/test_canonical.py -v`` to execute the suite.
"""

from __future__ import annotations

import pytest

from nadi_docs.canonical import CanonicalUrlResolver
from nadi_docs.errors import CanonicalUrlError, SiteConfigError
from nadi_docs.versions import VersionRegistry

VERSION_META = "docsearch:version"


@pytest.fixture
def resolver() -> CanonicalUrlResolver:
    """Return a resolver for a site with one legacy and one current version."""
    return CanonicalUrlResolver(VersionRegistry(["1.0", "2.0"]), "/docs/")


def test_single_version_keeps_route_and_tags_page() -> None:
    """A page already on the current version canonicalises to itself."""
    resolver = CanonicalUrlResolver(VersionRegistry(["1.0"]), "/docs/")
    frontmatter: dict[str, object] = {}

    result = resolver.resolve("/1.0/installation", frontmatter)

    assert result == "docs/1.0/installation", f"unexpected canonical URL {result!r}"
    assert frontmatter["canonicalUrl"] == "docs/1.0/installation"
    assert frontmatter["meta"] == [{"name": VERSION_META, "content": "1.0.0"}]


def test_legacy_route_points_at_current_version(
    resolver: CanonicalUrlResolver,
) -> None:
    """Legacy pages should declare the current version as canonical."""
    frontmatter: dict[str, object] = {}
    resolver.resolve("/1.0/installation", frontmatter)

    assert frontmatter["canonicalUrl"] == "docs/2.0/installation", (
        f"expected legacy route to move to 2.0, got {frontmatter['canonicalUrl']!r}"
    )
    assert frontmatter["meta"] == [{"name": VERSION_META, "content": "1.0.0"}], (
        "legacy pages are tagged with their own version, not the current one"
    )


def test_unversioned_route_is_left_untouched() -> None:
    """Version-agnostic pages get neither a tag nor a canonical URL."""
    resolver = CanonicalUrlResolver(VersionRegistry(["1.0"]), "/docs/")
    frontmatter = {"title": "Quick Start"}

    assert resolver.resolve("/guide/quick-start", frontmatter) is None
    assert frontmatter == {"title": "Quick Start"}, (
        "expected no meta or canonicalUrl keys on an unversioned page"
    )


def test_existing_meta_entries_are_preserved(resolver: CanonicalUrlResolver) -> None:
    """Entries added by other extensions survive resolution."""
    og_entry = {"name": "og:title", "content": "Installation"}
    frontmatter: dict[str, object] = {"meta": [og_entry], "title": "Installation"}

    resolver.resolve("/1.0/installation", frontmatter)

    assert frontmatter["meta"] == [
        og_entry,
        {"name": VERSION_META, "content": "1.0.0"},
    ]
    assert frontmatter["title"] == "Installation"


def test_resolving_twice_does_not_duplicate_version_tag(
    resolver: CanonicalUrlResolver,
) -> None:
    """Re-running the resolver yields the same URL and a single version tag."""
    frontmatter: dict[str, object] = {}
    first = resolver.resolve("/1.0/installation", frontmatter)
    second = resolver.resolve("/1.0/installation", frontmatter)

    assert first == second == "docs/2.0/installation"
    tags = [entry for entry in frontmatter["meta"] if entry["name"] == VERSION_META]
    assert len(tags) == 1, f"expected exactly one version tag, got {tags!r}"


def test_first_registered_version_wins_when_path_holds_two() -> None:
    """Registry order decides between versions, not position in the path."""
    resolver = CanonicalUrlResolver(VersionRegistry(["1.0", "1.5", "2.0"]), "/docs/")
    frontmatter: dict[str, object] = {}

    resolver.resolve("/1.5/upgrade/1.0/notes", frontmatter)

    assert frontmatter["meta"] == [{"name": VERSION_META, "content": "1.0.0"}]
    assert frontmatter["canonicalUrl"] == "docs/1.5/upgrade/2.0/notes", (
        "only the matched version's segment is rewritten"
    )


def test_only_first_occurrence_of_segment_is_rewritten(
    resolver: CanonicalUrlResolver,
) -> None:
    frontmatter: dict[str, object] = {}
    resolver.resolve("/1.0/changelog/1.0/", frontmatter)
    assert frontmatter["canonicalUrl"] == "docs/2.0/changelog/1.0/"


@pytest.mark.parametrize(
    ("route", "expected"),
    [
        ("/1.0", None),
        ("/docs-1.0/setup", None),
        ("/guide/1.0.1/setup", None),
        ("/1.0/", "docs/2.0/"),
    ],
)
def test_only_delimited_segments_match(
    resolver: CanonicalUrlResolver, route: str, expected: str | None
) -> None:
    """A version must be a whole segment with a separator on both sides."""
    assert resolver.resolve(route, {}) == expected


@pytest.mark.parametrize(
    ("base_path", "expected"),
    [
        ("/docs/", "docs/2.0/installation"),
        ("/docs", "docs/2.0/installation"),
        ("/", "2.0/installation"),
        ("", "2.0/installation"),
    ],
)
def test_base_path_is_joined_without_leading_separator(
    base_path: str, expected: str
) -> None:
    resolver = CanonicalUrlResolver(VersionRegistry(["1.0", "2.0"]), base_path)
    assert resolver.canonical_url("/1.0/installation", "1.0") == expected


def test_undefined_base_path_is_a_configuration_error() -> None:
    with pytest.raises(SiteConfigError, match="base path"):
        CanonicalUrlResolver(VersionRegistry(["1.0"]), None)  # type: ignore[arg-type]


def test_malformed_meta_fails_with_route_and_leaves_page_untouched(
    resolver: CanonicalUrlResolver,
) -> None:
    """A resolution fault names the page and writes nothing."""
    frontmatter: dict[str, object] = {"meta": "not-a-list"}

    with pytest.raises(CanonicalUrlError) as excinfo:
        resolver.resolve("/1.0/installation", frontmatter)

    assert excinfo.value.route_path == "/1.0/installation"
    assert "/1.0/installation" in str(excinfo.value)
    assert frontmatter == {"meta": "not-a-list"}, "expected no partial metadata"


def test_non_mapping_meta_entry_is_a_fault(resolver: CanonicalUrlResolver) -> None:
    frontmatter: dict[str, object] = {"meta": ["og:title"]}
    with pytest.raises(CanonicalUrlError, match="mappings"):
        resolver.resolve("/1.0/installation", frontmatter)
    assert "canonicalUrl" not in frontmatter


def test_non_string_route_is_a_fault(resolver: CanonicalUrlResolver) -> None:
    with pytest.raises(CanonicalUrlError):
        resolver.resolve(None, {})  # type: ignore[arg-type]


@pytest.mark.parametrize("route", ["/1.0/installation", "/guide/intro"])
def test_non_mapping_frontmatter_is_a_fault(
    resolver: CanonicalUrlResolver, route: str
) -> None:
    """Missing frontmatter is reported against the page, versioned or not."""
    with pytest.raises(CanonicalUrlError, match="must be a mapping") as excinfo:
        resolver.resolve(route, None)  # type: ignore[arg-type]

    assert excinfo.value.route_path == route


def test_canonical_url_requires_version_segment(
    resolver: CanonicalUrlResolver,
) -> None:
    with pytest.raises(CanonicalUrlError, match="not a segment"):
        resolver.canonical_url("/guide/intro", "1.0")
