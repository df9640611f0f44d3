"""Stamp version metadata and canonical URLs onto documentation pages.

Legacy pages are still reachable through search engines and bookmarks. For
every page that lives under a registered version, the resolver tags the page
with the version it documents (so DocSearch can facet on it) and points the
canonical URL at the same page in the current version.

The resolver runs once per page during the metadata phase of a build. It only
touches the ``meta`` and ``canonicalUrl`` keys of the page's frontmatter;
everything else in the record belongs to other extensions.

Examples
--------
>>> from nadi_docs.versions import VersionRegistry
>>> resolver = CanonicalUrlResolver(VersionRegistry(["1.0", "2.0"]), "/docs/")
>>> frontmatter = {"title": "Installation"}
>>> resolver.resolve("/1.0/installation", frontmatter)
'docs/2.0/installation'
>>> frontmatter["meta"]
[{'name': 'docsearch:version', 'content': '1.0.0'}]
"""

from __future__ import annotations

import collections.abc as cabc
import logging
import typing as typ

from ._constants import CANONICAL_URL_KEY, DOCSEARCH_VERSION_META, META_KEY
from .errors import CanonicalUrlError, SiteConfigError
from .versions import PATH_SEPARATOR

if typ.TYPE_CHECKING:
    from .versions import VersionRegistry

logger = logging.getLogger(__name__)


class CanonicalUrlResolver:
    """Compute per-page version tags and canonical URLs.

    Parameters
    ----------
    registry : VersionRegistry
        Published versions; the newest one is the canonical target.
    base_path : str
        Root path the site is served from (``"/docs/"``).

    Raises
    ------
    SiteConfigError
        If ``base_path`` is missing or not a string.
    """

    __slots__ = ("base_path", "registry")

    def __init__(self, registry: VersionRegistry, base_path: str) -> None:
        if not isinstance(base_path, str):
            msg = f"Site base path must be a string, got {base_path!r}."
            raise SiteConfigError(msg)
        self.registry = registry
        self.base_path = base_path

    def resolve(
        self, route_path: str, frontmatter: cabc.MutableMapping[str, typ.Any]
    ) -> str | None:
        """Tag ``frontmatter`` with the page's version and canonical URL.

        Parameters
        ----------
        route_path : str
            Route of the page being built, e.g. ``"/1.0/installation"``.
        frontmatter : MutableMapping[str, Any]
            The page's metadata record. Extended in place.

        Returns
        -------
        str or None
            The canonical URL written to ``frontmatter["canonicalUrl"]``, or
            ``None`` when the page is not under any registered version. In
            that case ``frontmatter`` is left untouched.

        Raises
        ------
        CanonicalUrlError
            If the page cannot be resolved. ``frontmatter`` is not modified.

        Notes
        -----
        Resolving the same page twice is safe: an existing
        ``docsearch:version`` entry is replaced rather than duplicated.
        """
        if not isinstance(route_path, str):
            raise CanonicalUrlError(route_path, "route path must be a string")
        if not isinstance(frontmatter, cabc.MutableMapping):
            reason = f"frontmatter must be a mapping, got {type(frontmatter).__name__}"
            raise CanonicalUrlError(route_path, reason)

        version = self.registry.containing_version(route_path)
        if version is None:
            return None

        entries = _existing_meta(route_path, frontmatter)
        canonical_url = self.canonical_url(route_path, version)
        entry = {
            "name": DOCSEARCH_VERSION_META,
            "content": self.registry.search_version(version),
        }
        logger.debug("%s: version %s, canonical %s", route_path, version, canonical_url)

        if entries is None:
            frontmatter[META_KEY] = [entry]
        else:
            _upsert_meta(entries, entry)
        frontmatter[CANONICAL_URL_KEY] = canonical_url
        return canonical_url

    def canonical_url(self, route_path: str, version: str) -> str:
        """Return ``route_path`` rewritten onto the current version.

        The first delimited ``version`` segment is replaced by the current
        version, the result is joined onto the base path, and one leading
        separator is dropped so the URL is site-relative.

        Raises
        ------
        CanonicalUrlError
            If ``version`` is not a delimited segment of ``route_path``.
        """
        pieces = route_path.split(PATH_SEPARATOR)
        try:
            # Delimited segments only: skip the first and last pieces.
            index = pieces.index(version, 1, max(len(pieces) - 1, 1))
        except ValueError as exc:
            reason = f"version {version!r} is not a segment of the path"
            raise CanonicalUrlError(route_path, reason) from exc
        pieces[index] = self.registry.current()
        rewritten = PATH_SEPARATOR.join(pieces).removeprefix(PATH_SEPARATOR)

        base = self.base_path
        if not base.endswith(PATH_SEPARATOR):
            base = f"{base}{PATH_SEPARATOR}"
        return f"{base}{rewritten}".removeprefix(PATH_SEPARATOR)


def _existing_meta(
    route_path: str, frontmatter: cabc.Mapping[str, typ.Any]
) -> list[typ.Any] | None:
    """Return the page's current ``meta`` list after checking its shape."""
    entries = frontmatter.get(META_KEY)
    if entries is None:
        return None
    if not isinstance(entries, list):
        reason = f"'{META_KEY}' must be a list, got {type(entries).__name__}"
        raise CanonicalUrlError(route_path, reason)
    for entry in entries:
        if not isinstance(entry, cabc.Mapping):
            reason = f"'{META_KEY}' entries must be mappings, got {entry!r}"
            raise CanonicalUrlError(route_path, reason)
    return entries


def _upsert_meta(entries: list[typ.Any], entry: dict[str, str]) -> None:
    for index, existing in enumerate(entries):
        if existing.get("name") == entry["name"]:
            entries[index] = entry
            return
    entries.append(entry)


__all__ = ["CanonicalUrlError", "CanonicalUrlResolver"]
