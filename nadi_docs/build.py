"""Run the metadata phase of a docs build and write its artefacts.

The builder walks every page of the Markdown source tree exactly once, lets
the :class:`~nadi_docs.canonical.CanonicalUrlResolver` stamp version tags and
canonical URLs onto the page frontmatter, and writes two JSON artefacts for
the rendering host:

``page-meta.json``
    Route → ``{"meta": [...], "canonicalUrl": ..., "head": "<meta ...>"}``
    for every page the resolver stamped.
``sidebar.json``
    The navigation tree in the host's sidebar shape, the top navigation
    links, and the version dropdown.

>>> from pathlib import Path
>>> from nadi_docs.config import load_site_config
>>> builder = MetadataBuilder(load_site_config(Path("config/site.yaml")))  # doctest: +SKIP
>>> [path.name for path in builder.run()]  # doctest: +SKIP
['page-meta.json', 'sidebar.json']

A resolution fault on any page aborts the build with the offending route in
the error message; nothing is retried.
"""

from __future__ import annotations

import collections.abc as cabc
import json
import logging
import typing as typ

from ._constants import (
    CANONICAL_URL_KEY,
    META_KEY,
    PAGE_META_FILENAME,
    SIDEBAR_FILENAME,
)
from .head import HeadTagRenderer
from .pages import Page, discover_pages

if typ.TYPE_CHECKING:
    from pathlib import Path

    from .config import SiteConfig

logger = logging.getLogger(__name__)


class MetadataBuilder:
    """Resolve page metadata for a site and persist it for the host."""

    def __init__(
        self, site_config: SiteConfig, *, renderer: HeadTagRenderer | None = None
    ) -> None:
        self.site_config = site_config
        self.resolver = site_config.resolver()
        self.renderer = renderer or HeadTagRenderer(site_url=site_config.url)

    def resolve_pages(self, pages: cabc.Iterable[Page]) -> list[Page]:
        """Resolve canonical metadata for each page in place and return them."""
        resolved: list[Page] = []
        for page in pages:
            self.resolver.resolve(page.route_path, page.frontmatter)
            resolved.append(page)
        return resolved

    def collect(self) -> list[Page]:
        """Discover and resolve every page under the configured source dir."""
        pages = discover_pages(
            self.site_config.source_dir, clean_urls=self.site_config.clean_urls
        )
        logger.debug("discovered %d pages in %s", len(pages), self.site_config.source_dir)
        return self.resolve_pages(pages)

    def page_metadata(self, pages: cabc.Iterable[Page]) -> dict[str, dict[str, typ.Any]]:
        """Return the manifest entries for pages carrying a canonical URL."""
        manifest: dict[str, dict[str, typ.Any]] = {}
        for page in pages:
            canonical = page.frontmatter.get(CANONICAL_URL_KEY)
            if canonical is None:
                continue
            manifest[page.route_path] = {
                META_KEY: page.frontmatter.get(META_KEY, []),
                CANONICAL_URL_KEY: canonical,
                "head": self.renderer.render(page.frontmatter),
            }
        return manifest

    def sidebar(self) -> dict[str, typ.Any]:
        """Return the navigation payload consumed by the host theme."""
        site = self.site_config
        return {
            "title": site.title,
            "description": site.description,
            "base": site.base_path,
            "nav": [
                *({"text": link.text, "link": link.link} for link in site.nav_links),
                site.version_menu(),
            ],
            "sidebar": site.navigation.to_sidebar(),
        }

    def run(self) -> list[Path]:
        """Resolve every page and write the JSON artefacts.

        Returns
        -------
        list[Path]
            Paths of the written manifest and sidebar files.

        Raises
        ------
        CanonicalUrlError
            If a page cannot be resolved.
        PageError
            If a page cannot be read.
        """
        pages = self.collect()
        output_dir = self.site_config.output_dir
        output_dir.mkdir(parents=True, exist_ok=True)
        meta_path = output_dir / PAGE_META_FILENAME
        sidebar_path = output_dir / SIDEBAR_FILENAME
        _write_json(meta_path, self.page_metadata(pages))
        _write_json(sidebar_path, self.sidebar())
        return [meta_path, sidebar_path]


def _write_json(path: Path, payload: object) -> None:
    text = json.dumps(payload, indent=2, ensure_ascii=False, default=str)
    path.write_text(f"{text}\n", encoding="utf-8")


__all__ = ["MetadataBuilder"]
