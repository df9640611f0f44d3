"""Render a page's resolved metadata as HTML ``<head>`` tags.

The rendering host owns the full page template; this module only turns the
``meta`` list and ``canonicalUrl`` that the metadata phase left in a page's
frontmatter into the tags the host splices into ``<head>``.

>>> renderer = HeadTagRenderer()
>>> print(renderer.render({"canonicalUrl": "docs/2.0/installation"}))
<link rel="canonical" href="/docs/2.0/installation">
"""

from __future__ import annotations

import collections.abc as cabc
import typing as typ
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape

from ._constants import CANONICAL_URL_KEY, META_KEY


def canonical_href(canonical_url: str, site_url: str | None = None) -> str:
    """Return the ``href`` for a site-relative canonical URL.

    Without ``site_url`` the link is root-relative; with it the link is
    absolute on that origin.
    """
    path = canonical_url.lstrip("/")
    if site_url:
        return f"{site_url.rstrip('/')}/{path}"
    return f"/{path}"


class HeadTagRenderer:
    """Render ``<meta>`` and canonical ``<link>`` tags for a page."""

    def __init__(
        self, *, site_url: str | None = None, templates_dir: Path | None = None
    ) -> None:
        """Initialize the renderer and its Jinja environment.

        Parameters
        ----------
        site_url : str, optional
            Public origin of the site (``"https://docs.nadi.pro"``). When set,
            canonical links are absolute.
        templates_dir : Path, optional
            Directory containing ``head_tags.jinja``. Defaults to
            ``nadi_docs/templates``.
        """
        self.site_url = site_url
        self.templates_dir = templates_dir or Path(__file__).parent / "templates"
        self.env = Environment(
            loader=FileSystemLoader(str(self.templates_dir)),
            autoescape=select_autoescape(["html", "xml", "jinja"]),
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.template = self.env.get_template("head_tags.jinja")

    def render(self, frontmatter: cabc.Mapping[str, typ.Any]) -> str:
        """Return the head tags for ``frontmatter``, one per line."""
        canonical = frontmatter.get(CANONICAL_URL_KEY)
        context = {
            "meta": frontmatter.get(META_KEY) or [],
            "canonical_href": (
                canonical_href(canonical, self.site_url) if canonical else None
            ),
        }
        return self.template.render(**context).strip()


__all__ = ["HeadTagRenderer", "canonical_href"]
