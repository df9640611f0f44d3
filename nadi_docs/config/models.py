"""Typed dataclasses describing the docs site configuration."""

from __future__ import annotations

import dataclasses as dc
import typing as typ
from pathlib import Path

from ..canonical import CanonicalUrlResolver
from ..errors import SiteConfigError
from ..navigation import NavigationTree  # noqa: TC001 - used for runtime type metadata
from ..versions import VersionRegistry  # noqa: TC001 - used for runtime type metadata


@dc.dataclass(frozen=True, slots=True)
class NavLinkConfig:
    """Top navigation bar link."""

    text: str
    link: str


@dc.dataclass(frozen=True, slots=True)
class SiteConfig:
    """Fully resolved site configuration read from ``config/site.yaml``.

    Attributes
    ----------
    title : str
        Site title shown in the header.
    description : str
        Default page description.
    base_path : str
        Root path the site is served from, e.g. ``"/docs/"``.
    versions : VersionRegistry
        Published documentation versions, oldest first.
    navigation : NavigationTree
        Sidebar sections keyed by route prefix.
    nav_links : tuple[NavLinkConfig, ...]
        Top navigation bar links, in display order.
    source_dir : Path
        Directory holding the Markdown page tree.
    output_dir : Path
        Directory that receives build artefacts.
    clean_urls : bool
        Whether page routes omit the ``.html`` suffix.
    version_menu_link : str
        Route of the current version's landing page in the version dropdown.
    url : str | None
        Public origin of the site, used for absolute canonical links.
    """

    title: str
    description: str
    base_path: str
    versions: VersionRegistry
    navigation: NavigationTree
    nav_links: tuple[NavLinkConfig, ...] = ()
    source_dir: Path = Path("docs")
    output_dir: Path = Path("public")
    clean_urls: bool = True
    version_menu_link: str = "/"
    url: str | None = None

    def resolver(self) -> CanonicalUrlResolver:
        """Return a canonical URL resolver bound to this site's versions."""
        return CanonicalUrlResolver(self.versions, self.base_path)

    def version_menu(self) -> dict[str, typ.Any]:
        """Return the navbar version dropdown for this site."""
        return self.versions.version_menu(self.version_menu_link)

    def with_output_dir(self, output_dir: Path | None) -> SiteConfig:
        """Return a copy writing artefacts to ``output_dir`` when provided."""
        if output_dir is None:
            return self
        return dc.replace(self, output_dir=output_dir)


__all__ = ["NavLinkConfig", "SiteConfig", "SiteConfigError"]
