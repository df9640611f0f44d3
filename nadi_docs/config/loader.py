"""Load site configuration YAML into typed dataclasses."""

from __future__ import annotations

import collections.abc as cabc
import typing as typ
from pathlib import Path

from ruamel.yaml import YAML

from ..errors import SiteConfigError
from ..versions import VersionRegistry
from .helpers import (
    _build_nav_links,
    _build_navigation_tree,
    _optional_str,
    _require_str,
)
from .models import SiteConfig


def load_site_config(path: Path) -> SiteConfig:
    """Load the YAML configuration describing the versioned docs site.

    Parameters
    ----------
    path : Path
        Filesystem path to the YAML configuration file (for example,
        ``config/site.yaml``).

    Returns
    -------
    SiteConfig
        Parsed configuration: site metadata, version registry, navigation
        tree, and build directories.

    Raises
    ------
    FileNotFoundError
        If the configuration file does not exist at ``path``.
    TypeError
        If the top-level YAML structure is not a mapping.
    SiteConfigError
        If required sections or fields are missing or invalid (for example,
        no versions, a missing ``site.base``, or a malformed sidebar section).
    YAMLError
        If the YAML content cannot be parsed by the underlying loader.

    Examples
    --------
    >>> from pathlib import Path
    >>> from nadi_docs.config import load_site_config
    >>> config = load_site_config(Path("config/site.yaml"))  # doctest: +SKIP
    >>> config.versions.current()  # doctest: +SKIP
    '2.0'
    """
    if not path.exists():
        msg = f"Configuration file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):  # pragma: no cover - config error guard
        msg = "Top-level YAML structure must be a mapping."
        raise TypeError(msg)
    raw: dict[str, typ.Any] = dict(loaded)

    site_raw = raw.get("site")
    if not isinstance(site_raw, cabc.Mapping):
        msg = "Configuration must contain a 'site' mapping."
        raise SiteConfigError(msg)

    base_path = _require_str(site_raw, "base", "site")
    versions = _build_versions(raw.get("versions"))
    navigation = _build_navigation_tree(raw.get("sidebar"))
    nav_links = _build_nav_links(raw.get("nav"))

    menu_raw = raw.get("version_menu") or {}
    if not isinstance(menu_raw, cabc.Mapping):
        msg = "'version_menu' must be a mapping."
        raise SiteConfigError(msg)

    return SiteConfig(
        title=_optional_str(site_raw.get("title")) or "Documentation",
        description=_optional_str(site_raw.get("description")) or "",
        base_path=base_path,
        versions=versions,
        navigation=navigation,
        nav_links=nav_links,
        source_dir=Path(site_raw.get("source_dir", "docs")),
        output_dir=Path(site_raw.get("output_dir", "public")),
        clean_urls=bool(site_raw.get("clean_urls", True)),
        version_menu_link=_optional_str(menu_raw.get("current_link")) or "/",
        url=_optional_str(site_raw.get("url")),
    )


def _build_versions(payload: object) -> VersionRegistry:
    """Build the VersionRegistry from the ``versions`` list.

    YAML reads an unquoted ``1.10`` as the float ``1.1``, so floats are
    refused rather than guessed at. Integers are accepted as written.
    """
    if not isinstance(payload, list) or not payload:
        msg = "'versions' must be a non-empty list of version identifiers."
        raise SiteConfigError(msg)
    identifiers: list[str] = []
    for entry in payload:
        match entry:
            case bool() | None:
                msg = f"Invalid version identifier {entry!r}."
                raise SiteConfigError(msg)
            case float():
                msg = (
                    f"Version identifier {entry!r} was read as a number; quote it "
                    "in the configuration, for example '1.10'."
                )
                raise SiteConfigError(msg)
            case str() | int():
                identifiers.append(str(entry).strip())
            case _:
                msg = f"Invalid version identifier {entry!r}."
                raise SiteConfigError(msg)
    return VersionRegistry(identifiers)


__all__ = ["load_site_config"]
