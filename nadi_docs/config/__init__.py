"""Load and validate the docs site configuration YAML.

This subpackage parses the project's ``config/site.yaml`` file and produces a
frozen :class:`SiteConfig`: site metadata, the :class:`VersionRegistry` of
published versions, and the sidebar :class:`NavigationTree` for both the
current and legacy doc generations. The primary entry point is
:func:`load_site_config`, which fails fast with :class:`SiteConfigError` so a
build never starts from a partially valid configuration.

Examples
--------
>>> from pathlib import Path
>>> from nadi_docs.config import load_site_config
>>> site = load_site_config(Path("config/site.yaml"))  # doctest: +SKIP
>>> site.navigation.sections_for("/1.0/")[0].title  # doctest: +SKIP
'Legacy Documentation (v1.0)'
"""

from ..errors import SiteConfigError
from .loader import load_site_config
from .models import NavLinkConfig, SiteConfig

__all__ = [
    "NavLinkConfig",
    "SiteConfig",
    "SiteConfigError",
    "load_site_config",
]
