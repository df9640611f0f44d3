"""Common literal values used across nadi_docs.

These constants keep frontmatter keys and artefact filenames centralized so the
resolver, the build, templates, and tests all agree on them.

Examples
--------
>>> from nadi_docs import _constants
>>> _constants.DOCSEARCH_VERSION_META
'docsearch:version'
"""

from pathlib import Path

META_KEY = "meta"
CANONICAL_URL_KEY = "canonicalUrl"
DOCSEARCH_VERSION_META = "docsearch:version"

DEFAULT_CONFIG = Path("config/site.yaml")
PAGE_META_FILENAME = "page-meta.json"
SIDEBAR_FILENAME = "sidebar.json"
