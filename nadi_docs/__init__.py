"""Metadata build for the versioned Nadi documentation site.

This package loads the site configuration, resolves version tags and
canonical URLs for every documentation page, and exports the sidebar
navigation for the rendering host.

Exports
-------
- ``app``: Cyclopts application entry for subcommands.
- ``main``: Convenience function that invokes the Cyclopts app.

Examples
--------
>>> from nadi_docs import main
>>> main()  # doctest: +SKIP
"""

from __future__ import annotations

from .cli import app, main

__all__ = ["app", "main"]
