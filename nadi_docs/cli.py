"""Cyclopts CLI entrypoint for the versioned docs metadata build.

The ``docs`` console script defined here loads ``config/site.yaml``, stamps
version tags and canonical URLs onto every documentation page, and writes the
metadata manifest and sidebar export the rendering host consumes. It can also
resolve a single route for inspection and check that every sidebar entry
points at an existing page.

Examples
--------
Run the metadata phase for the default configuration:

>>> from nadi_docs.cli import main
>>> main()  # doctest: +SKIP

Inspect the canonical URL computed for a legacy page:

>>> from nadi_docs.cli import app
>>> app(["resolve", "/1.0/installation"])  # doctest: +SKIP
"""

from __future__ import annotations

import json
import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from ._constants import CANONICAL_URL_KEY, DEFAULT_CONFIG, META_KEY
from .build import MetadataBuilder
from .config import load_site_config
from .head import HeadTagRenderer
from .pages import discover_pages

app = App(name="docs", config=cyclopts.config.Env("INPUT_", command=False))  # type: ignore[unknown-argument]


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


def _print_json(payload: object) -> None:
    print(json.dumps(payload, indent=2, ensure_ascii=False, default=str))


@app.command(help="Resolve canonical metadata for every page and write artefacts.")
def build(
    *,
    config: typ.Annotated[
        Path, Parameter(help="Path to site config", env_var="INPUT_CONFIG")
    ] = DEFAULT_CONFIG,
    output_dir: typ.Annotated[
        Path | None,
        Parameter(help="Override the output folder", env_var="INPUT_OUTPUT_DIR"),
    ] = None,
) -> None:
    """Run the metadata phase for the configured docs site.

    Parameters
    ----------
    config : Path, optional
        Path to the ``site.yaml`` configuration file (overridable via
        ``INPUT_CONFIG``).
    output_dir : Path or None, optional
        Override the configured artefact directory.

    Returns
    -------
    None
        Writes ``page-meta.json`` and ``sidebar.json`` and logs their paths.
    """
    site_config = load_site_config(config).with_output_dir(output_dir)
    for path in MetadataBuilder(site_config).run():
        print(f"wrote {_format_path(path)}")


@app.command(help="Print the version tag and canonical URL for one route.")
def resolve(
    route: str,
    *,
    config: typ.Annotated[
        Path, Parameter(help="Path to site config", env_var="INPUT_CONFIG")
    ] = DEFAULT_CONFIG,
) -> None:
    """Resolve ``route`` against the configured versions and print the result.

    Routes outside every registered version print an empty ``meta`` list and
    no ``canonicalUrl``.
    """
    site_config = load_site_config(config)
    frontmatter: dict[str, typ.Any] = {}
    site_config.resolver().resolve(route, frontmatter)
    renderer = HeadTagRenderer(site_url=site_config.url)
    _print_json(
        {
            "route": route,
            "meta": frontmatter.get(META_KEY, []),
            "canonicalUrl": frontmatter.get(CANONICAL_URL_KEY),
            "head": renderer.render(frontmatter),
        }
    )


@app.command(help="Report sidebar entries that do not point at a page.")
def check(
    *,
    config: typ.Annotated[
        Path, Parameter(help="Path to site config", env_var="INPUT_CONFIG")
    ] = DEFAULT_CONFIG,
) -> None:
    """Verify every sidebar target resolves to a discovered page.

    Raises
    ------
    SystemExit
        With status 1 when at least one sidebar entry is dangling.
    """
    site_config = load_site_config(config)
    pages = discover_pages(site_config.source_dir, clean_urls=site_config.clean_urls)
    missing = site_config.navigation.missing_targets(page.route_path for page in pages)
    if not missing:
        print(f"sidebar ok: {len(site_config.navigation.target_paths())} entries")
        return
    for prefix, target in missing:
        print(f"{prefix}: missing page for {target}")
    raise SystemExit(1)


@app.command(help="Print the sidebar, nav links, and version menu as JSON.")
def sidebar(
    *,
    config: typ.Annotated[
        Path, Parameter(help="Path to site config", env_var="INPUT_CONFIG")
    ] = DEFAULT_CONFIG,
) -> None:
    """Print the navigation payload handed to the host theme."""
    site_config = load_site_config(config)
    _print_json(MetadataBuilder(site_config).sidebar())


def main() -> None:
    """Invoke the Cyclopts application that powers the ``docs`` console command."""
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
