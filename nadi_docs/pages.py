"""Read documentation pages and their frontmatter from the Markdown source tree.

Each ``.md`` file under the source directory becomes a :class:`Page` with the
route the site serves it from and the YAML frontmatter block at the top of the
file. Routes follow the host's conventions: ``README.md`` and ``index.md``
map to their directory (``1.0/README.md`` → ``/1.0/``) and every other file
maps to its path without the extension (``1.0/installation.md`` →
``/1.0/installation``), or with ``.html`` when clean URLs are disabled.

Examples
--------
>>> from pathlib import PurePosixPath
>>> route_path_for(PurePosixPath("1.0/installation.md"))
'/1.0/installation'
>>> route_path_for(PurePosixPath("guide/index.md"))
'/guide/'
>>> parse_frontmatter("---\\ntitle: Intro\\n---\\n# Intro\\n")
{'title': 'Intro'}
"""

from __future__ import annotations

import collections.abc as cabc
import dataclasses as dc
import re
import typing as typ
from pathlib import Path, PurePosixPath

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from .errors import PageError

INDEX_STEMS = frozenset({"readme", "index"})
FRONTMATTER_PATTERN = re.compile(
    r"\A---[ \t]*\r?\n(?P<body>.*?)^---[ \t]*\r?$", re.DOTALL | re.MULTILINE
)


@dc.dataclass(slots=True)
class Page:
    """A documentation page as seen by the metadata phase of the build.

    Attributes
    ----------
    route_path : str
        Route the page is served from, relative to the site base.
    frontmatter : dict[str, Any]
        Mutable metadata record; extensions add keys to it in place.
    source : Path | None
        Markdown file the page was read from, when known.
    """

    route_path: str
    frontmatter: dict[str, typ.Any] = dc.field(default_factory=dict)
    source: Path | None = None


def route_path_for(relative: PurePosixPath, *, clean_urls: bool = True) -> str:
    """Return the route for a Markdown file relative to the source directory."""
    stem_path = relative.with_suffix("")
    if stem_path.name.lower() in INDEX_STEMS:
        parent = stem_path.parent.as_posix()
        return "/" if parent == "." else f"/{parent}/"
    suffix = "" if clean_urls else ".html"
    return f"/{stem_path.as_posix()}{suffix}"


def parse_frontmatter(text: str, *, source: Path | None = None) -> dict[str, typ.Any]:
    """Return the YAML frontmatter block at the top of ``text``.

    Pages without a block yield an empty dict.

    Raises
    ------
    PageError
        If the block is not valid YAML or does not describe a mapping.
    """
    match = FRONTMATTER_PATTERN.match(text)
    if match is None:
        return {}
    where = source or "<string>"
    loader = YAML(typ="safe")
    loader.version = (1, 2)
    try:
        loaded = loader.load(match.group("body"))
    except YAMLError as exc:
        msg = f"Invalid frontmatter in {where}: {exc}"
        raise PageError(msg) from exc
    if loaded is None:
        return {}
    if not isinstance(loaded, cabc.Mapping):
        msg = f"Frontmatter in {where} must be a mapping."
        raise PageError(msg)
    return dict(loaded)


def discover_pages(source_dir: Path, *, clean_urls: bool = True) -> list[Page]:
    """Read every Markdown page under ``source_dir``, sorted by route.

    Hidden directories (``.vitepress``, ``.vuepress``) hold host
    configuration rather than pages and are skipped.

    Raises
    ------
    FileNotFoundError
        If ``source_dir`` does not exist.
    PageError
        If a page has malformed frontmatter or two files map to one route.
    """
    if not source_dir.is_dir():
        msg = f"Docs source directory '{source_dir}' not found."
        raise FileNotFoundError(msg)

    pages: dict[str, Page] = {}
    for path in sorted(source_dir.rglob("*.md")):
        relative = PurePosixPath(path.relative_to(source_dir).as_posix())
        if any(part.startswith(".") for part in relative.parts):
            continue
        route = route_path_for(relative, clean_urls=clean_urls)
        if route in pages:
            msg = f"Both '{pages[route].source}' and '{path}' map to route '{route}'."
            raise PageError(msg)
        text = path.read_text(encoding="utf-8")
        pages[route] = Page(
            route_path=route,
            frontmatter=parse_frontmatter(text, source=path),
            source=path,
        )
    return [pages[route] for route in sorted(pages)]


__all__ = ["Page", "discover_pages", "parse_frontmatter", "route_path_for"]
