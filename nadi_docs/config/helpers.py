"""Utility helpers shared by the site configuration loader."""

from __future__ import annotations

import collections.abc as cabc
import typing as typ

from ..errors import SiteConfigError
from ..navigation import NavigationItem, NavigationSection, NavigationTree
from .models import NavLinkConfig


def _optional_str(value: object | None) -> str | None:
    """Return a stripped string value or None when empty."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _slug_label(slug: str) -> str:
    """Derive a sidebar label from a legacy page slug."""
    return slug.replace("-", " ").title()


def _join_route(prefix: str, child: str) -> str:
    """Join a legacy child slug onto its sidebar prefix."""
    if child.startswith("/"):
        return child
    return f"{prefix.rstrip('/')}/{child}"


def _build_nav_links(payload: object) -> tuple[NavLinkConfig, ...]:
    """Build the top navigation links from the ``nav`` list."""
    if payload is None:
        return ()
    if not isinstance(payload, list):
        msg = "'nav' must be a list of {text, link} entries."
        raise SiteConfigError(msg)
    links: list[NavLinkConfig] = []
    for index, entry in enumerate(payload):
        match entry:
            case {"text": str(text), "link": str(link)}:
                links.append(NavLinkConfig(text=text, link=link))
            case _:
                msg = f"Nav entry #{index} must define 'text' and 'link'."
                raise SiteConfigError(msg)
    return tuple(links)


def _build_navigation_tree(payload: object) -> NavigationTree:
    """Build a NavigationTree from the ``sidebar`` mapping.

    Each prefix maps to a list of sections in either the current format
    (``text``/``items``/``collapsed``) or the legacy format
    (``title``/``children``/``collapsable``).
    """
    if payload is None:
        return NavigationTree()
    if not isinstance(payload, cabc.Mapping):
        msg = "'sidebar' must map route prefixes to lists of sections."
        raise SiteConfigError(msg)
    sections: dict[str, list[NavigationSection]] = {}
    for prefix, entries in payload.items():
        if not isinstance(entries, list):
            msg = f"Sidebar prefix '{prefix}' must hold a list of sections."
            raise SiteConfigError(msg)
        sections[str(prefix)] = [
            _build_section(str(prefix), index, entry)
            for index, entry in enumerate(entries)
        ]
    return NavigationTree(sections)


def _build_section(prefix: str, index: int, payload: object) -> NavigationSection:
    """Build one NavigationSection, dispatching on the section format."""
    where = f"Sidebar section '{prefix}'[{index}]"
    if not isinstance(payload, cabc.Mapping):
        msg = f"{where} must be a mapping."
        raise SiteConfigError(msg)

    title = _optional_str(payload.get("text")) or _optional_str(payload.get("title"))
    if title is None:
        msg = f"{where} is missing a 'text' or 'title'."
        raise SiteConfigError(msg)

    if "items" in payload:
        items = _build_items(where, payload["items"])
        collapsed = payload.get("collapsed")
        collapsible = collapsed is not None
        collapsed_by_default = bool(collapsed)
    elif "children" in payload:
        items = _build_legacy_items(where, prefix, payload["children"])
        collapsible = bool(payload.get("collapsable", False))
        collapsed_by_default = bool(payload.get("collapsed", False))
    else:
        msg = f"{where} must define 'items' or 'children'."
        raise SiteConfigError(msg)

    return NavigationSection(
        title=title,
        items=items,
        collapsible=collapsible,
        collapsed_by_default=collapsed_by_default,
    )


def _build_items(where: str, payload: object) -> tuple[NavigationItem, ...]:
    if not isinstance(payload, list):
        msg = f"{where} 'items' must be a list."
        raise SiteConfigError(msg)
    items: list[NavigationItem] = []
    for position, entry in enumerate(payload):
        match entry:
            case {"text": str(label), "link": str(link)} if link:
                items.append(NavigationItem(label=label, target_path=link))
            case _:
                msg = f"{where} item #{position} must define 'text' and 'link'."
                raise SiteConfigError(msg)
    return tuple(items)


def _build_legacy_items(
    where: str, prefix: str, payload: object
) -> tuple[NavigationItem, ...]:
    if not isinstance(payload, list):
        msg = f"{where} 'children' must be a list."
        raise SiteConfigError(msg)
    items: list[NavigationItem] = []
    for position, child in enumerate(payload):
        slug = _optional_str(child) if isinstance(child, str) else None
        if slug is None:
            msg = f"{where} child #{position} must be a page slug."
            raise SiteConfigError(msg)
        items.append(
            NavigationItem(label=_slug_label(slug), target_path=_join_route(prefix, slug))
        )
    return tuple(items)


def _require_str(raw: cabc.Mapping[str, typ.Any], key: str, where: str) -> str:
    """Return ``raw[key]`` as a string or raise SiteConfigError."""
    value = raw.get(key)
    if not isinstance(value, str):
        msg = f"'{where}.{key}' is required and must be a string."
        raise SiteConfigError(msg)
    return value


__all__ = [
    "_build_nav_links",
    "_build_navigation_tree",
    "_build_section",
    "_join_route",
    "_optional_str",
    "_require_str",
    "_slug_label",
]
