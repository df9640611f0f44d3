"""Sidebar navigation tree shared by the current and legacy doc generations.

The tree maps a route prefix (``/guide/``, ``/1.0/``) to the ordered sections
rendered in that area's sidebar. It is built once from ``config/site.yaml`` by
:func:`nadi_docs.config.load_site_config` and handed to the rendering host as
plain data; nothing mutates it afterwards.

Examples
--------
>>> tree = NavigationTree(
...     {
...         "/guide/": [
...             NavigationSection(
...                 title="Getting Started",
...                 items=(NavigationItem("Introduction", "/guide/"),),
...             )
...         ]
...     }
... )
>>> [section.title for section in tree.sections_for("/guide/")]
['Getting Started']
>>> tree.sections_for("/unknown/")
()
"""

from __future__ import annotations

import collections.abc as cabc
import dataclasses as dc
import typing as typ
from types import MappingProxyType

from .errors import SiteConfigError


@dc.dataclass(frozen=True, slots=True)
class NavigationItem:
    """A single sidebar entry pointing at a page route."""

    label: str
    target_path: str


@dc.dataclass(frozen=True, slots=True)
class NavigationSection:
    """An ordered group of sidebar entries under a shared heading.

    Attributes
    ----------
    title : str
        Heading shown above the entries.
    items : tuple[NavigationItem, ...]
        Entries in rendering order. Labels may repeat.
    collapsible : bool
        Whether the reader can fold the section away. Non-collapsible
        sections are always expanded.
    collapsed_by_default : bool
        Initial state of a collapsible section.
    """

    title: str
    items: tuple[NavigationItem, ...]
    collapsible: bool = False
    collapsed_by_default: bool = False

    def __post_init__(self) -> None:
        """Reject a folded section that the reader could never expand."""
        if self.collapsed_by_default and not self.collapsible:
            msg = f"Section '{self.title}' is collapsed by default but not collapsible."
            raise SiteConfigError(msg)
        # Accept any iterable of items but store a tuple.
        object.__setattr__(self, "items", tuple(self.items))

    def to_sidebar(self) -> dict[str, typ.Any]:
        """Return the host's sidebar representation of this section."""
        payload: dict[str, typ.Any] = {"text": self.title}
        if self.collapsible:
            payload["collapsed"] = self.collapsed_by_default
        payload["items"] = [
            {"text": item.label, "link": item.target_path} for item in self.items
        ]
        return payload


class NavigationTree:
    """Read-only mapping of route prefixes to sidebar sections."""

    __slots__ = ("_sections",)

    def __init__(
        self,
        sections: cabc.Mapping[str, cabc.Iterable[NavigationSection]] | None = None,
    ) -> None:
        frozen = {
            prefix: tuple(entries) for prefix, entries in (sections or {}).items()
        }
        self._sections: cabc.Mapping[str, tuple[NavigationSection, ...]] = (
            MappingProxyType(frozen)
        )

    def sections_for(self, prefix: str) -> tuple[NavigationSection, ...]:
        """Return the sections registered for ``prefix``.

        Unknown prefixes yield an empty tuple: most routes have no dedicated
        sidebar and fall back to the host's default.
        """
        return self._sections.get(prefix, ())

    def prefixes(self) -> tuple[str, ...]:
        """Return the registered route prefixes."""
        return tuple(self._sections)

    def target_paths(self) -> tuple[str, ...]:
        """Return every referenced target path in rendering order."""
        return tuple(
            item.target_path
            for sections in self._sections.values()
            for section in sections
            for item in section.items
        )

    def missing_targets(
        self, known_routes: cabc.Iterable[str]
    ) -> list[tuple[str, str]]:
        """Return ``(prefix, target_path)`` pairs with no matching page route.

        Parameters
        ----------
        known_routes : Iterable[str]
            Route paths of every page in the site.

        Returns
        -------
        list[tuple[str, str]]
            Dangling references, in rendering order. Empty when every entry
            resolves.
        """
        routes = set(known_routes)
        return [
            (prefix, item.target_path)
            for prefix, sections in self._sections.items()
            for section in sections
            for item in section.items
            if item.target_path not in routes
        ]

    def to_sidebar(self) -> dict[str, list[dict[str, typ.Any]]]:
        """Serialise the tree into the host's ``sidebar`` configuration shape."""
        return {
            prefix: [section.to_sidebar() for section in sections]
            for prefix, sections in self._sections.items()
        }

    def __len__(self) -> int:
        return len(self._sections)

    def __repr__(self) -> str:
        return f"NavigationTree(prefixes={list(self._sections)!r})"


__all__ = ["NavigationItem", "NavigationSection", "NavigationTree"]
