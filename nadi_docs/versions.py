"""Registry of the documentation versions published side by side.

Versions are listed oldest to newest; the last entry is the *current*
version every legacy page is canonicalised towards.

Examples
--------
>>> registry = VersionRegistry(["1.0", "2.0"])
>>> registry.current()
'2.0'
>>> registry.containing_version("/1.0/installation")
'1.0'
>>> registry.containing_version("/guide/quick-start") is None
True
"""

from __future__ import annotations

import collections.abc as cabc
import dataclasses as dc
import typing as typ

from .errors import SiteConfigError

PATH_SEPARATOR = "/"
SEARCH_VERSION_SUFFIX = ".0"


def delimited_segments(route_path: str) -> list[str]:
    """Return the segments of ``route_path`` bounded by a separator on both sides.

    ``"/1.0/guide/intro"`` yields ``["1.0", "guide"]``: the leading empty
    piece and the trailing ``"intro"`` are not delimited.
    """
    return route_path.split(PATH_SEPARATOR)[1:-1]


@dc.dataclass(frozen=True, slots=True)
class VersionRegistry:
    """Ordered, immutable list of published documentation versions."""

    identifiers: tuple[str, ...]

    def __init__(self, versions: cabc.Iterable[str]) -> None:
        if isinstance(versions, str):
            msg = f"Versions must be a list of identifiers, got the string {versions!r}."
            raise SiteConfigError(msg)
        identifiers = tuple(versions)
        _validate_identifiers(identifiers)
        object.__setattr__(self, "identifiers", identifiers)

    def versions(self) -> tuple[str, ...]:
        """Return every registered version, oldest first."""
        return self.identifiers

    def current(self) -> str:
        """Return the newest registered version."""
        return self.identifiers[-1]

    def legacy(self) -> tuple[str, ...]:
        """Return every version other than the current one, oldest first."""
        return self.identifiers[:-1]

    def is_current(self, version: str) -> bool:
        return version == self.current()

    def containing_version(self, route_path: str) -> str | None:
        """Return the first registered version appearing as a path segment.

        Only segments delimited by ``/`` on both sides count, so
        ``/1.0/installation`` matches ``1.0`` while ``/1.0`` and
        ``/docs-1.0/`` do not. When several versions appear, registry order
        decides, not position in the path.
        """
        segments = set(delimited_segments(route_path))
        for version in self.identifiers:
            if version in segments:
                return version
        return None

    @staticmethod
    def search_version(version: str) -> str:
        """Return the dotted version string used to facet search results."""
        return f"{version}{SEARCH_VERSION_SUFFIX}"

    def version_menu(self, current_link: str = "/") -> dict[str, typ.Any]:
        """Build the navbar dropdown that switches between versions.

        Parameters
        ----------
        current_link : str, optional
            Route of the current version's landing page. Defaults to ``"/"``,
            where the current generation lives.

        Returns
        -------
        dict[str, Any]
            ``{"text": ..., "items": [{"text": ..., "link": ...}, ...]}`` with
            the current version first and legacy versions newest first.
        """
        current = self.current()
        items = [{"text": f"v{current} (Current)", "link": current_link}]
        items.extend(
            {"text": f"v{version} (Legacy)", "link": f"/{version}/"}
            for version in reversed(self.legacy())
        )
        return {"text": f"v{current}", "items": items}


def _validate_identifiers(identifiers: tuple[str, ...]) -> None:
    if not identifiers:
        msg = "At least one documentation version must be configured."
        raise SiteConfigError(msg)
    seen: set[str] = set()
    for identifier in identifiers:
        if not isinstance(identifier, str) or not identifier.strip():
            msg = f"Version identifiers must be non-empty strings, got {identifier!r}."
            raise SiteConfigError(msg)
        if PATH_SEPARATOR in identifier:
            msg = f"Version identifier {identifier!r} may not contain '/'."
            raise SiteConfigError(msg)
        if identifier in seen:
            msg = f"Duplicate version identifier {identifier!r}."
            raise SiteConfigError(msg)
        seen.add(identifier)


__all__ = [
    "PATH_SEPARATOR",
    "SEARCH_VERSION_SUFFIX",
    "VersionRegistry",
    "delimited_segments",
]
