"""Exception types raised while configuring and building the docs site."""

from __future__ import annotations


class SiteConfigError(ValueError):
    """Raised when the site configuration is invalid or incomplete."""


class PageError(ValueError):
    """Raised when a documentation page cannot be read into a :class:`Page`."""


class CanonicalUrlError(RuntimeError):
    """Raised when a page's canonical URL cannot be computed.

    The offending ``route_path`` is kept on the exception so the build can
    report which page failed.
    """

    def __init__(self, route_path: object, reason: str) -> None:
        self.route_path = route_path
        self.reason = reason
        super().__init__(f"Cannot resolve canonical URL for {route_path!r}: {reason}")


__all__ = ["CanonicalUrlError", "PageError", "SiteConfigError"]
