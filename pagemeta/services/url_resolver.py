"""URL resolution for canonical, image and breadcrumb URLs.

Page content may carry relative or malformed paths.  :func:`resolve_url`
therefore never raises: when strict joining fails it degrades to plain string
concatenation so that tag emission can always proceed.
"""

import logging
from typing import Optional
from urllib.parse import urljoin, urlsplit

logger = logging.getLogger(__name__)


class UrlResolutionError(ValueError):
    """Raised when *path* cannot be joined strictly against *base*."""

    def __init__(self, path: str, base: str, reason: str) -> None:
        super().__init__(f"Cannot resolve {path!r} against {base!r}: {reason}")
        self.path = path
        self.base = base
        self.reason = reason


def _check_parsable(url: str) -> None:
    parts = urlsplit(url)
    # Accessing .port validates the port component
    parts.port


def join_url(path: str, base: str) -> str:
    """Join *path* onto the absolute URL *base* using standard URL semantics.

    Raises:
        UrlResolutionError: if *base* is not an absolute URL or either URL
            cannot be parsed.
    """
    try:
        parsed_base = urlsplit(base)
        if not parsed_base.scheme or not parsed_base.netloc:
            raise UrlResolutionError(path, base, "base is not an absolute URL")
        _check_parsable(base)
        joined = urljoin(base, path)
        _check_parsable(joined)
    except UrlResolutionError:
        raise
    except ValueError as exc:
        raise UrlResolutionError(path, base, str(exc)) from exc
    return joined


def concat_url(path: str, base: str) -> str:
    """Concatenate *base* and *path* with exactly one separating slash.

    Only one trailing slash is removed from *base* and one leading slash from
    *path*.
    """
    if base.endswith("/"):
        base = base[:-1]
    if path.startswith("/"):
        path = path[1:]
    return f"{base}/{path}"


def resolve_url(path: str, base: Optional[str]) -> str:
    """Return *path* resolved against *base*, falling back to concatenation."""
    base = base or ""
    try:
        return join_url(path, base)
    except UrlResolutionError as exc:
        logger.debug("Falling back to concatenation: %s", exc)
        return concat_url(path, base)
