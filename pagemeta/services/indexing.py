"""Indexing policy: decides whether a page is kept out of search indexes.

Matching is a plain substring test against the raw request path, so a path
such as ``/research`` does not match but ``/searching-for-x`` does match the
``/search`` rule.
"""

from pagemeta.models.site import SiteConfig

ROBOTS_INDEX = "index, follow"
ROBOTS_NOINDEX = "noindex, nofollow"

_TAGS_MARKER = "/tags/"
_CATEGORIES_MARKER = "/categories/"

# Search results and paginated listings are never indexed
_ALWAYS_NOINDEX_MARKERS = ("/search", "/page/")


def should_noindex(requested: bool, current_path: str, config: SiteConfig) -> bool:
    """Return *True* when the page at *current_path* must not be indexed."""
    if requested:
        return True
    if _TAGS_MARKER in current_path and config.noindex.tags:
        return True
    if _CATEGORIES_MARKER in current_path and config.noindex.categories:
        return True
    return any(marker in current_path for marker in _ALWAYS_NOINDEX_MARKERS)


def robots_directive(noindex: bool) -> str:
    """Return the ``robots`` meta value for the given indexing decision."""
    return ROBOTS_NOINDEX if noindex else ROBOTS_INDEX
