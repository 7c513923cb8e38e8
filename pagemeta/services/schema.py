"""schema.org JSON-LD document construction.

Up to three documents are produced for a page:

``primary``
    Exactly one of ``Article``, ``VideoObject`` or ``WebSite``.  Article wins
    when the page is an article with a publish date, then VideoObject when a
    video is embedded, otherwise WebSite.

``breadcrumbs``
    A ``BreadcrumbList`` when the page declares breadcrumbs.

``video``
    A standalone ``VideoObject``.  It is built whenever a video is present
    but only exposed for article pages.

Every builder is a pure function of its arguments and never raises; missing
optional values become ``None`` or documented defaults.
"""

from typing import List, NamedTuple, Optional

from pagemeta.models.page import Breadcrumb, PageMetadata, Video
from pagemeta.models.response import JsonLdDocument
from pagemeta.models.site import SiteConfig
from pagemeta.services.url_resolver import resolve_url

SCHEMA_CONTEXT = "https://schema.org"

# Zero-length duration used when a video does not declare one
DEFAULT_VIDEO_DURATION = "PT0M0S"

PUBLISHER_LOGO_PATH = "/favicon.svg"


class ResolvedFields(NamedTuple):
    """Values computed upstream of the schema builder."""

    canonical_url: str
    og_image_url: str
    published: Optional[str]
    modified: Optional[str]
    uploaded: Optional[str] = None


class SchemaSet(NamedTuple):
    primary: JsonLdDocument
    breadcrumbs: Optional[JsonLdDocument]
    video: Optional[JsonLdDocument]


# ---------------------------------------------------------------------------
# Sub-builders
# ---------------------------------------------------------------------------

def website_document(config: SiteConfig) -> JsonLdDocument:
    return {
        "@context": SCHEMA_CONTEXT,
        "@type": "WebSite",
        "name": config.name,
        "url": config.base_url,
        "description": config.description,
        "potentialAction": {
            "@type": "SearchAction",
            "target": {
                "@type": "EntryPoint",
                "urlTemplate": f"{config.base_url}/search?q={{search_term_string}}",
            },
            "query-input": "required name=search_term_string",
        },
    }


def breadcrumb_document(
    breadcrumbs: Optional[List[Breadcrumb]], base_url: str
) -> Optional[JsonLdDocument]:
    """Return a ``BreadcrumbList`` or *None* when there are no breadcrumbs."""
    if not breadcrumbs:
        return None
    return {
        "@context": SCHEMA_CONTEXT,
        "@type": "BreadcrumbList",
        "itemListElement": [
            {
                "@type": "ListItem",
                "position": position,
                "name": crumb.name,
                "item": resolve_url(crumb.url, base_url),
            }
            for position, crumb in enumerate(breadcrumbs, start=1)
        ],
    }


def video_document(
    video: Optional[Video],
    page: PageMetadata,
    resolved: ResolvedFields,
    base_url: str,
) -> Optional[JsonLdDocument]:
    """Return a ``VideoObject`` or *None* when the page has no video.

    ``contentUrl`` and ``embedUrl`` carry ``video.src`` exactly as given; they
    are not resolved against the site URL.
    """
    if video is None:
        return None

    if video.thumbnail_url:
        thumbnail = resolve_url(video.thumbnail_url, base_url)
    else:
        thumbnail = resolved.og_image_url

    return {
        "@context": SCHEMA_CONTEXT,
        "@type": "VideoObject",
        "name": video.name or page.title or "",
        "description": video.description or page.description or "",
        "thumbnailUrl": thumbnail,
        "uploadDate": resolved.uploaded,
        "duration": video.duration or DEFAULT_VIDEO_DURATION,
        "contentUrl": video.src,
        "embedUrl": video.src,
    }


def article_document(
    page: PageMetadata, resolved: ResolvedFields, config: SiteConfig
) -> Optional[JsonLdDocument]:
    """Return an ``Article`` for article pages with a publish date, else *None*."""
    if not page.is_article or resolved.published is None:
        return None

    author = None
    if page.author is not None:
        author = {"@type": "Person", "name": page.author.name, "url": page.author.url}

    return {
        "@context": SCHEMA_CONTEXT,
        "@type": "Article",
        "headline": page.title or "",
        "description": page.description or "",
        "image": resolved.og_image_url,
        "datePublished": resolved.published,
        "dateModified": resolved.modified or resolved.published,
        "author": author,
        "publisher": {
            "@type": "Organization",
            "name": config.name,
            "logo": {
                "@type": "ImageObject",
                "url": resolve_url(PUBLISHER_LOGO_PATH, config.base_url),
            },
        },
        "mainEntityOfPage": {"@type": "WebPage", "@id": resolved.canonical_url},
        "keywords": ", ".join(page.tags) if page.tags else "",
    }


# ---------------------------------------------------------------------------
# Selection
# ---------------------------------------------------------------------------

def select_primary(
    article: Optional[JsonLdDocument],
    video: Optional[JsonLdDocument],
    website: JsonLdDocument,
) -> JsonLdDocument:
    """Pick the primary document: Article, then VideoObject, then WebSite."""
    if article is not None:
        return article
    if video is not None:
        return video
    return website


def build_schemas(
    page: PageMetadata, resolved: ResolvedFields, config: SiteConfig
) -> SchemaSet:
    """Build every JSON-LD document for *page*.

    *page* is expected to already carry the site-wide title, description and
    image defaults.
    """
    base_url = config.base_url
    video = video_document(page.video, page, resolved, base_url)
    primary = select_primary(
        article_document(page, resolved, config),
        video,
        website_document(config),
    )
    return SchemaSet(
        primary=primary,
        breadcrumbs=breadcrumb_document(page.breadcrumbs, base_url),
        video=video if page.is_article else None,
    )
