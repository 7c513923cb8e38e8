"""Per-render orchestration: from page attributes to resolved metadata and tags."""

import json
import logging

from pagemeta.models.page import PageMetadata
from pagemeta.models.response import JsonLdDocument, ResolvedMetadata, TagValues
from pagemeta.models.site import SiteConfig
from pagemeta.services.dates import normalize_dates
from pagemeta.services.indexing import robots_directive, should_noindex
from pagemeta.services.schema import ResolvedFields, build_schemas
from pagemeta.services.url_resolver import resolve_url

logger = logging.getLogger(__name__)

RSS_PATH = "/rss.xml"


def apply_site_defaults(page: PageMetadata, config: SiteConfig) -> PageMetadata:
    """Return a copy of *page* with empty title, description and image filled in."""
    return page.model_copy(
        update={
            "title": page.title or config.name,
            "description": page.description or config.description,
            "image": page.image or config.default_image,
        }
    )


def resolve_metadata(
    page: PageMetadata, current_path: str, config: SiteConfig
) -> ResolvedMetadata:
    """Resolve canonical URL, indexing policy, dates and JSON-LD for one page.

    The result depends only on the arguments; calling twice with the same
    inputs yields equal output.
    """
    page = apply_site_defaults(page, config)
    base_url = config.base_url

    canonical_url = resolve_url(page.canonical_path or current_path, base_url)
    og_image_url = resolve_url(page.image, base_url)

    upload_date = page.video.upload_date if page.video is not None else None
    dates = normalize_dates(page.publish_date, page.modified_date, upload_date)

    noindex = should_noindex(page.requested_noindex, current_path, config)

    schemas = build_schemas(
        page,
        ResolvedFields(
            canonical_url=canonical_url,
            og_image_url=og_image_url,
            published=dates.published,
            modified=dates.modified,
            uploaded=dates.uploaded,
        ),
        config,
    )
    logger.debug(
        "Resolved page metadata",
        extra={
            "path": current_path,
            "canonical_url": canonical_url,
            "primary_type": schemas.primary["@type"],
            "noindex": noindex,
        },
    )

    return ResolvedMetadata(
        canonical_url=canonical_url,
        og_image_url=og_image_url,
        should_noindex=noindex,
        publish_timestamp=dates.published,
        modified_timestamp=dates.modified,
        primary_schema=schemas.primary,
        breadcrumb_schema=schemas.breadcrumbs,
        video_schema=schemas.video,
    )


def build_tag_values(
    page: PageMetadata, resolved: ResolvedMetadata, config: SiteConfig
) -> TagValues:
    """Flatten *resolved* into the values emitted as ``<meta>``/``<link>`` tags."""
    page = apply_site_defaults(page, config)
    title = page.title or ""
    description = page.description or ""

    article_fields = {}
    if page.is_article:
        article_fields = {
            "article_published_time": resolved.publish_timestamp,
            "article_modified_time": resolved.modified_timestamp,
            "article_author": page.author.name if page.author else None,
            "article_tags": list(page.tags or []),
        }

    return TagValues(
        title=title,
        description=description,
        canonical=resolved.canonical_url,
        robots=robots_directive(resolved.should_noindex),
        og_type="article" if page.is_article else "website",
        og_title=title,
        og_description=description,
        og_url=resolved.canonical_url,
        og_image=resolved.og_image_url,
        og_site_name=config.name,
        twitter_title=title,
        twitter_description=description,
        twitter_image=resolved.og_image_url,
        rss_url=resolve_url(RSS_PATH, config.base_url),
        **article_fields,
    )


def serialize_jsonld(document: JsonLdDocument) -> str:
    """Serialise *document* for a ``<script type="application/ld+json">`` payload.

    ``</`` is escaped so the payload cannot terminate the surrounding script
    element.
    """
    serialised = json.dumps(document, ensure_ascii=False, separators=(",", ":"))
    return serialised.replace("</", r"<\/")
