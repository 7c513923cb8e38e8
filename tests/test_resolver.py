"""Tests for pagemeta.services.resolver."""

import json
from datetime import datetime

from pagemeta.models.page import Author, Breadcrumb, PageMetadata, Video
from pagemeta.models.site import NoindexRules, SiteConfig
from pagemeta.services.resolver import (
    apply_site_defaults,
    build_tag_values,
    resolve_metadata,
    serialize_jsonld,
)

_BASE = "https://example.com"


def _config(**kwargs) -> SiteConfig:
    defaults = {
        "name": "Example Blog",
        "description": "Notes about things.",
        "default_image": "/og.png",
        "url": _BASE,
        "noindex": NoindexRules(tags=True, categories=False),
    }
    return SiteConfig(**{**defaults, **kwargs})


def _article(**kwargs) -> PageMetadata:
    defaults = {
        "title": "Hello World",
        "description": "First post.",
        "image": "/images/hello.png",
        "is_article": True,
        "publish_date": datetime(2024, 1, 1),
        "author": Author(name="Ada"),
        "tags": ["intro", "meta"],
    }
    return PageMetadata(**{**defaults, **kwargs})


# ---------------------------------------------------------------------------
# Site defaults
# ---------------------------------------------------------------------------

class TestApplySiteDefaults:
    def test_empty_fields_use_site_values(self):
        page = apply_site_defaults(PageMetadata(), _config())
        assert page.title == "Example Blog"
        assert page.description == "Notes about things."
        assert page.image == "/og.png"

    def test_page_values_are_kept(self):
        page = apply_site_defaults(_article(), _config())
        assert page.title == "Hello World"
        assert page.image == "/images/hello.png"

    def test_input_is_not_mutated(self):
        original = PageMetadata()
        apply_site_defaults(original, _config())
        assert original.title is None


# ---------------------------------------------------------------------------
# resolve_metadata
# ---------------------------------------------------------------------------

class TestResolveMetadata:
    def test_canonical_defaults_to_current_path(self):
        resolved = resolve_metadata(PageMetadata(), "/blog/hello/", _config())
        assert resolved.canonical_url == "https://example.com/blog/hello/"

    def test_explicit_canonical_path(self):
        page = PageMetadata(canonical_path="/posts/hello/")
        resolved = resolve_metadata(page, "/blog/hello/?ref=feed", _config())
        assert resolved.canonical_url == "https://example.com/posts/hello/"

    def test_og_image_uses_site_default(self):
        resolved = resolve_metadata(PageMetadata(), "/", _config())
        assert resolved.og_image_url == "https://example.com/og.png"

    def test_article_dates(self):
        resolved = resolve_metadata(_article(), "/blog/hello/", _config())
        assert resolved.publish_timestamp == "2024-01-01T00:00:00.000Z"
        assert resolved.modified_timestamp == "2024-01-01T00:00:00.000Z"
        assert resolved.primary_schema["dateModified"] == resolved.primary_schema["datePublished"]

    def test_article_primary(self):
        resolved = resolve_metadata(_article(), "/blog/hello/", _config())
        assert resolved.primary_type == "Article"
        assert resolved.primary_schema["mainEntityOfPage"]["@id"] == resolved.canonical_url

    def test_noindex_for_tag_listing(self):
        resolved = resolve_metadata(PageMetadata(), "/tags/python/", _config())
        assert resolved.should_noindex is True

    def test_category_listing_indexed_when_allowed(self):
        resolved = resolve_metadata(PageMetadata(), "/categories/python/", _config())
        assert resolved.should_noindex is False

    def test_video_upload_date_falls_back_to_publish(self):
        page = _article(video=Video(src="https://v.example.net/a.mp4"))
        resolved = resolve_metadata(page, "/blog/hello/", _config())
        assert resolved.video_schema["uploadDate"] == "2024-01-01T00:00:00.000Z"

    def test_video_page_primary(self):
        page = PageMetadata(video=Video(src="https://v.example.net/a.mp4"))
        resolved = resolve_metadata(page, "/videos/a/", _config())
        assert resolved.primary_type == "VideoObject"
        assert resolved.video_schema is None
        assert resolved.primary_schema["name"] == "Example Blog"

    def test_website_primary(self):
        resolved = resolve_metadata(PageMetadata(), "/", _config())
        assert resolved.primary_type == "WebSite"

    def test_jsonld_documents_order(self):
        page = _article(
            breadcrumbs=[Breadcrumb(name="Home", url="/"), Breadcrumb(name="Blog", url="/blog")],
            video=Video(src="https://v.example.net/a.mp4"),
        )
        resolved = resolve_metadata(page, "/blog/hello/", _config())
        types = [doc["@type"] for doc in resolved.jsonld_documents()]
        assert types == ["Article", "BreadcrumbList", "VideoObject"]

    def test_jsonld_documents_primary_only(self):
        resolved = resolve_metadata(PageMetadata(), "/", _config())
        assert len(resolved.jsonld_documents()) == 1

    def test_missing_base_url_never_raises(self):
        resolved = resolve_metadata(PageMetadata(image="cover.png"), "/about/", _config(url=""))
        assert resolved.canonical_url == "/about/"
        assert resolved.og_image_url == "/cover.png"

    def test_idempotent(self):
        page = _article(breadcrumbs=[Breadcrumb(name="Home", url="/")])
        first = resolve_metadata(page, "/blog/hello/", _config())
        second = resolve_metadata(page, "/blog/hello/", _config())
        assert first == second
        assert [serialize_jsonld(d) for d in first.jsonld_documents()] == [
            serialize_jsonld(d) for d in second.jsonld_documents()
        ]


# ---------------------------------------------------------------------------
# build_tag_values
# ---------------------------------------------------------------------------

class TestBuildTagValues:
    def test_article_tags(self):
        page = _article()
        config = _config()
        tags = build_tag_values(page, resolve_metadata(page, "/blog/hello/", config), config)
        assert tags.title == "Hello World"
        assert tags.og_type == "article"
        assert tags.og_url == tags.canonical == "https://example.com/blog/hello/"
        assert tags.og_image == tags.twitter_image == "https://example.com/images/hello.png"
        assert tags.og_site_name == "Example Blog"
        assert tags.twitter_card == "summary_large_image"
        assert tags.robots == "index, follow"
        assert tags.article_published_time == "2024-01-01T00:00:00.000Z"
        assert tags.article_author == "Ada"
        assert tags.article_tags == ["intro", "meta"]
        assert tags.rss_url == "https://example.com/rss.xml"

    def test_website_tags_omit_article_fields(self):
        page = PageMetadata()
        config = _config()
        tags = build_tag_values(page, resolve_metadata(page, "/search", config), config)
        assert tags.og_type == "website"
        assert tags.robots == "noindex, nofollow"
        assert tags.title == "Example Blog"
        assert tags.article_published_time is None
        assert tags.article_tags == []


# ---------------------------------------------------------------------------
# serialize_jsonld
# ---------------------------------------------------------------------------

class TestSerializeJsonld:
    def test_round_trips_as_json(self):
        document = {"@type": "WebSite", "name": "Café"}
        assert json.loads(serialize_jsonld(document)) == document

    def test_keeps_unicode(self):
        assert "Café" in serialize_jsonld({"name": "Café"})

    def test_escapes_script_terminator(self):
        serialised = serialize_jsonld({"headline": "</script><script>alert(1)"})
        assert "</script>" not in serialised
