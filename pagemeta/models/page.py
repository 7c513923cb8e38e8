from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict


class Author(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    url: Optional[str] = None


class Breadcrumb(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    url: str


class Video(BaseModel):
    """Video embedded in a page; only ``src`` is mandatory."""

    model_config = ConfigDict(frozen=True)

    src: str
    name: Optional[str] = None
    description: Optional[str] = None
    thumbnail_url: Optional[str] = None
    upload_date: Optional[datetime] = None
    duration: Optional[str] = None  # ISO-8601 duration, e.g. "PT4M13S"


class PageMetadata(BaseModel):
    """Page-level attributes supplied by the caller for a single render.

    ``title``, ``description`` and ``image`` fall back to the site-wide values
    when left empty; ``canonical_path`` falls back to the current request path.
    """

    model_config = ConfigDict(frozen=True)

    title: Optional[str] = None
    description: Optional[str] = None
    image: Optional[str] = None
    is_article: bool = False
    requested_noindex: bool = False
    canonical_path: Optional[str] = None
    publish_date: Optional[datetime] = None
    modified_date: Optional[datetime] = None
    author: Optional[Author] = None
    tags: Optional[List[str]] = None
    breadcrumbs: Optional[List[Breadcrumb]] = None
    video: Optional[Video] = None
