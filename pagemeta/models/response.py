from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict

JsonLdDocument = Dict[str, Any]


class ResolvedMetadata(BaseModel):
    """Everything computed for one page render."""

    model_config = ConfigDict(frozen=True)

    canonical_url: str
    og_image_url: str
    should_noindex: bool
    publish_timestamp: Optional[str] = None
    modified_timestamp: Optional[str] = None
    primary_schema: JsonLdDocument
    breadcrumb_schema: Optional[JsonLdDocument] = None
    video_schema: Optional[JsonLdDocument] = None

    @property
    def primary_type(self) -> str:
        return self.primary_schema["@type"]

    def jsonld_documents(self) -> List[JsonLdDocument]:
        """Return the JSON-LD payloads in emission order: primary, breadcrumbs, video."""
        documents = [self.primary_schema]
        if self.breadcrumb_schema is not None:
            documents.append(self.breadcrumb_schema)
        if self.video_schema is not None:
            documents.append(self.video_schema)
        return documents


class TagValues(BaseModel):
    """Flat record of tag values consumed by the templating layer."""

    model_config = ConfigDict(frozen=True)

    title: str
    description: str
    canonical: str
    robots: str
    og_type: str
    og_title: str
    og_description: str
    og_url: str
    og_image: str
    og_site_name: str
    twitter_card: str = "summary_large_image"
    twitter_title: str
    twitter_description: str
    twitter_image: str
    article_published_time: Optional[str] = None
    article_modified_time: Optional[str] = None
    article_author: Optional[str] = None
    article_tags: List[str] = []
    rss_url: str


class MetadataResponse(BaseModel):
    tags: TagValues
    metadata: ResolvedMetadata
    jsonld: List[JsonLdDocument]
