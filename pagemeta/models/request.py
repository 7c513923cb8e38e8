from pydantic import BaseModel, Field

from pagemeta.models.page import PageMetadata


class MetadataRequest(BaseModel):
    current_path: str = Field(
        default="/",
        description="Path of the page being rendered, e.g. '/blog/hello-world/'.",
        examples=["/blog/hello-world/", "/tags/python/"],
    )
    page: PageMetadata = PageMetadata()
