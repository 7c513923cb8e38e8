import logging

from fastapi import APIRouter, Depends, Request
from slowapi import Limiter
from slowapi.util import get_remote_address

from pagemeta.models.request import MetadataRequest
from pagemeta.models.response import MetadataResponse
from pagemeta.models.site import SiteConfig, get_site_config
from pagemeta.services.resolver import build_tag_values, resolve_metadata

logger = logging.getLogger(__name__)

limiter = Limiter(key_func=get_remote_address)
router = APIRouter()


@router.post(
    "/metadata",
    response_model=MetadataResponse,
    summary="Resolve SEO metadata for a page",
    description=(
        "Computes the canonical URL, robots directive, Open Graph / Twitter "
        "Card values and schema.org JSON-LD documents for a single page.\n\n"
        "The `jsonld` list is ordered primary document first, then the "
        "breadcrumb list and the standalone video object when present."
    ),
)
@limiter.limit("60/minute")
async def resolve_page_metadata(
    request: Request,
    body: MetadataRequest,
    config: SiteConfig = Depends(get_site_config),
) -> MetadataResponse:
    logger.info(
        "Metadata request received",
        extra={"path": body.current_path, "is_article": body.page.is_article},
    )

    resolved = resolve_metadata(body.page, body.current_path, config)
    tags = build_tag_values(body.page, resolved, config)

    return MetadataResponse(
        tags=tags,
        metadata=resolved,
        jsonld=resolved.jsonld_documents(),
    )
