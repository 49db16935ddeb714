from fastapi import APIRouter, Depends, Path, Response, status

from link_shortener.dependencies import get_link_service
from link_shortener.models.link import MAX_LINK_ID, MIN_LINK_ID
from link_shortener.services.link_service import LinkService

router = APIRouter(tags=["redirect"])


@router.get("/{link_id}", status_code=status.HTTP_301_MOVED_PERMANENTLY)
def redirect_to_link(
    link_id: int = Path(..., ge=MIN_LINK_ID, le=MAX_LINK_ID),
    link_service: LinkService = Depends(get_link_service)
):
    """
    Permanently redirect to the stored URL and count the visit.

    The Location header carries the stored string's UTF-8 bytes verbatim.
    RedirectResponse would percent-encode it and Starlette's header
    handling would encode it as latin-1; links must come back exactly as
    they were submitted.
    """
    url = link_service.resolve(link_id)
    response = Response(status_code=status.HTTP_301_MOVED_PERMANENTLY)
    response.raw_headers.append((b"location", url.encode("utf-8")))
    return response
