from typing import List

from fastapi import APIRouter, Depends, Path, status

from link_shortener.dependencies import get_link_service
from link_shortener.models.link import MAX_LINK_ID, MIN_LINK_ID
from link_shortener.schemas.link import LinkCreate, LinkResponse
from link_shortener.services.link_service import LinkService

router = APIRouter(prefix="/links", tags=["links"])


@router.get("", response_model=List[LinkResponse])
def list_links(link_service: LinkService = Depends(get_link_service)):
    """List every stored link"""
    return link_service.list_all()


@router.post("", response_model=LinkResponse, status_code=status.HTTP_201_CREATED)
def create_link(
    link_data: LinkCreate,
    link_service: LinkService = Depends(get_link_service)
):
    """Create a new link; the URL is stored without validation"""
    return link_service.insert(link_data.link)


@router.delete("/{link_id}", response_model=LinkResponse)
def delete_link(
    link_id: int = Path(..., ge=MIN_LINK_ID, le=MAX_LINK_ID),
    link_service: LinkService = Depends(get_link_service)
):
    """Delete a link and return it as it was before deletion"""
    return link_service.delete(link_id)
