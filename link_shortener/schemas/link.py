from pydantic import BaseModel, ConfigDict, Field


class LinkCreate(BaseModel):
    # Stored as-is: no URL validation or normalization
    link: str = Field(..., description="Destination the short link redirects to")


class LinkResponse(BaseModel):
    """Wire shape of a link: ``{"id": ..., "link": ..., "count": ...}``"""
    id: int
    link: str
    count: int

    # Reads straight from ORM objects and RETURNING rows
    model_config = ConfigDict(from_attributes=True)
