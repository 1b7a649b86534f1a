"""URL shortener wire models."""
from pydantic import BaseModel, ConfigDict, Field

class ShortenRequest(BaseModel):
    """Body of a create-short-link call."""
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    long_url: str = Field(..., alias="longUrl")
    slug: str = Field(..., alias="customSlug")
    valid_until: str = Field(..., alias="validUntil")
    domain: str

class ShortenResponse(BaseModel):
    """Relevant part of a create-short-link answer."""
    model_config = ConfigDict(populate_by_name=True)

    short_url: str = Field(..., alias="shortUrl")
