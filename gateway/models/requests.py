"""Request models for the Video Gateway."""
from pydantic import AliasChoices, BaseModel, ConfigDict, Field

class SearchQuery(BaseModel):
    """Request model for a search lookup."""
    model_config = ConfigDict(populate_by_name=True)

    search_term: str = Field(
        ...,
        alias="Search",
        validation_alias=AliasChoices("Search", "search", "search_term"),
    )

class VideoParameters(BaseModel):
    """Request model for a video endpoint lookup. The ID doubles as the shortener slug."""
    id: str = Field(..., min_length=1)
