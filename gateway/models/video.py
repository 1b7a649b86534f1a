"""Video endpoint models."""
from typing import List
from pydantic import BaseModel, TypeAdapter

class ReturnedEndpoint(BaseModel):
    """One candidate media URL returned by a video endpoint provider."""
    url: str

# Providers answer with a bare JSON list of candidates
ReturnedEndpointList = TypeAdapter(List[ReturnedEndpoint])
