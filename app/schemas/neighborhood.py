from typing import Optional

from pydantic import BaseModel, Field


class NeighborhoodCreateRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    city: str = Field(..., min_length=1, max_length=100)
    description: Optional[str] = None
    image: Optional[str] = None
