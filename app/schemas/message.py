from typing import Optional

from pydantic import BaseModel, Field

from app.schemas.common import DbId


class MessageCreateRequest(BaseModel):
    receiverId: DbId
    content: str = Field(..., min_length=1, max_length=5000)
    propertyId: Optional[DbId] = None
