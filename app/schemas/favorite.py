from pydantic import BaseModel

from app.schemas.common import DbId


class FavoriteCreateRequest(BaseModel):
    propertyId: DbId
