from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.api.deps import IdPath, get_current_user
from app.api.serializers import favorite_out, property_out
from app.core.errors import NotFoundError
from app.db.session import get_db
from app.schemas.favorite import FavoriteCreateRequest
from app.services import favorites

router = APIRouter(prefix="/api/favorites", tags=["Favorites"])


@router.get("")
def list_favorites(db: Session = Depends(get_db), user=Depends(get_current_user)):
    return [property_out(p) for p in favorites.list_favorite_properties(db, user.id)]


@router.post("", status_code=201)
def add_favorite(
    data: FavoriteCreateRequest,
    db: Session = Depends(get_db),
    user=Depends(get_current_user),
):
    return favorite_out(favorites.add_favorite(db, user, data.propertyId))


@router.delete("/{property_id}")
def remove_favorite(
    property_id: IdPath,
    db: Session = Depends(get_db),
    user=Depends(get_current_user),
):
    if not favorites.remove_favorite(db, user.id, property_id):
        raise NotFoundError("Favorite not found")
    return {"message": "Favorite removed successfully"}
