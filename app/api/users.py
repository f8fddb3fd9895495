from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.api.deps import get_current_user
from app.api.serializers import property_out, user_out
from app.db.session import get_db
from app.schemas.user import ProfileUpdateRequest
from app.services import properties, users

router = APIRouter(prefix="/api/users", tags=["Users"])


@router.patch("/profile")
def update_profile(
    data: ProfileUpdateRequest,
    db: Session = Depends(get_db),
    user=Depends(get_current_user),
):
    return user_out(users.update_profile(db, user, data))


@router.get("/me/properties")
def my_properties(db: Session = Depends(get_db), user=Depends(get_current_user)):
    return [property_out(p) for p in properties.list_owner_properties(db, user.id)]
