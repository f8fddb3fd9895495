from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.api.deps import IdPath, get_current_user
from app.api.serializers import review_out
from app.db.session import get_db
from app.schemas.review import ReviewRequest
from app.services import reviews

router = APIRouter(prefix="/api/reviews", tags=["Reviews"])


@router.put("/{review_id}")
def update_review(
    review_id: IdPath,
    data: ReviewRequest,
    db: Session = Depends(get_db),
    user=Depends(get_current_user),
):
    review = reviews.require_own_review(db, review_id, user.id)
    return review_out(reviews.update_review(db, review, data))


@router.delete("/{review_id}")
def delete_review(
    review_id: IdPath,
    db: Session = Depends(get_db),
    user=Depends(get_current_user),
):
    review = reviews.require_own_review(db, review_id, user.id)
    reviews.delete_review(db, review)
    return {"success": True}
