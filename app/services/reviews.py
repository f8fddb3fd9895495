from decimal import Decimal, ROUND_HALF_UP

from sqlalchemy.orm import Session

from app.core.dates import utcnow
from app.core.errors import AuthorizationError, NotFoundError
from app.models.review import Review
from app.schemas.review import ReviewRequest
from app.services.properties import require_property


def list_reviews(db: Session, property_id: int) -> list[Review]:
    return db.query(Review).filter(Review.property_id == property_id).order_by(
        Review.created_at.desc(), Review.id.desc()
    ).all()


def average_rating(ratings) -> float | None:
    """Mean rounded half-up to one decimal; None when there is nothing to average."""
    ratings = list(ratings)
    if not ratings:
        return None
    mean = Decimal(sum(ratings)) / Decimal(len(ratings))
    return float(mean.quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


def property_rating(db: Session, property_id: int) -> float | None:
    rows = db.query(Review.rating).filter(Review.property_id == property_id).all()
    return average_rating(r for (r,) in rows)


def create_review(db: Session, property_id: int, user_id: int, data: ReviewRequest) -> Review:
    require_property(db, property_id)
    review = Review(
        property_id=property_id,
        user_id=user_id,
        rating=data.rating,
        comment=data.comment,
    )
    db.add(review)
    db.commit()
    db.refresh(review)
    return review


def require_own_review(db: Session, review_id: int, user_id: int) -> Review:
    review = db.get(Review, review_id)
    if not review:
        raise NotFoundError("Review not found")
    if review.user_id != user_id:
        raise AuthorizationError("Not authorized to modify this review")
    return review


def update_review(db: Session, review: Review, data: ReviewRequest) -> Review:
    review.rating = data.rating
    review.comment = data.comment
    review.updated_at = utcnow()
    db.commit()
    db.refresh(review)
    return review


def delete_review(db: Session, review: Review) -> None:
    db.delete(review)
    db.commit()
