from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.errors import ConflictError
from app.models.favorite import Favorite
from app.models.property import Property
from app.models.user import User
from app.services import notifications
from app.services.properties import require_property


def list_favorite_properties(db: Session, user_id: int) -> list[Property]:
    return (
        db.query(Property)
        .join(Favorite, Favorite.property_id == Property.id)
        .filter(Favorite.user_id == user_id)
        .order_by(Favorite.created_at, Favorite.id)
        .all()
    )


def is_favorite(db: Session, user_id: int, property_id: int) -> bool:
    return db.query(Favorite).filter(
        Favorite.user_id == user_id,
        Favorite.property_id == property_id,
    ).first() is not None


def add_favorite(db: Session, user: User, property_id: int) -> Favorite:
    prop = require_property(db, property_id)
    if is_favorite(db, user.id, property_id):
        raise ConflictError("Property already in favorites")
    favorite = Favorite(user_id=user.id, property_id=property_id)
    db.add(favorite)
    if prop.owner_id != user.id:
        notifications.create_notification(
            db,
            user_id=prop.owner_id,
            type="favorite",
            title="New Interest",
            content=f"{user.full_name} added \"{prop.title}\" to their favorites.",
            link_url=f"/properties/{prop.id}",
            commit=False,
        )
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise ConflictError("Property already in favorites")
    db.refresh(favorite)
    return favorite


def remove_favorite(db: Session, user_id: int, property_id: int) -> bool:
    favorite = db.query(Favorite).filter(
        Favorite.user_id == user_id,
        Favorite.property_id == property_id,
    ).first()
    if not favorite:
        return False
    db.delete(favorite)
    db.commit()
    return True
