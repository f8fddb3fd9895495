import logging

from sqlalchemy.orm import Session

from app.core.errors import AuthorizationError, NotFoundError
from app.models.favorite import Favorite
from app.models.message import Message
from app.models.property import Property
from app.models.review import Review
from app.schemas.property import PropertyCreateRequest, PropertyFilters, PropertyPatchRequest
from app.services.property_search import search_properties

logger = logging.getLogger(__name__)


def list_properties(db: Session, filters: PropertyFilters | None = None) -> list[Property]:
    return search_properties(db.query(Property).order_by(Property.id).all(), filters)


def require_property(db: Session, property_id: int) -> Property:
    prop = db.get(Property, property_id)
    if not prop:
        raise NotFoundError("Property not found")
    return prop


def require_owned_property(db: Session, property_id: int, user_id: int) -> Property:
    prop = require_property(db, property_id)
    if prop.owner_id != user_id:
        raise AuthorizationError("Not authorized to modify this property")
    return prop


def list_owner_properties(db: Session, owner_id: int) -> list[Property]:
    return db.query(Property).filter(Property.owner_id == owner_id).order_by(Property.id).all()


def _apply_full(prop: Property, data: PropertyCreateRequest) -> None:
    prop.title = data.title
    prop.description = data.description
    prop.price = data.price
    prop.property_type = data.propertyType
    prop.listing_type = data.listingType
    prop.bedrooms = data.bedrooms
    prop.bathrooms = data.bathrooms
    prop.area = data.area
    prop.location = data.location
    prop.address = data.address
    prop.latitude = data.latitude
    prop.longitude = data.longitude
    prop.features = data.features
    prop.images = data.images


def create_property(db: Session, owner_id: int, data: PropertyCreateRequest) -> Property:
    prop = Property(owner_id=owner_id, verified=False)
    _apply_full(prop, data)
    db.add(prop)
    db.commit()
    db.refresh(prop)
    logger.info("User %s listed property %s", owner_id, prop.id)
    return prop


def replace_property(db: Session, prop: Property, data: PropertyCreateRequest) -> Property:
    _apply_full(prop, data)
    db.commit()
    db.refresh(prop)
    logger.info("Property %s replaced", prop.id)
    return prop


def patch_property(db: Session, prop: Property, data: PropertyPatchRequest) -> Property:
    if data.title is not None:
        prop.title = data.title
    if data.description is not None:
        prop.description = data.description
    if data.price is not None:
        prop.price = data.price
    if data.features is not None:
        prop.features = data.features
    if data.images is not None:
        prop.images = data.images
    db.commit()
    db.refresh(prop)
    logger.info("Property %s updated", prop.id)
    return prop


def delete_property(db: Session, prop: Property) -> None:
    pid = prop.id
    db.query(Favorite).filter(Favorite.property_id == pid).delete(synchronize_session=False)
    db.query(Review).filter(Review.property_id == pid).delete(synchronize_session=False)
    db.query(Message).filter(Message.property_id == pid).update(
        {Message.property_id: None}, synchronize_session=False
    )
    db.delete(prop)
    db.commit()
    logger.info("Property %s deleted", pid)
