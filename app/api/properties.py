from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from app.api.deps import IdPath, get_current_user, get_optional_user
from app.api.serializers import property_out, review_out, user_out
from app.core.errors import NotFoundError
from app.db.session import get_db
from app.schemas.property import PropertyCreateRequest, PropertyFilters, PropertyPatchRequest, SortBy
from app.schemas.review import ReviewRequest
from app.services import favorites, properties, reviews, users

router = APIRouter(prefix="/api/properties", tags=["Properties"])


@router.get("")
def list_properties(
    db: Session = Depends(get_db),
    search: str | None = Query(None),
    location: str | None = Query(None),
    property_type: str | None = Query(None, alias="propertyType"),
    listing_type: str | None = Query(None, alias="listingType"),
    min_price: int | None = Query(None, alias="minPrice"),
    max_price: int | None = Query(None, alias="maxPrice"),
    min_bedrooms: int | None = Query(None, alias="minBedrooms"),
    max_bedrooms: int | None = Query(None, alias="maxBedrooms"),
    min_bathrooms: int | None = Query(None, alias="minBathrooms"),
    features: str | None = Query(None, description="Comma separated, all must match"),
    sort_by: SortBy | None = Query(None, alias="sortBy"),
):
    filters = PropertyFilters.from_query(
        features=features,
        search=search,
        location=location,
        property_type=property_type,
        listing_type=listing_type,
        min_price=min_price,
        max_price=max_price,
        min_bedrooms=min_bedrooms,
        max_bedrooms=max_bedrooms,
        min_bathrooms=min_bathrooms,
        sort_by=sort_by,
    )
    return [property_out(p) for p in properties.list_properties(db, filters)]


@router.get("/{property_id}")
def get_property(
    property_id: IdPath,
    db: Session = Depends(get_db),
    user=Depends(get_optional_user),
):
    prop = properties.require_property(db, property_id)
    owner = users.get_user(db, prop.owner_id)
    if not owner:
        raise NotFoundError("Property owner not found")
    out = property_out(prop)
    out["owner"] = user_out(owner)
    out["isFavorite"] = favorites.is_favorite(db, user.id, prop.id) if user else False
    return out


@router.post("", status_code=201)
def create_property(
    data: PropertyCreateRequest,
    db: Session = Depends(get_db),
    user=Depends(get_current_user),
):
    return property_out(properties.create_property(db, user.id, data))


@router.patch("/{property_id}")
def patch_property(
    property_id: IdPath,
    data: PropertyPatchRequest,
    db: Session = Depends(get_db),
    user=Depends(get_current_user),
):
    prop = properties.require_owned_property(db, property_id, user.id)
    return property_out(properties.patch_property(db, prop, data))


@router.put("/{property_id}")
def replace_property(
    property_id: IdPath,
    data: PropertyCreateRequest,
    db: Session = Depends(get_db),
    user=Depends(get_current_user),
):
    prop = properties.require_owned_property(db, property_id, user.id)
    return property_out(properties.replace_property(db, prop, data))


@router.delete("/{property_id}")
def delete_property(
    property_id: IdPath,
    db: Session = Depends(get_db),
    user=Depends(get_current_user),
):
    prop = properties.require_owned_property(db, property_id, user.id)
    properties.delete_property(db, prop)
    return {"message": "Property deleted successfully"}


@router.get("/{property_id}/reviews")
def list_property_reviews(property_id: IdPath, db: Session = Depends(get_db)):
    properties.require_property(db, property_id)
    return [review_out(r) for r in reviews.list_reviews(db, property_id)]


@router.get("/{property_id}/rating")
def property_rating(property_id: IdPath, db: Session = Depends(get_db)):
    properties.require_property(db, property_id)
    return {"rating": reviews.property_rating(db, property_id)}


@router.post("/{property_id}/reviews", status_code=201)
def create_property_review(
    property_id: IdPath,
    data: ReviewRequest,
    db: Session = Depends(get_db),
    user=Depends(get_current_user),
):
    return review_out(reviews.create_review(db, property_id, user.id, data))
