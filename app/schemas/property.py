from typing import List, Literal, Optional

from pydantic import BaseModel, Field, field_validator

from app.schemas.common import MAX_DB_INT, Count

PropertyType = Literal["apartment", "house", "villa", "townhouse", "office", "commercial", "land"]
ListingType = Literal["rent", "sale"]
SortBy = Literal["price-low", "price-high", "newest", "recommended"]


class PropertyCreateRequest(BaseModel):
    title: str = Field(..., min_length=1, max_length=255)
    description: str = Field(..., min_length=1)
    price: int = Field(..., gt=0, le=MAX_DB_INT)
    propertyType: PropertyType
    listingType: ListingType
    bedrooms: Count
    bathrooms: Count
    area: Count
    location: str = Field(..., min_length=1, max_length=255)
    address: str = Field(..., min_length=1, max_length=255)
    latitude: float = Field(..., ge=-90, le=90)
    longitude: float = Field(..., ge=-180, le=180)
    features: List[str] = []
    images: List[str] = []

    @field_validator("features", "images", mode="before")
    @classmethod
    def none_as_empty(cls, value):
        return [] if value is None else value


class PropertyPatchRequest(BaseModel):
    title: Optional[str] = Field(None, min_length=1, max_length=255)
    description: Optional[str] = None
    price: Optional[int] = Field(None, gt=0, le=MAX_DB_INT)
    features: Optional[List[str]] = None
    images: Optional[List[str]] = None


class PropertyFilters(BaseModel):
    """Every option is optional; the ones that are set combine with AND."""
    search: Optional[str] = None
    location: Optional[str] = None
    property_type: Optional[str] = None
    listing_type: Optional[str] = None
    min_price: Optional[int] = None
    max_price: Optional[int] = None
    min_bedrooms: Optional[int] = None
    max_bedrooms: Optional[int] = None
    min_bathrooms: Optional[int] = None
    features: List[str] = []
    sort_by: Optional[SortBy] = None

    @field_validator("features", mode="before")
    @classmethod
    def none_as_empty(cls, value):
        return [] if value is None else value

    @classmethod
    def from_query(cls, features: str | None = None, **params) -> "PropertyFilters":
        """features arrives as "parking,gym" on the query string."""
        tags = [f.strip() for f in features.split(",") if f.strip()] if features else []
        return cls(features=tags, **params)
