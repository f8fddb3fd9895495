from sqlalchemy import Column, Integer, String, Text, DateTime, Boolean, Float, JSON, ForeignKey
from sqlalchemy.orm import validates

from app.core.dates import utcnow
from app.db.session import Base

PROPERTY_TYPES = ("apartment", "house", "villa", "townhouse", "office", "commercial", "land")
LISTING_TYPES = ("rent", "sale")


class Property(Base):
    __tablename__ = "properties"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=False)
    price = Column(Integer, nullable=False)
    property_type = Column(String(20), nullable=False)
    listing_type = Column(String(10), nullable=False)  # rent | sale
    bedrooms = Column(Integer, nullable=False, default=0)
    bathrooms = Column(Integer, nullable=False, default=0)
    area = Column(Integer, nullable=False, default=0)  # square meters
    location = Column(String(255), nullable=False)  # neighborhood, city
    address = Column(String(255), nullable=False)
    latitude = Column(Float, nullable=False)
    longitude = Column(Float, nullable=False)
    features = Column(JSON, nullable=False, default=list)
    images = Column(JSON, nullable=False, default=list)
    owner_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    verified = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime(timezone=True), default=utcnow)

    def __init__(self, **kwargs):
        kwargs.setdefault("features", [])
        kwargs.setdefault("images", [])
        super().__init__(**kwargs)

    @validates("features", "images")
    def _none_as_empty(self, key, value):
        return list(value) if value else []
