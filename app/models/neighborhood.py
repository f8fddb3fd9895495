from sqlalchemy import Column, Integer, String, Text

from app.db.session import Base


class Neighborhood(Base):
    __tablename__ = "neighborhoods"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(100), nullable=False)
    city = Column(String(100), nullable=False)
    description = Column(Text, nullable=True)
    image = Column(String(500), nullable=True)
    property_count = Column(Integer, nullable=False, default=0)  # not kept in sync with properties
