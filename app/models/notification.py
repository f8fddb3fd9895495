from sqlalchemy import Column, Integer, String, Text, DateTime, Boolean, ForeignKey

from app.core.dates import utcnow
from app.db.session import Base

NOTIFICATION_TYPES = ("message", "property_update", "favorite", "system")


class Notification(Base):
    __tablename__ = "notifications"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    type = Column(String(30), nullable=False)  # message | property_update | favorite | system
    title = Column(String(255), nullable=False)
    content = Column(Text, nullable=False)
    read = Column(Boolean, nullable=False, default=False)
    link_url = Column(String(500), nullable=True)
    created_at = Column(DateTime(timezone=True), default=utcnow)
