from sqlalchemy import Column, Integer, Text, DateTime, Boolean, ForeignKey

from app.core.dates import utcnow
from app.db.session import Base


class Message(Base):
    __tablename__ = "messages"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, index=True)
    sender_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    receiver_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    property_id = Column(Integer, ForeignKey("properties.id", ondelete="SET NULL"), nullable=True)
    content = Column(Text, nullable=False)
    read = Column(Boolean, nullable=False, default=False)  # only the receiver flips this
    created_at = Column(DateTime(timezone=True), default=utcnow)
