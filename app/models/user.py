from sqlalchemy import Column, Integer, String, Text, DateTime, Index, func

from app.core.dates import utcnow
from app.db.session import Base

USER_ROLES = ("tenant", "landlord", "agent")


class User(Base):
    __tablename__ = "users"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, index=True)
    username = Column(String(50), unique=True, nullable=False, index=True)
    email = Column(String(255), unique=True, nullable=False, index=True)
    password = Column(String(255), nullable=False)  # bcrypt hash
    full_name = Column(String(150), nullable=False)
    phone = Column(String(30), nullable=True)
    avatar = Column(String(500), nullable=True)
    bio = Column(Text, nullable=True)
    role = Column(String(20), nullable=False, default="tenant")  # tenant | landlord | agent
    language = Column(String(10), nullable=False, default="en")
    reset_token = Column(String(100), nullable=True, index=True)
    reset_token_expiry = Column(DateTime(timezone=True), nullable=True)
    created_at = Column(DateTime(timezone=True), default=utcnow)


# Usernames and emails are unique regardless of case.
Index("uq_users_username_lower", func.lower(User.username), unique=True)
Index("uq_users_email_lower", func.lower(User.email), unique=True)
