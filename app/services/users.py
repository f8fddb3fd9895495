import logging

from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.dates import as_naive_utc, utcnow
from app.core.errors import ConflictError, NotFoundError, ValidationError
from app.core.security import hash_password, new_reset_token, verify_password
from app.models.user import User
from app.schemas.auth import RegisterRequest
from app.schemas.user import ProfileUpdateRequest

logger = logging.getLogger(__name__)


def get_user(db: Session, user_id: int) -> User | None:
    return db.get(User, user_id)


def require_user(db: Session, user_id: int, message: str = "User not found") -> User:
    user = db.get(User, user_id)
    if not user:
        raise NotFoundError(message)
    return user


def get_user_by_username(db: Session, username: str) -> User | None:
    return db.query(User).filter(func.lower(User.username) == username.lower()).first()


def get_user_by_email(db: Session, email: str) -> User | None:
    return db.query(User).filter(func.lower(User.email) == email.lower()).first()


def register_user(db: Session, data: RegisterRequest) -> User:
    if get_user_by_username(db, data.username):
        raise ConflictError("Username already taken")
    if get_user_by_email(db, data.email):
        raise ConflictError("Email already registered")
    user = User(
        username=data.username,
        email=data.email,
        password=hash_password(data.password),
        full_name=data.fullName,
        phone=data.phone,
        avatar=data.avatar,
        bio=data.bio,
        role=data.role,
        language=data.language or "en",
    )
    db.add(user)
    try:
        db.commit()
    except IntegrityError:
        # a concurrent registration won the unique index
        db.rollback()
        if get_user_by_username(db, data.username):
            raise ConflictError("Username already taken")
        raise ConflictError("Email already registered")
    db.refresh(user)
    logger.info("Registered user %s", user.id)
    return user


def authenticate(db: Session, username: str, password: str) -> User | None:
    user = get_user_by_username(db, username)
    if not user or not verify_password(password, user.password):
        return None
    return user


def update_profile(db: Session, user: User, data: ProfileUpdateRequest) -> User:
    if data.changes_password:
        if not verify_password(data.currentPassword, user.password):
            raise ValidationError("Current password is incorrect")
        user.password = hash_password(data.newPassword)
    if data.fullName is not None:
        user.full_name = data.fullName
    if data.phone is not None:
        user.phone = data.phone
    if data.avatar is not None:
        user.avatar = data.avatar
    if data.bio is not None:
        user.bio = data.bio
    if data.language is not None:
        user.language = data.language
    db.commit()
    db.refresh(user)
    return user


def start_password_reset(db: Session, email: str) -> str | None:
    """Returns the new token, or None when no account uses this email."""
    user = get_user_by_email(db, email)
    if not user:
        return None
    token, expires_at = new_reset_token()
    user.reset_token = token
    user.reset_token_expiry = expires_at
    db.commit()
    logger.info("Password reset requested for user %s", user.id)
    return token


def reset_password(db: Session, token: str, password: str) -> User:
    user = db.query(User).filter(User.reset_token == token).first() if token else None
    if not user:
        raise ValidationError("Invalid or expired reset token")
    expiry = as_naive_utc(user.reset_token_expiry)
    if expiry and expiry < as_naive_utc(utcnow()):
        raise ValidationError("Reset token has expired")
    user.password = hash_password(password)
    user.reset_token = None
    user.reset_token_expiry = None
    db.commit()
    db.refresh(user)
    logger.info("Password reset completed for user %s", user.id)
    return user
