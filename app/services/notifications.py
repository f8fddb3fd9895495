from sqlalchemy.orm import Session

from app.core.errors import ValidationError
from app.models.notification import Notification, NOTIFICATION_TYPES


def list_notifications(db: Session, user_id: int) -> list[Notification]:
    return db.query(Notification).filter(Notification.user_id == user_id).order_by(
        Notification.created_at.desc(), Notification.id.desc()
    ).all()


def unread_count(db: Session, user_id: int) -> int:
    return db.query(Notification).filter(
        Notification.user_id == user_id,
        Notification.read.is_(False),
    ).count()


def create_notification(
    db: Session,
    user_id: int,
    type: str,
    title: str,
    content: str,
    link_url: str | None = None,
    commit: bool = True,
) -> Notification:
    if type not in NOTIFICATION_TYPES:
        raise ValidationError(f"Unknown notification type: {type}")
    notification = Notification(
        user_id=user_id,
        type=type,
        title=title,
        content=content,
        link_url=link_url or None,
        read=False,
    )
    db.add(notification)
    if commit:
        db.commit()
        db.refresh(notification)
    return notification


def mark_one_read(db: Session, user_id: int, notification_id: int) -> bool:
    """False when the notification does not exist or belongs to someone else. Already read is fine."""
    notification = db.query(Notification).filter(
        Notification.id == notification_id,
        Notification.user_id == user_id,
    ).first()
    if not notification:
        return False
    if not notification.read:
        notification.read = True
        db.commit()
    return True


def mark_all_read(db: Session, user_id: int) -> bool:
    """Returns whether anything changed."""
    updated = db.query(Notification).filter(
        Notification.user_id == user_id,
        Notification.read.is_(False),
    ).update({Notification.read: True}, synchronize_session="fetch")
    db.commit()
    return updated > 0
