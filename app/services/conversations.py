"""Two-party message threads derived from the flat messages table."""
import logging
from dataclasses import dataclass
from typing import Iterable, Mapping

from sqlalchemy import or_, and_
from sqlalchemy.orm import Session

from app.core.dates import timestamp_key
from app.core.errors import ValidationError
from app.models.message import Message
from app.models.user import User
from app.schemas.message import MessageCreateRequest
from app.services import notifications
from app.services.properties import require_property
from app.services.users import require_user

logger = logging.getLogger(__name__)


@dataclass
class Conversation:
    user: User
    last_message: Message
    unread_count: int


def _message_key(message: Message):
    # id only breaks exact timestamp ties so the order is deterministic
    return (timestamp_key(message.created_at), message.id or 0)


def build_conversations(user_id: int, messages: Iterable[Message], users: Mapping[int, User]) -> list[Conversation]:
    """One Conversation per counterpart, most recent thread first.

    ``messages`` may contain unrelated rows; only those sent or received by
    ``user_id`` are considered. Counterparts missing from ``users`` are skipped.
    """
    threads: dict[int, list[Message]] = {}
    for m in messages:
        if m.sender_id == user_id:
            threads.setdefault(m.receiver_id, []).append(m)
        elif m.receiver_id == user_id:
            threads.setdefault(m.sender_id, []).append(m)

    conversations = []
    for counterpart_id, thread in threads.items():
        counterpart = users.get(counterpart_id)
        if counterpart is None:
            continue
        unread = sum(
            1 for m in thread
            if m.sender_id == counterpart_id and m.receiver_id == user_id and not m.read
        )
        conversations.append(Conversation(
            user=counterpart,
            last_message=max(thread, key=_message_key),
            unread_count=unread,
        ))

    conversations.sort(key=lambda c: _message_key(c.last_message), reverse=True)
    return conversations


def _between(user_id1: int, user_id2: int):
    return or_(
        and_(Message.sender_id == user_id1, Message.receiver_id == user_id2),
        and_(Message.sender_id == user_id2, Message.receiver_id == user_id1),
    )


def get_conversations(db: Session, user_id: int) -> list[Conversation]:
    messages = db.query(Message).filter(
        or_(Message.sender_id == user_id, Message.receiver_id == user_id)
    ).all()
    counterpart_ids = {m.receiver_id if m.sender_id == user_id else m.sender_id for m in messages}
    users = {}
    if counterpart_ids:
        users = {u.id: u for u in db.query(User).filter(User.id.in_(counterpart_ids)).all()}
    return build_conversations(user_id, messages, users)


def get_messages(db: Session, user_id: int, other_user_id: int) -> list[Message]:
    """Chronological thread between the two users. Unknown counterpart -> NotFoundError."""
    require_user(db, other_user_id)
    messages = db.query(Message).filter(_between(user_id, other_user_id)).all()
    return sorted(messages, key=_message_key)


def get_unread_count(db: Session, user_id: int) -> int:
    return db.query(Message).filter(
        Message.receiver_id == user_id,
        Message.read.is_(False),
    ).count()


def mark_read(db: Session, from_user_id: int, to_user_id: int) -> int:
    """Marks messages sent by from_user_id to to_user_id as read. Never touches the reverse direction."""
    updated = db.query(Message).filter(
        Message.sender_id == from_user_id,
        Message.receiver_id == to_user_id,
        Message.read.is_(False),
    ).update({Message.read: True}, synchronize_session="fetch")
    db.commit()
    return updated


def send_message(db: Session, sender: User, data: MessageCreateRequest) -> Message:
    if data.receiverId == sender.id:
        raise ValidationError("Cannot send a message to yourself")
    require_user(db, data.receiverId, "Receiver not found")
    if data.propertyId is not None:
        require_property(db, data.propertyId)

    message = Message(
        sender_id=sender.id,
        receiver_id=data.receiverId,
        property_id=data.propertyId,
        content=data.content,
        read=False,
    )
    db.add(message)
    db.flush()
    notifications.create_notification(
        db,
        user_id=data.receiverId,
        type="message",
        title="New Message",
        content=f"You have a new message from {sender.full_name}.",
        link_url=f"/messages/{sender.id}",
        commit=False,
    )
    db.commit()
    db.refresh(message)
    logger.info("Message %s sent from %s to %s", message.id, sender.id, data.receiverId)
    return message
