from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.api.deps import IdPath, get_current_user
from app.api.serializers import conversation_out, message_out, user_out
from app.db.session import get_db
from app.schemas.message import MessageCreateRequest
from app.services import conversations, users

router = APIRouter(prefix="/api", tags=["Messages"])


@router.get("/conversations")
def list_conversations(db: Session = Depends(get_db), user=Depends(get_current_user)):
    return [conversation_out(c) for c in conversations.get_conversations(db, user.id)]


# Declared before /messages/{user_id} so "unread" is not parsed as an id.
@router.get("/messages/unread/count")
def unread_message_count(db: Session = Depends(get_db), user=Depends(get_current_user)):
    return {"count": conversations.get_unread_count(db, user.id)}


@router.get("/messages/{user_id}")
def get_thread(
    user_id: IdPath,
    db: Session = Depends(get_db),
    user=Depends(get_current_user),
):
    other = users.require_user(db, user_id)
    messages = conversations.get_messages(db, user.id, other.id)
    # Opening the thread reads everything the counterpart sent us.
    conversations.mark_read(db, other.id, user.id)
    return {"messages": [message_out(m) for m in messages], "user": user_out(other)}


@router.post("/messages", status_code=201)
def send_message(
    data: MessageCreateRequest,
    db: Session = Depends(get_db),
    user=Depends(get_current_user),
):
    return message_out(conversations.send_message(db, user, data))
