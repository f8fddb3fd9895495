from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.api.deps import IdPath, get_current_user
from app.api.serializers import notification_out
from app.core.errors import NotFoundError
from app.db.session import get_db
from app.services import notifications

router = APIRouter(prefix="/api/notifications", tags=["Notifications"])


@router.get("")
def list_notifications(db: Session = Depends(get_db), user=Depends(get_current_user)):
    return [notification_out(n) for n in notifications.list_notifications(db, user.id)]


@router.get("/unread/count")
def unread_notification_count(db: Session = Depends(get_db), user=Depends(get_current_user)):
    return {"count": notifications.unread_count(db, user.id)}


@router.post("/read-all")
def mark_all_read(db: Session = Depends(get_db), user=Depends(get_current_user)):
    notifications.mark_all_read(db, user.id)
    return {"message": "All notifications marked as read"}


@router.post("/{notification_id}/read")
def mark_read(
    notification_id: IdPath,
    db: Session = Depends(get_db),
    user=Depends(get_current_user),
):
    if not notifications.mark_one_read(db, user.id, notification_id):
        raise NotFoundError("Notification not found")
    return {"message": "Notification marked as read"}
