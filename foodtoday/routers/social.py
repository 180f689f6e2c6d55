from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session
from foodtoday.database import get_db
from foodtoday.dependencies import get_current_user
from foodtoday.models.notification import Notification
from foodtoday.models.user import User
from foodtoday.schemas.social import NotificationListResponse, MessagesResponse

notifications_router = APIRouter(prefix="/api/notifications", tags=["notifications"])
messages_router = APIRouter(prefix="/api/messages", tags=["messages"])

PLANNED_MESSAGE_FEATURES = [
    "Direct messages between cooks",
    "Share recipes in conversations",
    "Group chats for meal planning",
]


@notifications_router.get("", response_model=NotificationListResponse)
async def get_notifications(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    notifications = (
        db.query(Notification)
        .filter(Notification.user_id == current_user.id)
        .order_by(Notification.created_at.desc())
        .limit(20)
        .all()
    )
    unread_count = (
        db.query(Notification)
        .filter(Notification.user_id == current_user.id)
        .filter(Notification.is_read == False)  # noqa: E712
        .count()
    )
    return {"unread_count": unread_count, "items": notifications}


@notifications_router.post("/{notification_id}/read")
async def mark_notification_read(
    notification_id: str,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    notification = (
        db.query(Notification)
        .filter(Notification.id == notification_id)
        .filter(Notification.user_id == current_user.id)
        .first()
    )
    if not notification:
        raise HTTPException(status_code=404, detail="Notification not found")

    notification.is_read = True
    db.commit()
    return {"status": "ok"}


@messages_router.get("", response_model=MessagesResponse)
async def get_messages(current_user: User = Depends(get_current_user)):
    # Messaging has no backend yet
    return MessagesResponse(status="coming_soon", items=[], features=PLANNED_MESSAGE_FEATURES)
