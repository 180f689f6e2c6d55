from datetime import datetime
from pydantic import BaseModel
from typing import Optional, List


class NotificationResponse(BaseModel):
    id: str
    type: str
    message: str
    data: Optional[str]
    is_read: bool
    created_at: datetime

    class Config:
        from_attributes = True


class NotificationListResponse(BaseModel):
    unread_count: int
    items: List[NotificationResponse]


class MessagesResponse(BaseModel):
    status: str
    items: List[dict]
    features: List[str]
