"""
Notification Schemas - Pydantic models for notification creation and responses.
"""
from typing import Optional
from pydantic import Field
from datetime import datetime
from ..core.schemas import CamelModel
from .models import NotificationPriority

class NotificationCreate(CamelModel):
    """Notification Creation Schema"""
    user_role: str = Field(..., min_length=1, description="Role the notification is addressed to")
    type: str = Field(..., min_length=1)
    title: str = Field(..., min_length=1)
    message: str = Field(..., min_length=1)
    priority: NotificationPriority = NotificationPriority.MEDIUM
    action_required: bool = False
    date: Optional[datetime] = None
    related_entity_type: Optional[str] = None
    related_entity_id: Optional[int] = None

class NotificationResponse(CamelModel):
    """Notification Response Schema"""
    id: int
    user_role: str
    type: str
    title: str
    message: str
    priority: NotificationPriority
    action_required: bool
    read: bool
    date: Optional[datetime] = None
    related_entity_type: Optional[str] = None
    related_entity_id: Optional[int] = None
    created_at: Optional[datetime] = None
