"""
Notification Router - API endpoints for role based notifications.
"""
from typing import List
from fastapi import APIRouter, Depends, status, Query
from sqlalchemy.orm import Session

from ..database import get_db
from .schemas import NotificationCreate, NotificationResponse
from .service import create_notification, get_notifications_for_role, mark_as_read

router = APIRouter()

@router.get("/role/{role}", response_model=List[NotificationResponse])
async def get_role_notifications(
    role: str,
    unread_only: bool = Query(False, alias="unreadOnly", description="Only return unread notifications"),
    db: Session = Depends(get_db)
):
    """
    Get notifications addressed to a role, newest first
    """
    return get_notifications_for_role(db, role, unread_only)

@router.post("/", response_model=NotificationResponse, status_code=status.HTTP_201_CREATED)
async def post_notification(
    notification_data: NotificationCreate,
    db: Session = Depends(get_db)
):
    """
    Create a notification
    """
    return create_notification(db, notification_data)

@router.put("/{notification_id}/read", response_model=NotificationResponse)
async def read_notification(
    notification_id: int,
    db: Session = Depends(get_db)
):
    """
    Mark a notification as read
    """
    return mark_as_read(db, notification_id)
