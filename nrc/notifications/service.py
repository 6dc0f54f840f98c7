"""
Notification Service - Business logic for role based notifications.

This module provides notification creation, listing by role, the read
acknowledgment, and the high-risk registration rule.
"""
from typing import List, Optional
from sqlalchemy.orm import Session
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
import logging

from ..config import settings
from ..core.store import commit, get_or_404
from ..exceptions import AppException
from .models import Notification, NotificationPriority
from .schemas import NotificationCreate

# Set up logging
logger = logging.getLogger(__name__)

HIGH_RISK_ALERT = "high_risk_alert"
SUPERVISOR_ROLE = "supervisor"

def create_notification(db: Session, notification_data: NotificationCreate) -> Notification:
    """
    Store a new notification.

    Args:
        db: Database session
        notification_data: Validated notification data

    Returns:
        Notification: Newly created notification
    """
    data = notification_data.model_dump(exclude_none=True)
    notification = Notification(**data)
    db.add(notification)
    commit(db, notification, "create notification")
    logger.info(
        f"Notification {notification.id} ({notification.type}, {notification.priority.value}) "
        f"created for role {notification.user_role}"
    )
    return notification

def get_notifications_for_role(db: Session, role: str, unread_only: bool = False) -> List[Notification]:
    """
    Get the notifications addressed to a role, newest first.

    Args:
        db: Database session
        role: Recipient role
        unread_only: Skip notifications already marked as read

    Returns:
        List[Notification]: Matching notifications
    """
    query = select(Notification).where(Notification.user_role == role)
    if unread_only:
        query = query.where(Notification.read.is_(False))
    query = query.order_by(Notification.created_at.desc(), Notification.id.desc())
    return list(db.scalars(query))

def mark_as_read(db: Session, notification_id: int) -> Notification:
    """
    Mark a notification as read.

    Raises:
        ResourceNotFoundException: If notification not found
    """
    notification = get_or_404(db, Notification, notification_id, "Notification")
    if notification.read:
        return notification
    notification.read = True
    commit(db, notification, f"mark notification {notification_id} as read")
    return notification

def is_high_risk(risk_score: Optional[float], is_severely_malnourished: bool, threshold: float) -> bool:
    """A registration is high risk above the score threshold or when SAM is recorded."""
    return (risk_score is not None and risk_score > threshold) or is_severely_malnourished

def notify_high_risk_patient(db: Session, patient, threshold: Optional[float] = None) -> Optional[Notification]:
    """
    Raise a supervisor alert for a newly registered high-risk patient.

    This is best effort: a failure is logged and swallowed so the
    registration that triggered it stays committed.

    Args:
        db: Database session
        patient: The patient that was just committed
        threshold: Risk score threshold, defaults to the configured value

    Returns:
        Optional[Notification]: The alert, or None when not raised
    """
    if threshold is None:
        threshold = settings.high_risk_score_threshold

    if not is_high_risk(patient.risk_score, patient.is_severely_malnourished, threshold):
        return None

    logger.info(f"🚨 Patient {patient.id} is high risk, alerting supervisors")
    status_label = patient.nutrition_status.value if patient.nutrition_status else "unknown"
    alert = NotificationCreate(
        user_role=SUPERVISOR_ROLE,
        type=HIGH_RISK_ALERT,
        title="High Risk Patient Registered",
        message=(
            f"New high-risk patient {patient.name} has been registered with "
            f"{status_label} status (risk score {patient.risk_score:g})."
        ),
        priority=NotificationPriority.HIGH,
        action_required=True,
        related_entity_type="patient",
        related_entity_id=patient.id
    )
    try:
        return create_notification(db, alert)
    except (SQLAlchemyError, AppException) as e:
        db.rollback()
        logger.error(f"❌ Failed to create high-risk alert for patient {patient.id}: {str(e)}")
        return None
