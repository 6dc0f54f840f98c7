"""
Notification Model - Stores alerts addressed to a user role.

Notifications are append-only; the read flag is the only field that changes
after creation.
"""
from sqlalchemy import Column, Integer, String, Boolean, DateTime, Text, Enum, func
import enum
from ..database import Base, enum_values

class NotificationPriority(str, enum.Enum):
    """Enum for notification priority"""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"

class Notification(Base):
    """
    Notification Model - Stores role addressed alerts
    
    Fields:
    - id: Primary key
    - user_role: Role that should see the notification (supervisor, anganwadi_worker, ...)
    - type: Machine readable kind (high_risk_alert, ...)
    - title / message: Display text
    - priority: low, medium, high or critical
    - action_required: Whether the recipient must act on it
    - read: Whether it has been acknowledged
    - related_entity_type / related_entity_id: Loose reference to the originating record
    """
    __tablename__ = "notifications"

    id = Column(Integer, primary_key=True, index=True)
    user_role = Column(String, nullable=False, index=True)
    type = Column(String, nullable=False)
    title = Column(String, nullable=False)
    message = Column(Text, nullable=False)
    priority = Column(
        Enum(NotificationPriority, name="notification_priority", values_callable=enum_values),
        nullable=False,
        default=NotificationPriority.MEDIUM
    )
    action_required = Column(Boolean, nullable=False, default=False)
    read = Column(Boolean, nullable=False, default=False)
    date = Column(DateTime(timezone=True), server_default=func.now())
    related_entity_type = Column(String, nullable=True)
    related_entity_id = Column(Integer, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    def __repr__(self):
        """String representation of the Notification model"""
        return f"<Notification(id={self.id}, user_role='{self.user_role}', type='{self.type}', read={self.read})>"
