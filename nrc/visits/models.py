"""
Visit Model - Stores scheduled health worker visits.
"""
from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, Text, Enum, func
from sqlalchemy.orm import relationship
from datetime import datetime, timezone
import enum
from ..database import Base, enum_values

class VisitStatus(str, enum.Enum):
    """Enum for visit status"""
    SCHEDULED = "scheduled"
    COMPLETED = "completed"
    MISSED = "missed"
    RESCHEDULED = "rescheduled"

# Statuses that record when the visit actually happened (or was due)
CLOSED_STATUSES = frozenset({VisitStatus.COMPLETED, VisitStatus.MISSED})

class Visit(Base):
    """
    Visit Model - Stores a visit to a patient
    
    Fields:
    - id: Primary key
    - patient_id: Foreign key to Patient
    - health_worker_id: Worker responsible for the visit
    - scheduled_date: Planned date
    - actual_date: Set only once the visit is completed or missed
    - status: scheduled, completed, missed or rescheduled
    - notes: Free text
    """
    __tablename__ = "visits"

    id = Column(Integer, primary_key=True, index=True)
    patient_id = Column(Integer, ForeignKey("patients.id"), nullable=False, index=True)
    health_worker_id = Column(String, nullable=False)
    scheduled_date = Column(DateTime(timezone=True), nullable=False)
    actual_date = Column(DateTime(timezone=True), nullable=True)
    status = Column(
        Enum(VisitStatus, name="visit_status", values_callable=enum_values),
        nullable=False,
        default=VisitStatus.SCHEDULED
    )
    notes = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    # Relationships
    patient = relationship("Patient")

    def __repr__(self):
        """String representation of the Visit model"""
        return f"<Visit(id={self.id}, patient_id={self.patient_id}, status='{self.status}')>"

    @property
    def patient_name(self) -> str:
        """Get the visited patient's name"""
        return self.patient.name if self.patient else None

    @property
    def patient_type(self):
        return self.patient.type if self.patient else None

    def update_status(self, status: VisitStatus, actual_date: datetime = None) -> None:
        """
        Update visit status, keeping actual_date in step with it
        
        Args:
            status: New visit status
            actual_date: When the visit happened; defaults to now for closed statuses
        """
        self.status = status
        if status in CLOSED_STATUSES:
            self.actual_date = actual_date or self.actual_date or datetime.now(timezone.utc)
        else:
            self.actual_date = None
