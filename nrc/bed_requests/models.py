"""
Bed Request Model - Stores a worker's request to admit a patient.

A request starts pending and is reviewed exactly once; after that it is
immutable.
"""
from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, JSON, Text, Enum, func
from sqlalchemy.orm import relationship
import enum
from ..database import Base, enum_values

class UrgencyLevel(str, enum.Enum):
    """Enum for request urgency"""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"

class BedRequestStatus(str, enum.Enum):
    """Enum for request status"""
    PENDING = "pending"
    APPROVED = "approved"
    DECLINED = "declined"
    CANCELLED = "cancelled"

class ReferralUrgency(str, enum.Enum):
    """Enum for hospital referral urgency"""
    ROUTINE = "routine"
    URGENT = "urgent"
    EMERGENCY = "emergency"

class BedRequest(Base):
    """
    Bed Request Model - Stores admission requests
    
    Fields:
    - id: Primary key
    - patient_id: Foreign key to Patient
    - requested_by: Worker who raised the request
    - request_date: When it was raised
    - urgency_level: low, medium, high or critical
    - medical_justification, current_condition: Clinical reasoning
    - estimated_stay_duration: Expected stay in days
    - special_requirements: Free text
    - status: pending, approved, declined or cancelled
    - reviewed_by, review_date, review_comments: Set once by the reviewer
    - hospital_referral: Free-text referral details (JSON)
    """
    __tablename__ = "bed_requests"

    id = Column(Integer, primary_key=True, index=True)
    patient_id = Column(Integer, ForeignKey("patients.id"), nullable=False, index=True)
    requested_by = Column(String, nullable=True)
    request_date = Column(DateTime(timezone=True), server_default=func.now())
    urgency_level = Column(Enum(UrgencyLevel, name="urgency_level", values_callable=enum_values), nullable=False)
    medical_justification = Column(Text, nullable=False)
    current_condition = Column(Text, nullable=False)
    estimated_stay_duration = Column(Integer, nullable=False)
    special_requirements = Column(Text, nullable=True)
    status = Column(
        Enum(BedRequestStatus, name="bed_request_status", values_callable=enum_values),
        nullable=False,
        default=BedRequestStatus.PENDING,
        index=True
    )
    reviewed_by = Column(String, nullable=True)
    review_date = Column(DateTime(timezone=True), nullable=True)
    review_comments = Column(Text, nullable=True)
    hospital_referral = Column(JSON, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    # Relationships
    patient = relationship("Patient")

    def __repr__(self):
        """String representation of the BedRequest model"""
        return f"<BedRequest(id={self.id}, patient_id={self.patient_id}, status='{self.status}')>"

    @property
    def is_pending(self) -> bool:
        return self.status == BedRequestStatus.PENDING

    @property
    def patient_name(self) -> str:
        """Get the requested patient's name"""
        return self.patient.name if self.patient else None

    @property
    def patient_type(self):
        return self.patient.type if self.patient else None

    @property
    def nutrition_status(self):
        return self.patient.nutrition_status if self.patient else None
