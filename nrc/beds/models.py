"""
Hospital and Bed Models - Stores the NRC facilities and their beds.

Beds are seeded at deployment and change only through the bed-assignment
coordinator in beds.service.
"""
from sqlalchemy import Column, Integer, String, Boolean, DateTime, ForeignKey, Enum, UniqueConstraint, func
from sqlalchemy.orm import relationship
import enum
from ..database import Base, enum_values

class BedStatus(str, enum.Enum):
    """Enum for bed status"""
    AVAILABLE = "available"
    OCCUPIED = "occupied"
    MAINTENANCE = "maintenance"

class Hospital(Base):
    """
    Hospital Model - Stores facilities that own beds
    
    Fields:
    - id: Primary key
    - name: Hospital name
    - code: Unique hospital code
    - address, contact_number: Contact details
    - total_beds: Declared bed capacity
    - nrc_equipped: Whether the hospital runs an NRC ward
    """
    __tablename__ = "hospitals"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    code = Column(String, unique=True, nullable=False)
    address = Column(String, nullable=True)
    contact_number = Column(String, nullable=True)
    total_beds = Column(Integer, nullable=False, default=0)
    nrc_equipped = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    # Relationships
    beds = relationship("Bed", back_populates="hospital")

    def __repr__(self):
        """String representation of the Hospital model"""
        return f"<Hospital(id={self.id}, code='{self.code}')>"

class Bed(Base):
    """
    Bed Model - Stores a single bed and its occupant
    
    Fields:
    - id: Primary key
    - hospital_id: Foreign key to Hospital
    - number: Bed number within the hospital (B001, M002, ...)
    - ward: Ward name
    - status: available, occupied or maintenance
    - patient_id: Current occupant, set exactly when status is occupied
    - admission_date: When the current occupant was admitted
    """
    __tablename__ = "beds"
    __table_args__ = (UniqueConstraint("hospital_id", "number", name="uq_beds_hospital_number"),)

    id = Column(Integer, primary_key=True, index=True)
    hospital_id = Column(Integer, ForeignKey("hospitals.id"), nullable=False)
    number = Column(String, nullable=False)
    ward = Column(String, nullable=False)
    status = Column(
        Enum(BedStatus, name="bed_status", values_callable=enum_values),
        nullable=False,
        default=BedStatus.AVAILABLE,
        index=True
    )
    patient_id = Column(Integer, ForeignKey("patients.id"), nullable=True)
    admission_date = Column(DateTime(timezone=True), nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    # Relationships
    hospital = relationship("Hospital", back_populates="beds")
    patient = relationship("Patient", foreign_keys=[patient_id], viewonly=True)

    def __repr__(self):
        """String representation of the Bed model"""
        return f"<Bed(id={self.id}, number='{self.number}', status='{self.status}', patient_id={self.patient_id})>"

    @property
    def hospital_name(self) -> str:
        """Get the owning hospital's name"""
        return self.hospital.name if self.hospital else None

    @property
    def patient_name(self) -> str:
        """Get the occupant's name"""
        return self.patient.name if self.patient else None

    @property
    def patient_type(self):
        return self.patient.type if self.patient else None

    @property
    def nutrition_status(self):
        return self.patient.nutrition_status if self.patient else None
