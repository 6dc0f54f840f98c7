"""
Patient Model - Stores registered children and pregnant women.

Patients are never hard-deleted; deactivation flips is_active so medical
records, visits and bed requests keep a valid reference.
"""
from sqlalchemy import Column, Integer, String, Boolean, DateTime, Float, ForeignKey, JSON, Text, Enum, func
import enum
from ..database import Base, enum_values

class PatientType(str, enum.Enum):
    """Enum for patient category"""
    CHILD = "child"
    PREGNANT = "pregnant"

class NutritionStatus(str, enum.Enum):
    """Enum for nutrition status (SEVERELY_MALNOURISHED is SAM)"""
    NORMAL = "normal"
    MALNOURISHED = "malnourished"
    SEVERELY_MALNOURISHED = "severely_malnourished"

class Patient(Base):
    """
    Patient Model - Stores patient registration and current health data
    
    Fields:
    - id: Primary key
    - registration_number: Unique NRC registration number
    - aadhaar_number: Optional national id, unique when present
    - type: child or pregnant
    - nutrition_status: normal, malnourished or severely_malnourished
    - medical_history, symptoms, documents, photos, nutritional_deficiency: JSON lists
    - risk_score: 0-100 risk estimate
    - bed_id: Bed currently occupied (maintained by the bed coordinator only)
    - last_visit_date: Date of the latest medical record
    - is_active: False once the patient is soft-deleted
    """
    __tablename__ = "patients"

    id = Column(Integer, primary_key=True, index=True)
    registration_number = Column(String, unique=True, nullable=False, index=True)
    aadhaar_number = Column(String, unique=True, nullable=True)
    name = Column(String, nullable=False)
    age = Column(Integer, nullable=False)
    type = Column(Enum(PatientType, name="patient_type", values_callable=enum_values), nullable=False)
    pregnancy_week = Column(Integer, nullable=True)
    contact_number = Column(String, nullable=False)
    emergency_contact = Column(String, nullable=True)
    address = Column(Text, nullable=False)
    weight = Column(Float, nullable=False)
    height = Column(Float, nullable=False)
    blood_pressure = Column(String, nullable=True)
    temperature = Column(Float, nullable=True)
    hemoglobin = Column(Float, nullable=True)
    nutrition_status = Column(
        Enum(NutritionStatus, name="nutrition_status", values_callable=enum_values),
        nullable=False,
        index=True
    )
    medical_history = Column(JSON, nullable=False, default=list)
    symptoms = Column(JSON, nullable=False, default=list)
    documents = Column(JSON, nullable=False, default=list)
    photos = Column(JSON, nullable=False, default=list)
    remarks = Column(Text, nullable=True)
    risk_score = Column(Float, nullable=False, default=0)
    nutritional_deficiency = Column(JSON, nullable=False, default=list)
    bed_id = Column(Integer, ForeignKey("beds.id", use_alter=True, name="fk_patients_bed_id"), nullable=True)
    last_visit_date = Column(DateTime(timezone=True), nullable=True)
    next_visit_date = Column(DateTime(timezone=True), nullable=True)
    registered_by = Column(String, nullable=True)
    registration_date = Column(DateTime(timezone=True), server_default=func.now())
    is_active = Column(Boolean, nullable=False, default=True, index=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    def __repr__(self):
        """String representation of the Patient model"""
        return f"<Patient(id={self.id}, registration_number='{self.registration_number}', bed_id={self.bed_id})>"

    @property
    def is_severely_malnourished(self) -> bool:
        return self.nutrition_status == NutritionStatus.SEVERELY_MALNOURISHED
