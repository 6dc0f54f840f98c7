"""
Medical Record Model - Stores one clinical observation of a patient.

Records are append-only. Vitals, nutrition assessment and lab results are
stored as flat columns and grouped back into nested objects by the schemas.
"""
from sqlalchemy import Column, Integer, String, Boolean, DateTime, Float, ForeignKey, JSON, Text, Enum, func
from sqlalchemy.orm import relationship
import enum
from ..database import Base, enum_values

class VisitType(str, enum.Enum):
    """Enum for the kind of visit that produced the record"""
    ROUTINE = "routine"
    EMERGENCY = "emergency"
    FOLLOW_UP = "follow_up"
    ADMISSION = "admission"
    DISCHARGE = "discharge"

class Appetite(str, enum.Enum):
    POOR = "poor"
    MODERATE = "moderate"
    GOOD = "good"

class FoodIntake(str, enum.Enum):
    INADEQUATE = "inadequate"
    ADEQUATE = "adequate"
    EXCESSIVE = "excessive"

class MedicalRecord(Base):
    """
    Medical Record Model - Stores patient medical records
    
    Fields:
    - id: Primary key
    - patient_id: Foreign key to Patient
    - visit_date, visit_type, health_worker_id: Context of the observation
    - weight ... oxygen_saturation: Vitals
    - symptoms, diagnosis, treatment, supplements: JSON lists
    - appetite, food_intake, diet_plan: Nutrition assessment
    - hemoglobin, blood_sugar, protein_level: Lab results
    - notes, next_visit_date, follow_up_required: Follow-up information
    """
    __tablename__ = "medical_records"

    id = Column(Integer, primary_key=True, index=True)
    patient_id = Column(Integer, ForeignKey("patients.id"), nullable=False, index=True)
    visit_date = Column(DateTime(timezone=True), server_default=func.now())
    visit_type = Column(Enum(VisitType, name="visit_type", values_callable=enum_values), nullable=False)
    health_worker_id = Column(String, nullable=True)

    # Vitals
    weight = Column(Float, nullable=False)
    height = Column(Float, nullable=False)
    temperature = Column(Float, nullable=True)
    blood_pressure = Column(String, nullable=True)
    pulse = Column(Integer, nullable=True)
    respiratory_rate = Column(Integer, nullable=True)
    oxygen_saturation = Column(Float, nullable=True)

    symptoms = Column(JSON, nullable=False, default=list)
    diagnosis = Column(JSON, nullable=False, default=list)
    treatment = Column(JSON, nullable=False, default=list)

    # Nutrition assessment
    appetite = Column(Enum(Appetite, name="appetite", values_callable=enum_values), nullable=True)
    food_intake = Column(Enum(FoodIntake, name="food_intake", values_callable=enum_values), nullable=True)
    supplements = Column(JSON, nullable=False, default=list)
    diet_plan = Column(Text, nullable=True)

    # Lab results
    hemoglobin = Column(Float, nullable=True)
    blood_sugar = Column(Float, nullable=True)
    protein_level = Column(Float, nullable=True)

    notes = Column(Text, nullable=True)
    next_visit_date = Column(DateTime(timezone=True), nullable=True)
    follow_up_required = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    # Relationships
    patient = relationship("Patient")

    def __repr__(self):
        """String representation of the MedicalRecord model"""
        return f"<MedicalRecord(id={self.id}, patient_id={self.patient_id}, visit_type='{self.visit_type}')>"
