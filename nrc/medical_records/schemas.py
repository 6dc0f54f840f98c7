"""
Medical Record Schemas - Pydantic models for medical record creation and responses.

The wire format groups vitals, nutrition assessment and lab results into
nested objects. to_model_fields and from_model map between that shape and
the flat columns of MedicalRecord.
"""
from typing import Optional, List, Dict, Any
from pydantic import Field
from datetime import datetime
from ..core.schemas import CamelModel
from .models import MedicalRecord, VisitType, Appetite, FoodIntake

class Vitals(CamelModel):
    """Vital signs taken during the visit"""
    weight: float = Field(..., ge=0, description="Weight in kg")
    height: float = Field(..., ge=0, description="Height in cm")
    temperature: Optional[float] = None
    blood_pressure: Optional[str] = None
    pulse: Optional[int] = Field(None, ge=0)
    respiratory_rate: Optional[int] = Field(None, ge=0)
    oxygen_saturation: Optional[float] = Field(None, ge=0, le=100)

class NutritionAssessment(CamelModel):
    """Dietary assessment"""
    appetite: Optional[Appetite] = None
    food_intake: Optional[FoodIntake] = None
    supplements: List[str] = Field(default_factory=list)
    diet_plan: Optional[str] = None

class LabResults(CamelModel):
    """Laboratory values"""
    hemoglobin: Optional[float] = Field(None, ge=0)
    blood_sugar: Optional[float] = Field(None, ge=0)
    protein_level: Optional[float] = Field(None, ge=0)

class MedicalRecordCreate(CamelModel):
    """
    Medical Record Creation Schema

    Fields:
    - patient_id: Patient the record belongs to
    - date: Visit date (defaults to now)
    - visit_type: routine, emergency, follow_up, admission or discharge
    - vitals: Required vitals (weight and height at minimum)
    """
    patient_id: int
    date: Optional[datetime] = Field(None, description="Visit date, defaults to now")
    visit_type: VisitType
    health_worker_id: Optional[str] = None
    vitals: Vitals
    symptoms: List[str] = Field(default_factory=list)
    diagnosis: List[str] = Field(default_factory=list)
    treatment: List[str] = Field(default_factory=list)
    nutrition_assessment: NutritionAssessment = Field(default_factory=NutritionAssessment)
    lab_results: LabResults = Field(default_factory=LabResults)
    notes: Optional[str] = None
    next_visit_date: Optional[datetime] = None
    follow_up_required: bool = False

    def to_model_fields(self) -> Dict[str, Any]:
        """Flatten the nested groups into MedicalRecord column values"""
        fields = {
            "patient_id": self.patient_id,
            "visit_type": self.visit_type,
            "health_worker_id": self.health_worker_id,
            "symptoms": list(self.symptoms),
            "diagnosis": list(self.diagnosis),
            "treatment": list(self.treatment),
            "notes": self.notes,
            "next_visit_date": self.next_visit_date,
            "follow_up_required": self.follow_up_required,
        }
        if self.date is not None:
            fields["visit_date"] = self.date
        fields.update(self.vitals.model_dump())
        fields.update(self.nutrition_assessment.model_dump())
        fields.update(self.lab_results.model_dump())
        return fields

class MedicalRecordResponse(CamelModel):
    """Medical Record Response Schema"""
    id: int
    patient_id: int
    date: Optional[datetime] = None
    visit_type: VisitType
    health_worker_id: Optional[str] = None
    vitals: Vitals
    symptoms: List[str] = Field(default_factory=list)
    diagnosis: List[str] = Field(default_factory=list)
    treatment: List[str] = Field(default_factory=list)
    nutrition_assessment: NutritionAssessment
    lab_results: LabResults
    notes: Optional[str] = None
    next_visit_date: Optional[datetime] = None
    follow_up_required: bool = False

    @classmethod
    def from_model(cls, record: MedicalRecord) -> "MedicalRecordResponse":
        """Group the flat MedicalRecord columns into the nested wire shape"""
        return cls(
            id=record.id,
            patient_id=record.patient_id,
            date=record.visit_date,
            visit_type=record.visit_type,
            health_worker_id=record.health_worker_id,
            vitals=Vitals(
                weight=record.weight,
                height=record.height,
                temperature=record.temperature,
                blood_pressure=record.blood_pressure,
                pulse=record.pulse,
                respiratory_rate=record.respiratory_rate,
                oxygen_saturation=record.oxygen_saturation
            ),
            symptoms=record.symptoms or [],
            diagnosis=record.diagnosis or [],
            treatment=record.treatment or [],
            nutrition_assessment=NutritionAssessment(
                appetite=record.appetite,
                food_intake=record.food_intake,
                supplements=record.supplements or [],
                diet_plan=record.diet_plan
            ),
            lab_results=LabResults(
                hemoglobin=record.hemoglobin,
                blood_sugar=record.blood_sugar,
                protein_level=record.protein_level
            ),
            notes=record.notes,
            next_visit_date=record.next_visit_date,
            follow_up_required=record.follow_up_required
        )
