"""
Patient Schemas - Pydantic models for patient registration, updates and responses.
"""
from typing import Optional, List
from pydantic import Field, model_validator
from datetime import datetime
from ..core.schemas import CamelModel
from .models import PatientType, NutritionStatus

class PatientBase(CamelModel):
    """Fields shared by registration and responses"""
    aadhaar_number: Optional[str] = Field(None, description="Aadhaar number, unique when present")
    name: str = Field(..., min_length=1, description="Patient's full name")
    age: int = Field(..., ge=0, description="Age in years (months for infants are recorded in remarks)")
    type: PatientType = Field(..., description="child or pregnant")
    pregnancy_week: Optional[int] = Field(None, ge=0, le=45, description="Week of pregnancy")
    contact_number: str = Field(..., min_length=1, description="Primary contact number")
    emergency_contact: Optional[str] = None
    address: str = Field(..., min_length=1)
    weight: float = Field(..., ge=0, description="Weight in kg")
    height: float = Field(..., ge=0, description="Height in cm")
    blood_pressure: Optional[str] = None
    temperature: Optional[float] = None
    hemoglobin: Optional[float] = Field(None, ge=0)
    nutrition_status: NutritionStatus
    medical_history: List[str] = Field(default_factory=list)
    symptoms: List[str] = Field(default_factory=list)
    documents: List[str] = Field(default_factory=list)
    photos: List[str] = Field(default_factory=list)
    remarks: Optional[str] = None
    risk_score: float = Field(0, ge=0, le=100, description="Risk score between 0 and 100")
    nutritional_deficiency: List[str] = Field(default_factory=list)
    registered_by: Optional[str] = None

class PatientCreate(PatientBase):
    """
    Patient Registration Schema - Used when registering a new patient

    registration_number is generated by the server when omitted.
    """
    registration_number: Optional[str] = Field(None, min_length=1, description="NRC registration number")

    @model_validator(mode="after")
    def check_pregnancy_week(self):
        """Only pregnant patients carry a pregnancy week"""
        if self.pregnancy_week is not None and self.type != PatientType.PREGNANT:
            raise ValueError("pregnancyWeek is only valid for pregnant patients")
        return self

class PatientUpdate(CamelModel):
    """
    Patient Update Schema - Partial update; bed assignment, registration
    number and the active flag are not editable here.
    """
    aadhaar_number: Optional[str] = None
    name: Optional[str] = Field(None, min_length=1)
    age: Optional[int] = Field(None, ge=0)
    type: Optional[PatientType] = None
    pregnancy_week: Optional[int] = Field(None, ge=0, le=45)
    contact_number: Optional[str] = Field(None, min_length=1)
    emergency_contact: Optional[str] = None
    address: Optional[str] = Field(None, min_length=1)
    weight: Optional[float] = Field(None, ge=0)
    height: Optional[float] = Field(None, ge=0)
    blood_pressure: Optional[str] = None
    temperature: Optional[float] = None
    hemoglobin: Optional[float] = Field(None, ge=0)
    nutrition_status: Optional[NutritionStatus] = None
    medical_history: Optional[List[str]] = None
    symptoms: Optional[List[str]] = None
    documents: Optional[List[str]] = None
    photos: Optional[List[str]] = None
    remarks: Optional[str] = None
    risk_score: Optional[float] = Field(None, ge=0, le=100)
    nutritional_deficiency: Optional[List[str]] = None
    next_visit_date: Optional[datetime] = None

class PatientResponse(PatientBase):
    """Patient Response Schema - Used when returning patient data"""
    id: int
    registration_number: str
    bed_id: Optional[int] = None
    last_visit_date: Optional[datetime] = None
    next_visit_date: Optional[datetime] = None
    registration_date: Optional[datetime] = None
    is_active: bool
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

class PatientSearchParams(CamelModel):
    """Filters accepted by the patient list endpoint"""
    type: Optional[PatientType] = None
    nutrition_status: Optional[NutritionStatus] = None
    include_inactive: bool = False
