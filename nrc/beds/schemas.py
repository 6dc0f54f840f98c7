"""
Bed Schemas - Pydantic models for hospitals, beds and bed status changes.
"""
from typing import Optional
from pydantic import Field, model_validator
from datetime import datetime
from ..core.schemas import CamelModel
from ..patients.models import PatientType, NutritionStatus
from .models import BedStatus

class HospitalResponse(CamelModel):
    """Hospital Response Schema"""
    id: int
    name: str
    code: str
    address: Optional[str] = None
    contact_number: Optional[str] = None
    total_beds: int
    nrc_equipped: bool

class BedResponse(CamelModel):
    """
    Bed Response Schema - Bed with its hospital and occupant summary

    Fields:
    - id: Bed ID
    - hospital_id / hospital_name: Owning hospital
    - number, ward: Location of the bed
    - status: available, occupied or maintenance
    - patient_id, patient_name, patient_type, nutrition_status: Current occupant
    - admission_date: Admission date of the occupant
    """
    id: int
    hospital_id: int
    hospital_name: Optional[str] = None
    number: str
    ward: str
    status: BedStatus
    patient_id: Optional[int] = None
    patient_name: Optional[str] = None
    patient_type: Optional[PatientType] = None
    nutrition_status: Optional[NutritionStatus] = None
    admission_date: Optional[datetime] = None

class BedStatusUpdate(CamelModel):
    """
    Bed Status Update Schema - Body of PUT /beds/{id}

    Fields:
    - status: Target status
    - patient_id: Patient to admit (required when status is occupied)
    - admission_date: Admission date (defaults to now when admitting)
    """
    status: BedStatus = Field(..., description="Target bed status")
    patient_id: Optional[int] = Field(None, description="Patient to admit")
    admission_date: Optional[datetime] = Field(None, description="Admission date")

    @model_validator(mode="after")
    def check_patient_for_status(self):
        """Occupying needs a patient; other targets must not name one"""
        if self.status == BedStatus.OCCUPIED and self.patient_id is None:
            raise ValueError("patientId is required when status is occupied")
        if self.status != BedStatus.OCCUPIED and self.patient_id is not None:
            raise ValueError("patientId is only accepted when status is occupied")
        return self

    class Config:
        """Configuration for Pydantic model"""
        json_schema_extra = {
            "example": {
                "status": "occupied",
                "patientId": 1,
                "admissionDate": "2024-06-01T09:30:00Z"
            }
        }

class BedSearchParams(CamelModel):
    """Filters accepted by the bed list endpoint"""
    hospital_id: Optional[int] = None
    ward: Optional[str] = None
    status: Optional[BedStatus] = None
