"""
Visit Schemas - Pydantic models for visit scheduling and updates.
"""
from typing import Optional
from pydantic import Field, model_validator
from datetime import datetime
from ..core.schemas import CamelModel
from ..patients.models import PatientType
from .models import VisitStatus, CLOSED_STATUSES

class VisitCreate(CamelModel):
    """Visit Creation Schema"""
    patient_id: int
    health_worker_id: str = Field(..., min_length=1)
    scheduled_date: datetime
    actual_date: Optional[datetime] = None
    status: VisitStatus = VisitStatus.SCHEDULED
    notes: Optional[str] = None

    @model_validator(mode="after")
    def check_actual_date(self):
        """actualDate belongs to completed or missed visits only"""
        if self.actual_date is not None and self.status not in CLOSED_STATUSES:
            raise ValueError("actualDate is only allowed when status is completed or missed")
        return self

class VisitUpdate(CamelModel):
    """Visit Update Schema - Partial update"""
    health_worker_id: Optional[str] = Field(None, min_length=1)
    scheduled_date: Optional[datetime] = None
    actual_date: Optional[datetime] = None
    status: Optional[VisitStatus] = None
    notes: Optional[str] = None

class VisitResponse(CamelModel):
    """Visit Response Schema"""
    id: int
    patient_id: int
    patient_name: Optional[str] = None
    patient_type: Optional[PatientType] = None
    health_worker_id: str
    scheduled_date: datetime
    actual_date: Optional[datetime] = None
    status: VisitStatus
    notes: Optional[str] = None
