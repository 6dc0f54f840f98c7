"""
Bed Request Schemas - Pydantic models for creating and reviewing bed requests.
"""
from typing import Optional
from pydantic import Field, model_validator
from datetime import datetime
from ..core.schemas import CamelModel
from ..patients.models import PatientType, NutritionStatus
from .models import UrgencyLevel, BedRequestStatus, ReferralUrgency

class HospitalReferral(CamelModel):
    """Referral to another hospital when no NRC bed can be offered"""
    hospital_name: Optional[str] = None
    contact_number: Optional[str] = None
    referral_reason: Optional[str] = None
    referral_date: Optional[datetime] = None
    urgency_level: Optional[ReferralUrgency] = None

class BedRequestCreate(CamelModel):
    """
    Bed Request Creation Schema

    New requests are always pending; a status sent by the client is ignored.
    """
    patient_id: int = Field(..., description="Patient to admit")
    requested_by: Optional[str] = None
    request_date: Optional[datetime] = None
    urgency_level: UrgencyLevel
    medical_justification: str = Field(..., min_length=1)
    current_condition: str = Field(..., min_length=1)
    estimated_stay_duration: int = Field(..., ge=1, description="Expected stay in days")
    special_requirements: Optional[str] = None

class BedRequestReview(CamelModel):
    """
    Bed Request Review Schema - Body of PUT /bed-requests/{id}

    Fields:
    - status: approved, declined or cancelled
    - reviewed_by: Reviewer (required for approve and decline)
    - review_comments: Reviewer's comments
    - hospital_referral: Optional referral details
    """
    status: BedRequestStatus
    reviewed_by: Optional[str] = Field(None, min_length=1)
    review_comments: Optional[str] = None
    hospital_referral: Optional[HospitalReferral] = None

    @model_validator(mode="after")
    def check_review(self):
        """A review must move the request out of pending, and name a reviewer unless cancelling"""
        if self.status == BedRequestStatus.PENDING:
            raise ValueError("status must be approved, declined or cancelled")
        if self.status != BedRequestStatus.CANCELLED and not self.reviewed_by:
            raise ValueError("reviewedBy is required to approve or decline a request")
        return self

class BedRequestResponse(CamelModel):
    """Bed Request Response Schema"""
    id: int
    patient_id: int
    patient_name: Optional[str] = None
    patient_type: Optional[PatientType] = None
    nutrition_status: Optional[NutritionStatus] = None
    requested_by: Optional[str] = None
    request_date: Optional[datetime] = None
    urgency_level: UrgencyLevel
    medical_justification: str
    current_condition: str
    estimated_stay_duration: int
    special_requirements: Optional[str] = None
    status: BedRequestStatus
    reviewed_by: Optional[str] = None
    review_date: Optional[datetime] = None
    review_comments: Optional[str] = None
    hospital_referral: Optional[HospitalReferral] = None
    created_at: Optional[datetime] = None

class BedRequestSearchParams(CamelModel):
    """Filters accepted by the bed request list endpoint"""
    status: Optional[BedRequestStatus] = None
    patient_id: Optional[int] = None
