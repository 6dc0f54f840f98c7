"""
Patient Router - API endpoints for patient registration and management.
"""
from typing import List, Optional
from fastapi import APIRouter, Depends, status, Query
from sqlalchemy.orm import Session

from ..database import get_db
from ..core.schemas import MessageResponse
from .models import PatientType, NutritionStatus
from .schemas import PatientCreate, PatientUpdate, PatientResponse, PatientSearchParams
from .service import (
    get_patient,
    list_patients,
    create_patient,
    update_patient,
    deactivate_patient
)

router = APIRouter()

@router.get("/", response_model=List[PatientResponse])
async def get_patients(
    type: Optional[PatientType] = Query(None, description="Filter by patient type"),
    nutrition_status: Optional[NutritionStatus] = Query(None, alias="nutritionStatus", description="Filter by nutrition status"),
    include_inactive: bool = Query(False, alias="includeInactive", description="Include soft-deleted patients"),
    db: Session = Depends(get_db)
):
    """
    Get all active patients, newest first
    """
    search_params = PatientSearchParams(
        type=type,
        nutrition_status=nutrition_status,
        include_inactive=include_inactive
    )
    return list_patients(db, search_params)

@router.post("/", response_model=PatientResponse, status_code=status.HTTP_201_CREATED)
async def register_patient(
    patient_data: PatientCreate,
    db: Session = Depends(get_db)
):
    """
    Register a new patient

    High-risk registrations (risk score above the configured threshold or
    severe acute malnutrition) raise a supervisor notification.
    """
    return create_patient(db, patient_data)

@router.get("/{patient_id}", response_model=PatientResponse)
async def get_patient_by_id(
    patient_id: int,
    db: Session = Depends(get_db)
):
    """
    Get a patient by ID (including soft-deleted patients)
    """
    return get_patient(db, patient_id)

@router.put("/{patient_id}", response_model=PatientResponse)
async def update_patient_by_id(
    patient_id: int,
    patient_data: PatientUpdate,
    db: Session = Depends(get_db)
):
    """
    Update a patient's details
    """
    return update_patient(db, patient_id, patient_data)

@router.delete("/{patient_id}", response_model=MessageResponse)
async def delete_patient(
    patient_id: int,
    db: Session = Depends(get_db)
):
    """
    Soft-delete a patient
    """
    deactivate_patient(db, patient_id)
    return {"message": "Patient deleted successfully"}
