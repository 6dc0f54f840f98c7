"""
Medical Record Router - API endpoints for patient medical records.

Records are append-only: there are no update or delete endpoints.
"""
from typing import List
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from ..database import get_db
from .schemas import MedicalRecordCreate, MedicalRecordResponse
from .service import create_medical_record, get_medical_record, get_patient_records

router = APIRouter()

@router.post("/", response_model=MedicalRecordResponse, status_code=status.HTTP_201_CREATED)
async def add_medical_record(record_data: MedicalRecordCreate, db: Session = Depends(get_db)):
    """
    Add a medical record for a patient
    """
    return MedicalRecordResponse.from_model(create_medical_record(db, record_data))

@router.get("/patient/{patient_id}", response_model=List[MedicalRecordResponse])
async def get_records_for_patient(patient_id: int, db: Session = Depends(get_db)):
    """
    Get a patient's medical records, most recent first
    """
    return [MedicalRecordResponse.from_model(record) for record in get_patient_records(db, patient_id)]

@router.get("/{record_id}", response_model=MedicalRecordResponse)
async def get_medical_record_by_id(record_id: int, db: Session = Depends(get_db)):
    """
    Get a medical record by ID
    """
    return MedicalRecordResponse.from_model(get_medical_record(db, record_id))
