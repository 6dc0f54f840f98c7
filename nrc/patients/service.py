"""
Patient Service - Business logic for patient registration and maintenance.

This module provides service functions for patient CRUD operations and
triggers the high-risk alert once a registration has been stored.
"""
from typing import List, Optional
from sqlalchemy.orm import Session
from sqlalchemy import select
import logging
import uuid
from datetime import datetime, timezone

from ..core.store import apply_updates, commit, get_or_404, soft_delete
from ..exceptions import ConflictException, ValidationException
from ..notifications.service import notify_high_risk_patient
from .models import Patient, PatientType
from .schemas import PatientCreate, PatientUpdate, PatientSearchParams

# Set up logging
logger = logging.getLogger(__name__)

def generate_registration_number() -> str:
    """
    Generate a registration number of the form NRC<yyyymmdd><6 hex chars>.

    Returns:
        str: New registration number
    """
    today = datetime.now(timezone.utc).strftime("%Y%m%d")
    return f"NRC{today}{uuid.uuid4().hex[:6].upper()}"

def _ensure_unique(db: Session, registration_number: str, aadhaar_number: Optional[str], exclude_id: Optional[int] = None) -> None:
    query = select(Patient.id).where(Patient.registration_number == registration_number)
    if exclude_id is not None:
        query = query.where(Patient.id != exclude_id)
    if db.execute(query).first():
        raise ConflictException(f"Registration number {registration_number} already exists")

    if aadhaar_number:
        query = select(Patient.id).where(Patient.aadhaar_number == aadhaar_number)
        if exclude_id is not None:
            query = query.where(Patient.id != exclude_id)
        if db.execute(query).first():
            raise ConflictException("Aadhaar number already registered")

def get_patient(db: Session, patient_id: int) -> Patient:
    """
    Get a patient by ID. Soft-deleted patients still resolve.

    Args:
        db: Database session
        patient_id: ID of the patient

    Returns:
        Patient: Patient record

    Raises:
        ResourceNotFoundException: If patient not found
    """
    return get_or_404(db, Patient, patient_id, "Patient")

def list_patients(db: Session, search_params: PatientSearchParams) -> List[Patient]:
    """
    List patients, newest registration first.

    Args:
        db: Database session
        search_params: Filters (type, nutrition status, include inactive)

    Returns:
        List[Patient]: Matching patients
    """
    query = select(Patient)
    if not search_params.include_inactive:
        query = query.where(Patient.is_active.is_(True))
    if search_params.type:
        query = query.where(Patient.type == search_params.type)
    if search_params.nutrition_status:
        query = query.where(Patient.nutrition_status == search_params.nutrition_status)
    query = query.order_by(Patient.created_at.desc(), Patient.id.desc())
    return list(db.scalars(query))

def create_patient(db: Session, patient_data: PatientCreate) -> Patient:
    """
    Register a new patient.

    The high-risk alert is raised after the patient is committed; a failure
    there is logged and does not undo the registration.

    Args:
        db: Database session
        patient_data: Validated registration data

    Returns:
        Patient: Newly created patient

    Raises:
        ConflictException: If the registration or aadhaar number is taken
    """
    data = patient_data.model_dump()
    if not data.get("registration_number"):
        data["registration_number"] = generate_registration_number()
    if not data.get("emergency_contact"):
        data["emergency_contact"] = data["contact_number"]

    _ensure_unique(db, data["registration_number"], data.get("aadhaar_number"))

    patient = Patient(**data, is_active=True)
    db.add(patient)
    commit(db, patient, "register patient")
    logger.info(f"✅ Patient {patient.id} registered as {patient.registration_number}")

    notify_high_risk_patient(db, patient)
    return patient

def update_patient(db: Session, patient_id: int, patient_data: PatientUpdate) -> Patient:
    """
    Merge the supplied fields into a patient. Moving a patient away from
    pregnant clears the pregnancy week.

    Args:
        db: Database session
        patient_id: ID of the patient
        patient_data: Fields to change

    Returns:
        Patient: Updated patient

    Raises:
        ResourceNotFoundException: If patient not found
        ConflictException: If the new aadhaar number is already taken
        ValidationException: If a pregnancy week is sent for a non-pregnant patient
    """
    patient = get_patient(db, patient_id)
    changes = patient_data.model_dump(exclude_unset=True)

    if changes.get("aadhaar_number") and changes["aadhaar_number"] != patient.aadhaar_number:
        _ensure_unique(db, patient.registration_number, changes["aadhaar_number"], exclude_id=patient.id)

    # Only pregnant patients carry a pregnancy week
    if (changes.get("type") or patient.type) != PatientType.PREGNANT:
        if changes.get("pregnancy_week") is not None:
            raise ValidationException(
                "Invalid update",
                errors=[{"field": "pregnancyWeek", "message": "pregnancyWeek is only valid for pregnant patients"}]
            )
        if patient.pregnancy_week is not None:
            changes["pregnancy_week"] = None

    apply_updates(patient, changes)
    commit(db, patient, f"update patient {patient_id}")
    logger.info(f"Patient {patient_id} updated ({', '.join(sorted(changes)) or 'no fields'})")
    return patient

def deactivate_patient(db: Session, patient_id: int) -> Patient:
    """
    Soft-delete a patient: the record leaves the active list but remains
    reachable by id for medical and audit history.
    """
    return soft_delete(db, Patient, patient_id, "Patient")
