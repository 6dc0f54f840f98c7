"""
Medical Record Service - Append-only medical records.

Creating a record also stamps the patient's last visit date in the same
transaction.
"""
from typing import List
from sqlalchemy.orm import Session
from sqlalchemy import select
import logging
from datetime import datetime, timezone

from ..core.store import commit, get_or_404
from ..patients.service import get_patient
from .models import MedicalRecord
from .schemas import MedicalRecordCreate

# Set up logging
logger = logging.getLogger(__name__)

def get_medical_record(db: Session, record_id: int) -> MedicalRecord:
    """
    Get a medical record by ID.

    Raises:
        ResourceNotFoundException: If record not found
    """
    return get_or_404(db, MedicalRecord, record_id, "Medical record")

def get_patient_records(db: Session, patient_id: int) -> List[MedicalRecord]:
    """
    Get a patient's medical records, most recent visit first.

    Raises:
        ResourceNotFoundException: If the patient does not exist
    """
    get_patient(db, patient_id)
    query = (
        select(MedicalRecord)
        .where(MedicalRecord.patient_id == patient_id)
        .order_by(MedicalRecord.visit_date.desc(), MedicalRecord.id.desc())
    )
    return list(db.scalars(query))

def create_medical_record(db: Session, record_data: MedicalRecordCreate) -> MedicalRecord:
    """
    Append a medical record and update the patient's visit dates.

    Args:
        db: Database session
        record_data: Validated record data

    Returns:
        MedicalRecord: Newly created record

    Raises:
        ResourceNotFoundException: If the patient does not exist
    """
    patient = get_patient(db, record_data.patient_id)

    fields = record_data.to_model_fields()
    fields.setdefault("visit_date", datetime.now(timezone.utc))
    record = MedicalRecord(**fields)
    db.add(record)

    patient.last_visit_date = fields["visit_date"]
    if record_data.next_visit_date is not None:
        patient.next_visit_date = record_data.next_visit_date

    commit(db, record, "create medical record")
    logger.info(
        f"Medical record {record.id} ({record.visit_type.value}) added for patient {record.patient_id}"
    )
    return record
