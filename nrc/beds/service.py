"""
Bed Service - Hospital and bed lookups plus the bed-assignment coordinator.

Assigning and releasing a bed writes two rows (the bed and the patient's
bed reference). Both writes happen in one transaction, and the bed row is
claimed with a compare-and-set on its status so that two requests racing for
the same bed produce exactly one winner:

    available   --assign_bed-->       occupied
    occupied    --release_bed-->      available
    available   --set_maintenance-->  maintenance
    maintenance --release_bed-->      available

occupied -> maintenance and maintenance -> occupied are rejected.
"""
from typing import List, Optional
from sqlalchemy.orm import Session, selectinload
from sqlalchemy import select, update, or_, and_
from sqlalchemy.exc import SQLAlchemyError
import logging
from datetime import datetime, timezone

from ..core.store import get_or_404
from ..exceptions import AppException, ConflictException, InternalServerException, ResourceNotFoundException
from ..patients.models import Patient
from .models import Bed, BedStatus, Hospital
from .schemas import BedSearchParams, BedStatusUpdate

# Set up logging
logger = logging.getLogger(__name__)

def get_hospitals(db: Session) -> List[Hospital]:
    """Get all hospitals ordered by name."""
    return list(db.scalars(select(Hospital).order_by(Hospital.name)))

def get_hospital(db: Session, hospital_id: int) -> Hospital:
    """
    Get a hospital by ID.

    Raises:
        ResourceNotFoundException: If hospital not found
    """
    return get_or_404(db, Hospital, hospital_id, "Hospital")

def get_beds(db: Session, search_params: BedSearchParams) -> List[Bed]:
    """
    Get beds ordered by ward and number, with hospital and occupant loaded.

    Args:
        db: Database session
        search_params: Optional hospital, ward and status filters

    Returns:
        List[Bed]: Matching beds
    """
    query = select(Bed).options(selectinload(Bed.hospital), selectinload(Bed.patient))
    if search_params.hospital_id is not None:
        query = query.where(Bed.hospital_id == search_params.hospital_id)
    if search_params.ward:
        query = query.where(Bed.ward == search_params.ward)
    if search_params.status:
        query = query.where(Bed.status == search_params.status)
    query = query.order_by(Bed.ward, Bed.number)
    return list(db.scalars(query))

def get_bed(db: Session, bed_id: int) -> Bed:
    """
    Get a bed by ID.

    Raises:
        ResourceNotFoundException: If bed not found
    """
    return get_or_404(db, Bed, bed_id, "Bed")

def _lock_bed(db: Session, bed_id: int) -> Bed:
    """Load a bed with a row lock where the engine supports SELECT ... FOR UPDATE."""
    bed = db.execute(
        select(Bed).where(Bed.id == bed_id).with_for_update()
    ).scalar_one_or_none()
    if bed is None:
        raise ResourceNotFoundException("Bed not found")
    return bed

def _lock_active_patient(db: Session, patient_id: int) -> Patient:
    patient = db.execute(
        select(Patient).where(Patient.id == patient_id).with_for_update()
    ).scalar_one_or_none()
    if patient is None or not patient.is_active:
        raise ResourceNotFoundException("Patient not found")
    return patient

def _link_patient(db: Session, patient_id: int, bed_id: int) -> None:
    """Point the patient at the bed, unless another bed claimed them in the meantime."""
    result = db.execute(
        update(Patient)
        .where(
            Patient.id == patient_id,
            or_(Patient.bed_id.is_(None), Patient.bed_id == bed_id)
        )
        .values(bed_id=bed_id)
        .execution_options(synchronize_session=False)
    )
    if result.rowcount == 0:
        raise ConflictException(f"Patient {patient_id} is already assigned to another bed")

def _unlink_patient(db: Session, patient_id: int, bed_id: int) -> None:
    db.execute(
        update(Patient)
        .where(Patient.id == patient_id, Patient.bed_id == bed_id)
        .values(bed_id=None)
        .execution_options(synchronize_session=False)
    )

def _finish(db: Session, bed: Bed, action: str) -> Bed:
    db.commit()
    db.refresh(bed)
    logger.info(f"✅ Bed {bed.id} {action}: status={bed.status.value}, patient_id={bed.patient_id}")
    return bed

def assign_bed(
    db: Session,
    bed_id: int,
    patient_id: int,
    admission_date: Optional[datetime] = None
) -> Bed:
    """
    Admit a patient to a bed.

    The bed update and the patient's bed reference are committed together or
    not at all. Re-assigning a bed to its current occupant only refreshes the
    admission date.

    Args:
        db: Database session
        bed_id: ID of the bed
        patient_id: ID of the active patient to admit
        admission_date: Admission date, defaults to now

    Returns:
        Bed: The occupied bed

    Raises:
        ResourceNotFoundException: If the bed or an active patient is not found
        ConflictException: If the bed is held by another patient or under
            maintenance, or the patient already occupies another bed
        InternalServerException: If the storage layer fails; nothing is written
    """
    admission_date = admission_date or datetime.now(timezone.utc)
    try:
        bed = _lock_bed(db, bed_id)
        patient = _lock_active_patient(db, patient_id)

        if bed.status == BedStatus.MAINTENANCE:
            raise ConflictException(f"Bed {bed.number} is under maintenance")
        if bed.status == BedStatus.OCCUPIED and bed.patient_id != patient_id:
            raise ConflictException(f"Bed {bed.number} is already occupied by another patient")
        if patient.bed_id is not None and patient.bed_id != bed_id:
            raise ConflictException(f"Patient {patient_id} is already assigned to bed {patient.bed_id}")

        # Compare-and-set: only an available bed, or one already held by this
        # patient, can be claimed. A concurrent winner leaves nothing to update.
        claimed = db.execute(
            update(Bed)
            .where(
                Bed.id == bed_id,
                or_(
                    and_(Bed.status == BedStatus.AVAILABLE, Bed.patient_id.is_(None)),
                    and_(Bed.status == BedStatus.OCCUPIED, Bed.patient_id == patient_id)
                )
            )
            .values(status=BedStatus.OCCUPIED, patient_id=patient_id, admission_date=admission_date)
            .execution_options(synchronize_session=False)
        )
        if claimed.rowcount == 0:
            raise ConflictException(f"Bed {bed.number} is already occupied by another patient")

        _link_patient(db, patient_id, bed_id)
        return _finish(db, bed, f"assigned to patient {patient_id}")
    except AppException:
        db.rollback()
        raise
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"❌ Error assigning bed {bed_id} to patient {patient_id}: {str(e)}")
        raise InternalServerException("An error occurred while assigning the bed")

def release_bed(db: Session, bed_id: int) -> Bed:
    """
    Free a bed and clear its occupant's bed reference.

    Releasing an available bed is a no-op. Releasing a bed under
    maintenance returns it to service.

    Raises:
        ResourceNotFoundException: If bed not found
        ConflictException: If the bed changed after it was read
        InternalServerException: If the storage layer fails; nothing is written
    """
    try:
        bed = _lock_bed(db, bed_id)
        if bed.status == BedStatus.AVAILABLE and bed.patient_id is None:
            db.rollback()
            logger.info(f"Bed {bed_id} already available, nothing to release")
            return bed

        occupant_id = bed.patient_id
        if occupant_id is None:
            same_occupant = Bed.patient_id.is_(None)
        else:
            same_occupant = Bed.patient_id == occupant_id

        # Compare-and-set against the state read above; a concurrent
        # release or admission in between leaves nothing to update.
        released = db.execute(
            update(Bed)
            .where(Bed.id == bed_id, Bed.status == bed.status, same_occupant)
            .values(status=BedStatus.AVAILABLE, patient_id=None, admission_date=None)
            .execution_options(synchronize_session=False)
        )
        if released.rowcount == 0:
            raise ConflictException(f"Bed {bed.number} was changed by a concurrent request")
        if occupant_id is not None:
            _unlink_patient(db, occupant_id, bed_id)
        return _finish(db, bed, "released")
    except AppException:
        db.rollback()
        raise
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"❌ Error releasing bed {bed_id}: {str(e)}")
        raise InternalServerException("An error occurred while releasing the bed")

def set_maintenance(db: Session, bed_id: int) -> Bed:
    """
    Take an unoccupied bed out of service.

    Raises:
        ResourceNotFoundException: If bed not found
        ConflictException: If the bed is occupied
        InternalServerException: If the storage layer fails
    """
    try:
        bed = _lock_bed(db, bed_id)
        if bed.status == BedStatus.MAINTENANCE:
            db.rollback()
            return bed
        if bed.status == BedStatus.OCCUPIED or bed.patient_id is not None:
            raise ConflictException(f"Bed {bed.number} is occupied; release it before maintenance")

        result = db.execute(
            update(Bed)
            .where(Bed.id == bed_id, Bed.status == BedStatus.AVAILABLE, Bed.patient_id.is_(None))
            .values(status=BedStatus.MAINTENANCE)
            .execution_options(synchronize_session=False)
        )
        if result.rowcount == 0:
            raise ConflictException(f"Bed {bed.number} was occupied by a concurrent request")
        return _finish(db, bed, "moved to maintenance")
    except AppException:
        db.rollback()
        raise
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"❌ Error moving bed {bed_id} to maintenance: {str(e)}")
        raise InternalServerException("An error occurred while updating the bed")

def update_bed_status(db: Session, bed_id: int, status_data: BedStatusUpdate) -> Bed:
    """
    Apply a PUT /beds/{id} request by dispatching to the coordinator.

    Args:
        db: Database session
        bed_id: ID of the bed
        status_data: Target status with optional patient and admission date

    Returns:
        Bed: Updated bed
    """
    logger.info(f"📝 Bed {bed_id} status change requested: {status_data.status.value}")
    if status_data.status == BedStatus.OCCUPIED:
        return assign_bed(db, bed_id, status_data.patient_id, status_data.admission_date)
    if status_data.status == BedStatus.MAINTENANCE:
        return set_maintenance(db, bed_id)
    return release_bed(db, bed_id)
