"""
Visit Service - Business logic for visit scheduling.
"""
from typing import List, Optional
from sqlalchemy.orm import Session, selectinload
from sqlalchemy import select
import logging

from ..core.store import apply_updates, commit, get_or_404
from ..exceptions import ValidationException
from ..patients.service import get_patient
from .models import Visit, VisitStatus, CLOSED_STATUSES
from .schemas import VisitCreate, VisitUpdate

# Set up logging
logger = logging.getLogger(__name__)

def get_visit(db: Session, visit_id: int) -> Visit:
    """
    Get a visit by ID.

    Raises:
        ResourceNotFoundException: If visit not found
    """
    return get_or_404(db, Visit, visit_id, "Visit")

def get_visits(
    db: Session,
    patient_id: Optional[int] = None,
    status: Optional[VisitStatus] = None
) -> List[Visit]:
    """
    Get visits, latest scheduled date first.

    Args:
        db: Database session
        patient_id: Only visits for this patient
        status: Only visits in this status
    """
    query = select(Visit).options(selectinload(Visit.patient))
    if patient_id is not None:
        query = query.where(Visit.patient_id == patient_id)
    if status:
        query = query.where(Visit.status == status)
    query = query.order_by(Visit.scheduled_date.desc(), Visit.id.desc())
    return list(db.scalars(query))

def create_visit(db: Session, visit_data: VisitCreate) -> Visit:
    """
    Schedule a visit for an existing patient.

    Raises:
        ResourceNotFoundException: If the patient does not exist
    """
    get_patient(db, visit_data.patient_id)

    visit = Visit(
        patient_id=visit_data.patient_id,
        health_worker_id=visit_data.health_worker_id,
        scheduled_date=visit_data.scheduled_date,
        notes=visit_data.notes
    )
    visit.update_status(visit_data.status, visit_data.actual_date)
    db.add(visit)
    commit(db, visit, "schedule visit")
    logger.info(f"Visit {visit.id} scheduled for patient {visit.patient_id} on {visit.scheduled_date}")
    return visit

def update_visit(db: Session, visit_id: int, visit_data: VisitUpdate) -> Visit:
    """
    Update a visit. Moving it to completed or missed stamps actual_date
    (now, unless supplied); moving it back clears actual_date.

    Raises:
        ResourceNotFoundException: If visit not found
        ValidationException: If actualDate is sent for an open visit
    """
    visit = get_visit(db, visit_id)
    changes = visit_data.model_dump(exclude_unset=True)
    new_status = changes.pop("status", None) or visit.status
    actual_date = changes.pop("actual_date", None)

    if actual_date is not None and new_status not in CLOSED_STATUSES:
        raise ValidationException(
            "Invalid update",
            errors=[{"field": "actualDate", "message": "actualDate is only allowed when status is completed or missed"}]
        )

    apply_updates(visit, changes)
    visit.update_status(new_status, actual_date)
    commit(db, visit, f"update visit {visit_id}")
    logger.info(f"Visit {visit_id} updated: status={visit.status.value}")
    return visit
