"""
Worker Service - Business logic for worker management.
"""
from typing import List, Optional
from sqlalchemy.orm import Session, selectinload
from sqlalchemy import select
import logging

from ..anganwadis.service import get_anganwadi
from ..core.store import apply_updates, commit, get_or_404, soft_delete
from ..exceptions import ConflictException
from .models import Worker, WorkerRole
from .schemas import WorkerCreate, WorkerUpdate

# Set up logging
logger = logging.getLogger(__name__)

def _ensure_employee_id_available(db: Session, employee_id: str, exclude_id: Optional[int] = None) -> None:
    query = select(Worker.id).where(Worker.employee_id == employee_id)
    if exclude_id is not None:
        query = query.where(Worker.id != exclude_id)
    if db.execute(query).first():
        raise ConflictException(f"Employee ID {employee_id} already exists")

def get_worker(db: Session, worker_id: int) -> Worker:
    """
    Get a worker by ID.

    Raises:
        ResourceNotFoundException: If worker not found
    """
    return get_or_404(db, Worker, worker_id, "Worker")

def get_workers(
    db: Session,
    role: Optional[WorkerRole] = None,
    anganwadi_id: Optional[int] = None,
    include_inactive: bool = False
) -> List[Worker]:
    """
    Get workers ordered by name.

    Args:
        db: Database session
        role: Only workers with this role
        anganwadi_id: Only workers attached to this center
        include_inactive: Include soft-deleted workers
    """
    query = select(Worker).options(selectinload(Worker.anganwadi))
    if not include_inactive:
        query = query.where(Worker.is_active.is_(True))
    if role:
        query = query.where(Worker.role == role)
    if anganwadi_id is not None:
        query = query.where(Worker.anganwadi_id == anganwadi_id)
    return list(db.scalars(query.order_by(Worker.name)))

def create_worker(db: Session, worker_data: WorkerCreate) -> Worker:
    """
    Register a worker.

    Raises:
        ResourceNotFoundException: If the anganwadi center does not exist
        ConflictException: If the employee ID is already in use
    """
    if worker_data.anganwadi_id is not None:
        get_anganwadi(db, worker_data.anganwadi_id)
    _ensure_employee_id_available(db, worker_data.employee_id)

    worker = Worker(**worker_data.to_model_fields(), is_active=True)
    db.add(worker)
    commit(db, worker, "create worker")
    logger.info(f"Worker {worker.id} ({worker.employee_id}, {worker.role.value}) created")
    return worker

def update_worker(db: Session, worker_id: int, worker_data: WorkerUpdate) -> Worker:
    """
    Update a worker.

    Raises:
        ResourceNotFoundException: If the worker or the new center does not exist
        ConflictException: If the new employee ID is already in use
    """
    worker = get_worker(db, worker_id)
    changes = worker_data.to_model_fields()

    if changes.get("anganwadi_id") is not None:
        get_anganwadi(db, changes["anganwadi_id"])
    if changes.get("employee_id") and changes["employee_id"] != worker.employee_id:
        _ensure_employee_id_available(db, changes["employee_id"], exclude_id=worker.id)

    apply_updates(worker, changes)
    commit(db, worker, f"update worker {worker_id}")
    logger.info(f"Worker {worker_id} updated")
    return worker

def deactivate_worker(db: Session, worker_id: int) -> Worker:
    """Soft-delete a worker."""
    return soft_delete(db, Worker, worker_id, "Worker")
