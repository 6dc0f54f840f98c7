"""
Worker Router - API endpoints for worker management.
"""
from typing import List, Optional
from fastapi import APIRouter, Depends, status, Query
from sqlalchemy.orm import Session

from ..database import get_db
from ..core.schemas import MessageResponse
from .models import WorkerRole
from .schemas import WorkerCreate, WorkerUpdate, WorkerResponse
from .service import create_worker, deactivate_worker, get_worker, get_workers, update_worker

router = APIRouter()

@router.get("/", response_model=List[WorkerResponse])
async def list_workers(
    role: Optional[WorkerRole] = Query(None, description="Filter by role"),
    anganwadi_id: Optional[int] = Query(None, alias="anganwadiId", description="Filter by anganwadi center"),
    include_inactive: bool = Query(False, alias="includeInactive", description="Include deactivated workers"),
    db: Session = Depends(get_db)
):
    """
    Get active workers ordered by name
    """
    return [WorkerResponse.from_model(worker) for worker in get_workers(db, role, anganwadi_id, include_inactive)]

@router.post("/", response_model=WorkerResponse, status_code=status.HTTP_201_CREATED)
async def add_worker(worker_data: WorkerCreate, db: Session = Depends(get_db)):
    """
    Register a worker
    """
    return WorkerResponse.from_model(create_worker(db, worker_data))

@router.get("/{worker_id}", response_model=WorkerResponse)
async def get_worker_by_id(worker_id: int, db: Session = Depends(get_db)):
    """
    Get a worker by ID
    """
    return WorkerResponse.from_model(get_worker(db, worker_id))

@router.put("/{worker_id}", response_model=WorkerResponse)
async def update_worker_by_id(worker_id: int, worker_data: WorkerUpdate, db: Session = Depends(get_db)):
    """
    Update a worker
    """
    return WorkerResponse.from_model(update_worker(db, worker_id, worker_data))

@router.delete("/{worker_id}", response_model=MessageResponse)
async def delete_worker(worker_id: int, db: Session = Depends(get_db)):
    """
    Deactivate a worker
    """
    deactivate_worker(db, worker_id)
    return {"message": "Worker deleted successfully"}
