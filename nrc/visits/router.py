"""
Visit Router - API endpoints for visit scheduling.
"""
from typing import List, Optional
from fastapi import APIRouter, Depends, status, Query
from sqlalchemy.orm import Session

from ..database import get_db
from .models import VisitStatus
from .schemas import VisitCreate, VisitUpdate, VisitResponse
from .service import create_visit, get_visit, get_visits, update_visit

router = APIRouter()

@router.get("/", response_model=List[VisitResponse])
async def list_visits(
    patient_id: Optional[int] = Query(None, alias="patientId", description="Filter by patient"),
    status: Optional[VisitStatus] = Query(None, description="Filter by visit status"),
    db: Session = Depends(get_db)
):
    """
    Get visits, latest scheduled date first
    """
    return get_visits(db, patient_id, status)

@router.post("/", response_model=VisitResponse, status_code=status.HTTP_201_CREATED)
async def schedule_visit(visit_data: VisitCreate, db: Session = Depends(get_db)):
    """
    Schedule a visit
    """
    return create_visit(db, visit_data)

@router.get("/{visit_id}", response_model=VisitResponse)
async def get_visit_by_id(visit_id: int, db: Session = Depends(get_db)):
    """
    Get a visit by ID
    """
    return get_visit(db, visit_id)

@router.put("/{visit_id}", response_model=VisitResponse)
async def update_visit_by_id(visit_id: int, visit_data: VisitUpdate, db: Session = Depends(get_db)):
    """
    Update a visit's schedule or outcome
    """
    return update_visit(db, visit_id, visit_data)
