"""
Bed Router - API endpoints for hospitals and beds.

Bed status changes go through the bed-assignment coordinator; there is no
endpoint that writes a bed row directly.
"""
from typing import List, Optional
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from ..database import get_db
from .models import BedStatus
from .schemas import BedResponse, BedSearchParams, BedStatusUpdate, HospitalResponse
from .service import get_bed, get_beds, get_hospital, get_hospitals, update_bed_status

router = APIRouter()
hospitals_router = APIRouter()

@hospitals_router.get("/", response_model=List[HospitalResponse])
async def list_hospitals(db: Session = Depends(get_db)):
    """
    Get all hospitals
    """
    return get_hospitals(db)

@hospitals_router.get("/{hospital_id}", response_model=HospitalResponse)
async def get_hospital_by_id(hospital_id: int, db: Session = Depends(get_db)):
    """
    Get a hospital by ID
    """
    return get_hospital(db, hospital_id)

@router.get("/", response_model=List[BedResponse])
async def list_beds(
    hospital_id: Optional[int] = Query(None, alias="hospitalId", description="Filter by hospital"),
    ward: Optional[str] = Query(None, description="Filter by ward"),
    status: Optional[BedStatus] = Query(None, description="Filter by bed status"),
    db: Session = Depends(get_db)
):
    """
    Get all beds with their hospital and occupant
    """
    search_params = BedSearchParams(hospital_id=hospital_id, ward=ward, status=status)
    return get_beds(db, search_params)

@router.get("/{bed_id}", response_model=BedResponse)
async def get_bed_by_id(bed_id: int, db: Session = Depends(get_db)):
    """
    Get a bed by ID
    """
    return get_bed(db, bed_id)

@router.put("/{bed_id}", response_model=BedResponse)
async def change_bed_status(
    bed_id: int,
    status_data: BedStatusUpdate,
    db: Session = Depends(get_db)
):
    """
    Change a bed's status

    - occupied: admit patientId (409 if the bed is held by someone else)
    - available: release the bed and clear the occupant's bed reference
    - maintenance: take an unoccupied bed out of service
    """
    return update_bed_status(db, bed_id, status_data)
