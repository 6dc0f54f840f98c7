"""
Bed Request Router - API endpoints for raising and reviewing bed requests.
"""
from typing import List, Optional
from fastapi import APIRouter, Depends, status, Query
from sqlalchemy.orm import Session

from ..database import get_db
from .models import BedRequestStatus
from .schemas import BedRequestCreate, BedRequestReview, BedRequestResponse, BedRequestSearchParams
from .service import create_bed_request, get_bed_request, get_bed_requests, review_bed_request

router = APIRouter()

@router.get("/", response_model=List[BedRequestResponse])
async def list_bed_requests(
    status: Optional[BedRequestStatus] = Query(None, description="Filter by request status"),
    patient_id: Optional[int] = Query(None, alias="patientId", description="Filter by patient"),
    db: Session = Depends(get_db)
):
    """
    Get bed requests, newest first
    """
    return get_bed_requests(db, BedRequestSearchParams(status=status, patient_id=patient_id))

@router.post("/", response_model=BedRequestResponse, status_code=status.HTTP_201_CREATED)
async def raise_bed_request(
    request_data: BedRequestCreate,
    db: Session = Depends(get_db)
):
    """
    Raise a bed request for a patient
    """
    return create_bed_request(db, request_data)

@router.get("/{request_id}", response_model=BedRequestResponse)
async def get_bed_request_by_id(request_id: int, db: Session = Depends(get_db)):
    """
    Get a bed request by ID
    """
    return get_bed_request(db, request_id)

@router.put("/{request_id}", response_model=BedRequestResponse)
async def review_request(
    request_id: int,
    review: BedRequestReview,
    db: Session = Depends(get_db)
):
    """
    Review a pending bed request (approve, decline or cancel)

    Returns 409 when the request has already been reviewed. Approving does
    not occupy a bed; admit the patient with PUT /beds/{id} afterwards.
    """
    return review_bed_request(db, request_id, review)
