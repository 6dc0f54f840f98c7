"""
Bed Request Service - Creation and one-time review of bed requests.

    pending --approve_request--> approved   (terminal)
    pending --decline_request--> declined   (terminal)
    pending --cancel_request-->  cancelled  (terminal)

Approval does not occupy a bed. The caller admits the patient through
beds.service.assign_bed as a separate step, so a request may be approved
while no bed is free (the hospital referral covers that case).
"""
from typing import List, Optional, Dict, Any
from sqlalchemy.orm import Session, selectinload
from sqlalchemy import select, update
from sqlalchemy.exc import SQLAlchemyError
import logging
from datetime import datetime, timezone

from ..core.store import commit, get_or_404
from ..exceptions import AppException, ConflictException, InternalServerException
from ..patients.service import get_patient
from .models import BedRequest, BedRequestStatus
from .schemas import BedRequestCreate, BedRequestReview, BedRequestSearchParams, HospitalReferral

# Set up logging
logger = logging.getLogger(__name__)

def get_bed_request(db: Session, request_id: int) -> BedRequest:
    """
    Get a bed request by ID.

    Raises:
        ResourceNotFoundException: If the request does not exist
    """
    return get_or_404(db, BedRequest, request_id, "Bed request")

def get_bed_requests(db: Session, search_params: BedRequestSearchParams) -> List[BedRequest]:
    """
    Get bed requests, newest first.

    Args:
        db: Database session
        search_params: Optional status and patient filters

    Returns:
        List[BedRequest]: Matching requests
    """
    query = select(BedRequest).options(selectinload(BedRequest.patient))
    if search_params.status:
        query = query.where(BedRequest.status == search_params.status)
    if search_params.patient_id is not None:
        query = query.where(BedRequest.patient_id == search_params.patient_id)
    query = query.order_by(BedRequest.created_at.desc(), BedRequest.id.desc())
    return list(db.scalars(query))

def create_bed_request(db: Session, request_data: BedRequestCreate) -> BedRequest:
    """
    Raise a new bed request for an existing patient.

    Raises:
        ResourceNotFoundException: If the patient does not exist
    """
    get_patient(db, request_data.patient_id)

    data = request_data.model_dump(exclude_none=True)
    bed_request = BedRequest(**data, status=BedRequestStatus.PENDING)
    db.add(bed_request)
    commit(db, bed_request, "create bed request")
    logger.info(
        f"Bed request {bed_request.id} raised for patient {bed_request.patient_id} "
        f"({bed_request.urgency_level.value})"
    )
    return bed_request

def _review(
    db: Session,
    request_id: int,
    new_status: BedRequestStatus,
    reviewed_by: Optional[str],
    review_comments: Optional[str],
    hospital_referral: Optional[HospitalReferral]
) -> BedRequest:
    bed_request = get_bed_request(db, request_id)
    if not bed_request.is_pending:
        raise ConflictException(f"Bed request {request_id} has already been {bed_request.status.value}")

    values: Dict[str, Any] = {
        "status": new_status,
        "reviewed_by": reviewed_by,
        "review_date": datetime.now(timezone.utc),
        "review_comments": review_comments,
    }
    if hospital_referral is not None:
        values["hospital_referral"] = hospital_referral.model_dump(mode="json", exclude_none=True)

    try:
        # Only a still-pending row is reviewed; a concurrent review leaves nothing to update
        result = db.execute(
            update(BedRequest)
            .where(BedRequest.id == request_id, BedRequest.status == BedRequestStatus.PENDING)
            .values(**values)
            .execution_options(synchronize_session=False)
        )
        if result.rowcount == 0:
            raise ConflictException(f"Bed request {request_id} has already been reviewed")
        db.commit()
        db.refresh(bed_request)
    except AppException:
        db.rollback()
        raise
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"❌ Error reviewing bed request {request_id}: {str(e)}")
        raise InternalServerException("An error occurred while reviewing the bed request")

    logger.info(f"Bed request {request_id} {new_status.value} by {reviewed_by or 'requester'}")
    return bed_request

def approve_request(
    db: Session,
    request_id: int,
    reviewed_by: str,
    review_comments: Optional[str] = None,
    hospital_referral: Optional[HospitalReferral] = None
) -> BedRequest:
    """
    Approve a pending request. No bed is assigned here.

    Raises:
        ResourceNotFoundException: If the request does not exist
        ConflictException: If the request was already reviewed
    """
    return _review(db, request_id, BedRequestStatus.APPROVED, reviewed_by, review_comments, hospital_referral)

def decline_request(
    db: Session,
    request_id: int,
    reviewed_by: str,
    review_comments: Optional[str] = None,
    hospital_referral: Optional[HospitalReferral] = None
) -> BedRequest:
    """
    Decline a pending request, optionally recording a hospital referral.

    Raises:
        ResourceNotFoundException: If the request does not exist
        ConflictException: If the request was already reviewed
    """
    return _review(db, request_id, BedRequestStatus.DECLINED, reviewed_by, review_comments, hospital_referral)

def cancel_request(
    db: Session,
    request_id: int,
    cancelled_by: Optional[str] = None,
    comments: Optional[str] = None
) -> BedRequest:
    """
    Withdraw a pending request.

    Raises:
        ResourceNotFoundException: If the request does not exist
        ConflictException: If the request was already reviewed
    """
    return _review(db, request_id, BedRequestStatus.CANCELLED, cancelled_by, comments, None)

def review_bed_request(db: Session, request_id: int, review: BedRequestReview) -> BedRequest:
    """
    Apply a PUT /bed-requests/{id} review by dispatching on the target status.
    """
    if review.status == BedRequestStatus.APPROVED:
        return approve_request(db, request_id, review.reviewed_by, review.review_comments, review.hospital_referral)
    if review.status == BedRequestStatus.DECLINED:
        return decline_request(db, request_id, review.reviewed_by, review.review_comments, review.hospital_referral)
    return cancel_request(db, request_id, review.reviewed_by, review.review_comments)
