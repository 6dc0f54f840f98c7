"""
Anganwadi Service - Business logic for anganwadi centers.
"""
from typing import List, Optional
from sqlalchemy.orm import Session
from sqlalchemy import select
import logging

from ..core.store import apply_updates, commit, get_or_404, soft_delete
from ..exceptions import ConflictException
from .models import AnganwadiCenter
from .schemas import AnganwadiCreate, AnganwadiUpdate

# Set up logging
logger = logging.getLogger(__name__)

def _ensure_code_available(db: Session, code: str, exclude_id: Optional[int] = None) -> None:
    query = select(AnganwadiCenter.id).where(AnganwadiCenter.code == code)
    if exclude_id is not None:
        query = query.where(AnganwadiCenter.id != exclude_id)
    if db.execute(query).first():
        raise ConflictException(f"Anganwadi center code {code} already exists")

def get_anganwadi(db: Session, anganwadi_id: int) -> AnganwadiCenter:
    """
    Get an anganwadi center by ID.

    Raises:
        ResourceNotFoundException: If the center does not exist
    """
    return get_or_404(db, AnganwadiCenter, anganwadi_id, "Anganwadi center")

def get_anganwadis(db: Session, include_inactive: bool = False) -> List[AnganwadiCenter]:
    """Get anganwadi centers ordered by name (active ones unless asked otherwise)."""
    query = select(AnganwadiCenter)
    if not include_inactive:
        query = query.where(AnganwadiCenter.is_active.is_(True))
    return list(db.scalars(query.order_by(AnganwadiCenter.name)))

def create_anganwadi(db: Session, center_data: AnganwadiCreate) -> AnganwadiCenter:
    """
    Create an anganwadi center.

    Raises:
        ConflictException: If the code is already in use
    """
    _ensure_code_available(db, center_data.code)
    center = AnganwadiCenter(**center_data.to_model_fields(), is_active=True)
    db.add(center)
    commit(db, center, "create anganwadi center")
    logger.info(f"Anganwadi center {center.id} ({center.code}) created")
    return center

def update_anganwadi(db: Session, anganwadi_id: int, center_data: AnganwadiUpdate) -> AnganwadiCenter:
    """
    Update an anganwadi center.

    Raises:
        ResourceNotFoundException: If the center does not exist
        ConflictException: If the new code is already in use
    """
    center = get_anganwadi(db, anganwadi_id)
    changes = center_data.to_model_fields()
    if changes.get("code") and changes["code"] != center.code:
        _ensure_code_available(db, changes["code"], exclude_id=center.id)
    apply_updates(center, changes)
    commit(db, center, f"update anganwadi center {anganwadi_id}")
    logger.info(f"Anganwadi center {anganwadi_id} updated")
    return center

def deactivate_anganwadi(db: Session, anganwadi_id: int) -> AnganwadiCenter:
    """Soft-delete an anganwadi center."""
    return soft_delete(db, AnganwadiCenter, anganwadi_id, "Anganwadi center")
