"""
Anganwadi Router - API endpoints for anganwadi centers.
"""
from typing import List
from fastapi import APIRouter, Depends, status, Query
from sqlalchemy.orm import Session

from ..database import get_db
from ..core.schemas import MessageResponse
from .schemas import AnganwadiCreate, AnganwadiUpdate, AnganwadiResponse
from .service import (
    create_anganwadi,
    deactivate_anganwadi,
    get_anganwadi,
    get_anganwadis,
    update_anganwadi
)

router = APIRouter()

@router.get("/", response_model=List[AnganwadiResponse])
async def list_anganwadis(
    include_inactive: bool = Query(False, alias="includeInactive", description="Include deactivated centers"),
    db: Session = Depends(get_db)
):
    """
    Get anganwadi centers ordered by name
    """
    return [AnganwadiResponse.from_model(center) for center in get_anganwadis(db, include_inactive)]

@router.post("/", response_model=AnganwadiResponse, status_code=status.HTTP_201_CREATED)
async def add_anganwadi(center_data: AnganwadiCreate, db: Session = Depends(get_db)):
    """
    Create an anganwadi center
    """
    return AnganwadiResponse.from_model(create_anganwadi(db, center_data))

@router.get("/{anganwadi_id}", response_model=AnganwadiResponse)
async def get_anganwadi_by_id(anganwadi_id: int, db: Session = Depends(get_db)):
    """
    Get an anganwadi center by ID
    """
    return AnganwadiResponse.from_model(get_anganwadi(db, anganwadi_id))

@router.put("/{anganwadi_id}", response_model=AnganwadiResponse)
async def update_anganwadi_by_id(
    anganwadi_id: int,
    center_data: AnganwadiUpdate,
    db: Session = Depends(get_db)
):
    """
    Update an anganwadi center
    """
    return AnganwadiResponse.from_model(update_anganwadi(db, anganwadi_id, center_data))

@router.delete("/{anganwadi_id}", response_model=MessageResponse)
async def delete_anganwadi(anganwadi_id: int, db: Session = Depends(get_db)):
    """
    Deactivate an anganwadi center
    """
    deactivate_anganwadi(db, anganwadi_id)
    return {"message": "Anganwadi center deleted successfully"}
