"""
Unblock override endpoints
"""
from typing import List
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session
from app.core.deps import get_db
from app.schemas.agenda import UnblockCreate, UnblockUpdate, UnblockOut
from app.services.agenda_service import (
    create_unblock,
    list_unblocks,
    get_unblock,
    update_unblock,
    delete_unblock
)

router = APIRouter()


@router.post("", response_model=UnblockOut, status_code=status.HTTP_201_CREATED)
async def create_unblock_endpoint(unblock_data: UnblockCreate, db: Session = Depends(get_db)):
    """Force a date open, overriding holidays, bridges and blocks"""
    return create_unblock(
        db=db,
        unblock_date=unblock_data.date,
        reason=unblock_data.reason,
        enabled=unblock_data.enabled
    )


@router.get("", response_model=List[UnblockOut])
async def list_unblocks_endpoint(
    enabled_only: bool = Query(False, description="Return only enabled overrides"),
    db: Session = Depends(get_db)
):
    """List unblock overrides"""
    return list_unblocks(db, enabled_only=enabled_only)


@router.get("/{unblock_id}", response_model=UnblockOut)
async def get_unblock_endpoint(unblock_id: int, db: Session = Depends(get_db)):
    """Get an unblock override by ID"""
    return get_unblock(db, unblock_id)


@router.patch("/{unblock_id}", response_model=UnblockOut)
async def update_unblock_endpoint(
    unblock_id: int,
    unblock_data: UnblockUpdate,
    db: Session = Depends(get_db)
):
    """Update an unblock override"""
    return update_unblock(
        db=db,
        unblock_id=unblock_id,
        reason=unblock_data.reason,
        enabled=unblock_data.enabled
    )


@router.delete("/{unblock_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_unblock_endpoint(unblock_id: int, db: Session = Depends(get_db)):
    """Delete an unblock override"""
    delete_unblock(db, unblock_id)
