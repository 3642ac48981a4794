"""
Blocked period endpoints (vacations, days off, maintenance, personal)
"""
from typing import List, Optional
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session
from app.core.deps import get_db
from app.models.agenda import BlockType
from app.schemas.agenda import BlockCreate, BlockUpdate, BlockOut
from app.services.agenda_service import (
    create_block,
    list_blocks,
    get_block,
    update_block,
    delete_block
)

router = APIRouter()


@router.post("", response_model=BlockOut, status_code=status.HTTP_201_CREATED)
async def create_block_endpoint(block_data: BlockCreate, db: Session = Depends(get_db)):
    """Create a blocked period"""
    return create_block(
        db=db,
        title=block_data.title,
        start_date=block_data.start_date,
        end_date=block_data.end_date,
        block_type=block_data.block_type,
        all_day=block_data.all_day,
        start_time=block_data.start_time,
        end_time=block_data.end_time,
        enabled=block_data.enabled
    )


@router.get("", response_model=List[BlockOut])
async def list_blocks_endpoint(
    block_type: Optional[BlockType] = Query(None, description="Filter by block type"),
    enabled_only: bool = Query(False, description="Return only enabled blocks"),
    db: Session = Depends(get_db)
):
    """List blocked periods"""
    return list_blocks(db, block_type=block_type, enabled_only=enabled_only)


@router.get("/{block_id}", response_model=BlockOut)
async def get_block_endpoint(block_id: int, db: Session = Depends(get_db)):
    """Get a blocked period by ID"""
    return get_block(db, block_id)


@router.patch("/{block_id}", response_model=BlockOut)
async def update_block_endpoint(
    block_id: int,
    block_data: BlockUpdate,
    db: Session = Depends(get_db)
):
    """Update a blocked period"""
    return update_block(
        db=db,
        block_id=block_id,
        title=block_data.title,
        start_date=block_data.start_date,
        end_date=block_data.end_date,
        block_type=block_data.block_type,
        all_day=block_data.all_day,
        start_time=block_data.start_time,
        end_time=block_data.end_time,
        enabled=block_data.enabled
    )


@router.delete("/{block_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_block_endpoint(block_id: int, db: Session = Depends(get_db)):
    """Delete a blocked period"""
    delete_block(db, block_id)
