"""
Custom holiday endpoints
"""
from typing import List, Optional
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session
from app.core.deps import get_db
from app.schemas.agenda import CustomHolidayCreate, CustomHolidayUpdate, CustomHolidayOut
from app.services.agenda_service import (
    create_custom_holiday,
    list_custom_holidays,
    get_custom_holiday,
    update_custom_holiday,
    delete_custom_holiday
)

router = APIRouter()


@router.post("", response_model=CustomHolidayOut, status_code=status.HTTP_201_CREATED)
async def create_custom_holiday_endpoint(
    holiday_data: CustomHolidayCreate,
    db: Session = Depends(get_db)
):
    """Create a custom holiday"""
    return create_custom_holiday(
        db=db,
        holiday_date=holiday_data.date,
        name=holiday_data.name,
        enabled=holiday_data.enabled
    )


@router.get("", response_model=List[CustomHolidayOut])
async def list_custom_holidays_endpoint(
    year: Optional[int] = Query(None, ge=1, le=9999, description="Filter by year"),
    enabled_only: bool = Query(False, description="Return only enabled holidays"),
    db: Session = Depends(get_db)
):
    """List custom holidays"""
    return list_custom_holidays(db, year=year, enabled_only=enabled_only)


@router.get("/{holiday_id}", response_model=CustomHolidayOut)
async def get_custom_holiday_endpoint(holiday_id: int, db: Session = Depends(get_db)):
    """Get a custom holiday by ID"""
    return get_custom_holiday(db, holiday_id)


@router.patch("/{holiday_id}", response_model=CustomHolidayOut)
async def update_custom_holiday_endpoint(
    holiday_id: int,
    holiday_data: CustomHolidayUpdate,
    db: Session = Depends(get_db)
):
    """Rename or enable/disable a custom holiday"""
    return update_custom_holiday(
        db=db,
        holiday_id=holiday_id,
        name=holiday_data.name,
        enabled=holiday_data.enabled
    )


@router.delete("/{holiday_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_custom_holiday_endpoint(holiday_id: int, db: Session = Depends(get_db)):
    """Delete a custom holiday"""
    delete_custom_holiday(db, holiday_id)
