"""
Calendar endpoints consumed by the agenda view

Dates are taken as strict YYYY-MM-DD strings; malformed values and
inverted ranges are answered with 400.
"""
from typing import List, Optional
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from app.core.config import settings
from app.core.deps import get_db
from app.schemas.calendar import BlockedDayOut, DateStatusOut
from app.schemas.holiday import Holiday
from app.services import calendar_service
from app.services.holiday_rules import format_holiday_date, is_weekend, parse_civil_date

router = APIRouter()


@router.get("/status", response_model=DateStatusOut)
async def get_date_status(
    date: str = Query(..., description="Date to check (YYYY-MM-DD)"),
    db: Session = Depends(get_db)
):
    """Whether a day accepts new appointments, and why not"""
    target = parse_civil_date(date)
    block_status = calendar_service.check_date(db, target)
    return DateStatusOut(
        date=target,
        blocked=block_status.blocked,
        reason=block_status.reason,
        holiday=block_status.holiday,
        is_weekend=is_weekend(target),
        formatted_date=format_holiday_date(target)
    )


@router.get("/blocked-days", response_model=List[BlockedDayOut])
async def get_blocked_days(
    from_date: str = Query(..., description="First day (YYYY-MM-DD)"),
    to_date: str = Query(..., description="Last day, inclusive (YYYY-MM-DD)"),
    db: Session = Depends(get_db)
):
    """Blocked days of a range, e.g. the visible week"""
    blocked = calendar_service.get_blocked_days_in_range(
        db, parse_civil_date(from_date), parse_civil_date(to_date)
    )
    return [
        BlockedDayOut(date=day, reason=block_status.reason, holiday=block_status.holiday)
        for day, block_status in blocked.items()
    ]


@router.get("/upcoming-holidays", response_model=List[Holiday])
async def get_upcoming_holidays(
    start_date: str = Query(..., description="First day to consider (YYYY-MM-DD)"),
    limit: Optional[int] = Query(None, ge=1, le=100, description="Maximum number of holidays"),
    db: Session = Depends(get_db)
):
    """Next holidays of the enabled tiers plus enabled custom holidays"""
    return calendar_service.upcoming_holidays(
        db,
        parse_civil_date(start_date),
        limit if limit is not None else settings.UPCOMING_HOLIDAYS_LIMIT
    )


@router.get("/holidays", response_model=List[Holiday])
async def get_holidays_of_year(
    year: int = Query(..., ge=1, le=9999, description="Calendar year"),
    db: Session = Depends(get_db)
):
    """Holidays of the enabled tiers and enabled custom holidays in a year"""
    return calendar_service.holidays_for_year(db, year)
