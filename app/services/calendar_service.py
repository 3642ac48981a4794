"""
Calendar service - evaluates the stored agenda rules for the calendar view
"""
import logging
from datetime import date
from typing import Any, Dict, List
from sqlalchemy.orm import Session
from fastapi import HTTPException, status
from app.core.constants import MAX_CALENDAR_RANGE_DAYS
from app.schemas.holiday import BlockSettings, BlockStatus, Holiday, HolidayType
from app.services import agenda_service
from app.services.holiday_rules import (
    get_blocked_days,
    get_holidays_for_year,
    get_upcoming_holidays,
    is_date_blocked,
)

logger = logging.getLogger(__name__)


def load_block_settings(db: Session) -> BlockSettings:
    """Current tier toggles as a value object"""
    return BlockSettings.model_validate(agenda_service.get_or_create_agenda_settings(db))


def load_custom_holidays(db: Session) -> List[Holiday]:
    """Enabled custom holidays, as single-occurrence CUSTOM holidays"""
    return [
        Holiday(name=row.name, date=row.date, type=HolidayType.CUSTOM, recurring=False)
        for row in agenda_service.list_custom_holidays(db, enabled_only=True)
    ]


def load_calendar_rules(db: Session) -> Dict[str, Any]:
    """
    Snapshot every stored rule, keyed by the argument names of
    holiday_rules.is_date_blocked

    Disabled bridges, blocks and unblocks are passed as well; the resolver
    skips them.
    """
    return {
        "settings": load_block_settings(db),
        "custom_holidays": load_custom_holidays(db),
        "bridges": agenda_service.list_bridges(db),
        "blocks": agenda_service.list_blocks(db),
        "unblocks": agenda_service.list_unblocks(db),
    }


def check_date(db: Session, target: date) -> BlockStatus:
    """Blocked status of one date against the stored rules"""
    return is_date_blocked(target, **load_calendar_rules(db))


def get_blocked_days_in_range(db: Session, from_date: date, to_date: date) -> Dict[date, BlockStatus]:
    """
    Blocked days between from_date and to_date (inclusive)

    Raises:
        HTTPException: 400 if the range spans more than MAX_CALENDAR_RANGE_DAYS
    """
    if (to_date - from_date).days + 1 > MAX_CALENDAR_RANGE_DAYS:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Date range cannot exceed {MAX_CALENDAR_RANGE_DAYS} days"
        )

    blocked = get_blocked_days(from_date, to_date, **load_calendar_rules(db))
    logger.debug("Blocked days %s..%s: %d", from_date, to_date, len(blocked))
    return blocked


def upcoming_holidays(db: Session, start_date: date, limit: int) -> List[Holiday]:
    return get_upcoming_holidays(
        start_date,
        load_block_settings(db),
        load_custom_holidays(db),
        limit=limit
    )


def holidays_for_year(db: Session, year: int) -> List[Holiday]:
    return get_holidays_for_year(year, load_block_settings(db), load_custom_holidays(db))
