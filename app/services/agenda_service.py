"""
Agenda settings service - persistence of the rules that block the calendar

Holds the holiday tier toggles and the clinic-defined custom holidays,
bridges, blocks and unblocks. Evaluation of those rules lives in
app.services.holiday_rules.
"""
import logging
from datetime import date, time
from typing import List, Optional
from sqlalchemy.orm import Session
from fastapi import HTTPException, status
from app.models.agenda import (
    AgendaSetting,
    CustomHoliday,
    HolidayBridge,
    DateBlock,
    DateUnblock,
    BlockType,
)
from app.utils.datetime_utils import now_utc

logger = logging.getLogger(__name__)


def _validate_range(start_date: date, end_date: date) -> None:
    if start_date > end_date:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Start date {start_date} is after end date {end_date}"
        )


def _validate_time_window(all_day: bool, start_time: Optional[time], end_time: Optional[time]) -> None:
    if all_day:
        if start_time is not None or end_time is not None:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="start_time and end_time are only allowed when all_day is false"
            )
        return
    if start_time is None or end_time is None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="start_time and end_time are required when all_day is false"
        )
    if start_time >= end_time:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Start time {start_time} must be before end time {end_time}"
        )


def _not_found(entity: str, entity_id: int) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=f"{entity} with id {entity_id} not found"
    )


def _save(db: Session, instance):
    db.add(instance)
    db.commit()
    db.refresh(instance)
    return instance


# Agenda settings

def get_or_create_agenda_settings(db: Session) -> AgendaSetting:
    """
    Get the single agenda settings row, creating it with defaults
    (national on, state off, city off) when missing
    """
    agenda = db.query(AgendaSetting).order_by(AgendaSetting.id).first()
    if agenda:
        return agenda

    # Explicitly set created_at/updated_at to avoid SQLite issues with server_default
    now = now_utc()
    agenda = AgendaSetting(
        national_holidays=True,
        state_holidays=False,
        city_holidays=False,
        created_at=now,
        updated_at=now
    )
    logger.info("Creating default agenda settings")
    return _save(db, agenda)


def update_agenda_settings(
    db: Session,
    national_holidays: Optional[bool] = None,
    state_holidays: Optional[bool] = None,
    city_holidays: Optional[bool] = None
) -> AgendaSetting:
    """Update holiday tier toggles; omitted values are kept"""
    agenda = get_or_create_agenda_settings(db)

    if national_holidays is not None:
        agenda.national_holidays = national_holidays
    if state_holidays is not None:
        agenda.state_holidays = state_holidays
    if city_holidays is not None:
        agenda.city_holidays = city_holidays

    agenda.updated_at = now_utc()
    db.commit()
    db.refresh(agenda)

    logger.info(
        "Agenda settings updated: national=%s state=%s city=%s",
        agenda.national_holidays, agenda.state_holidays, agenda.city_holidays
    )
    return agenda


# Custom holidays

def create_custom_holiday(
    db: Session,
    holiday_date: date,
    name: str,
    enabled: bool = True
) -> CustomHoliday:
    """
    Create a custom holiday

    Raises:
        HTTPException: 409 if a custom holiday already exists on that date
    """
    existing = db.query(CustomHoliday).filter(CustomHoliday.date == holiday_date).first()
    if existing:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=f"Custom holiday already exists for date {holiday_date}"
        )

    now = now_utc()
    holiday = _save(db, CustomHoliday(
        date=holiday_date,
        name=name,
        enabled=enabled,
        created_at=now,
        updated_at=now
    ))
    logger.info("Custom holiday created: %s on %s", name, holiday_date)
    return holiday


def list_custom_holidays(
    db: Session,
    year: Optional[int] = None,
    enabled_only: bool = False
) -> List[CustomHoliday]:
    """List custom holidays ordered by date"""
    query = db.query(CustomHoliday)

    if year:
        query = query.filter(
            CustomHoliday.date >= date(year, 1, 1),
            CustomHoliday.date <= date(year, 12, 31)
        )

    if enabled_only:
        query = query.filter(CustomHoliday.enabled == True)

    return query.order_by(CustomHoliday.date).all()


def get_custom_holiday(db: Session, holiday_id: int) -> CustomHoliday:
    holiday = db.query(CustomHoliday).filter(CustomHoliday.id == holiday_id).first()
    if not holiday:
        raise _not_found("Custom holiday", holiday_id)
    return holiday


def update_custom_holiday(
    db: Session,
    holiday_id: int,
    name: Optional[str] = None,
    enabled: Optional[bool] = None
) -> CustomHoliday:
    holiday = get_custom_holiday(db, holiday_id)

    if name is not None:
        holiday.name = name
    if enabled is not None:
        holiday.enabled = enabled

    holiday.updated_at = now_utc()
    db.commit()
    db.refresh(holiday)
    return holiday


def delete_custom_holiday(db: Session, holiday_id: int) -> None:
    holiday = get_custom_holiday(db, holiday_id)
    db.delete(holiday)
    db.commit()
    logger.info("Custom holiday %s deleted", holiday_id)


# Bridges

def create_bridge(
    db: Session,
    name: str,
    start_date: date,
    end_date: date,
    enabled: bool = True
) -> HolidayBridge:
    """
    Create a holiday bridge

    Raises:
        HTTPException: 400 if start_date is after end_date
    """
    _validate_range(start_date, end_date)

    now = now_utc()
    bridge = _save(db, HolidayBridge(
        name=name,
        start_date=start_date,
        end_date=end_date,
        enabled=enabled,
        created_at=now,
        updated_at=now
    ))
    logger.info("Bridge created: %s (%s - %s)", name, start_date, end_date)
    return bridge


def create_bridge_from_suggestion(
    db: Session,
    name: str,
    start_date: date,
    end_date: date
) -> HolidayBridge:
    """
    Store a suggested bridge

    Suggestions are advisory; accepting the same one twice returns the
    bridge already stored for that exact period.
    """
    existing = db.query(HolidayBridge).filter(
        HolidayBridge.start_date == start_date,
        HolidayBridge.end_date == end_date
    ).first()
    if existing:
        return existing
    return create_bridge(db, name=name, start_date=start_date, end_date=end_date)


def list_bridges(db: Session, enabled_only: bool = False) -> List[HolidayBridge]:
    query = db.query(HolidayBridge)
    if enabled_only:
        query = query.filter(HolidayBridge.enabled == True)
    return query.order_by(HolidayBridge.start_date).all()


def get_bridge(db: Session, bridge_id: int) -> HolidayBridge:
    bridge = db.query(HolidayBridge).filter(HolidayBridge.id == bridge_id).first()
    if not bridge:
        raise _not_found("Bridge", bridge_id)
    return bridge


def update_bridge(
    db: Session,
    bridge_id: int,
    name: Optional[str] = None,
    start_date: Optional[date] = None,
    end_date: Optional[date] = None,
    enabled: Optional[bool] = None
) -> HolidayBridge:
    """Update a bridge; the resulting range must stay ordered"""
    bridge = get_bridge(db, bridge_id)

    _validate_range(
        start_date if start_date is not None else bridge.start_date,
        end_date if end_date is not None else bridge.end_date
    )

    if name is not None:
        bridge.name = name
    if start_date is not None:
        bridge.start_date = start_date
    if end_date is not None:
        bridge.end_date = end_date
    if enabled is not None:
        bridge.enabled = enabled

    bridge.updated_at = now_utc()
    db.commit()
    db.refresh(bridge)
    return bridge


def delete_bridge(db: Session, bridge_id: int) -> None:
    bridge = get_bridge(db, bridge_id)
    db.delete(bridge)
    db.commit()
    logger.info("Bridge %s deleted", bridge_id)


# Blocks

def create_block(
    db: Session,
    title: str,
    start_date: date,
    end_date: date,
    block_type: BlockType = BlockType.VACATION,
    all_day: bool = True,
    start_time: Optional[time] = None,
    end_time: Optional[time] = None,
    enabled: bool = True
) -> DateBlock:
    """
    Create a blocked period (vacation, day off, maintenance, personal)

    Timed blocks keep their window for display; the agenda still blocks
    every day of the range.

    Raises:
        HTTPException: 400 on an inverted date range, an inverted or missing
            time window, or times sent for an all-day block
    """
    _validate_range(start_date, end_date)
    _validate_time_window(all_day, start_time, end_time)

    now = now_utc()
    block = _save(db, DateBlock(
        title=title,
        start_date=start_date,
        end_date=end_date,
        block_type=BlockType(block_type).value,
        all_day=all_day,
        start_time=start_time,
        end_time=end_time,
        enabled=enabled,
        created_at=now,
        updated_at=now
    ))
    logger.info("Block created: %s [%s] (%s - %s)", title, block.block_type, start_date, end_date)
    return block


def list_blocks(
    db: Session,
    block_type: Optional[BlockType] = None,
    enabled_only: bool = False
) -> List[DateBlock]:
    query = db.query(DateBlock)
    if block_type is not None:
        query = query.filter(DateBlock.block_type == BlockType(block_type).value)
    if enabled_only:
        query = query.filter(DateBlock.enabled == True)
    return query.order_by(DateBlock.start_date).all()


def get_block(db: Session, block_id: int) -> DateBlock:
    block = db.query(DateBlock).filter(DateBlock.id == block_id).first()
    if not block:
        raise _not_found("Block", block_id)
    return block


def update_block(
    db: Session,
    block_id: int,
    title: Optional[str] = None,
    start_date: Optional[date] = None,
    end_date: Optional[date] = None,
    block_type: Optional[BlockType] = None,
    all_day: Optional[bool] = None,
    start_time: Optional[time] = None,
    end_time: Optional[time] = None,
    enabled: Optional[bool] = None
) -> DateBlock:
    """Update a blocked period; range and time window are re-validated"""
    block = get_block(db, block_id)

    new_all_day = all_day if all_day is not None else block.all_day
    new_start_time = start_time if start_time is not None else block.start_time
    new_end_time = end_time if end_time is not None else block.end_time
    _validate_range(
        start_date if start_date is not None else block.start_date,
        end_date if end_date is not None else block.end_date
    )
    if new_all_day:
        # Stored times are cleared; only times sent with this update are rejected
        _validate_time_window(True, start_time, end_time)
    else:
        _validate_time_window(False, new_start_time, new_end_time)

    if title is not None:
        block.title = title
    if start_date is not None:
        block.start_date = start_date
    if end_date is not None:
        block.end_date = end_date
    if block_type is not None:
        block.block_type = BlockType(block_type).value
    if enabled is not None:
        block.enabled = enabled
    block.all_day = new_all_day
    block.start_time = None if new_all_day else new_start_time
    block.end_time = None if new_all_day else new_end_time

    block.updated_at = now_utc()
    db.commit()
    db.refresh(block)
    return block


def delete_block(db: Session, block_id: int) -> None:
    block = get_block(db, block_id)
    db.delete(block)
    db.commit()
    logger.info("Block %s deleted", block_id)


# Unblocks

def create_unblock(
    db: Session,
    unblock_date: date,
    reason: str,
    enabled: bool = True
) -> DateUnblock:
    """Create an override that opens a date regardless of any other rule"""
    now = now_utc()
    unblock = _save(db, DateUnblock(
        date=unblock_date,
        reason=reason,
        enabled=enabled,
        created_at=now,
        updated_at=now
    ))
    logger.info("Unblock created for %s: %s", unblock_date, reason)
    return unblock


def list_unblocks(db: Session, enabled_only: bool = False) -> List[DateUnblock]:
    query = db.query(DateUnblock)
    if enabled_only:
        query = query.filter(DateUnblock.enabled == True)
    return query.order_by(DateUnblock.date).all()


def get_unblock(db: Session, unblock_id: int) -> DateUnblock:
    unblock = db.query(DateUnblock).filter(DateUnblock.id == unblock_id).first()
    if not unblock:
        raise _not_found("Unblock", unblock_id)
    return unblock


def update_unblock(
    db: Session,
    unblock_id: int,
    reason: Optional[str] = None,
    enabled: Optional[bool] = None
) -> DateUnblock:
    unblock = get_unblock(db, unblock_id)

    if reason is not None:
        unblock.reason = reason
    if enabled is not None:
        unblock.enabled = enabled

    unblock.updated_at = now_utc()
    db.commit()
    db.refresh(unblock)
    return unblock


def delete_unblock(db: Session, unblock_id: int) -> None:
    unblock = get_unblock(db, unblock_id)
    db.delete(unblock)
    db.commit()
    logger.info("Unblock %s deleted", unblock_id)
