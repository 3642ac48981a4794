"""
Agenda blocking models: tier toggles, custom holidays, bridges, blocks and unblocks
"""
import enum
from sqlalchemy import Column, Integer, Date, DateTime, String, Boolean, Time, UniqueConstraint
from sqlalchemy.sql import func
from app.db.base import Base


class BlockType(str, enum.Enum):
    VACATION = "VACATION"
    DAY_OFF = "DAY_OFF"
    MAINTENANCE = "MAINTENANCE"
    PERSONAL = "PERSONAL"


class AgendaSetting(Base):
    __tablename__ = "agenda_settings"

    id = Column(Integer, primary_key=True, index=True)
    national_holidays = Column(Boolean, nullable=False, default=True)
    state_holidays = Column(Boolean, nullable=False, default=False)
    city_holidays = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime(timezone=True), server_default=func.current_timestamp(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.current_timestamp(), onupdate=func.current_timestamp(), nullable=False)


class CustomHoliday(Base):
    __tablename__ = "custom_holidays"

    id = Column(Integer, primary_key=True, index=True)
    date = Column(Date, nullable=False, index=True)
    name = Column(String(255), nullable=False)
    enabled = Column(Boolean, nullable=False, default=True)
    created_at = Column(DateTime(timezone=True), server_default=func.current_timestamp(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.current_timestamp(), onupdate=func.current_timestamp(), nullable=False)

    __table_args__ = (
        UniqueConstraint('date', name='uq_custom_holiday_date'),
    )


class HolidayBridge(Base):
    __tablename__ = "holiday_bridges"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    start_date = Column(Date, nullable=False, index=True)
    end_date = Column(Date, nullable=False, index=True)
    enabled = Column(Boolean, nullable=False, default=True)
    created_at = Column(DateTime(timezone=True), server_default=func.current_timestamp(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.current_timestamp(), onupdate=func.current_timestamp(), nullable=False)


class DateBlock(Base):
    __tablename__ = "date_blocks"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(255), nullable=False)
    start_date = Column(Date, nullable=False, index=True)
    end_date = Column(Date, nullable=False, index=True)
    block_type = Column(String(20), nullable=False, default=BlockType.VACATION.value)
    all_day = Column(Boolean, nullable=False, default=True)
    # Informational only; blocking is always whole-day
    start_time = Column(Time, nullable=True)
    end_time = Column(Time, nullable=True)
    enabled = Column(Boolean, nullable=False, default=True)
    created_at = Column(DateTime(timezone=True), server_default=func.current_timestamp(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.current_timestamp(), onupdate=func.current_timestamp(), nullable=False)


class DateUnblock(Base):
    __tablename__ = "date_unblocks"

    id = Column(Integer, primary_key=True, index=True)
    date = Column(Date, nullable=False, index=True)
    reason = Column(String(255), nullable=False)
    enabled = Column(Boolean, nullable=False, default=True)
    created_at = Column(DateTime(timezone=True), server_default=func.current_timestamp(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.current_timestamp(), onupdate=func.current_timestamp(), nullable=False)
