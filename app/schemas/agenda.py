"""
Agenda blocking schemas
"""
from datetime import date as date_type, datetime, time
from typing import Optional
from pydantic import BaseModel, Field, field_serializer, ConfigDict
from app.models.agenda import BlockType


class TimestampedOut(BaseModel):
    """Base for output schemas. Datetimes rendered in APP_TIMEZONE."""
    id: int
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)

    @field_serializer("created_at", "updated_at", when_used="always")
    @classmethod
    def _ser_datetime(cls, dt):
        from app.utils.datetime_utils import iso_local
        return iso_local(dt) if dt is not None else None


class AgendaSettingsUpdate(BaseModel):
    """Schema for updating holiday tier toggles"""
    national_holidays: Optional[bool] = Field(None, description="Block national holidays")
    state_holidays: Optional[bool] = Field(None, description="Block state holidays")
    city_holidays: Optional[bool] = Field(None, description="Block city holidays")


class AgendaSettingsOut(TimestampedOut):
    national_holidays: bool
    state_holidays: bool
    city_holidays: bool


class CustomHolidayCreate(BaseModel):
    """Schema for creating a custom holiday"""
    date: date_type = Field(..., description="Holiday date")
    name: str = Field(..., min_length=1, max_length=255, description="Holiday name")
    enabled: bool = Field(True, description="Whether the holiday blocks the agenda")


class CustomHolidayUpdate(BaseModel):
    """Schema for updating a custom holiday"""
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    enabled: Optional[bool] = None


class CustomHolidayOut(TimestampedOut):
    date: date_type
    name: str
    enabled: bool


class BridgeCreate(BaseModel):
    """Schema for creating a holiday bridge"""
    name: str = Field(..., min_length=1, max_length=255, description="Bridge name")
    start_date: date_type = Field(..., description="First blocked day (inclusive)")
    end_date: date_type = Field(..., description="Last blocked day (inclusive)")
    enabled: bool = Field(True, description="Whether the bridge blocks the agenda")


class BridgeUpdate(BaseModel):
    """Schema for updating a holiday bridge"""
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    start_date: Optional[date_type] = None
    end_date: Optional[date_type] = None
    enabled: Optional[bool] = None


class BridgeOut(TimestampedOut):
    name: str
    start_date: date_type
    end_date: date_type
    enabled: bool


class BridgeSuggestionAccept(BaseModel):
    """A suggestion from GET /bridges/suggestions, sent back to be stored"""
    name: str = Field(..., min_length=1, max_length=255)
    start_date: date_type
    end_date: date_type


class BlockCreate(BaseModel):
    """Schema for creating a blocked period"""
    title: str = Field(..., min_length=1, max_length=255, description="Block title")
    start_date: date_type = Field(..., description="First blocked day (inclusive)")
    end_date: date_type = Field(..., description="Last blocked day (inclusive)")
    block_type: BlockType = Field(BlockType.VACATION, description="VACATION, DAY_OFF, MAINTENANCE or PERSONAL")
    all_day: bool = Field(True, description="Whole-day block")
    start_time: Optional[time] = Field(None, description="Start time (HH:MM); only allowed when all_day is false")
    end_time: Optional[time] = Field(None, description="End time (HH:MM); only allowed when all_day is false")
    enabled: bool = Field(True, description="Whether the block is active")


class BlockUpdate(BaseModel):
    """Schema for updating a blocked period"""
    title: Optional[str] = Field(None, min_length=1, max_length=255)
    start_date: Optional[date_type] = None
    end_date: Optional[date_type] = None
    block_type: Optional[BlockType] = None
    all_day: Optional[bool] = None
    start_time: Optional[time] = None
    end_time: Optional[time] = None
    enabled: Optional[bool] = None


class BlockOut(TimestampedOut):
    title: str
    start_date: date_type
    end_date: date_type
    block_type: BlockType
    all_day: bool
    start_time: Optional[time] = None
    end_time: Optional[time] = None
    enabled: bool


class UnblockCreate(BaseModel):
    """Schema for creating an unblock override"""
    date: date_type = Field(..., description="Date forced open")
    reason: str = Field(..., min_length=1, max_length=255, description="Why the date is opened")
    enabled: bool = Field(True, description="Whether the override is active")


class UnblockUpdate(BaseModel):
    """Schema for updating an unblock override"""
    reason: Optional[str] = Field(None, min_length=1, max_length=255)
    enabled: Optional[bool] = None


class UnblockOut(TimestampedOut):
    date: date_type
    reason: str
    enabled: bool
