"""
Holiday calendar schemas
"""
import enum
from datetime import date as date_type
from typing import Optional
from pydantic import BaseModel, Field, ConfigDict


class HolidayType(str, enum.Enum):
    NATIONAL = "NATIONAL"
    STATE = "STATE"
    CITY = "CITY"
    CUSTOM = "CUSTOM"


class Holiday(BaseModel):
    """A named civil date. Built-in holidays are recurring, custom ones are not."""
    name: str
    date: date_type
    type: HolidayType
    recurring: bool = True

    model_config = ConfigDict(frozen=True)


class BlockSettings(BaseModel):
    """Holiday tier toggles, supplied by the caller on every query"""
    national_holidays: bool = Field(True, description="Block national holidays")
    state_holidays: bool = Field(False, description="Block state holidays")
    city_holidays: bool = Field(False, description="Block city holidays")

    model_config = ConfigDict(frozen=True, from_attributes=True)


class DateRange(BaseModel):
    """Inclusive bridge or block period"""
    start_date: date_type
    end_date: date_type
    enabled: bool = True

    model_config = ConfigDict(frozen=True)


class Unblock(BaseModel):
    """Forces a single date to stay schedulable"""
    date: date_type
    enabled: bool = True

    model_config = ConfigDict(frozen=True)


class BlockStatus(BaseModel):
    """Outcome of a blocked-date check"""
    blocked: bool
    reason: Optional[str] = None
    holiday: Optional[Holiday] = None

    model_config = ConfigDict(frozen=True)


class BridgeSuggestion(BaseModel):
    """Advisory bridge linking a Tuesday/Thursday holiday to the weekend"""
    name: str
    start_date: date_type
    end_date: date_type

    model_config = ConfigDict(frozen=True)
