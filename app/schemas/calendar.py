"""
Calendar read schemas
"""
from datetime import date as date_type
from typing import Optional
from pydantic import BaseModel
from app.schemas.holiday import Holiday


class DateStatusOut(BaseModel):
    """Blocked status of a single day as shown on a calendar cell"""
    date: date_type
    blocked: bool
    reason: Optional[str] = None
    holiday: Optional[Holiday] = None
    is_weekend: bool
    formatted_date: str


class BlockedDayOut(BaseModel):
    date: date_type
    reason: str
    holiday: Optional[Holiday] = None
