"""
Database models
"""
from app.models.agenda import (
    AgendaSetting,
    CustomHoliday,
    HolidayBridge,
    DateBlock,
    DateUnblock,
    BlockType,
)

__all__ = [
    "AgendaSetting",
    "CustomHoliday",
    "HolidayBridge",
    "DateBlock",
    "DateUnblock",
    "BlockType",
]
