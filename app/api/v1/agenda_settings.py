"""
Agenda settings endpoints (holiday tier toggles)
"""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from app.core.deps import get_db
from app.schemas.agenda import AgendaSettingsOut, AgendaSettingsUpdate
from app.services.agenda_service import get_or_create_agenda_settings, update_agenda_settings

router = APIRouter()


@router.get("", response_model=AgendaSettingsOut)
async def get_agenda_settings_endpoint(db: Session = Depends(get_db)):
    """Get holiday tier toggles (created with defaults on first access)"""
    return get_or_create_agenda_settings(db)


@router.put("", response_model=AgendaSettingsOut)
async def update_agenda_settings_endpoint(
    settings_data: AgendaSettingsUpdate,
    db: Session = Depends(get_db)
):
    """Update holiday tier toggles"""
    return update_agenda_settings(
        db=db,
        national_holidays=settings_data.national_holidays,
        state_holidays=settings_data.state_holidays,
        city_holidays=settings_data.city_holidays
    )
