"""
Holiday bridge ("ponte") endpoints
"""
from typing import List
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session
from app.core.deps import get_db
from app.schemas.agenda import BridgeCreate, BridgeUpdate, BridgeOut, BridgeSuggestionAccept
from app.schemas.holiday import BridgeSuggestion
from app.services.agenda_service import (
    create_bridge,
    create_bridge_from_suggestion,
    list_bridges,
    get_bridge,
    update_bridge,
    delete_bridge
)
from app.services.holiday_rules import suggest_bridges

router = APIRouter()


@router.get("/suggestions", response_model=List[BridgeSuggestion])
async def list_bridge_suggestions_endpoint(
    year: int = Query(..., ge=1, le=9999, description="Year to inspect")
):
    """
    Suggest bridges for national holidays falling on a Tuesday or Thursday

    Suggestions are not stored; send one to POST /bridges/from-suggestion
    to make it block the agenda.
    """
    return suggest_bridges(year)


@router.post("/from-suggestion", response_model=BridgeOut, status_code=status.HTTP_201_CREATED)
async def accept_bridge_suggestion_endpoint(
    suggestion: BridgeSuggestionAccept,
    db: Session = Depends(get_db)
):
    """Store a suggested bridge (idempotent for the same period)"""
    return create_bridge_from_suggestion(
        db=db,
        name=suggestion.name,
        start_date=suggestion.start_date,
        end_date=suggestion.end_date
    )


@router.post("", response_model=BridgeOut, status_code=status.HTTP_201_CREATED)
async def create_bridge_endpoint(bridge_data: BridgeCreate, db: Session = Depends(get_db)):
    """Create a bridge"""
    return create_bridge(
        db=db,
        name=bridge_data.name,
        start_date=bridge_data.start_date,
        end_date=bridge_data.end_date,
        enabled=bridge_data.enabled
    )


@router.get("", response_model=List[BridgeOut])
async def list_bridges_endpoint(
    enabled_only: bool = Query(False, description="Return only enabled bridges"),
    db: Session = Depends(get_db)
):
    """List bridges"""
    return list_bridges(db, enabled_only=enabled_only)


@router.get("/{bridge_id}", response_model=BridgeOut)
async def get_bridge_endpoint(bridge_id: int, db: Session = Depends(get_db)):
    """Get a bridge by ID"""
    return get_bridge(db, bridge_id)


@router.patch("/{bridge_id}", response_model=BridgeOut)
async def update_bridge_endpoint(
    bridge_id: int,
    bridge_data: BridgeUpdate,
    db: Session = Depends(get_db)
):
    """Update a bridge"""
    return update_bridge(
        db=db,
        bridge_id=bridge_id,
        name=bridge_data.name,
        start_date=bridge_data.start_date,
        end_date=bridge_data.end_date,
        enabled=bridge_data.enabled
    )


@router.delete("/{bridge_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_bridge_endpoint(bridge_id: int, db: Session = Depends(get_db)):
    """Delete a bridge"""
    delete_bridge(db, bridge_id)
