"""
Tests for agenda settings, custom holiday, bridge, block and unblock endpoints
"""
import pytest
from fastapi import status
from sqlalchemy.orm import Session
from datetime import date
from app.models.agenda import CustomHoliday, HolidayBridge, DateBlock


@pytest.fixture
def vacation_block(db: Session):
    """Create an enabled vacation block"""
    block = DateBlock(
        title="Férias",
        start_date=date(2025, 7, 1),
        end_date=date(2025, 7, 10),
        block_type="VACATION",
        all_day=True,
        enabled=True
    )
    db.add(block)
    db.commit()
    db.refresh(block)
    return block


def test_agenda_settings_defaults(client):
    """Test that settings are created with national holidays on"""
    response = client.get("/api/v1/agenda-settings")

    assert response.status_code == status.HTTP_200_OK
    data = response.json()
    assert data["national_holidays"] is True
    assert data["state_holidays"] is False
    assert data["city_holidays"] is False


def test_agenda_settings_partial_update(client):
    """Test that omitted toggles keep their values"""
    response = client.put("/api/v1/agenda-settings", json={"state_holidays": True})

    assert response.status_code == status.HTTP_200_OK
    data = response.json()
    assert data["national_holidays"] is True
    assert data["state_holidays"] is True

    response = client.put("/api/v1/agenda-settings", json={"national_holidays": False})
    data = response.json()
    assert data["national_holidays"] is False
    assert data["state_holidays"] is True

    # Still a single settings row
    assert client.get("/api/v1/agenda-settings").json()["id"] == data["id"]


def test_create_custom_holiday_success(client):
    """Test creating a custom holiday"""
    response = client.post(
        "/api/v1/custom-holidays",
        json={"date": "2025-08-15", "name": "Aniversário da Clínica"}
    )

    assert response.status_code == status.HTTP_201_CREATED
    data = response.json()
    assert data["date"] == "2025-08-15"
    assert data["name"] == "Aniversário da Clínica"
    assert data["enabled"] is True
    assert "created_at" in data


def test_create_custom_holiday_duplicate_rejected(client):
    """Test that two custom holidays on the same date are rejected"""
    payload = {"date": "2025-08-15", "name": "Aniversário da Clínica"}
    assert client.post("/api/v1/custom-holidays", json=payload).status_code == status.HTTP_201_CREATED

    response = client.post("/api/v1/custom-holidays", json={"date": "2025-08-15", "name": "Outro"})

    assert response.status_code == status.HTTP_409_CONFLICT
    assert "already exists" in response.json()["detail"].lower()


def test_list_custom_holidays_filters(client, db):
    """Test listing custom holidays by year and enabled flag"""
    db.add_all([
        CustomHoliday(date=date(2025, 8, 15), name="A", enabled=True),
        CustomHoliday(date=date(2025, 3, 1), name="B", enabled=False),
        CustomHoliday(date=date(2026, 8, 15), name="C", enabled=True),
    ])
    db.commit()

    response = client.get("/api/v1/custom-holidays?year=2025")
    assert [h["name"] for h in response.json()] == ["B", "A"]

    response = client.get("/api/v1/custom-holidays?year=2025&enabled_only=true")
    assert [h["name"] for h in response.json()] == ["A"]

    response = client.get("/api/v1/custom-holidays")
    assert len(response.json()) == 3


def test_update_and_delete_custom_holiday(client):
    """Test toggling and removing a custom holiday"""
    created = client.post(
        "/api/v1/custom-holidays",
        json={"date": "2025-08-15", "name": "Aniversário da Clínica"}
    ).json()

    response = client.patch(f"/api/v1/custom-holidays/{created['id']}", json={"enabled": False})
    assert response.status_code == status.HTTP_200_OK
    assert response.json()["enabled"] is False
    assert response.json()["name"] == "Aniversário da Clínica"

    response = client.delete(f"/api/v1/custom-holidays/{created['id']}")
    assert response.status_code == status.HTTP_204_NO_CONTENT

    response = client.get(f"/api/v1/custom-holidays/{created['id']}")
    assert response.status_code == status.HTTP_404_NOT_FOUND
    assert response.json()["error"] is True


def test_create_bridge_and_reject_inverted_range(client):
    """Test bridge creation and range validation"""
    response = client.post(
        "/api/v1/bridges",
        json={"name": "Ponte Natal", "start_date": "2025-12-26", "end_date": "2025-12-26"}
    )
    assert response.status_code == status.HTTP_201_CREATED
    assert response.json()["enabled"] is True

    response = client.post(
        "/api/v1/bridges",
        json={"name": "Invertida", "start_date": "2025-12-27", "end_date": "2025-12-26"}
    )
    assert response.status_code == status.HTTP_400_BAD_REQUEST


def test_update_bridge_validates_merged_range(client, db):
    """Test that a partial update cannot invert the stored range"""
    bridge = HolidayBridge(name="Ponte", start_date=date(2025, 5, 1), end_date=date(2025, 5, 2), enabled=True)
    db.add(bridge)
    db.commit()
    db.refresh(bridge)

    response = client.patch(f"/api/v1/bridges/{bridge.id}", json={"end_date": "2025-04-30"})
    assert response.status_code == status.HTTP_400_BAD_REQUEST

    response = client.patch(f"/api/v1/bridges/{bridge.id}", json={"end_date": "2025-05-04", "enabled": False})
    assert response.status_code == status.HTTP_200_OK
    assert response.json()["end_date"] == "2025-05-04"
    assert response.json()["enabled"] is False


def test_bridge_suggestions(client):
    """Test suggestions for 2025"""
    response = client.get("/api/v1/bridges/suggestions?year=2025")

    assert response.status_code == status.HTTP_200_OK
    data = response.json()
    assert {"name": "Ponte - Natal", "start_date": "2025-12-25", "end_date": "2025-12-26"} in data
    assert len(data) == 4

    # Suggestions are not stored
    assert client.get("/api/v1/bridges").json() == []


def test_accept_bridge_suggestion_is_idempotent(client):
    """Test storing a suggestion twice keeps a single bridge"""
    suggestion = client.get("/api/v1/bridges/suggestions?year=2025").json()[0]

    first = client.post("/api/v1/bridges/from-suggestion", json=suggestion)
    second = client.post("/api/v1/bridges/from-suggestion", json=suggestion)

    assert first.status_code == status.HTTP_201_CREATED
    assert first.json()["id"] == second.json()["id"]
    assert len(client.get("/api/v1/bridges").json()) == 1


def test_create_block_types_and_time_window(client):
    """Test blocked periods with a type and an optional time window"""
    response = client.post(
        "/api/v1/blocks",
        json={
            "title": "Manutenção do equipamento",
            "start_date": "2025-07-14",
            "end_date": "2025-07-14",
            "block_type": "MAINTENANCE",
            "all_day": False,
            "start_time": "14:00",
            "end_time": "18:00"
        }
    )
    assert response.status_code == status.HTTP_201_CREATED
    data = response.json()
    assert data["block_type"] == "MAINTENANCE"
    assert data["all_day"] is False
    assert data["start_time"] == "14:00:00"
    assert data["end_time"] == "18:00:00"

    response = client.post(
        "/api/v1/blocks",
        json={
            "title": "Janela invertida",
            "start_date": "2025-07-14",
            "end_date": "2025-07-14",
            "all_day": False,
            "start_time": "18:00",
            "end_time": "14:00"
        }
    )
    assert response.status_code == status.HTTP_400_BAD_REQUEST

    response = client.post(
        "/api/v1/blocks",
        json={"title": "Sem horário", "start_date": "2025-07-14", "end_date": "2025-07-14", "all_day": False}
    )
    assert response.status_code == status.HTTP_400_BAD_REQUEST


def test_all_day_block_rejects_time_window(client):
    """Test that all-day blocks cannot carry times"""
    response = client.post(
        "/api/v1/blocks",
        json={
            "title": "Férias",
            "start_date": "2025-07-01",
            "end_date": "2025-07-10",
            "start_time": "08:00",
            "end_time": "12:00"
        }
    )

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert "all_day" in response.json()["detail"]


def test_update_all_day_block_rejects_time_window(client, vacation_block):
    """Test that times sent for a block that stays all-day are rejected"""
    response = client.patch(
        f"/api/v1/blocks/{vacation_block.id}",
        json={"start_time": "08:00", "end_time": "12:00"}
    )
    assert response.status_code == status.HTTP_400_BAD_REQUEST

    data = client.get(f"/api/v1/blocks/{vacation_block.id}").json()
    assert data["all_day"] is True
    assert data["start_time"] is None


def test_switching_timed_block_to_all_day_clears_times(client):
    """Test that a timed block becomes all-day without resending times"""
    created = client.post(
        "/api/v1/blocks",
        json={
            "title": "Manutenção",
            "start_date": "2025-07-14",
            "end_date": "2025-07-14",
            "all_day": False,
            "start_time": "14:00",
            "end_time": "18:00"
        }
    ).json()

    response = client.patch(f"/api/v1/blocks/{created['id']}", json={"all_day": True})

    assert response.status_code == status.HTTP_200_OK
    data = response.json()
    assert data["all_day"] is True
    assert data["start_time"] is None
    assert data["end_time"] is None


def test_block_invalid_type_rejected(client):
    """Test unknown block types fail validation"""
    response = client.post(
        "/api/v1/blocks",
        json={"title": "X", "start_date": "2025-07-01", "end_date": "2025-07-02", "block_type": "HOLIDAY"}
    )

    assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY


def test_list_blocks_by_type(client, vacation_block):
    """Test filtering blocks by type"""
    client.post(
        "/api/v1/blocks",
        json={"title": "Folga", "start_date": "2025-08-01", "end_date": "2025-08-01", "block_type": "DAY_OFF"}
    )

    response = client.get("/api/v1/blocks?block_type=DAY_OFF")
    assert [b["title"] for b in response.json()] == ["Folga"]

    response = client.get("/api/v1/blocks")
    assert [b["title"] for b in response.json()] == ["Férias", "Folga"]


def test_update_and_delete_block(client, vacation_block):
    """Test disabling and removing a block"""
    response = client.patch(f"/api/v1/blocks/{vacation_block.id}", json={"enabled": False, "block_type": "PERSONAL"})
    assert response.status_code == status.HTTP_200_OK
    assert response.json()["enabled"] is False
    assert response.json()["block_type"] == "PERSONAL"

    response = client.patch(f"/api/v1/blocks/{vacation_block.id}", json={"start_date": "2025-07-11"})
    assert response.status_code == status.HTTP_400_BAD_REQUEST

    assert client.delete(f"/api/v1/blocks/{vacation_block.id}").status_code == status.HTTP_204_NO_CONTENT
    assert client.get(f"/api/v1/blocks/{vacation_block.id}").status_code == status.HTTP_404_NOT_FOUND


def test_unblock_crud(client):
    """Test creating, updating and deleting an unblock override"""
    response = client.post("/api/v1/unblocks", json={"date": "2025-12-25", "reason": "Plantão de Natal"})
    assert response.status_code == status.HTTP_201_CREATED
    unblock = response.json()
    assert unblock["date"] == "2025-12-25"
    assert unblock["enabled"] is True

    response = client.patch(f"/api/v1/unblocks/{unblock['id']}", json={"reason": "Plantão"})
    assert response.json()["reason"] == "Plantão"

    response = client.get("/api/v1/unblocks?enabled_only=true")
    assert len(response.json()) == 1

    assert client.delete(f"/api/v1/unblocks/{unblock['id']}").status_code == status.HTTP_204_NO_CONTENT
    assert client.get("/api/v1/unblocks").json() == []


def test_missing_records_return_404(client):
    """Test 404 for unknown IDs on every collection"""
    for collection in ("custom-holidays", "bridges", "blocks", "unblocks"):
        response = client.get(f"/api/v1/{collection}/999")
        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert "not found" in response.json()["detail"]

        response = client.delete(f"/api/v1/{collection}/999")
        assert response.status_code == status.HTTP_404_NOT_FOUND
