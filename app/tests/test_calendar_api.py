"""
Tests for the calendar endpoints against stored agenda rules
"""
from datetime import date
from fastapi import status
from app.models.agenda import AgendaSetting, CustomHoliday, DateBlock, DateUnblock, HolidayBridge


def test_status_of_national_holiday(client):
    """Test Christmas 2025 with default settings"""
    response = client.get("/api/v1/calendar/status?date=2025-12-25")

    assert response.status_code == status.HTTP_200_OK
    data = response.json()
    assert data["date"] == "2025-12-25"
    assert data["blocked"] is True
    assert data["reason"] == "Feriado Nacional"
    assert data["holiday"] == {"name": "Natal", "date": "2025-12-25", "type": "NATIONAL", "recurring": True}
    assert data["is_weekend"] is False
    assert data["formatted_date"] == "quinta-feira, 25 de dezembro de 2025"


def test_status_of_regular_weekend_day(client):
    """Test that weekends are flagged but not blocked"""
    data = client.get("/api/v1/calendar/status?date=2025-06-14").json()

    assert data["blocked"] is False
    assert data["reason"] is None
    assert data["holiday"] is None
    assert data["is_weekend"] is True


def test_status_malformed_date_rejected(client):
    """Test malformed and impossible dates return 400"""
    for value in ("2025-13-01", "2025-02-30", "25/12/2025", "2025-1-1"):
        response = client.get(f"/api/v1/calendar/status?date={value}")
        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["error"] is True


def test_status_follows_tier_toggles(client, db):
    """Test state and city tiers only block when enabled"""
    assert client.get("/api/v1/calendar/status?date=2025-07-09").json()["blocked"] is False

    client.put("/api/v1/agenda-settings", json={"state_holidays": True, "city_holidays": True})

    data = client.get("/api/v1/calendar/status?date=2025-07-09").json()
    assert data["reason"] == "Feriado Estadual"
    data = client.get("/api/v1/calendar/status?date=2025-01-25").json()
    assert data["reason"] == "Feriado Municipal"

    client.put("/api/v1/agenda-settings", json={"national_holidays": False})
    assert client.get("/api/v1/calendar/status?date=2025-12-25").json()["blocked"] is False


def test_status_stored_rules_precedence(client, db):
    """Test custom holidays, bridges, blocks and unblock overrides from the database"""
    db.add_all([
        CustomHoliday(date=date(2025, 8, 15), name="Aniversário da Clínica", enabled=True),
        CustomHoliday(date=date(2025, 8, 16), name="Desativado", enabled=False),
        HolidayBridge(name="Ponte Natal", start_date=date(2025, 12, 26), end_date=date(2025, 12, 26), enabled=True),
        DateBlock(
            title="Férias", start_date=date(2025, 7, 1), end_date=date(2025, 7, 10),
            block_type="VACATION", all_day=True, enabled=True
        ),
        DateBlock(
            title="Inativo", start_date=date(2025, 9, 1), end_date=date(2025, 9, 5),
            block_type="DAY_OFF", all_day=True, enabled=False
        ),
        DateUnblock(date=date(2025, 12, 25), reason="Plantão", enabled=True),
    ])
    db.commit()

    def check(day):
        return client.get(f"/api/v1/calendar/status?date={day}").json()

    custom = check("2025-08-15")
    assert custom["reason"] == "Feriado Personalizado"
    assert custom["holiday"]["type"] == "CUSTOM"
    assert custom["holiday"]["recurring"] is False

    assert check("2025-08-16")["blocked"] is False
    assert check("2025-12-26")["reason"] == "Ponte de Feriado"
    assert check("2025-07-10")["reason"] == "Período Bloqueado"
    assert check("2025-09-02")["blocked"] is False

    # Unblock wins over the national holiday
    christmas = check("2025-12-25")
    assert christmas["blocked"] is False
    assert christmas["reason"] is None


def test_disabled_unblock_does_not_override(client, db):
    """Test that a disabled unblock is ignored"""
    db.add(DateUnblock(date=date(2025, 12, 25), reason="Plantão", enabled=False))
    db.commit()

    assert client.get("/api/v1/calendar/status?date=2025-12-25").json()["blocked"] is True


def test_blocked_days_of_a_week(client, db):
    """Test the blocked days of Christmas week"""
    db.add(HolidayBridge(name="Ponte Natal", start_date=date(2025, 12, 26), end_date=date(2025, 12, 26), enabled=True))
    db.commit()

    response = client.get("/api/v1/calendar/blocked-days?from_date=2025-12-22&to_date=2025-12-28")

    assert response.status_code == status.HTTP_200_OK
    data = response.json()
    assert [(d["date"], d["reason"]) for d in data] == [
        ("2025-12-25", "Feriado Nacional"),
        ("2025-12-26", "Ponte de Feriado"),
    ]
    assert data[0]["holiday"]["name"] == "Natal"
    assert data[1]["holiday"] is None


def test_blocked_days_invalid_ranges(client):
    """Test inverted, oversized and malformed ranges"""
    response = client.get("/api/v1/calendar/blocked-days?from_date=2025-12-28&to_date=2025-12-22")
    assert response.status_code == status.HTTP_400_BAD_REQUEST

    response = client.get("/api/v1/calendar/blocked-days?from_date=2025-01-01&to_date=2026-01-02")
    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert "366" in response.json()["detail"]

    response = client.get("/api/v1/calendar/blocked-days?from_date=2025-01-01&to_date=tomorrow")
    assert response.status_code == status.HTTP_400_BAD_REQUEST


def test_blocked_days_at_end_of_calendar(client):
    """Test a range ending on the last representable date"""
    response = client.get("/api/v1/calendar/blocked-days?from_date=9999-12-25&to_date=9999-12-31")

    assert response.status_code == status.HTTP_200_OK
    assert [d["date"] for d in response.json()] == ["9999-12-25"]


def test_blocked_days_full_year_allowed(client):
    """Test that a whole year fits in one request"""
    response = client.get("/api/v1/calendar/blocked-days?from_date=2025-01-01&to_date=2025-12-31")

    assert response.status_code == status.HTTP_200_OK
    assert len(response.json()) == 13


def test_upcoming_holidays_default_limit(client):
    """Test that ten holidays are returned without a limit"""
    response = client.get("/api/v1/calendar/upcoming-holidays?start_date=2025-01-01")

    assert response.status_code == status.HTTP_200_OK
    data = response.json()
    assert len(data) == 10
    assert data[0]["date"] == "2025-01-01"
    assert data[-1] == {
        "name": "Nossa Senhora Aparecida",
        "date": "2025-10-12",
        "type": "NATIONAL",
        "recurring": True
    }


def test_upcoming_holidays_with_limit_and_custom(client, db):
    """Test limit and the merge of enabled custom holidays"""
    db.add(CustomHoliday(date=date(2025, 12, 24), name="Véspera de Natal", enabled=True))
    db.commit()

    response = client.get("/api/v1/calendar/upcoming-holidays?start_date=2025-12-01&limit=3")

    assert [h["name"] for h in response.json()] == ["Véspera de Natal", "Natal", "Confraternização Universal"]


def test_upcoming_holidays_invalid_limit(client):
    """Test that a zero limit fails validation"""
    response = client.get("/api/v1/calendar/upcoming-holidays?start_date=2025-01-01&limit=0")

    assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY


def test_holidays_of_year(client, db):
    """Test the yearly listing follows stored settings"""
    db.add_all([
        AgendaSetting(national_holidays=True, state_holidays=True, city_holidays=False),
        CustomHoliday(date=date(2025, 3, 10), name="Recesso", enabled=True),
        CustomHoliday(date=date(2025, 3, 11), name="Desativado", enabled=False),
    ])
    db.commit()

    response = client.get("/api/v1/calendar/holidays?year=2025")

    assert response.status_code == status.HTTP_200_OK
    data = response.json()
    names = [h["name"] for h in data]
    assert len(data) == 13 + 2 + 1
    assert "Revolução Constitucionalista" in names
    assert "Aniversário de São Paulo" not in names
    assert "Desativado" not in names
    assert [h["date"] for h in data] == sorted(h["date"] for h in data)
