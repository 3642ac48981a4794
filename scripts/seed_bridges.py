"""
Store the suggested holiday bridges for given year(s) as enabled bridges.
Bridges already stored for the same period are left unchanged. Run from the
project root with .env loaded.

Usage:
  python scripts/seed_bridges.py              # seeds the current year
  python scripts/seed_bridges.py 2026 2027   # seeds 2026 and 2027
"""
import sys
from datetime import date
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from app.db.session import SessionLocal
from app.services.agenda_service import create_bridge_from_suggestion, get_or_create_agenda_settings
from app.services.holiday_rules import suggest_bridges


def main():
    years = [date.today().year]
    if len(sys.argv) > 1:
        years = [int(y) for y in sys.argv[1:]]

    db = SessionLocal()
    try:
        get_or_create_agenda_settings(db)
        for year in sorted(years):
            for suggestion in suggest_bridges(year):
                bridge = create_bridge_from_suggestion(
                    db, suggestion.name, suggestion.start_date, suggestion.end_date
                )
                print(f"{year}: {bridge.name} ({bridge.start_date} - {bridge.end_date}) id={bridge.id}")
    finally:
        db.close()


if __name__ == "__main__":
    main()
