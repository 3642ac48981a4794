"""
Dependencies for FastAPI endpoints

Authentication is handled by the external identity provider in front of
this service, so the only shared dependency is the database session.
"""
from typing import Generator
from app.db.session import SessionLocal


def get_db() -> Generator:
    """Dependency for getting database session"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
