from typing import Generator

from sqlalchemy.orm import Session

from app.core.database import SessionLocal
from app.core.storage import Storage, storage_from_settings


def get_db() -> Generator[Session, None, None]:
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_storage() -> Storage:
    return storage_from_settings()
