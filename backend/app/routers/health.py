import logging

from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.deps import get_db

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("")
def health_check(db: Session = Depends(get_db)):
    """Liveness plus database reachability; never fails itself."""
    try:
        db.execute(text("SELECT 1"))
        database = "connected"
    except SQLAlchemyError as e:
        logger.warning("Health check could not reach the database: %s", e)
        database = "disconnected"
    return {"status": "ok", "database": database}
