import logging
import uuid
from typing import Any, Optional

from fastapi.encoders import jsonable_encoder
from sqlalchemy.orm import Session

from app.models.audit_log import AuditLog

logger = logging.getLogger(__name__)


def log_audit(
    db: Session,
    *,
    entity_type: str,
    action: str,
    entity_id: Optional[str] = None,
    old_data: Optional[Any] = None,
    new_data: Optional[Any] = None,
    performed_by: Optional[str] = None,
    performed_by_email: Optional[str] = None,
) -> AuditLog:
    """Add an audit row to the session. The caller commits."""
    entry = AuditLog(
        id=str(uuid.uuid4()),
        entity_type=entity_type,
        entity_id=entity_id or "",
        action=action,
        old_data=jsonable_encoder(old_data) if old_data is not None else None,
        new_data=jsonable_encoder(new_data) if new_data is not None else None,
        performed_by=performed_by or "",
        performed_by_email=performed_by_email or "",
    )
    db.add(entry)
    logger.info("Audit %s %s %s", entity_type, action, entity_id or "-")
    return entry
