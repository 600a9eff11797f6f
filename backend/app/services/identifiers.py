"""Human-facing sequential IDs (GMMP1001, GMMC1001, ITEM1001)."""
import re
from typing import Optional

from sqlalchemy import func
from sqlalchemy.orm import Session
from sqlalchemy.orm.attributes import InstrumentedAttribute

from app.core.config import settings


def next_sequential_id(
    db: Session,
    column: InstrumentedAttribute,
    prefix: str,
    base: Optional[int] = None,
) -> str:
    """
    prefix + (base + row count + 1), bumped until unused.
    Rows can be deleted, so the count alone may land on an existing ID.
    """
    if base is None:
        base = settings.ID_SEQUENCE_BASE
    count = db.query(func.count(column)).scalar() or 0
    n = base + count + 1
    candidate = f"{prefix}{n}"
    while db.query(column).filter(column == candidate).first():
        n += 1
        candidate = f"{prefix}{n}"
    return candidate


def numeric_suffix(value: Optional[str], prefix: str) -> int:
    """GMMC1004 -> 1004 for prefix GMM; 0 when the value has no digits after the prefix."""
    if not value:
        return 0
    m = re.match(rf"^{re.escape(prefix)}\D*(\d+)$", value)
    return int(m.group(1)) if m else 0
