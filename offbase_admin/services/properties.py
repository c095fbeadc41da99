"""Property listing administration: paginated listing and status transitions."""

import math
from datetime import UTC, datetime

from sqlalchemy.orm import Session

from offbase_admin.models import Property

DEFAULT_PAGE_SIZE = 20
MAX_PAGE_SIZE = 100


def page_bounds(page: int, limit: int) -> tuple[int, int]:
    """Offset and limit for a 1-based page number."""
    page = max(page, 1)
    limit = min(max(limit, 1), MAX_PAGE_SIZE)
    return (page - 1) * limit, limit


def total_pages(count: int, limit: int) -> int:
    return math.ceil(count / limit) if limit > 0 else 0


def list_properties(
    db: Session,
    status: str | None = None,
    page: int = 1,
    limit: int = DEFAULT_PAGE_SIZE,
) -> tuple[list[Property], int]:
    """Return (listings on this page newest first, total matching count)."""
    query = db.query(Property)
    if status:
        query = query.filter(Property.status == status)
    count = query.count()
    offset, limit = page_bounds(page, limit)
    rows = (
        query.order_by(Property.created_at.desc())
        .offset(offset)
        .limit(limit)
        .all()
    )
    return rows, count


def get_property(db: Session, property_id: str) -> Property | None:
    return db.query(Property).filter(Property.id == property_id).first()


def approve_property(db: Session, prop: Property) -> Property:
    """APPROVED listings become active and record when they were approved."""
    now = datetime.now(UTC)
    prop.status = "APPROVED"
    prop.is_active = True
    prop.approval_date = now
    prop.updated_at = now
    db.commit()
    db.refresh(prop)
    return prop


def reject_property(db: Session, prop: Property) -> Property:
    prop.status = "REJECTED"
    prop.is_active = False
    prop.updated_at = datetime.now(UTC)
    db.commit()
    db.refresh(prop)
    return prop


def delete_property(db: Session, prop: Property) -> None:
    db.delete(prop)
    db.commit()
