"""Aggregate counts for the admin dashboard."""

from sqlalchemy import func
from sqlalchemy.orm import Session

from offbase_admin.models import Admin, Property, User
from offbase_admin.schemas.dashboard import DashboardResponse


def _counts_by(db: Session, column) -> dict[str, int]:
    rows = db.query(column, func.count()).group_by(column).all()
    return {str(key): int(n) for key, n in rows}


def build_dashboard(db: Session) -> DashboardResponse:
    """Users per role, listings per status and admins awaiting approval."""
    pending_admins = db.query(Admin).filter(Admin.status == "PENDING").count()
    return DashboardResponse(
        users_by_role=_counts_by(db, User.role),
        properties_by_status=_counts_by(db, Property.status),
        pending_admins=pending_admins,
    )
