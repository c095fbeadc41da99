"""Point queries against the credential store (admins and users)."""

import logging
from datetime import UTC, datetime

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from offbase_admin.core.database import standalone_session
from offbase_admin.models import Admin, User

logger = logging.getLogger(__name__)


def get_admin_by_email(db: Session, email: str) -> Admin | None:
    """Exact, case-sensitive match on email."""
    return db.query(Admin).filter(Admin.email == email).first()


def get_admin_by_id(db: Session, admin_id: str) -> Admin | None:
    return db.query(Admin).filter(Admin.id == admin_id).first()


def admin_email_exists(db: Session, email: str) -> bool:
    return db.query(Admin.id).filter(Admin.email == email).first() is not None


def create_pending_admin(db: Session, email: str, password_hash: str) -> Admin:
    """
    Insert a PENDING admin and commit.

    Raises sqlalchemy.exc.IntegrityError when a concurrent signup already took
    the email; the session is rolled back before re-raising.
    """
    admin = Admin(email=email, password_hash=password_hash, status="PENDING")
    db.add(admin)
    try:
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        raise
    return admin


def approve_admin(db: Session, admin: Admin, is_super_admin: bool | None = None) -> Admin:
    """
    Mark an admin APPROVED and make sure a users row with role ADMIN shares its id.

    The gate resolves roles from the users table, so an approved admin without
    that row would be redirected to the login page.
    """
    admin.status = "APPROVED"
    admin.approved_at = datetime.now(UTC)
    if is_super_admin is not None:
        admin.is_super_admin = is_super_admin
    user = db.query(User).filter(User.id == admin.id).first()
    if user is None:
        db.add(User(id=admin.id, email=admin.email, role="ADMIN"))
    else:
        user.role = "ADMIN"
    db.commit()
    return admin


def get_user_role(db: Session, user_id: str) -> str | None:
    """Role of the user with this id, or None when there is no such user."""
    row = db.query(User.role).filter(User.id == user_id).first()
    return row[0] if row is not None else None


def lookup_user_role(user_id: str) -> str | None:
    """Role lookup with its own short-lived session, for use outside request dependencies."""
    with standalone_session() as db:
        return get_user_role(db, user_id)
