"""
Create (or approve) an admin account. Run from project root:
  python -m offbase_admin.scripts.create_admin EMAIL PASSWORD [--super]
Example:
  python -m offbase_admin.scripts.create_admin ops@example.com your-secure-password --super

An existing admin with that email is approved instead (its password is left unchanged).
"""
import argparse
import logging
import sys

from offbase_admin.core.database import standalone_session
from offbase_admin.core.security import hash_password
from offbase_admin.models import Admin
from offbase_admin.services.accounts import approve_admin, get_admin_by_email

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%SZ",
)
logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Create an approved Off-Base admin.")
    parser.add_argument("email", help="Admin email (exact match is used at login)")
    parser.add_argument("password", help="Password (1-128 chars)")
    parser.add_argument(
        "--super",
        dest="is_super_admin",
        action="store_true",
        help="Grant elevated privileges",
    )
    args = parser.parse_args(argv)

    email = args.email.strip()
    if not email or len(email) > 255:
        print("Invalid email length.", file=sys.stderr)
        return 1
    if not args.password or len(args.password) > 128:
        print("Password must be 1-128 characters.", file=sys.stderr)
        return 1

    try:
        with standalone_session() as db:
            admin = get_admin_by_email(db, email)
            if admin is not None:
                approve_admin(db, admin, is_super_admin=args.is_super_admin or None)
                print(f"Admin '{email}' already existed; status set to APPROVED.")
                return 0
            admin = Admin(
                email=email,
                password_hash=hash_password(args.password),
                status="PENDING",
                is_super_admin=args.is_super_admin,
            )
            db.add(admin)
            db.flush()
            approve_admin(db, admin)
            print(f"Created approved admin '{email}' (id {admin.id}).")
            return 0
    except Exception as e:
        logger.exception("Creating admin failed: %s", e)
        return 1


if __name__ == "__main__":
    sys.exit(main())
