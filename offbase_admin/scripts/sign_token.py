"""
Print a signed admin session token, e.g. for calling the API with curl:
  python -m offbase_admin.scripts.sign_token ADMIN_ID EMAIL [--super]
  curl --cookie "admin-token=$(python -m offbase_admin.scripts.sign_token ...)" ...

Uses ADMIN_JWT_SECRET from the environment; fails when it is not set.
"""
import argparse
import sys

from offbase_admin.core.security import SessionSecretMissingError, get_token_codec


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Sign an admin session token.")
    parser.add_argument("admin_id", help="Admin id (uuid)")
    parser.add_argument("email", help="Admin email")
    parser.add_argument("--super", dest="is_super_admin", action="store_true")
    args = parser.parse_args(argv)

    try:
        token = get_token_codec().issue(args.admin_id, args.email, args.is_super_admin)
    except SessionSecretMissingError as e:
        print(e.message, file=sys.stderr)
        return 1
    print(token)
    return 0


if __name__ == "__main__":
    sys.exit(main())
