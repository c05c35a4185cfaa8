from __future__ import annotations

import argparse
import getpass
import logging
import sys

from workforce.core.logging import configure_logging
from workforce.database import session_scope
from workforce.services import account_service
from workforce.services.auth_service import hash_password

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="workforce")
    sub = parser.add_subparsers(dest="command", required=True)

    admin = sub.add_parser("create-admin", help="Create an admin account, or promote an existing one")
    admin.add_argument("--email", required=True)
    admin.add_argument("--password", default="")
    admin.add_argument("--first-name", default="Admin")
    admin.add_argument("--last-name", default="User")

    hp = sub.add_parser("hash-password", help="Print a password hash")
    hp.add_argument("--password", default="")

    return parser


def _read_password(value: str) -> str:
    return value or getpass.getpass("Password: ")


def create_admin(email: str, password: str, first_name: str, last_name: str) -> str:
    with session_scope() as db:
        profile = account_service.get_profile_by_email(db, email)
        if profile is None:
            profile = account_service.register(
                email=email,
                password=password,
                first_name=first_name,
                last_name=last_name,
                role="admin",
                db=db,
            )
        else:
            profile.role = "admin"
        db.flush()
        profile_id = profile.id

    logger.info("Admin account ready", extra={"profile_id": profile_id})
    return profile_id


def main(argv: list[str] | None = None) -> int:
    configure_logging()
    args = _build_parser().parse_args(argv)

    if args.command == "create-admin":
        profile_id = create_admin(
            email=args.email,
            password=_read_password(args.password),
            first_name=args.first_name,
            last_name=args.last_name,
        )
        print(profile_id)
        return 0

    if args.command == "hash-password":
        print(hash_password(_read_password(args.password)))
        return 0

    return 2


if __name__ == "__main__":
    sys.exit(main())
