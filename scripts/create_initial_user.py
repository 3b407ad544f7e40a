"""Bootstrap the first account of a fresh deployment.

Usage::

    python scripts/create_initial_user.py --email admin@uni.edu --name "Ops"
"""

from __future__ import annotations

import argparse
from getpass import getpass
from pathlib import Path
import sys

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from competition_hub.application.use_cases.users import create_user  # noqa: E402
from competition_hub.domain.errors import DomainError, StoreError  # noqa: E402
from competition_hub.infrastructure.database import (  # noqa: E402
    SessionLocal,
    initialize_database,
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Create a Competition Hub account.")
    parser.add_argument("--email", required=True)
    parser.add_argument("--name", default="Administrator")
    parser.add_argument("--institution", default=None)
    parser.add_argument("--password", help="prompted for when omitted")
    parser.add_argument(
        "--participant",
        action="store_true",
        help="create a regular participant instead of an administrator",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    password = args.password or getpass("Password: ")

    initialize_database()
    with SessionLocal() as session:
        try:
            user = create_user(
                session,
                name=args.name,
                email=args.email,
                password=password,
                institution=args.institution,
                is_admin=not args.participant,
            )
        except (DomainError, StoreError) as exc:
            print(f"error: {exc}", file=sys.stderr)
            return 1

    role = "administrator" if user.is_admin else "participant"
    print(f"Created {role} #{user.id} <{user.email}>")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
