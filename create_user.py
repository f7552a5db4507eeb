"""
Register a user straight against the configured database.

Run this from the backend root:

    (.venv) python create_user.py alice s3cret-pw

It goes through the same AuthService rules as POST /api/register, so the
length and uniqueness checks apply here too.
"""

import argparse
import sys

from app.core.config import settings
from app.core.exceptions import AuthError
from app.core.logging import configure_logging
from app.db.init_db import init_db
from app.db.session import SessionLocal, engine
from app.services.auth_service import AuthService
from app.services.credential_store import OrmCredentialStore, SqlCredentialStore


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[1])
    parser.add_argument("username")
    parser.add_argument("password")
    args = parser.parse_args(argv)

    configure_logging(settings.log_level)
    init_db()

    db = SessionLocal()
    try:
        if settings.credential_store == "sql":
            store = SqlCredentialStore(engine)
        else:
            store = OrmCredentialStore(db)

        try:
            user = AuthService(store).register(args.username, args.password)
        except AuthError as exc:
            print(f"[ERROR] {exc.message}", file=sys.stderr)
            return 1

        print(f"[INFO] Created user {user.username} (id={user.id})")
        return 0
    finally:
        db.close()


if __name__ == "__main__":
    sys.exit(main())
