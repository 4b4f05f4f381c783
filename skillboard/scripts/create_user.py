"""
Create a user (e.g. the first admin). Run from project root:
  python -m skillboard.scripts.create_user NAME EMAIL PASSWORD [role]
Example:
  python -m skillboard.scripts.create_user "Ada Admin" admin@example.com your-secure-password admin
"""
import argparse
import logging
import sys

from skillboard.core.config import Settings, get_settings
from skillboard.core.database import create_db_engine, create_session_factory
from skillboard.core.exceptions import ConflictError
from skillboard.core.security import hash_password
from skillboard.models.user import ROLES
from skillboard.services.user_store import UserStore
from skillboard.services.validators import validate_registration


def main(argv: list[str] | None = None, settings: Settings | None = None) -> int:
    parser = argparse.ArgumentParser(description="Create a Skillboard user from the command line.")
    parser.add_argument("name", help="Display name (1-100 chars)")
    parser.add_argument("email", help="Email address (login identity)")
    parser.add_argument("password", help="Password (at least 6 chars)")
    parser.add_argument("role", nargs="?", default="user", choices=list(ROLES))
    args = parser.parse_args(argv)

    payload = {"name": args.name, "email": args.email, "password": args.password, "role": args.role}
    result = validate_registration(payload)
    if not result.is_valid:
        for field_name, message in result.errors.items():
            print(f"{field_name}: {message}", file=sys.stderr)
        return 1

    settings = settings or get_settings()
    engine = create_db_engine(settings)
    db = create_session_factory(engine)()
    try:
        store = UserStore(db)
        if store.get_by_email(args.email) is not None:
            print(f"User '{args.email}' already exists.", file=sys.stderr)
            return 1
        user = store.create(
            name=args.name.strip(),
            email=args.email,
            password_hash=hash_password(args.password, rounds=settings.BCRYPT_ROUNDS),
            role=args.role,
        )
        print(f"Created user '{user.email}' with role '{user.role}'.")
        return 0
    except ConflictError as e:
        print(f"{e.message}.", file=sys.stderr)
        return 1
    finally:
        db.close()
        engine.dispose()


if __name__ == "__main__":
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%SZ",
    )
    sys.exit(main())
