"""
Create a user account, e.g. the first admin (there is no admin self-registration).
Run from project root:
  python -m app.scripts.create_user USERNAME PASSWORD [--email EMAIL] [--role user|admin]
Example:
  python -m app.scripts.create_user admin 'your-secure-password' --email admin@example.com --role admin
"""
import argparse
import logging
import sys

from sqlalchemy import or_
from sqlalchemy.exc import SQLAlchemyError

from app.core.config import get_settings
from app.core.database import SessionLocal
from app.core.security import hash_password
from app.models.user import User

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%SZ",
)
logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Create an Expense Tracker user.")
    parser.add_argument("username", help="Username (1-255 chars)")
    parser.add_argument("password", help="Password")
    parser.add_argument("--email", default=None, help="Email address (required for email login)")
    parser.add_argument("--role", default="user", choices=["user", "admin"])
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    settings = get_settings()

    username = args.username.strip()
    email = args.email.strip().lower() if args.email else None
    if not username or len(username) > 255:
        logger.error("Invalid username length.")
        return 1
    if not (settings.PASSWORD_MIN_LENGTH <= len(args.password) <= settings.PASSWORD_MAX_LENGTH):
        logger.error(
            "Password must be %s-%s characters.",
            settings.PASSWORD_MIN_LENGTH,
            settings.PASSWORD_MAX_LENGTH,
        )
        return 1
    if settings.IDENTITY_FIELD == "email" and not email:
        logger.error("--email is required when IDENTITY_FIELD=email.")
        return 1

    db = SessionLocal()
    try:
        clauses = [User.username == username]
        if email:
            clauses.append(User.email == email)
        if db.query(User.id).filter(or_(*clauses)).first() is not None:
            logger.error("User '%s' or that email already exists.", username)
            return 1
        user = User(
            username=username,
            email=email,
            password_hash=hash_password(args.password),
            role=args.role,
        )
        db.add(user)
        db.commit()
        logger.info("Created user '%s' (id=%s) with role '%s'.", username, user.id, args.role)
        return 0
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Could not create user '%s'.", username)
        return 1
    finally:
        db.close()


if __name__ == "__main__":
    sys.exit(main())
