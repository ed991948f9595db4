"""
Create a user (e.g. the first admin). Run from project root:
  python -m portfolio.scripts.create_user USERNAME PASSWORD EMAIL [--admin]
Example:
  python -m portfolio.scripts.create_user admin your-secure-password admin@example.com --admin
"""
import argparse
import sys

from portfolio.core import errors
from portfolio.core.database import SessionLocal
from portfolio.core.security import hash_password
from portfolio.services.storage import UserStorage


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Create a portfolio user (no registration UI).")
    parser.add_argument("username", help="Username (1-255 chars)")
    parser.add_argument("password", help="Password (1-128 chars)")
    parser.add_argument("email", help="Email address (unique)")
    parser.add_argument(
        "--admin",
        action="store_true",
        help="Grant admin rights (only admins can log in)",
    )
    args = parser.parse_args(argv)

    username = args.username.strip()
    if not username or len(username) > 255:
        print("Invalid username length.", file=sys.stderr)
        return 1
    if not args.password or len(args.password) > 128:
        print("Password must be 1-128 characters.", file=sys.stderr)
        return 1
    email = args.email.strip()
    if "@" not in email:
        print("Invalid email address.", file=sys.stderr)
        return 1

    db = SessionLocal()
    try:
        storage = UserStorage(db)
        if storage.get_by_username(username) is not None:
            print(f"User '{username}' already exists.", file=sys.stderr)
            return 1
        try:
            user = storage.create(
                username=username,
                password_hash=hash_password(args.password),
                email=email,
                is_admin=args.admin,
            )
        except errors.ValidationError as e:
            print(e.message, file=sys.stderr)
            return 1
        role = "admin" if user.is_admin else "user"
        print(f"Created user '{user.username}' ({role}) with id {user.id}.")
        return 0
    finally:
        db.close()


if __name__ == "__main__":
    sys.exit(main())
