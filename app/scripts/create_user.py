"""
Create a user directly (e.g. an extra superadmin). Run from project root:
  python -m app.scripts.create_user USERNAME PASSWORD [role] [--unverified]
Example:
  python -m app.scripts.create_user owner@example.com your-secure-password superadmin
"""
import argparse
import sys

from app.core.database import SessionLocal
from app.core.security import PASSWORD_MAX_LEN, PASSWORD_MIN_LEN, USERNAME_MAX_LEN, hash_password
from app.models import Role, User


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Create an Idea Graveyard user without email verification.")
    parser.add_argument("username", help="Login identity, usually an email address")
    parser.add_argument("password", help=f"Password ({PASSWORD_MIN_LEN}-{PASSWORD_MAX_LEN} chars)")
    parser.add_argument("role", nargs="?", default=Role.user.value, choices=[r.value for r in Role])
    parser.add_argument(
        "--unverified",
        action="store_true",
        help="Create the account with verified=false (login is refused until verified)",
    )
    args = parser.parse_args(argv)

    username = args.username.strip()
    if not username or len(username) > USERNAME_MAX_LEN:
        print("Invalid username length.", file=sys.stderr)
        return 1
    if len(args.password) < PASSWORD_MIN_LEN or len(args.password) > PASSWORD_MAX_LEN:
        print(f"Password must be {PASSWORD_MIN_LEN}-{PASSWORD_MAX_LEN} characters.", file=sys.stderr)
        return 1

    db = SessionLocal()
    try:
        existing = db.query(User).filter(User.username == username).first()
        if existing:
            print(f"User '{username}' already exists.", file=sys.stderr)
            return 1
        user = User(
            username=username,
            email=username if "@" in username else None,
            password_hash=hash_password(args.password),
            verified=not args.unverified,
            role=args.role,
        )
        db.add(user)
        db.commit()
        print(f"Created user '{username}' with role '{args.role}'.")
        return 0
    finally:
        db.close()


if __name__ == "__main__":
    sys.exit(main())
