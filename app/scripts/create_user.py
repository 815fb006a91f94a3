"""
Create a user account (there is no registration endpoint). Run from project root:
  python -m app.scripts.create_user EMAIL NAME PASSWORD [role_name]
Example:
  python -m app.scripts.create_user ivan@admin.local "Ivan Ivanov" your-secure-password owner
"""
import argparse
import sys

from app.core.database import SessionLocal
from app.core.security import EMAIL_MAX_LEN, PASSWORD_MAX_LEN, PASSWORD_MIN_LEN, hash_password
from app.models import Role, User


def main() -> int:
    parser = argparse.ArgumentParser(description="Create a Tool Directory user.")
    parser.add_argument("email", help=f"Email (1-{EMAIL_MAX_LEN} chars, unique)")
    parser.add_argument("name", help="Display name")
    parser.add_argument("password", help=f"Password ({PASSWORD_MIN_LEN}-{PASSWORD_MAX_LEN} chars)")
    parser.add_argument("role", nargs="?", default=None, help="Role name, e.g. backend")
    args = parser.parse_args()

    email = args.email.strip()
    name = args.name.strip()
    if not email or len(email) > EMAIL_MAX_LEN or "@" not in email:
        print("Invalid email.", file=sys.stderr)
        return 1
    if not name:
        print("Name must not be empty.", file=sys.stderr)
        return 1
    if not PASSWORD_MIN_LEN <= len(args.password) <= PASSWORD_MAX_LEN:
        print(
            f"Password must be {PASSWORD_MIN_LEN}-{PASSWORD_MAX_LEN} characters.",
            file=sys.stderr,
        )
        return 1

    db = SessionLocal()
    try:
        if db.query(User).filter(User.email == email).first():
            print(f"User '{email}' already exists.", file=sys.stderr)
            return 1
        role = None
        if args.role:
            role = db.query(Role).filter(Role.name == args.role).first()
            if role is None:
                print(f"Unknown role '{args.role}'. Run app.scripts.seed first?", file=sys.stderr)
                return 1
        user = User(
            email=email,
            name=name,
            password_hash=hash_password(args.password),
            role_id=role.id if role else None,
        )
        db.add(user)
        db.commit()
        print(f"Created user '{email}'" + (f" with role '{role.name}'." if role else "."))
        return 0
    finally:
        db.close()


if __name__ == "__main__":
    sys.exit(main())
