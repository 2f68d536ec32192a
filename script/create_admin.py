# create_admin.py
"""Create an administrator, or promote an existing user to one.

    python -m script.create_admin --email admin@example.com --name Admin --password secret123
"""
import argparse

from app.auth_util import get_password_hash
from app.database import get_ctx_db
from app.model.users import User


def create_admin(db, email: str, name: str, password: str) -> User:
    email = email.lower()
    user = db.query(User).filter(User.email == email).first()
    if user:
        user.is_admin = True
    else:
        user = User(
            name=name,
            email=email,
            hashed_password=get_password_hash(password),
            points=0,
            is_admin=True,
        )
        db.add(user)
    db.commit()
    db.refresh(user)
    return user


def main():
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("--email", required=True)
    parser.add_argument("--name", default="Admin")
    parser.add_argument("--password", required=True)
    args = parser.parse_args()

    with get_ctx_db() as db:
        user = create_admin(db, args.email, args.name, args.password)
    print(f"Admin ready: id={user.id} email={user.email}")


if __name__ == "__main__":
    main()
