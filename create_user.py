from pydantic import ValidationError

from app import create_app
from errors import ConflictError
from extensions import db
from models import Role
from modules.auth.schemas import RegisterInput
from modules.auth.services import AuthService


def create_user(app, email, password, name, role):
    """Create an account directly in the store; the only way to mint an ADMIN."""
    with app.app_context():
        try:
            data = RegisterInput(email=email, password=password, name=name)
        except ValidationError as exc:
            for err in exc.errors():
                print(f"⚠️  {'.'.join(map(str, err['loc']))}: {err['msg']}")
            return None

        try:
            user = AuthService(db.session).register(data, role=Role(role))
        except ConflictError:
            existing = AuthService(db.session).find_by_email(email)
            print(f"⚠️  User '{email}' already exists with role '{existing.role.value}'.")
            return None

        print(f"✅ Created user: {user.email} (role: {user.role.value}, id: {user.id})")
        return user.id


if __name__ == '__main__':
    import argparse

    parser = argparse.ArgumentParser(description='Create a new user.')
    parser.add_argument('email', help='Email address (login)')
    parser.add_argument('password', help='Password')
    parser.add_argument('name', help='Display name')
    parser.add_argument('--role', choices=[r.value for r in Role], default=Role.USER.value,
                        help='User role (default: USER)')

    args = parser.parse_args()
    create_user(create_app(), args.email, args.password, args.name, args.role)
