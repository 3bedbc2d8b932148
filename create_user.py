from errors import DuplicateKey
from models import create_user as store_user, find_user_by_email
from permissions import Role


def create_user(app, name, email, password, role):
    with app.app_context():
        # Email must be unique
        existing_user = find_user_by_email(email)
        if existing_user:
            print(f"⚠️  User '{email}' already exists with role '{existing_user.role.value}'.")
            return None

        try:
            user = store_user({"name": name, "email": email, "password": password, "role": role})
        except DuplicateKey:
            print(f"⚠️  User '{email}' already exists.")
            return None
        print(f"✅ Created user: {user.email} (id: {user.id}, role: {user.role.value})")
        return user.id


if __name__ == '__main__':
    import argparse

    from app import create_app

    parser = argparse.ArgumentParser(description='Create a new user.')
    parser.add_argument('name', help='Display name')
    parser.add_argument('email', help='Login email')
    parser.add_argument('password', help='Password')
    parser.add_argument('role', choices=[r.value for r in Role], help='User role')

    args = parser.parse_args()
    create_user(create_app(), args.name, args.email, args.password, args.role)
