#!/usr/bin/env python3
"""
Seed Admin Script

Creates an admin identity (role=admin metadata) in the identity provider and
verifies it by signing in. An identity that already exists is not an error.

This touches the identity provider only; the local admin account is created
by the server at startup.

Usage: python scripts/seed_admin.py --email admin@example.com --password secret --name admin
"""
import argparse
import sys
sys.path.insert(0, '.')

from vahub.client.identity import IdentityError, SupabaseIdentityProvider
from vahub.core.config import get_settings

ALREADY_REGISTERED = ("already registered", "already been registered")


def seed_admin(provider: SupabaseIdentityProvider, email: str, password: str, name: str) -> bool:
    """Returns True when the admin can sign in."""
    print("Creating admin account...")
    try:
        data = provider.sign_up(email, password, {"full_name": name, "role": "admin"})
        print(f"Admin auth user created: {data.get('id') or (data.get('user') or {}).get('id')}")
    except IdentityError as e:
        if any(phrase in str(e) for phrase in ALREADY_REGISTERED):
            print("Admin user already exists in auth.")
        else:
            print(f"Error creating admin auth user: {e}")
            return False

    try:
        session = provider.sign_in_with_password(email, password)
    except IdentityError as e:
        print("Note: Could not sign in yet. The admin may need to verify their email first.")
        print(f"Sign in error: {e}")
        return False

    print(f"Admin user ID: {session['user']['id']}")
    provider.sign_out()
    return True


def main() -> int:
    settings = get_settings()
    parser = argparse.ArgumentParser(description="Create the admin identity")
    parser.add_argument("--email", default=settings.admin_email)
    parser.add_argument("--password", default=settings.admin_password)
    parser.add_argument("--name", default="System Admin")
    args = parser.parse_args()

    if not (settings.identity_url and settings.identity_key):
        print("VAHUB_IDENTITY_URL and VAHUB_IDENTITY_KEY must be set")
        return 1

    provider = SupabaseIdentityProvider(settings.identity_url, settings.identity_key)
    ready = seed_admin(provider, args.email, args.password, args.name)

    print("")
    print("Admin account ready!" if ready else "Admin account created; check your email to verify it.")
    print(f"Email: {args.email}")
    print(f"Username: {args.name}")
    print("Role: admin")
    return 0


if __name__ == "__main__":
    sys.exit(main())
