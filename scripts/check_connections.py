#!/usr/bin/env python3
"""
Connection Check Script

Run this to verify the database and the identity provider are reachable.
Usage: python scripts/check_connections.py
"""
import sys
sys.path.insert(0, '.')

from vahub.client.identity import SupabaseIdentityProvider
from vahub.core.config import get_settings
from vahub.db.database import Database


def main() -> int:
    settings = get_settings()
    ok = True
    print("=" * 50)
    print("VA HUB - CONNECTION CHECK")
    print("=" * 50)

    print("\n[1] Checking database...")
    database = Database(settings.database_url)
    print(f"    URL: {database.display_url}")
    if database.test_connection():
        print("    ✅ Database: CONNECTED")
    else:
        print("    ❌ Database: FAILED")
        ok = False
    database.dispose()

    print("\n[2] Checking identity provider...")
    if settings.identity_url and settings.identity_key:
        print(f"    URL: {settings.identity_url}")
        provider = SupabaseIdentityProvider(settings.identity_url, settings.identity_key)
        if provider.health():
            print("    ✅ Identity provider: REACHABLE")
        else:
            print("    ❌ Identity provider: FAILED")
            ok = False
    else:
        print("    ⚠️  Identity provider: VAHUB_IDENTITY_URL / VAHUB_IDENTITY_KEY not set (skipped)")

    print("\n" + "=" * 50)
    print("Connection check complete!")
    print("=" * 50)
    return 0 if ok else 1


if __name__ == "__main__":
    sys.exit(main())
