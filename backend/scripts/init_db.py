#!/usr/bin/env python3
"""
Database Initialization Script for the M&E Portal

This script:
1. Tests database connectivity
2. Creates any missing tables
3. Seeds the bootstrap admin from ADMIN_* settings

Usage:
    python scripts/init_db.py              # Full init
    python scripts/init_db.py --check      # Only check connectivity
    python scripts/init_db.py --no-seed    # Tables only
"""

import argparse
import asyncio
import sys
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from sqlalchemy import text  # noqa: E402
from sqlalchemy.exc import SQLAlchemyError  # noqa: E402

from me_portal.core.config import settings  # noqa: E402
from me_portal.core.database import AsyncSessionLocal, close_db, get_engine, init_db  # noqa: E402
from me_portal.db.seed_data import seed_admin  # noqa: E402


def _display_url(url: str) -> str:
    return url.split("@")[1] if "@" in url else url


async def test_connection() -> bool:
    """Test database connectivity"""
    print(f"\n[InitDB] Connecting to: {_display_url(settings.DATABASE_URL)}")
    try:
        async with get_engine().connect() as conn:
            await conn.execute(text("SELECT 1"))
    except SQLAlchemyError as e:
        print(f"[InitDB] ERROR: Database connection failed: {e}")
        return False

    print("[InitDB] Database connection successful!")
    return True


async def create_tables() -> None:
    print("\n[InitDB] Creating/verifying database tables...")
    await init_db()
    print("[InitDB] Database tables created/verified!")


async def seed() -> None:
    print("\n[InitDB] Seeding admin account...")
    async with AsyncSessionLocal() as session:
        admin = await seed_admin(session)
    if admin is None:
        print("[InitDB] Skipped: set ADMIN_EMAIL and ADMIN_PASSWORD to create an admin")
    else:
        print(f"[InitDB] Admin account ready ({admin.email})")


async def run(args: argparse.Namespace) -> int:
    try:
        if not await test_connection():
            return 1
        if args.check:
            return 0

        await create_tables()
        if not args.no_seed:
            await seed()
        return 0
    finally:
        await close_db()


def main() -> int:
    parser = argparse.ArgumentParser(description="Initialize the M&E Portal database")
    parser.add_argument("--check", action="store_true", help="Only check connectivity")
    parser.add_argument("--no-seed", action="store_true", help="Create tables without seeding")
    args = parser.parse_args()
    return asyncio.run(run(args))


if __name__ == "__main__":
    sys.exit(main())
