"""
Database Seed Data Module

Creates the bootstrap ADMIN account from ADMIN_* settings.
Run with: python -m me_portal.db.seed_data
"""
import asyncio
from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from me_portal.core.config import settings
from me_portal.core.database import AsyncSessionLocal, init_db
from me_portal.core.logging_config import logger
from me_portal.core.security import get_password_hash
from me_portal.models.staff import Staff, StaffRole
from me_portal.schemas.auth import StaffCreate


async def create_staff(
    session: AsyncSession,
    name: str,
    email: str,
    password: str,
    role: StaffRole = StaffRole.STAFF,
) -> Staff:
    """Validate and insert one staff account with a bcrypt-hashed password"""
    data = StaffCreate(name=name, email=email, password=password, role=role)
    staff = Staff(
        name=data.name,
        email=data.email,
        password=get_password_hash(data.password),
        role=data.role,
    )
    session.add(staff)
    await session.commit()
    await session.refresh(staff)
    logger.info(f"Created staff {staff.email} ({staff.role.value})", extra={"event_type": "seed"})
    return staff


async def seed_admin(session: AsyncSession) -> Optional[Staff]:
    """Create the configured admin unless an account with that email exists"""
    if not settings.ADMIN_EMAIL or not settings.ADMIN_PASSWORD:
        logger.warning("[Seed] ADMIN_EMAIL/ADMIN_PASSWORD not set - no admin created")
        return None

    result = await session.execute(select(Staff).where(Staff.email == settings.ADMIN_EMAIL))
    existing = result.scalar_one_or_none()
    if existing is not None:
        logger.info(f"[Seed] Admin {existing.email} already exists")
        return existing

    return await create_staff(
        session,
        name=settings.ADMIN_NAME,
        email=settings.ADMIN_EMAIL,
        password=settings.ADMIN_PASSWORD,
        role=StaffRole.ADMIN,
    )


async def main():
    await init_db()
    async with AsyncSessionLocal() as session:
        await seed_admin(session)


if __name__ == "__main__":
    asyncio.run(main())
