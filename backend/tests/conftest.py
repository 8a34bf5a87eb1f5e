"""
M&E Portal - Test Configuration and Fixtures
"""
import os
from datetime import datetime, timezone
from typing import AsyncGenerator
import pytest
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool
from faker import Faker

# Set testing environment
os.environ['ENVIRONMENT'] = 'testing'
os.environ['DATABASE_URL'] = 'sqlite+aiosqlite:///:memory:'
os.environ['SESSION_SECRET'] = 'test-session-secret-for-testing-only'
os.environ['BCRYPT_ROUNDS'] = '4'
os.environ['RATE_LIMIT_ENABLED'] = 'false'
os.environ['LOG_FILE'] = ''

from me_portal.main import app
from me_portal.core.config import settings
from me_portal.core.database import Base, get_db
from me_portal.core.security import create_session_token, get_password_hash
from me_portal.models import Project, ProgressStatus, Staff, StaffRole, StrategicObjective, Team

fake = Faker()

TEST_DATABASE_URL = 'sqlite+aiosqlite://'
TEST_PASSWORD = 'testpassword123'
ADMIN_PASSWORD = 'adminpassword123'


@pytest.fixture(scope='function')
async def db_session() -> AsyncGenerator[AsyncSession, None]:
    """Fresh in-memory database per test"""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={'check_same_thread': False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    session_factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with session_factory() as session:
        yield session

    await engine.dispose()


@pytest.fixture
async def client(db_session: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """Create test client with database override"""
    async def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url='http://test') as ac:
        yield ac

    app.dependency_overrides.clear()


async def _create_staff(db_session: AsyncSession, role: StaffRole, password: str) -> Staff:
    user = Staff(
        name=fake.name(),
        email=fake.unique.email(),
        password=get_password_hash(password),
        role=role,
    )
    db_session.add(user)
    await db_session.commit()
    await db_session.refresh(user)
    return user


@pytest.fixture
async def staff_user(db_session: AsyncSession) -> Staff:
    """A signed-in staff member without write privileges"""
    return await _create_staff(db_session, StaffRole.STAFF, TEST_PASSWORD)


@pytest.fixture
async def admin_user(db_session: AsyncSession) -> Staff:
    """Create an admin test user"""
    return await _create_staff(db_session, StaffRole.ADMIN, ADMIN_PASSWORD)


def sign_in(client: AsyncClient, user: Staff) -> AsyncClient:
    """Attach a valid session cookie for user to the client"""
    client.cookies.set(settings.SESSION_COOKIE_NAME, create_session_token(user.id))
    return client


@pytest.fixture
async def staff_client(client: AsyncClient, staff_user: Staff) -> AsyncClient:
    return sign_in(client, staff_user)


@pytest.fixture
async def admin_client(client: AsyncClient, admin_user: Staff) -> AsyncClient:
    return sign_in(client, admin_user)


@pytest.fixture
async def team(db_session: AsyncSession) -> Team:
    record = Team(name=fake.company()[:100])
    db_session.add(record)
    await db_session.commit()
    await db_session.refresh(record)
    return record


@pytest.fixture
async def strategic_objective(db_session: AsyncSession, team: Team) -> StrategicObjective:
    record = StrategicObjective(
        name='Improve food security',
        outcome='Households have reliable food access',
        kpi='Households reached',
        target_value=200,
        actual_value=50,
        status=ProgressStatus.ON_TRACK,
        team_id=team.id,
        last_updated=datetime(2024, 1, 15, tzinfo=timezone.utc),
    )
    db_session.add(record)
    await db_session.commit()
    await db_session.refresh(record)
    return record


@pytest.fixture
async def project(db_session: AsyncSession, team: Team, strategic_objective: StrategicObjective) -> Project:
    record = Project(
        name='Seed distribution',
        objective='Distribute drought-resistant seed',
        strategic_objective_id=strategic_objective.id,
        outcome='Farmers plant resilient crops',
        activity='Distribution days',
        kpi='Farmers supplied',
        target_value=500,
        actual_value=125,
        status=ProgressStatus.AT_RISK,
        responsible_team_id=team.id,
        timeline='Q1-Q2 2024',
        last_updated=datetime(2024, 3, 1, tzinfo=timezone.utc),
    )
    db_session.add(record)
    await db_session.commit()
    await db_session.refresh(record)
    return record
