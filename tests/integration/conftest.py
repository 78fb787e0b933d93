import pytest_asyncio
from datetime import date
from decimal import Decimal
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

import creative_boost.domain  # noqa: F401  registers tables
from creative_boost.depends import get_session
from creative_boost.domain import (
    Client,
    Engagement,
    EngagementService,
    OutputCategory,
    OutputType,
)


@pytest_asyncio.fixture(scope="function")
async def engine():
    """In-memory SQLite database shared by every connection of one test"""
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        echo=False,
        future=True,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )

    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(engine):
    """Create a new database session for each test"""
    Session = sessionmaker(engine, class_=AsyncSession, expire_on_commit=False, autoflush=False)
    async with Session() as session:
        yield session


@pytest_asyncio.fixture
async def catalog(db_session):
    """Banner (2 credits) and video (5 credits) output types plus two CRM clients"""
    banner = OutputType(id="type_banner", name="Banner", category=OutputCategory.BANNER, base_credits=Decimal("2"))
    video = OutputType(id="type_video", name="Video", category=OutputCategory.VIDEO, base_credits=Decimal("5"))
    db_session.add_all(
        [
            banner,
            video,
            Client(id="client_1", name="Acme s.r.o.", brand_name="Acme"),
            Client(id="client_2", name="Globex a.s.", brand_name="Globex"),
        ]
    )
    await db_session.commit()
    return {"banner": banner, "video": video}


@pytest_asyncio.fixture
async def engagement(db_session):
    """Active engagement of client_1 since January 2024 with a Creative Boost billing line"""
    db_session.add(Engagement(id="eng_1", client_id="client_1", status="active", start_date=date(2024, 1, 1)))
    db_session.add(
        EngagementService(
            id="es_1",
            engagement_id="eng_1",
            service_id="srv-3",
            creative_boost_max_credits=Decimal("80"),
            creative_boost_price_per_credit=Decimal("1200"),
        )
    )
    await db_session.commit()


@pytest_asyncio.fixture
async def client(db_session):
    """Create test client with database session override"""
    from creative_boost.api.app import create_app
    from config import ApplicationConfig

    app = create_app(ApplicationConfig)

    async def override_get_session():
        yield db_session

    app.dependency_overrides[get_session] = override_get_session

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac


@pytest_asyncio.fixture
async def strict_client(db_session):
    """Test client with STRICT_CLIENT_MONTH_UPDATES enabled"""
    from creative_boost.api.app import create_app
    from config import ApplicationConfig

    class StrictConfig(ApplicationConfig):
        STRICT_CLIENT_MONTH_UPDATES = True

    app = create_app(StrictConfig)

    async def override_get_session():
        yield db_session

    app.dependency_overrides[get_session] = override_get_session

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
