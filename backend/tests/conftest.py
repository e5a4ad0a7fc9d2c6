"""Root conftest — shared test configuration, async DB and authenticated app clients.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db dependency overridden to use the test DB
    - Tokens are minted with the same settings the app verifies with
    - Foreign keys enforced (cascade / set null behave as in production)

Design Decisions:
    - SQLite in-memory: fast, no external dependency, sufficient for route tests
    - Seeding and assertions use their own short-lived sessions, never the
      request's session, so reads always see committed state
"""

import os

# Ensure tests never use real credentials or a real database
os.environ.setdefault("AUTH_SECRET_KEY", "test-secret-key")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("LOG_FORMAT", "text")

import datetime  # noqa: E402

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncSession, create_async_engine, async_sessionmaker,
)

from finboard.config import get_settings  # noqa: E402
from finboard.db.base import Base  # noqa: E402
from finboard.infrastructure.auth import create_access_token  # noqa: E402
from finboard.infrastructure.database import (  # noqa: E402
    enable_sqlite_foreign_keys, get_db,
)
from finboard.infrastructure.ids import new_id  # noqa: E402
from finboard.main import app  # noqa: E402
from finboard.models import Account, Category, Transaction  # noqa: E402

ALICE = "user_alice"
BOB = "user_bob"


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False,
    )
    enable_sqlite_foreign_keys(engine)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def app_with_test_db(test_session_factory):
    """The FastAPI app with get_db routed to the test database."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
async def client(app_with_test_db):
    """Unauthenticated FastAPI test client."""
    async with AsyncClient(
        transport=ASGITransport(app=app_with_test_db), base_url="http://test",
    ) as c:
        yield c


@pytest.fixture
def token_for():
    def _token_for(user_id: str, **kwargs) -> str:
        return create_access_token(user_id, get_settings(), **kwargs)
    return _token_for


@pytest.fixture
def auth(token_for):
    """auth(user_id) -> Authorization headers for that user."""
    def _auth(user_id: str = ALICE) -> dict:
        return {"Authorization": f"Bearer {token_for(user_id)}"}
    return _auth


# ─── Seeding ─────────────────────────────────────────────────────

@pytest.fixture
def seed(test_session_factory):
    """seed(row) inserts an ORM row in its own committed session."""
    async def _seed(row):
        async with test_session_factory() as session:
            session.add(row)
            await session.commit()
        return row
    return _seed


@pytest.fixture
def seed_account(seed):
    async def _seed_account(user_id: str = ALICE, name: str = "Checking") -> Account:
        return await seed(Account(id=new_id(), user_id=user_id, name=name))
    return _seed_account


@pytest.fixture
def seed_category(seed):
    async def _seed_category(user_id: str = ALICE, name: str = "Groceries") -> Category:
        return await seed(Category(id=new_id(), user_id=user_id, name=name))
    return _seed_category


@pytest.fixture
def seed_transaction(seed):
    async def _seed_transaction(
        account: Account,
        category: Category | None = None,
        amount: int = -2500,
        payee: str = "Corner Shop",
        date: datetime.date = datetime.date(2026, 3, 1),
    ) -> Transaction:
        return await seed(Transaction(
            id=new_id(),
            user_id=account.user_id,
            amount=amount,
            payee=payee,
            notes=None,
            date=date,
            account_id=account.id,
            category_id=category.id if category else None,
        ))
    return _seed_transaction


@pytest.fixture
def fetch_scalar(test_session_factory):
    """fetch_scalar(stmt) runs a read in a fresh session."""
    async def _fetch_scalar(stmt):
        async with test_session_factory() as session:
            result = await session.execute(stmt)
            return result.scalar_one_or_none()
    return _fetch_scalar
