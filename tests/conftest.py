# tests/conftest.py
import os

# Must be set before storefront.core.config is imported
os.environ.setdefault("DATABASE_URL", "sqlite:///:memory:")
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("SEED_ON_STARTUP", "false")
os.environ.setdefault("SECRET_KEY", "test-secret-key")

from decimal import Decimal

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from storefront.core.limiter import limiter
from storefront.crud import product as crud_product
from storefront.crud import user as crud_user
from storefront.db.session import Base, build_engine
from storefront.dependencies import get_db
from storefront.main import app
# Import every model so that create_all builds all tables
from storefront.models.user import User
from storefront.models.product import Product
from storefront.models.cart import CartItem, WishlistItem

# In-memory SQLite shared by every session of a test: fast and isolated
engine = build_engine("sqlite:///:memory:", poolclass=StaticPool)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

TEST_PASSWORD = "s3cret-pass"


@pytest.fixture(scope="function")
def db_session() -> Session:
    """
    Fixture with a clean database for every test.
    """
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def override_get_db(db_session):
    """Requests use the same session as the test so crud helpers see the same data."""
    def _get_db():
        yield db_session

    app.dependency_overrides[get_db] = _get_db
    yield
    app.dependency_overrides.pop(get_db, None)


@pytest.fixture(autouse=True)
def disable_rate_limit():
    limiter.enabled = False
    limiter.reset()
    yield
    limiter.enabled = True
    limiter.reset()


@pytest.fixture
async def client(override_get_db) -> AsyncClient:
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://testserver") as ac:
        yield ac


@pytest.fixture
def test_user(db_session) -> User:
    return crud_user.create_user(db_session, name="Ana Souza", email="ana@example.com", password=TEST_PASSWORD)


@pytest.fixture
def other_user(db_session) -> User:
    return crud_user.create_user(db_session, name="Bruno Lima", email="bruno@example.com", password=TEST_PASSWORD)


@pytest.fixture
def products(db_session) -> list[Product]:
    return [
        crud_product.create_product(
            db_session, name="Basic White Shirt", description="White cotton shirt.",
            price=Decimal("69.90"), image_url="/products/white.jpg", category="basic", stock=10, featured=True,
        ),
        crud_product.create_product(
            db_session, name="Black Polo Shirt", description="Black polo.",
            price=Decimal("89.90"), image_url="/products/polo.jpg", category="polo", stock=3, featured=True,
        ),
        crud_product.create_product(
            db_session, name="Denim Shirt", description="Light denim.",
            price=Decimal("119.90"), image_url="/products/denim.jpg", category="casual", stock=5, featured=False,
        ),
    ]


@pytest.fixture
async def auth_client(client, test_user) -> AsyncClient:
    """Client logged in as `test_user` through the real login endpoint."""
    response = await client.post("/api/auth/login", json={"email": test_user.email, "password": TEST_PASSWORD})
    assert response.status_code == 200
    return client


@pytest.fixture
def test_password() -> str:
    return TEST_PASSWORD
