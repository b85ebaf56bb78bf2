"""
Pytest configuration and fixtures for backend tests.
"""

import itertools
import os

# Settings are read at import time; point them at test values first
os.environ.setdefault("DATABASE_URL", "sqlite:///:memory:")
os.environ.setdefault("RATE_LIMIT_ENABLED", "false")
os.environ.setdefault("SEED_ON_STARTUP", "false")
os.environ.setdefault("MENU_TIMEZONE", "UTC")

import pytest
from datetime import datetime, timezone
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from lunch_api.main import app
from lunch_api.models import Base, Category, DayMenu, Item, Order, Organization, User
from lunch_shared.infrastructure.db import get_db
from lunch_shared.security.password import hash_password
from lunch_shared.utils.clock import local_date, utcnow


TEST_PASSWORD = "testpass123"
# Hash once; bcrypt is deliberately slow
TEST_PASSWORD_HASH = hash_password(TEST_PASSWORD)

_token_counter = itertools.count(1)


# SQLite in-memory database for testing
SQLALCHEMY_DATABASE_URL = "sqlite:///:memory:"

engine = create_engine(
    SQLALCHEMY_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(
    autocommit=False, autoflush=False, expire_on_commit=False, bind=engine
)


def utc(year: int, month: int, day: int, hour: int = 12, minute: int = 0) -> datetime:
    """Aware UTC datetime shorthand."""
    return datetime(year, month, day, hour, minute, tzinfo=timezone.utc)


def auth_headers_for(user: User) -> dict[str, str]:
    return {"Authorization": f"Bearer {user.auth_token}"}


@pytest.fixture(scope="function")
def db_session():
    """
    Create a fresh database session for each test.
    Uses SQLite in-memory for isolation.
    """
    Base.metadata.create_all(bind=engine)

    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def client(db_session):
    """
    Create a test client with database session override.
    """
    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


# =============================================================================
# Seed fixtures
# =============================================================================


@pytest.fixture
def seed_organization(db_session):
    organization = Organization(name="Acme")
    db_session.add(organization)
    db_session.commit()
    return organization


@pytest.fixture
def seed_other_organization(db_session):
    organization = Organization(name="Globex")
    db_session.add(organization)
    db_session.commit()
    return organization


@pytest.fixture
def make_user(db_session, seed_organization):
    """
    Factory inserting users directly, bypassing the bootstrap step.

    Usage:
        alice = make_user("alice")
        boss = make_user("boss", admin=True)
    """
    def _make_user(name: str, *, admin: bool = False, organization: Organization | None = None, **fields) -> User:
        user = User(
            name=name,
            email=fields.pop("email", f"{name}@acme.org"),
            password=TEST_PASSWORD_HASH,
            organization_id=(organization or seed_organization).id,
            admin=admin,
            auth_token=fields.pop("auth_token", f"token-{name}-{next(_token_counter)}"),
            **fields,
        )
        db_session.add(user)
        db_session.commit()
        return user

    return _make_user


@pytest.fixture
def admin_user(make_user):
    return make_user("admin", admin=True)


@pytest.fixture
def member_user(make_user):
    return make_user("alice")


@pytest.fixture
def admin_headers(admin_user):
    return auth_headers_for(admin_user)


@pytest.fixture
def member_headers(member_user):
    return auth_headers_for(member_user)


@pytest.fixture
def seed_catalog(db_session):
    """Two categories with two items each. Returns {name: Item}."""
    soup = Category(name="soup")
    main = Category(name="main")
    db_session.add_all([soup, main])
    db_session.flush()

    items = {
        "tomato soup": Item(name="tomato soup", category_id=soup.id),
        "broth": Item(name="broth", category_id=soup.id),
        "chicken": Item(name="chicken", category_id=main.id),
        "lasagna": Item(name="lasagna", category_id=main.id),
    }
    db_session.add_all(items.values())
    db_session.commit()
    return items


@pytest.fixture
def make_menu(db_session):
    """Factory for DayMenu snapshots."""
    def _make_menu(day_id: int, created_at: datetime, items: list[Item] | None = None) -> DayMenu:
        menu = DayMenu(day_id=day_id, created_at=created_at, items=list(items or []))
        db_session.add(menu)
        db_session.commit()
        return menu

    return _make_menu


@pytest.fixture
def make_order(db_session):
    """Factory for orders with an explicit creation time."""
    def _make_order(user: User, created_at: datetime, items: list[Item]) -> Order:
        order = Order(user_id=user.id, created_at=created_at, items=list(items))
        db_session.add(order)
        db_session.commit()
        return order

    return _make_order


@pytest.fixture
def todays_menu(make_menu, seed_catalog):
    """
    A menu in force every weekday, so orders can be placed whenever tests run.
    Lasagna stays off the menu.
    """
    offered = [item for name, item in seed_catalog.items() if name != "lasagna"]
    menus = [make_menu(day_id, utc(2020, 1, 1), offered) for day_id in range(7)]
    return menus[local_date(utcnow()).weekday()]
