"""Pytest configuration and fixtures."""

import os

# Must be set before rentdesk.config is imported
os.environ["DATABASE_URL"] = "sqlite://"
os.environ.setdefault("SECRET_KEY", "test-secret")

from datetime import datetime, timezone

import pytest
from fastapi.testclient import TestClient

from rentdesk.database.init import Base, SessionLocal, engine
from rentdesk.database.models import User
from rentdesk.enums.item_type import ItemType
from rentdesk.main import app
from rentdesk.schemas.rental_schema import RentalWithRelations
from rentdesk.schemas.tenant_schema import TenantContext


@pytest.fixture(autouse=True)
def reset_database():
    """Start every test from empty tables."""
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield
    SessionLocal.remove()


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


def _make_user(db, email):
    user = User(name="Owner", email=email, hashed_password="not-used")
    db.add(user)
    db.commit()
    db.refresh(user)
    return TenantContext(user_id=user.id)


@pytest.fixture
def tenant(db):
    return _make_user(db, "owner@rentdesk.io")


@pytest.fixture
def other_tenant(db):
    return _make_user(db, "other@rentdesk.io")


@pytest.fixture
def client():
    """Create a test client."""
    return TestClient(app)


def signup(client, email="owner@rentdesk.io", password="secret123"):
    response = client.post(
        "/auth/signup",
        json={"name": "Owner", "email": email, "password": password},
    )
    assert response.status_code == 201, response.text
    return {"Authorization": f"Bearer {response.json()['data']['access_token']}"}


@pytest.fixture
def auth_client(client):
    """A test client signed in as a fresh account."""
    client.headers.update(signup(client))
    return client


@pytest.fixture
def make_rental():
    """Build in-memory rentals joined with their customer."""
    counter = {"id": 0}
    customer_ids = {}

    def _make(
        amount=100.0,
        returned=False,
        created_at="2024-01-05T12:00:00+00:00",
        customer="Ana Silva",
        customer_id=None,
        start_date=None,
        chairs=10,
    ):
        counter["id"] += 1
        if customer_id is None:
            customer_id = customer_ids.setdefault(customer, len(customer_ids) + 1)
        if isinstance(created_at, str):
            created_at = datetime.fromisoformat(created_at)
        return RentalWithRelations(
            id=counter["id"],
            customer_id=customer_id,
            chair_quantity=chairs,
            table_quantity=0,
            tablecloth_quantity=0,
            quantity=chairs,
            item_type=ItemType.CHAIR,
            amount=amount,
            start_date=start_date,
            returned=returned,
            created_at=created_at,
            customer={"id": customer_id, "name": customer},
        )

    return _make


def utc(*args):
    return datetime(*args, tzinfo=timezone.utc)
