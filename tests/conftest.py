import os

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("SECRET_KEY", "test-secret-key")

from datetime import time

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from seed_data import seed_catalog
from src.database import Base, get_db
from src.main import app
from src.models import Operator, Trip

engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db():
    Base.metadata.create_all(bind=engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def catalog(db):
    """Reference operators and trips"""
    return seed_catalog(db)


@pytest.fixture
def client(db):
    def override_get_db():
        session = TestingSessionLocal()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def make_trip(db):
    """Insert a trip with sensible defaults; keyword arguments override them"""

    def _make_trip(**overrides):
        operator = db.query(Operator).filter(Operator.name == "Test Lines").first()
        if operator is None:
            operator = Operator(name="Test Lines", mode="bus")
            db.add(operator)
            db.flush()

        values = dict(
            operator_id=operator.id,
            origin="Montevideo",
            destination="Rocha",
            departure=time(10, 0),
            arrival=time(13, 0),
            duration_minutes=180,
            price=70000,
            mode="bus",
            features=["ac"],
            available_seats=40,
        )
        values.update(overrides)
        trip = Trip(**values)
        db.add(trip)
        db.commit()
        db.refresh(trip)
        return trip

    return _make_trip


def register_and_login(client, email, name="Traveller", password="s3cret-pass"):
    response = client.post(
        "/api/auth/register",
        json={"name": name, "email": email, "password": password},
    )
    assert response.status_code == 201, response.text
    response = client.post("/api/auth/login", json={"email": email, "password": password})
    assert response.status_code == 200, response.text
    body = response.json()
    return {"Authorization": f"Bearer {body['accessToken']}"}, body["user"]


@pytest.fixture
def auth(client):
    """Headers and user payload of a freshly registered user"""
    return register_and_login(client, "ana@viajes.com.uy", name="Ana")


@pytest.fixture
def other_auth(client):
    return register_and_login(client, "bruno@viajes.com.uy", name="Bruno")
