"""
Shared fixtures.

The environment is configured before anything from ``carlog`` is imported:
the settings object is built at import time and refuses to start without
token secrets.
"""

import os

os.environ["JWT_ACCESS_SECRET"] = "test-access-secret"
os.environ["JWT_REFRESH_SECRET"] = "test-refresh-secret"
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["AUTO_CREATE_TABLES"] = "false"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["LOG_LEVEL"] = "WARNING"

import pytest
from fastapi.testclient import TestClient

import carlog.models  # noqa: F401
from carlog.db.session import Base, SessionLocal, engine
from carlog.main import app

PASSWORD = "s3cret-pass"


@pytest.fixture(autouse=True)
def database():
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client():
    with TestClient(app) as test_client:
        yield test_client


def auth_headers(access_token: str) -> dict:
    return {"Authorization": f"Bearer {access_token}"}


@pytest.fixture
def register(client):
    """Factory registering a user over HTTP; returns the response data plus headers."""

    def _register(email: str = "driver@carlog.io", password: str = PASSWORD) -> dict:
        res = client.post("/api/auth/register", json={"email": email, "password": password})
        assert res.status_code == 201, res.text
        data = res.json()["data"]
        data["headers"] = auth_headers(data["tokens"]["accessToken"])
        return data

    return _register


@pytest.fixture
def vehicle_factory(client):
    """Factory creating a vehicle for the given auth headers."""

    def _create(headers: dict, **overrides) -> dict:
        payload = {"name": "Daily", "make": "Skoda", "vehicleModel": "Octavia", "year": 2018, "mileage": 120000}
        payload.update(overrides)
        res = client.post("/api/vehicles", json=payload, headers=headers)
        assert res.status_code == 201, res.text
        return res.json()["data"]["vehicle"]

    return _create
