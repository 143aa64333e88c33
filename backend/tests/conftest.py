import os
from datetime import date

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["SECRET_KEY"] = "test-secret"
os.environ["LOG_LEVEL"] = "WARNING"

import pytest
from fastapi.testclient import TestClient

from sitepulse.database.base import Base
from sitepulse.database.session import SessionLocal, engine
from sitepulse.main import app


@pytest.fixture(autouse=True)
def _tables():
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
    return TestClient(app)


@pytest.fixture
def register(client):
    def _register(username, role="Engineer", **extra):
        payload = {
            "username": username,
            "email": f"{username}@company.com",
            "password": "s3cret-pass",
            "dob": "1990-05-17",
            "joining_date": extra.pop("joining_date", "2023-01-02"),
            "role": role,
        }
        payload.update(extra)
        response = client.post("/api/auth/register", json=payload)
        assert response.status_code == 201, response.json()
        return response.json()

    return _register


@pytest.fixture
def headers():
    def _headers(account):
        return {"Authorization": f"Bearer {account['token']}"}

    return _headers


@pytest.fixture
def today():
    return date.today()
