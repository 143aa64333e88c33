from fastapi.testclient import TestClient

from sitepulse.database.session import get_db
from sitepulse.main import app


def test_unexpected_errors_are_rendered_as_json(register, headers):
    alice = register("alice")

    def broken_db():
        raise RuntimeError("connection pool exhausted")
        yield

    app.dependency_overrides[get_db] = broken_db
    try:
        response = TestClient(app, raise_server_exceptions=False).get("/api/leave/balance", headers=headers(alice))
    finally:
        app.dependency_overrides.clear()

    assert response.status_code == 500
    assert response.json() == {"message": "Internal server error"}


def test_unknown_routes_keep_message_shape(client):
    response = client.get("/api/does-not-exist")
    assert response.status_code == 404
    assert response.json() == {"message": "Not Found"}
