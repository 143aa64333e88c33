from datetime import timedelta

import pytest

from sitepulse.core.security import decode_token

BASE = {
    "username": "alice",
    "email": "alice@company.com",
    "password": "s3cret-pass",
    "dob": "1990-05-17",
    "joining_date": "2023-01-02",
    "role": "Engineer",
}


def _payload(**overrides):
    data = dict(BASE)
    data.update(overrides)
    return {key: value for key, value in data.items() if value is not None}


def test_register_returns_token_and_identity(client):
    response = client.post("/api/auth/register", json=_payload(mobile="9876543210"))

    assert response.status_code == 201
    body = response.json()
    assert body["username"] == "alice"
    assert body["role"] == "Engineer"
    assert body["employeeId"].startswith("EMP")
    assert len(body["employeeId"]) == 9

    claims = decode_token(body["token"])
    assert claims["id"] == body["id"]
    assert claims["username"] == "alice"
    assert claims["role"] == "Engineer"
    assert claims["exp"] - claims["iat"] == 8 * 60 * 60


def test_register_keeps_supplied_employee_id(client):
    response = client.post("/api/auth/register", json=_payload(employeeId="VA-0042"))
    assert response.status_code == 201
    assert response.json()["employeeId"] == "VA-0042"


@pytest.mark.parametrize(
    "field, message",
    [
        ("username", "Username and password are required"),
        ("password", "Username and password are required"),
        ("email", "Email is required"),
        ("dob", "Date of birth is required"),
        ("joining_date", "Joining date is required"),
        ("role", "Role is required"),
    ],
)
def test_register_rejects_missing_fields(client, field, message):
    response = client.post("/api/auth/register", json=_payload(**{field: None}))
    assert response.status_code == 400
    assert response.json()["message"] == message


def test_register_rejects_malformed_email(client):
    response = client.post("/api/auth/register", json=_payload(email="not-an-email"))
    assert response.status_code == 400
    assert response.json()["message"] == "Invalid email format"


@pytest.mark.parametrize("offset", [0, 1, 400])
def test_register_rejects_dob_today_or_later(client, today, offset):
    dob = (today + timedelta(days=offset)).isoformat()
    response = client.post("/api/auth/register", json=_payload(dob=dob))
    assert response.status_code == 400
    assert "Date of birth" in response.json()["message"]


def test_register_rejects_unparseable_dates(client):
    assert client.post("/api/auth/register", json=_payload(dob="yesterday")).status_code == 400
    response = client.post("/api/auth/register", json=_payload(joining_date="31/31/2020"))
    assert response.status_code == 400
    assert response.json()["message"] == "Invalid joining date"


def test_register_accepts_joining_today_but_not_tomorrow(client, today):
    ok = client.post("/api/auth/register", json=_payload(joining_date=today.isoformat()))
    assert ok.status_code == 201

    tomorrow = (today + timedelta(days=1)).isoformat()
    response = client.post(
        "/api/auth/register",
        json=_payload(username="bob", email="bob@company.com", joining_date=tomorrow),
    )
    assert response.status_code == 400
    assert response.json()["message"] == "Joining date cannot be in the future"


def test_register_rejects_duplicates(client):
    assert client.post("/api/auth/register", json=_payload()).status_code == 201

    same_name = client.post("/api/auth/register", json=_payload(email="other@company.com"))
    assert same_name.status_code == 409
    assert same_name.json()["message"] == "Username already exists"

    same_email = client.post("/api/auth/register", json=_payload(username="alice2"))
    assert same_email.status_code == 409
    assert same_email.json()["message"] == "Email already exists"


def test_register_rejects_unknown_manager(client):
    response = client.post("/api/auth/register", json=_payload(managerId=999))
    assert response.status_code == 400
    assert response.json()["message"] == "Manager not found"


def test_login_returns_token(client, register):
    account = register("carol", role="Team Leader")

    response = client.post("/api/auth/login", json={"username": "carol", "password": "s3cret-pass"})

    assert response.status_code == 200
    body = response.json()
    assert body["id"] == account["id"]
    assert body["role"] == "Team Leader"
    assert body["employeeId"] == account["employeeId"]
    assert decode_token(body["token"])["username"] == "carol"


def test_login_does_not_reveal_which_part_was_wrong(client, register):
    register("dave")

    unknown = client.post("/api/auth/login", json={"username": "nobody", "password": "s3cret-pass"})
    wrong = client.post("/api/auth/login", json={"username": "dave", "password": "wrong"})

    assert unknown.status_code == wrong.status_code == 401
    assert unknown.json() == wrong.json() == {"message": "Invalid username or password"}


def test_login_requires_both_fields(client):
    response = client.post("/api/auth/login", json={"username": "dave"})
    assert response.status_code == 400
    assert response.json()["message"] == "Username and password are required"
