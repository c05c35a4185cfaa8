import os
from datetime import datetime, timedelta, timezone

import jwt
from fastapi.testclient import TestClient

from workforce.database import SessionLocal
from workforce.main import app
from workforce.models.employee import Employee
from workforce.models.profile import Profile
from workforce.models.user import User
from workforce.services.auth_service import verify_token

client = TestClient(app)


def test_register_creates_profile_and_active_employee():
    r = client.post(
        "/api/auth/register",
        json={"email": "a@x.com", "password": "pw1234", "first_name": "Jan", "last_name": "Jansen"},
    )
    assert r.status_code == 200, r.text
    body = r.json()
    assert body["user"]["role"] == "employee"
    assert body["user"]["first_name"] == "Jan"

    db = SessionLocal()
    try:
        profile = db.query(Profile).filter(Profile.email == "a@x.com").one()
        assert profile.role == "employee"
        assert profile.employee_number.startswith("EMP")

        employee = db.query(Employee).filter(Employee.profile_id == profile.id).one()
        assert employee.status == "active"

        user = db.get(User, profile.user_id)
        assert user.username == "a@x.com"
        assert user.password_hash != "pw1234"
    finally:
        db.close()


def test_register_duplicate_email_is_rejected():
    payload = {"email": "dup@example.com", "password": "pw1234", "first_name": "A", "last_name": "B"}
    assert client.post("/api/auth/register", json=payload).status_code == 200

    r = client.post("/api/auth/register", json=payload)
    assert r.status_code == 400
    assert r.json() == {"message": "User already exists"}


def test_register_with_malformed_payload_is_a_validation_error():
    r = client.post("/api/auth/register", json={"email": "not-an-email", "password": "pw1234"})
    assert r.status_code == 400
    body = r.json()
    assert body["message"] == "Invalid request data"
    fields = {e["field"] for e in body["errors"]}
    assert {"email", "first_name", "last_name"} <= fields


def test_login_token_carries_stored_role(account_factory):
    for role in ("employee", "manager", "admin"):
        account = account_factory(role)
        r = client.post("/api/auth/login", json={"email": account.email, "password": account.password})
        assert r.status_code == 200, r.text

        claims = verify_token(r.json()["token"])
        assert claims["role"] == role
        assert claims["profile_id"] == account.profile_id
        assert claims["sub"] == str(account.user_id)

        lifetime = claims["exp"] - claims["iat"]
        assert lifetime == 24 * 3600


def test_login_with_wrong_password_is_401(employee):
    r = client.post("/api/auth/login", json={"email": employee.email, "password": "nope"})
    assert r.status_code == 401
    assert r.json() == {"message": "Invalid credentials"}


def test_login_with_unknown_email_is_401():
    r = client.post("/api/auth/login", json={"email": "ghost@example.com", "password": "whatever"})
    assert r.status_code == 401


def test_missing_token_is_401():
    r = client.get("/api/profiles/me")
    assert r.status_code == 401
    assert "message" in r.json()


def test_wrong_scheme_is_401(employee):
    r = client.get("/api/profiles/me", headers={"Authorization": f"Basic {employee.token}"})
    assert r.status_code == 401


def test_wrongly_signed_token_is_403(employee):
    forged = jwt.encode(
        {
            "sub": str(employee.user_id),
            "profile_id": employee.profile_id,
            "role": "admin",
            "exp": datetime.now(timezone.utc) + timedelta(hours=1),
        },
        "some-other-secret-that-is-long-enough-000000",
        algorithm="HS256",
    )
    r = client.get("/api/profiles/me", headers={"Authorization": f"Bearer {forged}"})
    assert r.status_code == 403


def test_garbled_token_is_403():
    r = client.get("/api/profiles/me", headers={"Authorization": "Bearer not-a-real-token"})
    assert r.status_code == 403


def test_expired_token_is_403(employee):
    expired = jwt.encode(
        {
            "sub": str(employee.user_id),
            "profile_id": employee.profile_id,
            "role": "employee",
            "exp": datetime.now(timezone.utc) - timedelta(minutes=1),
        },
        os.environ["JWT_SECRET"],
        algorithm="HS256",
    )
    r = client.get("/api/profiles/me", headers={"Authorization": f"Bearer {expired}"})
    assert r.status_code == 403


def test_non_admin_listing_employees_is_403(employee, manager):
    for account in (employee, manager):
        r = client.get("/api/employees", headers=account.headers)
        assert r.status_code == 403
        assert r.json() == {"message": "Admin access required"}


def test_non_admin_is_rejected_regardless_of_payload(employee):
    valid = client.post("/api/departments", json={"name": "Logistics"}, headers=employee.headers)
    invalid = client.post("/api/departments", json={"bogus": True}, headers=employee.headers)
    assert valid.status_code == 403
    assert invalid.status_code == 403
