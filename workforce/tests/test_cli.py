from fastapi.testclient import TestClient

from workforce import cli
from workforce.main import app
from workforce.services.auth_service import verify_password, verify_token

client = TestClient(app)


def test_create_admin_then_login():
    cli.main(["create-admin", "--email", "boss@example.com", "--password", "adminpass"])

    r = client.post("/api/auth/login", json={"email": "boss@example.com", "password": "adminpass"})
    assert r.status_code == 200, r.text
    assert verify_token(r.json()["token"])["role"] == "admin"

    listing = client.get("/api/employees", headers={"Authorization": f"Bearer {r.json()['token']}"})
    assert listing.status_code == 200


def test_create_admin_promotes_existing_account(employee):
    cli.main(["create-admin", "--email", employee.email, "--password", "ignored"])

    r = client.post("/api/auth/login", json={"email": employee.email, "password": employee.password})
    assert verify_token(r.json()["token"])["role"] == "admin"


def test_hash_password_prints_verifiable_hash(capsys):
    assert cli.main(["hash-password", "--password", "hunter22"]) == 0
    printed = capsys.readouterr().out.strip()
    assert verify_password("hunter22", printed)
