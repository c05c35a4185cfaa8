import os
_default_test_secret = "test-jwt-secret-for-pytest-only-0000000000000000"
if len(os.environ.get("JWT_SECRET", "")) < 32:
    os.environ["JWT_SECRET"] = _default_test_secret

import tempfile
from dataclasses import dataclass
from pathlib import Path
from uuid import uuid4

import pytest
from alembic import command
from alembic.config import Config

_TEST_DB_DIR = tempfile.mkdtemp(prefix="workforce-tests-")
TEST_DATABASE_URL = os.getenv(
    "TEST_DATABASE_URL",
    f"sqlite:///{_TEST_DB_DIR}/workforce_test.db",
)
os.environ["DATABASE_URL"] = TEST_DATABASE_URL

from workforce import database
from workforce.database import Base, session_scope
from workforce.models.task import Task
from workforce.services import account_service
from workforce.services.auth_service import create_access_token

REPO_ROOT = Path(__file__).resolve().parents[2]
TEST_PASSWORD = "s3cret-pass"


@dataclass
class Account:
    profile_id: str
    employee_id: str
    user_id: int
    email: str
    role: str
    token: str
    password: str = TEST_PASSWORD

    @property
    def headers(self) -> dict:
        return {"Authorization": f"Bearer {self.token}"}


@pytest.fixture(scope="session", autouse=True)
def _prepare_test_database() -> None:
    config = Config(str(REPO_ROOT / "alembic.ini"))
    config.set_main_option("sqlalchemy.url", TEST_DATABASE_URL)
    config.attributes["configure_logger"] = False
    command.upgrade(config, "head")

    database.configure_database()


def _clear_tables() -> None:
    with database.engine.begin() as conn:
        for table in reversed(Base.metadata.sorted_tables):
            conn.execute(table.delete())


@pytest.fixture(scope="function", autouse=True)
def _truncate_tables_between_tests():
    _clear_tables()
    yield
    _clear_tables()


@pytest.fixture
def account_factory():
    def _create(role: str = "employee", email: str | None = None, first_name: str = "Test") -> Account:
        email = email or f"{role}-{uuid4().hex[:8]}@example.com"
        with session_scope() as db:
            profile = account_service.register(
                email=email,
                password=TEST_PASSWORD,
                first_name=first_name,
                last_name="User",
                role=role,
                db=db,
            )
            employee_id = profile.employee.id

        return Account(
            profile_id=profile.id,
            employee_id=employee_id,
            user_id=profile.user_id,
            email=email,
            role=role,
            token=create_access_token(user_id=profile.user_id, profile_id=profile.id, role=role),
        )

    return _create


@pytest.fixture
def employee(account_factory) -> Account:
    return account_factory("employee")


@pytest.fixture
def admin(account_factory) -> Account:
    return account_factory("admin")


@pytest.fixture
def manager(account_factory) -> Account:
    return account_factory("manager")


@pytest.fixture
def task_factory():
    def _create(name: str = "Pick orders", type: str = "warehouse", is_active: bool = True) -> Task:
        with session_scope() as db:
            row = Task(name=name, type=type, is_active=is_active)
            db.add(row)
            db.flush()
        return row

    return _create
