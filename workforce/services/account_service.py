import logging
import time
from typing import Optional

from sqlalchemy.orm import Session

from workforce.core.clock import today
from workforce.core.errors import ValidationFailed
from workforce.models.employee import Employee
from workforce.models.profile import Profile
from workforce.models.user import User
from workforce.services.auth_service import hash_password, verify_password

logger = logging.getLogger(__name__)


def get_profile_by_email(db: Session, email: str) -> Optional[Profile]:
    return db.query(Profile).filter(Profile.email == email).first()


def _next_employee_number() -> str:
    return f"EMP{int(time.time() * 1000)}"


def register(
    *,
    email: str,
    password: str,
    first_name: str,
    last_name: str,
    db: Session,
    role: str = "employee",
) -> Profile:
    """
    Create the login row, its profile and the matching employee record.

    Nothing is committed here; the caller commits once so all three rows
    land together or not at all.
    """
    if get_profile_by_email(db, email) is not None:
        raise ValidationFailed("User already exists")

    user = User(username=email, password_hash=hash_password(password))
    db.add(user)
    db.flush()

    profile = Profile(
        user_id=user.id,
        email=email,
        first_name=first_name,
        last_name=last_name,
        phone=None,
        role=role,
        employee_number=_next_employee_number(),
    )
    db.add(profile)
    db.flush()

    employee = Employee(
        profile_id=profile.id,
        department_id=None,
        hire_date=today(),
        status="active",
    )
    db.add(employee)
    db.flush()

    logger.info(
        "Registered profile",
        extra={"profile_id": profile.id, "employee_id": employee.id},
    )
    return profile


def authenticate(*, email: str, password: str, db: Session) -> Optional[Profile]:
    profile = get_profile_by_email(db, email)
    if profile is None:
        logger.info("Login rejected: unknown email")
        return None

    user = db.get(User, profile.user_id)
    if user is None or not verify_password(password, user.password_hash):
        logger.info("Login rejected: bad password", extra={"profile_id": profile.id})
        return None

    return profile


def update_profile(profile: Profile, changes: dict, *, db: Session) -> Profile:
    new_email = changes.get("email")
    if new_email is not None and new_email != profile.email:
        if get_profile_by_email(db, new_email) is not None:
            raise ValidationFailed("Email already in use")
        user = db.get(User, profile.user_id)
        if user is not None:
            user.username = new_email

    for field, value in changes.items():
        setattr(profile, field, value)

    db.flush()
    return profile
