import logging
from typing import Optional

from sqlalchemy.orm import Session

from workforce.core.clock import today, utcnow
from workforce.core.errors import ConflictError, ValidationFailed
from workforce.models.attendance import Attendance
from workforce.services import time_accounting

logger = logging.getLogger(__name__)


def today_attendance(db: Session, employee_id: str) -> Optional[Attendance]:
    return (
        db.query(Attendance)
        .filter(Attendance.employee_id == employee_id, Attendance.date == today())
        .first()
    )


def attendance_history(db: Session, employee_id: str) -> list[Attendance]:
    return (
        db.query(Attendance)
        .filter(Attendance.employee_id == employee_id)
        .order_by(Attendance.date.desc())
        .all()
    )


def clock_in(*, employee_id: str, db: Session) -> Attendance:
    if today_attendance(db, employee_id) is not None:
        raise ConflictError("Already clocked in today")

    now = utcnow()
    row = Attendance(
        employee_id=employee_id,
        date=now.date(),
        clock_in=now,
        status="present",
    )
    db.add(row)
    db.flush()
    logger.info("Clocked in", extra={"employee_id": employee_id, "attendance_id": row.id})
    return row


def clock_out(*, employee_id: str, db: Session) -> Attendance:
    row = today_attendance(db, employee_id)
    if row is None or row.clock_in is None:
        raise ValidationFailed("No clock-in record found for today")
    if row.clock_out is not None:
        raise ConflictError("Already clocked out today")

    row.clock_out = utcnow()
    row.total_hours = time_accounting.total_hours(row.clock_in, row.clock_out)
    db.flush()
    logger.info("Clocked out", extra={"employee_id": employee_id, "attendance_id": row.id})
    return row
