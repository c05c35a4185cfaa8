from datetime import date, datetime, timedelta
from typing import Optional

from sqlalchemy.orm import Session

from workforce.core.clock import to_naive_utc, utcnow
from workforce.core.errors import ConflictError, NotFoundError, ValidationFailed
from workforce.models.task import Task
from workforce.models.work_hour import WorkHour
from workforce.services import time_accounting

STANDARD_WEEK_HOURS = 40.0


def list_work_hours(
    db: Session,
    *,
    employee_id: Optional[str] = None,
    start_from: Optional[datetime] = None,
    start_to: Optional[datetime] = None,
) -> list[WorkHour]:
    q = db.query(WorkHour)
    if employee_id is not None:
        q = q.filter(WorkHour.employee_id == employee_id)
    if start_from is not None:
        q = q.filter(WorkHour.start_time >= to_naive_utc(start_from))
    if start_to is not None:
        q = q.filter(WorkHour.start_time <= to_naive_utc(start_to))
    return q.order_by(WorkHour.start_time.desc()).all()


def get_work_hour(db: Session, work_hour_id: str, *, employee_id: Optional[str] = None) -> WorkHour:
    q = db.query(WorkHour).filter(WorkHour.id == work_hour_id)
    if employee_id is not None:
        q = q.filter(WorkHour.employee_id == employee_id)
    row = q.first()
    if row is None:
        raise NotFoundError("Work hour not found")
    return row


def _recompute_total(row: WorkHour) -> None:
    if row.end_time is None:
        row.total_hours = None
        return
    row.total_hours = time_accounting.total_hours(
        row.start_time, row.end_time, row.break_time_minutes or 0
    )


def create_work_hour(*, employee_id: str, data: dict, db: Session) -> WorkHour:
    if db.get(Task, data["task_id"]) is None:
        raise NotFoundError("Task not found")
    if data.get("status") == "approved":
        raise ValidationFailed("Work hours are approved through the approval endpoint")

    row = WorkHour(
        employee_id=employee_id,
        task_id=data["task_id"],
        start_time=to_naive_utc(data["start_time"]),
        end_time=to_naive_utc(data.get("end_time")),
        break_time_minutes=data.get("break_time_minutes") or 0,
        notes=data.get("notes"),
        status=data.get("status") or "in_progress",
    )
    _recompute_total(row)
    db.add(row)
    db.flush()
    return row


def update_work_hour(
    row: WorkHour,
    changes: dict,
    *,
    db: Session,
    approver_profile_id: Optional[str] = None,
) -> WorkHour:
    """Apply a partial edit.

    Only approvers (admins and managers) may touch an approved row or move a row
    into `approved`. approved_by and approved_at follow the status: stamped on the
    way in, cleared on the way out.
    """
    was_approved = row.status == "approved"
    if was_approved and approver_profile_id is None:
        raise ConflictError("Approved work hours can only be changed by an admin or manager")
    if changes.get("status") == "approved" and approver_profile_id is None:
        raise ValidationFailed("Work hours are approved through the approval endpoint")

    if "task_id" in changes and changes["task_id"] is not None:
        if db.get(Task, changes["task_id"]) is None:
            raise NotFoundError("Task not found")

    for field in ("start_time", "end_time"):
        if field in changes:
            changes[field] = to_naive_utc(changes[field])

    for field, value in changes.items():
        if value is None and field in ("task_id", "start_time", "break_time_minutes", "status"):
            continue
        setattr(row, field, value)

    _recompute_total(row)

    if row.status == "approved":
        if row.end_time is None:
            raise ConflictError("Work hour is still in progress")
        if not was_approved:
            row.approved_by = approver_profile_id
            row.approved_at = utcnow()
    else:
        row.approved_by = None
        row.approved_at = None

    db.flush()
    return row


def approve_work_hour(row: WorkHour, *, approver_profile_id: str, db: Session) -> WorkHour:
    if row.status == "approved":
        raise ConflictError("Work hour already approved")
    if row.end_time is None:
        raise ConflictError("Work hour is still in progress")

    row.status = "approved"
    row.approved_by = approver_profile_id
    row.approved_at = utcnow()
    db.flush()
    return row


def week_bounds(day: date) -> tuple[date, date]:
    monday = day - timedelta(days=day.weekday())
    return monday, monday + timedelta(days=6)


def week_summary(db: Session, *, employee_id: str, week_of: date) -> dict:
    week_start, week_end = week_bounds(week_of)
    rows = list_work_hours(
        db,
        employee_id=employee_id,
        start_from=datetime.combine(week_start, datetime.min.time()),
        start_to=datetime.combine(week_end, datetime.max.time()),
    )

    total = sum(float(r.total_hours or 0) for r in rows)
    days_worked = len({r.start_time.date() for r in rows})

    return {
        "week_start": week_start,
        "week_end": week_end,
        "total_hours": round(total, 2),
        "overtime_hours": round(max(0.0, total - STANDARD_WEEK_HOURS), 2),
        "entries": len(rows),
        "days_worked": days_worked,
        "avg_hours_per_day": round(total / days_worked, 2) if days_worked else 0.0,
    }
