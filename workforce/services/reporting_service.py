from __future__ import annotations

from collections import defaultdict
from datetime import date, datetime
from typing import Any, Optional

from sqlalchemy import func
from sqlalchemy.orm import Session

from workforce.models.employee import Employee
from workforce.models.profile import Profile
from workforce.models.task import Task
from workforce.models.work_hour import WorkHour

REPORTABLE_STATUSES = ("completed", "approved")


def summary(
    *,
    db: Session,
    date_from: Optional[date] = None,
    date_to: Optional[date] = None,
) -> dict[str, Any]:
    """
    Read-only reporting over finished work hours.

    Semantics:
      start_time >= date_from 00:00 AND start_time <= date_to 23:59:59
    Grouping:
      task, employee, calendar day of start_time
    """
    q = (
        db.query(WorkHour, Task.name, Profile.first_name, Profile.last_name)
        .join(Task, Task.id == WorkHour.task_id)
        .join(Employee, Employee.id == WorkHour.employee_id)
        .join(Profile, Profile.id == Employee.profile_id)
        .filter(WorkHour.status.in_(REPORTABLE_STATUSES))
    )
    if date_from is not None:
        q = q.filter(WorkHour.start_time >= datetime.combine(date_from, datetime.min.time()))
    if date_to is not None:
        q = q.filter(WorkHour.start_time <= datetime.combine(date_to, datetime.max.time()))

    by_task: dict[str, dict[str, Any]] = {}
    by_employee: dict[str, dict[str, Any]] = {}
    by_day: dict[date, float] = defaultdict(float)
    total = 0.0

    for row, task_name, first_name, last_name in q.all():
        hours = float(row.total_hours or 0)
        total += hours

        task_bucket = by_task.setdefault(
            row.task_id, {"task_id": row.task_id, "task_name": task_name, "hours": 0.0, "entries": 0}
        )
        task_bucket["hours"] += hours
        task_bucket["entries"] += 1

        emp_bucket = by_employee.setdefault(
            row.employee_id,
            {"employee_id": row.employee_id, "name": f"{first_name} {last_name}", "hours": 0.0, "entries": 0},
        )
        emp_bucket["hours"] += hours
        emp_bucket["entries"] += 1

        by_day[row.start_time.date()] += hours

    def _rounded(buckets):
        return [
            {**b, "hours": round(b["hours"], 2)}
            for b in sorted(buckets.values(), key=lambda b: b["hours"], reverse=True)
        ]

    return {
        "date_from": date_from,
        "date_to": date_to,
        "total_employees": int(db.query(func.count(Employee.id)).scalar() or 0),
        "total_tasks": int(db.query(func.count(Task.id)).scalar() or 0),
        "total_hours": round(total, 2),
        "by_task": _rounded(by_task),
        "by_employee": _rounded(by_employee),
        "by_day": [{"date": d, "hours": round(h, 2)} for d, h in sorted(by_day.items())],
    }
