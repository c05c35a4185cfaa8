from datetime import date
from typing import Optional

from sqlalchemy import func
from sqlalchemy.orm import Session

from workforce.core.clock import today
from workforce.models.leave_request import LeaveRequest

# Yearly allowance in days per leave type. Unpaid leave is not capped.
LEAVE_ALLOWANCES = {
    "vacation": 25,
    "sick": 5,
    "personal": 3,
    "comp_time": 8,
}


def inclusive_days(start: date, end: date) -> int:
    return max(1, (end - start).days + 1)


def create_leave_request(*, employee_id: str, data: dict, db: Session) -> LeaveRequest:
    days = data.get("days") or inclusive_days(data["start_date"], data["end_date"])
    row = LeaveRequest(
        employee_id=employee_id,
        type=data["type"],
        start_date=data["start_date"],
        end_date=data["end_date"],
        days=days,
        reason=data.get("reason"),
        status="pending",
    )
    db.add(row)
    db.flush()
    return row


def list_leave_requests(db: Session, *, employee_id: Optional[str] = None, status: Optional[str] = None):
    q = db.query(LeaveRequest)
    if employee_id is not None:
        q = q.filter(LeaveRequest.employee_id == employee_id)
    if status is not None:
        q = q.filter(LeaveRequest.status == status)
    return q.order_by(LeaveRequest.created_at.desc()).all()


def leave_balance(db: Session, *, employee_id: str, year: Optional[int] = None) -> dict:
    year = year or today().year
    used_rows = (
        db.query(LeaveRequest.type, func.coalesce(func.sum(LeaveRequest.days), 0))
        .filter(
            LeaveRequest.employee_id == employee_id,
            LeaveRequest.status == "approved",
            LeaveRequest.start_date >= date(year, 1, 1),
            LeaveRequest.start_date <= date(year, 12, 31),
        )
        .group_by(LeaveRequest.type)
        .all()
    )
    used = {leave_type: int(total) for leave_type, total in used_rows}

    balance = {"year": year}
    for leave_type, allowance in LEAVE_ALLOWANCES.items():
        taken = used.get(leave_type, 0)
        balance[leave_type] = {
            "allowance": allowance,
            "used": taken,
            "remaining": allowance - taken,
        }
    return balance
