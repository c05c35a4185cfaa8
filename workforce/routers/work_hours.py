from datetime import date, datetime
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from workforce.core.authorization import Role, require_role
from workforce.core.clock import today
from workforce.database import get_db
from workforce.deps.auth import CurrentUser, require_auth
from workforce.deps.employee import require_employee
from workforce.models.employee import Employee
from workforce.models.work_hour import WorkHour
from workforce.schemas.work_hour import WeekSummary, WorkHourCreate, WorkHourResponse, WorkHourUpdate
from workforce.services import work_hour_service

router = APIRouter(prefix="/work-hours", tags=["Work Hours"])

require_approver = require_role(
    Role.ADMIN,
    Role.MANAGER,
    detail="Only admins and managers can approve work hours",
)


def _own_employee_id(db: Session, user: CurrentUser) -> Optional[str]:
    """None for admins and managers, who see every row; else the caller's employee id."""
    if user.is_manager_or_admin:
        return None
    employee = db.query(Employee).filter(Employee.profile_id == user.profile_id).first()
    if employee is None:
        raise HTTPException(status_code=404, detail="Employee record not found")
    return employee.id


@router.get("", response_model=List[WorkHourResponse])
def list_work_hours(
    start_from: Optional[datetime] = None,
    start_to: Optional[datetime] = None,
    user: CurrentUser = Depends(require_auth),
    db: Session = Depends(get_db),
):
    return work_hour_service.list_work_hours(
        db,
        employee_id=_own_employee_id(db, user),
        start_from=start_from,
        start_to=start_to,
    )


@router.get("/summary", response_model=WeekSummary)
def get_week_summary(
    week_of: Optional[date] = None,
    employee: Employee = Depends(require_employee),
    db: Session = Depends(get_db),
):
    return work_hour_service.week_summary(db, employee_id=employee.id, week_of=week_of or today())


@router.get("/{work_hour_id}", response_model=WorkHourResponse)
def get_work_hour(
    work_hour_id: str,
    user: CurrentUser = Depends(require_auth),
    db: Session = Depends(get_db),
):
    return work_hour_service.get_work_hour(db, work_hour_id, employee_id=_own_employee_id(db, user))


@router.post("", response_model=WorkHourResponse)
def create_work_hour(
    payload: WorkHourCreate,
    employee: Employee = Depends(require_employee),
    db: Session = Depends(get_db),
):
    try:
        row = work_hour_service.create_work_hour(
            employee_id=employee.id,
            data=payload.model_dump(),
            db=db,
        )
        db.commit()
        db.refresh(row)
        return row
    except Exception:
        db.rollback()
        raise


@router.put("/{work_hour_id}", response_model=WorkHourResponse)
def update_work_hour(
    work_hour_id: str,
    payload: WorkHourUpdate,
    user: CurrentUser = Depends(require_auth),
    db: Session = Depends(get_db),
):
    changes = payload.model_dump(exclude_unset=True)
    if changes.get("status") == "approved" and not user.is_manager_or_admin:
        raise HTTPException(status_code=403, detail="Only admins and managers can approve work hours")

    row = work_hour_service.get_work_hour(db, work_hour_id, employee_id=_own_employee_id(db, user))
    try:
        work_hour_service.update_work_hour(
            row,
            changes,
            db=db,
            approver_profile_id=user.profile_id if user.is_manager_or_admin else None,
        )
        db.commit()
        db.refresh(row)
        return row
    except Exception:
        db.rollback()
        raise


@router.post("/{work_hour_id}/approve", response_model=WorkHourResponse)
def approve_work_hour(
    work_hour_id: str,
    approver: CurrentUser = Depends(require_approver),
    db: Session = Depends(get_db),
):
    row: WorkHour = work_hour_service.get_work_hour(db, work_hour_id)
    try:
        work_hour_service.approve_work_hour(row, approver_profile_id=approver.profile_id, db=db)
        db.commit()
        db.refresh(row)
        return row
    except Exception:
        db.rollback()
        raise
