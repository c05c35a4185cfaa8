from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from workforce.core.authorization import Role, require_role
from workforce.database import get_db
from workforce.deps.auth import CurrentUser, require_auth
from workforce.deps.employee import require_employee
from workforce.models.employee import Employee
from workforce.models.overtime import Overtime
from workforce.schemas.overtime import OvertimeCreate, OvertimeResponse
from workforce.services import approval_service

router = APIRouter(prefix="/overtime", tags=["Overtime"])

require_approver = require_role(
    Role.ADMIN,
    Role.MANAGER,
    detail="Only admins and managers can decide overtime",
)


@router.get("", response_model=List[OvertimeResponse])
def list_overtime(
    filter_: Optional[str] = Query(default=None, alias="filter"),
    user: CurrentUser = Depends(require_auth),
    db: Session = Depends(get_db),
):
    q = db.query(Overtime)
    if filter_ == "team" and user.is_manager_or_admin:
        q = q.filter(Overtime.status == "pending")
    else:
        employee = require_employee(user=user, db=db)
        q = q.filter(Overtime.employee_id == employee.id)
    return q.order_by(Overtime.date.desc()).all()


@router.post("", response_model=OvertimeResponse)
def create_overtime(
    payload: OvertimeCreate,
    employee: Employee = Depends(require_employee),
    db: Session = Depends(get_db),
):
    row = Overtime(
        employee_id=employee.id,
        date=payload.date,
        hours=payload.hours,
        reason=payload.reason,
        status="pending",
    )
    db.add(row)
    db.commit()
    db.refresh(row)
    return row


def _decide(overtime_id: str, decision: str, approver: CurrentUser, db: Session):
    row = db.get(Overtime, overtime_id)
    if row is None:
        raise HTTPException(status_code=404, detail="Overtime not found")
    try:
        approval_service.decide(row, decision, approver_profile_id=approver.profile_id, db=db)
        db.commit()
        db.refresh(row)
        return row
    except Exception:
        db.rollback()
        raise


@router.post("/{overtime_id}/approve", response_model=OvertimeResponse)
def approve_overtime(
    overtime_id: str,
    approver: CurrentUser = Depends(require_approver),
    db: Session = Depends(get_db),
):
    return _decide(overtime_id, "approved", approver, db)


@router.post("/{overtime_id}/reject", response_model=OvertimeResponse)
def reject_overtime(
    overtime_id: str,
    approver: CurrentUser = Depends(require_approver),
    db: Session = Depends(get_db),
):
    return _decide(overtime_id, "rejected", approver, db)
