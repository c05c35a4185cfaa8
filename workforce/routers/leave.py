from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from workforce.core.authorization import Role, require_role
from workforce.database import get_db
from workforce.deps.auth import CurrentUser, require_auth
from workforce.deps.employee import require_employee
from workforce.models.employee import Employee
from workforce.models.leave_request import LeaveRequest
from workforce.schemas.leave import (
    DecisionRequest,
    LeaveBalance,
    LeaveRequestCreate,
    LeaveRequestResponse,
)
from workforce.services import approval_service, leave_service

router = APIRouter(tags=["Leave"])


def _decide(leave_request_id: str, decision: str, payload: DecisionRequest, approver: CurrentUser, db: Session):
    row = db.get(LeaveRequest, leave_request_id)
    if row is None:
        raise HTTPException(status_code=404, detail="Leave request not found")
    try:
        approval_service.decide(
            row,
            decision,
            approver_profile_id=approver.profile_id,
            comments=payload.comments,
            db=db,
        )
        db.commit()
        db.refresh(row)
        return row
    except Exception:
        db.rollback()
        raise


@router.get("/leave-requests", response_model=List[LeaveRequestResponse])
def list_leave_requests(
    filter_: Optional[str] = Query(default=None, alias="filter"),
    user: CurrentUser = Depends(require_auth),
    db: Session = Depends(get_db),
):
    if filter_ == "team" and user.is_manager_or_admin:
        return leave_service.list_leave_requests(db, status="pending")

    employee = require_employee(user=user, db=db)
    return leave_service.list_leave_requests(db, employee_id=employee.id)


@router.post("/leave-requests", response_model=LeaveRequestResponse)
def create_leave_request(
    payload: LeaveRequestCreate,
    employee: Employee = Depends(require_employee),
    db: Session = Depends(get_db),
):
    row = leave_service.create_leave_request(employee_id=employee.id, data=payload.model_dump(), db=db)
    db.commit()
    db.refresh(row)
    return row


@router.post("/leave-requests/{leave_request_id}/approve", response_model=LeaveRequestResponse)
def approve_leave_request(
    leave_request_id: str,
    payload: Optional[DecisionRequest] = None,
    approver: CurrentUser = Depends(
        require_role(Role.ADMIN, Role.MANAGER, detail="Only admins and managers can approve leave requests")
    ),
    db: Session = Depends(get_db),
):
    return _decide(leave_request_id, "approved", payload or DecisionRequest(), approver, db)


@router.post("/leave-requests/{leave_request_id}/reject", response_model=LeaveRequestResponse)
def reject_leave_request(
    leave_request_id: str,
    payload: Optional[DecisionRequest] = None,
    approver: CurrentUser = Depends(
        require_role(Role.ADMIN, Role.MANAGER, detail="Only admins and managers can reject leave requests")
    ),
    db: Session = Depends(get_db),
):
    return _decide(leave_request_id, "rejected", payload or DecisionRequest(), approver, db)


@router.get("/leave-balance", response_model=LeaveBalance)
def get_leave_balance(
    year: Optional[int] = Query(default=None, ge=1, le=9999),
    employee: Employee = Depends(require_employee),
    db: Session = Depends(get_db),
):
    return leave_service.leave_balance(db, employee_id=employee.id, year=year)
