from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session, joinedload

from workforce.core.authorization import require_admin
from workforce.database import get_db
from workforce.models.department import Department
from workforce.models.employee import Employee
from workforce.schemas.employee import EmployeeResponse, EmployeeUpdate

router = APIRouter(prefix="/employees", tags=["Employees"])

_REQUIRED_FIELDS = {"hire_date", "status"}


def _get_employee(db: Session, employee_id: str) -> Employee:
    row = (
        db.query(Employee)
        .options(joinedload(Employee.profile))
        .filter(Employee.id == employee_id)
        .first()
    )
    if row is None:
        raise HTTPException(status_code=404, detail="Employee not found")
    return row


@router.get("", response_model=List[EmployeeResponse])
def list_employees(
    _admin=Depends(require_admin),
    db: Session = Depends(get_db),
):
    return (
        db.query(Employee)
        .options(joinedload(Employee.profile))
        .order_by(Employee.created_at.desc())
        .all()
    )


@router.get("/{employee_id}", response_model=EmployeeResponse)
def get_employee(
    employee_id: str,
    _admin=Depends(require_admin),
    db: Session = Depends(get_db),
):
    return _get_employee(db, employee_id)


@router.put("/{employee_id}", response_model=EmployeeResponse)
def update_employee(
    employee_id: str,
    payload: EmployeeUpdate,
    _admin=Depends(require_admin),
    db: Session = Depends(get_db),
):
    row = _get_employee(db, employee_id)
    changes = payload.model_dump(exclude_unset=True)

    department_id = changes.get("department_id")
    if department_id is not None and db.get(Department, department_id) is None:
        raise HTTPException(status_code=400, detail="Invalid department_id")

    for field, value in changes.items():
        if value is None and field in _REQUIRED_FIELDS:
            continue
        setattr(row, field, value)

    db.commit()
    return _get_employee(db, employee_id)
