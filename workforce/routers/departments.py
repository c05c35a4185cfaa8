from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from workforce.core.authorization import require_admin
from workforce.database import get_db
from workforce.deps.auth import require_auth
from workforce.models.department import Department
from workforce.models.profile import Profile
from workforce.schemas.department import DepartmentCreate, DepartmentResponse, DepartmentUpdate

router = APIRouter(prefix="/departments", tags=["Departments"])


def _get_department(db: Session, department_id: str) -> Department:
    row = db.get(Department, department_id)
    if row is None:
        raise HTTPException(status_code=404, detail="Department not found")
    return row


def _check_manager(db: Session, manager_id) -> None:
    if manager_id is not None and db.get(Profile, manager_id) is None:
        raise HTTPException(status_code=400, detail="Invalid manager_id")


@router.get("", response_model=List[DepartmentResponse])
def list_departments(
    _auth=Depends(require_auth),
    db: Session = Depends(get_db),
):
    return db.query(Department).order_by(Department.name.asc()).all()


@router.get("/{department_id}", response_model=DepartmentResponse)
def get_department(
    department_id: str,
    _auth=Depends(require_auth),
    db: Session = Depends(get_db),
):
    return _get_department(db, department_id)


@router.post("", response_model=DepartmentResponse)
def create_department(
    payload: DepartmentCreate,
    _admin=Depends(require_admin),
    db: Session = Depends(get_db),
):
    _check_manager(db, payload.manager_id)

    row = Department(**payload.model_dump())
    db.add(row)
    db.commit()
    db.refresh(row)
    return row


@router.put("/{department_id}", response_model=DepartmentResponse)
def update_department(
    department_id: str,
    payload: DepartmentUpdate,
    _admin=Depends(require_admin),
    db: Session = Depends(get_db),
):
    row = _get_department(db, department_id)
    changes = payload.model_dump(exclude_unset=True)
    _check_manager(db, changes.get("manager_id"))

    for field, value in changes.items():
        if field == "name" and value is None:
            continue
        setattr(row, field, value)

    db.commit()
    db.refresh(row)
    return row
