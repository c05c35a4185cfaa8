from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from workforce.core.authorization import require_admin
from workforce.database import get_db
from workforce.deps.auth import CurrentUser, require_auth
from workforce.models.department import Department
from workforce.models.task import Task
from workforce.schemas.task import TaskCreate, TaskResponse, TaskUpdate

router = APIRouter(prefix="/tasks", tags=["Tasks"])

_REQUIRED_FIELDS = {"name", "type", "is_active"}


def _check_department(db: Session, department_id) -> None:
    if department_id is not None and db.get(Department, department_id) is None:
        raise HTTPException(status_code=400, detail="Invalid department_id")


@router.get("", response_model=List[TaskResponse])
def list_tasks(
    include_inactive: bool = False,
    user: CurrentUser = Depends(require_auth),
    db: Session = Depends(get_db),
):
    q = db.query(Task)
    if not (include_inactive and user.is_admin):
        q = q.filter(Task.is_active.is_(True))
    return q.order_by(Task.name.asc()).all()


@router.get("/{task_id}", response_model=TaskResponse)
def get_task(
    task_id: str,
    _auth=Depends(require_auth),
    db: Session = Depends(get_db),
):
    row = db.get(Task, task_id)
    if row is None:
        raise HTTPException(status_code=404, detail="Task not found")
    return row


@router.post("", response_model=TaskResponse)
def create_task(
    payload: TaskCreate,
    admin: CurrentUser = Depends(require_admin),
    db: Session = Depends(get_db),
):
    _check_department(db, payload.department_id)

    row = Task(**payload.model_dump(), created_by=admin.profile_id)
    db.add(row)
    db.commit()
    db.refresh(row)
    return row


@router.put("/{task_id}", response_model=TaskResponse)
def update_task(
    task_id: str,
    payload: TaskUpdate,
    _admin=Depends(require_admin),
    db: Session = Depends(get_db),
):
    row = db.get(Task, task_id)
    if row is None:
        raise HTTPException(status_code=404, detail="Task not found")

    changes = payload.model_dump(exclude_unset=True)
    _check_department(db, changes.get("department_id"))

    for field, value in changes.items():
        if value is None and field in _REQUIRED_FIELDS:
            continue
        setattr(row, field, value)

    db.commit()
    db.refresh(row)
    return row
