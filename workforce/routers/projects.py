from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from workforce.core.authorization import Role, require_role
from workforce.database import get_db
from workforce.deps.auth import require_auth
from workforce.models.department import Department
from workforce.models.profile import Profile
from workforce.models.project import Project
from workforce.schemas.project import ProjectCreate, ProjectResponse, ProjectUpdate

router = APIRouter(prefix="/projects", tags=["Projects"])

require_project_editor = require_role(
    Role.ADMIN,
    Role.MANAGER,
    detail="Only admins and managers can manage projects",
)

_REQUIRED_FIELDS = {"name", "status"}


def _get_project(db: Session, project_id: str) -> Project:
    row = db.get(Project, project_id)
    if row is None:
        raise HTTPException(status_code=404, detail="Project not found")
    return row


def _check_references(db: Session, changes: dict) -> None:
    department_id = changes.get("department_id")
    if department_id is not None and db.get(Department, department_id) is None:
        raise HTTPException(status_code=400, detail="Invalid department_id")
    manager_id = changes.get("manager_id")
    if manager_id is not None and db.get(Profile, manager_id) is None:
        raise HTTPException(status_code=400, detail="Invalid manager_id")


@router.get("", response_model=List[ProjectResponse])
def list_projects(
    _auth=Depends(require_auth),
    db: Session = Depends(get_db),
):
    return db.query(Project).order_by(Project.created_at.desc()).all()


@router.get("/{project_id}", response_model=ProjectResponse)
def get_project(
    project_id: str,
    _auth=Depends(require_auth),
    db: Session = Depends(get_db),
):
    return _get_project(db, project_id)


@router.post("", response_model=ProjectResponse)
def create_project(
    payload: ProjectCreate,
    _editor=Depends(require_project_editor),
    db: Session = Depends(get_db),
):
    data = payload.model_dump()
    _check_references(db, data)

    row = Project(**data)
    db.add(row)
    db.commit()
    db.refresh(row)
    return row


@router.patch("/{project_id}", response_model=ProjectResponse)
def update_project(
    project_id: str,
    payload: ProjectUpdate,
    _editor=Depends(require_project_editor),
    db: Session = Depends(get_db),
):
    row = _get_project(db, project_id)
    changes = payload.model_dump(exclude_unset=True)
    _check_references(db, changes)

    start_date = changes.get("start_date", row.start_date)
    end_date = changes.get("end_date", row.end_date)
    if start_date and end_date and end_date < start_date:
        raise HTTPException(status_code=400, detail="end_date must not be before start_date")

    for field, value in changes.items():
        if value is None and field in _REQUIRED_FIELDS:
            continue
        setattr(row, field, value)

    db.commit()
    db.refresh(row)
    return row
