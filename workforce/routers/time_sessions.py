from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from workforce.database import get_db
from workforce.deps.auth import CurrentUser, require_auth
from workforce.deps.employee import require_employee
from workforce.models.employee import Employee
from workforce.schemas.time_session import (
    TimeSessionResponse,
    TimeSessionStart,
    TimeSessionStop,
    TimeSessionStopResponse,
)
from workforce.services import time_session_service

router = APIRouter(prefix="/time-sessions", tags=["Time Sessions"])


@router.get("", response_model=List[TimeSessionResponse])
def list_time_sessions(
    filter_: Optional[str] = Query(default=None, alias="filter"),
    user: CurrentUser = Depends(require_auth),
    db: Session = Depends(get_db),
):
    if filter_ != "active" and user.is_manager_or_admin:
        return time_session_service.active_sessions(db)

    employee = require_employee(user=user, db=db)
    return time_session_service.active_sessions(db, employee_id=employee.id)


@router.post("", response_model=TimeSessionResponse)
def start_time_session(
    payload: TimeSessionStart,
    employee: Employee = Depends(require_employee),
    db: Session = Depends(get_db),
):
    try:
        session = time_session_service.start_session(
            employee_id=employee.id,
            task_id=payload.task_id,
            project_id=payload.project_id,
            start_time=payload.start_time,
            notes=payload.notes,
            db=db,
        )
        db.commit()
        db.refresh(session)
        return session
    except Exception:
        db.rollback()
        raise


@router.post("/{session_id}/stop", response_model=TimeSessionStopResponse)
def stop_time_session(
    session_id: str,
    payload: TimeSessionStop,
    user: CurrentUser = Depends(require_auth),
    db: Session = Depends(get_db),
):
    employee_id = None
    if not user.is_admin:
        employee_id = require_employee(user=user, db=db).id

    try:
        session, work_hour = time_session_service.stop_session(
            session_id,
            employee_id=employee_id,
            end_time=payload.end_time,
            break_time_minutes=payload.break_time_minutes,
            notes=payload.notes,
            db=db,
        )
        db.commit()
        db.refresh(session)
        db.refresh(work_hour)
        return {"session": session, "work_hour": work_hour}
    except Exception:
        db.rollback()
        raise
