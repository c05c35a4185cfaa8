import logging
from datetime import datetime
from typing import Optional

from sqlalchemy.orm import Session

from workforce.core.clock import to_naive_utc, utcnow
from workforce.core.errors import ConflictError, NotFoundError
from workforce.models.project import Project
from workforce.models.task import Task
from workforce.models.time_session import TimeSession
from workforce.models.work_hour import WorkHour
from workforce.services import time_accounting

logger = logging.getLogger(__name__)


def active_sessions(db: Session, employee_id: Optional[str] = None) -> list[TimeSession]:
    q = db.query(TimeSession).filter(TimeSession.is_active.is_(True))
    if employee_id is not None:
        q = q.filter(TimeSession.employee_id == employee_id)
    return q.order_by(TimeSession.start_time.desc()).all()


def start_session(
    *,
    employee_id: str,
    task_id: str,
    db: Session,
    project_id: Optional[str] = None,
    start_time: Optional[datetime] = None,
    notes: Optional[str] = None,
) -> TimeSession:
    """
    Open a running session for the employee.

    Multiple active sessions per employee are allowed; a repeated request
    opens another one. Caller owns the transaction.
    """
    if db.get(Task, task_id) is None:
        raise NotFoundError("Task not found")
    if project_id is not None and db.get(Project, project_id) is None:
        raise NotFoundError("Project not found")

    session = TimeSession(
        employee_id=employee_id,
        task_id=task_id,
        project_id=project_id,
        start_time=to_naive_utc(start_time) or utcnow(),
        is_active=True,
        notes=notes,
    )
    db.add(session)
    db.flush()
    return session


def stop_session(
    session_id: str,
    *,
    db: Session,
    employee_id: Optional[str] = None,
    end_time: Optional[datetime] = None,
    break_time_minutes: int = 0,
    notes: Optional[str] = None,
) -> tuple[TimeSession, WorkHour]:
    """
    Close a running session and record it as a completed WorkHour.

    ``employee_id`` restricts the lookup to that employee's sessions; pass
    None for admin callers. Caller owns the transaction, so the session
    update and the new WorkHour commit together.
    """
    q = db.query(TimeSession).filter(TimeSession.id == session_id)
    if employee_id is not None:
        q = q.filter(TimeSession.employee_id == employee_id)
    session = q.with_for_update().first()

    if session is None:
        raise NotFoundError("Session not found")
    if not session.is_active:
        raise ConflictError("Session already stopped")

    end = to_naive_utc(end_time) or utcnow()
    hours = time_accounting.total_hours(session.start_time, end, break_time_minutes)

    session.is_active = False
    if notes is not None:
        session.notes = notes

    work_hour = WorkHour(
        employee_id=session.employee_id,
        task_id=session.task_id,
        start_time=session.start_time,
        end_time=end,
        break_time_minutes=break_time_minutes,
        total_hours=hours,
        notes=notes if notes is not None else session.notes,
        status="completed",
    )
    db.add(work_hour)
    db.flush()

    logger.info(
        "Stopped time session",
        extra={"session_id": session.id, "work_hour_id": work_hour.id, "total_hours": hours},
    )
    return session, work_hour
