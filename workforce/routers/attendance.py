from typing import List, Optional

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from workforce.database import get_db
from workforce.deps.employee import require_employee
from workforce.models.employee import Employee
from workforce.schemas.attendance import AttendanceResponse
from workforce.services import attendance_service

router = APIRouter(prefix="/attendance", tags=["Attendance"])


@router.get("", response_model=List[AttendanceResponse])
def list_attendance(
    employee: Employee = Depends(require_employee),
    db: Session = Depends(get_db),
):
    return attendance_service.attendance_history(db, employee.id)


@router.get("/today", response_model=Optional[AttendanceResponse])
def get_today_attendance(
    employee: Employee = Depends(require_employee),
    db: Session = Depends(get_db),
):
    return attendance_service.today_attendance(db, employee.id)


@router.post("/clock-in", response_model=AttendanceResponse)
def clock_in(
    employee: Employee = Depends(require_employee),
    db: Session = Depends(get_db),
):
    try:
        row = attendance_service.clock_in(employee_id=employee.id, db=db)
        db.commit()
        db.refresh(row)
        return row
    except Exception:
        db.rollback()
        raise


@router.post("/clock-out", response_model=AttendanceResponse)
def clock_out(
    employee: Employee = Depends(require_employee),
    db: Session = Depends(get_db),
):
    try:
        row = attendance_service.clock_out(employee_id=employee.id, db=db)
        db.commit()
        db.refresh(row)
        return row
    except Exception:
        db.rollback()
        raise
