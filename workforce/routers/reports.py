from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from workforce.core.authorization import require_admin
from workforce.database import get_db
from workforce.schemas.report import ReportSummary
from workforce.services import reporting_service

router = APIRouter(prefix="/reports", tags=["Reports"])


@router.get("/summary", response_model=ReportSummary)
def get_summary(
    date_from: Optional[date] = None,
    date_to: Optional[date] = None,
    _admin=Depends(require_admin),
    db: Session = Depends(get_db),
):
    if date_from is not None and date_to is not None and date_to < date_from:
        raise HTTPException(status_code=400, detail="date_to must not be before date_from")

    return reporting_service.summary(db=db, date_from=date_from, date_to=date_to)
