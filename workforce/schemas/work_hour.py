from datetime import date, datetime
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

WorkStatus = Literal["in_progress", "completed", "pending_approval", "approved"]


class WorkHourCreate(BaseModel):
    task_id: str
    start_time: datetime
    end_time: Optional[datetime] = None
    break_time_minutes: int = Field(default=0, ge=0)
    notes: Optional[str] = None
    status: WorkStatus = "in_progress"


class WorkHourUpdate(BaseModel):
    task_id: Optional[str] = None
    start_time: Optional[datetime] = None
    end_time: Optional[datetime] = None
    break_time_minutes: Optional[int] = Field(default=None, ge=0)
    notes: Optional[str] = None
    status: Optional[WorkStatus] = None


class WorkHourResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    employee_id: str
    task_id: str
    start_time: datetime
    end_time: Optional[datetime]
    break_time_minutes: int
    total_hours: Optional[float]
    notes: Optional[str]
    status: WorkStatus
    approved_by: Optional[str]
    approved_at: Optional[datetime]
    created_at: datetime
    updated_at: datetime


class WeekSummary(BaseModel):
    week_start: date
    week_end: date
    total_hours: float
    overtime_hours: float
    entries: int
    days_worked: int
    avg_hours_per_day: float
