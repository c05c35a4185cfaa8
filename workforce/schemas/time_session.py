from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from workforce.schemas.work_hour import WorkHourResponse


class TimeSessionStart(BaseModel):
    task_id: str
    project_id: Optional[str] = None
    start_time: Optional[datetime] = Field(
        default=None,
        description="If omitted, server uses current UTC time.",
    )
    notes: Optional[str] = None


class TimeSessionStop(BaseModel):
    end_time: Optional[datetime] = Field(
        default=None,
        description="If omitted, server uses current UTC time.",
    )
    break_time_minutes: int = Field(default=0, ge=0)
    notes: Optional[str] = None


class TimeSessionResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    employee_id: str
    task_id: str
    project_id: Optional[str]
    start_time: datetime
    is_active: bool
    notes: Optional[str]
    created_at: datetime
    updated_at: datetime


class TimeSessionStopResponse(BaseModel):
    session: TimeSessionResponse
    work_hour: WorkHourResponse
