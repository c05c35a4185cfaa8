from datetime import date, datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from workforce.schemas.leave import ApprovalStatus


class OvertimeCreate(BaseModel):
    date: date
    hours: float = Field(gt=0, le=24)
    reason: Optional[str] = None


class OvertimeResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    employee_id: str
    date: date
    hours: float
    reason: Optional[str]
    status: ApprovalStatus
    approved_by: Optional[str]
    approved_at: Optional[datetime]
    created_at: datetime
    updated_at: datetime
