from datetime import date, datetime
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

LeaveType = Literal["vacation", "sick", "personal", "comp_time", "unpaid"]
ApprovalStatus = Literal["pending", "approved", "rejected"]


class LeaveRequestCreate(BaseModel):
    type: LeaveType
    start_date: date
    end_date: date
    days: Optional[int] = Field(default=None, ge=1)
    reason: Optional[str] = None

    @model_validator(mode="after")
    def _check_range(self):
        if self.end_date < self.start_date:
            raise ValueError("end_date must not be before start_date")
        return self


class DecisionRequest(BaseModel):
    comments: Optional[str] = None


class LeaveRequestResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    employee_id: str
    type: LeaveType
    start_date: date
    end_date: date
    days: int
    reason: Optional[str]
    status: ApprovalStatus
    approved_by: Optional[str]
    approved_at: Optional[datetime]
    comments: Optional[str]
    created_at: datetime
    updated_at: datetime


class LeaveBalanceEntry(BaseModel):
    allowance: int
    used: int
    remaining: int


class LeaveBalance(BaseModel):
    year: int
    vacation: LeaveBalanceEntry
    sick: LeaveBalanceEntry
    personal: LeaveBalanceEntry
    comp_time: LeaveBalanceEntry
