from datetime import date, datetime
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from workforce.schemas.profile import ProfileResponse

EmployeeStatus = Literal["active", "inactive", "on_leave"]


class EmployeeUpdate(BaseModel):
    department_id: Optional[str] = None
    hire_date: Optional[date] = None
    hourly_rate: Optional[float] = Field(default=None, ge=0)
    status: Optional[EmployeeStatus] = None
    emergency_contact_name: Optional[str] = None
    emergency_contact_phone: Optional[str] = None


class EmployeeResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    profile_id: str
    department_id: Optional[str]
    hire_date: date
    hourly_rate: Optional[float]
    status: EmployeeStatus
    emergency_contact_name: Optional[str]
    emergency_contact_phone: Optional[str]
    created_at: datetime
    updated_at: datetime
    profile: Optional[ProfileResponse] = None
