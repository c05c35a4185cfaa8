from datetime import date, datetime
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field


class EmployeeSummary(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    department_id: Optional[str]
    hire_date: date
    hourly_rate: Optional[float]
    status: Literal["active", "inactive", "on_leave"]


class ProfileResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    user_id: int
    email: str
    first_name: str
    last_name: str
    phone: Optional[str]
    role: Literal["admin", "manager", "employee"]
    employee_number: Optional[str]
    created_at: datetime
    updated_at: datetime


class ProfileWithEmployee(ProfileResponse):
    employee: Optional[EmployeeSummary] = None


class ProfileUpdate(BaseModel):
    model_config = ConfigDict(extra="forbid")

    email: Optional[EmailStr] = None
    first_name: Optional[str] = Field(default=None, min_length=1)
    last_name: Optional[str] = Field(default=None, min_length=1)
    phone: Optional[str] = None
