from datetime import date, datetime
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

ProjectStatus = Literal["active", "completed", "on_hold"]


class ProjectCreate(BaseModel):
    name: str = Field(min_length=1)
    description: Optional[str] = None
    department_id: Optional[str] = None
    manager_id: Optional[str] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    status: ProjectStatus = "active"
    budget: Optional[float] = Field(default=None, ge=0)

    @model_validator(mode="after")
    def _check_dates(self):
        if self.start_date and self.end_date and self.end_date < self.start_date:
            raise ValueError("end_date must not be before start_date")
        return self


class ProjectUpdate(BaseModel):
    name: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = None
    department_id: Optional[str] = None
    manager_id: Optional[str] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    status: Optional[ProjectStatus] = None
    budget: Optional[float] = Field(default=None, ge=0)


class ProjectResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    description: Optional[str]
    department_id: Optional[str]
    manager_id: Optional[str]
    start_date: Optional[date]
    end_date: Optional[date]
    status: ProjectStatus
    budget: Optional[float]
    created_at: datetime
    updated_at: datetime
