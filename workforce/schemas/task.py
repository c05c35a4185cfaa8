from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

TaskType = Literal["warehouse", "logistics", "maintenance", "administrative"]


class TaskCreate(BaseModel):
    name: str = Field(min_length=1)
    description: Optional[str] = None
    type: TaskType
    department_id: Optional[str] = None
    estimated_hours: Optional[float] = Field(default=None, ge=0)
    is_active: bool = True


class TaskUpdate(BaseModel):
    name: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = None
    type: Optional[TaskType] = None
    department_id: Optional[str] = None
    estimated_hours: Optional[float] = Field(default=None, ge=0)
    is_active: Optional[bool] = None


class TaskResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    description: Optional[str]
    type: TaskType
    department_id: Optional[str]
    estimated_hours: Optional[float]
    is_active: bool
    created_by: Optional[str]
    created_at: datetime
    updated_at: datetime
