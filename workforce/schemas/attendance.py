from datetime import date, datetime
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict


class AttendanceResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    employee_id: str
    date: date
    clock_in: Optional[datetime]
    clock_out: Optional[datetime]
    total_hours: Optional[float]
    status: Literal["present", "absent", "late", "half_day"]
    created_at: datetime
    updated_at: datetime
