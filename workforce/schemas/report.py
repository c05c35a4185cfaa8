from datetime import date
from typing import Optional

from pydantic import BaseModel


class TaskHours(BaseModel):
    task_id: str
    task_name: str
    hours: float
    entries: int


class EmployeeHours(BaseModel):
    employee_id: str
    name: str
    hours: float
    entries: int


class DailyHours(BaseModel):
    date: date
    hours: float


class ReportSummary(BaseModel):
    date_from: Optional[date]
    date_to: Optional[date]
    total_employees: int
    total_tasks: int
    total_hours: float
    by_task: list[TaskHours]
    by_employee: list[EmployeeHours]
    by_day: list[DailyHours]
