from workforce.models.attendance import Attendance
from workforce.models.department import Department
from workforce.models.employee import Employee
from workforce.models.leave_request import LeaveRequest
from workforce.models.overtime import Overtime
from workforce.models.profile import Profile
from workforce.models.project import Project
from workforce.models.task import Task
from workforce.models.time_session import TimeSession
from workforce.models.user import User
from workforce.models.work_hour import WorkHour

__all__ = [
    "Attendance",
    "Department",
    "Employee",
    "LeaveRequest",
    "Overtime",
    "Profile",
    "Project",
    "Task",
    "TimeSession",
    "User",
    "WorkHour",
]
