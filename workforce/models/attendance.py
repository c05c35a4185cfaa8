from uuid import uuid4

from sqlalchemy import Column, Date, DateTime, ForeignKey, Numeric, String, UniqueConstraint

from workforce.core.clock import utcnow
from workforce.database import Base

ATTENDANCE_STATUSES = ("present", "absent", "late", "half_day")


class Attendance(Base):
    __tablename__ = "attendance"
    __table_args__ = (
        UniqueConstraint("employee_id", "date", name="uq_attendance_employee_date"),
    )

    id = Column(String(36), primary_key=True, index=True, default=lambda: str(uuid4()))
    employee_id = Column(String(36), ForeignKey("employees.id"), nullable=False, index=True)
    date = Column(Date, nullable=False)
    clock_in = Column(DateTime, nullable=True)
    clock_out = Column(DateTime, nullable=True)
    total_hours = Column(Numeric(10, 2, asdecimal=False), nullable=True)
    status = Column(String, nullable=False, default="present")
    created_at = Column(DateTime, nullable=False, default=utcnow)
    updated_at = Column(DateTime, nullable=False, default=utcnow, onupdate=utcnow)
