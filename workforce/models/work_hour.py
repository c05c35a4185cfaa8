from uuid import uuid4

from sqlalchemy import Column, DateTime, ForeignKey, Integer, Numeric, String, Text

from workforce.core.clock import utcnow
from workforce.database import Base

WORK_STATUSES = ("in_progress", "completed", "pending_approval", "approved")


class WorkHour(Base):
    __tablename__ = "work_hours"

    id = Column(String(36), primary_key=True, index=True, default=lambda: str(uuid4()))
    employee_id = Column(String(36), ForeignKey("employees.id"), nullable=False, index=True)
    task_id = Column(String(36), ForeignKey("tasks.id"), nullable=False, index=True)
    start_time = Column(DateTime, nullable=False, index=True)
    end_time = Column(DateTime, nullable=True)
    break_time_minutes = Column(Integer, nullable=False, default=0)
    total_hours = Column(Numeric(10, 2, asdecimal=False), nullable=True)
    notes = Column(Text, nullable=True)
    status = Column(String, nullable=False, default="in_progress", index=True)
    approved_by = Column(String(36), ForeignKey("profiles.id"), nullable=True)
    approved_at = Column(DateTime, nullable=True)
    created_at = Column(DateTime, nullable=False, default=utcnow)
    updated_at = Column(DateTime, nullable=False, default=utcnow, onupdate=utcnow)
