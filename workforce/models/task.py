from uuid import uuid4

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Numeric, String, Text

from workforce.core.clock import utcnow
from workforce.database import Base

TASK_TYPES = ("warehouse", "logistics", "maintenance", "administrative")


class Task(Base):
    __tablename__ = "tasks"

    id = Column(String(36), primary_key=True, index=True, default=lambda: str(uuid4()))
    name = Column(String, nullable=False)
    description = Column(Text, nullable=True)
    type = Column(String, nullable=False)
    department_id = Column(String(36), ForeignKey("departments.id"), nullable=True, index=True)
    estimated_hours = Column(Numeric(10, 2, asdecimal=False), nullable=True)
    is_active = Column(Boolean, nullable=False, default=True)
    created_by = Column(String(36), ForeignKey("profiles.id"), nullable=True)
    created_at = Column(DateTime, nullable=False, default=utcnow)
    updated_at = Column(DateTime, nullable=False, default=utcnow, onupdate=utcnow)
