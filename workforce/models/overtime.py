from uuid import uuid4

from sqlalchemy import Column, Date, DateTime, ForeignKey, Numeric, String, Text

from workforce.core.clock import utcnow
from workforce.database import Base

APPROVAL_STATUSES = ("pending", "approved", "rejected")


class Overtime(Base):
    __tablename__ = "overtime"

    id = Column(String(36), primary_key=True, index=True, default=lambda: str(uuid4()))
    employee_id = Column(String(36), ForeignKey("employees.id"), nullable=False, index=True)
    date = Column(Date, nullable=False)
    hours = Column(Numeric(10, 2, asdecimal=False), nullable=False)
    reason = Column(Text, nullable=True)
    status = Column(String, nullable=False, default="pending", index=True)
    approved_by = Column(String(36), ForeignKey("profiles.id"), nullable=True)
    approved_at = Column(DateTime, nullable=True)
    created_at = Column(DateTime, nullable=False, default=utcnow)
    updated_at = Column(DateTime, nullable=False, default=utcnow, onupdate=utcnow)
