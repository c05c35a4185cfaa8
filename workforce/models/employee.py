from uuid import uuid4

from sqlalchemy import Column, Date, DateTime, ForeignKey, Numeric, String
from sqlalchemy.orm import relationship

from workforce.core.clock import today, utcnow
from workforce.database import Base

EMPLOYEE_STATUSES = ("active", "inactive", "on_leave")


class Employee(Base):
    __tablename__ = "employees"

    id = Column(String(36), primary_key=True, index=True, default=lambda: str(uuid4()))
    profile_id = Column(String(36), ForeignKey("profiles.id"), nullable=False, unique=True)
    department_id = Column(String(36), ForeignKey("departments.id"), nullable=True, index=True)
    hire_date = Column(Date, nullable=False, default=today)
    hourly_rate = Column(Numeric(10, 2, asdecimal=False), nullable=True)
    status = Column(String, nullable=False, default="active")
    emergency_contact_name = Column(String, nullable=True)
    emergency_contact_phone = Column(String, nullable=True)
    created_at = Column(DateTime, nullable=False, default=utcnow)
    updated_at = Column(DateTime, nullable=False, default=utcnow, onupdate=utcnow)

    profile = relationship("Profile", back_populates="employee")
