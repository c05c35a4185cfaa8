from uuid import uuid4

from sqlalchemy import Column, DateTime, ForeignKey, String, Text

from workforce.core.clock import utcnow
from workforce.database import Base


class Department(Base):
    __tablename__ = "departments"

    id = Column(String(36), primary_key=True, index=True, default=lambda: str(uuid4()))
    name = Column(String, nullable=False)
    description = Column(Text, nullable=True)
    manager_id = Column(String(36), ForeignKey("profiles.id"), nullable=True)
    created_at = Column(DateTime, nullable=False, default=utcnow)
    updated_at = Column(DateTime, nullable=False, default=utcnow, onupdate=utcnow)
