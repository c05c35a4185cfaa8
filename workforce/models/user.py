from sqlalchemy import Column, Integer, String

from workforce.database import Base


class User(Base):
    """Login credential row. Identity lives on Profile."""

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    username = Column(String, nullable=False, unique=True)
    password_hash = Column(String, nullable=False)
