import enum
from datetime import datetime
from sqlalchemy import Column, Integer, String, Enum, DateTime
from models.base import Base

class UserRole(enum.Enum):
    operator = "operator"
    reviewer = "reviewer"
    admin = "admin"

class Users(Base):
    __tablename__ = 'users'

    id = Column(Integer, primary_key=True, index=True)
    username = Column(String, unique=True, index=True, nullable=False)
    email = Column(String, unique=True, index=True, nullable=False)
    hashed_password = Column(String, nullable=False)

    role = Column(Enum(UserRole), default=UserRole.operator, nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
