from datetime import datetime
from pydantic import BaseModel, EmailStr, field_validator
from typing import Optional
from models.users import UserRole

class UserBase(BaseModel):
    id: int
    username: str
    email: EmailStr
    role: UserRole
    created_at: datetime

    class Config:
        from_attributes = True


class UserUpdate(BaseModel):  # No need to inherit from UserBase to keep fields optional
    email: Optional[EmailStr] = None
    password: Optional[str] = None
    role: Optional[UserRole] = None

    @field_validator("email", "password", "role")
    @classmethod
    def not_null(cls, value, info):
        if value is None:
            raise ValueError(f"{info.field_name} may be omitted but not null")
        return value
