from pydantic import BaseModel, EmailStr, Field
from typing import Optional
from models.users import UserRole

class UserLoginSchema(BaseModel):
    """Schema for user login request"""
    username: str
    password: str

class UserResponseSchema(BaseModel):
    """Schema for the authenticated user"""
    id: int
    username: str
    email: Optional[EmailStr] = None
    role: UserRole = UserRole.operator

    class Config:
        from_attributes = True

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.admin

    @property
    def is_reviewer(self) -> bool:
        return self.role in (UserRole.reviewer, UserRole.admin)

class UserCreateSchema(BaseModel):
    username: str = Field(..., min_length=1)
    email: EmailStr
    password: str = Field(..., min_length=8)

    class Config:
        from_attributes = True

class TokenSchema(BaseModel):
    """Schema for JWT token response"""
    access_token: str
    token_type: str
