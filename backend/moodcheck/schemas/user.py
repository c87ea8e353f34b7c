"""
Pydantic schemas for User and Session.
"""
from pydantic import BaseModel, EmailStr
from typing import Literal, Optional


class UserBase(BaseModel):
    """Base user schema."""
    username: str
    email: EmailStr
    address: str = ""
    emergency_contact_name: str = ""
    emergency_contact_phone: str = ""


class UserCreate(UserBase):
    """Schema for user registration."""
    password: str
    role: Literal["user", "admin"] = "user"


class UserUpdate(BaseModel):
    """Schema for profile update; password changes need both passwords."""
    username: str
    address: str = ""
    emergency_contact_name: str = ""
    emergency_contact_phone: str = ""
    current_password: Optional[str] = None
    new_password: Optional[str] = None


class UserResponse(BaseModel):
    """Schema for user response."""
    username: str
    email: str
    address: str = ""
    emergency_contact_name: str = ""
    emergency_contact_phone: str = ""


class UserLogin(BaseModel):
    """Schema for user login."""
    email: str
    password: str


class Token(BaseModel):
    """Schema for JWT token response."""
    access_token: str
    token_type: str = "bearer"
    role: str
    user: UserResponse


class SessionResponse(BaseModel):
    """Schema for the current session."""
    user: UserResponse
    role: str
