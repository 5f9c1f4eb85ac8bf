# portfolio/models/user.py
from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime


class User(BaseModel):
    """Admin account as stored. Never returned directly to clients."""
    id: int
    email: str
    password_hash: str = Field(exclude=True, repr=False)
    name: str = ""
    role: str = "admin"
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class UserResponse(BaseModel):
    """Public view of a user; carries no credential material."""
    id: int
    email: str
    name: str
    role: str
    created_at: Optional[datetime] = None

    @classmethod
    def from_user(cls, user: User) -> "UserResponse":
        return cls(
            id=user.id,
            email=user.email,
            name=user.name,
            role=user.role,
            created_at=user.created_at,
        )


class LoginRequest(BaseModel):
    email: str = ""
    password: str = ""


class RegisterRequest(BaseModel):
    email: str = ""
    password: str = ""
    name: str = ""
