"""User schemas used for registration and responses."""

from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from backend.app.schemas.fields import NameStr


class UserCreate(BaseModel):
    name: NameStr
    email: EmailStr
    password: str = Field(min_length=6)
    password_confirmation: Optional[str] = None
    role: Optional[Literal["admin", "student"]] = None


class UserRead(BaseModel):
    id: int
    name: str
    email: str
    role: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class AuthTokenResponse(BaseModel):
    user: UserRead
    access_token: str
    token_type: str = "Bearer"


class MessageResponse(BaseModel):
    message: str
