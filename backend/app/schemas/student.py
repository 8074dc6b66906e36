"""Student schemas."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from backend.app.schemas.fields import NameStr, PhoneStr
from backend.app.schemas.user import UserRead


class StudentCreate(BaseModel):
    # users table
    name: NameStr
    email: EmailStr
    password: str = Field(min_length=6)
    password_confirmation: Optional[str] = None
    # students table
    first_name: NameStr
    last_name: NameStr
    phone: Optional[PhoneStr] = None


class StudentUpdate(BaseModel):
    first_name: NameStr = None
    last_name: NameStr = None
    phone: Optional[PhoneStr] = None
    name: NameStr = None
    email: EmailStr = None
    password: Optional[str] = None
    password_confirmation: Optional[str] = None


class StudentForUserCreate(BaseModel):
    first_name: NameStr
    last_name: NameStr
    phone: Optional[PhoneStr] = None


class StudentRead(BaseModel):
    id: int
    user_id: int
    first_name: str
    last_name: str
    email: str
    phone: Optional[str] = None
    created_at: datetime
    updated_at: datetime
    user: Optional[UserRead] = None

    model_config = ConfigDict(from_attributes=True)


class StudentCreateResponse(BaseModel):
    message: str
    user: UserRead
    student: StudentRead


class StudentResponse(BaseModel):
    message: str
    student: StudentRead
