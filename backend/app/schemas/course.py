"""Course schemas."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from backend.app.schemas.fields import NameStr, TextStr


class CourseCreate(BaseModel):
    name: NameStr
    description: Optional[TextStr] = None
    duration: int = Field(ge=1)


class CourseUpdate(BaseModel):
    # Omitted fields are left alone; an explicit null is rejected for name/duration.
    name: NameStr = None
    description: Optional[TextStr] = None
    duration: int = Field(default=None, ge=1)


class CourseRead(BaseModel):
    id: int
    name: str
    description: Optional[str] = None
    duration: int
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)
