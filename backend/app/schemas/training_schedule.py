"""Training schedule schemas."""

from datetime import date, datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict

from backend.app.schemas.fields import LocationStr


class TrainingScheduleCreate(BaseModel):
    course_id: int
    start_date: date
    end_date: date
    location: Optional[LocationStr] = None


class TrainingScheduleUpdate(BaseModel):
    course_id: int = None
    start_date: date = None
    end_date: date = None
    location: Optional[LocationStr] = None


class TrainingScheduleRead(BaseModel):
    id: int
    course_id: int
    start_date: date
    end_date: date
    location: Optional[str] = None
    course_name: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)
