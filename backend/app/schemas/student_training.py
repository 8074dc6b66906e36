"""Schemas for student opt-in/opt-out records."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict


class TrainingStatusUpdate(BaseModel):
    student_id: int
    training_schedule_id: int
    status: Literal["opt-in", "opt-out"]


class StudentTrainingRead(BaseModel):
    id: int
    student_id: int
    training_schedule_id: int
    status: str
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class TrainingStatusResponse(BaseModel):
    message: str
    data: StudentTrainingRead


class TrainingStatusItem(BaseModel):
    training_schedule_id: int
    status: str

    model_config = ConfigDict(from_attributes=True)
