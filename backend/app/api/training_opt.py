"""Opt-in/opt-out endpoints for student training schedules."""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from backend.app.core.exceptions import validation_error
from backend.app.db.session import get_db
from backend.app.dependencies.auth import get_current_user
from backend.app.schemas.student_training import TrainingStatusItem, TrainingStatusResponse, TrainingStatusUpdate
from backend.app.services.training_enrollment_service import list_training_statuses, set_training_status

router = APIRouter(tags=["training_enrollment"], dependencies=[Depends(get_current_user)])


@router.post("/training-opt-in-out", response_model=TrainingStatusResponse)
async def opt_in_out(status_in: TrainingStatusUpdate, db: Session = Depends(get_db)):
    record = set_training_status(db, status_in)
    return {"message": "Student training status updated successfully", "data": record}


@router.get("/student-training-statuses", response_model=list[TrainingStatusItem])
async def student_training_statuses(student_id: Optional[str] = None, db: Session = Depends(get_db)):
    # Absent and empty are both a missing parameter, not a validation failure
    if student_id is None or not student_id.strip():
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="student_id is required")
    try:
        parsed_id = int(student_id)
    except ValueError:
        raise validation_error({"student_id": ["The student id field must be an integer."]})
    return list_training_statuses(db, parsed_id)
