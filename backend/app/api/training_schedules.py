"""Training schedule endpoints.

Every response carries the parent course's name as ``course_name``.
"""

from datetime import date

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from backend.app.core.exceptions import ErrorBag, add_error, validation_error
from backend.app.crud.crud_course import course_crud
from backend.app.crud.crud_training_schedule import training_schedule_crud
from backend.app.db.session import get_db
from backend.app.dependencies.auth import get_current_user
from backend.app.models.training_schedule import TrainingSchedule
from backend.app.schemas.training_schedule import (
    TrainingScheduleCreate,
    TrainingScheduleRead,
    TrainingScheduleUpdate,
)
from backend.app.schemas.user import MessageResponse

router = APIRouter(prefix="/training-schedules", tags=["training_schedules"], dependencies=[Depends(get_current_user)])

DATE_ORDER_MESSAGE = "start_date must be before or equal to end_date"


def _get_schedule_or_404(db: Session, schedule_id: int) -> TrainingSchedule:
    schedule = training_schedule_crud.get(db, schedule_id=schedule_id)
    if not schedule:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Training Schedule not found")
    return schedule


def _check_course_exists(db: Session, errors: ErrorBag, course_id: int) -> None:
    if course_crud.get(db, course_id=course_id) is None:
        add_error(errors, "course_id", "The selected course id is invalid.")


def _validate_schedule_create(db: Session, schedule_in: TrainingScheduleCreate) -> None:
    errors: ErrorBag = {}
    _check_course_exists(db, errors, schedule_in.course_id)
    if schedule_in.start_date > schedule_in.end_date:
        add_error(errors, "start_date", "The start date must be a date before or equal to end date.")
        add_error(errors, "end_date", "The end date must be a date after or equal to start date.")
    if errors:
        raise validation_error(errors)


def _validate_schedule_update(db: Session, schedule: TrainingSchedule, schedule_in: TrainingScheduleUpdate) -> None:
    supplied = schedule_in.model_dump(exclude_unset=True)
    errors: ErrorBag = {}
    if "course_id" in supplied:
        _check_course_exists(db, errors, schedule_in.course_id)
    if errors:
        raise validation_error(errors)

    # Compare the dates the row will hold after the patch, not only the supplied ones.
    start: date = supplied.get("start_date", schedule.start_date)
    end: date = supplied.get("end_date", schedule.end_date)
    if start > end:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=DATE_ORDER_MESSAGE)


@router.get("", response_model=list[TrainingScheduleRead])
async def list_training_schedules(db: Session = Depends(get_db)):
    return training_schedule_crud.get_multi(db)


@router.post("", response_model=TrainingScheduleRead, status_code=status.HTTP_201_CREATED)
async def create_training_schedule(schedule_in: TrainingScheduleCreate, db: Session = Depends(get_db)):
    _validate_schedule_create(db, schedule_in)
    return training_schedule_crud.create(db, obj_in=schedule_in)


@router.get("/{schedule_id}", response_model=TrainingScheduleRead)
async def get_training_schedule(schedule_id: int, db: Session = Depends(get_db)):
    return _get_schedule_or_404(db, schedule_id)


@router.put("/{schedule_id}", response_model=TrainingScheduleRead)
async def update_training_schedule(
    schedule_id: int,
    schedule_in: TrainingScheduleUpdate,
    db: Session = Depends(get_db),
):
    schedule = _get_schedule_or_404(db, schedule_id)
    _validate_schedule_update(db, schedule, schedule_in)
    return training_schedule_crud.update(db, db_obj=schedule, obj_in=schedule_in)


@router.delete("/{schedule_id}", response_model=MessageResponse)
async def delete_training_schedule(schedule_id: int, db: Session = Depends(get_db)):
    schedule = _get_schedule_or_404(db, schedule_id)
    training_schedule_crud.delete(db, db_obj=schedule)
    return {"message": "Training Schedule deleted successfully"}
