"""Opt-in/opt-out ledger between students and training schedules."""

import logging

from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from backend.app.core.exceptions import ErrorBag, add_error, internal_error, validation_error
from backend.app.core.time import utc_now
from backend.app.models.student import Student
from backend.app.models.student_training import StudentTraining
from backend.app.models.training_schedule import TrainingSchedule
from backend.app.schemas.student_training import TrainingStatusUpdate

logger = logging.getLogger(__name__)


def _validate_status_update(db: Session, status_in: TrainingStatusUpdate) -> None:
    errors: ErrorBag = {}
    if db.query(Student.id).filter(Student.id == status_in.student_id).first() is None:
        add_error(errors, "student_id", "The selected student id is invalid.")
    if db.query(TrainingSchedule.id).filter(TrainingSchedule.id == status_in.training_schedule_id).first() is None:
        add_error(errors, "training_schedule_id", "The selected training schedule id is invalid.")
    if errors:
        raise validation_error(errors)


def _insert_for(db: Session):
    if db.get_bind().dialect.name == "postgresql":
        return postgresql.insert
    return sqlite.insert


def set_training_status(db: Session, status_in: TrainingStatusUpdate) -> StudentTraining:
    """Create or overwrite the status for a (student, schedule) pair.

    The unique constraint on the pair makes the upsert atomic; concurrent calls
    for the same pair end with one row holding the last written status.
    """
    _validate_status_update(db, status_in)

    now = utc_now()
    insert = _insert_for(db)
    stmt = insert(StudentTraining).values(
        student_id=status_in.student_id,
        training_schedule_id=status_in.training_schedule_id,
        status=status_in.status,
        created_at=now,
        updated_at=now,
    )
    stmt = stmt.on_conflict_do_update(
        index_elements=[StudentTraining.student_id, StudentTraining.training_schedule_id],
        set_={"status": stmt.excluded.status, "updated_at": now},
    )
    try:
        db.execute(stmt)
        db.commit()
    except SQLAlchemyError as exc:
        db.rollback()
        logger.exception(
            "Failed to set training status for student %s on schedule %s",
            status_in.student_id,
            status_in.training_schedule_id,
        )
        raise internal_error("An error occurred while updating training status", exc)

    record = (
        db.query(StudentTraining)
        .filter(
            StudentTraining.student_id == status_in.student_id,
            StudentTraining.training_schedule_id == status_in.training_schedule_id,
        )
        .one()
    )
    logger.info(
        "Student %s set to %s for training schedule %s",
        record.student_id,
        record.status,
        record.training_schedule_id,
    )
    return record


def list_training_statuses(db: Session, student_id: int) -> list[StudentTraining]:
    return (
        db.query(StudentTraining)
        .filter(StudentTraining.student_id == student_id)
        .order_by(StudentTraining.id)
        .all()
    )
