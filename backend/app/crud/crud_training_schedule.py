"""CRUD operations for training schedules."""

import logging
from typing import List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, joinedload

from backend.app.core.exceptions import internal_error
from backend.app.models.student_training import StudentTraining
from backend.app.models.training_schedule import TrainingSchedule
from backend.app.schemas.training_schedule import TrainingScheduleCreate, TrainingScheduleUpdate

logger = logging.getLogger(__name__)


class CRUDTrainingSchedule:
    def create(self, db: Session, *, obj_in: TrainingScheduleCreate) -> TrainingSchedule:
        obj = TrainingSchedule(**obj_in.model_dump())
        try:
            db.add(obj)
            db.commit()
            db.refresh(obj)
        except SQLAlchemyError as exc:
            db.rollback()
            logger.exception("Failed to create training schedule for course %s", obj_in.course_id)
            raise internal_error("Failed to create training schedule", exc)
        return obj

    def get(self, db: Session, *, schedule_id: int) -> Optional[TrainingSchedule]:
        return (
            db.query(TrainingSchedule)
            .options(joinedload(TrainingSchedule.course))
            .filter(TrainingSchedule.id == schedule_id)
            .first()
        )

    def get_multi(self, db: Session) -> List[TrainingSchedule]:
        return (
            db.query(TrainingSchedule)
            .options(joinedload(TrainingSchedule.course))
            .order_by(TrainingSchedule.id)
            .all()
        )

    def update(self, db: Session, *, db_obj: TrainingSchedule, obj_in: TrainingScheduleUpdate) -> TrainingSchedule:
        schedule_id = db_obj.id
        update_data = obj_in.model_dump(exclude_unset=True)
        try:
            for field, value in update_data.items():
                setattr(db_obj, field, value)
            db.commit()
            db.refresh(db_obj)
        except SQLAlchemyError as exc:
            db.rollback()
            logger.exception("Failed to update training schedule %s", schedule_id)
            raise internal_error("Failed to update training schedule", exc)
        return db_obj

    def delete(self, db: Session, *, db_obj: TrainingSchedule) -> TrainingSchedule:
        schedule_id = db_obj.id
        try:
            db.query(StudentTraining).filter(StudentTraining.training_schedule_id == schedule_id).delete(
                synchronize_session=False
            )
            db.delete(db_obj)
            db.commit()
        except SQLAlchemyError as exc:
            db.rollback()
            logger.exception("Failed to delete training schedule %s", schedule_id)
            raise internal_error("Failed to delete training schedule", exc)
        return db_obj


training_schedule_crud = CRUDTrainingSchedule()
