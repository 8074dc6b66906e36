"""CRUD operations for courses."""

import logging
from typing import List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from backend.app.core.exceptions import internal_error
from backend.app.models.course import Course
from backend.app.models.student_training import StudentTraining
from backend.app.models.training_schedule import TrainingSchedule
from backend.app.schemas.course import CourseCreate, CourseUpdate

logger = logging.getLogger(__name__)


class CRUDCourse:
    def create(self, db: Session, *, obj_in: CourseCreate) -> Course:
        obj = Course(**obj_in.model_dump())
        try:
            db.add(obj)
            db.commit()
            db.refresh(obj)
        except SQLAlchemyError as exc:
            db.rollback()
            logger.exception("Failed to create course %s", obj_in.name)
            raise internal_error("Course creation failed.", exc)
        return obj

    def get(self, db: Session, *, course_id: int) -> Optional[Course]:
        return db.query(Course).filter(Course.id == course_id).first()

    def get_multi(self, db: Session) -> List[Course]:
        return db.query(Course).order_by(Course.id).all()

    def update(self, db: Session, *, db_obj: Course, obj_in: CourseUpdate) -> Course:
        course_id = db_obj.id
        update_data = obj_in.model_dump(exclude_unset=True)
        try:
            for field, value in update_data.items():
                setattr(db_obj, field, value)
            db.commit()
            db.refresh(db_obj)
        except SQLAlchemyError as exc:
            db.rollback()
            logger.exception("Failed to update course %s", course_id)
            raise internal_error("Update failed.", exc)
        return db_obj

    def delete(self, db: Session, *, db_obj: Course) -> Course:
        course_id = db_obj.id
        schedule_ids = db.query(TrainingSchedule.id).filter(TrainingSchedule.course_id == course_id)
        try:
            db.query(StudentTraining).filter(
                StudentTraining.training_schedule_id.in_(schedule_ids.scalar_subquery())
            ).delete(synchronize_session=False)
            db.query(TrainingSchedule).filter(TrainingSchedule.course_id == course_id).delete(
                synchronize_session=False
            )
            db.delete(db_obj)
            db.commit()
        except SQLAlchemyError as exc:
            db.rollback()
            logger.exception("Failed to delete course %s", course_id)
            raise internal_error("Delete failed.", exc)
        return db_obj


course_crud = CRUDCourse()
