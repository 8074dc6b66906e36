"""Opt-in/opt-out record joining a student to a training schedule."""

from sqlalchemy import Column, DateTime, Enum, ForeignKey, Integer, UniqueConstraint
from sqlalchemy.orm import relationship

from backend.app.db.base_class import Base
from backend.app.core.time import utc_now

STATUS_OPT_IN = "opt-in"
STATUS_OPT_OUT = "opt-out"
TRAINING_STATUSES = (STATUS_OPT_IN, STATUS_OPT_OUT)


class StudentTraining(Base):
    __tablename__ = "student_training"

    id = Column(Integer, primary_key=True, index=True)
    student_id = Column(Integer, ForeignKey("students.id", ondelete="CASCADE"), nullable=False, index=True)
    training_schedule_id = Column(
        Integer, ForeignKey("training_schedules.id", ondelete="CASCADE"), nullable=False, index=True
    )
    status = Column(
        Enum(*TRAINING_STATUSES, name="student_training_status", create_constraint=True),
        nullable=False,
        default=STATUS_OPT_IN,
    )
    created_at = Column(DateTime, nullable=False, default=utc_now)
    updated_at = Column(DateTime, nullable=False, default=utc_now, onupdate=utc_now)

    __table_args__ = (
        UniqueConstraint("student_id", "training_schedule_id", name="uq_student_training_schedule"),
    )

    student = relationship("Student", back_populates="trainings")
    training_schedule = relationship("TrainingSchedule", back_populates="enrollments")
