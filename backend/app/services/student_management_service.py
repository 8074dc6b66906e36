"""Student directory operations that span the users and students tables.

A student is always bound to exactly one user. Creating a student creates its
user and deleting a student deletes its user; both happen in one transaction.
"""

import logging
from typing import Optional

from fastapi import HTTPException, status
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session, joinedload

from backend.app.core.exceptions import ErrorBag, add_error, internal_error, validation_error
from backend.app.core.security import get_password_hash
from backend.app.models.access_token import AccessToken
from backend.app.models.student import Student
from backend.app.models.student_training import StudentTraining
from backend.app.models.user import ROLE_STUDENT, User
from backend.app.schemas.student import StudentCreate, StudentForUserCreate, StudentUpdate
from backend.app.services.user_validation import check_password_confirmation, check_unique_email

logger = logging.getLogger(__name__)

USER_FIELDS = ("name", "email", "password")
STUDENT_FIELDS = ("first_name", "last_name", "phone")


def _student_query(db: Session):
    return db.query(Student).options(joinedload(Student.user))


def list_students(db: Session, user_id: Optional[int] = None) -> list[Student]:
    query = _student_query(db)
    if user_id is not None:
        query = query.filter(Student.user_id == user_id)
    return query.order_by(Student.id).all()


def get_student(db: Session, student_id: int) -> Student:
    student = _student_query(db).filter(Student.id == student_id).first()
    if not student:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Student not found")
    return student


def get_student_by_user_id(db: Session, user_id: int) -> Student:
    student = _student_query(db).filter(Student.user_id == user_id).first()
    if not student:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Student not found for this user")
    return student


def create_student_with_user(db: Session, student_in: StudentCreate) -> tuple[User, Student]:
    errors: ErrorBag = {}
    check_unique_email(db, errors, student_in.email)
    check_password_confirmation(errors, student_in.password, student_in.password_confirmation)
    if errors:
        raise validation_error(errors)

    try:
        user = User(
            name=student_in.name,
            email=student_in.email,
            hashed_password=get_password_hash(student_in.password),
            role=ROLE_STUDENT,
        )
        db.add(user)
        db.flush()

        student = Student(
            user_id=user.id,
            first_name=student_in.first_name,
            last_name=student_in.last_name,
            phone=student_in.phone,
            email=user.email,
        )
        db.add(student)
        db.commit()
    except SQLAlchemyError as exc:
        db.rollback()
        logger.exception("Failed to create user and student for %s", student_in.email)
        raise internal_error("Failed to create user and student", exc)

    db.refresh(user)
    db.refresh(student)
    logger.info("Created student %s bound to user %s", student.id, user.id)
    return user, student


def update_student_and_user(db: Session, student: Student, student_in: StudentUpdate) -> Student:
    supplied = student_in.model_dump(exclude_unset=True)
    user = student.user

    errors: ErrorBag = {}
    if "email" in supplied:
        check_unique_email(db, errors, student_in.email, ignore_user_id=user.id)
    if student_in.password:
        if len(student_in.password) < 6:
            add_error(errors, "password", "The password field must be at least 6 characters.")
        check_password_confirmation(errors, student_in.password, student_in.password_confirmation)
    if errors:
        raise validation_error(errors)

    try:
        if any(field in supplied for field in USER_FIELDS):
            if "name" in supplied:
                user.name = student_in.name
            if "email" in supplied:
                user.email = student_in.email
            # An empty password leaves the current one in place
            if student_in.password:
                user.hashed_password = get_password_hash(student_in.password)

        for field in STUDENT_FIELDS:
            if field in supplied:
                setattr(student, field, supplied[field])

        db.commit()
    except SQLAlchemyError as exc:
        db.rollback()
        logger.exception("Failed to update student %s", student.id)
        raise internal_error("Failed to update student and user", exc)

    return get_student(db, student.id)


def create_student_for_user(db: Session, user_id: int, student_in: StudentForUserCreate) -> Student:
    user = db.query(User).filter(User.id == user_id).first()
    if not user:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")

    existing = db.query(Student.id).filter(Student.user_id == user_id).first()
    if existing:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Student record already exists for this user",
        )

    try:
        student = Student(
            user_id=user.id,
            first_name=student_in.first_name,
            last_name=student_in.last_name,
            phone=student_in.phone,
            email=user.email,
        )
        db.add(student)
        db.commit()
    except IntegrityError:
        db.rollback()
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Student record already exists for this user",
        )
    except SQLAlchemyError as exc:
        db.rollback()
        logger.exception("Failed to create student for user %s", user_id)
        raise internal_error("Failed to create student for user", exc)

    logger.info("Created student %s for existing user %s", student.id, user_id)
    return get_student(db, student.id)


def delete_student_and_user(db: Session, student: Student) -> None:
    student_id, user_id = student.id, student.user_id
    try:
        # Dependents first: enrollment records, the student row, tokens, then the user.
        db.query(StudentTraining).filter(StudentTraining.student_id == student_id).delete(synchronize_session=False)
        db.query(Student).filter(Student.id == student_id).delete(synchronize_session=False)
        db.query(AccessToken).filter(AccessToken.user_id == user_id).delete(synchronize_session=False)
        db.query(User).filter(User.id == user_id).delete(synchronize_session=False)
        db.commit()
    except SQLAlchemyError as exc:
        db.rollback()
        logger.exception("Failed to delete student %s and user %s", student_id, user_id)
        raise internal_error("Failed to delete student and user", exc)
    logger.info("Deleted student %s and user %s", student_id, user_id)
