"""Handles user registration."""

import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from backend.app.core.exceptions import ErrorBag, internal_error, validation_error
from backend.app.core.security import TOKEN_TYPE, get_password_hash, issue_access_token
from backend.app.db.session import get_db
from backend.app.models.user import ROLE_STUDENT, User
from backend.app.schemas.user import AuthTokenResponse, UserCreate
from backend.app.services.user_validation import check_password_confirmation, check_unique_email

logger = logging.getLogger(__name__)

router = APIRouter(tags=["auth"])


def _validate_registration(db: Session, user_in: UserCreate) -> None:
    errors: ErrorBag = {}
    check_unique_email(db, errors, user_in.email)
    check_password_confirmation(errors, user_in.password, user_in.password_confirmation)
    if errors:
        raise validation_error(errors)


@router.post("/register", response_model=AuthTokenResponse, status_code=status.HTTP_201_CREATED)
def register_user(user_in: UserCreate, db: Session = Depends(get_db)):
    _validate_registration(db, user_in)
    try:
        user = User(
            name=user_in.name,
            email=user_in.email,
            hashed_password=get_password_hash(user_in.password),  # Hash password before storing
            role=user_in.role or ROLE_STUDENT,
        )
        db.add(user)
        db.flush()
        token = issue_access_token(db, user, commit=False)
        db.commit()
    except SQLAlchemyError as exc:
        db.rollback()
        logger.exception("Registration failed for %s", user_in.email)
        raise internal_error("Registration failed.", exc)
    db.refresh(user)
    logger.info("Registered user %s with role %s", user.id, user.role)
    return {"user": user, "access_token": token, "token_type": TOKEN_TYPE}
