"""Validation helpers shared by registration and student management."""

from sqlalchemy.orm import Session

from backend.app.core.exceptions import ErrorBag, add_error
from backend.app.models.user import User


def email_taken(db: Session, email: str, ignore_user_id: int | None = None) -> bool:
    query = db.query(User.id).filter(User.email == email)
    if ignore_user_id is not None:
        query = query.filter(User.id != ignore_user_id)
    return query.first() is not None


def check_unique_email(db: Session, errors: ErrorBag, email: str, ignore_user_id: int | None = None) -> None:
    if email_taken(db, email, ignore_user_id=ignore_user_id):
        add_error(errors, "email", "The email has already been taken.")


def check_password_confirmation(errors: ErrorBag, password: str | None, confirmation: str | None) -> None:
    if password != confirmation:
        add_error(errors, "password", "The password field confirmation does not match.")
