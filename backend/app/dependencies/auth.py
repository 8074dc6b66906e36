"""Authentication dependencies for resolving the bearer token and current user."""

from fastapi import Depends, Header, HTTPException, status
from sqlalchemy.orm import Session

from backend.app.core.security import decode_access_token
from backend.app.db.session import get_db
from backend.app.models.access_token import AccessToken
from backend.app.models.user import User

UNAUTHENTICATED = "Unauthenticated."


def _unauthenticated() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=UNAUTHENTICATED,
        headers={"WWW-Authenticate": "Bearer"},
    )


def get_current_token(db: Session = Depends(get_db), authorization: str | None = Header(default=None)) -> AccessToken:
    # Expect Authorization: Bearer <token>
    if not authorization or not authorization.startswith("Bearer "):
        raise _unauthenticated()
    token = authorization.split(" ", 1)[1].strip()
    try:
        payload = decode_access_token(token)
    except ValueError:
        raise _unauthenticated()

    jti = payload.get("jti")
    try:
        user_id = int(payload.get("sub"))
    except (TypeError, ValueError):
        raise _unauthenticated()
    if not jti:
        raise _unauthenticated()

    # A token is only valid while its row exists; logout deletes the row.
    access_token = (
        db.query(AccessToken)
        .filter(AccessToken.jti == jti, AccessToken.user_id == user_id)
        .first()
    )
    if access_token is None or access_token.user is None:
        raise _unauthenticated()
    return access_token


def get_current_user(access_token: AccessToken = Depends(get_current_token)) -> User:
    return access_token.user
