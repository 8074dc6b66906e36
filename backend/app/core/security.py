"""Security utilities: password hashing, JWT encoding and personal access tokens.

Every issued JWT carries a ``jti`` claim that is also stored in the
``personal_access_tokens`` table. A token only authenticates while its row
exists, so deleting the row revokes exactly that token.
"""

import logging
import uuid
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

import jwt
from passlib.context import CryptContext
from sqlalchemy.orm import Session

from backend.app.core.settings import get_settings
from backend.app.models.access_token import AccessToken
from backend.app.models.user import User

logger = logging.getLogger(__name__)

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

TOKEN_TYPE = "Bearer"
DEFAULT_TOKEN_NAME = "auth_token"


def get_password_hash(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: Optional[str]) -> bool:
    if not hashed_password:
        return False
    return pwd_context.verify(plain_password, hashed_password)


def create_access_token(user_id: int, jti: Optional[str] = None, expires_minutes: Optional[int] = None) -> str:
    settings = get_settings()
    if expires_minutes is None:
        expires_minutes = settings.access_token_expire_minutes
    payload = {"sub": str(user_id), "jti": jti or uuid.uuid4().hex}
    if expires_minutes is not None:
        payload["exp"] = datetime.now(timezone.utc) + timedelta(minutes=expires_minutes)
    return jwt.encode(payload, settings.secret_key, algorithm="HS256")


def decode_access_token(token: str) -> Dict[str, Any]:
    settings = get_settings()
    try:
        return jwt.decode(token, settings.secret_key, algorithms=["HS256"])
    except jwt.ExpiredSignatureError as exc:
        raise ValueError("Expired token") from exc
    except jwt.InvalidTokenError as exc:
        raise ValueError("Invalid token") from exc


def issue_access_token(db: Session, user: User, name: str = DEFAULT_TOKEN_NAME, commit: bool = True) -> str:
    """Persist a new token row for ``user`` and return the encoded JWT.

    Existing tokens of the user are left untouched.
    """
    jti = uuid.uuid4().hex
    db.add(AccessToken(user_id=user.id, name=name, jti=jti))
    if commit:
        db.commit()
    else:
        db.flush()
    return create_access_token(user_id=user.id, jti=jti)


def revoke_access_token(db: Session, token: AccessToken) -> None:
    token_id, user_id = token.id, token.user_id
    db.delete(token)
    db.commit()
    logger.info("Revoked access token %s for user %s", token_id, user_id)
