"""Login, logout and current-user endpoints."""

import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from backend.app.core.security import TOKEN_TYPE, issue_access_token, revoke_access_token, verify_password
from backend.app.db.session import get_db
from backend.app.dependencies.auth import get_current_token, get_current_user
from backend.app.models.access_token import AccessToken
from backend.app.models.user import User
from backend.app.schemas.login import LoginRequest
from backend.app.schemas.user import AuthTokenResponse, MessageResponse, UserRead

logger = logging.getLogger(__name__)

router = APIRouter(tags=["auth"])


@router.post("/login", response_model=AuthTokenResponse)
def login(credentials: LoginRequest, db: Session = Depends(get_db)):
    user = db.query(User).filter(User.email == credentials.email).first()
    # Same response for unknown email and wrong password
    if not user or not verify_password(credentials.password, user.hashed_password):
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid credentials.")

    token = issue_access_token(db, user)
    db.refresh(user)
    return {"user": user, "access_token": token, "token_type": TOKEN_TYPE}


@router.post("/logout", response_model=MessageResponse)
def logout(access_token: AccessToken = Depends(get_current_token), db: Session = Depends(get_db)):
    revoke_access_token(db, access_token)
    return {"message": "Logged out successfully"}


@router.get("/me", response_model=UserRead)
def read_me(current_user: User = Depends(get_current_user)):
    return current_user
