"""Bearer-token login/logout and the get_current_user dependency."""

import logging
from datetime import datetime, timezone
from typing import Annotated, Any

import jwt
from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.core.security import create_access_token, decode_access_token, verify_password
from app.models import RevokedToken, User
from app.schemas.auth import LoginRequest, LoginResponse, MeResponse, UserOut
from app.schemas.common import MessageResponse

logger = logging.getLogger(__name__)
router = APIRouter()
security = HTTPBearer(auto_error=False)


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


@router.post("/login", response_model=LoginResponse)
def login(
    body: LoginRequest,
    db: Annotated[Session, Depends(get_db)],
) -> LoginResponse:
    """
    Authenticate with email and password; returns the user and a bearer token.
    Include the token in the Authorization header as: Bearer <token>
    """
    email = body.email.strip()
    user = db.query(User).filter(User.email == email).first()
    if user is None or not verify_password(body.password, user.password_hash):
        logger.info("Login failed for email=%s", email)
        raise _unauthorized("Invalid credentials.")
    token = create_access_token(sub=user.id)
    logger.info("Login succeeded: user_id=%s", user.id)
    return LoginResponse(user=UserOut.model_validate(user), token=token)


def get_token_payload(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
) -> dict[str, Any]:
    """Dependency: decoded claims of the presented Bearer JWT. Raises 401 if missing or invalid."""
    if credentials is None:
        raise _unauthorized("Unauthenticated.")
    try:
        return decode_access_token(credentials.credentials)
    except jwt.PyJWTError:
        raise _unauthorized("Invalid or expired token.")


def get_current_user(
    payload: Annotated[dict[str, Any], Depends(get_token_payload)],
    db: Annotated[Session, Depends(get_db)],
) -> User:
    """Dependency: require a valid, unrevoked Bearer JWT and return its user. Raises 401 otherwise."""
    try:
        user_id = int(payload["sub"])
    except (KeyError, TypeError, ValueError):
        raise _unauthorized("Invalid token payload.")
    revoked = db.query(RevokedToken.id).filter(RevokedToken.jti == payload["jti"]).first()
    if revoked is not None:
        raise _unauthorized("Token has been revoked.")
    user = db.get(User, user_id)
    if user is None:
        raise _unauthorized("User not found.")
    return user


@router.post("/logout", response_model=MessageResponse)
def logout(
    payload: Annotated[dict[str, Any], Depends(get_token_payload)],
    user: Annotated[User, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
) -> MessageResponse:
    """Invalidate the presented token; later requests with it get 401."""
    db.add(
        RevokedToken(
            jti=payload["jti"],
            user_id=user.id,
            expires_at=datetime.fromtimestamp(payload["exp"], tz=timezone.utc),
        )
    )
    try:
        db.commit()
    except IntegrityError:
        # Concurrent logout with the same token already recorded it.
        db.rollback()
    logger.info("Logout: user_id=%s", user.id)
    return MessageResponse(message="Logged out successfully")


@router.get("/me", response_model=MeResponse)
def me(user: Annotated[User, Depends(get_current_user)]) -> MeResponse:
    """Return the user the presented token belongs to."""
    return MeResponse(user=UserOut.model_validate(user))
