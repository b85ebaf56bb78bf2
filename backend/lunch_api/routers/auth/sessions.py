"""
Session endpoints - /api/sessions.

Signing in hands out the user's bearer auth token; signing out rotates it.
"""

from fastapi import APIRouter, Depends, Request, status
from sqlalchemy.orm import Session

from lunch_api.services.domain import UserService
from lunch_shared.infrastructure.db import get_db
from lunch_shared.security.rate_limit import LOGIN_RATE_LIMIT, limiter
from lunch_shared.utils.schemas import SessionCreateRequest, SessionOutput


router = APIRouter(prefix="/api/sessions", tags=["sessions"])


@router.post("", response_model=SessionOutput, status_code=status.HTTP_201_CREATED)
@limiter.limit(LOGIN_RATE_LIMIT)
def create_session(
    request: Request,
    body: SessionCreateRequest,
    db: Session = Depends(get_db),
) -> SessionOutput:
    """
    Sign in with email and password.

    Rate limited per client IP.
    """
    user = UserService(db).sign_in(body.email, body.password)
    return SessionOutput.model_validate(user)


@router.delete("/{token}", status_code=status.HTTP_204_NO_CONTENT)
def destroy_session(token: str, db: Session = Depends(get_db)) -> None:
    """Sign out: the token stops working and the user gets a fresh one."""
    UserService(db).sign_out(token)
