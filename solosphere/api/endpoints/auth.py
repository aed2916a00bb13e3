"""
Cookie session endpoints.

- POST /jwt: Sign the posted claims and store the token in an httpOnly cookie
- POST /logout: Clear the session cookie
"""

import logging
from fastapi import APIRouter, Response

from solosphere.core.config import settings
from solosphere.core.security import create_access_token
from solosphere.schemas.auth import SessionRequest, SessionResponse

router = APIRouter(tags=["Authentication"])
logger = logging.getLogger(__name__)


@router.post("/jwt", response_model=SessionResponse)
def issue_token(request: SessionRequest, response: Response):
    """
    Issue a session token for an already signed-in user.

    The whole request body is signed, so extra claims travel with the token.
    """
    token = create_access_token(data=request.model_dump())
    response.set_cookie(
        key=settings.COOKIE_NAME,
        value=token,
        httponly=True,
        secure=settings.COOKIE_SECURE,
        samesite=settings.COOKIE_SAMESITE,
        max_age=settings.ACCESS_TOKEN_EXPIRE_MINUTES * 60,
    )

    logger.info(f"Issued session token for {request.email}")
    return SessionResponse(success=True)


@router.post("/logout", response_model=SessionResponse)
def logout(response: Response):
    """Drop the session cookie."""
    response.delete_cookie(
        key=settings.COOKIE_NAME,
        httponly=True,
        secure=settings.COOKIE_SECURE,
        samesite=settings.COOKIE_SAMESITE,
    )
    return SessionResponse(success=True)
