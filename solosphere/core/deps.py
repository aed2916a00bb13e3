"""
FastAPI dependencies for authentication.

The session token lives in an httpOnly cookie set by POST /jwt. Protected
routes depend on get_current_identity, which rejects the request with 401
when the cookie is missing, expired or tampered with.
"""

import logging
from typing import Optional
from fastapi import Depends, HTTPException, status
from fastapi.security import APIKeyCookie
from jose import JWTError
from pydantic import ValidationError

from solosphere.core.config import settings
from solosphere.core.security import decode_token
from solosphere.schemas.auth import TokenIdentity

logger = logging.getLogger(__name__)

# Reads the token cookie; auto_error=False so we answer with our own 401 body
cookie_scheme = APIKeyCookie(name=settings.COOKIE_NAME, auto_error=False)


def unauthorized() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="UnAuthorize Access",
    )


async def get_current_identity(
    token: Optional[str] = Depends(cookie_scheme),
) -> TokenIdentity:
    """
    Extract and validate the caller identity from the session cookie.

    Raises:
        HTTPException 401: If the cookie is absent or the token is invalid
    """
    if not token:
        raise unauthorized()

    try:
        payload = decode_token(token)
        return TokenIdentity.model_validate(payload)
    except (JWTError, ValidationError) as e:
        logger.warning(f"Rejected session token: {e}")
        raise unauthorized()
