import logging
from fastapi import HTTPException, status
from sqlalchemy.orm import Session

logger = logging.getLogger(__name__)


def store_failure(db: Session, action: str, error: Exception) -> HTTPException:
    """Roll back the session and turn a database error into a 500."""
    db.rollback()
    logger.error(f"Error trying to {action}: {error}")
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=f"Failed to {action}: {error}"
    )
