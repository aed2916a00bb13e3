import logging
from typing import List
from fastapi import APIRouter, HTTPException, Depends, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from solosphere.api.errors import store_failure
from solosphere.core.database import get_db
from solosphere.core.deps import get_current_identity
from solosphere.core.exceptions import DuplicateBidError
from solosphere.crud import bid as bid_crud
from solosphere.schemas.auth import TokenIdentity
from solosphere.schemas.bid import BidCreateRequest, BidResponse, BidStatusUpdateRequest
from solosphere.schemas.results import InsertResult, UpdateResult

router = APIRouter(tags=["Bids"])
logger = logging.getLogger(__name__)


@router.post("/add-bid", response_model=InsertResult)
def place_bid(
    request: BidCreateRequest,
    db: Session = Depends(get_db),
    identity: TokenIdentity = Depends(get_current_identity)
):
    """
    Place a bid on a job and increment the job's bid_count.

    A second bid by the same email on the same job is rejected with 400.
    """
    try:
        return bid_crud.place_bid(db, request)
    except DuplicateBidError as e:
        logger.warning(f"Duplicate bid from {e.email} on job {e.job_id}")
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)
    except SQLAlchemyError as e:
        raise store_failure(db, "place bid", e)


@router.get("/bids/{email}", response_model=List[BidResponse])
def list_bids(
    email: str,
    buyer: bool = False,
    db: Session = Depends(get_db),
    identity: TokenIdentity = Depends(get_current_identity)
):
    """
    Bids for a user.

    With `?buyer=true` returns the bids received on the user's jobs,
    otherwise the bids the user placed.
    """
    return bid_crud.get_for_user(db, email, as_buyer=buyer)


@router.patch("/bid-status-update/{bid_id}", response_model=UpdateResult)
def update_bid_status(
    bid_id: str,
    request: BidStatusUpdateRequest,
    db: Session = Depends(get_db),
    identity: TokenIdentity = Depends(get_current_identity)
):
    """
    Set a bid's status.

    Any signed-in user may update any bid; ownership of the job is not checked.
    """
    try:
        return bid_crud.update_status(db, bid_id, request.status)
    except SQLAlchemyError as e:
        raise store_failure(db, "update bid status", e)
