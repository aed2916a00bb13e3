"""
Bid store.

Placing a bid touches two tables: the bid row is inserted and the target
job's bid_count is incremented. The two writes are committed separately, so
a failure in between leaves the counter one short; no compensation is
attempted.
"""

import logging
from typing import List
from sqlalchemy import func, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from solosphere.core.exceptions import DuplicateBidError
from solosphere.models.bid import Bid
from solosphere.models.job import Job
from solosphere.schemas.bid import BidCreateRequest
from solosphere.schemas.results import InsertResult, UpdateResult

logger = logging.getLogger(__name__)


def get_by_email_and_job(db: Session, email: str, job_id: str):
    return db.query(Bid).filter(Bid.email == email, Bid.job_id == job_id).first()


def place_bid(db: Session, bid_data: BidCreateRequest) -> InsertResult:
    """
    Insert a bid and bump the referenced job's bid_count by one.

    The duplicate check runs before the insert. Two concurrent requests for
    the same (email, job_id) can both pass it; the unique constraint on the
    bids table then rejects the second insert, which is reported the same way.

    Raises:
        DuplicateBidError: If the bidder already has a bid on this job
    """
    if get_by_email_and_job(db, bid_data.email, bid_data.job_id):
        raise DuplicateBidError(bid_data.email, bid_data.job_id)

    db_bid = Bid(**bid_data.model_dump())
    db.add(db_bid)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        logger.warning(f"Concurrent duplicate bid on job {bid_data.job_id} rejected by constraint")
        raise DuplicateBidError(bid_data.email, bid_data.job_id)
    db.refresh(db_bid)

    db.execute(
        update(Job)
        .where(Job.id == bid_data.job_id)
        .values(bid_count=func.coalesce(Job.bid_count, 0) + 1)
        .execution_options(synchronize_session=False)
    )
    db.commit()

    logger.info(f"Placed bid {db_bid.id} by {db_bid.email} on job {db_bid.job_id}")
    return InsertResult(inserted_id=db_bid.id)


def get_for_user(db: Session, email: str, as_buyer: bool = False) -> List[Bid]:
    """
    Bids related to a user.

    Args:
        db: Database session
        email: User email
        as_buyer: True for bids received on the user's own jobs,
            False for bids the user placed

    Returns:
        List of Bid instances
    """
    if as_buyer:
        return db.query(Bid).filter(Bid.buyer == email).all()
    return db.query(Bid).filter(Bid.email == email).all()


def update_status(db: Session, bid_id: str, status: str) -> UpdateResult:
    """
    Overwrite a bid's status.

    Any value replaces any other; there is no transition table.
    """
    bid = db.query(Bid).filter(Bid.id == bid_id).first()
    if bid is None:
        return UpdateResult(matched_count=0, modified_count=0)

    modified = bid.status != status
    bid.status = status
    db.commit()

    logger.info(f"Bid {bid_id} status set to {status}")
    return UpdateResult(matched_count=1, modified_count=1 if modified else 0)
