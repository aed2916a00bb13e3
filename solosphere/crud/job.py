"""
Job store.

Encapsulates every database operation on the jobs table. Database errors
are not caught here; callers decide how to report them.
"""

import logging
from typing import List, Optional
from sqlalchemy.orm import Session
from solosphere.core.exceptions import UnauthorizedAccessError
from solosphere.models.job import Job
from solosphere.schemas.job import JobCreateRequest, JobUpdateRequest
from solosphere.schemas.results import DeleteResult, InsertResult, UpdateResult

logger = logging.getLogger(__name__)


def create(db: Session, job_data: JobCreateRequest) -> InsertResult:
    """
    Insert a new job.

    bid_count starts at 0 unless the caller supplied one.

    Returns:
        InsertResult carrying the generated job id
    """
    fields = job_data.model_dump(exclude_unset=True)
    if fields.get("bid_count") is None:
        fields["bid_count"] = 0

    db_job = Job(**fields)
    db.add(db_job)
    db.commit()
    db.refresh(db_job)

    logger.info(f"Created job {db_job.id}: {db_job.title}")
    return InsertResult(inserted_id=db_job.id)


def get_all(db: Session) -> List[Job]:
    """Every job, unfiltered and in storage order."""
    return db.query(Job).all()


def get_by_id(db: Session, job_id: str) -> Optional[Job]:
    """
    Retrieve a job by its ID.

    Returns:
        Job instance if found, None otherwise
    """
    return db.query(Job).filter(Job.id == job_id).first()


def get_by_owner_email(db: Session, email: str, identity_email: str) -> List[Job]:
    """
    Jobs posted by the owner with the given email.

    Args:
        db: Database session
        email: Owner email to list jobs for
        identity_email: Email of the verified caller

    Raises:
        UnauthorizedAccessError: If the caller asks for someone else's jobs
    """
    if identity_email != email:
        raise UnauthorizedAccessError()

    return db.query(Job).filter(Job.buyer["email"].as_string() == email).all()


def upsert(db: Session, job_id: str, job_data: JobUpdateRequest) -> UpdateResult:
    """
    Merge the supplied fields into a job, creating it when it does not exist.

    Fields missing from job_data are left as they are. When no job has the
    given id, a new one is inserted under that id with the supplied fields.

    Returns:
        UpdateResult with matched/modified counts, and upserted_id on insert
    """
    fields = job_data.model_dump(exclude_unset=True)
    job = get_by_id(db, job_id)

    if job is None:
        db.add(Job(id=job_id, bid_count=0, **fields))
        db.commit()
        logger.info(f"Upserted new job {job_id}")
        return UpdateResult(matched_count=0, modified_count=0, upserted_id=job_id)

    modified = False
    for key, value in fields.items():
        if getattr(job, key) != value:
            setattr(job, key, value)
            modified = True

    db.commit()

    return UpdateResult(matched_count=1, modified_count=1 if modified else 0)


def delete(db: Session, job_id: str) -> DeleteResult:
    """
    Delete a job by ID. Deleting a missing job is not an error.

    Bids referencing the job are left in place.
    """
    deleted = db.query(Job).filter(Job.id == job_id).delete(synchronize_session=False)
    db.commit()

    if deleted:
        logger.info(f"Deleted job {job_id}")
    return DeleteResult(deleted_count=deleted)



def search(
    db: Session,
    category: Optional[str] = None,
    search_text: Optional[str] = None,
    sort: Optional[str] = None
) -> List[Job]:
    """
    Marketplace listing with optional category filter, title search and
    deadline ordering.

    Args:
        db: Database session
        category: Exact category to keep; None or "" means any category
        search_text: Case-insensitive substring of the title; None or "" matches all
        sort: "asc" for earliest deadline first, any other non-empty value
            for latest first; None or "" keeps storage order

    Returns:
        List of Job instances
    """
    query = db.query(Job)

    if search_text:
        query = query.filter(Job.title.icontains(search_text, autoescape=True))

    if category:
        query = query.filter(Job.category == category)

    if sort:
        query = query.order_by(Job.deadline.asc() if sort == "asc" else Job.deadline.desc())

    return query.all()
