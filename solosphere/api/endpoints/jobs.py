import logging
from typing import List, Optional
from fastapi import APIRouter, HTTPException, Depends, Query, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from solosphere.api.errors import store_failure
from solosphere.core.database import get_db
from solosphere.core.deps import get_current_identity
from solosphere.core.exceptions import UnauthorizedAccessError
from solosphere.crud import job as job_crud
from solosphere.schemas.auth import TokenIdentity
from solosphere.schemas.job import JobCreateRequest, JobResponse, JobUpdateRequest
from solosphere.schemas.results import DeleteResult, InsertResult, UpdateResult

router = APIRouter(tags=["Jobs"])
logger = logging.getLogger(__name__)


@router.post("/add-job", response_model=InsertResult)
def create_job(
    request: JobCreateRequest,
    db: Session = Depends(get_db),
    identity: TokenIdentity = Depends(get_current_identity)
):
    """
    Post a new job. Requires a session cookie.

    All fields are optional; bid_count starts at 0.
    """
    try:
        return job_crud.create(db, request)
    except SQLAlchemyError as e:
        raise store_failure(db, "create job", e)


@router.get("/jobs", response_model=List[JobResponse])
def list_jobs(db: Session = Depends(get_db)):
    """All jobs on the marketplace."""
    return job_crud.get_all(db)


@router.get("/jobs/{email}", response_model=List[JobResponse])
def list_jobs_by_owner(
    email: str,
    db: Session = Depends(get_db),
    identity: TokenIdentity = Depends(get_current_identity)
):
    """
    Jobs posted by a user.

    Callers may only list their own jobs: a path email that differs from
    the session identity is answered with 401.
    """
    try:
        return job_crud.get_by_owner_email(db, email, identity.email)
    except UnauthorizedAccessError as e:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=e.message)


@router.get("/job/{job_id}", response_model=Optional[JobResponse])
def get_job(job_id: str, db: Session = Depends(get_db)):
    """
    Retrieve a job by ID.

    An unknown ID returns 200 with a null body rather than 404.
    """
    return job_crud.get_by_id(db, job_id)


@router.put("/update-job/{job_id}", response_model=UpdateResult)
def update_job(
    job_id: str,
    request: JobUpdateRequest,
    db: Session = Depends(get_db),
    identity: TokenIdentity = Depends(get_current_identity)
):
    """
    Update the supplied fields of a job.

    This is an upsert: when the job does not exist it is created under the
    given ID and `upserted_id` is set in the response.
    """
    try:
        return job_crud.upsert(db, job_id, request)
    except SQLAlchemyError as e:
        raise store_failure(db, "update job", e)


@router.delete("/jobs/{job_id}", response_model=DeleteResult)
def delete_job(
    job_id: str,
    db: Session = Depends(get_db),
    identity: TokenIdentity = Depends(get_current_identity)
):
    """
    Delete a job by ID. Deleting an unknown job succeeds with deleted_count 0.
    """
    try:
        return job_crud.delete(db, job_id)
    except SQLAlchemyError as e:
        raise store_failure(db, "delete job", e)


@router.get("/all-jobs", response_model=List[JobResponse])
def search_jobs(
    category: Optional[str] = Query(None, alias="filter"),
    search: Optional[str] = None,
    sort: Optional[str] = None,
    db: Session = Depends(get_db)
):
    """
    Search the marketplace.

    Args:
        filter: Exact category
        search: Case-insensitive title substring
        sort: "asc" or "dsc" on deadline
    """
    return job_crud.search(db, category=category, search_text=search, sort=sort)
