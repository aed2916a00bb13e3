from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime


class BuyerInfo(BaseModel):
    """Job owner as captured on the job form"""
    email: Optional[str] = None
    name: Optional[str] = None
    photo: Optional[str] = None


class JobFields(BaseModel):
    """
    Job fields a client may send.

    Nothing is required: a job is stored with whatever the caller supplied.
    """
    title: Optional[str] = None
    category: Optional[str] = None
    description: Optional[str] = None
    deadline: Optional[datetime] = None
    min_price: Optional[float] = None
    max_price: Optional[float] = None
    buyer: Optional[BuyerInfo] = None


class JobCreateRequest(JobFields):
    """Schema for posting a new job"""
    bid_count: Optional[int] = Field(None, ge=0)


class JobUpdateRequest(JobFields):
    """
    Partial job update. Only the fields present in the request body are
    written; the rest of the stored job is left untouched.
    """
    pass


class JobResponse(BaseModel):
    """Schema for job response"""
    id: str
    title: Optional[str] = None
    category: Optional[str] = None
    description: Optional[str] = None
    deadline: Optional[datetime] = None
    min_price: Optional[float] = None
    max_price: Optional[float] = None
    buyer: Optional[BuyerInfo] = None
    bid_count: int = 0
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True  # Allows conversion from SQLAlchemy models
