from pydantic import AliasChoices, BaseModel, Field
from typing import Optional
from datetime import datetime

from solosphere.models.bid import BidStatus


class BidCreateRequest(BaseModel):
    """Schema for placing a bid on a job"""
    job_id: Optional[str] = Field(None, validation_alias=AliasChoices("job_id", "jobId"))
    email: Optional[str] = None
    buyer: Optional[str] = Field(None, description="Email of the job owner")
    title: Optional[str] = None
    category: Optional[str] = None
    price: Optional[float] = None
    comment: Optional[str] = None
    deadline: Optional[datetime] = None
    status: str = BidStatus.PENDING.value


class BidStatusUpdateRequest(BaseModel):
    """New status for a bid; any string is accepted"""
    status: str


class BidResponse(BaseModel):
    """Schema for bid response"""
    id: str
    job_id: Optional[str] = None
    email: Optional[str] = None
    buyer: Optional[str] = None
    status: str
    title: Optional[str] = None
    category: Optional[str] = None
    price: Optional[float] = None
    comment: Optional[str] = None
    deadline: Optional[datetime] = None
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True
