import enum
from sqlalchemy import Column, String, Float, DateTime, UniqueConstraint, func
from solosphere.core.database import Base
from solosphere.models.job import generate_id


class BidStatus(str, enum.Enum):
    """
    Status vocabulary used by the client application.

    The column itself is free text: status updates are not validated
    against this set and any value may replace any other.
    """
    PENDING = "Pending"
    IN_PROGRESS = "In Progress"
    COMPLETED = "Completed"
    REJECTED = "Rejected"


class Bid(Base):
    """
    A bid placed by a user on a job.

    `job_id` is a plain reference, not a foreign key: deleting a job leaves
    its bids in place. `buyer` is the job owner's email copied at bid time.
    """
    __tablename__ = "bids"
    __table_args__ = (
        # One bid per bidder per job; backs up the pre-check in crud.bid.place_bid
        UniqueConstraint("email", "job_id", name="uq_bids_email_job_id"),
    )

    id = Column(String(36), primary_key=True, default=generate_id, index=True)
    job_id = Column(String(36), nullable=True, index=True)
    email = Column(String, nullable=True, index=True)
    buyer = Column(String, nullable=True, index=True)
    status = Column(String, nullable=False, default=BidStatus.PENDING.value)

    title = Column(String, nullable=True)
    category = Column(String, nullable=True)
    price = Column(Float, nullable=True)
    comment = Column(String, nullable=True)
    deadline = Column(DateTime(timezone=True), nullable=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now())

    def __repr__(self):
        return f"<Bid(id={self.id}, job_id={self.job_id}, email='{self.email}', status='{self.status}')>"
