import uuid
from sqlalchemy import Column, Integer, String, Float, DateTime, JSON, func
from sqlalchemy.dialects.postgresql import JSONB
from solosphere.core.database import Base


def generate_id() -> str:
    return str(uuid.uuid4())


class Job(Base):
    """
    A job posted on the marketplace by a buyer.

    `buyer` is stored as a JSON sub-record ({"email", "name", "photo"}); its
    email is the ownership key used by the "my posted jobs" listing.
    """
    __tablename__ = "jobs"

    id = Column(String(36), primary_key=True, default=generate_id, index=True)
    title = Column(String, nullable=True, index=True)
    category = Column(String, nullable=True, index=True)
    description = Column(String, nullable=True)
    deadline = Column(DateTime(timezone=True), nullable=True)
    min_price = Column(Float, nullable=True)
    max_price = Column(Float, nullable=True)
    buyer = Column(JSON().with_variant(JSONB, "postgresql"), nullable=True)

    # Only ever incremented by a successful bid
    bid_count = Column(Integer, nullable=False, default=0)

    created_at = Column(DateTime(timezone=True), server_default=func.now())

    def __repr__(self):
        return f"<Job(id={self.id}, title='{self.title}', bid_count={self.bid_count})>"
