"""
Database models package.
"""

from solosphere.models.job import Job
from solosphere.models.bid import Bid, BidStatus

__all__ = ["Job", "Bid", "BidStatus"]
