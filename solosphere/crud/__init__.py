"""
Store operations for the jobs and bids tables.

Each function takes the injected database session as its first argument,
keeping the API routes free of query code.
"""

from solosphere.crud import job, bid

__all__ = ["job", "bid"]
