"""
Domain errors raised by the job and bid stores.

The API layer translates these into HTTP responses; database errors
(SQLAlchemyError) are not wrapped and propagate as-is.
"""


class UnauthorizedAccessError(Exception):
    """The verified identity is not allowed to read the requested records."""

    def __init__(self, message: str = "UnAuthorize Access"):
        self.message = message
        super().__init__(message)


class DuplicateBidError(Exception):
    """A bid for the same (email, job_id) pair already exists."""

    def __init__(self, email: str, job_id: str, message: str = "You have already apply bid on this job!"):
        self.email = email
        self.job_id = job_id
        self.message = message
        super().__init__(message)
