"""
Pydantic schemas for the cookie session endpoints.
"""

from pydantic import BaseModel


class SessionRequest(BaseModel):
    """Claims posted by the client after it has signed the user in."""
    email: str

    class Config:
        extra = "allow"  # Any additional claims are signed into the token as-is


class SessionResponse(BaseModel):
    success: bool = True


class TokenIdentity(BaseModel):
    """Verified identity decoded from the session token."""
    email: str

    class Config:
        extra = "allow"
