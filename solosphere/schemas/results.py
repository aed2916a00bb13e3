"""
Write acknowledgments returned by the store operations.
"""

from pydantic import BaseModel
from typing import Optional


class InsertResult(BaseModel):
    acknowledged: bool = True
    inserted_id: str


class UpdateResult(BaseModel):
    acknowledged: bool = True
    matched_count: int
    modified_count: int
    upserted_id: Optional[str] = None


class DeleteResult(BaseModel):
    acknowledged: bool = True
    deleted_count: int
