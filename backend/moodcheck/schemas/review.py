"""
Pydantic schemas for Review entity.
"""
from pydantic import BaseModel, Field
from typing import Optional


class ReviewCreate(BaseModel):
    """Schema for review creation. Rating is clamped, comment truncated."""
    rating: float = Field(allow_inf_nan=False)
    comment: str = ""


class ReviewUpdate(BaseModel):
    """Schema for review update."""
    rating: Optional[float] = Field(default=None, allow_inf_nan=False)
    comment: Optional[str] = None


class ReviewResponse(BaseModel):
    """Schema for review response."""
    id: str
    rating: int
    comment: str
    user: str
    ts: str
    ts_updated: Optional[str] = None
