"""
Pydantic schemas for ReflectionEntry and anonymized statistics.
"""
from pydantic import BaseModel, Field
from typing import Dict, Optional


class ReflectionCreate(BaseModel):
    """Schema for a reflection submission."""
    mood: int = Field(ge=1, le=5)
    sleep_hours: float = Field(ge=0, le=24)
    text: str = Field(default="", max_length=5000)
    age: Optional[int] = Field(default=None, ge=0, le=120)


class ReflectionResponse(BaseModel):
    """Schema for reflection entry response."""
    id: str
    email: str
    mood: int
    sleep_hours: float
    text: str = ""
    age: Optional[int] = None
    ts: str


class AnonymizedStats(BaseModel):
    """Aggregate-only figures; carries no user identity."""
    total_submissions: int
    average_mood: float
    average_sleep: float
    mood_distribution: Dict[int, int]
    age_groups: Dict[str, int]
