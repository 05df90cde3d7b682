"""
Player API schemas.

Pydantic models for player-related request/response validation.
"""

import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field


class InitialAssessment(BaseModel):
    """Coach's first impression, 1-5 stars per stroke."""

    serve: Optional[int] = Field(None, ge=1, le=5)
    forehand: Optional[int] = Field(None, ge=1, le=5)
    backhand: Optional[int] = Field(None, ge=1, le=5)
    volley: Optional[int] = Field(None, ge=1, le=5)
    return_: Optional[int] = Field(None, ge=1, le=5, alias="return")
    combined: Optional[int] = Field(None, ge=1, le=5)
    movement: Optional[int] = Field(None, ge=1, le=5)
    coach_notes: Optional[str] = Field(None, max_length=2000)
    assessment_date: Optional[datetime.date] = None

    model_config = ConfigDict(populate_by_name=True)


# Shared properties
class PlayerBase(BaseModel):
    """Base player schema with common fields."""
    first_name: str = Field(..., min_length=1, max_length=100)
    last_name: str = Field("", max_length=100)
    date_of_birth: Optional[datetime.date] = None
    phone: Optional[str] = Field(None, max_length=50)
    email: Optional[EmailStr] = None
    parent_name: Optional[str] = Field(None, max_length=255)
    club: Optional[str] = Field(None, max_length=255)
    fit_ranking: Optional[str] = Field(None, max_length=50)
    coach_name: Optional[str] = Field(None, max_length=255)
    notes: Optional[str] = Field(None, max_length=2000)
    initial_assessment: Optional[InitialAssessment] = None


# Request schemas
class PlayerCreate(PlayerBase):
    """Schema for registering a player."""
    auto_created: bool = False


class PlayerUpdate(BaseModel):
    """Schema for updating a player profile.  Omitted fields are kept."""
    first_name: Optional[str] = Field(None, min_length=1, max_length=100)
    last_name: Optional[str] = Field(None, max_length=100)
    date_of_birth: Optional[datetime.date] = None
    phone: Optional[str] = Field(None, max_length=50)
    email: Optional[EmailStr] = None
    parent_name: Optional[str] = Field(None, max_length=255)
    club: Optional[str] = Field(None, max_length=255)
    fit_ranking: Optional[str] = Field(None, max_length=50)
    coach_name: Optional[str] = Field(None, max_length=255)
    notes: Optional[str] = Field(None, max_length=2000)
    initial_assessment: Optional[InitialAssessment] = None


# Response schemas
class PlayerResponse(PlayerBase):
    """Schema for player data in API responses."""
    id: str
    full_name: str
    auto_created: bool
    created_at: datetime.datetime
    updated_at: datetime.datetime

    model_config = ConfigDict(from_attributes=True)
