"""
Test session schemas.

A session is one player's full run through the protocol on a date.
Sessions are written once when the wizard is saved and afterwards only
replaced as a whole or deleted.
"""

import datetime
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from app.core.clock import utc_now
from app.schemas.protocol import Category
from app.schemas.series import SeriesResult


class TestSession(BaseModel):
    """Immutable snapshot of a session, as consumed by the engine."""

    __test__ = False

    model_config = ConfigDict(frozen=True)

    id: str
    player_id: str
    player_name: str
    date: datetime.date
    category: Category
    coach: str = ""
    date_of_birth: Optional[datetime.date] = None
    note: Optional[str] = None
    completed: bool = True
    created_at: datetime.datetime = Field(default_factory=utc_now)
    series: list[SeriesResult] = Field(default_factory=list)


class TestSessionCreate(BaseModel):
    """Schema for saving a session from the wizard (also used for full replacement)."""

    __test__ = False

    player_id: str = Field(..., description="Owning player id")
    player_name: Optional[str] = Field(None, description="Defaults to the player's full name")
    date: datetime.date
    category: Category
    coach: str = Field("", max_length=255)
    date_of_birth: Optional[datetime.date] = None
    note: Optional[str] = Field(None, max_length=1000)
    completed: Literal[True] = Field(True, description="Only complete sessions are saved; drafts stay in the wizard")
    series: list[SeriesResult] = Field(default_factory=list)


class TestSessionResponse(TestSession):
    """Schema for a stored session in API responses."""

    __test__ = False

    model_config = ConfigDict(frozen=True, from_attributes=True)

    updated_at: datetime.datetime
