"""
Player database model.

Stores the player registry.  Sessions reference players by ``id``.
"""

import datetime
import uuid
from typing import Optional

from sqlalchemy import JSON, Column, DateTime
from sqlmodel import Field, SQLModel

from app.core.clock import utc_now


def new_id() -> str:
    return uuid.uuid4().hex


class Player(SQLModel, table=True):
    """A tested player.

    ``auto_created`` marks profiles generated on the fly by a quick test
    for a player that was not registered yet.
    """

    __tablename__ = "players"

    id: str = Field(default_factory=new_id, primary_key=True, max_length=32)
    first_name: str = Field(nullable=False, max_length=100, index=True)
    last_name: str = Field(default="", nullable=False, max_length=100, index=True)
    date_of_birth: Optional[datetime.date] = Field(default=None)

    # Contacts and club
    phone: Optional[str] = Field(default=None, max_length=50)
    email: Optional[str] = Field(default=None, max_length=255)
    parent_name: Optional[str] = Field(default=None, max_length=255)
    club: Optional[str] = Field(default=None, max_length=255)
    fit_ranking: Optional[str] = Field(default=None, max_length=50)
    coach_name: Optional[str] = Field(default=None, max_length=255)
    notes: Optional[str] = Field(default=None, max_length=2000)

    # Coach's 1-5 star first assessment
    initial_assessment: Optional[dict] = Field(default=None, sa_column=Column(JSON, nullable=True))
    auto_created: bool = Field(default=False, nullable=False)

    # Timestamps
    created_at: datetime.datetime = Field(default_factory=utc_now, sa_type=DateTime(timezone=True))
    updated_at: datetime.datetime = Field(default_factory=utc_now, sa_type=DateTime(timezone=True))

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()
