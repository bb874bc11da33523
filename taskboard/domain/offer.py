"""Offer domain models and enums."""

from datetime import datetime
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field


class OfferStatus(StrEnum):
    """Offer lifecycle status."""

    PENDING = "pending"
    ACCEPTED = "accepted"
    REJECTED = "rejected"


class Offer(BaseModel):
    """A bid submitted by another user against a task."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Unique offer ID")
    task_id: str = Field(..., description="ID of the task this offer was made on")
    user_id: str = Field(..., description="Bidder user ID")
    user_name: str = Field(..., description="Bidder display name")
    amount: float = Field(..., description="Offered price")
    message: str = Field(default="", description="Message from the bidder")
    created_at: datetime = Field(..., description="Submission timestamp")
    status: OfferStatus = Field(default=OfferStatus.PENDING, description="Current offer status")
