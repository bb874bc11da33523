"""Pydantic models for drafts submitted to the task store."""

from datetime import datetime

from pydantic import BaseModel, Field

from taskboard.domain.task import LocationOption, WhenOption


class TaskDraft(BaseModel):
    """Task fields supplied by the caller; the store assigns the rest."""

    title: str = Field(..., description="Task title")
    description: str = Field(default="", description="Detailed task description")
    when_option: WhenOption = Field(default=WhenOption.FLEXIBLE, description="When the task needs doing")
    selected_date: datetime | None = Field(default=None, description="Date paired with when_option")
    location_option: LocationOption = Field(default=LocationOption.REMOTE, description="Where the task is done")
    address: str = Field(default="", description="Address for on-site tasks")
    photo: str | None = Field(default=None, description="Opaque photo reference or URI")
    budget: str = Field(default="", description="Free-text budget")


class OfferDraft(BaseModel):
    """Offer fields supplied by the bidder."""

    user_id: str = Field(..., description="Bidder user ID")
    user_name: str = Field(..., description="Bidder display name")
    amount: float = Field(..., description="Offered price")
    message: str = Field(default="", description="Message to the task owner")


class QuestionDraft(BaseModel):
    """Question fields supplied by the asker."""

    user_id: str = Field(..., description="Asker user ID")
    user_name: str = Field(..., description="Asker display name")
    question: str = Field(..., description="Question text")
