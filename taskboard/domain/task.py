"""Task domain models and enums."""

from datetime import datetime
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field

from taskboard.domain.offer import Offer
from taskboard.domain.question import Question


class WhenOption(StrEnum):
    """When the task needs doing."""

    FLEXIBLE = "flexible"
    BEFORE = "before"  # Any time before selected_date
    ON = "on"  # Exactly on selected_date


class LocationOption(StrEnum):
    """Where the task is done."""

    REMOTE = "remote"
    ADDRESS = "address"


class TaskStatus(StrEnum):
    """Task lifecycle status."""

    ACTIVE = "active"
    IN_PROGRESS = "in-progress"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class Task(BaseModel):
    """Task data transfer object.

    Tasks are immutable; the store replaces a task with an updated copy on every mutation.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Unique task ID")
    title: str = Field(..., description="Task title")
    description: str = Field(default="", description="Detailed task description")
    when_option: WhenOption = Field(..., description="flexible, before a date, or on a date")
    selected_date: datetime | None = Field(default=None, description="Date paired with when_option")
    location_option: LocationOption = Field(..., description="remote or at an address")
    address: str = Field(default="", description="Address, empty for remote tasks")
    photo: str | None = Field(default=None, description="Opaque photo reference or URI")
    budget: str = Field(default="", description="Free-text budget, not validated as an amount")
    created_at: datetime = Field(..., description="Creation timestamp")
    status: TaskStatus = Field(default=TaskStatus.ACTIVE, description="Current lifecycle status")
    user_id: str = Field(..., description="Owning user ID")
    offers: tuple[Offer, ...] = Field(default=(), description="Offers in submission order")
    questions: tuple[Question, ...] = Field(default=(), description="Questions in submission order")

    def find_offer(self, offer_id: str) -> Offer | None:
        """Return the offer with the given ID, or None."""
        return next((offer for offer in self.offers if offer.id == offer_id), None)

    def find_question(self, question_id: str) -> Question | None:
        """Return the question with the given ID, or None."""
        return next((question for question in self.questions if question.id == question_id), None)
