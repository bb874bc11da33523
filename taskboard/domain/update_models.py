"""Update models for task store operations."""

from datetime import datetime
from typing import Any, Self

from pydantic import BaseModel, model_validator

from taskboard.domain.offer import Offer
from taskboard.domain.question import Question
from taskboard.domain.task import LocationOption, TaskStatus, WhenOption


# Task fields that may legitimately be cleared to None
NULLABLE_FIELDS = frozenset({"selected_date", "photo"})


class TaskUpdate(BaseModel):
    """Partial task update. Only fields explicitly set by the caller are applied.

    Values are not checked against the task's current state; only the optional
    fields (selected_date, photo) may be set to None.
    """

    title: str | None = None
    description: str | None = None
    when_option: WhenOption | None = None
    selected_date: datetime | None = None
    location_option: LocationOption | None = None
    address: str | None = None
    photo: str | None = None
    budget: str | None = None
    created_at: datetime | None = None
    status: TaskStatus | None = None
    user_id: str | None = None
    offers: tuple[Offer, ...] | None = None
    questions: tuple[Question, ...] | None = None

    @model_validator(mode="after")
    def validate_required_fields_not_cleared(self) -> Self:
        """Reject an explicit None for fields every task must have."""
        cleared = sorted(
            name for name in self.model_fields_set - NULLABLE_FIELDS if getattr(self, name) is None
        )
        if cleared:
            raise ValueError(f"Cannot clear required task fields: {', '.join(cleared)}")
        return self

    def changes(self) -> dict[str, Any]:
        """Return the explicitly set fields as a dict, keeping nested models intact."""
        return {name: getattr(self, name) for name in self.model_fields_set}
