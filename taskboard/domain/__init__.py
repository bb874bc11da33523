"""Domain models and DTOs."""

from taskboard.domain.create_models import OfferDraft, QuestionDraft, TaskDraft
from taskboard.domain.offer import Offer, OfferStatus
from taskboard.domain.question import Question
from taskboard.domain.task import LocationOption, Task, TaskStatus, WhenOption
from taskboard.domain.update_models import TaskUpdate
from taskboard.domain.user import Identity


__all__ = [
    "Identity",
    "LocationOption",
    "Offer",
    "OfferDraft",
    "OfferStatus",
    "Question",
    "QuestionDraft",
    "Task",
    "TaskDraft",
    "TaskStatus",
    "TaskUpdate",
    "WhenOption",
]
