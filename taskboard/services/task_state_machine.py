"""Guarded status transitions for tasks and their offers, restricted to the task owner."""

import logging

from taskboard.core.errors import (
    InvalidStateTransitionError,
    OfferNotFoundError,
    PermissionDeniedError,
    QuestionNotFoundError,
)
from taskboard.core.logging import span
from taskboard.domain.offer import Offer, OfferStatus
from taskboard.domain.question import Question
from taskboard.domain.task import Task, TaskStatus
from taskboard.domain.update_models import TaskUpdate
from taskboard.services.task_store import TaskStore


logger = logging.getLogger(__name__)


TASK_TRANSITIONS: dict[TaskStatus, set[TaskStatus]] = {
    TaskStatus.ACTIVE: {TaskStatus.IN_PROGRESS, TaskStatus.CANCELLED},
    TaskStatus.IN_PROGRESS: {TaskStatus.COMPLETED, TaskStatus.CANCELLED},
    TaskStatus.COMPLETED: set(),
    TaskStatus.CANCELLED: set(),
}

OFFER_TRANSITIONS: dict[OfferStatus, set[OfferStatus]] = {
    OfferStatus.PENDING: {OfferStatus.ACCEPTED, OfferStatus.REJECTED},
    OfferStatus.ACCEPTED: set(),
    OfferStatus.REJECTED: set(),
}


def can_transition(*, current: TaskStatus, target: TaskStatus) -> bool:
    """Whether a task may move from current to target status."""
    return target in TASK_TRANSITIONS[current]


def _require_owner(store: TaskStore, task: Task, action: str) -> None:
    if not store.is_owner(task):
        msg = f"Only the owner of task {task.id} can {action}"
        raise PermissionDeniedError(msg, user_id=store.identity.user_id, task_id=task.id)


def _check_task_transition(task: Task, target: TaskStatus) -> None:
    if not can_transition(current=task.status, target=target):
        msg = f"Cannot move task {task.id} from {task.status} to {target}"
        raise InvalidStateTransitionError(msg)


def _require_offer(task: Task, offer_id: str) -> Offer:
    offer = task.find_offer(offer_id)
    if offer is None:
        raise OfferNotFoundError(task.id, offer_id)
    return offer


def _check_offer_transition(offer: Offer, target: OfferStatus) -> None:
    if target not in OFFER_TRANSITIONS[offer.status]:
        msg = f"Cannot move offer {offer.id} from {offer.status} to {target}"
        raise InvalidStateTransitionError(msg)


def _with_offer_status(task: Task, offer_id: str, status: OfferStatus) -> tuple[Offer, ...]:
    return tuple(
        offer.model_copy(update={"status": status}) if offer.id == offer_id else offer for offer in task.offers
    )


def accept_offer(store: TaskStore, *, task_id: str, offer_id: str) -> Task:
    """Accept a pending offer and move the task to in-progress.

    The offer and task change in a single store update. Other offers keep their status.

    Raises:
        TaskNotFoundError: If the task does not exist
        OfferNotFoundError: If the task has no such offer
        PermissionDeniedError: If the current identity does not own the task
        InvalidStateTransitionError: If the task is not active or the offer is not pending
    """
    with span("task_state_machine.accept_offer", task_id=task_id, offer_id=offer_id):
        task = store.require(task_id)
        _require_owner(store, task, "accept offers")
        offer = _require_offer(task, offer_id)
        _check_task_transition(task, TaskStatus.IN_PROGRESS)
        _check_offer_transition(offer, OfferStatus.ACCEPTED)

        updated = store.update(
            task_id,
            TaskUpdate(
                status=TaskStatus.IN_PROGRESS,
                offers=_with_offer_status(task, offer_id, OfferStatus.ACCEPTED),
            ),
        )

        logger.info("Accepted offer %s on task %s from %s", offer_id, task_id, offer.user_id)
        return updated


def reject_offer(store: TaskStore, *, task_id: str, offer_id: str) -> Task:
    """Mark a pending offer rejected. The offer stays on the task as history.

    Raises:
        TaskNotFoundError: If the task does not exist
        OfferNotFoundError: If the task has no such offer
        PermissionDeniedError: If the current identity does not own the task
        InvalidStateTransitionError: If the offer is not pending
    """
    with span("task_state_machine.reject_offer", task_id=task_id, offer_id=offer_id):
        task = store.require(task_id)
        _require_owner(store, task, "reject offers")
        offer = _require_offer(task, offer_id)
        _check_offer_transition(offer, OfferStatus.REJECTED)

        updated = store.update(task_id, TaskUpdate(offers=_with_offer_status(task, offer_id, OfferStatus.REJECTED)))

        logger.info("Rejected offer %s on task %s", offer_id, task_id)
        return updated


def complete_task(store: TaskStore, *, task_id: str) -> Task:
    """Transition an in-progress task to completed."""
    return _transition(store, task_id=task_id, target=TaskStatus.COMPLETED)


def cancel_task(store: TaskStore, *, task_id: str) -> Task:
    """Cancel an active or in-progress task."""
    return _transition(store, task_id=task_id, target=TaskStatus.CANCELLED)


def _transition(store: TaskStore, *, task_id: str, target: TaskStatus) -> Task:
    with span("task_state_machine.transition", task_id=task_id, target=str(target)):
        task = store.require(task_id)
        _require_owner(store, task, f"move it to {target}")
        _check_task_transition(task, target)

        updated = store.update(task_id, TaskUpdate(status=target))

        logger.info("Transitioned task %s to %s", task_id, target)
        return updated


def answer_question(store: TaskStore, *, task_id: str, question_id: str, answer: str) -> Question:
    """Answer a question on one of the current identity's tasks.

    Unlike TaskStore.answer_question, missing records always raise here.

    Raises:
        TaskNotFoundError: If the task does not exist
        QuestionNotFoundError: If the task has no such question
        PermissionDeniedError: If the current identity does not own the task
    """
    with span("task_state_machine.answer_question", task_id=task_id, question_id=question_id):
        task = store.require(task_id)
        _require_owner(store, task, "answer questions")
        if task.find_question(question_id) is None:
            raise QuestionNotFoundError(task_id, question_id)

        return store.answer_question(task_id, question_id, answer)
