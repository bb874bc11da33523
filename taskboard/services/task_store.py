"""In-memory task store holding tasks with their offers and questions.

The store keeps an immutable tuple of immutable tasks. Every mutation builds a new
tuple and swaps it in, so any tuple or task handed out earlier never changes.
"""

import logging
from collections.abc import Callable
from datetime import UTC, datetime

from taskboard.core.config import MissingParentPolicy, constants, settings
from taskboard.core.errors import QuestionNotFoundError, TaskboardError, TaskNotFoundError
from taskboard.core.ids import generate_id
from taskboard.core.logging import log_with_user_context, span
from taskboard.domain.create_models import OfferDraft, QuestionDraft, TaskDraft
from taskboard.domain.offer import Offer, OfferStatus
from taskboard.domain.question import Question
from taskboard.domain.task import Task, TaskStatus
from taskboard.domain.update_models import TaskUpdate
from taskboard.domain.user import Identity


logger = logging.getLogger(__name__)


def _now() -> datetime:
    return datetime.now(UTC)


class TaskStore:
    """Authoritative collection of tasks for the current session.

    Lookups and projections are full scans over the collection; there is no secondary index.

    Args:
        identity: The acting user, stamped as owner on created tasks
        missing_parent_policy: Whether offer/question mutations against unknown IDs are
            dropped (IGNORE) or raise a not-found error (RAISE). Defaults to settings.
    """

    def __init__(
        self,
        identity: Identity,
        *,
        missing_parent_policy: MissingParentPolicy | None = None,
        tasks: tuple[Task, ...] = (),
    ) -> None:
        self.identity = identity
        self.missing_parent_policy = missing_parent_policy or settings.missing_parent_policy
        self._tasks: tuple[Task, ...] = tuple(tasks)

    # Reads

    @property
    def tasks(self) -> tuple[Task, ...]:
        """All tasks in insertion order."""
        return self._tasks

    @property
    def my_tasks(self) -> tuple[Task, ...]:
        """Tasks owned by the current identity, regardless of status."""
        return self.find(owner_id=self.identity.user_id)

    @property
    def all_tasks(self) -> tuple[Task, ...]:
        """Browsable tasks: every task that is still active."""
        return self.find(status=TaskStatus.ACTIVE)

    def find(self, *, owner_id: str | None = None, status: TaskStatus | None = None) -> tuple[Task, ...]:
        """Return tasks matching all given filters, in insertion order."""
        return tuple(
            task
            for task in self._tasks
            if (owner_id is None or task.user_id == owner_id) and (status is None or task.status == status)
        )

    def get(self, task_id: str) -> Task | None:
        """Return the task with the given ID, or None."""
        return next((task for task in self._tasks if task.id == task_id), None)

    def require(self, task_id: str) -> Task:
        """Return the task with the given ID.

        Raises:
            TaskNotFoundError: If no task has that ID
        """
        task = self.get(task_id)
        if task is None:
            raise TaskNotFoundError(task_id)
        return task

    def is_owner(self, task: Task) -> bool:
        """Whether the task belongs to the current identity."""
        return task.user_id == self.identity.user_id

    def __len__(self) -> int:
        return len(self._tasks)

    # Mutations

    def create(self, draft: TaskDraft, *, owner: Identity | None = None) -> Task:
        """Create a task from a draft and append it to the collection.

        Args:
            draft: Caller-supplied task fields
            owner: Owner of the new task (defaults to the store's identity)

        Returns:
            The created task (status active, no offers or questions)
        """
        owner = owner or self.identity
        with span("task_store.create", user_id=owner.user_id):
            task = Task(
                **draft.model_dump(),
                id=generate_id(constants.TASK_ID_PREFIX),
                created_at=_now(),
                status=TaskStatus.ACTIVE,
                user_id=owner.user_id,
            )
            self._tasks = (*self._tasks, task)

            log_with_user_context(logger, "info", "Created task", user_id=owner.user_id, task_id=task.id)
            return task

    def update(self, task_id: str, changes: TaskUpdate) -> Task | None:
        """Replace the explicitly set fields of a task, leaving the rest untouched.

        No validation is applied: callers may set any field, including status.

        Returns:
            The updated task, or None if no task has that ID
        """
        with span("task_store.update", task_id=task_id):
            fields = changes.changes()
            updated = self._replace(task_id, lambda task: task.model_copy(update=fields))
            if updated is None:
                logger.debug("Update ignored, task %s not found", task_id)
                return None

            logger.info("Updated task %s fields: %s", task_id, sorted(fields))
            return updated

    def delete(self, task_id: str) -> bool:
        """Remove a task together with its offers and questions.

        Returns:
            True if a task was removed, False if not found
        """
        with span("task_store.delete", task_id=task_id):
            remaining = tuple(task for task in self._tasks if task.id != task_id)
            if len(remaining) == len(self._tasks):
                logger.debug("Delete ignored, task %s not found", task_id)
                return False

            self._tasks = remaining
            logger.info("Deleted task %s", task_id)
            return True

    def add_offer(self, task_id: str, draft: OfferDraft) -> Offer | None:
        """Append a pending offer to a task.

        Returns:
            The new offer, or None if the task is missing and the policy is IGNORE

        Raises:
            TaskNotFoundError: If the task is missing and the policy is RAISE
        """
        with span("task_store.add_offer", task_id=task_id, user_id=draft.user_id):
            offer = Offer(
                **draft.model_dump(),
                id=generate_id(constants.OFFER_ID_PREFIX),
                task_id=task_id,
                created_at=_now(),
                status=OfferStatus.PENDING,
            )
            updated = self._replace(task_id, lambda task: task.model_copy(update={"offers": (*task.offers, offer)}))
            if updated is None:
                return self._missing(TaskNotFoundError(task_id))

            log_with_user_context(
                logger, "info", "Offer submitted", user_id=draft.user_id, task_id=task_id, offer_id=offer.id
            )
            return offer

    def add_question(self, task_id: str, draft: QuestionDraft) -> Question | None:
        """Append an unanswered question to a task.

        Returns:
            The new question, or None if the task is missing and the policy is IGNORE

        Raises:
            TaskNotFoundError: If the task is missing and the policy is RAISE
        """
        with span("task_store.add_question", task_id=task_id, user_id=draft.user_id):
            question = Question(
                **draft.model_dump(),
                id=generate_id(constants.QUESTION_ID_PREFIX),
                task_id=task_id,
                created_at=_now(),
            )
            updated = self._replace(
                task_id, lambda task: task.model_copy(update={"questions": (*task.questions, question)})
            )
            if updated is None:
                return self._missing(TaskNotFoundError(task_id))

            log_with_user_context(
                logger, "info", "Question asked", user_id=draft.user_id, task_id=task_id, question_id=question.id
            )
            return question

    def answer_question(self, task_id: str, question_id: str, answer: str) -> Question | None:
        """Set the answer on a question. An existing answer is overwritten.

        Returns:
            The answered question, or None if task or question is missing and the policy is IGNORE

        Raises:
            TaskNotFoundError: If the task is missing and the policy is RAISE
            QuestionNotFoundError: If the question is missing and the policy is RAISE
        """
        with span("task_store.answer_question", task_id=task_id, question_id=question_id):
            task = self.get(task_id)
            if task is None:
                return self._missing(TaskNotFoundError(task_id))

            question = task.find_question(question_id)
            if question is None:
                return self._missing(QuestionNotFoundError(task_id, question_id))

            answered = question.model_copy(update={"answer": answer})
            questions = tuple(answered if q.id == question_id else q for q in task.questions)
            self._replace(task_id, lambda t: t.model_copy(update={"questions": questions}))

            if question.is_answered:
                logger.info("Overwrote answer on question %s of task %s", question_id, task_id)
            else:
                logger.info("Answered question %s of task %s", question_id, task_id)
            return answered

    # Internals

    def _replace(self, task_id: str, transform: Callable[[Task], Task]) -> Task | None:
        """Swap in a new collection with the matching task transformed. Returns the new task."""
        replaced: Task | None = None
        new_tasks = []
        for task in self._tasks:
            if task.id == task_id:
                replaced = transform(task)
                new_tasks.append(replaced)
            else:
                new_tasks.append(task)

        if replaced is not None:
            self._tasks = tuple(new_tasks)
        return replaced

    def _missing(self, error: TaskboardError) -> None:
        """Apply the missing-parent policy: raise the error or log and drop the mutation."""
        if self.missing_parent_policy == MissingParentPolicy.RAISE:
            raise error
        logger.warning("Mutation dropped: %s", error)
