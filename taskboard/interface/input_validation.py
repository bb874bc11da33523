"""Validation of user input collected by the task detail screen.

The store accepts anything; these checks run before a store call and raise
InputValidationError with a message ready to show in an alert.
"""

from taskboard.core.errors import InputValidationError, PermissionDeniedError
from taskboard.domain.create_models import OfferDraft, QuestionDraft
from taskboard.domain.task import Task
from taskboard.domain.user import Identity


def _reject_owner(task: Task, user: Identity, action: str) -> None:
    if task.user_id == user.user_id:
        raise PermissionDeniedError(f"You cannot {action} your own task", user_id=user.user_id, task_id=task.id)


def validate_offer_input(*, task: Task, bidder: Identity, amount: str | float | None, message: str) -> OfferDraft:
    """Build an offer draft from raw form input.

    Raises:
        PermissionDeniedError: If the bidder owns the task
        InputValidationError: If amount or message is missing, or amount is not a positive number
    """
    _reject_owner(task, bidder, "make an offer on")
    if amount is None or (isinstance(amount, str) and not amount.strip()):
        raise InputValidationError("Please fill in all fields", field="amount")
    if not message.strip():
        raise InputValidationError("Please fill in all fields", field="message")

    try:
        parsed = float(amount)
    except ValueError as e:
        raise InputValidationError("Please enter a valid amount", field="amount") from e

    if not parsed > 0:
        raise InputValidationError("Please enter a valid amount", field="amount")

    return OfferDraft(user_id=bidder.user_id, user_name=bidder.user_name, amount=parsed, message=message)


def validate_question_input(*, task: Task, asker: Identity, text: str) -> QuestionDraft:
    """Build a question draft from raw form input.

    Raises:
        PermissionDeniedError: If the asker owns the task
        InputValidationError: If the question is blank
    """
    _reject_owner(task, asker, "ask a question on")
    if not text.strip():
        raise InputValidationError("Please enter a question", field="question")
    return QuestionDraft(user_id=asker.user_id, user_name=asker.user_name, question=text)


def validate_answer_input(text: str) -> str:
    """Return the answer text unchanged if it is not blank.

    Raises:
        InputValidationError: If the answer is blank
    """
    if not text.strip():
        raise InputValidationError("Please enter an answer", field="answer")
    return text
