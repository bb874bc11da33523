"""Exceptions raised by the task store and the user-facing messages they map to."""

from enum import Enum

from pydantic import BaseModel


class TaskboardError(Exception):
    """Base class for all taskboard errors."""


class TaskNotFoundError(TaskboardError, KeyError):
    """Raised when no task has the requested ID."""

    def __init__(self, task_id: str) -> None:
        self.task_id = task_id
        super().__init__(f"Task not found: {task_id}")

    def __str__(self) -> str:
        return self.args[0]


class OfferNotFoundError(TaskboardError, KeyError):
    """Raised when a task has no offer with the requested ID."""

    def __init__(self, task_id: str, offer_id: str) -> None:
        self.task_id = task_id
        self.offer_id = offer_id
        super().__init__(f"Offer not found on task {task_id}: {offer_id}")

    def __str__(self) -> str:
        return self.args[0]


class QuestionNotFoundError(TaskboardError, KeyError):
    """Raised when a task has no question with the requested ID."""

    def __init__(self, task_id: str, question_id: str) -> None:
        self.task_id = task_id
        self.question_id = question_id
        super().__init__(f"Question not found on task {task_id}: {question_id}")

    def __str__(self) -> str:
        return self.args[0]


class InvalidStateTransitionError(TaskboardError, ValueError):
    """Raised when a task or offer cannot move to the requested status."""


class PermissionDeniedError(TaskboardError):
    """Raised when the acting user may not perform an action on a task."""

    def __init__(self, message: str, *, user_id: str, task_id: str) -> None:
        self.user_id = user_id
        self.task_id = task_id
        super().__init__(message)


class InputValidationError(TaskboardError, ValueError):
    """Raised when user input fails presentation-level validation.

    The message is suitable for showing directly in an alert.
    """

    def __init__(self, message: str, *, field: str | None = None) -> None:
        self.field = field
        super().__init__(message)


class ErrorSeverity(Enum):
    """Severity levels for errors."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class ErrorCode:
    """Error codes for specific error conditions."""

    ERR_TASK_NOT_FOUND = "ERR_TASK_NOT_FOUND"
    ERR_OFFER_NOT_FOUND = "ERR_OFFER_NOT_FOUND"
    ERR_QUESTION_NOT_FOUND = "ERR_QUESTION_NOT_FOUND"
    ERR_INVALID_STATE_TRANSITION = "ERR_INVALID_STATE_TRANSITION"
    ERR_PERMISSION_DENIED = "ERR_PERMISSION_DENIED"
    ERR_INVALID_INPUT = "ERR_INVALID_INPUT"
    ERR_UNKNOWN = "ERR_UNKNOWN"


class ErrorResponse(BaseModel):
    """Structured error response with user-friendly messaging."""

    code: str
    message: str
    suggestion: str
    severity: ErrorSeverity


def classify_error_with_response(exception: Exception) -> ErrorResponse:  # noqa: PLR0911
    """Classify an error and return a structured response with recovery suggestions.

    Args:
        exception: The exception raised by a store or wizard operation

    Returns:
        ErrorResponse with code, message, suggestion, and severity
    """
    if isinstance(exception, InputValidationError):
        return ErrorResponse(
            code=ErrorCode.ERR_INVALID_INPUT,
            message=str(exception),
            suggestion="Fill in the highlighted field and try again.",
            severity=ErrorSeverity.LOW,
        )

    if isinstance(exception, TaskNotFoundError):
        return ErrorResponse(
            code=ErrorCode.ERR_TASK_NOT_FOUND,
            message="This task is no longer available.",
            suggestion="Go back to the task list and refresh.",
            severity=ErrorSeverity.LOW,
        )

    if isinstance(exception, OfferNotFoundError):
        return ErrorResponse(
            code=ErrorCode.ERR_OFFER_NOT_FOUND,
            message="This offer is no longer available.",
            suggestion="Reopen the task to see its current offers.",
            severity=ErrorSeverity.LOW,
        )

    if isinstance(exception, QuestionNotFoundError):
        return ErrorResponse(
            code=ErrorCode.ERR_QUESTION_NOT_FOUND,
            message="This question is no longer available.",
            suggestion="Reopen the task to see its current questions.",
            severity=ErrorSeverity.LOW,
        )

    if isinstance(exception, PermissionDeniedError):
        return ErrorResponse(
            code=ErrorCode.ERR_PERMISSION_DENIED,
            message="You don't have permission for this action.",
            suggestion="Only the task owner can manage offers and answer questions.",
            severity=ErrorSeverity.MEDIUM,
        )

    if isinstance(exception, InvalidStateTransitionError):
        return ErrorResponse(
            code=ErrorCode.ERR_INVALID_STATE_TRANSITION,
            message="This action cannot be performed in the current state.",
            suggestion="Check the task status and try again.",
            severity=ErrorSeverity.MEDIUM,
        )

    return ErrorResponse(
        code=ErrorCode.ERR_UNKNOWN,
        message="An unexpected error occurred.",
        suggestion="Please try again. If the problem persists, restart the app.",
        severity=ErrorSeverity.HIGH,
    )
