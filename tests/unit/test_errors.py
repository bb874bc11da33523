"""Unit tests for error types and user-facing classification."""

import pytest

from taskboard.core.errors import (
    ErrorCode,
    ErrorSeverity,
    InputValidationError,
    InvalidStateTransitionError,
    OfferNotFoundError,
    PermissionDeniedError,
    QuestionNotFoundError,
    TaskboardError,
    TaskNotFoundError,
    classify_error_with_response,
)


@pytest.mark.unit
class TestErrorTypes:
    """Tests for the exception hierarchy."""

    def test_not_found_errors_carry_ids(self):
        error = QuestionNotFoundError("task_1", "question_2")

        assert error.task_id == "task_1"
        assert error.question_id == "question_2"
        assert str(error) == "Question not found on task task_1: question_2"

    def test_not_found_errors_are_key_errors(self):
        """Test not-found errors can be caught as KeyError."""
        with pytest.raises(KeyError):
            raise TaskNotFoundError("task_1")

    def test_task_not_found_message_is_not_quoted(self):
        assert str(TaskNotFoundError("task_1")) == "Task not found: task_1"

    def test_state_and_input_errors_are_value_errors(self):
        assert issubclass(InvalidStateTransitionError, ValueError)
        assert issubclass(InputValidationError, ValueError)
        assert issubclass(InputValidationError, TaskboardError)

    def test_input_validation_error_field(self):
        error = InputValidationError("Please enter a question", field="question")

        assert error.field == "question"
        assert str(error) == "Please enter a question"


@pytest.mark.unit
class TestClassifyErrorWithResponse:
    """Tests for classify_error_with_response."""

    @pytest.mark.parametrize(
        ("exception", "code", "severity"),
        [
            (TaskNotFoundError("task_1"), ErrorCode.ERR_TASK_NOT_FOUND, ErrorSeverity.LOW),
            (OfferNotFoundError("task_1", "offer_1"), ErrorCode.ERR_OFFER_NOT_FOUND, ErrorSeverity.LOW),
            (QuestionNotFoundError("task_1", "question_1"), ErrorCode.ERR_QUESTION_NOT_FOUND, ErrorSeverity.LOW),
            (InvalidStateTransitionError("nope"), ErrorCode.ERR_INVALID_STATE_TRANSITION, ErrorSeverity.MEDIUM),
            (
                PermissionDeniedError("Only the owner can accept offers", user_id="user2", task_id="task_1"),
                ErrorCode.ERR_PERMISSION_DENIED,
                ErrorSeverity.MEDIUM,
            ),
            (RuntimeError("boom"), ErrorCode.ERR_UNKNOWN, ErrorSeverity.HIGH),
        ],
    )
    def test_codes_and_severity(self, exception, code, severity):
        response = classify_error_with_response(exception)

        assert response.code == code
        assert response.severity == severity
        assert response.message
        assert response.suggestion

    def test_input_validation_message_is_passed_through(self):
        """Test validation messages reach the user unchanged."""
        response = classify_error_with_response(InputValidationError("Please fill in all fields"))

        assert response.code == ErrorCode.ERR_INVALID_INPUT
        assert response.message == "Please fill in all fields"
