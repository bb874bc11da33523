"""Pytest configuration and shared fixtures."""

import logfire
import pytest

from taskboard.core.config import MissingParentPolicy
from taskboard.domain.create_models import OfferDraft, QuestionDraft, TaskDraft
from taskboard.domain.task import LocationOption, WhenOption
from taskboard.domain.user import Identity
from taskboard.services.task_store import TaskStore


@pytest.fixture(scope="session", autouse=True)
def _configure_logfire_for_tests():
    """Keep spans local: nothing is exported during tests."""
    logfire.configure(send_to_logfire=False, console=False)


@pytest.fixture
def owner() -> Identity:
    """The session owner who posts tasks."""
    return Identity(user_id="user1", user_name="Dana")


@pytest.fixture
def bidder() -> Identity:
    """Another user who makes offers and asks questions."""
    return Identity(user_id="user2", user_name="Noam")


@pytest.fixture
def store(owner: Identity) -> TaskStore:
    """Empty store that drops mutations against unknown IDs."""
    return TaskStore(owner, missing_parent_policy=MissingParentPolicy.IGNORE)


@pytest.fixture
def strict_store(owner: Identity) -> TaskStore:
    """Empty store that raises on mutations against unknown IDs."""
    return TaskStore(owner, missing_parent_policy=MissingParentPolicy.RAISE)


@pytest.fixture
def clean_house_draft() -> TaskDraft:
    return TaskDraft(
        title="Clean house",
        description="Full clean of a three room apartment",
        when_option=WhenOption.FLEXIBLE,
        location_option=LocationOption.REMOTE,
    )


@pytest.fixture
def offer_draft(bidder: Identity) -> OfferDraft:
    return OfferDraft(user_id=bidder.user_id, user_name=bidder.user_name, amount=150, message="I can do it")


@pytest.fixture
def question_draft(bidder: Identity) -> QuestionDraft:
    return QuestionDraft(user_id=bidder.user_id, user_name=bidder.user_name, question="Do you have supplies?")
