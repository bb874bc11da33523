"""Unit tests for the task publishing wizard."""

from datetime import UTC, datetime

import pytest

from taskboard.core.config import Settings
from taskboard.core.errors import InputValidationError
from taskboard.domain.task import LocationOption, TaskStatus, WhenOption
from taskboard.interface.media_picker import PHOTO_COMING_SOON_MESSAGE, StubMediaPicker
from taskboard.interface.task_wizard import TaskWizard, WizardStep


@pytest.fixture
def wizard() -> TaskWizard:
    return TaskWizard(Settings(_env_file=None, description_min_length=15))


def _fill_until_confirmation(wizard: TaskWizard) -> None:
    wizard.title = "Move a sofa"
    wizard.advance()
    wizard.when_option = WhenOption.FLEXIBLE
    wizard.advance()
    wizard.location_option = LocationOption.ADDRESS
    wizard.address = "5 Dizengoff St"
    wizard.advance()
    wizard.description = "Carry a sofa down three floors"
    wizard.advance()
    wizard.advance()
    wizard.budget = "200"
    wizard.advance()


@pytest.mark.unit
class TestStepGuards:
    """Tests for can_continue and advance."""

    def test_blank_title_blocks(self, wizard):
        wizard.title = "   "

        assert wizard.can_continue() is False
        assert wizard.advance() == WizardStep.TITLE

    def test_when_requires_choice(self, wizard):
        wizard.title = "Move a sofa"
        wizard.advance()

        assert wizard.advance() == WizardStep.WHEN
        wizard.when_option = WhenOption.BEFORE
        assert wizard.advance() == WizardStep.LOCATION

    def test_address_location_requires_address(self, wizard):
        wizard.step = WizardStep.LOCATION
        wizard.location_option = LocationOption.ADDRESS

        assert wizard.can_continue() is False
        wizard.address = "5 Dizengoff St"
        assert wizard.can_continue() is True

    def test_remote_location_needs_no_address(self, wizard):
        wizard.step = WizardStep.LOCATION
        wizard.location_option = LocationOption.REMOTE

        assert wizard.can_continue() is True

    @pytest.mark.parametrize(
        ("description", "expected"),
        [
            ("too short", False),
            ("   fourteen chr   ", False),
            ("exactly fifteen", True),
        ],
    )
    def test_description_minimum_length(self, wizard, description, expected):
        """Test the description must reach the minimum length once stripped."""
        wizard.step = WizardStep.DESCRIPTION
        wizard.description = description

        assert wizard.can_continue() is expected

    def test_description_minimum_is_configurable(self):
        wizard = TaskWizard(Settings(_env_file=None, description_min_length=3))
        wizard.step = WizardStep.DESCRIPTION
        wizard.description = "abc"

        assert wizard.can_continue() is True

    def test_photo_and_budget_are_optional(self, wizard):
        wizard.step = WizardStep.PHOTO

        assert wizard.advance() == WizardStep.BUDGET
        assert wizard.advance() == WizardStep.CONFIRMATION

    def test_confirmation_does_not_advance(self, wizard):
        """Test leaving confirmation requires publishing."""
        wizard.step = WizardStep.CONFIRMATION

        assert wizard.advance() == WizardStep.CONFIRMATION

    def test_back(self, wizard):
        wizard.step = WizardStep.DESCRIPTION

        assert wizard.back() == WizardStep.LOCATION
        wizard.step = WizardStep.TITLE
        assert wizard.back() == WizardStep.TITLE


@pytest.mark.unit
class TestPublish:
    """Tests for publishing a completed wizard."""

    def test_full_flow_publishes_active_task(self, wizard, store):
        _fill_until_confirmation(wizard)
        assert wizard.step == WizardStep.CONFIRMATION

        task = wizard.publish(store)

        assert wizard.step == WizardStep.SUCCESS
        assert wizard.published == task
        assert store.tasks == (task,)
        assert task.status == TaskStatus.ACTIVE
        assert task.address == "5 Dizengoff St"
        assert task.budget == "200"
        assert task.user_id == "user1"

    def test_remote_task_drops_typed_address(self, wizard, store):
        """Test an address typed before switching to remote is not saved."""
        _fill_until_confirmation(wizard)
        wizard.location_option = LocationOption.REMOTE

        task = wizard.publish(store)

        assert task.location_option == LocationOption.REMOTE
        assert task.address == ""

    def test_publish_without_when_option(self, wizard, store):
        """Test a when option cleared after confirmation still blocks publishing."""
        _fill_until_confirmation(wizard)
        wizard.when_option = None

        with pytest.raises(InputValidationError) as exc_info:
            wizard.publish(store)

        assert exc_info.value.field == "when_option"
        assert len(store) == 0

    def test_publish_without_location_option(self, wizard, store):
        _fill_until_confirmation(wizard)
        wizard.location_option = None

        with pytest.raises(InputValidationError, match="where"):
            wizard.publish(store)

        assert len(store) == 0

    def test_publish_before_confirmation_is_refused(self, wizard, store):
        """Test skipping the steps cannot publish a task with a blank title."""
        wizard.when_option = WhenOption.FLEXIBLE
        wizard.location_option = LocationOption.REMOTE

        with pytest.raises(InputValidationError) as exc_info:
            wizard.publish(store)

        assert exc_info.value.field == "step"
        assert wizard.step == WizardStep.TITLE
        assert len(store) == 0

    def test_publish_twice_creates_one_task(self, wizard, store):
        """Test publishing again after success does not add a duplicate."""
        _fill_until_confirmation(wizard)
        task = wizard.publish(store)

        with pytest.raises(InputValidationError, match="already published"):
            wizard.publish(store)

        assert store.tasks == (task,)
        assert wizard.step == WizardStep.SUCCESS

    def test_select_date_sets_on_option(self, wizard):
        date = datetime(2026, 11, 2, tzinfo=UTC)
        wizard.when_option = WhenOption.BEFORE

        wizard.select_date(date)

        assert wizard.selected_date == date
        assert wizard.when_option == WhenOption.ON


@pytest.mark.unit
class TestAttachPhoto:
    """Tests for photo attachment through a media picker."""

    def test_stub_picker_leaves_photo_empty(self, wizard):
        picker = StubMediaPicker()

        assert wizard.attach_photo(picker) is None
        assert wizard.photo is None
        assert picker.notices == [PHOTO_COMING_SOON_MESSAGE]

    def test_picked_photo_is_kept(self, wizard, store):
        class FixedPicker:
            def pick_photo(self):
                return "file:///photos/sofa.jpg"

        _fill_until_confirmation(wizard)
        wizard.attach_photo(FixedPicker())

        task = wizard.publish(store)

        assert task.photo == "file:///photos/sofa.jpg"
