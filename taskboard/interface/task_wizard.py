"""Step-by-step task publishing flow.

Collects a task draft one step at a time, refusing to move on until the current
step is filled in, then publishes the draft to the store.
"""

import logging
from datetime import datetime
from enum import StrEnum

from taskboard.core.config import Settings, settings
from taskboard.core.errors import InputValidationError
from taskboard.domain.create_models import TaskDraft
from taskboard.domain.task import LocationOption, Task, WhenOption
from taskboard.interface.media_picker import MediaPicker
from taskboard.services.task_store import TaskStore


logger = logging.getLogger(__name__)


class WizardStep(StrEnum):
    """Publishing steps, in order."""

    TITLE = "title"
    WHEN = "when"
    LOCATION = "location"
    DESCRIPTION = "description"
    PHOTO = "photo"
    BUDGET = "budget"
    CONFIRMATION = "confirmation"
    SUCCESS = "success"


STEP_ORDER: tuple[WizardStep, ...] = tuple(WizardStep)


class TaskWizard:
    """Mutable form state for publishing one task."""

    def __init__(self, app_settings: Settings | None = None) -> None:
        self.description_min_length = (app_settings or settings).description_min_length
        self.step = WizardStep.TITLE
        self.title = ""
        self.when_option: WhenOption | None = None
        self.selected_date: datetime | None = None
        self.location_option: LocationOption | None = None
        self.address = ""
        self.description = ""
        self.photo: str | None = None
        self.budget = ""
        self.published: Task | None = None

    def can_continue(self) -> bool:
        """Whether the current step is complete enough to move forward."""
        match self.step:
            case WizardStep.TITLE:
                return bool(self.title.strip())
            case WizardStep.WHEN:
                return self.when_option is not None
            case WizardStep.LOCATION:
                return self.location_option == LocationOption.REMOTE or (
                    self.location_option == LocationOption.ADDRESS and bool(self.address.strip())
                )
            case WizardStep.DESCRIPTION:
                return len(self.description.strip()) >= self.description_min_length
            case WizardStep.PHOTO | WizardStep.BUDGET:
                return True  # Optional steps
            case _:
                return False

    def advance(self) -> WizardStep:
        """Move to the next step if the current one is complete. Returns the resulting step."""
        if self.can_continue():
            self.step = STEP_ORDER[STEP_ORDER.index(self.step) + 1]
        return self.step

    def back(self) -> WizardStep:
        """Move to the previous step. Does nothing on the first step or after publishing."""
        index = STEP_ORDER.index(self.step)
        if index > 0 and self.step != WizardStep.SUCCESS:
            self.step = STEP_ORDER[index - 1]
        return self.step

    def select_date(self, date: datetime) -> None:
        """Pick a concrete date; this always means the task is due on that date."""
        self.selected_date = date
        self.when_option = WhenOption.ON

    def attach_photo(self, picker: MediaPicker) -> str | None:
        photo = picker.pick_photo()
        if photo is not None:
            self.photo = photo
        return photo

    def build_draft(self) -> TaskDraft:
        """Build the task draft from the collected answers.

        Raises:
            InputValidationError: If the when or location option was never chosen
        """
        if self.when_option is None:
            raise InputValidationError("Please choose when the task should be done", field="when_option")
        if self.location_option is None:
            raise InputValidationError("Please choose where the task takes place", field="location_option")

        return TaskDraft(
            title=self.title,
            description=self.description,
            when_option=self.when_option,
            selected_date=self.selected_date,
            location_option=self.location_option,
            address=self.address if self.location_option == LocationOption.ADDRESS else "",
            photo=self.photo,
            budget=self.budget,
        )

    def publish(self, store: TaskStore) -> Task:
        """Create the task in the store and finish the flow.

        Raises:
            InputValidationError: If the flow is not on the confirmation step,
                including when the task was already published
        """
        if self.published is not None:
            raise InputValidationError("This task was already published", field="step")
        if self.step != WizardStep.CONFIRMATION:
            raise InputValidationError("Please complete every step before publishing", field="step")

        draft = self.build_draft()
        self.published = store.create(draft)
        self.step = WizardStep.SUCCESS

        logger.info("Published task %s from wizard", self.published.id)
        return self.published
