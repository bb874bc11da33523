"""Question domain model."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class Question(BaseModel):
    """An inquiry posted against a task, answered at most once by the owner (re-answering overwrites)."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Unique question ID")
    task_id: str = Field(..., description="ID of the task this question was asked on")
    user_id: str = Field(..., description="Asker user ID")
    user_name: str = Field(..., description="Asker display name")
    question: str = Field(..., description="Question text")
    answer: str | None = Field(default=None, description="Answer text, None until answered")
    created_at: datetime = Field(..., description="Submission timestamp")

    @property
    def is_answered(self) -> bool:
        return self.answer is not None
