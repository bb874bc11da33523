"""Identity of the user acting on the store."""

from pydantic import BaseModel, ConfigDict, Field, field_validator


# Constants for validation
MAX_NAME_LENGTH = 50


class Identity(BaseModel):
    """The acting user, injected into the store instead of a global constant."""

    model_config = ConfigDict(frozen=True)

    user_id: str = Field(..., min_length=1, description="Unique user ID")
    user_name: str = Field(..., description="Display name shown on offers and questions")

    @field_validator("user_name")
    @classmethod
    def validate_name_usable(cls, v: str) -> str:
        """Validate display name is non-empty and of reasonable length."""
        v = v.strip()

        if not v:
            raise ValueError("Name cannot be empty")

        if len(v) > MAX_NAME_LENGTH:
            raise ValueError(f"Name too long (max {MAX_NAME_LENGTH} characters)")

        return v
