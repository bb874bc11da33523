"""Configuration management for taskboard."""

from enum import StrEnum

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class MissingParentPolicy(StrEnum):
    """What the store does when a mutation names a task or question that does not exist."""

    IGNORE = "ignore"  # Drop the mutation and log a warning
    RAISE = "raise"  # Raise a not-found error to the caller


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="TASKBOARD_",
        case_sensitive=False,
        extra="ignore",
    )

    # Identity Configuration (placeholder until a real identity provider exists)
    current_user_id: str = Field(default="user1", description="User ID of the session owner")
    current_user_name: str = Field(default="User", description="Display name of the session owner")

    # Store Behaviour
    missing_parent_policy: MissingParentPolicy = Field(
        default=MissingParentPolicy.IGNORE,
        description="Whether mutations against unknown task/question IDs are dropped or raise",
    )

    # Publish Wizard
    description_min_length: int = Field(
        default=15, ge=0, description="Minimum stripped description length before the wizard continues"
    )

    # Pydantic Logfire Configuration (optional)
    logfire_token: str | None = Field(default=None, description="Pydantic Logfire token for observability")
    environment: str = Field(default="development", description="Deployment environment reported to Logfire")


# Application Constants
class Constants:
    """Application-wide constants."""

    # ID Generation
    ID_SUFFIX_LENGTH: int = 9
    ID_ALPHABET: str = "0123456789abcdefghijklmnopqrstuvwxyz"
    TASK_ID_PREFIX: str = "task"
    OFFER_ID_PREFIX: str = "offer"
    QUESTION_ID_PREFIX: str = "question"

    # Service Metadata
    SERVICE_NAME: str = "taskboard"
    SERVICE_VERSION: str = "0.1.0"


def get_settings() -> Settings:
    """Get application settings (singleton pattern)."""
    return Settings()


# Global settings instance
settings = get_settings()
constants = Constants()
