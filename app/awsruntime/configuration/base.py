"""Base class for the settings sections."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class SectionSettings(BaseSettings):
    """Settings section read from the environment or a local `.env` file.

    Fields declare their environment variable as an alias; `populate_by_name`
    also lets tests and callers pass the field name directly, e.g.
    `RetrySettings(max_retries=0)`.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
        populate_by_name=True,
    )
