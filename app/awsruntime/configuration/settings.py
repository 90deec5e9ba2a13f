"""Top-level runtime settings."""

from pydantic_settings import BaseSettings, SettingsConfigDict

from awsruntime.configuration.aws import AwsClientSettings
from awsruntime.configuration.retry import RetrySettings


class Settings(BaseSettings):
    """Environment settings for the service clients.

    `aws` and `retry` are read from their own environment variables unless
    passed in; `ClientConfiguration.from_settings()` flattens them into the
    configuration the clients consume.

    Environment Variables:
        PREFIX: Deployment prefix; empty means production (JSON logs)
        LOG_LEVEL: Level applied by configure_logging() (default: INFO)

    Example:
        ```python
        from awsruntime.configuration import Settings, RetrySettings

        no_retry = Settings(retry=RetrySettings(max_retries=0))
        ```
    """

    PREFIX: str = ""
    LOG_LEVEL: str = "INFO"

    aws: AwsClientSettings
    retry: RetrySettings

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )

    def __init__(self, **sections):
        sections.setdefault("aws", AwsClientSettings())
        sections.setdefault("retry", RetrySettings())
        super().__init__(**sections)

    @property
    def is_production(self) -> bool:
        return not self.PREFIX


settings = Settings()
