"""Retry infrastructure settings."""

from pydantic import Field

from awsruntime.configuration.base import SectionSettings


class RetrySettings(SectionSettings):
    """Retry configuration for transient transport and service failures.

    Only failures classified as transient (throttling, 5xx, connection
    errors) are retried. Client-side validation and endpoint resolution
    failures are returned immediately.

    Environment Variables:
        AWS_MAX_RETRIES: Maximum retries after the first attempt (default: 3)
        AWS_RETRY_BACKOFF_FACTOR: Base exponential backoff delay (default: 0.5s)
        AWS_RETRY_MAX_DELAY_SECONDS: Upper bound for a single delay (default: 20s)

    Exponential Backoff:
        Delay calculation: min(backoff_factor * (2 ^ attempt), max_delay)
        A Retry-After value from a throttled response takes precedence.
    """

    max_retries: int = Field(
        default=3,
        alias="AWS_MAX_RETRIES",
        description="Maximum retries after the first attempt",
    )
    backoff_factor: float = Field(
        default=0.5,
        alias="AWS_RETRY_BACKOFF_FACTOR",
        description="Base delay for exponential backoff (seconds)",
    )
    max_delay_seconds: float = Field(
        default=20.0,
        alias="AWS_RETRY_MAX_DELAY_SECONDS",
        description="Maximum delay for a single backoff (seconds)",
    )
