"""Runtime configuration module - public API.

Centralized configuration management using Pydantic BaseSettings.

Exports:
    settings: Singleton Settings instance (main configuration object)
    Settings: Main settings class (for testing/overrides)
    AwsClientSettings: AWS client settings class
    RetrySettings: Retry settings class

Example:
    ```python
    from awsruntime.configuration import settings

    region = settings.aws.AWS_REGION
    max_retries = settings.retry.max_retries
    ```
"""

from awsruntime.configuration.aws import AwsClientSettings
from awsruntime.configuration.retry import RetrySettings
from awsruntime.configuration.settings import Settings, settings

__all__ = ["Settings", "settings", "AwsClientSettings", "RetrySettings"]
