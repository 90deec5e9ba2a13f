"""AWS client settings."""

from typing import Optional

from pydantic import Field

from awsruntime.configuration.base import SectionSettings


class AwsClientSettings(SectionSettings):
    """AWS service client configuration settings.

    Environment Variables:
        AWS_REGION: Region used for endpoint resolution and signing (default: us-east-1)
        AWS_USE_FIPS_ENDPOINT: Resolve FIPS endpoints (default: False)
        AWS_USE_DUALSTACK_ENDPOINT: Resolve dual-stack endpoints (default: False)
        AWS_ENDPOINT_URL: Custom endpoint replacing the resolved one (testing/LocalStack)
        AWS_ROLE_ARN: Role assumed by the default credential chain
        AWS_CONNECT_TIMEOUT: Connect timeout in seconds (default: 1)
        AWS_READ_TIMEOUT: Read timeout in seconds (default: 3)
        AWS_MAX_POOL_CONNECTIONS: HTTP connection pool size (default: 25)
        AWS_EXECUTOR_MAX_WORKERS: Worker threads for callable/async calls (default: 4)

    Example:
        ```python
        from awsruntime.configuration import settings

        region = settings.aws.AWS_REGION
        ```
    """

    AWS_REGION: str = Field(default="us-east-1", alias="AWS_REGION")
    USE_FIPS: bool = Field(default=False, alias="AWS_USE_FIPS_ENDPOINT")
    USE_DUALSTACK: bool = Field(default=False, alias="AWS_USE_DUALSTACK_ENDPOINT")
    ENDPOINT_URL: Optional[str] = Field(default=None, alias="AWS_ENDPOINT_URL")
    ROLE_ARN: Optional[str] = Field(default=None, alias="AWS_ROLE_ARN")
    CONNECT_TIMEOUT: float = Field(default=1.0, alias="AWS_CONNECT_TIMEOUT")
    READ_TIMEOUT: float = Field(default=3.0, alias="AWS_READ_TIMEOUT")
    MAX_POOL_CONNECTIONS: int = Field(default=25, alias="AWS_MAX_POOL_CONNECTIONS")
    EXECUTOR_MAX_WORKERS: int = Field(default=4, alias="AWS_EXECUTOR_MAX_WORKERS")
