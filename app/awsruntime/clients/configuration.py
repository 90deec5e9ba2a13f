"""Client configuration shared by all service clients."""

from concurrent.futures import Executor
from typing import Optional

from pydantic import BaseModel, ConfigDict, PrivateAttr

from awsruntime.clients.executor import ManagedExecutor
from awsruntime.configuration import Settings, settings as default_settings


class ClientConfiguration(BaseModel):
    """Configuration consumed by service clients, endpoint providers and the transport.

    Both construction styles (a service-specific configuration and the
    generic one) use this model; no service adds fields of its own.

    Attributes:
        region: Region used for endpoint resolution and signing
        use_fips: Resolve FIPS endpoints
        use_dualstack: Resolve dual-stack endpoints
        endpoint_override: Custom endpoint absorbed by the endpoint provider
        role_arn: Role assumed by the default credential chain
        connect_timeout: HTTP connect timeout in seconds
        read_timeout: HTTP read timeout in seconds
        max_pool_connections: HTTP connection pool size
        max_retries: Retries for transient failures after the first attempt
        backoff_factor: Base delay for exponential backoff
        max_delay_seconds: Upper bound for a single backoff delay
        executor_max_workers: Worker threads for callable/async calls
        executor: Optional externally owned executor
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    region: Optional[str] = "us-east-1"
    use_fips: bool = False
    use_dualstack: bool = False
    endpoint_override: Optional[str] = None
    role_arn: Optional[str] = None
    connect_timeout: float = 1.0
    read_timeout: float = 3.0
    max_pool_connections: int = 25
    max_retries: int = 3
    backoff_factor: float = 0.5
    max_delay_seconds: float = 20.0
    executor_max_workers: int = 4
    executor: Optional[Executor] = None

    _managed_executor: Optional[ManagedExecutor] = PrivateAttr(default=None)

    @classmethod
    def from_settings(
        cls, runtime_settings: Optional[Settings] = None, **overrides
    ) -> "ClientConfiguration":
        """Build a configuration from environment settings.

        Args:
            runtime_settings: Settings to read; defaults to the settings singleton
            **overrides: Field values taking precedence over settings

        Returns:
            ClientConfiguration
        """
        s = runtime_settings or default_settings
        values = {
            "region": s.aws.AWS_REGION,
            "use_fips": s.aws.USE_FIPS,
            "use_dualstack": s.aws.USE_DUALSTACK,
            "endpoint_override": s.aws.ENDPOINT_URL,
            "role_arn": s.aws.ROLE_ARN,
            "connect_timeout": s.aws.CONNECT_TIMEOUT,
            "read_timeout": s.aws.READ_TIMEOUT,
            "max_pool_connections": s.aws.MAX_POOL_CONNECTIONS,
            "executor_max_workers": s.aws.EXECUTOR_MAX_WORKERS,
            "max_retries": s.retry.max_retries,
            "backoff_factor": s.retry.backoff_factor,
            "max_delay_seconds": s.retry.max_delay_seconds,
        }
        values.update(overrides)
        return cls(**values)

    def model_post_init(self, __context) -> None:
        self._managed_executor = ManagedExecutor(
            max_workers=self.executor_max_workers, executor=self.executor
        )

    @property
    def managed_executor(self) -> ManagedExecutor:
        """Executor shared by every client built from this configuration."""
        return self._managed_executor

    def shutdown(self, wait: bool = True) -> None:
        """Shut down the shared executor; further async submissions fail."""
        self._managed_executor.shutdown(wait=wait)
