"""Session provider for AWS client operations.

Centralizes credential acquisition for all service clients. Supports the
three construction strategies: the boto3 default provider chain (with
optional role assumption), static credentials, and a caller-supplied
credentials provider.
"""

import threading
from datetime import datetime, timedelta, timezone
from typing import Any, Optional

import boto3  # type: ignore
from botocore.credentials import Credentials, ReadOnlyCredentials  # type: ignore
import structlog

logger = structlog.get_logger()

# Refresh assumed-role credentials this long before they expire
_REFRESH_MARGIN = timedelta(minutes=5)


def _is_supported_source(source: Any) -> bool:
    return (
        source is None
        or isinstance(source, Credentials)
        or hasattr(source, "get_credentials")
        or hasattr(source, "load")
        or callable(source)
    )


class SessionProvider:
    """Centralized provider for AWS credentials.

    Args:
        region: AWS region for the boto3 session (e.g., 'us-east-1')
        role_arn: Optional role to assume through STS on top of the default chain
        credentials: None for the default chain, a botocore `Credentials`
            instance for static credentials, or a custom provider exposing
            `get_credentials()` or `load()`, or a zero-argument callable
        session_name: Name for the assumed role session

    Raises:
        TypeError: If `credentials` is none of the supported shapes
    """

    def __init__(
        self,
        region: Optional[str] = None,
        role_arn: Optional[str] = None,
        credentials: Any = None,
        session_name: str = "AwsRuntimeSession",
    ) -> None:
        self.region = region
        self.role_arn = role_arn
        self.session_name = session_name
        if not _is_supported_source(credentials):
            raise TypeError(
                f"Unsupported credentials provider: {type(credentials).__name__}"
            )
        self._credentials = credentials
        self._assumed: Optional[Credentials] = None
        self._assumed_expiry: Optional[datetime] = None
        self._lock = threading.Lock()

    @property
    def strategy(self) -> str:
        """Name of the credential strategy in use."""
        if self._credentials is None:
            return "default_chain"
        if isinstance(self._credentials, Credentials):
            return "static"
        return "custom"

    def get_credentials(self) -> Optional[ReadOnlyCredentials]:
        """Resolve frozen credentials for signing a single request.

        Returns:
            ReadOnlyCredentials, or None when no credentials are available
            (the request is then sent unsigned)
        """
        source = self._credentials
        if source is None:
            creds = self._from_default_chain()
        elif isinstance(source, Credentials):
            creds = source
        elif hasattr(source, "get_credentials"):
            creds = source.get_credentials()
        elif hasattr(source, "load"):
            creds = source.load()
        else:
            creds = source()

        if creds is None:
            logger.warning("aws_credentials_unavailable", strategy=self.strategy)
            return None
        if hasattr(creds, "get_frozen_credentials"):
            return creds.get_frozen_credentials()
        return creds

    def _from_default_chain(self) -> Optional[Credentials]:
        if self.role_arn:
            return self._assume_role()
        session = boto3.Session(region_name=self.region)
        return session.get_credentials()

    def _assume_role(self) -> Credentials:
        with self._lock:
            now = datetime.now(timezone.utc)
            if (
                self._assumed is not None
                and self._assumed_expiry is not None
                and self._assumed_expiry - _REFRESH_MARGIN > now
            ):
                return self._assumed

            logger.debug("assuming_role", role_arn=self.role_arn)
            sts = boto3.Session(region_name=self.region).client("sts")
            assumed = sts.assume_role(
                RoleArn=self.role_arn, RoleSessionName=self.session_name
            )
            creds = assumed["Credentials"]
            self._assumed = Credentials(
                creds["AccessKeyId"],
                creds["SecretAccessKey"],
                creds["SessionToken"],
                method="assume-role",
            )
            self._assumed_expiry = creds.get("Expiration")
            return self._assumed
