"""AWS Clients facade for all service clients.

Provides attribute-based access to the seven service clients with one
shared configuration, credentials strategy and executor.

Composition-based design: each service has a focused client class, composed
together in a lightweight facade.
"""

from typing import Any, Optional

from awsruntime.clients import ClientConfiguration
from awsruntime.logging import get_module_logger
from awsservices.appconfig import AppConfigClient
from awsservices.appstream import AppStreamClient
from awsservices.codestar import CodeStarClient
from awsservices.elasticbeanstalk import ElasticBeanstalkClient
from awsservices.glacier import GlacierClient
from awsservices.opensearch import OpenSearchServiceClient
from awsservices.route53resolver import Route53ResolverClient

logger = get_module_logger()


class AWSClients:
    """Facade for all service clients.

    Every client is built from the same `ClientConfiguration`, so they share
    region, endpoint flags, retry settings and the executor used by the
    callable and async calling conventions.

    Args:
        config: Shared configuration; defaults to one built from settings
        credentials: Credentials strategy passed to every client

    Usage:
        aws = AWSClients()
        result = aws.glacier.list_vaults(AccountId="123456789012")
        if result.is_success:
            vaults = result.data["VaultList"]
        aws.close()
    """

    def __init__(
        self,
        config: Optional[ClientConfiguration] = None,
        credentials: Any = None,
    ) -> None:
        self.config = config or ClientConfiguration.from_settings()

        self.appconfig: AppConfigClient = AppConfigClient(self.config, credentials)
        self.appstream: AppStreamClient = AppStreamClient(self.config, credentials)
        self.codestar: CodeStarClient = CodeStarClient(self.config, credentials)
        self.elasticbeanstalk: ElasticBeanstalkClient = ElasticBeanstalkClient(
            self.config, credentials
        )
        self.glacier: GlacierClient = GlacierClient(self.config, credentials)
        self.opensearch: OpenSearchServiceClient = OpenSearchServiceClient(
            self.config, credentials
        )
        self.route53resolver: Route53ResolverClient = Route53ResolverClient(
            self.config, credentials
        )
        logger.debug("aws_clients_initialized", region=self.config.region)

    def close(self, wait: bool = True) -> None:
        """Shut down the shared executor."""
        self.config.shutdown(wait=wait)

    def __enter__(self) -> "AWSClients":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
