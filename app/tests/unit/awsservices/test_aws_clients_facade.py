"""Tests for the AWSClients facade."""

from unittest.mock import patch

import pytest

from awsruntime.clients import ClientConfiguration
from awsruntime.clients.executor import ExecutorShutdownError
from awsservices import (
    AWSClients,
    AppConfigClient,
    AppStreamClient,
    CodeStarClient,
    ElasticBeanstalkClient,
    GlacierClient,
    OpenSearchServiceClient,
    Route53ResolverClient,
)


@pytest.fixture
def facade(static_credentials):
    config = ClientConfiguration(region="ca-central-1", max_retries=0)
    clients = AWSClients(config, static_credentials)
    yield clients
    clients.close()


@pytest.mark.unit
class TestAWSClients:
    """Test suite for AWSClients."""

    def test_attributes(self, facade):
        assert isinstance(facade.appconfig, AppConfigClient)
        assert isinstance(facade.appstream, AppStreamClient)
        assert isinstance(facade.codestar, CodeStarClient)
        assert isinstance(facade.elasticbeanstalk, ElasticBeanstalkClient)
        assert isinstance(facade.glacier, GlacierClient)
        assert isinstance(facade.opensearch, OpenSearchServiceClient)
        assert isinstance(facade.route53resolver, Route53ResolverClient)

    def test_clients_share_configuration(self, facade):
        clients = [
            facade.appconfig,
            facade.appstream,
            facade.codestar,
            facade.elasticbeanstalk,
            facade.glacier,
            facade.opensearch,
            facade.route53resolver,
        ]
        assert all(c.config is facade.config for c in clients)
        assert all(
            c.endpoint_provider.builtin_parameters["Region"] == "ca-central-1"
            for c in clients
        )

    def test_display_names(self, facade):
        assert facade.elasticbeanstalk._transport.service_name == "Elastic Beanstalk"
        assert facade.opensearch._transport.service_name == "OpenSearch"
        assert facade.route53resolver._transport.service_name == "Route53Resolver"

    def test_close_stops_async_calls(self, static_credentials):
        clients = AWSClients(ClientConfiguration(max_retries=0), static_credentials)
        clients.close()

        with pytest.raises(ExecutorShutdownError):
            clients.codestar.list_projects_callable()

    def test_context_manager(self, static_credentials):
        with AWSClients(ClientConfiguration(max_retries=0), static_credentials) as clients:
            assert clients.glacier is not None
        assert clients.config.managed_executor.is_shutdown

    @patch("awsservices.facade.ClientConfiguration.from_settings")
    def test_default_configuration(self, mock_from_settings):
        mock_from_settings.return_value = ClientConfiguration(region="eu-west-2")

        clients = AWSClients()

        mock_from_settings.assert_called_once_with()
        assert clients.glacier.config.region == "eu-west-2"
        clients.close()
