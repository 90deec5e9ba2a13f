"""Tests for the AppConfig client."""

import pytest

from awsruntime.operations import ErrorKind
from awsservices.appconfig import AppConfigClient
from tests.fixtures.http import (
    FakeHttpResponse,
    json_response,
    request_json,
    request_path,
    request_query,
)


@pytest.fixture
def appconfig(make_client):
    return make_client(AppConfigClient)


@pytest.mark.unit
class TestAppConfigRequests:
    """Request shapes for AppConfig operations."""

    def test_operation_count(self, appconfig):
        assert len(appconfig.operation_names) == 42

    def test_create_application(self, appconfig, http_session):
        http_session.queue(json_response({"Id": "app1", "Name": "web"}, status_code=201))

        result = appconfig.create_application(Name="web")

        sent = http_session.last_request
        assert sent.method == "POST"
        assert sent.url == "https://appconfig.us-east-1.amazonaws.com/applications"
        assert request_json(sent) == {"Name": "web"}
        assert result.data["Id"] == "app1"

    def test_delete_deployment_strategy_path(self, appconfig, http_session):
        http_session.queue(FakeHttpResponse(204))

        appconfig.delete_deployment_strategy(DeploymentStrategyId="ds1")

        sent = http_session.last_request
        assert sent.method == "DELETE"
        assert request_path(sent) == "/deployementstrategies/ds1"

    def test_get_deployment_strategy_path(self, appconfig, http_session):
        appconfig.get_deployment_strategy(DeploymentStrategyId="ds1")

        assert request_path(http_session.last_request) == "/deploymentstrategies/ds1"

    def test_untag_resource_repeats_tag_keys(self, appconfig, http_session):
        appconfig.untag_resource(
            ResourceArn="arn:aws:appconfig:us-east-1:123456789012:application/app1",
            TagKeys=["env", "team"],
        )

        sent = http_session.last_request
        assert sent.method == "DELETE"
        assert request_path(sent) == (
            "/tags/arn%3Aaws%3Aappconfig%3Aus-east-1%3A123456789012%3Aapplication%2Fapp1"
        )
        assert request_query(sent) == [("tagKeys", "env"), ("tagKeys", "team")]

    def test_list_applications_paging(self, appconfig, http_session):
        appconfig.list_applications(MaxResults=10, NextToken="t1")

        assert request_query(http_session.last_request) == [
            ("max_results", "10"),
            ("next_token", "t1"),
        ]

    def test_validate_configuration_version_in_query(self, appconfig, http_session):
        appconfig.validate_configuration(
            ApplicationId="app1", ConfigurationProfileId="cp1", ConfigurationVersion="3"
        )

        sent = http_session.last_request
        assert request_path(sent) == "/applications/app1/configurationprofiles/cp1/validators"
        assert request_query(sent) == [("configuration_version", "3")]

    def test_start_deployment_path(self, appconfig, http_session):
        appconfig.start_deployment(
            ApplicationId="app1",
            EnvironmentId="env1",
            DeploymentStrategyId="ds1",
            ConfigurationProfileId="cp1",
            ConfigurationVersion="1",
        )

        sent = http_session.last_request
        assert request_path(sent) == "/applications/app1/environments/env1/deployments"
        assert request_json(sent)["DeploymentStrategyId"] == "ds1"


@pytest.mark.unit
class TestHostedConfigurationVersions:
    """Raw-body operations for hosted configuration versions."""

    def test_create_sends_raw_content(self, appconfig, http_session):
        http_session.queue(
            FakeHttpResponse(
                201,
                {
                    "Content-Type": "application/json",
                    "Application-Id": "app1",
                    "Configuration-Profile-Id": "cp1",
                    "Version-Number": "4",
                },
                b'{"feature": true}',
            )
        )

        result = appconfig.create_hosted_configuration_version(
            ApplicationId="app1",
            ConfigurationProfileId="cp1",
            Content=b'{"feature": true}',
            ContentType="application/json",
            LatestVersionNumber=3,
        )

        sent = http_session.last_request
        assert request_path(sent) == (
            "/applications/app1/configurationprofiles/cp1/hostedconfigurationversions"
        )
        assert sent.body == b'{"feature": true}'
        assert sent.headers.get("Content-Type") == "application/json"
        assert sent.headers.get("Latest-Version-Number") == "3"
        assert sent.headers.get("Authorization") is not None
        assert result.data["Content"] == b'{"feature": true}'
        assert result.data["VersionNumber"] == 4

    def test_get_returns_raw_body(self, appconfig, http_session):
        http_session.queue(
            FakeHttpResponse(200, {"Content-Type": "text/plain", "Version-Number": "2"}, b"a=1")
        )

        result = appconfig.get_hosted_configuration_version(
            ApplicationId="app1", ConfigurationProfileId="cp1", VersionNumber=2
        )

        assert request_path(http_session.last_request) == (
            "/applications/app1/configurationprofiles/cp1/hostedconfigurationversions/2"
        )
        assert result.data["Content"] == b"a=1"
        assert result.data["ContentType"] == "text/plain"

    def test_missing_profile(self, appconfig, http_session):
        result = appconfig.get_hosted_configuration_version(
            ApplicationId="app1", VersionNumber=2
        )

        assert result.error_kind == ErrorKind.MISSING_PARAMETER
        assert result.message == "Missing required field [ConfigurationProfileId]"
        assert http_session.call_count == 0
