"""Unit tests for awsruntime.configuration settings classes."""

import pytest

from awsruntime.configuration import AwsClientSettings, RetrySettings, Settings

AWS_ENV_VARS = (
    "AWS_REGION",
    "AWS_USE_FIPS_ENDPOINT",
    "AWS_USE_DUALSTACK_ENDPOINT",
    "AWS_ENDPOINT_URL",
    "AWS_ROLE_ARN",
    "AWS_MAX_RETRIES",
    "AWS_RETRY_BACKOFF_FACTOR",
    "AWS_RETRY_MAX_DELAY_SECONDS",
    "PREFIX",
)


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """Run with no AWS variables set and no .env file in the working directory."""
    for name in AWS_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.mark.unit
class TestAwsClientSettings:
    """Test suite for AwsClientSettings."""

    def test_defaults(self, clean_env):
        aws = AwsClientSettings()

        assert aws.AWS_REGION == "us-east-1"
        assert aws.USE_FIPS is False
        assert aws.USE_DUALSTACK is False
        assert aws.ENDPOINT_URL is None
        assert aws.ROLE_ARN is None
        assert aws.MAX_POOL_CONNECTIONS == 25

    def test_environment_overrides(self, clean_env, monkeypatch):
        monkeypatch.setenv("AWS_REGION", "ca-central-1")
        monkeypatch.setenv("AWS_USE_FIPS_ENDPOINT", "true")
        monkeypatch.setenv("AWS_ENDPOINT_URL", "http://localhost:4566")

        aws = AwsClientSettings()

        assert aws.AWS_REGION == "ca-central-1"
        assert aws.USE_FIPS is True
        assert aws.ENDPOINT_URL == "http://localhost:4566"


@pytest.mark.unit
class TestRetrySettings:
    """Test suite for RetrySettings."""

    def test_defaults(self, clean_env):
        retry = RetrySettings()

        assert retry.max_retries == 3
        assert retry.backoff_factor == 0.5
        assert retry.max_delay_seconds == 20.0

    def test_partial_override(self, clean_env, monkeypatch):
        monkeypatch.setenv("AWS_MAX_RETRIES", "7")

        retry = RetrySettings()

        assert retry.max_retries == 7
        assert retry.backoff_factor == 0.5


@pytest.mark.unit
class TestSettings:
    """Test suite for the aggregated Settings."""

    def test_subsettings_are_created(self, clean_env):
        s = Settings()

        assert isinstance(s.aws, AwsClientSettings)
        assert isinstance(s.retry, RetrySettings)
        assert s.LOG_LEVEL == "INFO"

    def test_is_production_follows_prefix(self, clean_env):
        assert Settings().is_production is True
        assert Settings(PREFIX="dev-").is_production is False

    def test_explicit_subsettings_are_kept(self, clean_env):
        retry = RetrySettings(max_retries=0)

        s = Settings(retry=retry)

        assert s.retry.max_retries == 0
