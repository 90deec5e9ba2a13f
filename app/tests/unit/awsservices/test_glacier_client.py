"""Tests for the Glacier client."""

import pytest

from awsruntime.operations import ErrorKind
from awsservices.glacier import GlacierClient
from tests.fixtures.http import (
    FakeHttpResponse,
    json_response,
    request_json,
    request_path,
    request_query,
)

ACCOUNT = "123456789012"


@pytest.fixture
def glacier(make_client):
    return make_client(GlacierClient)


@pytest.mark.unit
class TestGlacierRequests:
    """Request shapes for Glacier operations."""

    def test_operation_count(self, glacier):
        assert len(glacier.operation_names) == 33

    def test_delete_archive(self, glacier, http_session):
        http_session.queue(FakeHttpResponse(204, {"x-amzn-RequestId": "g-1"}))

        result = glacier.delete_archive(AccountId=ACCOUNT, VaultName="v1", ArchiveId="a1")

        assert result.is_success
        assert result.request_id == "g-1"
        sent = http_session.last_request
        assert sent.method == "DELETE"
        assert request_path(sent) == "/123456789012/vaults/v1/archives/a1"
        assert sent.url.startswith("https://glacier.us-east-1.amazonaws.com/")

    def test_version_header_on_every_request(self, glacier, http_session):
        glacier.describe_vault(AccountId=ACCOUNT, VaultName="v1")

        assert http_session.last_request.headers.get("x-amz-glacier-version") == "2012-06-01"

    def test_signed_for_glacier(self, glacier, http_session):
        glacier.list_vaults(AccountId=ACCOUNT)

        auth = http_session.last_request.headers.get("Authorization")
        assert "/us-east-1/glacier/aws4_request" in auth

    def test_add_tags_uses_operation_query(self, glacier, http_session):
        glacier.add_tags_to_vault(AccountId=ACCOUNT, VaultName="v1", Tags={"team": "sre"})

        sent = http_session.last_request
        assert sent.method == "POST"
        assert request_path(sent) == "/123456789012/vaults/v1/tags"
        assert request_query(sent) == [("operation", "add")]
        assert request_json(sent) == {"Tags": {"team": "sre"}}

    def test_remove_tags_uses_operation_query(self, glacier, http_session):
        glacier.remove_tags_from_vault(AccountId=ACCOUNT, VaultName="v1", TagKeys=["team"])

        assert request_query(http_session.last_request) == [("operation", "remove")]

    def test_list_vaults_paging(self, glacier, http_session):
        glacier.list_vaults(AccountId=ACCOUNT, Limit="5", Marker="m1")

        assert request_query(http_session.last_request) == [("limit", "5"), ("marker", "m1")]

    def test_upload_archive(self, glacier, http_session):
        http_session.queue(
            FakeHttpResponse(
                201,
                {
                    "Location": "/123456789012/vaults/v1/archives/a9",
                    "x-amz-archive-id": "a9",
                    "x-amz-sha256-tree-hash": "abc",
                },
            )
        )

        result = glacier.upload_archive(
            VaultName="v1",
            AccountId=ACCOUNT,
            Body=b"archive-bytes",
            Checksum="abc",
            ArchiveDescription="nightly",
        )

        sent = http_session.last_request
        assert sent.body == b"archive-bytes"
        assert sent.headers.get("x-amz-sha256-tree-hash") == "abc"
        assert sent.headers.get("x-amz-archive-description") == "nightly"
        assert result.data["archiveId"] == "a9"
        assert result.data["checksum"] == "abc"
        assert result.data["location"] == "/123456789012/vaults/v1/archives/a9"

    def test_initiate_job_payload(self, glacier, http_session):
        http_session.queue(
            FakeHttpResponse(202, {"x-amz-job-id": "job-1", "Location": "/jobs/job-1"})
        )

        result = glacier.initiate_job(
            AccountId=ACCOUNT,
            VaultName="v1",
            JobParameters={"Type": "inventory-retrieval"},
        )

        assert request_json(http_session.last_request) == {"Type": "inventory-retrieval"}
        assert result.data["jobId"] == "job-1"

    def test_get_job_output_streams_body(self, glacier, http_session):
        http_session.queue(
            FakeHttpResponse(
                206,
                {
                    "Content-Type": "application/octet-stream",
                    "Content-Range": "bytes 0-3/10",
                    "x-amz-sha256-tree-hash": "def",
                },
                b"data",
            )
        )

        result = glacier.get_job_output(
            AccountId=ACCOUNT, VaultName="v1", JobId="job-1", Range="bytes=0-3"
        )

        sent = http_session.last_request
        assert request_path(sent) == "/123456789012/vaults/v1/jobs/job-1/output"
        assert sent.headers.get("Range") == "bytes=0-3"
        assert sent.headers.get("Authorization") is not None
        assert result.data["body"] == b"data"
        assert result.data["contentRange"] == "bytes 0-3/10"
        assert result.data["checksum"] == "def"
        assert result.data["status"] == 206


@pytest.mark.unit
class TestGlacierValidation:
    """Client-side checks that never reach the network."""

    @pytest.mark.parametrize("account_id", ["-", "12345", "1234567890123", "12345678901a"])
    def test_account_id_must_be_twelve_digits(self, glacier, http_session, account_id):
        result = glacier.describe_vault(AccountId=account_id, VaultName="v1")

        assert result.error_kind == ErrorKind.INVALID_PARAMETER_VALUE
        assert "AccountId" in result.message
        assert http_session.call_count == 0

    def test_upload_archive_checks_vault_name_first(self, glacier, http_session):
        result = glacier.upload_archive(Body=b"x")

        assert result.error_kind == ErrorKind.MISSING_PARAMETER
        assert result.message == "Missing required field [VaultName]"
        assert http_session.call_count == 0

    def test_missing_archive_id(self, glacier, http_session):
        result = glacier.delete_archive(AccountId=ACCOUNT, VaultName="v1")

        assert result.message == "Missing required field [ArchiveId]"
        assert http_session.call_count == 0

    def test_service_error(self, glacier, http_session):
        http_session.queue(
            json_response(
                {"code": "ResourceNotFoundException", "message": "Vault not found"},
                status_code=404,
            )
        )

        result = glacier.describe_vault(AccountId=ACCOUNT, VaultName="missing")

        assert result.error_kind == ErrorKind.RESOURCE_NOT_FOUND
        assert result.message == "Vault not found"

    def test_limit_must_be_a_string(self, glacier, http_session):
        result = glacier.list_vaults(AccountId=ACCOUNT, Limit=5)

        assert result.error_kind == ErrorKind.INVALID_PARAMETER_VALUE
        assert "limit" in result.message
        assert http_session.call_count == 0
