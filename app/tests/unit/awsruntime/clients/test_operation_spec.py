"""Tests for operation descriptors and path rendering."""

import pytest

from awsruntime.clients.operation import (
    Field,
    Literal,
    OperationSpec,
    index_operations,
    is_account_id,
)


@pytest.mark.unit
class TestRenderPath:
    """Test suite for OperationSpec.render_path."""

    def test_interleaves_literals_and_fields(self):
        spec = OperationSpec(
            "DeleteArchive",
            "DELETE",
            path=(
                Field("AccountId"),
                Literal("/vaults/"),
                Field("VaultName"),
                Literal("/archives/"),
                Field("ArchiveId"),
            ),
        )
        path = spec.render_path(
            {"AccountId": "123456789012", "VaultName": "v1", "ArchiveId": "a1"}
        )
        assert path == "/123456789012/vaults/v1/archives/a1"

    def test_field_values_are_percent_encoded(self):
        spec = OperationSpec(
            "ListTagsForResource", "GET", path=(Literal("/tags/"), Field("ResourceArn"))
        )
        path = spec.render_path({"ResourceArn": "arn:aws:appconfig:us-east-1:1:application/a b"})
        assert path == "/tags/arn%3Aaws%3Aappconfig%3Aus-east-1%3A1%3Aapplication%2Fa%20b"

    def test_trailing_slash_kept_when_last(self):
        spec = OperationSpec("ListTags", "GET", path=(Literal("/2021-01-01/tags/"),))
        assert spec.render_path({}) == "/2021-01-01/tags/"

    def test_trailing_slash_dropped_when_field_follows(self):
        spec = OperationSpec(
            "GetApplication", "GET", path=(Literal("/applications/"), Field("ApplicationId"))
        )
        assert spec.render_path({"ApplicationId": "app"}) == "/applications/app"

    def test_base_path_prefixes_segments(self):
        spec = OperationSpec("CreateApplication", "POST", path=(Literal("/applications"),))
        assert spec.render_path({}, base_path="/proxy") == "/proxy/applications"

    def test_empty_path_renders_root(self):
        assert OperationSpec("DescribeFleets").render_path({}) == "/"

    def test_integer_fields_render_as_text(self):
        spec = OperationSpec(
            "GetDeployment", "GET", path=(Literal("/deployments/"), Field("DeploymentNumber"))
        )
        assert spec.render_path({"DeploymentNumber": 7}) == "/deployments/7"


@pytest.mark.unit
class TestValidation:
    """Test suite for required-field and format checks."""

    def test_find_missing_returns_first_in_declared_order(self):
        spec = OperationSpec("UploadArchive", required=("VaultName", "AccountId"))
        assert spec.find_missing({}) == "VaultName"
        assert spec.find_missing({"VaultName": "v"}) == "AccountId"
        assert spec.find_missing({"VaultName": "v", "AccountId": "1"}) is None

    def test_none_counts_as_missing(self):
        spec = OperationSpec("GetApplication", required=("ApplicationId",))
        assert spec.find_missing({"ApplicationId": None}) == "ApplicationId"

    def test_find_invalid_runs_validators(self):
        spec = OperationSpec("ListVaults", validators={"AccountId": is_account_id})
        assert spec.find_invalid({"AccountId": "123"}) == "AccountId"
        assert spec.find_invalid({"AccountId": "123456789012"}) is None

    @pytest.mark.parametrize(
        "value,expected",
        [
            ("123456789012", True),
            ("12345678901", False),
            ("1234567890123", False),
            ("12345678901a", False),
            ("-", False),
            ("１２３４５６７８９０１２", False),
            (123456789012, False),
        ],
    )
    def test_is_account_id(self, value, expected):
        assert is_account_id(value) is expected


@pytest.mark.unit
class TestOperationSpec:
    """Test suite for descriptor metadata."""

    def test_python_name(self):
        assert OperationSpec("CreateImageBuilderStreamingURL").python_name == (
            "create_image_builder_streaming_url"
        )
        assert OperationSpec("CheckDNSAvailability").python_name == "check_dns_availability"

    def test_rejects_unknown_method(self):
        with pytest.raises(ValueError):
            OperationSpec("Bad", "FETCH")

    def test_index_rejects_duplicates(self):
        with pytest.raises(ValueError):
            index_operations((OperationSpec("A"), OperationSpec("A")))
