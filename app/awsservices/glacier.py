"""Amazon Glacier client.

REST-JSON service for vaults, archives, jobs, multipart uploads and vault
locks. Every operation is scoped to an account id, which must be exactly
12 digits; the check runs before any endpoint resolution or network call.
"""

from awsruntime.clients import (
    Field,
    Literal,
    OperationSpec,
    Protocol,
    ServiceClient,
    ServiceMetadata,
    is_account_id,
)

METADATA = ServiceMetadata(
    service_id="glacier",
    display_name="Glacier",
    signing_name="glacier",
    endpoint_prefix="glacier",
    protocol=Protocol.REST_JSON,
    api_version="2012-06-01",
    default_headers={"x-amz-glacier-version": "2012-06-01"},
)

_ACCOUNT = (Field("AccountId"),)
_VAULT = _ACCOUNT + (Literal("/vaults/"), Field("VaultName"))
_UPLOAD = _VAULT + (Literal("/multipart-uploads/"), Field("UploadId"))
_JOB = _VAULT + (Literal("/jobs/"), Field("JobId"))

_ACCOUNT_REQUIRED = ("AccountId",)
_VAULT_REQUIRED = ("AccountId", "VaultName")
_VALIDATORS = {"AccountId": is_account_id}


def _op(name, method, path, required=_VAULT_REQUIRED, **kwargs) -> OperationSpec:
    return OperationSpec(
        name, method, path=path, required=required, validators=_VALIDATORS, **kwargs
    )


OPERATIONS = (
    _op(
        "AbortMultipartUpload",
        "DELETE",
        _UPLOAD,
        required=("AccountId", "VaultName", "UploadId"),
    ),
    _op("AbortVaultLock", "DELETE", _VAULT + (Literal("/lock-policy"),)),
    _op("AddTagsToVault", "POST", _VAULT + (Literal("/tags"),), query="operation=add"),
    _op(
        "CompleteMultipartUpload",
        "POST",
        _UPLOAD,
        required=("AccountId", "VaultName", "UploadId"),
    ),
    _op(
        "CompleteVaultLock",
        "POST",
        _VAULT + (Literal("/lock-policy/"), Field("LockId")),
        required=("AccountId", "VaultName", "LockId"),
    ),
    _op("CreateVault", "PUT", _VAULT),
    _op(
        "DeleteArchive",
        "DELETE",
        _VAULT + (Literal("/archives/"), Field("ArchiveId")),
        required=("AccountId", "VaultName", "ArchiveId"),
    ),
    _op("DeleteVault", "DELETE", _VAULT),
    _op("DeleteVaultAccessPolicy", "DELETE", _VAULT + (Literal("/access-policy"),)),
    _op(
        "DeleteVaultNotifications",
        "DELETE",
        _VAULT + (Literal("/notification-configuration"),),
    ),
    _op("DescribeJob", "GET", _JOB, required=("AccountId", "VaultName", "JobId")),
    _op("DescribeVault", "GET", _VAULT),
    _op(
        "GetDataRetrievalPolicy",
        "GET",
        _ACCOUNT + (Literal("/policies/data-retrieval"),),
        required=_ACCOUNT_REQUIRED,
    ),
    _op(
        "GetJobOutput",
        "GET",
        _JOB + (Literal("/output"),),
        required=("AccountId", "VaultName", "JobId"),
        raw_response=True,
    ),
    _op("GetVaultAccessPolicy", "GET", _VAULT + (Literal("/access-policy"),)),
    _op("GetVaultLock", "GET", _VAULT + (Literal("/lock-policy"),)),
    _op("GetVaultNotifications", "GET", _VAULT + (Literal("/notification-configuration"),)),
    _op(
        "InitiateJob",
        "POST",
        _VAULT + (Literal("/jobs"),),
    ),
    _op(
        "InitiateMultipartUpload",
        "POST",
        _VAULT + (Literal("/multipart-uploads"),),
    ),
    _op(
        "InitiateVaultLock",
        "POST",
        _VAULT + (Literal("/lock-policy"),),
    ),
    _op(
        "ListJobs",
        "GET",
        _VAULT + (Literal("/jobs"),),
    ),
    _op(
        "ListMultipartUploads",
        "GET",
        _VAULT + (Literal("/multipart-uploads"),),
    ),
    _op(
        "ListParts",
        "GET",
        _UPLOAD,
        required=("AccountId", "VaultName", "UploadId"),
    ),
    _op(
        "ListProvisionedCapacity",
        "GET",
        _ACCOUNT + (Literal("/provisioned-capacity"),),
        required=_ACCOUNT_REQUIRED,
    ),
    _op("ListTagsForVault", "GET", _VAULT + (Literal("/tags"),)),
    _op(
        "ListVaults",
        "GET",
        _ACCOUNT + (Literal("/vaults"),),
        required=_ACCOUNT_REQUIRED,
    ),
    _op(
        "PurchaseProvisionedCapacity",
        "POST",
        _ACCOUNT + (Literal("/provisioned-capacity"),),
        required=_ACCOUNT_REQUIRED,
    ),
    _op(
        "RemoveTagsFromVault",
        "POST",
        _VAULT + (Literal("/tags"),),
        query="operation=remove",
    ),
    _op(
        "SetDataRetrievalPolicy",
        "PUT",
        _ACCOUNT + (Literal("/policies/data-retrieval"),),
        required=_ACCOUNT_REQUIRED,
    ),
    _op(
        "SetVaultAccessPolicy",
        "PUT",
        _VAULT + (Literal("/access-policy"),),
    ),
    _op(
        "SetVaultNotifications",
        "PUT",
        _VAULT + (Literal("/notification-configuration"),),
    ),
    _op(
        "UploadArchive",
        "POST",
        _VAULT + (Literal("/archives"),),
        required=("VaultName", "AccountId"),
    ),
    _op(
        "UploadMultipartPart",
        "PUT",
        _UPLOAD,
        required=("AccountId", "VaultName", "UploadId"),
    ),
)


class GlacierClient(ServiceClient):
    """Client for Amazon Glacier."""

    METADATA = METADATA
    OPERATIONS = OPERATIONS
