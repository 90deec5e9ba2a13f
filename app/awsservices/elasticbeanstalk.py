"""AWS Elastic Beanstalk client (query protocol, XML responses).

Besides the generated operation methods, the client can turn a logical
request into a presigned GET URL for a target region.

Usage:
    from awsservices.elasticbeanstalk import ElasticBeanstalkClient

    client = ElasticBeanstalkClient()
    result = client.generate_presigned_url(
        "DescribeEnvironments", "eu-west-1", ApplicationName="web"
    )
    if result.is_success:
        url = result.data
"""

from typing import Any

from botocore.exceptions import ParamValidationError  # type: ignore

from awsruntime.clients import (
    EndpointResolutionError,
    OperationSpec,
    Protocol,
    ServiceClient,
    ServiceMetadata,
    compute_signer_region,
)
from awsruntime.clients.client import credentials_unavailable
from awsruntime.clients.protocols import SerializedRequest
from awsruntime.clients.transport import PRESIGN_EXPIRES, build_url
from awsruntime.operations import ErrorKind, OperationResult

METADATA = ServiceMetadata(
    service_id="elasticbeanstalk",
    display_name="Elastic Beanstalk",
    signing_name="elasticbeanstalk",
    endpoint_prefix="elasticbeanstalk",
    protocol=Protocol.QUERY,
    api_version="2010-12-01",
)

OPERATION_NAMES = (
    "AbortEnvironmentUpdate",
    "ApplyEnvironmentManagedAction",
    "AssociateEnvironmentOperationsRole",
    "CheckDNSAvailability",
    "ComposeEnvironments",
    "CreateApplication",
    "CreateApplicationVersion",
    "CreateConfigurationTemplate",
    "CreateEnvironment",
    "CreatePlatformVersion",
    "CreateStorageLocation",
    "DeleteApplication",
    "DeleteApplicationVersion",
    "DeleteConfigurationTemplate",
    "DeleteEnvironmentConfiguration",
    "DeletePlatformVersion",
    "DescribeAccountAttributes",
    "DescribeApplicationVersions",
    "DescribeApplications",
    "DescribeConfigurationOptions",
    "DescribeConfigurationSettings",
    "DescribeEnvironmentHealth",
    "DescribeEnvironmentManagedActionHistory",
    "DescribeEnvironmentManagedActions",
    "DescribeEnvironmentResources",
    "DescribeEnvironments",
    "DescribeEvents",
    "DescribeInstancesHealth",
    "DescribePlatformVersion",
    "DisassociateEnvironmentOperationsRole",
    "ListAvailableSolutionStacks",
    "ListPlatformBranches",
    "ListPlatformVersions",
    "ListTagsForResource",
    "RebuildEnvironment",
    "RequestEnvironmentInfo",
    "RestartAppServer",
    "RetrieveEnvironmentInfo",
    "SwapEnvironmentCNAMEs",
    "TerminateEnvironment",
    "UpdateApplication",
    "UpdateApplicationResourceLifecycle",
    "UpdateApplicationVersion",
    "UpdateConfigurationTemplate",
    "UpdateEnvironment",
    "UpdateTagsForResource",
    "ValidateConfigurationSettings",
)

OPERATIONS = tuple(OperationSpec(name, "POST") for name in OPERATION_NAMES)


class ElasticBeanstalkClient(ServiceClient):
    """Client for AWS Elastic Beanstalk."""

    METADATA = METADATA
    OPERATIONS = OPERATIONS

    def generate_presigned_url(
        self, operation_name: str, region: str, **params: Any
    ) -> OperationResult:
        """Build a query-signed GET URL for a request in `region`.

        The endpoint is resolved for the target region only, the serialized
        request becomes the query string, and the URL stays valid for one
        hour.

        Args:
            operation_name: Wire operation name (e.g. "DescribeEnvironments")
            region: Region the URL targets
            **params: Request fields

        Returns:
            OperationResult whose data is the presigned URL
        """
        operation = self.get_operation(operation_name)
        request_params = {k: v for k, v in params.items() if v is not None}

        try:
            endpoint = self._endpoint_provider.resolve_endpoint({"Region": region})
        except EndpointResolutionError as e:
            self._logger.error(
                "aws_presign_endpoint_resolution_failed",
                operation=operation_name,
                error=str(e),
            )
            return OperationResult.endpoint_resolution_failure(str(e))

        try:
            query = self._protocol.build_query(operation, request_params)
        except ParamValidationError as e:
            self._logger.warning("aws_presign_invalid_request", error=str(e))
            return OperationResult.permanent_error(
                str(e),
                error_code="INVALID_PARAMETER",
                error_kind=ErrorKind.INVALID_PARAMETER_VALUE,
            )

        try:
            credentials = self._session_provider.get_credentials()
        except Exception as e:  # pylint: disable=broad-except
            self._logger.error("aws_credentials_failed", error=str(e))
            return credentials_unavailable(f"Unable to obtain credentials: {e}")
        if credentials is None:
            return credentials_unavailable("Presigning requires credentials")

        request = SerializedRequest(
            method="GET",
            path=operation.render_path(request_params, endpoint.path),
            query=query,
        )
        url = self._transport.presign(
            build_url(endpoint.origin, request),
            credentials,
            self.METADATA.signing_name,
            endpoint.signing_region or compute_signer_region(region),
            expires=PRESIGN_EXPIRES,
        )
        self._logger.debug("aws_presigned_url_generated", operation=operation_name)
        return OperationResult.success(data=url, message=f"{operation_name} presigned")
