"""Amazon AppStream 2.0 client (JSON 1.1 protocol)."""

from awsruntime.clients import OperationSpec, Protocol, ServiceClient, ServiceMetadata

METADATA = ServiceMetadata(
    service_id="appstream",
    display_name="AppStream",
    signing_name="appstream",
    endpoint_prefix="appstream2",
    protocol=Protocol.JSON,
    api_version="2016-12-01",
)

OPERATION_NAMES = (
    "AssociateApplicationFleet",
    "AssociateApplicationToEntitlement",
    "AssociateFleet",
    "BatchAssociateUserStack",
    "BatchDisassociateUserStack",
    "CopyImage",
    "CreateAppBlock",
    "CreateApplication",
    "CreateDirectoryConfig",
    "CreateEntitlement",
    "CreateFleet",
    "CreateImageBuilder",
    "CreateImageBuilderStreamingURL",
    "CreateStack",
    "CreateStreamingURL",
    "CreateUpdatedImage",
    "CreateUsageReportSubscription",
    "CreateUser",
    "DeleteAppBlock",
    "DeleteApplication",
    "DeleteDirectoryConfig",
    "DeleteEntitlement",
    "DeleteFleet",
    "DeleteImage",
    "DeleteImageBuilder",
    "DeleteImagePermissions",
    "DeleteStack",
    "DeleteUsageReportSubscription",
    "DeleteUser",
    "DescribeAppBlocks",
    "DescribeApplicationFleetAssociations",
    "DescribeApplications",
    "DescribeDirectoryConfigs",
    "DescribeEntitlements",
    "DescribeFleets",
    "DescribeImageBuilders",
    "DescribeImagePermissions",
    "DescribeImages",
    "DescribeSessions",
    "DescribeStacks",
    "DescribeUsageReportSubscriptions",
    "DescribeUserStackAssociations",
    "DescribeUsers",
    "DisableUser",
    "DisassociateApplicationFleet",
    "DisassociateApplicationFromEntitlement",
    "DisassociateFleet",
    "EnableUser",
    "ExpireSession",
    "ListAssociatedFleets",
    "ListAssociatedStacks",
    "ListEntitledApplications",
    "ListTagsForResource",
    "StartFleet",
    "StartImageBuilder",
    "StopFleet",
    "StopImageBuilder",
    "TagResource",
    "UntagResource",
    "UpdateApplication",
    "UpdateDirectoryConfig",
    "UpdateEntitlement",
    "UpdateFleet",
    "UpdateImagePermissions",
    "UpdateStack",
)

OPERATIONS = tuple(OperationSpec(name, "POST") for name in OPERATION_NAMES)


class AppStreamClient(ServiceClient):
    """Client for Amazon AppStream 2.0."""

    METADATA = METADATA
    OPERATIONS = OPERATIONS
