"""AWS CodeStar client (JSON 1.1 protocol)."""

from awsruntime.clients import OperationSpec, Protocol, ServiceClient, ServiceMetadata

METADATA = ServiceMetadata(
    service_id="codestar",
    display_name="CodeStar",
    signing_name="codestar",
    endpoint_prefix="codestar",
    protocol=Protocol.JSON,
    api_version="2017-04-19",
)

OPERATION_NAMES = (
    "AssociateTeamMember",
    "CreateProject",
    "CreateUserProfile",
    "DeleteProject",
    "DeleteUserProfile",
    "DescribeProject",
    "DescribeUserProfile",
    "DisassociateTeamMember",
    "ListProjects",
    "ListResources",
    "ListTagsForProject",
    "ListTeamMembers",
    "ListUserProfiles",
    "TagProject",
    "UntagProject",
    "UpdateProject",
    "UpdateTeamMember",
    "UpdateUserProfile",
)

OPERATIONS = tuple(OperationSpec(name, "POST") for name in OPERATION_NAMES)


class CodeStarClient(ServiceClient):
    """Client for AWS CodeStar."""

    METADATA = METADATA
    OPERATIONS = OPERATIONS
