"""Amazon OpenSearch Service client.

REST-JSON service under the 2021-01-01 API prefix. Requests are signed
with the "es" service name and sent to "es" endpoints.
"""

from awsruntime.clients import (
    Field,
    Literal,
    OperationSpec,
    Protocol,
    ServiceClient,
    ServiceMetadata,
)

METADATA = ServiceMetadata(
    service_id="opensearch",
    display_name="OpenSearch",
    signing_name="es",
    endpoint_prefix="es",
    protocol=Protocol.REST_JSON,
    api_version="2021-01-01",
)

_API = "/2021-01-01"
_DOMAIN = (Literal(f"{_API}/opensearch/domain/"), Field("DomainName"))
_INBOUND = (
    Literal(f"{_API}/opensearch/cc/inboundConnection/"),
    Field("ConnectionId"),
)
_OUTBOUND = (
    Literal(f"{_API}/opensearch/cc/outboundConnection/"),
    Field("ConnectionId"),
)
_PACKAGE = (Literal(f"{_API}/packages/"), Field("PackageID"))
_UPGRADE = (Literal(f"{_API}/opensearch/upgradeDomain/"), Field("DomainName"))


def _path(literal: str) -> tuple:
    return (Literal(f"{_API}{literal}"),)


OPERATIONS = (
    OperationSpec(
        "AcceptInboundConnection",
        "PUT",
        path=_INBOUND + (Literal("/accept"),),
        required=("ConnectionId",),
    ),
    OperationSpec("AddTags", "POST", path=_path("/tags")),
    OperationSpec(
        "AssociatePackage",
        "POST",
        path=(
            Literal(f"{_API}/packages/associate/"),
            Field("PackageID"),
            Field("DomainName"),
        ),
        required=("PackageID", "DomainName"),
    ),
    OperationSpec(
        "AuthorizeVpcEndpointAccess",
        "POST",
        path=_DOMAIN + (Literal("/authorizeVpcEndpointAccess"),),
        required=("DomainName",),
    ),
    OperationSpec(
        "CancelServiceSoftwareUpdate",
        "POST",
        path=_path("/opensearch/serviceSoftwareUpdate/cancel"),
    ),
    OperationSpec("CreateDomain", "POST", path=_path("/opensearch/domain")),
    OperationSpec(
        "CreateOutboundConnection",
        "POST",
        path=_path("/opensearch/cc/outboundConnection"),
    ),
    OperationSpec("CreatePackage", "POST", path=_path("/packages")),
    OperationSpec("CreateVpcEndpoint", "POST", path=_path("/opensearch/vpcEndpoints")),
    OperationSpec("DeleteDomain", "DELETE", path=_DOMAIN, required=("DomainName",)),
    OperationSpec(
        "DeleteInboundConnection",
        "DELETE",
        path=_INBOUND,
        required=("ConnectionId",),
    ),
    OperationSpec(
        "DeleteOutboundConnection",
        "DELETE",
        path=_OUTBOUND,
        required=("ConnectionId",),
    ),
    OperationSpec("DeletePackage", "DELETE", path=_PACKAGE, required=("PackageID",)),
    OperationSpec(
        "DeleteVpcEndpoint",
        "DELETE",
        path=(Literal(f"{_API}/opensearch/vpcEndpoints/"), Field("VpcEndpointId")),
        required=("VpcEndpointId",),
    ),
    OperationSpec("DescribeDomain", "GET", path=_DOMAIN, required=("DomainName",)),
    OperationSpec(
        "DescribeDomainAutoTunes",
        "GET",
        path=_DOMAIN + (Literal("/autoTunes"),),
        required=("DomainName",),
    ),
    OperationSpec(
        "DescribeDomainChangeProgress",
        "GET",
        path=_DOMAIN + (Literal("/progress"),),
        required=("DomainName",),
    ),
    OperationSpec(
        "DescribeDomainConfig",
        "GET",
        path=_DOMAIN + (Literal("/config"),),
        required=("DomainName",),
    ),
    OperationSpec("DescribeDomains", "POST", path=_path("/opensearch/domain-info")),
    OperationSpec(
        "DescribeInboundConnections",
        "POST",
        path=_path("/opensearch/cc/inboundConnection/search"),
    ),
    OperationSpec(
        "DescribeInstanceTypeLimits",
        "GET",
        path=(
            Literal(f"{_API}/opensearch/instanceTypeLimits/"),
            Field("EngineVersion"),
            Field("InstanceType"),
        ),
        required=("InstanceType", "EngineVersion"),
    ),
    OperationSpec(
        "DescribeOutboundConnections",
        "POST",
        path=_path("/opensearch/cc/outboundConnection/search"),
    ),
    OperationSpec("DescribePackages", "POST", path=_path("/packages/describe")),
    OperationSpec(
        "DescribeReservedInstanceOfferings",
        "GET",
        path=_path("/opensearch/reservedInstanceOfferings"),
    ),
    OperationSpec(
        "DescribeReservedInstances",
        "GET",
        path=_path("/opensearch/reservedInstances"),
    ),
    OperationSpec(
        "DescribeVpcEndpoints", "POST", path=_path("/opensearch/vpcEndpoints/describe")
    ),
    OperationSpec(
        "DissociatePackage",
        "POST",
        path=(
            Literal(f"{_API}/packages/dissociate/"),
            Field("PackageID"),
            Field("DomainName"),
        ),
        required=("PackageID", "DomainName"),
    ),
    OperationSpec(
        "GetCompatibleVersions",
        "GET",
        path=_path("/opensearch/compatibleVersions"),
    ),
    OperationSpec(
        "GetPackageVersionHistory",
        "GET",
        path=_PACKAGE + (Literal("/history"),),
        required=("PackageID",),
    ),
    OperationSpec(
        "GetUpgradeHistory",
        "GET",
        path=_UPGRADE + (Literal("/history"),),
        required=("DomainName",),
    ),
    OperationSpec(
        "GetUpgradeStatus",
        "GET",
        path=_UPGRADE + (Literal("/status"),),
        required=("DomainName",),
    ),
    OperationSpec(
        "ListDomainNames",
        "GET",
        path=_path("/domain"),
    ),
    OperationSpec(
        "ListDomainsForPackage",
        "GET",
        path=_PACKAGE + (Literal("/domains"),),
        required=("PackageID",),
    ),
    OperationSpec(
        "ListInstanceTypeDetails",
        "GET",
        path=(Literal(f"{_API}/opensearch/instanceTypeDetails/"), Field("EngineVersion")),
        required=("EngineVersion",),
    ),
    OperationSpec(
        "ListPackagesForDomain",
        "GET",
        path=(Literal(f"{_API}/domain/"), Field("DomainName"), Literal("/packages")),
        required=("DomainName",),
    ),
    OperationSpec(
        "ListTags",
        "GET",
        path=_path("/tags/"),
        required=("ARN",),
    ),
    OperationSpec(
        "ListVersions",
        "GET",
        path=_path("/opensearch/versions"),
    ),
    OperationSpec(
        "ListVpcEndpointAccess",
        "GET",
        path=_DOMAIN + (Literal("/listVpcEndpointAccess"),),
        required=("DomainName",),
    ),
    OperationSpec(
        "ListVpcEndpoints",
        "GET",
        path=_path("/opensearch/vpcEndpoints"),
    ),
    OperationSpec(
        "ListVpcEndpointsForDomain",
        "GET",
        path=_DOMAIN + (Literal("/vpcEndpoints"),),
        required=("DomainName",),
    ),
    OperationSpec(
        "PurchaseReservedInstanceOffering",
        "POST",
        path=_path("/opensearch/purchaseReservedInstanceOffering"),
    ),
    OperationSpec(
        "RejectInboundConnection",
        "PUT",
        path=_INBOUND + (Literal("/reject"),),
        required=("ConnectionId",),
    ),
    OperationSpec("RemoveTags", "POST", path=_path("/tags-removal")),
    OperationSpec(
        "RevokeVpcEndpointAccess",
        "POST",
        path=_DOMAIN + (Literal("/revokeVpcEndpointAccess"),),
        required=("DomainName",),
    ),
    OperationSpec(
        "StartServiceSoftwareUpdate",
        "POST",
        path=_path("/opensearch/serviceSoftwareUpdate/start"),
    ),
    OperationSpec(
        "UpdateDomainConfig",
        "POST",
        path=_DOMAIN + (Literal("/config"),),
        required=("DomainName",),
    ),
    OperationSpec("UpdatePackage", "POST", path=_path("/packages/update")),
    OperationSpec(
        "UpdateVpcEndpoint", "POST", path=_path("/opensearch/vpcEndpoints/update")
    ),
    OperationSpec("UpgradeDomain", "POST", path=_path("/opensearch/upgradeDomain")),
)


class OpenSearchServiceClient(ServiceClient):
    """Client for Amazon OpenSearch Service."""

    METADATA = METADATA
    OPERATIONS = OPERATIONS
