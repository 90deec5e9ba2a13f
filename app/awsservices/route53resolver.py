"""Amazon Route 53 Resolver client (JSON 1.1 protocol)."""

from awsruntime.clients import OperationSpec, Protocol, ServiceClient, ServiceMetadata

METADATA = ServiceMetadata(
    service_id="route53resolver",
    display_name="Route53Resolver",
    signing_name="route53resolver",
    endpoint_prefix="route53resolver",
    protocol=Protocol.JSON,
    api_version="2018-04-01",
)

OPERATION_NAMES = (
    "AssociateFirewallRuleGroup",
    "AssociateResolverEndpointIpAddress",
    "AssociateResolverQueryLogConfig",
    "AssociateResolverRule",
    "CreateFirewallDomainList",
    "CreateFirewallRule",
    "CreateFirewallRuleGroup",
    "CreateResolverEndpoint",
    "CreateResolverQueryLogConfig",
    "CreateResolverRule",
    "DeleteFirewallDomainList",
    "DeleteFirewallRule",
    "DeleteFirewallRuleGroup",
    "DeleteResolverEndpoint",
    "DeleteResolverQueryLogConfig",
    "DeleteResolverRule",
    "DisassociateFirewallRuleGroup",
    "DisassociateResolverEndpointIpAddress",
    "DisassociateResolverQueryLogConfig",
    "DisassociateResolverRule",
    "GetFirewallConfig",
    "GetFirewallDomainList",
    "GetFirewallRuleGroup",
    "GetFirewallRuleGroupAssociation",
    "GetFirewallRuleGroupPolicy",
    "GetResolverConfig",
    "GetResolverDnssecConfig",
    "GetResolverEndpoint",
    "GetResolverQueryLogConfig",
    "GetResolverQueryLogConfigAssociation",
    "GetResolverQueryLogConfigPolicy",
    "GetResolverRule",
    "GetResolverRuleAssociation",
    "GetResolverRulePolicy",
    "ImportFirewallDomains",
    "ListFirewallConfigs",
    "ListFirewallDomainLists",
    "ListFirewallDomains",
    "ListFirewallRuleGroupAssociations",
    "ListFirewallRuleGroups",
    "ListFirewallRules",
    "ListResolverConfigs",
    "ListResolverDnssecConfigs",
    "ListResolverEndpointIpAddresses",
    "ListResolverEndpoints",
    "ListResolverQueryLogConfigAssociations",
    "ListResolverQueryLogConfigs",
    "ListResolverRuleAssociations",
    "ListResolverRules",
    "ListTagsForResource",
    "PutFirewallRuleGroupPolicy",
    "PutResolverQueryLogConfigPolicy",
    "PutResolverRulePolicy",
    "TagResource",
    "UntagResource",
    "UpdateFirewallConfig",
    "UpdateFirewallDomains",
    "UpdateFirewallRule",
    "UpdateFirewallRuleGroupAssociation",
    "UpdateResolverConfig",
    "UpdateResolverDnssecConfig",
    "UpdateResolverEndpoint",
    "UpdateResolverRule",
)

OPERATIONS = tuple(OperationSpec(name, "POST") for name in OPERATION_NAMES)


class Route53ResolverClient(ServiceClient):
    """Client for Amazon Route 53 Resolver."""

    METADATA = METADATA
    OPERATIONS = OPERATIONS
