"""AWS AppConfig client.

REST-JSON service for applications, environments, configuration profiles,
deployment strategies, deployments and extensions.
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
    service_id="appconfig",
    display_name="AppConfig",
    signing_name="appconfig",
    endpoint_prefix="appconfig",
    protocol=Protocol.REST_JSON,
    api_version="2019-10-09",
)

_APPLICATION = (Literal("/applications/"), Field("ApplicationId"))
_PROFILE = _APPLICATION + (
    Literal("/configurationprofiles/"),
    Field("ConfigurationProfileId"),
)
_ENVIRONMENT = _APPLICATION + (Literal("/environments/"), Field("EnvironmentId"))
_DEPLOYMENT = _ENVIRONMENT + (Literal("/deployments/"), Field("DeploymentNumber"))
_HOSTED_VERSION = _PROFILE + (
    Literal("/hostedconfigurationversions/"),
    Field("VersionNumber"),
)
_STRATEGY = (Literal("/deploymentstrategies/"), Field("DeploymentStrategyId"))
_EXTENSION = (Literal("/extensions/"), Field("ExtensionIdentifier"))
_ASSOCIATION = (Literal("/extensionassociations/"), Field("ExtensionAssociationId"))
_TAGS = (Literal("/tags/"), Field("ResourceArn"))

OPERATIONS = (
    OperationSpec("CreateApplication", "POST", path=(Literal("/applications"),)),
    OperationSpec(
        "CreateConfigurationProfile",
        "POST",
        path=_APPLICATION + (Literal("/configurationprofiles"),),
        required=("ApplicationId",),
    ),
    OperationSpec(
        "CreateDeploymentStrategy", "POST", path=(Literal("/deploymentstrategies"),)
    ),
    OperationSpec(
        "CreateEnvironment",
        "POST",
        path=_APPLICATION + (Literal("/environments"),),
        required=("ApplicationId",),
    ),
    OperationSpec(
        "CreateExtension",
        "POST",
        path=(Literal("/extensions"),),
    ),
    OperationSpec(
        "CreateExtensionAssociation", "POST", path=(Literal("/extensionassociations"),)
    ),
    OperationSpec(
        "CreateHostedConfigurationVersion",
        "POST",
        path=_PROFILE + (Literal("/hostedconfigurationversions"),),
        required=("ApplicationId", "ConfigurationProfileId"),
        raw_response=True,
    ),
    OperationSpec(
        "DeleteApplication", "DELETE", path=_APPLICATION, required=("ApplicationId",)
    ),
    OperationSpec(
        "DeleteConfigurationProfile",
        "DELETE",
        path=_PROFILE,
        required=("ApplicationId", "ConfigurationProfileId"),
    ),
    # "deployement" is the literal the service routes on
    OperationSpec(
        "DeleteDeploymentStrategy",
        "DELETE",
        path=(Literal("/deployementstrategies/"), Field("DeploymentStrategyId")),
        required=("DeploymentStrategyId",),
    ),
    OperationSpec(
        "DeleteEnvironment",
        "DELETE",
        path=_ENVIRONMENT,
        required=("ApplicationId", "EnvironmentId"),
    ),
    OperationSpec(
        "DeleteExtension",
        "DELETE",
        path=_EXTENSION,
        required=("ExtensionIdentifier",),
    ),
    OperationSpec(
        "DeleteExtensionAssociation",
        "DELETE",
        path=_ASSOCIATION,
        required=("ExtensionAssociationId",),
    ),
    OperationSpec(
        "DeleteHostedConfigurationVersion",
        "DELETE",
        path=_HOSTED_VERSION,
        required=("ApplicationId", "ConfigurationProfileId", "VersionNumber"),
    ),
    OperationSpec(
        "GetApplication", "GET", path=_APPLICATION, required=("ApplicationId",)
    ),
    OperationSpec(
        "GetConfigurationProfile",
        "GET",
        path=_PROFILE,
        required=("ApplicationId", "ConfigurationProfileId"),
    ),
    OperationSpec(
        "GetDeployment",
        "GET",
        path=_DEPLOYMENT,
        required=("ApplicationId", "EnvironmentId", "DeploymentNumber"),
    ),
    OperationSpec(
        "GetDeploymentStrategy",
        "GET",
        path=_STRATEGY,
        required=("DeploymentStrategyId",),
    ),
    OperationSpec(
        "GetEnvironment",
        "GET",
        path=_ENVIRONMENT,
        required=("ApplicationId", "EnvironmentId"),
    ),
    OperationSpec(
        "GetExtension",
        "GET",
        path=_EXTENSION,
        required=("ExtensionIdentifier",),
    ),
    OperationSpec(
        "GetExtensionAssociation",
        "GET",
        path=_ASSOCIATION,
        required=("ExtensionAssociationId",),
    ),
    OperationSpec(
        "GetHostedConfigurationVersion",
        "GET",
        path=_HOSTED_VERSION,
        required=("ApplicationId", "ConfigurationProfileId", "VersionNumber"),
        raw_response=True,
    ),
    OperationSpec(
        "ListApplications",
        "GET",
        path=(Literal("/applications"),),
    ),
    OperationSpec(
        "ListConfigurationProfiles",
        "GET",
        path=_APPLICATION + (Literal("/configurationprofiles"),),
        required=("ApplicationId",),
    ),
    OperationSpec(
        "ListDeploymentStrategies",
        "GET",
        path=(Literal("/deploymentstrategies"),),
    ),
    OperationSpec(
        "ListDeployments",
        "GET",
        path=_ENVIRONMENT + (Literal("/deployments"),),
        required=("ApplicationId", "EnvironmentId"),
    ),
    OperationSpec(
        "ListEnvironments",
        "GET",
        path=_APPLICATION + (Literal("/environments"),),
        required=("ApplicationId",),
    ),
    OperationSpec(
        "ListExtensionAssociations",
        "GET",
        path=(Literal("/extensionassociations"),),
    ),
    OperationSpec(
        "ListExtensions",
        "GET",
        path=(Literal("/extensions"),),
    ),
    OperationSpec(
        "ListHostedConfigurationVersions",
        "GET",
        path=_PROFILE + (Literal("/hostedconfigurationversions"),),
        required=("ApplicationId", "ConfigurationProfileId"),
    ),
    OperationSpec(
        "ListTagsForResource", "GET", path=_TAGS, required=("ResourceArn",)
    ),
    OperationSpec(
        "StartDeployment",
        "POST",
        path=_ENVIRONMENT + (Literal("/deployments"),),
        required=("ApplicationId", "EnvironmentId"),
    ),
    OperationSpec(
        "StopDeployment",
        "DELETE",
        path=_DEPLOYMENT,
        required=("ApplicationId", "EnvironmentId", "DeploymentNumber"),
    ),
    OperationSpec("TagResource", "POST", path=_TAGS, required=("ResourceArn",)),
    OperationSpec(
        "UntagResource",
        "DELETE",
        path=_TAGS,
        required=("ResourceArn", "TagKeys"),
    ),
    OperationSpec(
        "UpdateApplication", "PATCH", path=_APPLICATION, required=("ApplicationId",)
    ),
    OperationSpec(
        "UpdateConfigurationProfile",
        "PATCH",
        path=_PROFILE,
        required=("ApplicationId", "ConfigurationProfileId"),
    ),
    OperationSpec(
        "UpdateDeploymentStrategy",
        "PATCH",
        path=_STRATEGY,
        required=("DeploymentStrategyId",),
    ),
    OperationSpec(
        "UpdateEnvironment",
        "PATCH",
        path=_ENVIRONMENT,
        required=("ApplicationId", "EnvironmentId"),
    ),
    OperationSpec(
        "UpdateExtension", "PATCH", path=_EXTENSION, required=("ExtensionIdentifier",)
    ),
    OperationSpec(
        "UpdateExtensionAssociation",
        "PATCH",
        path=_ASSOCIATION,
        required=("ExtensionAssociationId",),
    ),
    OperationSpec(
        "ValidateConfiguration",
        "POST",
        path=_PROFILE + (Literal("/validators"),),
        required=("ApplicationId", "ConfigurationProfileId", "ConfigurationVersion"),
    ),
)


class AppConfigClient(ServiceClient):
    """Client for AWS AppConfig."""

    METADATA = METADATA
    OPERATIONS = OPERATIONS
