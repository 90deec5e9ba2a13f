"""Service client runtime.

Descriptor model, endpoint providers, credential strategies, wire
protocols, the signed transport and the `ServiceClient` base that ties
them together.
"""

from awsruntime.clients.client import (
    AsyncCallerContext,
    OperationRequest,
    ServiceClient,
)
from awsruntime.clients.configuration import ClientConfiguration
from awsruntime.clients.endpoints import (
    EndpointProvider,
    EndpointResolutionError,
    RegionalEndpointProvider,
    ResolvedEndpoint,
    compute_signer_region,
)
from awsruntime.clients.executor import ExecutorShutdownError, ManagedExecutor
from awsruntime.clients.operation import (
    Field,
    Literal,
    OperationSpec,
    Protocol,
    ServiceMetadata,
    SigningMode,
    is_account_id,
)
from awsruntime.clients.session_provider import SessionProvider
from awsruntime.clients.transport import HttpTransport

__all__ = [
    "AsyncCallerContext",
    "ClientConfiguration",
    "EndpointProvider",
    "EndpointResolutionError",
    "ExecutorShutdownError",
    "Field",
    "HttpTransport",
    "Literal",
    "ManagedExecutor",
    "OperationRequest",
    "OperationSpec",
    "Protocol",
    "RegionalEndpointProvider",
    "ResolvedEndpoint",
    "ServiceClient",
    "ServiceMetadata",
    "SessionProvider",
    "SigningMode",
    "compute_signer_region",
    "is_account_id",
]
