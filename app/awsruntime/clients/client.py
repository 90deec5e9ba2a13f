"""Descriptor-driven service client base.

`ServiceClient` subclasses declare `METADATA` and an `OPERATIONS` table of
`OperationSpec` descriptors. For every descriptor three methods are
generated, named after the operation with `botocore.xform_name`:

- `delete_archive(**params)`: synchronous, returns an `OperationResult`
- `delete_archive_callable(**params)`: returns a `Future[OperationResult]`
- `delete_archive_async(handler, context=None, **params)`: calls
  `handler(client, request, outcome, context)` on a pool thread

All three go through `execute()`: required-field and format checks,
endpoint resolution, request serialization, signed dispatch and response
parsing. Expected failures come back as error results; nothing is raised.

Usage:
    from awsservices.glacier import GlacierClient

    client = GlacierClient()
    result = client.delete_archive(
        AccountId="123456789012", VaultName="logs", ArchiveId="a1"
    )
    if not result.is_success:
        logger.warning("delete_failed", error=result.message)
"""

import uuid
from concurrent.futures import Future
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Callable, ClassVar, Dict, Mapping, Optional, Tuple

from botocore.exceptions import ParamValidationError  # type: ignore
from botocore.model import ServiceModel  # type: ignore
import structlog

from awsruntime.clients.configuration import ClientConfiguration
from awsruntime.clients.endpoints import (
    EndpointProvider,
    EndpointResolutionError,
    RegionalEndpointProvider,
    compute_signer_region,
)
from awsruntime.clients.operation import (
    OperationSpec,
    ServiceMetadata,
    SigningMode,
    index_operations,
)
from awsruntime.clients import models
from awsruntime.clients.protocols import ServiceProtocol
from awsruntime.clients.session_provider import SessionProvider
from awsruntime.clients.transport import HttpTransport
from awsruntime.logging import bind_operation_context
from awsruntime.operations import ErrorKind, OperationResult, OperationStatus

logger = structlog.get_logger()

_DEFAULT = object()


@dataclass(frozen=True)
class OperationRequest:
    """Snapshot of the request passed to an async completion handler."""

    operation_name: str
    params: Mapping[str, Any]


@dataclass(frozen=True)
class AsyncCallerContext:
    """Caller-supplied context echoed back to an async completion handler."""

    uuid: str = field(default_factory=lambda: str(uuid.uuid4()))


AsyncHandler = Callable[
    ["ServiceClient", OperationRequest, OperationResult, Optional[AsyncCallerContext]],
    None,
]


def credentials_unavailable(message: str) -> OperationResult:
    return OperationResult.error(
        OperationStatus.UNAUTHORIZED,
        message,
        error_code="CREDENTIALS_UNAVAILABLE",
        error_kind=ErrorKind.ACCESS_DENIED,
    )


def _create_api_method(operation: OperationSpec):
    def _api_call(self, *args, **kwargs):
        if args:
            raise TypeError(f"{operation.python_name}() only accepts keyword arguments.")
        return self.execute(operation.name, **kwargs)

    _api_call.__name__ = operation.python_name
    _api_call.__doc__ = f"Call {operation.name} and return an OperationResult."
    return _api_call


def _create_callable_method(operation: OperationSpec):
    def _api_call(self, *args, **kwargs) -> Future:
        if args:
            raise TypeError(
                f"{operation.python_name}_callable() only accepts keyword arguments."
            )
        return self.execute_callable(operation.name, **kwargs)

    _api_call.__name__ = f"{operation.python_name}_callable"
    _api_call.__doc__ = f"Submit {operation.name}; returns a Future[OperationResult]."
    return _api_call


def _create_async_method(operation: OperationSpec):
    def _api_call(self, handler, context=None, **kwargs) -> None:
        self.execute_async(operation.name, handler, context, **kwargs)

    _api_call.__name__ = f"{operation.python_name}_async"
    _api_call.__doc__ = (
        f"Submit {operation.name}; handler(client, request, outcome, context) "
        "runs on completion."
    )
    return _api_call


class ServiceClient:
    """Base class for descriptor-driven service clients.

    Args:
        config: Client configuration; defaults to one built from settings
        credentials: None for the default provider chain, a botocore
            `Credentials` instance, or a custom credentials provider
        endpoint_provider: Endpoint provider; defaults to a
            `RegionalEndpointProvider` for the service. Passing None
            explicitly is an error.
        transport: Optional transport, mainly for tests
    """

    METADATA: ClassVar[ServiceMetadata]
    OPERATIONS: ClassVar[Tuple[OperationSpec, ...]] = ()

    _operations: ClassVar[Dict[str, OperationSpec]] = {}

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        if "OPERATIONS" not in cls.__dict__:
            return
        cls._operations = index_operations(cls.OPERATIONS)
        for operation in cls.OPERATIONS:
            name = operation.python_name
            setattr(cls, name, _create_api_method(operation))
            setattr(cls, f"{name}_callable", _create_callable_method(operation))
            setattr(cls, f"{name}_async", _create_async_method(operation))

    def __init__(
        self,
        config: Optional[ClientConfiguration] = None,
        credentials: Any = None,
        endpoint_provider: Any = _DEFAULT,
        transport: Optional[HttpTransport] = None,
    ) -> None:
        self._config = config or ClientConfiguration.from_settings()
        if endpoint_provider is _DEFAULT:
            endpoint_provider = self.default_endpoint_provider()
        self._endpoint_provider = endpoint_provider
        self._session_provider = SessionProvider(
            region=self._config.region,
            role_arn=self._config.role_arn,
            credentials=credentials,
        )
        self._transport = transport or HttpTransport.from_config(self._config)
        self._protocol = ServiceProtocol(self.METADATA, self.load_service_model())
        self._logger = logger.bind(component=self.METADATA.service_id)
        self._init()

    @classmethod
    def load_service_model(cls) -> ServiceModel:
        return models.load_service_model(
            cls.METADATA.service_id, cls.METADATA.api_version
        )

    @classmethod
    def default_endpoint_provider(cls) -> EndpointProvider:
        return RegionalEndpointProvider(cls.METADATA.endpoint_prefix)

    def _init(self) -> None:
        self._transport.register_service_name(self.METADATA.display_name)
        if self._endpoint_provider is None:
            raise ValueError(
                f"{self.METADATA.display_name} client requires an endpoint provider"
            )
        self._endpoint_provider.init_builtin_parameters(self._config)
        self._logger.debug(
            "aws_client_initialized",
            display_name=self.METADATA.display_name,
            region=self._config.region,
            credentials_strategy=self._session_provider.strategy,
        )

    @property
    def config(self) -> ClientConfiguration:
        return self._config

    @property
    def endpoint_provider(self) -> EndpointProvider:
        return self._endpoint_provider

    @property
    def operation_names(self) -> Tuple[str, ...]:
        return tuple(self._operations)

    def override_endpoint(self, url: str) -> None:
        """Replace the endpoint used for all subsequent requests."""
        self._endpoint_provider.override_endpoint(url)

    def get_operation(self, operation_name: str) -> OperationSpec:
        try:
            return self._operations[operation_name]
        except KeyError:
            raise ValueError(
                f"Unknown {self.METADATA.display_name} operation: {operation_name}"
            ) from None

    def execute(self, operation_name: str, **params: Any) -> OperationResult:
        """Run an operation synchronously on the calling thread.

        Args:
            operation_name: Wire operation name (e.g. "DeleteArchive")
            **params: Request fields; a field set to None counts as unset

        Returns:
            OperationResult with the parsed response or a typed error
        """
        operation = self.get_operation(operation_name)
        request_params = {k: v for k, v in params.items() if v is not None}

        with bind_operation_context(
            service=self.METADATA.service_id, operation=operation.name
        ):
            missing = operation.find_missing(request_params)
            if missing is not None:
                self._logger.warning("aws_operation_missing_parameter", field=missing)
                return OperationResult.missing_parameter(missing)

            invalid = operation.find_invalid(request_params)
            if invalid is not None:
                self._logger.warning("aws_operation_invalid_parameter", field=invalid)
                return OperationResult.invalid_parameter(invalid)

            try:
                endpoint = self._endpoint_provider.resolve_endpoint(
                    dict(operation.endpoint_params)
                )
            except EndpointResolutionError as e:
                self._logger.error("aws_endpoint_resolution_failed", error=str(e))
                return OperationResult.endpoint_resolution_failure(str(e))

            try:
                request = self._protocol.serialize(
                    operation, request_params, base_path=endpoint.path
                )
            except ParamValidationError as e:
                self._logger.warning("aws_operation_invalid_request", error=str(e))
                return OperationResult.permanent_error(
                    str(e),
                    error_code="INVALID_PARAMETER",
                    error_kind=ErrorKind.INVALID_PARAMETER_VALUE,
                )
            request.headers.update(endpoint.headers)

            credentials = None
            if operation.signing != SigningMode.NONE:
                try:
                    credentials = self._session_provider.get_credentials()
                except Exception as e:  # pylint: disable=broad-except
                    self._logger.error("aws_credentials_failed", error=str(e))
                    return credentials_unavailable(f"Unable to obtain credentials: {e}")

            self._logger.debug(
                "aws_operation_sending",
                method=request.method,
                path=request.path,
                signed=credentials is not None,
            )
            return self._transport.send(
                endpoint.origin,
                request,
                lambda response: self._protocol.parse(operation, response),
                credentials=credentials,
                signing_name=self.METADATA.signing_name,
                signing_region=endpoint.signing_region
                or compute_signer_region(self._config.region),
            )

    def execute_callable(self, operation_name: str, **params: Any) -> Future:
        """Submit an operation to the shared executor and return its future."""
        self.get_operation(operation_name)
        return self._config.managed_executor.submit(
            self.execute, operation_name, **params
        )

    def execute_async(
        self,
        operation_name: str,
        handler: AsyncHandler,
        context: Optional[AsyncCallerContext] = None,
        **params: Any,
    ) -> None:
        """Submit an operation and call `handler` with its outcome on completion."""
        self.get_operation(operation_name)
        request = OperationRequest(operation_name, MappingProxyType(dict(params)))

        def _complete(outcome: OperationResult) -> None:
            handler(self, request, outcome, context)

        self._config.managed_executor.submit_with_continuation(
            lambda: self.execute(operation_name, **params), _complete
        )
