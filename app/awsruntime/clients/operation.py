"""Declarative operation and service descriptors.

Every service operation is described by an `OperationSpec`: HTTP verb, the
ordered path segments, a fixed query literal, required fields, field format
checks and signing mode. Service clients are generated from a table of
these descriptors and all run through the same execute routine.

Usage:
    from awsruntime.clients.operation import Field, Literal, OperationSpec

    DELETE_ARCHIVE = OperationSpec(
        "DeleteArchive",
        "DELETE",
        path=(Field("AccountId"), Literal("/vaults/"), Field("VaultName"),
              Literal("/archives/"), Field("ArchiveId")),
        required=("AccountId", "VaultName", "ArchiveId"),
    )
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, Mapping, Optional, Tuple, Union
from urllib.parse import quote

from botocore import xform_name


class SigningMode(str, Enum):
    """How a request is authenticated before it is sent."""

    SIGV4 = "sigv4"
    NONE = "none"


class Protocol(str, Enum):
    """Wire protocol spoken by a service."""

    REST_JSON = "rest-json"
    JSON = "json"
    QUERY = "query"


HTTP_METHODS = frozenset({"GET", "POST", "PUT", "DELETE", "PATCH", "HEAD"})


@dataclass(frozen=True)
class Literal:
    """A constant path fragment, possibly spanning several segments."""

    value: str


@dataclass(frozen=True)
class Field:
    """A path segment taken from a request field and URL-encoded."""

    name: str


PathSegment = Union[Literal, Field]
FieldValidator = Callable[[Any], bool]


def is_account_id(value: Any) -> bool:
    """Check for an AWS account id: exactly 12 ASCII digits."""
    if not isinstance(value, str) or len(value) != 12:
        return False
    return all("0" <= ch <= "9" for ch in value)


@dataclass(frozen=True)
class ServiceMetadata:
    """Per-service constants injected into the client at construction.

    Attributes:
        service_id: Snake-case identifier used in logs (e.g. "glacier")
        display_name: Name registered with the transport (e.g. "Elastic Beanstalk")
        signing_name: SigV4 service name (e.g. "es" for OpenSearch)
        endpoint_prefix: Host prefix used by the default endpoint provider
        protocol: Wire protocol of the service
        api_version: API version of the service model to load
        default_headers: Headers sent with every request
    """

    service_id: str
    display_name: str
    signing_name: str
    endpoint_prefix: str
    protocol: Protocol
    api_version: str
    default_headers: Mapping[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class OperationSpec:
    """Declarative description of a single service operation.

    Attributes:
        name: Wire operation name (e.g. "DeleteArchive")
        method: HTTP verb
        path: Ordered path segments appended to the endpoint path
        query: Fixed query literal (e.g. "operation=add")
        required: Fields checked for presence, in order
        validators: Field format checks run after the presence checks
        signing: Signing mode for the request
        raw_response: Hand the response body to the parser as a stream
        endpoint_params: Extra parameters passed to the endpoint provider
    """

    name: str
    method: str = "POST"
    path: Tuple[PathSegment, ...] = ()
    query: Optional[str] = None
    required: Tuple[str, ...] = ()
    validators: Mapping[str, FieldValidator] = field(default_factory=dict)
    signing: SigningMode = SigningMode.SIGV4
    raw_response: bool = False
    endpoint_params: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        if self.method not in HTTP_METHODS:
            raise ValueError(f"Unsupported HTTP method {self.method!r} for {self.name}")

    @property
    def python_name(self) -> str:
        return xform_name(self.name)

    @property
    def path_fields(self) -> frozenset:
        return frozenset(seg.name for seg in self.path if isinstance(seg, Field))

    def find_missing(self, params: Mapping[str, Any]) -> Optional[str]:
        """Return the first required field that is not set, if any."""
        for name in self.required:
            if params.get(name) is None:
                return name
        return None

    def find_invalid(self, params: Mapping[str, Any]) -> Optional[str]:
        """Return the first set field that fails its format check, if any."""
        for name, check in self.validators.items():
            value = params.get(name)
            if value is not None and not check(value):
                return name
        return None

    def render_path(self, params: Mapping[str, Any], base_path: str = "") -> str:
        """Build the request path by appending segments to `base_path`.

        Literal fragments are split on "/" and empty pieces dropped. A
        trailing "/" survives only when no segment follows it. Field values
        are percent-encoded as single segments.
        """
        segments = [s for s in base_path.split("/") if s]
        trailing_slash = base_path.endswith("/") and bool(segments)
        for seg in self.path:
            if isinstance(seg, Literal):
                parts = [p for p in seg.value.split("/") if p]
                segments.extend(parts)
                trailing_slash = seg.value.endswith("/")
            else:
                segments.append(quote(_to_text(params[seg.name]), safe=""))
                trailing_slash = False

        rendered = "/" + "/".join(segments)
        if trailing_slash and segments:
            rendered += "/"
        return rendered


def _to_text(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def index_operations(operations: Tuple[OperationSpec, ...]) -> Dict[str, OperationSpec]:
    """Index descriptors by wire name, rejecting duplicates."""
    index: Dict[str, OperationSpec] = {}
    for spec in operations:
        if spec.name in index:
            raise ValueError(f"Duplicate operation {spec.name}")
        index[spec.name] = spec
    return index
