"""Endpoint providers.

An endpoint provider turns client configuration plus per-request context
parameters into the URL a request is sent to. Clients depend only on the
`EndpointProvider` protocol; `RegionalEndpointProvider` is the default used
when none is injected.

Built-in parameters absorbed from configuration:
    Region, UseFIPS, UseDualStack, Endpoint
"""

import re
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional, Protocol, runtime_checkable
from urllib.parse import urlsplit

import structlog

logger = structlog.get_logger()

_HOST_LABEL = re.compile(r"^[a-zA-Z0-9][a-zA-Z0-9-]*$")

# (region prefix, dns suffix, dual-stack dns suffix)
_PARTITIONS = (
    ("cn-", "amazonaws.com.cn", "api.amazonwebservices.com.cn"),
    ("us-isob-", "sc2s.sgov.gov", None),
    ("us-iso-", "c2s.ic.gov", None),
)
_DEFAULT_PARTITION = ("", "amazonaws.com", "api.aws")


class EndpointResolutionError(Exception):
    """Raised by an endpoint provider that cannot produce an endpoint."""


@dataclass
class ResolvedEndpoint:
    """Result of endpoint resolution.

    Attributes:
        url: Absolute endpoint URL, possibly carrying a base path
        headers: Extra headers the endpoint requires
        signing_region: Region to sign with, if the provider chose one
    """

    url: str
    headers: Dict[str, str] = field(default_factory=dict)
    signing_region: Optional[str] = None

    @property
    def path(self) -> str:
        return urlsplit(self.url).path

    @property
    def origin(self) -> str:
        parts = urlsplit(self.url)
        return f"{parts.scheme}://{parts.netloc}"


@runtime_checkable
class EndpointProvider(Protocol):
    """Protocol for pluggable endpoint providers."""

    def init_builtin_parameters(self, config: Any) -> None:  # pragma: no cover
        ...

    def override_endpoint(self, url: str) -> None:  # pragma: no cover
        ...

    def resolve_endpoint(
        self, params: Optional[Mapping[str, Any]] = None
    ) -> ResolvedEndpoint:  # pragma: no cover
        ...


def compute_signer_region(region: Optional[str]) -> Optional[str]:
    """Derive the SigV4 signing region from a configured region.

    Pseudo regions are mapped to the region they sign for: "aws-global"
    signs as us-east-1, and FIPS pseudo regions ("fips-us-east-1",
    "us-east-1-fips") sign as the underlying region.
    """
    if not region:
        return region
    if region == "aws-global":
        return "us-east-1"
    if region.startswith("fips-"):
        region = region[len("fips-"):]
    if region.endswith("-fips"):
        region = region[: -len("-fips")]
    return region


class RegionalEndpointProvider:
    """Default provider resolving https://{prefix}[-fips].{region}.{dnsSuffix}.

    Args:
        endpoint_prefix: Service host prefix (e.g. "glacier", "es")
    """

    def __init__(self, endpoint_prefix: str) -> None:
        self.endpoint_prefix = endpoint_prefix
        self._builtins: Dict[str, Any] = {}

    @property
    def builtin_parameters(self) -> Dict[str, Any]:
        return dict(self._builtins)

    def init_builtin_parameters(self, config: Any) -> None:
        self._builtins["Region"] = getattr(config, "region", None)
        self._builtins["UseFIPS"] = bool(getattr(config, "use_fips", False))
        self._builtins["UseDualStack"] = bool(getattr(config, "use_dualstack", False))
        endpoint = getattr(config, "endpoint_override", None)
        if endpoint:
            self._builtins["Endpoint"] = endpoint
        logger.debug(
            "endpoint_builtins_initialized",
            endpoint_prefix=self.endpoint_prefix,
            region=self._builtins["Region"],
        )

    def override_endpoint(self, url: str) -> None:
        logger.debug(
            "endpoint_overridden", endpoint_prefix=self.endpoint_prefix, url=url
        )
        self._builtins["Endpoint"] = url

    def resolve_endpoint(
        self, params: Optional[Mapping[str, Any]] = None
    ) -> ResolvedEndpoint:
        merged = dict(self._builtins)
        merged.update(params or {})

        region = merged.get("Region")
        use_fips = bool(merged.get("UseFIPS"))
        use_dualstack = bool(merged.get("UseDualStack"))
        endpoint = merged.get("Endpoint")

        if endpoint:
            if use_fips:
                raise EndpointResolutionError(
                    "Invalid Configuration: FIPS and custom endpoint are not supported"
                )
            if use_dualstack:
                raise EndpointResolutionError(
                    "Invalid Configuration: Dualstack and custom endpoint are not supported"
                )
            return ResolvedEndpoint(
                url=endpoint, signing_region=compute_signer_region(region)
            )

        if not region:
            raise EndpointResolutionError("Invalid Configuration: Missing Region")
        if not _HOST_LABEL.match(region):
            raise EndpointResolutionError(
                f"Invalid Configuration: region {region!r} is not a valid host label"
            )

        signing_region = compute_signer_region(region)
        _, dns_suffix, dualstack_suffix = _partition_for(signing_region)
        if use_dualstack:
            if dualstack_suffix is None:
                raise EndpointResolutionError(
                    "DualStack is enabled but this partition does not support DualStack"
                )
            dns_suffix = dualstack_suffix

        host_prefix = self.endpoint_prefix
        if use_fips or "fips" in region:
            host_prefix += "-fips"

        return ResolvedEndpoint(
            url=f"https://{host_prefix}.{signing_region}.{dns_suffix}",
            signing_region=signing_region,
        )


def _partition_for(region: str):
    for partition in _PARTITIONS:
        if region.startswith(partition[0]):
            return partition
    return _DEFAULT_PARTITION
