"""Request serialization and response parsing on botocore's wire codecs.

Each client pairs its descriptor table with the botocore service model.
The descriptor decides the verb, the path and the fixed query literal;
botocore's serializer places every other member (query string, headers,
body) and botocore's parser turns the HTTP response back into the shapes
of the model.

Parsers return an `OperationResult`: the decoded output on 2xx, a
classified service error otherwise.
"""

import io
import json
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Tuple
from urllib.parse import parse_qsl

from botocore.awsrequest import HeadersDict  # type: ignore
from botocore.parsers import ResponseParserError  # type: ignore
from botocore.model import OperationModel, ServiceModel  # type: ignore
from botocore.parsers import create_parser  # type: ignore
from botocore.response import StreamingBody  # type: ignore
from botocore.serialize import create_serializer  # type: ignore
from botocore.utils import percent_encode_sequence  # type: ignore
import structlog

from awsruntime.clients.operation import OperationSpec, ServiceMetadata
from awsruntime.operations import (
    OperationResult,
    OperationStatus,
    classify_service_error,
)

logger = structlog.get_logger()

_REQUEST_ID_HEADERS = ("x-amzn-requestid", "x-amz-request-id", "x-amzn-request-id")


@dataclass
class SerializedRequest:
    """Protocol-level request, ready to be turned into an HTTP request."""

    method: str
    path: str
    query: List[Tuple[str, str]] = field(default_factory=list)
    headers: Dict[str, str] = field(default_factory=dict)
    body: bytes = b""

    @property
    def query_string(self) -> str:
        return percent_encode_sequence(self.query)


@dataclass
class HttpResponse:
    """Transport-level response handed to the protocol parsers."""

    status_code: int
    headers: Mapping[str, str]
    body: bytes = b""

    def header(self, name: str) -> Optional[str]:
        wanted = name.lower()
        for key, value in self.headers.items():
            if key.lower() == wanted:
                return value
        return None

    @property
    def request_id(self) -> Optional[str]:
        for name in _REQUEST_ID_HEADERS:
            value = self.header(name)
            if value:
                return value
        return None

    @property
    def retry_after(self) -> Optional[int]:
        value = self.header("retry-after")
        if value is None:
            return None
        try:
            return int(value)
        except ValueError:
            return None


def _query_text(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _encode_body(body: Any) -> bytes:
    if body is None:
        return b""
    if isinstance(body, dict):
        return percent_encode_sequence(body).encode("utf-8")
    if isinstance(body, str):
        return body.encode("utf-8")
    if isinstance(body, bytearray):
        return bytes(body)
    if hasattr(body, "read"):
        return _encode_body(body.read())
    return body


def _error_code(value: Any) -> Optional[str]:
    if value is None or value == "":
        return None
    # "aws.protocoltests#FooError" and "FooError:http://..." both carry the name
    return str(value).split(":")[0].split("#")[-1] or None


class ServiceProtocol:
    """Serializer and parser for one service, driven by its botocore model.

    Args:
        metadata: Service constants from the client class
        service_model: botocore `ServiceModel` for the service
    """

    def __init__(self, metadata: ServiceMetadata, service_model: ServiceModel) -> None:
        self.metadata = metadata
        self.service_model = service_model
        # models may list several protocols; the client speaks the one it declares
        self._serializer = create_serializer(
            metadata.protocol.value, include_validation=True
        )
        self._parser = create_parser(metadata.protocol.value)

    @property
    def name(self) -> str:
        return self.metadata.protocol.value

    def operation_model(self, operation_name: str) -> OperationModel:
        return self.service_model.operation_model(operation_name)

    def to_api_params(
        self, operation_model: OperationModel, params: Mapping[str, Any]
    ) -> Dict[str, Any]:
        """Map caller field names onto the model's input member names.

        Top-level names match case-insensitively, so "AccountId" reaches a
        member modelled as "accountId". Unknown names are passed through
        for the validator to report.
        """
        shape = operation_model.input_shape
        if shape is None:
            return dict(params)
        members = {name.lower(): name for name in shape.members}
        return {members.get(key.lower(), key): value for key, value in params.items()}

    def serialize(
        self,
        spec: OperationSpec,
        params: Mapping[str, Any],
        base_path: str = "",
    ) -> SerializedRequest:
        """Serialize a request; raises botocore `ParamValidationError` on bad input."""
        operation_model = self.operation_model(spec.name)
        serialized = self._serializer.serialize_to_request(
            self.to_api_params(operation_model, params), operation_model
        )

        request = SerializedRequest(
            method=spec.method,
            path=spec.render_path(params, base_path),
            headers=dict(self.metadata.default_headers),
        )
        if spec.query:
            request.query.extend(parse_qsl(spec.query, keep_blank_values=True))
        for key, value in serialized.get("query_string", {}).items():
            if isinstance(value, (list, tuple)):
                request.query.extend((key, _query_text(v)) for v in value)
            else:
                request.query.append((key, _query_text(value)))
        for key, value in serialized.get("headers", {}).items():
            request.headers[key] = str(value)
        request.body = _encode_body(serialized.get("body"))
        return request

    def build_query(self, spec: OperationSpec, params: Mapping[str, Any]) -> List[Tuple[str, str]]:
        """Serialize a query-protocol request into (name, value) pairs."""
        operation_model = self.operation_model(spec.name)
        serialized = self._serializer.serialize_to_request(
            self.to_api_params(operation_model, params), operation_model
        )
        body = serialized.get("body") or {}
        return [(key, _query_text(value)) for key, value in body.items()]

    def parse(self, spec: OperationSpec, response: HttpResponse) -> OperationResult:
        operation_model = self.operation_model(spec.name)
        body: Any = response.body
        if response.status_code < 300 and (
            spec.raw_response or operation_model.has_streaming_output
        ):
            body = StreamingBody(io.BytesIO(response.body), len(response.body))
        response_dict = {
            "status_code": response.status_code,
            "headers": HeadersDict(response.headers),
            "body": body,
            "context": {"operation_name": spec.name},
        }

        try:
            parsed = self._parser.parse(response_dict, operation_model.output_shape)
        except (ResponseParserError, TypeError, AttributeError, ValueError) as e:
            logger.warning(
                "aws_response_parse_failed",
                operation=spec.name,
                http_status=response.status_code,
                error=str(e),
            )
            if response.status_code >= 300:
                return self._fallback_error(response)
            return OperationResult.error(
                OperationStatus.TRANSIENT_ERROR,
                f"Unable to parse {spec.name} response: {e}",
                error_code="ResponseParserError",
                http_status=response.status_code,
                request_id=response.request_id,
            )

        metadata = parsed.get("ResponseMetadata", {}) if isinstance(parsed, dict) else {}
        request_id = metadata.get("RequestId") or response.request_id

        if response.status_code >= 300:
            error = parsed.get("Error", {})
            return classify_service_error(
                _error_code(error.get("Code")),
                str(error.get("Message") or f"HTTP {response.status_code}"),
                http_status=response.status_code,
                request_id=request_id,
                retry_after=response.retry_after,
            )

        for key, value in list(parsed.items()):
            if isinstance(value, StreamingBody):
                parsed[key] = value.read()
        return OperationResult.success(
            data=parsed,
            message=f"{spec.name} succeeded",
            http_status=response.status_code,
            request_id=request_id,
        )

    @staticmethod
    def _fallback_error(response: HttpResponse) -> OperationResult:
        code = response.header("x-amzn-errortype")
        try:
            body = json.loads(response.body) if response.body else {}
        except ValueError:
            body = {}
        if code is None and isinstance(body, dict):
            for key in ("__type", "code", "Code"):
                if body.get(key) not in (None, ""):
                    code = body[key]
                    break
        message = f"HTTP {response.status_code}"
        if isinstance(body, dict):
            message = str(body.get("message") or body.get("Message") or message)
        return classify_service_error(
            _error_code(code),
            message,
            http_status=response.status_code,
            request_id=response.request_id,
            retry_after=response.retry_after,
        )
