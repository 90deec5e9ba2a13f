"""Error classifiers for service and transport failures.

Converts decoded service error responses and botocore transport exceptions
into standardized OperationResult objects. Centralizes the classification
tables so every service client reports failures the same way.

Key Functions:
- classify_service_error(): decoded error response -> OperationResult
- classify_transport_error(): botocore HTTP/connection exception -> OperationResult

Usage:
    from awsruntime.operations.classifiers import classify_service_error

    result = classify_service_error(
        "ThrottlingException", "Rate exceeded", http_status=400
    )
    assert result.is_retryable
"""

from typing import Optional

from botocore.exceptions import (
    ConnectionClosedError,
    ConnectTimeoutError,
    EndpointConnectionError,
    HTTPClientError,
    ReadTimeoutError,
)

from awsruntime.operations.result import OperationResult
from awsruntime.operations.status import ErrorKind, OperationStatus

THROTTLING_CODES = frozenset(
    {
        "Throttling",
        "ThrottlingException",
        "ThrottledException",
        "RequestThrottledException",
        "TooManyRequestsException",
        "RequestLimitExceeded",
        "SlowDown",
        "PriorRequestNotComplete",
    }
)

ACCESS_DENIED_CODES = frozenset(
    {
        "AccessDenied",
        "AccessDeniedException",
        "UnauthorizedOperation",
        "UnrecognizedClientException",
        "InvalidClientTokenId",
        "MissingAuthenticationToken",
        "InvalidSignatureException",
        "SignatureDoesNotMatch",
        "IncompleteSignature",
        "ExpiredToken",
        "ExpiredTokenException",
    }
)

NOT_FOUND_CODES = frozenset(
    {
        "ResourceNotFoundException",
        "NoSuchEntity",
        "NotFoundException",
    }
)

VALIDATION_CODES = frozenset(
    {
        "ValidationException",
        "ValidationError",
        "InvalidParameterException",
        "InvalidParameterValueException",
        "InvalidParameterValue",
        "InvalidParameterCombination",
        "MissingParameter",
        "MissingParameterValueException",
        "BadRequestException",
        "InvalidRequestException",
        "InvalidInput",
    }
)

CONFLICT_CODES = frozenset(
    {
        "ConflictException",
        "ResourceAlreadyExistsException",
        "ResourceExistsException",
        "EntityAlreadyExists",
        "ResourceInUseException",
    }
)

SERVICE_UNAVAILABLE_CODES = frozenset(
    {
        "ServiceUnavailable",
        "ServiceUnavailableException",
        "ServiceUnavailableError",
        "InternalFailure",
        "InternalServerError",
        "InternalServiceError",
        "InternalServiceException",
        "InternalException",
        "BaseException",
    }
)

DEFAULT_THROTTLE_RETRY_AFTER = 60


def classify_service_error(
    error_code: Optional[str],
    message: Optional[str] = None,
    http_status: Optional[int] = None,
    request_id: Optional[str] = None,
    retry_after: Optional[int] = None,
) -> OperationResult:
    """Classify a decoded service error response into OperationResult.

    Error Code Mapping:
    - Throttling codes or HTTP 429: TRANSIENT_ERROR with retry_after
    - Access denied / signature codes or HTTP 401/403: UNAUTHORIZED
    - Not found codes or HTTP 404: NOT_FOUND
    - Validation codes: PERMANENT_ERROR
    - Conflict codes or HTTP 409: PERMANENT_ERROR
    - Internal/unavailable codes or HTTP 5xx: TRANSIENT_ERROR
    - Other 4xx: PERMANENT_ERROR

    Args:
        error_code: Error code decoded from the response (may be None)
        message: Error message decoded from the response
        http_status: HTTP status code of the response
        request_id: Service request id, if present
        retry_after: Seconds from a Retry-After header, if present

    Returns:
        OperationResult with status, error_kind, error_code and message
    """
    code = error_code or "Unknown"
    text = message or code

    def _result(status: OperationStatus, kind: ErrorKind, after=None):
        return OperationResult.error(
            status,
            text,
            error_code=code,
            retry_after=after,
            error_kind=kind,
            http_status=http_status,
            request_id=request_id,
        )

    if code in THROTTLING_CODES or http_status == 429:
        return _result(
            OperationStatus.TRANSIENT_ERROR,
            ErrorKind.THROTTLING,
            retry_after or DEFAULT_THROTTLE_RETRY_AFTER,
        )

    if code in ACCESS_DENIED_CODES or http_status in (401, 403):
        return _result(OperationStatus.UNAUTHORIZED, ErrorKind.ACCESS_DENIED)

    if code in NOT_FOUND_CODES or (
        http_status == 404 and code not in VALIDATION_CODES
    ):
        return _result(OperationStatus.NOT_FOUND, ErrorKind.RESOURCE_NOT_FOUND)

    if code in VALIDATION_CODES:
        return _result(OperationStatus.PERMANENT_ERROR, ErrorKind.VALIDATION)

    if code in CONFLICT_CODES or http_status == 409:
        return _result(OperationStatus.PERMANENT_ERROR, ErrorKind.CONFLICT)

    if code in SERVICE_UNAVAILABLE_CODES:
        kind = (
            ErrorKind.SERVICE_UNAVAILABLE
            if "Unavailable" in code
            else ErrorKind.INTERNAL_FAILURE
        )
        return _result(OperationStatus.TRANSIENT_ERROR, kind)

    if http_status is not None and 500 <= http_status < 600:
        return _result(OperationStatus.TRANSIENT_ERROR, ErrorKind.INTERNAL_FAILURE)

    return _result(OperationStatus.PERMANENT_ERROR, ErrorKind.UNKNOWN)


def classify_transport_error(exc: Exception) -> OperationResult:
    """Classify an exception raised while sending a request.

    Connection failures and timeouts are transient; anything else raised by
    the HTTP layer is reported as a permanent unknown error.

    Args:
        exc: Exception raised by the HTTP session

    Returns:
        OperationResult with NETWORK_CONNECTION kind for connection problems
    """
    if isinstance(
        exc,
        (
            EndpointConnectionError,
            ConnectTimeoutError,
            ReadTimeoutError,
            ConnectionClosedError,
            HTTPClientError,
        ),
    ):
        return OperationResult.transient_error(
            f"Connection error: {type(exc).__name__}: {str(exc)}",
            error_code="NETWORK_CONNECTION",
            error_kind=ErrorKind.NETWORK_CONNECTION,
        )

    return OperationResult.permanent_error(
        f"Unexpected transport error: {type(exc).__name__}: {str(exc)}",
        error_code="UNKNOWN",
        error_kind=ErrorKind.UNKNOWN,
    )
