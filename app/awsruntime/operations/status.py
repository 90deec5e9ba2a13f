"""Operation status and error kind enumerations.

Status codes classify the outcome of an operation for retry decisions; error
kinds name the specific failure so callers can branch on it.
"""

from enum import Enum


class OperationStatus(Enum):
    """Status codes for operation results.

    Attributes:
        SUCCESS: Operation completed successfully
        TRANSIENT_ERROR: Retryable error (network, timeout, rate limit)
        PERMANENT_ERROR: Non-retryable error (validation, bad input)
        UNAUTHORIZED: Authentication or authorization failure
        NOT_FOUND: Resource not found
    """

    SUCCESS = "success"
    TRANSIENT_ERROR = "transient_error"
    PERMANENT_ERROR = "permanent_error"
    UNAUTHORIZED = "unauthorized"
    NOT_FOUND = "not_found"


class ErrorKind(Enum):
    """Kinds of failure an operation can report.

    The first three are detected client-side before any request is sent.
    The rest are decoded from transport failures or service error responses.
    """

    MISSING_PARAMETER = "missing_parameter"
    INVALID_PARAMETER_VALUE = "invalid_parameter_value"
    ENDPOINT_RESOLUTION_FAILURE = "endpoint_resolution_failure"
    NETWORK_CONNECTION = "network_connection"
    THROTTLING = "throttling"
    ACCESS_DENIED = "access_denied"
    RESOURCE_NOT_FOUND = "resource_not_found"
    VALIDATION = "validation"
    CONFLICT = "conflict"
    SERVICE_UNAVAILABLE = "service_unavailable"
    INTERNAL_FAILURE = "internal_failure"
    UNKNOWN = "unknown"
