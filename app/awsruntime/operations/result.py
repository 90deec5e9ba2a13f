"""Outcome type shared by every service operation.

An operation either succeeds with the parsed response or fails with a typed
error. Expected failures (a missing field, an endpoint that cannot be
resolved, a throttled or rejected request) come back as values, so callers
branch on `is_success` instead of catching exceptions.
"""

from typing import Optional, Any
from dataclasses import dataclass

from awsruntime.operations.status import ErrorKind, OperationStatus


@dataclass
class OperationResult:
    """Outcome of a single service call.

    Attributes:
        status: Coarse outcome used for branching and retry decisions
        message: Service error message, or a short summary on success
        data: Parsed response body plus mapped response headers and
            `ResponseMetadata`; for raw operations the body is under "Body"
        error_code: Service error code (e.g. "ThrottlingException") or one
            of the client-side codes MISSING_PARAMETER, INVALID_PARAMETER,
            ENDPOINT_RESOLUTION_FAILURE
        retry_after: Seconds to wait before resending a throttled request
        error_kind: Classified failure kind
        http_status: Status code of the response that produced this outcome
        request_id: Request id reported by the service
    """

    status: OperationStatus
    message: str
    data: Optional[Any] = None
    error_code: Optional[str] = None
    retry_after: Optional[int] = None
    error_kind: Optional[ErrorKind] = None
    http_status: Optional[int] = None
    request_id: Optional[str] = None

    @property
    def is_success(self) -> bool:
        return self.status == OperationStatus.SUCCESS

    @property
    def is_retryable(self) -> bool:
        """True when sending the same request again may succeed."""
        return self.status == OperationStatus.TRANSIENT_ERROR

    @classmethod
    def success(
        cls,
        data: Optional[Any] = None,
        message: str = "ok",
        http_status: Optional[int] = None,
        request_id: Optional[str] = None,
    ) -> "OperationResult":
        """Wrap a parsed 2xx response (or a presigned URL) as a success."""
        return cls(
            status=OperationStatus.SUCCESS,
            message=message,
            data=data,
            http_status=http_status,
            request_id=request_id,
        )

    @classmethod
    def error(
        cls,
        status: OperationStatus,
        message: str,
        error_code: Optional[str] = None,
        retry_after: Optional[int] = None,
        data: Optional[Any] = None,
        error_kind: Optional[ErrorKind] = None,
        http_status: Optional[int] = None,
        request_id: Optional[str] = None,
    ) -> "OperationResult":
        """Build a failed outcome with an explicit status.

        Used by the service error classifier, which knows the HTTP status
        and request id of the response it decoded.

        Args:
            status: Failure status (TRANSIENT_ERROR, UNAUTHORIZED, ...)
            message: Error message, usually the service's own text
            error_code: Service or client-side error code
            retry_after: Seconds to wait before a retry, for throttling
            data: Extra payload for the caller
            error_kind: Classified failure kind
            http_status: Status code of the failed response
            request_id: Request id of the failed response

        Returns:
            OperationResult with the given failure status
        """
        return cls(
            status=status,
            message=message,
            error_code=error_code,
            retry_after=retry_after,
            data=data,
            error_kind=error_kind,
            http_status=http_status,
            request_id=request_id,
        )

    @classmethod
    def transient_error(
        cls,
        message: str,
        error_code: Optional[str] = None,
        retry_after: Optional[int] = None,
        error_kind: Optional[ErrorKind] = None,
    ) -> "OperationResult":
        """Failure the transport may retry: a dropped connection, a read
        timeout or a 5xx response."""
        return cls.error(
            OperationStatus.TRANSIENT_ERROR,
            message,
            error_code,
            retry_after,
            error_kind=error_kind,
        )

    @classmethod
    def permanent_error(
        cls,
        message: str,
        error_code: Optional[str] = None,
        error_kind: Optional[ErrorKind] = None,
    ) -> "OperationResult":
        """Failure that resending the same request cannot fix."""
        return cls.error(
            OperationStatus.PERMANENT_ERROR,
            message,
            error_code,
            error_kind=error_kind,
        )

    @classmethod
    def missing_parameter(cls, field_name: str) -> "OperationResult":
        """A required request field was not set; nothing was sent."""
        return cls.permanent_error(
            f"Missing required field [{field_name}]",
            error_code="MISSING_PARAMETER",
            error_kind=ErrorKind.MISSING_PARAMETER,
        )

    @classmethod
    def invalid_parameter(cls, field_name: str) -> "OperationResult":
        """A request field failed its format check; nothing was sent."""
        return cls.permanent_error(
            f"{field_name} is invalid",
            error_code="INVALID_PARAMETER",
            error_kind=ErrorKind.INVALID_PARAMETER_VALUE,
        )

    @classmethod
    def endpoint_resolution_failure(cls, message: str) -> "OperationResult":
        """The endpoint provider rejected the configuration; nothing was sent."""
        return cls.permanent_error(
            message,
            error_code="ENDPOINT_RESOLUTION_FAILURE",
            error_kind=ErrorKind.ENDPOINT_RESOLUTION_FAILURE,
        )
