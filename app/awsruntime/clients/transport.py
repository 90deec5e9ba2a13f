"""Signed HTTP transport shared by all service clients.

Builds a botocore `AWSRequest`, signs it with SigV4 (or leaves it unsigned),
sends it through a `URLLib3Session` and hands the response to a protocol
parser. Transient failures are retried with exponential backoff; everything
else is returned as the final `OperationResult`.
"""

import time
from typing import Any, Callable, Optional

from botocore.auth import SigV4Auth, SigV4QueryAuth  # type: ignore
from botocore.awsrequest import AWSRequest  # type: ignore
from botocore.httpsession import URLLib3Session  # type: ignore
import structlog

from awsruntime.clients.protocols import HttpResponse, SerializedRequest
from awsruntime.operations import OperationResult, classify_transport_error

logger = structlog.get_logger()

USER_AGENT = "awsruntime/0.1.0"
PRESIGN_EXPIRES = 3600


def _calculate_retry_delay(attempt: int, backoff_factor: float = 0.5) -> float:
    return backoff_factor * (2**attempt)


def build_url(origin: str, request: SerializedRequest) -> str:
    url = origin.rstrip("/") + request.path
    query = request.query_string
    if query:
        url += "?" + query
    return url


class HttpTransport:
    """Signs and sends requests for one service client.

    Args:
        connect_timeout: Connect timeout in seconds
        read_timeout: Read timeout in seconds
        max_pool_connections: HTTP connection pool size
        max_retries: Retries after the first attempt for transient failures
        backoff_factor: Base delay for exponential backoff
        max_delay_seconds: Upper bound for a single delay
        http_session: Optional object with `send(prepared_request)`; defaults
            to a botocore URLLib3Session
        sleep: Sleep function used between retries
    """

    def __init__(
        self,
        connect_timeout: float = 1.0,
        read_timeout: float = 3.0,
        max_pool_connections: int = 25,
        max_retries: int = 3,
        backoff_factor: float = 0.5,
        max_delay_seconds: float = 20.0,
        http_session: Any = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self.max_retries = max_retries
        self.backoff_factor = backoff_factor
        self.max_delay_seconds = max_delay_seconds
        self.service_name: Optional[str] = None
        self._sleep = sleep
        self._http = http_session or URLLib3Session(
            timeout=(connect_timeout, read_timeout),
            max_pool_connections=max_pool_connections,
        )

    @classmethod
    def from_config(cls, config: Any, **kwargs: Any) -> "HttpTransport":
        return cls(
            connect_timeout=config.connect_timeout,
            read_timeout=config.read_timeout,
            max_pool_connections=config.max_pool_connections,
            max_retries=config.max_retries,
            backoff_factor=config.backoff_factor,
            max_delay_seconds=config.max_delay_seconds,
            **kwargs,
        )

    def register_service_name(self, display_name: str) -> None:
        """Register the service display name reported in the User-Agent."""
        self.service_name = display_name

    @property
    def user_agent(self) -> str:
        if self.service_name:
            return f"{USER_AGENT} ({self.service_name})"
        return USER_AGENT

    def _retry_delay(self, attempt: int, result: OperationResult) -> float:
        delay = _calculate_retry_delay(attempt, self.backoff_factor)
        if result.retry_after:
            delay = max(delay, float(result.retry_after))
        return min(delay, self.max_delay_seconds)

    def _build(self, origin: str, request: SerializedRequest) -> AWSRequest:
        headers = dict(request.headers)
        headers.setdefault("User-Agent", self.user_agent)
        return AWSRequest(
            method=request.method,
            url=build_url(origin, request),
            headers=headers,
            data=request.body,
        )

    def send(
        self,
        origin: str,
        request: SerializedRequest,
        parse: Callable[[HttpResponse], OperationResult],
        credentials: Any = None,
        signing_name: Optional[str] = None,
        signing_region: Optional[str] = None,
    ) -> OperationResult:
        """Send a request, retrying transient failures.

        The request is re-signed on every attempt. With no credentials the
        request is sent unsigned.

        Args:
            origin: Endpoint scheme and host (e.g. "https://glacier.us-east-1.amazonaws.com")
            request: Serialized protocol request
            parse: Protocol parser turning the HTTP response into a result
            credentials: Frozen credentials, or None to send unsigned
            signing_name: SigV4 service name
            signing_region: SigV4 region

        Returns:
            OperationResult from the final attempt
        """
        result = OperationResult.permanent_error("request was not sent")
        for attempt in range(self.max_retries + 1):
            aws_request = self._build(origin, request)
            if credentials is not None:
                SigV4Auth(credentials, signing_name, signing_region).add_auth(
                    aws_request
                )

            try:
                raw = self._http.send(aws_request.prepare())
            except Exception as e:  # pylint: disable=broad-except
                result = classify_transport_error(e)
                logger.warning(
                    "aws_http_send_failed",
                    method=request.method,
                    path=request.path,
                    error=str(e),
                )
            else:
                result = parse(
                    HttpResponse(
                        status_code=raw.status_code,
                        headers=dict(raw.headers),
                        body=raw.content or b"",
                    )
                )

            if result.is_retryable and attempt < self.max_retries:
                delay = self._retry_delay(attempt, result)
                logger.warning(
                    "aws_http_retry",
                    attempt=attempt + 1,
                    error_code=result.error_code,
                    delay=delay,
                )
                self._sleep(delay)
                continue

            if not result.is_success:
                logger.error(
                    "aws_operation_error_final",
                    error_code=result.error_code,
                    error_kind=result.error_kind.value if result.error_kind else None,
                    http_status=result.http_status,
                    request_id=result.request_id,
                )
            return result
        return result

    def presign(
        self,
        url: str,
        credentials: Any,
        signing_name: str,
        signing_region: str,
        expires: int = PRESIGN_EXPIRES,
        method: str = "GET",
    ) -> str:
        """Produce a query-signed URL valid for `expires` seconds."""
        aws_request = AWSRequest(method=method, url=url)
        SigV4QueryAuth(
            credentials, signing_name, signing_region, expires=expires
        ).add_auth(aws_request)
        return aws_request.url
