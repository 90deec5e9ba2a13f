"""Per-operation context binding for structured logging.

Binds the service, operation and a per-call invocation id to every log
entry emitted while an operation runs, including entries from the transport
and the endpoint provider.

Usage:
    from awsruntime.logging import bind_operation_context

    with bind_operation_context(service="glacier", operation="DeleteArchive"):
        logger.info("sending_request")

Dependencies:
    - structlog.contextvars
"""

import uuid
from contextlib import contextmanager
from typing import Optional, Any, Generator

import structlog


@contextmanager
def bind_operation_context(
    service: str,
    operation: str,
    invocation_id: Optional[str] = None,
    **extra_context: Any,
) -> Generator[str, None, None]:
    """Bind operation-scoped context to all logs within the context manager.

    Args:
        service: Service identifier (e.g., "glacier").
        operation: Wire operation name (e.g., "DeleteArchive").
        invocation_id: Unique call identifier. Auto-generated if not provided.
        **extra_context: Additional key-value pairs to include in logs.

    Yields:
        The invocation id bound for this call.
    """
    context: dict[str, Any] = {
        "service": service,
        "operation": operation,
        "invocation_id": invocation_id or str(uuid.uuid4()),
    }
    context.update(extra_context)

    # contextvars are per-thread, so pool threads never see each other's values
    previous = structlog.contextvars.get_contextvars()
    structlog.contextvars.bind_contextvars(**context)
    try:
        yield context["invocation_id"]
    finally:
        structlog.contextvars.unbind_contextvars(*context.keys())
        restore = {k: v for k, v in previous.items() if k in context}
        if restore:
            structlog.contextvars.bind_contextvars(**restore)


def get_invocation_id() -> Optional[str]:
    """Get the current invocation id from the logging context.

    Returns:
        The invocation id if an operation is running, None otherwise.
    """
    ctx = structlog.contextvars.get_contextvars()
    return ctx.get("invocation_id")


def clear_operation_context() -> None:
    """Clear all operation-scoped context from the logging context."""
    structlog.contextvars.clear_contextvars()
