"""Structured logging for the service clients.

Every operation call runs inside `bind_operation_context`, so events from the
client, the endpoint provider and the transport carry the same `service`,
`operation` and `invocation_id`. Host applications call `configure_logging()`
once to choose console or JSON output.

Example:
    from awsruntime.logging import configure_logging

    configure_logging(log_level="DEBUG")
"""

from awsruntime.logging.setup import (
    configure_logging,
    get_logger,
    get_module_logger,
)

from awsruntime.logging.context import (
    bind_operation_context,
    get_invocation_id,
    clear_operation_context,
)

from awsruntime.logging.formatters import (
    mask_sensitive_data,
    truncate_large_values,
    SENSITIVE_PATTERNS,
)

__all__ = [
    "configure_logging",
    "get_logger",
    "get_module_logger",
    "bind_operation_context",
    "get_invocation_id",
    "clear_operation_context",
    "mask_sensitive_data",
    "truncate_large_values",
    "SENSITIVE_PATTERNS",
]
