"""Structlog processors that keep signing material and payloads out of logs.

Usage:
    from awsruntime.logging.formatters import mask_sensitive_data
"""

from typing import Any

# Key fragments whose values are never logged. Matching is case-insensitive
# and by substring, so "x-amz-security-token" and "SecretAccessKey" match.
SENSITIVE_PATTERNS = frozenset(
    {
        "password",
        "secret",
        "token",
        "authorization",
        "credential",
        "access_key",
        "signature",
        "x-amz-security-token",
        "private_key",
    }
)


def _mask(value: Any, patterns: frozenset, mask_value: str) -> Any:
    if isinstance(value, dict):
        return {
            k: (
                mask_value
                if v is not None and any(p in str(k).lower() for p in patterns)
                else _mask(v, patterns, mask_value)
            )
            for k, v in value.items()
        }
    return value


def mask_sensitive_data(
    mask_value: str = "***REDACTED***",
    additional_patterns: frozenset[str] | None = None,
):
    """Create a processor that redacts credential-like values.

    Nested dicts (such as a logged header mapping) are walked as well.

    Args:
        mask_value: Replacement for redacted values.
        additional_patterns: Extra key fragments to redact.

    Returns:
        A structlog processor function.
    """
    patterns = SENSITIVE_PATTERNS
    if additional_patterns:
        patterns = patterns | additional_patterns

    def processor(
        logger: Any, method_name: str, event_dict: dict[str, Any]
    ) -> dict[str, Any]:
        return _mask(event_dict, patterns, mask_value)

    return processor


def truncate_large_values(max_length: int = 500):
    """Create a processor that shortens long strings and replaces byte payloads.

    Raw archive or configuration bodies are logged only by size.
    """

    def processor(
        logger: Any, method_name: str, event_dict: dict[str, Any]
    ) -> dict[str, Any]:
        for key, value in event_dict.items():
            if isinstance(value, (bytes, bytearray)):
                event_dict[key] = f"<{len(value)} bytes>"
            elif isinstance(value, str) and len(value) > max_length:
                event_dict[key] = (
                    value[:max_length] + f"...[truncated, {len(value)} chars total]"
                )
        return event_dict

    return processor
