"""Operation result types and status enums.

This module contains the standardized outcome type returned by every service
operation, the status and error-kind enums, and the error classifiers for
service responses and transport exceptions.
"""

from awsruntime.operations.classifiers import (
    classify_service_error,
    classify_transport_error,
)
from awsruntime.operations.result import OperationResult
from awsruntime.operations.status import ErrorKind, OperationStatus

__all__ = [
    "OperationResult",
    "OperationStatus",
    "ErrorKind",
    "classify_service_error",
    "classify_transport_error",
]
