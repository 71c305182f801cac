"""Unified error handling for adtkit.

- ErrorCode: Standard error codes for library failures
- AdtkitError and subclasses: invalid access, invalid argument, bounds violation
- require_not_none: fail-fast argument check
- FaultTrace: serializable snapshot of a fault captured by Try
"""

from .errors import (
    AdtkitError,
    ArgumentNullError,
    ErrorCode,
    IllegalArgumentError,
    IndexOutOfBoundsError,
    NoSuchElementError,
    classify_exception,
    require_not_none,
)
from .types import FaultTrace, JsonDict, validate_trace

__all__ = [
    # Core errors
    "ErrorCode", "AdtkitError", "classify_exception",
    "NoSuchElementError", "IllegalArgumentError", "ArgumentNullError", "IndexOutOfBoundsError",
    # Argument checks
    "require_not_none",
    # Fault snapshots
    "FaultTrace", "JsonDict", "validate_trace",
]
