"""Error taxonomy for resultflow.

- ResultError/StdError: Recoverable errors carried inside Err
- Panic/InvalidErrorPanic: Unrecoverable signals that always propagate
- to_std_error: Conversion of caught exceptions into recoverable errors
- ErrorInfo: Serializable display form of an error
"""

from .errors import ErrorHandler, InvalidErrorPanic, Panic, ResultError, StdError, to_std_error
from .types import ErrorInfo, JsonDict, describe_error, render_value

__all__ = [
    # Recoverable
    "ResultError", "StdError", "ErrorHandler",
    # Unrecoverable
    "Panic", "InvalidErrorPanic",
    # Conversion
    "to_std_error",
    # Display
    "ErrorInfo", "JsonDict", "describe_error", "render_value",
]
