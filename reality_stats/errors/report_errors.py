"""
Report error classifications.

Raised by the report engine when a request cannot be answered. None of
these are retried: every report is a deterministic computation over the
snapshot, so the same input fails the same way.
"""

from typing import Any, Optional, Dict


class ReportError(Exception):
    """Base class for report requests that cannot be answered."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = False


class NotFoundError(ReportError):
    """Requested show does not exist or has nothing to report on."""

    def __init__(self, message: str, pattern: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.pattern = pattern


class InvalidArgumentError(ReportError):
    """Report argument is outside its accepted domain."""

    def __init__(self, message: str, argument: Optional[str] = None,
                 value: Any = None, **kwargs):
        super().__init__(message, **kwargs)
        self.argument = argument
        self.value = value


class ConfigurationError(ReportError):
    """Configuration values failed validation."""

    def __init__(self, message: str, errors: Optional[list] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.errors = errors or []
