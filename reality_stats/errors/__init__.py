"""
Error classification for report generation.

Report errors are distinct outcomes the caller maps to user-facing
statuses; data quality errors describe problems with upstream records.
"""

from .data_quality import (
    DataQualityError,
    MissingDataError,
    MalformedDataError,
)
from .report_errors import (
    ReportError,
    NotFoundError,
    InvalidArgumentError,
    ConfigurationError,
)

__all__ = [
    # Data Quality Errors
    "DataQualityError",
    "MissingDataError",
    "MalformedDataError",
    # Report Errors
    "ReportError",
    "NotFoundError",
    "InvalidArgumentError",
    "ConfigurationError",
]
