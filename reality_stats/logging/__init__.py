"""
Logging configuration and utilities for the reporting engine.
"""
from .config import configure_logging, get_logger, get_report_logger, log_report_outcome

__all__ = ["configure_logging", "get_logger", "get_report_logger", "log_report_outcome"]
