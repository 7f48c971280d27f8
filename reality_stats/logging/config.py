"""
Centralized logging configuration for the reporting engine.

This module provides standardized logging configuration using structlog
for all components. All logging throughout the system should use this
configuration to ensure consistent formatting and structured logging.
"""
import logging
import sys
from typing import Any, Optional

import structlog
from structlog.types import FilteringBoundLogger


def configure_logging(
    level: str = "INFO",
    format_json: bool = False,
    include_timestamp: bool = True
) -> None:
    """
    Configure structlog for the entire application.

    The arguments mirror ``LoggingParams``, so a loaded configuration can be
    applied with ``configure_logging(**asdict(config.logging))``.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_json: If True, output JSON format; otherwise human-readable
        include_timestamp: Include timestamp in log output
    """
    log_level = getattr(logging, level.upper())

    logging.basicConfig(
        level=log_level,
        stream=sys.stdout,
        format="%(message)s"  # structlog will handle formatting
    )

    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if include_timestamp:
        processors.append(structlog.processors.TimeStamper(fmt="iso"))

    if format_json:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> FilteringBoundLogger:
    """
    Get a configured structlog logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger instance
    """
    return structlog.get_logger(name)


def get_report_logger(name: str) -> FilteringBoundLogger:
    """
    Get a logger bound to the reports subsystem.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger for report generation
    """
    return get_logger(name).bind(subsystem="reports")


def log_report_outcome(
    logger: FilteringBoundLogger,
    report: str,
    status: str,
    context: Optional[dict[str, Any]] = None
) -> None:
    """
    Log a finished report with standardized format.

    Args:
        logger: Structlog logger instance
        report: Name of the report that ran
        status: Outcome status ("ok", "empty")
        context: Additional context data (record counts, arguments)
    """
    bound_logger = logger.bind(report=report, report_status=status)

    if context:
        bound_logger = bound_logger.bind(**context)

    bound_logger.info("Report generated")
