"""Default configuration parameters for the reporting engine."""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class ReportParams:
    """Report presentation parameters."""
    top_prizes_per_show: int = 3                     # Prizes listed per show in the totals report
    no_data_label: str = "N/A"                       # Placeholder when a summary has no winner


@dataclass(frozen=True)
class LoggingParams:
    """Logging parameters passed to configure_logging."""
    level: str = "INFO"
    format_json: bool = False
    include_timestamp: bool = True


@dataclass(frozen=True)
class GatewayParams:
    """Snapshot source parameters."""
    data_file: Optional[str] = None                  # YAML/JSON file with raw show records


@dataclass(frozen=True)
class DefaultConfig:
    """Complete default configuration."""
    reports: ReportParams
    logging: LoggingParams
    gateway: GatewayParams


def get_default_config() -> DefaultConfig:
    """Get the default configuration instance."""
    return DefaultConfig(
        reports=ReportParams(),
        logging=LoggingParams(),
        gateway=GatewayParams(),
    )
