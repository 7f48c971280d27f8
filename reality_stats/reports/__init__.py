"""Report builders turning show snapshots into summarized views"""

from .ages import AGE_BUCKETS, build_age_report
from .audience import build_audience_report, efficiency_tier
from .catalog import build_show_catalog
from .prizes import build_prize_overview
from .threshold import build_threshold_report, parse_threshold
from .totals import build_totals_report

__all__ = [
    "AGE_BUCKETS",
    "build_age_report",
    "build_audience_report",
    "efficiency_tier",
    "build_show_catalog",
    "build_prize_overview",
    "build_threshold_report",
    "parse_threshold",
    "build_totals_report",
]
