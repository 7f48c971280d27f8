"""
Utility functions module.

Shared helpers for name matching and numeric rounding/formatting used by
the report builders.

Rounding Semantics:
- Rounding is half-up on the exact binary value of the float
- Percentages are rendered with two decimals and a trailing "%"
- Undefined ratios are guarded, never reported as Infinity or NaN
"""

from .matching import matches
from .numbers import format_percent, round_half_up, safe_ratio

__all__ = ["matches", "format_percent", "round_half_up", "safe_ratio"]
