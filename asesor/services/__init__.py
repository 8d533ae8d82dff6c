"""Application services."""

from .profiler import Recommendation, RiskProfiler
from .report import allocation_frame, build_report

__all__ = [
    "RiskProfiler",
    "Recommendation",
    "build_report",
    "allocation_frame",
]
