"""
Domain models.

Immutable pydantic models for serializable outlier reports.
"""

from tukey_fences.core.domain.report import FenceSummary, OutlierReport, QuartileSummary

__all__ = [
    "OutlierReport",
    "QuartileSummary",
    "FenceSummary",
]
