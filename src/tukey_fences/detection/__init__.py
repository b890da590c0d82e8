"""Outlier detection по Tukey fences — разбиение выборки на lower/non/upper outliers."""

from .outliers import (
    DEFAULT_K_VALUE,
    Fences,
    OutlierConfig,
    OutlierIdentifier,
    OutlierPartition,
    compute_fences,
    detect_outliers,
    has_outliers,
)

__all__ = [
    "DEFAULT_K_VALUE",
    "Fences",
    "OutlierConfig",
    "OutlierIdentifier",
    "OutlierPartition",
    "compute_fences",
    "detect_outliers",
    "has_outliers",
]
