"""
tukey-fences — робастные границы outliers по методу Tukey (IQR fences)

    >>> from tukey_fences import detect_outliers
    >>> lower, normal, upper = detect_outliers([-62.3, 67.9, 71.02, 43.3, 51.7, 65.43, 67.23])
    >>> lower
    [-62.3]
"""

from tukey_fences.core.contracts import validate_outlier_report
from tukey_fences.core.domain import OutlierReport
from tukey_fences.core.errors import (
    ContainsNaNError,
    EmptySampleError,
    InsufficientDataError,
    NegativeMultiplierError,
    NumericConversionError,
    TukeyFencesError,
)
from tukey_fences.core.math import Quartiles, median, quartiles
from tukey_fences.detection import (
    DEFAULT_K_VALUE,
    Fences,
    OutlierConfig,
    OutlierIdentifier,
    OutlierPartition,
    compute_fences,
    detect_outliers,
    has_outliers,
)

__version__ = "0.1.0"

__all__ = [
    # Errors
    "TukeyFencesError",
    "EmptySampleError",
    "InsufficientDataError",
    "NumericConversionError",
    "ContainsNaNError",
    "NegativeMultiplierError",
    # Median / quartiles
    "median",
    "quartiles",
    "Quartiles",
    # Detection
    "DEFAULT_K_VALUE",
    "Fences",
    "OutlierConfig",
    "OutlierIdentifier",
    "OutlierPartition",
    "compute_fences",
    "detect_outliers",
    "has_outliers",
    # Reports
    "OutlierReport",
    "validate_outlier_report",
]
