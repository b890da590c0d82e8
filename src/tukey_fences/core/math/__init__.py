"""
Core math modules для tukey-fences

Median, quartiles и численные safeguards в рабочем float64.
"""

# Numerical Safeguards
from tukey_fences.core.math.numerical_safeguards import (
    FLOAT_EXACT_INT_LIMIT,
    find_nan_indices,
    is_nan_value,
    is_numeric_value,
    safe_midpoint,
    scale_spread,
    to_working_float,
    to_working_floats,
    validate_k_value,
)

# Median
from tukey_fences.core.math.median import median

# Quartiles
from tukey_fences.core.math.quartiles import (
    MIN_QUARTILE_SAMPLE_SIZE,
    Quartiles,
    quartiles,
)

__all__ = [
    # Numerical Safeguards — Constants
    "FLOAT_EXACT_INT_LIMIT",
    # Numerical Safeguards — Conversion
    "is_numeric_value",
    "to_working_float",
    "to_working_floats",
    # Numerical Safeguards — NaN detection
    "find_nan_indices",
    "is_nan_value",
    # Numerical Safeguards — Arithmetic
    "safe_midpoint",
    "scale_spread",
    # Numerical Safeguards — Validation
    "validate_k_value",
    # Median
    "median",
    # Quartiles
    "MIN_QUARTILE_SAMPLE_SIZE",
    "Quartiles",
    "quartiles",
]
