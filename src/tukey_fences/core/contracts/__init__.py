"""
Contract Validation Module

Модуль для валидации JSON контрактов tukey-fences.
"""

from .validators import (
    ContractValidator,
    OutlierReportValidator,
    SchemaLoader,
    validate_outlier_report,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "OutlierReportValidator",
    # Functions
    "validate_outlier_report",
]
