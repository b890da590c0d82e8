"""
Tests for Pydantic Report Models

Покрывает:
- Построение OutlierReport из OutlierPartition
- Валидацию согласованности корзин и outlier_count
- Immutability (frozen=True)
- JSON сериализацию
"""

import pytest
from pydantic import ValidationError

from tukey_fences.core.domain import FenceSummary, OutlierReport, QuartileSummary
from tukey_fences.detection import OutlierIdentifier, detect_outliers


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def valid_report_data():
    """Валидные данные отчёта."""
    return {
        "n": 4,
        "k_value": 1.5,
        "data_is_sorted": True,
        "quartiles": {"q1": 1.5, "q2": 3.0, "q3": 7.0},
        "fences": {"lower_fence": -6.75, "upper_fence": 15.25, "iqr": 5.5},
        "lower_outliers": [],
        "non_outliers": [1.0, 2.0, 4.0, 10.0],
        "upper_outliers": [],
        "outlier_count": 0,
    }


@pytest.fixture
def skewed_partition():
    return detect_outliers(
        [0, 3, 3, 3, 11, 12, 13, 15, 19, 20, 29, 40, 79], data_is_sorted=True
    )


# =============================================================================
# TESTS
# =============================================================================


class TestOutlierReport:
    """Тесты OutlierReport."""

    def test_report_creation(self, valid_report_data):
        report = OutlierReport(**valid_report_data)

        assert report.n == 4
        assert isinstance(report.quartiles, QuartileSummary)
        assert isinstance(report.fences, FenceSummary)
        assert report.fences.upper_fence == 15.25

    def test_report_immutable(self, valid_report_data):
        report = OutlierReport(**valid_report_data)

        with pytest.raises(ValidationError):
            report.n = 5

    def test_outlier_count_mismatch(self, valid_report_data):
        valid_report_data["outlier_count"] = 2

        with pytest.raises(ValidationError, match="outlier_count"):
            OutlierReport(**valid_report_data)

    def test_partition_total_mismatch(self, valid_report_data):
        valid_report_data["n"] = 10

        with pytest.raises(ValidationError, match="Partition covers"):
            OutlierReport(**valid_report_data)

    def test_fences_required_for_two_or_more(self, valid_report_data):
        valid_report_data["fences"] = None

        with pytest.raises(ValidationError, match="required"):
            OutlierReport(**valid_report_data)

    def test_negative_k_value_rejected(self, valid_report_data):
        valid_report_data["k_value"] = -1.0

        with pytest.raises(ValidationError):
            OutlierReport(**valid_report_data)

    def test_json_serialization(self, valid_report_data):
        report = OutlierReport(**valid_report_data)
        restored = OutlierReport.model_validate_json(report.model_dump_json())

        assert restored == report


class TestPartitionToReport:
    """Тесты OutlierPartition.to_report."""

    def test_to_report(self, skewed_partition):
        report = skewed_partition.to_report()

        assert report.n == 13
        assert report.k_value == 1.5
        assert report.data_is_sorted is True
        assert report.quartiles == QuartileSummary(q1=3.0, q2=13.0, q3=24.5)
        assert report.fences == FenceSummary(lower_fence=-29.25, upper_fence=56.75, iqr=21.5)
        assert report.upper_outliers == [79.0]
        assert report.outlier_count == 1

    def test_to_report_uses_fence_k_value(self):
        partition = detect_outliers([1, 2, 3, 4, 5, 6, 7, 8], k_value=3.0)

        assert partition.to_report().k_value == 3.0

    def test_degenerate_report(self):
        report = detect_outliers([42], k_value=2.0).to_report()

        assert report.n == 1
        assert report.k_value == 2.0
        assert report.quartiles is None
        assert report.fences is None
        assert report.non_outliers == [42.0]
        assert report.outlier_count == 0

    def test_degenerate_report_keeps_k_value_and_sorted_flag(self):
        """Без fences отчёт берёт k и флаг сортировки из вызова detect_outliers."""
        report = detect_outliers([5], data_is_sorted=True, k_value=3.0).to_report()

        assert report.k_value == 3.0
        assert report.data_is_sorted is True

        empty = detect_outliers([], k_value=0.0).to_report()
        assert empty.n == 0
        assert empty.k_value == 0.0
        assert empty.data_is_sorted is False

    def test_identifier_report(self):
        report = OutlierIdentifier([-62.3, 67.9, 71.02, 43.3, 51.7, 65.43, 67.23]).get_report()

        assert report.data_is_sorted is False
        assert report.lower_outliers == [-62.3]
        assert report.outlier_count == 1
