"""
Tests for JSON Schema Contract Validators

Комплексное тестирование JSON Schema валидаторов:
- Валидность самой схемы
- Валидация отчётов, построенных детектором
- Детекция нарушений required полей, типов и constraints
"""

import pytest
from jsonschema import ValidationError

from tukey_fences.core.contracts import (
    OutlierReportValidator,
    SchemaLoader,
    validate_outlier_report,
)
from tukey_fences.detection import detect_outliers


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def valid_outlier_report():
    """Сериализованный отчёт для выборки с одним нижним outlier."""
    partition = detect_outliers([-62.3, 67.9, 71.02, 43.3, 51.7, 65.43, 67.23])
    return partition.to_report().model_dump(mode="json")


@pytest.fixture
def degenerate_outlier_report():
    return detect_outliers([]).to_report().model_dump(mode="json")


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class TestSchemaLoader:
    """Тесты загрузчика схем."""

    def test_load_schema(self):
        schema = SchemaLoader().load_schema("outlier_report")

        assert schema["title"] == "OutlierReport"
        assert "lower_outliers" in schema["required"]

    def test_schema_cached(self):
        loader = SchemaLoader()

        assert loader.load_schema("outlier_report") is loader.load_schema("outlier_report")

    def test_missing_schema(self):
        with pytest.raises(FileNotFoundError):
            SchemaLoader().load_schema("does_not_exist")

    def test_missing_schema_dir(self, tmp_path):
        with pytest.raises(RuntimeError):
            SchemaLoader(tmp_path / "missing")

    def test_invalid_schema_rejected(self, tmp_path):
        (tmp_path / "broken.json").write_text('{"type": 12}', encoding="utf-8")

        with pytest.raises(ValueError, match="Invalid JSON Schema"):
            SchemaLoader(tmp_path).load_schema("broken")


# =============================================================================
# OUTLIER REPORT CONTRACT
# =============================================================================


class TestOutlierReportContract:
    """Тесты контракта outlier_report."""

    def test_valid_report(self, valid_outlier_report):
        validate_outlier_report(valid_outlier_report)

    def test_degenerate_report(self, degenerate_outlier_report):
        assert degenerate_outlier_report["fences"] is None
        validate_outlier_report(degenerate_outlier_report)

    def test_missing_required_field(self, valid_outlier_report):
        del valid_outlier_report["outlier_count"]

        with pytest.raises(ValidationError, match="outlier_count"):
            validate_outlier_report(valid_outlier_report)

    def test_wrong_type(self, valid_outlier_report):
        valid_outlier_report["non_outliers"] = ["43.3"]

        with pytest.raises(ValidationError):
            validate_outlier_report(valid_outlier_report)

    def test_negative_n(self, valid_outlier_report):
        valid_outlier_report["n"] = -1

        with pytest.raises(ValidationError):
            validate_outlier_report(valid_outlier_report)

    def test_additional_property(self, valid_outlier_report):
        valid_outlier_report["extra"] = True

        with pytest.raises(ValidationError):
            validate_outlier_report(valid_outlier_report)

    def test_incomplete_fences(self, valid_outlier_report):
        del valid_outlier_report["fences"]["iqr"]

        with pytest.raises(ValidationError):
            validate_outlier_report(valid_outlier_report)

    def test_validator_is_valid_and_iter_errors(self, valid_outlier_report):
        validator = OutlierReportValidator()

        assert validator.is_valid(valid_outlier_report)

        valid_outlier_report["n"] = "seven"
        valid_outlier_report["data_is_sorted"] = "no"

        assert not validator.is_valid(valid_outlier_report)
        assert len(list(validator.iter_errors(valid_outlier_report))) == 2
