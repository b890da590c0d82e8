"""
OutlierReport — Сериализуемый отчёт об одном разбиении выборки

Immutable Pydantic модели. Соответствуют схеме contracts/schema/outlier_report.json.
Значения корзин приведены к float: отчёт предназначен для JSON,
исходные элементы выборки остаются в OutlierPartition.
"""

from pydantic import BaseModel, Field, field_validator, model_validator


# =============================================================================
# NESTED MODELS
# =============================================================================


class QuartileSummary(BaseModel):
    """Квартили выборки."""

    q1: float = Field(..., description="Нижний квартиль")
    q2: float = Field(..., description="Медиана")
    q3: float = Field(..., description="Верхний квартиль")

    model_config = {"frozen": True}


class FenceSummary(BaseModel):
    """Tukey fences и IQR, из которого они получены."""

    lower_fence: float = Field(..., description="Q1 - k * IQR")
    upper_fence: float = Field(..., description="Q3 + k * IQR")
    iqr: float = Field(..., description="Интерквартильный размах Q3 - Q1")

    model_config = {"frozen": True}


# =============================================================================
# REPORT MODEL
# =============================================================================


class OutlierReport(BaseModel):
    """
    Отчёт о разбиении выборки на outliers и non-outliers.

    Immutable модель (frozen=True). quartiles и fences равны None,
    если в выборке меньше 2 элементов (fences не определены).
    """

    n: int = Field(..., ge=0, description="Размер выборки")
    k_value: float = Field(..., ge=0, description="Множитель fences")
    data_is_sorted: bool = Field(..., description="Заявлена ли выборка отсортированной")

    quartiles: QuartileSummary | None = Field(None, description="Квартили (None при n < 2)")
    fences: FenceSummary | None = Field(None, description="Fences (None при n < 2)")

    lower_outliers: list[float] = Field(default_factory=list, description="x < lower_fence")
    non_outliers: list[float] = Field(default_factory=list, description="Внутри fences")
    upper_outliers: list[float] = Field(default_factory=list, description="x > upper_fence")

    outlier_count: int = Field(..., ge=0, description="Всего outliers")

    model_config = {"frozen": True}

    @field_validator("outlier_count")
    @classmethod
    def validate_outlier_count(cls, v: int, info) -> int:
        """Проверка, что outlier_count совпадает с размером корзин outliers"""
        lower = info.data.get("lower_outliers")
        upper = info.data.get("upper_outliers")
        if lower is not None and upper is not None and v != len(lower) + len(upper):
            raise ValueError(
                f"outlier_count {v} must equal len(lower_outliers) + len(upper_outliers) "
                f"= {len(lower) + len(upper)}"
            )
        return v

    @model_validator(mode="after")
    def validate_partition_total(self) -> "OutlierReport":
        """Проверка, что корзины покрывают всю выборку"""
        total = len(self.lower_outliers) + len(self.non_outliers) + len(self.upper_outliers)
        if total != self.n:
            raise ValueError(f"Partition covers {total} elements, expected n={self.n}")
        if self.n >= 2 and (self.quartiles is None or self.fences is None):
            raise ValueError("quartiles and fences are required when n >= 2")
        return self
