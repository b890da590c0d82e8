"""Outlier Detection — разбиение выборки по Tukey fences

Fences:
    IQR = Q3 - Q1
    lower_fence = Q1 - k * IQR
    upper_fence = Q3 + k * IQR

Pipeline (линейный, без возвратов):
1. Validate: k >= 0, в выборке нет NaN (до любых сравнений)
2. Convert: каждый элемент → рабочий float (NumericConversionError при потере точности)
3. Order: стабильная сортировка по float, если выборка не заявлена отсортированной
4. Fences: quartiles() при n >= 2; при n < 2 fences нет, все элементы non-outliers
5. Classify: x < lower → lower_outliers, x > upper → upper_outliers, иначе non_outliers

Строгие неравенства: значение, равное fence, НЕ outlier.
Корзины содержат исходные элементы выборки в порядке возрастания.
"""

import dataclasses
import logging
from dataclasses import dataclass, field
from typing import Any, Final, Iterable, Iterator, NamedTuple

from tukey_fences.core.domain.report import FenceSummary, OutlierReport, QuartileSummary
from tukey_fences.core.errors import ContainsNaNError, TukeyFencesError
from tukey_fences.core.math.numerical_safeguards import (
    find_nan_indices,
    scale_spread,
    to_working_floats,
    validate_k_value,
)
from tukey_fences.core.math.quartiles import MIN_QUARTILE_SAMPLE_SIZE, Quartiles, quartiles

logger = logging.getLogger(__name__)


# =============================================================================
# CONSTANTS
# =============================================================================

# Tukey inner fence
DEFAULT_K_VALUE: Final[float] = 1.5


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class OutlierConfig:
    """Конфигурация детектора.

    Больший k_value → меньше outliers, меньший k_value → больше outliers.
    k_value валидируется при расчёте fences, а не при создании конфигурации.
    """

    k_value: float = DEFAULT_K_VALUE


# =============================================================================
# RESULT
# =============================================================================


class Fences(NamedTuple):
    """Tukey fences выборки."""

    lower_fence: float
    upper_fence: float
    iqr: float
    k_value: float

    def contains(self, value: float) -> bool:
        """True если value не является outlier (границы включительно)."""
        return not (value < self.lower_fence or value > self.upper_fence)


@dataclass(frozen=True)
class OutlierPartition:
    """Результат разбиения выборки.

    Итерация даёт три корзины:
        lower, normal, upper = detect_outliers(data)
    """

    lower_outliers: list[Any]
    non_outliers: list[Any]
    upper_outliers: list[Any]

    # None при n < 2
    quartiles: Quartiles | None = None
    fences: Fences | None = None

    # Параметры, с которыми получено разбиение
    k_value: float = DEFAULT_K_VALUE
    data_is_sorted: bool = False

    def __iter__(self) -> Iterator[list[Any]]:
        return iter(self.as_tuple())

    def as_tuple(self) -> tuple[list[Any], list[Any], list[Any]]:
        return (self.lower_outliers, self.non_outliers, self.upper_outliers)

    @property
    def n(self) -> int:
        return len(self.lower_outliers) + len(self.non_outliers) + len(self.upper_outliers)

    @property
    def outlier_count(self) -> int:
        return len(self.lower_outliers) + len(self.upper_outliers)

    @property
    def has_outliers(self) -> bool:
        return self.outlier_count > 0

    def to_report(self) -> OutlierReport:
        """Сериализуемый отчёт о разбиении.

        Returns:
            OutlierReport (значения корзин приведены к float)
        """
        quartile_summary = None
        fence_summary = None

        if self.quartiles is not None:
            quartile_summary = QuartileSummary(
                q1=self.quartiles.q1, q2=self.quartiles.q2, q3=self.quartiles.q3
            )

        if self.fences is not None:
            fence_summary = FenceSummary(
                lower_fence=self.fences.lower_fence,
                upper_fence=self.fences.upper_fence,
                iqr=self.fences.iqr,
            )

        return OutlierReport(
            n=self.n,
            k_value=self.k_value,
            data_is_sorted=self.data_is_sorted,
            quartiles=quartile_summary,
            fences=fence_summary,
            lower_outliers=to_working_floats(self.lower_outliers),
            non_outliers=to_working_floats(self.non_outliers),
            upper_outliers=to_working_floats(self.upper_outliers),
            outlier_count=self.outlier_count,
        )


@dataclass(frozen=True)
class _PreparedSample:
    """Упорядоченная выборка вместе с её fences (внутренний результат шагов 1-4)."""

    values: list[Any]
    working: list[float]
    k_value: float
    quartiles: Quartiles | None
    fences: Fences | None


# =============================================================================
# PIPELINE
# =============================================================================


def _prepare(data: Iterable[Any], data_is_sorted: bool, k_value: Any) -> _PreparedSample:
    k = validate_k_value(k_value)

    values = list(data)

    nan_indices = find_nan_indices(values)
    if nan_indices:
        raise ContainsNaNError(nan_indices)

    working = to_working_floats(values)

    if not data_is_sorted:
        order = sorted(range(len(working)), key=working.__getitem__)
        values = [values[i] for i in order]
        working = [working[i] for i in order]

    if len(working) < MIN_QUARTILE_SAMPLE_SIZE:
        logger.debug("Sample of %d element(s) has no fences", len(working))
        return _PreparedSample(values=values, working=working, k_value=k, quartiles=None, fences=None)

    quartile_values = quartiles(working)

    if data_is_sorted and quartile_values.q1 > quartile_values.q3:
        logger.warning(
            "data_is_sorted=True but Q1=%r > Q3=%r; sample is probably not sorted ascending",
            quartile_values.q1,
            quartile_values.q3,
        )

    iqr = quartile_values.iqr
    spread = scale_spread(k, iqr)
    fences = Fences(
        lower_fence=quartile_values.q1 - spread,
        upper_fence=quartile_values.q3 + spread,
        iqr=iqr,
        k_value=k,
    )

    logger.debug(
        "n=%d quartiles=(%r, %r, %r) fences=(%r, %r) k=%r",
        len(working),
        quartile_values.q1,
        quartile_values.q2,
        quartile_values.q3,
        fences.lower_fence,
        fences.upper_fence,
        k,
    )

    return _PreparedSample(
        values=values, working=working, k_value=k, quartiles=quartile_values, fences=fences
    )


def _prepare_logged(data: Iterable[Any], data_is_sorted: bool, k_value: Any) -> _PreparedSample:
    try:
        return _prepare(data, data_is_sorted, k_value)
    except TukeyFencesError as e:
        logger.debug("Outlier detection aborted: %s: %s", type(e).__name__, e)
        raise


def compute_fences(
    data: Iterable[Any],
    data_is_sorted: bool = False,
    k_value: float = DEFAULT_K_VALUE,
) -> Fences | None:
    """
    Tukey fences выборки.

    Args:
        data: Элементы выборки
        data_is_sorted: True если выборка уже отсортирована по возрастанию
        k_value: Множитель fences (>= 0)

    Returns:
        Fences или None, если в выборке меньше 2 элементов

    Raises:
        NegativeMultiplierError: Если k_value < 0
        ContainsNaNError: Если выборка содержит NaN
        NumericConversionError: Если элемент нельзя привести к float
    """
    return _prepare_logged(data, data_is_sorted, k_value).fences


def detect_outliers(
    data: Iterable[Any],
    data_is_sorted: bool = False,
    k_value: float = DEFAULT_K_VALUE,
) -> OutlierPartition:
    """
    Разбиение выборки на lower outliers, non-outliers и upper outliers.

    Каждый элемент выборки попадает ровно в одну корзину; дубликаты сохраняются.
    Выборка вызывающего кода не изменяется.

    Args:
        data: Элементы выборки
        data_is_sorted: True если выборка уже отсортирована по возрастанию
        k_value: Множитель fences (>= 0)

    Returns:
        OutlierPartition

    Raises:
        NegativeMultiplierError: Если k_value < 0
        ContainsNaNError: Если выборка содержит NaN
        NumericConversionError: Если элемент нельзя привести к float

    Examples:
        >>> lower, normal, upper = detect_outliers([0, 3, 3, 3, 11, 12, 13, 15, 19, 20, 29, 40, 79])
        >>> upper
        [79]
    """
    prepared = _prepare_logged(data, data_is_sorted, k_value)

    if prepared.fences is None:
        return OutlierPartition(
            lower_outliers=[],
            non_outliers=list(prepared.values),
            upper_outliers=[],
            k_value=prepared.k_value,
            data_is_sorted=data_is_sorted,
        )

    lower_fence = prepared.fences.lower_fence
    upper_fence = prepared.fences.upper_fence

    lower_outliers: list[Any] = []
    non_outliers: list[Any] = []
    upper_outliers: list[Any] = []

    for value, x in zip(prepared.values, prepared.working):
        if x < lower_fence:
            lower_outliers.append(value)
        elif x > upper_fence:
            upper_outliers.append(value)
        else:
            non_outliers.append(value)

    return OutlierPartition(
        lower_outliers=lower_outliers,
        non_outliers=non_outliers,
        upper_outliers=upper_outliers,
        quartiles=prepared.quartiles,
        fences=prepared.fences,
        k_value=prepared.k_value,
        data_is_sorted=data_is_sorted,
    )


def has_outliers(
    data: Iterable[Any],
    data_is_sorted: bool = False,
    k_value: float = DEFAULT_K_VALUE,
) -> bool:
    """
    Есть ли в выборке хотя бы один outlier.

    Использует те же fences, что и detect_outliers, и завершается
    на первом элементе вне fences.

    Raises:
        NegativeMultiplierError: Если k_value < 0
        ContainsNaNError: Если выборка содержит NaN
        NumericConversionError: Если элемент нельзя привести к float
    """
    prepared = _prepare_logged(data, data_is_sorted, k_value)

    if prepared.fences is None:
        return False

    for x in prepared.working:
        if not prepared.fences.contains(x):
            return True

    return False


# =============================================================================
# OUTLIER IDENTIFIER
# =============================================================================


@dataclass(frozen=True)
class OutlierIdentifier:
    """Объектный интерфейс детектора для одной выборки.

    Если порядок выборки неизвестен, используйте data_is_sorted=False.

        identifier = OutlierIdentifier(data).with_k_value(3.0)
        partition = identifier.get_outliers()
    """

    data: tuple[Any, ...]
    data_is_sorted: bool = False
    config: OutlierConfig = field(default_factory=OutlierConfig)

    def __post_init__(self) -> None:
        # Итератор можно прочитать только один раз; tuple сохраняет hash()
        object.__setattr__(self, "data", tuple(self.data))

    @property
    def k_value(self) -> float:
        return self.config.k_value

    def with_k_value(self, k_value: float) -> "OutlierIdentifier":
        """Новый детектор с другим k_value (исходный не изменяется)."""
        return dataclasses.replace(self, config=dataclasses.replace(self.config, k_value=k_value))

    def get_fences(self) -> Fences | None:
        return compute_fences(self.data, self.data_is_sorted, self.k_value)

    def get_outliers(self) -> OutlierPartition:
        return detect_outliers(self.data, self.data_is_sorted, self.k_value)

    def has_outliers(self) -> bool:
        return has_outliers(self.data, self.data_is_sorted, self.k_value)

    def get_report(self) -> OutlierReport:
        return self.get_outliers().to_report()
