"""
Numerical Safeguards — Приведение к рабочему float и NaN-защиты

Модуль фиксирует численную политику всех вычислений median/quartiles/fences:
- Рабочий тип: Python float (IEEE-754 binary64), один и тот же end-to-end
- Приведение элементов выборки к float с явной ошибкой вместо тихой потери точности
- Детекция NaN до любых сравнений и сортировки
- Безопасная середина двух float без переполнения
- Валидация множителя fences k

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Потеря точности при приведении → NumericConversionError (никогда не truncation)
2. NaN никогда не доходит до сортировки или сравнения с fence
3. Ширина float не смешивается: median, quartiles и fences считаются в float64
4. Все операции детерминированы и воспроизводимы
"""

import math
import numbers
from decimal import Decimal
from fractions import Fraction
from typing import Any, Final, Iterable

from tukey_fences.core.errors import NegativeMultiplierError, NumericConversionError

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Наибольшее целое, для которого float гарантированно точен (2**53)
# Целые за этой границей принимаются, только если round-trip через float точен
FLOAT_EXACT_INT_LIMIT: Final[int] = 2**53


# =============================================================================
# ПРИВЕДЕНИЕ К РАБОЧЕМУ FLOAT
# =============================================================================


def is_numeric_value(value: Any) -> bool:
    """
    Проверка, поддерживает ли значение приведение к рабочему float.

    Поддерживаются numbers.Real (int, float, Fraction, numpy-скаляры) и Decimal.
    bool отвергается.

    Args:
        value: Проверяемое значение

    Returns:
        True если значение числовое
    """
    if isinstance(value, bool):
        return False
    return isinstance(value, (numbers.Real, Decimal))


def to_working_float(value: Any, index: int | None = None) -> float:
    """
    Приведение элемента выборки к рабочему float без потерь.

    Правила:
    - float (включая ±inf) возвращается как есть
    - Целое, Decimal и Fraction принимаются, только если float(value) == value точно
    - Decimal/Fraction, переполняющие float до ±inf, отвергаются
    - Не-числовые значения (str, complex, None, bool) отвергаются

    NaN здесь не проверяется: выборка сканируется на NaN раньше
    (см. find_nan_indices).

    Args:
        value: Элемент выборки
        index: Позиция элемента (только для сообщения об ошибке)

    Returns:
        Значение как float

    Raises:
        NumericConversionError: Если приведение невозможно или с потерей точности

    Examples:
        >>> to_working_float(3)
        3.0
        >>> to_working_float(Decimal("2.5"))
        2.5
        >>> to_working_float(2**53 + 1)  # doctest: +SKIP
        Traceback (most recent call last):
            ...
        NumericConversionError: ...
    """
    if not is_numeric_value(value):
        raise NumericConversionError(value, index, "not a real number")

    if isinstance(value, float):
        return value

    try:
        result = float(value)
    except (OverflowError, ValueError, TypeError) as e:
        raise NumericConversionError(value, index, str(e)) from e

    if math.isinf(result) and not _is_infinite_source(value):
        raise NumericConversionError(value, index, "overflows float")

    if math.isfinite(result) and not _round_trips_exactly(value, result):
        raise NumericConversionError(value, index, "not exactly representable")

    return result


def _round_trips_exactly(value: Any, result: float) -> bool:
    if isinstance(value, numbers.Integral):
        return abs(value) <= FLOAT_EXACT_INT_LIMIT or int(result) == int(value)
    if isinstance(value, Decimal):
        return Decimal(result) == value
    if isinstance(value, numbers.Rational):
        return Fraction(result) == Fraction(value.numerator, value.denominator)
    # Остальные numbers.Real (numpy float16/float32) расширяются до float64 точно
    return True


def _is_infinite_source(value: Any) -> bool:
    if isinstance(value, Decimal):
        return value.is_infinite()
    if isinstance(value, numbers.Integral):
        return False
    try:
        return math.isinf(value)
    except (OverflowError, TypeError):
        return False


def to_working_floats(values: Iterable[Any]) -> list[float]:
    """
    Приведение всей выборки к рабочему float.

    Args:
        values: Элементы выборки

    Returns:
        Новый список float той же длины и в том же порядке

    Raises:
        NumericConversionError: На первом элементе, который нельзя привести
    """
    return [to_working_float(value, index) for index, value in enumerate(values)]


# =============================================================================
# NaN-ДЕТЕКЦИЯ
# =============================================================================


def is_nan_value(value: Any) -> bool:
    """
    Проверка, является ли значение NaN-эквивалентом.

    NaN-эквивалент: значение, не равное самому себе. Decimal проверяется
    через is_nan(), т.к. сравнение signaling NaN бросает InvalidOperation.

    Args:
        value: Проверяемое значение

    Returns:
        True если значение NaN

    Examples:
        >>> is_nan_value(float("nan"))
        True
        >>> is_nan_value(Decimal("NaN"))
        True
        >>> is_nan_value(1.0)
        False
    """
    if isinstance(value, Decimal):
        return value.is_nan()
    if isinstance(value, numbers.Integral):
        return False
    try:
        return bool(value != value)
    except (TypeError, ValueError):
        return False


def find_nan_indices(values: Iterable[Any]) -> list[int]:
    """
    Поиск позиций всех NaN-эквивалентов в выборке.

    Args:
        values: Элементы выборки

    Returns:
        Список индексов NaN (пустой, если NaN нет)
    """
    return [index for index, value in enumerate(values) if is_nan_value(value)]


# =============================================================================
# БЕЗОПАСНАЯ АРИФМЕТИКА
# =============================================================================


def safe_midpoint(a: float, b: float) -> float:
    """
    Середина отрезка [a, b] без переполнения.

    (a + b) / 2 переполняется до inf для конечных a, b порядка 1e308.
    В этом случае используется a / 2 + b / 2.

    Args:
        a: Первое значение
        b: Второе значение

    Returns:
        (a + b) / 2

    Examples:
        >>> safe_midpoint(1.0, 2.0)
        1.5
        >>> safe_midpoint(1.7e308, 1.7e308)
        1.7e+308
    """
    midpoint = (a + b) / 2.0
    if math.isinf(midpoint) and math.isfinite(a) and math.isfinite(b):
        midpoint = a / 2.0 + b / 2.0
    return midpoint


def scale_spread(k_value: float, iqr: float) -> float:
    """
    Ширина выноса fence: k * IQR.

    При IQR == 0 возвращается 0.0 для любого k, включая k = inf
    (иначе inf * 0 = NaN и fences становятся несравнимыми).

    Args:
        k_value: Множитель fences (>= 0)
        iqr: Интерквартильный размах Q3 - Q1

    Returns:
        k * IQR
    """
    if iqr == 0.0:
        return 0.0
    return k_value * iqr


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def validate_k_value(k_value: Any) -> float:
    """
    Валидация множителя fences.

    Args:
        k_value: Множитель k

    Returns:
        k как float

    Raises:
        NegativeMultiplierError: Если k не число, NaN или k < 0
    """
    if not is_numeric_value(k_value):
        raise NegativeMultiplierError(k_value)

    try:
        k_float = float(k_value)
    except (OverflowError, ValueError, TypeError) as e:
        raise NegativeMultiplierError(k_value) from e

    # NaN не проходит k >= 0
    if not k_float >= 0.0:
        raise NegativeMultiplierError(k_value)

    return k_float
