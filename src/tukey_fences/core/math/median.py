"""
Median — Медиана упорядоченной выборки

Медиана считается по уже отсортированной последовательности:
- n нечётное: элемент с индексом n // 2
- n чётное: среднее элементов n/2 - 1 и n/2 (safe_midpoint)

Модуль НЕ сортирует: порядок вызывающего кода считается авторитетным.
Приводятся к float только один или два средних элемента.
"""

from typing import Any, Sequence

from tukey_fences.core.errors import EmptySampleError
from tukey_fences.core.math.numerical_safeguards import safe_midpoint, to_working_float


def median(sorted_data: Sequence[Any]) -> float:
    """
    Медиана отсортированной по возрастанию выборки.

    Args:
        sorted_data: Отсортированная последовательность чисел

    Returns:
        Медиана как float

    Raises:
        EmptySampleError: Если выборка пустая
        NumericConversionError: Если средний элемент нельзя привести к float

    Examples:
        >>> median([1, 2, 3, 4, 5])
        3.0
        >>> median([1, 2, 3, 4, 5, 6])
        3.5
        >>> median([-1.32, 32.2, 40.1])
        32.2
    """
    n = len(sorted_data)

    if n == 0:
        raise EmptySampleError()

    halfway = n // 2
    upper_middle = to_working_float(sorted_data[halfway], halfway)

    if n % 2 != 0:
        return upper_middle

    lower_middle = to_working_float(sorted_data[halfway - 1], halfway - 1)
    return safe_midpoint(lower_middle, upper_middle)
