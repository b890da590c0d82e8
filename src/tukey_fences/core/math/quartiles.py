"""
Quartiles — Q1, Q2, Q3 методом exclusive median-split

Квартили считаются повторным применением median() к подотрезкам
отсортированной выборки длины n, half = n // 2:

    Q1 = median(data[0:half])
    Q2 = median(data)
    Q3 = median(data[half':n]),  half' = half (n чётное) | half + 1 (n нечётное)

Для нечётного n средний элемент (Q2) исключается из обеих половин;
для чётного n половины не пересекаются.

    [1   2   3   4]   5   [6   7   8   9]
           |          |          |
           Q1         Q2         Q3

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. n < 2 → InsufficientDataError (квартили не определены)
2. Q1 <= Q2 <= Q3 для отсортированной выборки
3. Ошибки median() пробрасываются без изменений
"""

from typing import Any, Final, NamedTuple, Sequence

from tukey_fences.core.errors import InsufficientDataError
from tukey_fences.core.math.median import median

# Минимальный размер выборки, для которого определены квартили
MIN_QUARTILE_SAMPLE_SIZE: Final[int] = 2


class Quartiles(NamedTuple):
    """Квартили выборки. Сравнивается с обычным кортежем (q1, q2, q3)."""

    q1: float  # Нижний квартиль
    q2: float  # Медиана
    q3: float  # Верхний квартиль

    @property
    def iqr(self) -> float:
        """Интерквартильный размах Q3 - Q1."""
        return self.q3 - self.q1


def quartiles(sorted_data: Sequence[Any]) -> Quartiles:
    """
    Квартили отсортированной по возрастанию выборки.

    Args:
        sorted_data: Отсортированная последовательность чисел

    Returns:
        Quartiles(q1, q2, q3)

    Raises:
        InsufficientDataError: Если в выборке меньше 2 элементов
        NumericConversionError: Если элемент нельзя привести к float

    Examples:
        >>> quartiles([10, 12])
        Quartiles(q1=10.0, q2=11.0, q3=12.0)
        >>> quartiles([1, 2, 3, 4, 5, 6, 7, 8])
        Quartiles(q1=2.5, q2=4.5, q3=6.5)
    """
    n = len(sorted_data)

    if n < MIN_QUARTILE_SAMPLE_SIZE:
        raise InsufficientDataError(n, MIN_QUARTILE_SAMPLE_SIZE)

    halfway = n // 2
    q1 = median(sorted_data[0:halfway])
    q2 = median(sorted_data)

    # Нечётное n: средний элемент не входит в верхнюю половину
    if n % 2 != 0:
        halfway += 1

    q3 = median(sorted_data[halfway:n])

    return Quartiles(q1, q2, q3)
