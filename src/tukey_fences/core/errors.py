"""
Errors — Типизированная таксономия ошибок tukey-fences

Все ошибки наследуются от TukeyFencesError (подкласс ValueError), поэтому
вызывающий код может ловить как конкретный вид ошибки, так и ValueError целиком.

Виды ошибок:
- EmptySampleError: медиана пустой выборки
- InsufficientDataError: квартили выборки из < 2 элементов
- NumericConversionError: элемент нельзя представить как float без потерь
- ContainsNaNError: выборка содержит NaN (неупорядочиваемое значение)
- NegativeMultiplierError: множитель k < 0 (или не число)

ИНВАРИАНТ: ошибки никогда не подавляются и не понижаются до warning.
При любой ошибке частичный результат не возвращается.
"""

from typing import Any, Sequence


class TukeyFencesError(ValueError):
    """Базовый класс всех ошибок вычисления fences."""

    pass


class EmptySampleError(TukeyFencesError):
    """Медиана запрошена для пустой выборки."""

    def __init__(self) -> None:
        super().__init__("Cannot calculate the median of an empty data set")


class InsufficientDataError(TukeyFencesError):
    """
    Квартили запрошены для выборки, в которой меньше `required` элементов.

    Attributes:
        n: Фактический размер выборки
        required: Минимальный размер выборки для квартилей
    """

    def __init__(self, n: int, required: int = 2) -> None:
        self.n = n
        self.required = required
        super().__init__(
            f"Cannot calculate the quartile values of a data set with "
            f"less than {required} elements, got {n}"
        )


class NumericConversionError(TukeyFencesError):
    """
    Элемент нельзя привести к рабочему float без потерь.

    Attributes:
        value: Исходное значение
        index: Позиция в выборке (None, если неизвестна)
    """

    def __init__(self, value: Any, index: int | None = None, reason: str = "") -> None:
        self.value = value
        self.index = index
        where = f" at index {index}" if index is not None else ""
        detail = f": {reason}" if reason else ""
        super().__init__(
            f"Cannot convert {value!r} ({type(value).__name__}){where} to float{detail}"
        )


class ContainsNaNError(TukeyFencesError):
    """
    Выборка содержит одно или несколько NaN.

    Attributes:
        indices: Позиции NaN в исходной выборке
    """

    def __init__(self, indices: Sequence[int]) -> None:
        self.indices = tuple(indices)
        super().__init__(
            f"The data set contains {len(self.indices)} NaN value(s) "
            f"at indices {list(self.indices)}"
        )


class NegativeMultiplierError(TukeyFencesError):
    """
    Множитель fences k отрицательный или не является числом.

    Attributes:
        k_value: Отвергнутое значение k
    """

    def __init__(self, k_value: Any) -> None:
        self.k_value = k_value
        super().__init__(f"k_value must be a non-negative number, got {k_value!r}")
