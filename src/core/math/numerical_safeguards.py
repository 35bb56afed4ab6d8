"""
Numerical Safeguards: extended-real скаляры max-plus алгебры

Модуль задаёт сентинелы полукольца и проверки скаляров в [-inf, +inf]:
- EPS (-inf): нулевой элемент полукольца ("ничего не произошло")
- INF (+inf): недостижимость / исчерпание будущих событий
- UNIT (0.0): мультипликативная единица (диагональ единичной матрицы)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. EPS поглощающий для ⊗: EPS + x = EPS для любого x != INF
2. EPS нейтральный для ⊕: max(EPS, x) = x
3. EPS + INF = NaN (IEEE); комбинация запрещена контрактом, не разрешается
4. NaN никогда не является валидным скаляром
"""

import math
from typing import Final

# =============================================================================
# СЕНТИНЕЛЫ ПОЛУКОЛЬЦА
# =============================================================================

# Нулевой элемент полукольца (аддитивная единица для ⊕ = max)
EPS: Final[float] = float("-inf")

# Недостижимость; НЕ является единицей полукольца
INF: Final[float] = float("inf")

# Мультипликативная единица (единица для ⊗ = +)
UNIT: Final[float] = 0.0


# =============================================================================
# ПРЕДИКАТЫ
# =============================================================================


def is_eps(value: float) -> bool:
    """Проверка, что значение является нулём полукольца (-inf)."""
    return value == EPS


def is_inf(value: float) -> bool:
    """Проверка, что значение является сентинелом недостижимости (+inf)."""
    return value == INF


def is_valid_scalar(value: float) -> bool:
    """
    Проверка, что значение допустимо как скаляр max-plus алгебры.

    Допустимы все конечные числа, EPS и INF. NaN недопустим.

    Args:
        value: Проверяемое значение

    Returns:
        True если значение не NaN

    Examples:
        >>> is_valid_scalar(1.5)
        True
        >>> is_valid_scalar(EPS)
        True
        >>> is_valid_scalar(float("nan"))
        False
    """
    return not math.isnan(value)


def is_undefined_sum(a: float, b: float) -> bool:
    """
    Проверка, что a + b не определено в extended reals.

    EPS + INF (в любом порядке) даёт NaN по IEEE. Такие входы нарушают
    контракт ⊗: odot отвергает их через UndefinedSumError.

    Examples:
        >>> is_undefined_sum(EPS, INF)
        True
        >>> is_undefined_sum(EPS, 3.0)
        False
    """
    return (is_eps(a) and is_inf(b)) or (is_inf(a) and is_eps(b))


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def validate_scalar(value: float, name: str) -> float:
    """
    Валидация скаляра max-plus алгебры.

    Args:
        value: Проверяемое значение (int или float)
        name: Имя параметра (для сообщения об ошибке)

    Returns:
        value, приведённое к float

    Raises:
        ValueError: Если value не число или NaN
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"{name} must be a real number, got {value!r}")

    value = float(value)
    if not is_valid_scalar(value):
        raise ValueError(f"{name} must not be NaN, got {value}")

    return value
