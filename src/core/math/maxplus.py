"""
Max-Plus Algebra: операции полукольца над матрицами и векторами

Полукольцо (R ∪ {-inf}, ⊕, ⊗):
- a ⊕ b = max(a, b), нулевой элемент EPS = -inf
- a ⊗ b = a + b, единица UNIT = 0

Используется для моделирования дискретно-событийных и real-time систем:
ранние времена срабатывания, транзитивные замыкания графов зависимостей
событий.

Модуль содержит:
- Примитивы: oplus, odot, transpose
- Умножение: otimes, otimes_vector
- Производные операции: pow_otimes, trace
- Замыкания: star (A*), plus (A+)
- Конструкторы: create_epsilon_matrix, create_identity_matrix, reset
- Инспекция: is_square, get_dimensions

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Ни одна операция не мутирует аргументы; результат всегда новая матрица
2. Отсутствующая ячейка (ragged row) читается как EPS через cell()
3. Несовпадение размерностей или строка длиннее первой → ShapeError / LengthError
4. EPS ⊗ INF (NaN по IEEE) → UndefinedSumError, без молчаливого NaN

ФОРМУЛЫ:
    (A ⊕ B)[i][j] = max(A[i][j], B[i][j])
    a ⊙ b = max_k(a[k] + b[k])
    (A ⊗ B)[i][j] = max_k(A[i][k] + B[k][j])
    A* = E ⊕ A ⊕ A² ⊕ ... ⊕ A^(n-1)
    A+ = A ⊕ A² ⊕ ... ⊕ A^n
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Final, Optional, Sequence

from src.core.math.numerical_safeguards import EPS, UNIT, is_undefined_sum

logger = logging.getLogger(__name__)

Vector = Sequence[float]
Matrix = Sequence[Sequence[float]]


# =============================================================================
# EXCEPTIONS
# =============================================================================


class MaxPlusError(ValueError):
    """Базовая ошибка max-plus алгебры (нарушение контракта вызывающим кодом)."""
    pass


class ShapeError(MaxPlusError):
    """
    Несовместимые размерности матриц или пустая матрица.

    Возникает в oplus, otimes, transpose, trace, star, plus.
    """
    pass


class LengthError(MaxPlusError):
    """Векторы разной длины в odot / otimes_vector."""
    pass


class UndefinedSumError(MaxPlusError):
    """
    EPS ⊗ INF: сумма -inf + inf не определена (NaN по IEEE).

    Контракт запрещает смешивать EPS и INF в одном произведении;
    нарушение отвергается, а не разрешается молча.
    """
    pass


# =============================================================================
# CONFIG
# =============================================================================


class ClosureStrategy(str, Enum):
    """Стратегия накопления степеней в star / plus.

    - INCREMENTAL: A^i = A^(i-1) ⊗ A, O(n) умножений
    - RECOMPUTE: A^i = pow_otimes(A, i) с нуля, O(n²) умножений
    """
    INCREMENTAL = "incremental"
    RECOMPUTE = "recompute"


@dataclass(frozen=True)
class ClosureConfig:
    """Конфигурация замыканий.

    Стратегия не влияет на результат, только на стоимость.
    """

    strategy: ClosureStrategy = ClosureStrategy.INCREMENTAL


DEFAULT_CLOSURE_CONFIG: Final[ClosureConfig] = ClosureConfig()


# =============================================================================
# ДОСТУП К ЯЧЕЙКАМ И ИНСПЕКЦИЯ
# =============================================================================


def cell(matrix: Matrix, i: int, j: int, default: float = EPS) -> float:
    """
    Чтение ячейки с подстановкой default для отсутствующего значения.

    Индекс вне хранимых данных (короткая строка, отсутствующая строка)
    означает "значения нет" и читается как нулевой элемент полукольца.

    Args:
        matrix: Матрица (последовательность строк)
        i: Индекс строки
        j: Индекс столбца
        default: Значение для отсутствующей ячейки (default: EPS)

    Returns:
        matrix[i][j] или default

    Examples:
        >>> cell([[1, 2], [3]], 1, 1)
        -inf
        >>> cell([[1, 2], [3]], 0, 1)
        2
    """
    if i < 0 or j < 0 or i >= len(matrix):
        return default

    row = matrix[i]
    if j >= len(row):
        return default

    return row[j]


def get_dimensions(matrix: Matrix) -> tuple[int, int]:
    """
    Размерность матрицы (rows, cols).

    Число столбцов берётся по первой строке; для пустой матрицы (0, 0).
    """
    rows = len(matrix)
    cols = len(matrix[0]) if rows > 0 else 0
    return rows, cols


def is_square(matrix: Matrix) -> bool:
    """Проверка, что матрица непустая и rows == cols."""
    rows, cols = get_dimensions(matrix)
    return rows > 0 and rows == cols


def _checked_dimensions(matrix: Matrix) -> tuple[int, int]:
    """
    get_dimensions + отказ от строк длиннее первой.

    Короткая строка допустима (отсутствующие ячейки читаются как EPS),
    длинная отвергается: её лишние ячейки нельзя отбросить молча.
    """
    rows, cols = get_dimensions(matrix)
    for i, row in enumerate(matrix):
        if len(row) > cols:
            raise ShapeError(f"Row {i} has {len(row)} cells, more than the {cols} columns of row 0")
    return rows, cols


def _require_non_empty(matrix: Matrix, operation: str) -> tuple[int, int]:
    rows, cols = _checked_dimensions(matrix)
    if rows == 0 or cols == 0:
        raise ShapeError(f"Cannot compute {operation} of empty matrix: shape=({rows}, {cols})")
    return rows, cols


def _require_square(matrix: Matrix, operation: str) -> int:
    rows, cols = _require_non_empty(matrix, operation)
    if rows != cols:
        raise ShapeError(f"{operation} requires a square matrix: shape=({rows}, {cols})")
    return rows


# =============================================================================
# КОНСТРУКТОРЫ
# =============================================================================


def create_epsilon_matrix(rows: int, cols: int) -> list[list[float]]:
    """
    Матрица заданной формы, заполненная EPS.

    Нулевая матрица полукольца: нейтральна для ⊕, поглощающая для ⊗.
    """
    return [[EPS] * cols for _ in range(rows)]


def create_identity_matrix(size: int) -> list[list[float]]:
    """
    Единичная матрица полукольца E: UNIT (0) на диагонали, EPS вне её.

    Examples:
        >>> create_identity_matrix(2)
        [[0.0, -inf], [-inf, 0.0]]
    """
    return [[UNIT if i == j else EPS for j in range(size)] for i in range(size)]


def reset(matrix: Matrix) -> list[list[float]]:
    """Матрица той же формы (построчно), все ячейки EPS."""
    return [[EPS] * len(row) for row in matrix]


# =============================================================================
# ПРИМИТИВЫ
# =============================================================================


def oplus(A: Matrix, B: Matrix) -> list[list[float]]:
    """
    Max-plus сложение (⊕): поэлементный максимум.

    Args:
        A: Первая матрица
        B: Вторая матрица (той же формы)

    Returns:
        C, где C[i][j] = max(A[i][j], B[i][j])

    Raises:
        ShapeError: Если матрица пустая или формы не совпадают

    Examples:
        >>> oplus([[1, 2], [3, 4]], [[5, 1], [2, 6]])
        [[5, 2], [3, 6]]
    """
    a_shape = _checked_dimensions(A)
    b_shape = _checked_dimensions(B)

    if 0 in a_shape or 0 in b_shape:
        raise ShapeError(f"Matrices cannot be empty: A.shape={a_shape}, B.shape={b_shape}")

    if a_shape != b_shape:
        raise ShapeError(f"A and B must have the same shape: A.shape={a_shape}, B.shape={b_shape}")

    rows, cols = a_shape
    return [[max(cell(A, i, j), cell(B, i, j)) for j in range(cols)] for i in range(rows)]


def odot(a: Vector, b: Vector) -> float:
    """
    Max-plus скалярное произведение: a ⊙ b = max_k(a[k] + b[k]).

    Для пустых векторов возвращает EPS (максимум по пустому множеству).

    Args:
        a: Первый вектор
        b: Второй вектор (той же длины)

    Returns:
        Скаляр max_k(a[k] + b[k])

    Raises:
        LengthError: Если длины векторов различаются
        UndefinedSumError: Если в одной паре встретились EPS и INF

    Examples:
        >>> odot([1, 2, 3], [4, 1, 2])
        5
        >>> odot([], [])
        -inf
    """
    if len(a) != len(b):
        raise LengthError(
            f"Vector a and b must have the same length: a.length={len(a)}, b.length={len(b)}"
        )

    return max((_scalar_otimes(x, y) for x, y in zip(a, b)), default=EPS)


def _scalar_otimes(x: float, y: float) -> float:
    if is_undefined_sum(x, y):
        raise UndefinedSumError(f"EPS and INF cannot be combined by ⊗: {x} + {y}")
    return x + y


def transpose(matrix: Matrix) -> list[list[float]]:
    """
    Транспонирование: A^T[j][i] = A[i][j].

    Отсутствующие ячейки коротких строк становятся EPS.

    Raises:
        ShapeError: Если матрица пустая

    Examples:
        >>> transpose([[1, 2], [3, 4]])
        [[1, 3], [2, 4]]
    """
    rows, cols = _require_non_empty(matrix, "transpose")
    return [[cell(matrix, i, j) for i in range(rows)] for j in range(cols)]


# =============================================================================
# УМНОЖЕНИЕ
# =============================================================================


def otimes(A: Matrix, B: Matrix) -> list[list[float]]:
    """
    Max-plus умножение (⊗): (A ⊗ B)[i][j] = max_k(A[i][k] + B[k][j]).

    B транспонируется один раз, каждая ячейка считается через odot
    по строке A и строке B^T.

    Если один из операндов 1x1, произведение вырождается в прибавление
    скаляра к каждой ячейке другого операнда (тот же результат, что и
    общий путь).

    Args:
        A: Матрица m×n
        B: Матрица n×p

    Returns:
        Матрица m×p

    Raises:
        ShapeError: Если матрица пустая или cols(A) != rows(B)
        UndefinedSumError: Если в сумме встретились EPS и INF

    Examples:
        >>> otimes([[1, 2], [3, 4]], [[5, 1], [2, 6]])
        [[6, 8], [8, 10]]
    """
    a_shape = _checked_dimensions(A)
    b_shape = _checked_dimensions(B)

    if 0 in a_shape or 0 in b_shape:
        raise ShapeError(f"Matrices cannot be empty: A.shape={a_shape}, B.shape={b_shape}")

    if a_shape[1] != b_shape[0]:
        raise ShapeError(
            f"A's 2nd dimension does not match B's 1st dimension: "
            f"A.shape={a_shape}, B.shape={b_shape}"
        )

    if a_shape == (1, 1):
        scalar = cell(A, 0, 0)
        return [[_scalar_otimes(scalar, cell(B, 0, j)) for j in range(b_shape[1])]]

    if b_shape == (1, 1):
        scalar = cell(B, 0, 0)
        return [[_scalar_otimes(cell(A, i, 0), scalar)] for i in range(a_shape[0])]

    inner = a_shape[1]
    B_T = transpose(B)
    result = []
    for i in range(a_shape[0]):
        row_a = [cell(A, i, k) for k in range(inner)]
        result.append([odot(row_a, col_b) for col_b in B_T])
    return result


def otimes_vector(A: Matrix, x: Vector) -> list[float]:
    """
    Max-plus произведение матрицы на вектор: y[i] = max_k(A[i][k] + x[k]).

    Один шаг эволюции max-plus линейной системы x(k+1) = A ⊗ x(k).

    Raises:
        ShapeError: Если матрица пустая
        LengthError: Если cols(A) != len(x)
    """
    rows, cols = _require_non_empty(A, "matrix-vector product")
    if cols != len(x):
        raise LengthError(
            f"Matrix columns must match vector length: A.shape=({rows}, {cols}), x.length={len(x)}"
        )

    return [odot([cell(A, i, k) for k in range(cols)], x) for i in range(rows)]


# =============================================================================
# ПРОИЗВОДНЫЕ ОПЕРАЦИИ
# =============================================================================


def pow_otimes(A: Matrix, n: int) -> list[list[float]]:
    """
    Max-plus степень: A^n = A ⊗ A ⊗ ... ⊗ A.

    Аккумулятор стартует с A и умножается на A (n - 1) раз. Поэтому
    n = 1, n = 0 и отрицательные n возвращают копию A, а не единичную
    матрицу.

    Args:
        A: Квадратная матрица (совместимость проверяет otimes)
        n: Показатель степени

    Returns:
        A^n (новая матрица)

    Examples:
        >>> pow_otimes([[1, 2], [3, 4]], 2)
        [[5, 6], [7, 8]]
    """
    result = [list(row) for row in A]
    for _ in range(n - 1):
        result = otimes(result, A)
    return result


def trace(A: Matrix) -> float:
    """
    Max-plus след: max_i(A[i][i]).

    Отсутствующая диагональная ячейка читается как EPS.

    Raises:
        ShapeError: Если матрица пустая

    Examples:
        >>> trace([[1, 2], [3, 4]])
        4
    """
    rows, _ = _require_non_empty(A, "trace")
    return max(cell(A, i, i) for i in range(rows))


# =============================================================================
# ЗАМЫКАНИЯ
# =============================================================================


def _accumulate_powers(
    seed: Matrix,
    A: Matrix,
    last_power: int,
    config: ClosureConfig,
) -> list[list[float]]:
    """seed ⊕ A^1 ⊕ ... ⊕ A^last_power."""
    result = [list(row) for row in seed]

    if config.strategy is ClosureStrategy.RECOMPUTE:
        for i in range(1, last_power + 1):
            result = oplus(result, pow_otimes(A, i))
        return result

    power = None
    for _ in range(last_power):
        power = [list(row) for row in A] if power is None else otimes(power, A)
        result = oplus(result, power)
    return result


def star(A: Matrix, config: Optional[ClosureConfig] = None) -> list[list[float]]:
    """
    Kleene star: A* = E ⊕ A ⊕ A² ⊕ ... ⊕ A^(n-1).

    Транзитивное замыкание с нулевым шагом: (A*)[i][j] равно максимальному
    весу пути между i и j длиной от 0 до n-1 дуг. Ациклический путь в
    n-мерной системе не длиннее n-1 дуг.

    Args:
        A: Квадратная матрица n×n
        config: Стратегия накопления степеней (default: INCREMENTAL)

    Returns:
        A*

    Raises:
        ShapeError: Если матрица пустая или не квадратная
    """
    n = _require_square(A, "star")
    config = config or DEFAULT_CLOSURE_CONFIG

    logger.debug("star: n=%d strategy=%s", n, config.strategy.value)
    return _accumulate_powers(create_identity_matrix(n), A, n - 1, config)


def plus(A: Matrix, config: Optional[ClosureConfig] = None) -> list[list[float]]:
    """
    Kleene plus: A+ = A ⊕ A² ⊕ ... ⊕ A^n.

    Как star, но без единичной матрицы; A+ = A ⊗ A*.

    Args:
        A: Квадратная матрица n×n
        config: Стратегия накопления степеней (default: INCREMENTAL)

    Returns:
        A+

    Raises:
        ShapeError: Если матрица пустая или не квадратная
    """
    n = _require_square(A, "plus")
    config = config or DEFAULT_CLOSURE_CONFIG

    logger.debug("plus: n=%d strategy=%s", n, config.strategy.value)
    return _accumulate_powers(A, A, n, config)
