"""
Lagrange Interpolation — точная реконструкция полинома по k точкам

Строит единственный полином степени k-1, проходящий через k точек, в базисе
Лагранжа:

    P(x) = Σ_i  y_i × Π_{j≠i} (x - x_j) / (x_i - x_j)

Числитель базиса собирается повторным умножением линейных множителей
[-x_j, 1], знаменатель — произведением (x_i - x_j) как Rational. Вся
арифметика точная: члены старших степеней, которые должны сократиться,
сокращаются ровно до нуля.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Результат содержит ровно k коэффициентов (степень k-1), нули не отбрасываются
2. poly_evaluate(result, p.x) == p.y для каждой использованной точки
3. Повтор x среди точек → DuplicateAbscissa (до начала арифметики)
"""

from typing import Sequence

from polyrecon.core.domain.point import Point
from polyrecon.core.exceptions import PolyReconError
from polyrecon.core.math.polynomial import Polynomial, poly_add, poly_mul, poly_scale
from polyrecon.core.math.rational import Rational

# =============================================================================
# EXCEPTIONS
# =============================================================================


class DuplicateAbscissa(PolyReconError, ValueError):
    """Две точки с одинаковым x: базис Лагранжа не определён."""

    def __init__(self, x: int):
        self.x = x
        super().__init__(f"duplicate abscissa x={x}: interpolation is ill-defined")


class InsufficientPoints(PolyReconError, ValueError):
    """Точек меньше, чем требует порог k (или порог некорректен)."""

    pass


# =============================================================================
# INTERPOLATION
# =============================================================================


def ensure_distinct_abscissas(points: Sequence[Point]) -> None:
    """
    Проверка, что все x различны.

    Raises:
        DuplicateAbscissa: с первым повторившимся x
    """
    seen: set[int] = set()
    for p in points:
        if p.x in seen:
            raise DuplicateAbscissa(p.x)
        seen.add(p.x)


def basis_numerator(points: Sequence[Point], i: int) -> Polynomial:
    """Π_{j≠i} (x - x_j) как полином; для одной точки — константа [1]."""
    numerator: Polynomial = (Rational.one(),)
    for j, pj in enumerate(points):
        if j == i:
            continue
        numerator = poly_mul(numerator, (Rational.from_int(-pj.x), Rational.one()))
    return numerator


def basis_denominator(points: Sequence[Point], i: int) -> Rational:
    """Π_{j≠i} (x_i - x_j); пустое произведение равно 1."""
    xi = points[i].x
    denominator = Rational.one()
    for j, pj in enumerate(points):
        if j == i:
            continue
        denominator = denominator.mul(Rational.from_int(xi - pj.x))
    return denominator


def interpolate(points: Sequence[Point]) -> Polynomial:
    """
    Интерполяционный полином Лагранжа по точкам.

    Args:
        points: k точек с попарно различными x (k >= 1)

    Returns:
        Кортеж из k коэффициентов Rational по возрастанию степеней

    Raises:
        InsufficientPoints: если points пуст
        DuplicateAbscissa: если среди точек есть одинаковые x

    Examples:
        >>> pts = [Point(x=1, y=4), Point(x=2, y=7), Point(x=3, y=12)]
        >>> [c.format() for c in interpolate(pts)]
        ['3', '0', '1']
    """
    if not points:
        raise InsufficientPoints("at least one point is required to interpolate")

    ensure_distinct_abscissas(points)

    result: Polynomial = (Rational.zero(),)
    for i, pi in enumerate(points):
        scale = Rational.from_int(pi.y).div(basis_denominator(points, i))
        term = poly_scale(basis_numerator(points, i), scale)
        result = poly_add(result, term)

    return result
