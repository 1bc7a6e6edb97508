"""
Polynomial Algebra — операции над коэффициентами Rational

Полином представлен кортежем коэффициентов по возрастанию степеней:
p[i] — коэффициент при x**i. Длина = степень + 1. Завершающие нулевые
коэффициенты не отбрасываются (степень реконструированного полинома
определяется числом точек, а не значениями коэффициентов).
"""

from typing import Sequence

from polyrecon.core.math.rational import Rational, RationalLike

Polynomial = tuple[Rational, ...]


def poly_from_ints(coefficients: Sequence[int]) -> Polynomial:
    """Полином из целых коэффициентов (удобно для констант и тестов)."""
    return tuple(Rational.from_int(c) for c in coefficients)


def poly_mul(a: Sequence[Rational], b: Sequence[Rational]) -> Polynomial:
    """
    Произведение полиномов (полная свёртка), длина len(a) + len(b) - 1.

    Examples:
        >>> poly_mul(poly_from_ints([-1, 1]), poly_from_ints([-2, 1]))
        (Rational(2, 1), Rational(-3, 1), Rational(1, 1))
    """
    if not a or not b:
        raise ValueError("cannot multiply empty coefficient sequences")

    result = [Rational.zero()] * (len(a) + len(b) - 1)
    for i, ai in enumerate(a):
        for j, bj in enumerate(b):
            result[i + j] = result[i + j].add(ai.mul(bj))
    return tuple(result)


def poly_add(a: Sequence[Rational], b: Sequence[Rational]) -> Polynomial:
    """
    Сумма полиномов, длина max(len(a), len(b)).

    Недостающие коэффициенты короткого полинома считаются нулём.
    """
    zero = Rational.zero()
    size = max(len(a), len(b))
    return tuple(
        (a[i] if i < len(a) else zero).add(b[i] if i < len(b) else zero)
        for i in range(size)
    )


def poly_scale(p: Sequence[Rational], factor: RationalLike) -> Polynomial:
    """Покоэффициентное умножение на рациональный множитель."""
    return tuple(c.mul(factor) for c in p)


def poly_evaluate(p: Sequence[Rational], x: RationalLike) -> Rational:
    """
    Значение полинома в точке x.

    Накопление бегущей степенью: acc += c * pow; pow *= x.

    Examples:
        >>> poly_evaluate(poly_from_ints([3, 0, 1]), 6)
        Rational(39, 1)
    """
    x_r = Rational.coerce(x)
    acc = Rational.zero()
    power = Rational.one()
    for c in p:
        acc = acc.add(c.mul(power))
        power = power.mul(x_r)
    return acc


def poly_format(p: Sequence[Rational]) -> str:
    """Коэффициенты через пробел, каждый в формате Rational.format()."""
    return " ".join(c.format() for c in p)
