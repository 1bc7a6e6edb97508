"""
Rational — точная рациональная арифметика

Дробь из двух целых произвольной точности (Python int), всегда хранится
в несократимом виде. Вся реконструкция полинома построена поверх этого типа:
float в ядро не попадает никогда, иначе коэффициенты разрушаются ошибками
округления на больших входах.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. denominator > 0 (знак несёт числитель)
2. gcd(|numerator|, denominator) == 1
3. denominator == 0 → InvalidRational при конструировании
4. Immutable: каждая операция возвращает новое значение
"""

from typing import Union

from polyrecon.core.exceptions import PolyReconError

# =============================================================================
# EXCEPTIONS
# =============================================================================


class InvalidRational(PolyReconError, ValueError):
    """Попытка построить дробь с нулевым знаменателем."""

    pass


class DivisionByZero(PolyReconError, ZeroDivisionError):
    """Деление на рациональный ноль."""

    pass


# =============================================================================
# GCD
# =============================================================================


def gcd(a: int, b: int) -> int:
    """
    Наибольший общий делитель (алгоритм Евклида).

    Работает на абсолютных значениях; результат всегда неотрицательный,
    поэтому его можно сразу использовать как делитель.

    Examples:
        >>> gcd(12, 18)
        6
        >>> gcd(-12, 18)
        6
        >>> gcd(0, 5)
        5
    """
    a, b = abs(a), abs(b)
    while b != 0:
        a, b = b, a % b
    return a


def _require_int(value: object, name: str) -> int:
    # bool — подкласс int, но как операнд дроби это почти всегда ошибка
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be int, got {type(value).__name__}")
    return value


# =============================================================================
# RATIONAL
# =============================================================================


RationalLike = Union["Rational", int]


class Rational:
    """
    Несократимая дробь numerator/denominator.

    Конструктор нормализует знак и сокращает на gcd. Арифметика доступна
    как методами (add/sub/mul/div), так и операторами (+, -, *, /);
    int-операнды поднимаются до Rational автоматически.

    Examples:
        >>> Rational(6, -4)
        Rational(-3, 2)
        >>> Rational(1, 2).add(Rational(1, 3)).format()
        '5/6'
        >>> str(Rational(10, 5))
        '2'
    """

    __slots__ = ("_numerator", "_denominator")

    def __init__(self, numerator: int, denominator: int = 1):
        numerator = _require_int(numerator, "numerator")
        denominator = _require_int(denominator, "denominator")

        if denominator == 0:
            raise InvalidRational(
                f"Zero denominator: cannot construct {numerator}/0"
            )

        if denominator < 0:
            numerator, denominator = -numerator, -denominator

        g = gcd(numerator, denominator)
        object.__setattr__(self, "_numerator", numerator // g)
        object.__setattr__(self, "_denominator", denominator // g)

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    # -------------------------------------------------------------------------
    # Конструкторы
    # -------------------------------------------------------------------------

    @classmethod
    def from_int(cls, value: int) -> "Rational":
        """Дробь value/1."""
        return cls(value, 1)

    @classmethod
    def zero(cls) -> "Rational":
        return cls(0, 1)

    @classmethod
    def one(cls) -> "Rational":
        return cls(1, 1)

    @staticmethod
    def coerce(value: RationalLike) -> "Rational":
        """
        Приведение операнда к Rational.

        Raises:
            TypeError: если value не Rational и не int
        """
        if isinstance(value, Rational):
            return value
        return Rational(_require_int(value, "operand"), 1)

    # -------------------------------------------------------------------------
    # Доступ
    # -------------------------------------------------------------------------

    @property
    def numerator(self) -> int:
        return self._numerator

    @property
    def denominator(self) -> int:
        return self._denominator

    def is_integer(self) -> bool:
        """True тогда и только тогда, когда denominator == 1."""
        return self._denominator == 1

    def is_zero(self) -> bool:
        return self._numerator == 0

    # -------------------------------------------------------------------------
    # Арифметика
    # -------------------------------------------------------------------------

    def add(self, other: RationalLike) -> "Rational":
        """a/b + c/d = (ad + cb) / bd"""
        o = Rational.coerce(other)
        return Rational(
            self._numerator * o._denominator + o._numerator * self._denominator,
            self._denominator * o._denominator,
        )

    def sub(self, other: RationalLike) -> "Rational":
        """a/b - c/d = (ad - cb) / bd"""
        o = Rational.coerce(other)
        return Rational(
            self._numerator * o._denominator - o._numerator * self._denominator,
            self._denominator * o._denominator,
        )

    def mul(self, other: RationalLike) -> "Rational":
        """a/b × c/d = ac / bd"""
        o = Rational.coerce(other)
        return Rational(
            self._numerator * o._numerator,
            self._denominator * o._denominator,
        )

    def div(self, other: RationalLike) -> "Rational":
        """
        a/b ÷ c/d = ad / cb

        Raises:
            DivisionByZero: если other равен нулю
        """
        o = Rational.coerce(other)
        if o.is_zero():
            raise DivisionByZero(f"Division of {self.format()} by zero rational")
        return Rational(
            self._numerator * o._denominator,
            self._denominator * o._numerator,
        )

    def neg(self) -> "Rational":
        return Rational(-self._numerator, self._denominator)

    # -------------------------------------------------------------------------
    # Представление
    # -------------------------------------------------------------------------

    def format(self) -> str:
        """'<n>' для целых, иначе '<n>/<d>'."""
        if self.is_integer():
            return str(self._numerator)
        return f"{self._numerator}/{self._denominator}"

    def __str__(self) -> str:
        return self.format()

    def __repr__(self) -> str:
        return f"Rational({self._numerator}, {self._denominator})"

    # -------------------------------------------------------------------------
    # Python data model
    # -------------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Rational):
            return (
                self._numerator == other._numerator
                and self._denominator == other._denominator
            )
        if isinstance(other, int) and not isinstance(other, bool):
            return self._denominator == 1 and self._numerator == other
        return NotImplemented

    def __hash__(self) -> int:
        if self._denominator == 1:
            return hash(self._numerator)
        return hash((self._numerator, self._denominator))

    def __neg__(self) -> "Rational":
        return self.neg()

    def __add__(self, other: RationalLike) -> "Rational":
        if not isinstance(other, (Rational, int)) or isinstance(other, bool):
            return NotImplemented
        return self.add(other)

    __radd__ = __add__

    def __sub__(self, other: RationalLike) -> "Rational":
        if not isinstance(other, (Rational, int)) or isinstance(other, bool):
            return NotImplemented
        return self.sub(other)

    def __rsub__(self, other: int) -> "Rational":
        if not isinstance(other, int) or isinstance(other, bool):
            return NotImplemented
        return Rational.coerce(other).sub(self)

    def __mul__(self, other: RationalLike) -> "Rational":
        if not isinstance(other, (Rational, int)) or isinstance(other, bool):
            return NotImplemented
        return self.mul(other)

    __rmul__ = __mul__

    def __truediv__(self, other: RationalLike) -> "Rational":
        if not isinstance(other, (Rational, int)) or isinstance(other, bool):
            return NotImplemented
        return self.div(other)

    def __rtruediv__(self, other: int) -> "Rational":
        if not isinstance(other, int) or isinstance(other, bool):
            return NotImplemented
        return Rational.coerce(other).div(self)
