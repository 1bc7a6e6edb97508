"""Reconstruction Driver — декодирование, интерполяция и проверка долей.

Порядок шагов:
1. Проверка порога: 1 <= k <= n и k <= числа долей → иначе InsufficientPoints
2. Декодирование каждой доли (base, value) → Point
3. Сортировка по x; повтор x → DuplicateAbscissa
4. Интерполяция Лагранжа по первым k точкам
5. Проверка полинома на ВСЕХ точках (не только на k использованных)
6. Результат: степень k-1, флаг совпадения, k коэффициентов

Частичного результата нет: любая ошибка прерывает прогон до вывода.
"""

import logging
from dataclasses import dataclass
from typing import Sequence

from polyrecon.core.domain.point import Point
from polyrecon.core.domain.shares import ShareEntry, SharesDocument
from polyrecon.core.exceptions import PolyReconError
from polyrecon.core.math.base_decoding import decode_in_base
from polyrecon.core.math.lagrange import (
    InsufficientPoints,
    ensure_distinct_abscissas,
    interpolate,
)
from polyrecon.core.math.polynomial import Polynomial, poly_evaluate, poly_format
from polyrecon.core.math.rational import Rational

logger = logging.getLogger(__name__)


class DeclaredCountMismatch(PolyReconError, ValueError):
    """keys.n не совпадает с числом долей (только в строгом режиме)."""

    pass


@dataclass(frozen=True)
class ReconstructionConfig:
    """Конфигурация драйвера.

    require_declared_count: если True, keys.n обязан совпадать с числом
        долей во входе; иначе расхождение только логируется.
    """

    require_declared_count: bool = False


@dataclass(frozen=True)
class ReconstructionResult:
    """Результат реконструкции."""

    degree: int
    fits_all_points: bool
    coefficients: Polynomial

    # Диагностика
    points_used: tuple[Point, ...]
    points_total: int
    mismatched_x: tuple[int, ...]

    @property
    def secret(self) -> Rational:
        """Свободный член a_0 — восстановленный секрет."""
        return self.coefficients[0]


class ReconstructionDriver:
    """Оркестратор реконструкции полинома по закодированным долям.

    Драйвер stateless: один экземпляр можно переиспользовать для любого
    числа документов.
    """

    def __init__(self, config: ReconstructionConfig | None = None):
        self.config = config or ReconstructionConfig()

    def reconstruct(self, document: SharesDocument) -> ReconstructionResult:
        """Полный прогон по типизированному документу."""
        self.check_threshold(document.n, document.k, len(document.shares))
        points = self.decode_points(document.shares)
        return self.reconstruct_points(points, document.k)

    def reconstruct_points(self, points: Sequence[Point], k: int) -> ReconstructionResult:
        """Интерполяция по первым k точкам (после сортировки) и проверка на всех.

        Raises:
            InsufficientPoints: если k < 1 или точек меньше k
            DuplicateAbscissa: если среди точек повторяется x
        """
        if k < 1 or len(points) < k:
            raise InsufficientPoints(
                f"need k={k} usable points (k >= 1), got {len(points)}"
            )

        ordered = sorted(points, key=lambda p: p.x)
        ensure_distinct_abscissas(ordered)

        selected = tuple(ordered[:k])
        coefficients = interpolate(selected)
        logger.info(
            "Interpolated degree %d polynomial from x=%s",
            k - 1,
            [p.x for p in selected],
        )

        mismatched = tuple(p.x for p in ordered if not self.fits(coefficients, p))
        if mismatched:
            logger.warning(
                "Polynomial does not fit %d of %d points: x=%s",
                len(mismatched),
                len(ordered),
                list(mismatched),
            )
        else:
            logger.info("Polynomial fits all %d points", len(ordered))

        return ReconstructionResult(
            degree=k - 1,
            fits_all_points=not mismatched,
            coefficients=coefficients,
            points_used=selected,
            points_total=len(ordered),
            mismatched_x=mismatched,
        )

    def check_threshold(self, n: int, k: int, available: int) -> None:
        """Проверка 1 <= k <= n и k <= available.

        Raises:
            InsufficientPoints: при нарушении порога
            DeclaredCountMismatch: n != available в строгом режиме
        """
        if not 1 <= k <= n:
            raise InsufficientPoints(f"threshold must satisfy 1 <= k <= n, got k={k}, n={n}")

        if n != available:
            if self.config.require_declared_count:
                raise DeclaredCountMismatch(
                    f"declared n={n} but input contains {available} shares"
                )
            logger.warning("Declared n=%d but input contains %d shares", n, available)

        if available < k:
            raise InsufficientPoints(f"need k={k} shares, input contains {available}")

    @staticmethod
    def decode_points(shares: Sequence[ShareEntry]) -> list[Point]:
        """Декодирование долей в точки (порядок входа сохраняется).

        Raises:
            InvalidDigit: если value содержит цифру, недопустимую для base
        """
        points = [Point(x=s.x, y=decode_in_base(s.value, s.base)) for s in shares]
        logger.info("Decoded %d shares", len(points))
        return points

    @staticmethod
    def fits(coefficients: Polynomial, point: Point) -> bool:
        """Значение полинома в point.x — целое и равно point.y."""
        value = poly_evaluate(coefficients, point.x)
        return value.is_integer() and value.numerator == point.y


# =============================================================================
# OUTPUT
# =============================================================================


def render_report(result: ReconstructionResult) -> str:
    """Текстовый отчёт: степень, флаг совпадения и коэффициенты a_0..a_m."""
    lines = [
        f"degree m = {result.degree}",
        f"fits all n points = {'true' if result.fits_all_points else 'false'}",
        "coefficients a_0..a_m (ascending powers):",
        poly_format(result.coefficients[: result.degree + 1]),
    ]
    return "\n".join(lines)
