"""
Тесты для Reconstruction Driver

Проверяет:
1. Полный прогон по документу: декодирование → интерполяция → проверка
2. Выбор первых k точек после сортировки по x
3. Флаг совпадения на всех n точках (без частичного успеха)
4. Порог k и объявленное n (InsufficientPoints, DeclaredCountMismatch)
5. Ошибки декодирования и повтор абсциссы
6. Рендеринг отчёта
"""

import logging

import pytest

from polyrecon.core.domain import Point, SharesDocument
from polyrecon.core.math import (
    DuplicateAbscissa,
    InsufficientPoints,
    InvalidDigit,
    Rational,
    poly_from_ints,
)
from polyrecon.reconstruction import (
    DeclaredCountMismatch,
    ReconstructionConfig,
    ReconstructionDriver,
    ReconstructionResult,
    render_report,
)


def make_document(n: int, k: int, shares: dict[str, tuple]) -> SharesDocument:
    raw = {"keys": {"n": n, "k": k}}
    for key, (base, value) in shares.items():
        raw[key] = {"base": base, "value": value}
    return SharesDocument.model_validate(raw)


@pytest.fixture
def driver() -> ReconstructionDriver:
    return ReconstructionDriver()


@pytest.fixture
def quadratic_document() -> SharesDocument:
    """Доли полинома x^2 + 3 в разных основаниях"""
    return make_document(
        4,
        3,
        {
            "1": ("10", "4"),
            "2": ("2", "111"),
            "3": ("10", "12"),
            "6": ("4", "213"),
        },
    )


class TestReconstruct:
    """Тесты полного прогона"""

    def test_quadratic_fits_all_points(self, driver, quadratic_document) -> None:
        result = driver.reconstruct(quadratic_document)
        assert result.degree == 2
        assert result.fits_all_points is True
        assert result.coefficients == poly_from_ints([3, 0, 1])
        assert result.points_total == 4
        assert result.mismatched_x == ()

    def test_secret_is_constant_term(self, driver, quadratic_document) -> None:
        assert driver.reconstruct(quadratic_document).secret == 3

    def test_uses_first_k_points_sorted_by_x(self, driver) -> None:
        """Порядок ключей во входе не влияет на выбор точек"""
        doc = make_document(
            4,
            3,
            {
                "6": ("4", "213"),
                "3": ("10", "12"),
                "2": ("2", "111"),
                "1": ("10", "4"),
            },
        )
        result = driver.reconstruct(doc)
        assert [p.x for p in result.points_used] == [1, 2, 3]
        assert result.coefficients == poly_from_ints([3, 0, 1])

    def test_inconsistent_point_sets_flag_false(self, driver) -> None:
        """f(6) = 39, но доля говорит 40 → fits = false, коэффициенты те же"""
        doc = make_document(
            4,
            3,
            {
                "1": ("10", "4"),
                "2": ("10", "7"),
                "3": ("10", "12"),
                "6": ("10", "40"),
            },
        )
        result = driver.reconstruct(doc)
        assert result.fits_all_points is False
        assert result.mismatched_x == (6,)
        assert result.coefficients == poly_from_ints([3, 0, 1])

    def test_single_point_constant(self, driver) -> None:
        doc = make_document(1, 1, {"5": ("10", "42")})
        result = driver.reconstruct(doc)
        assert result.degree == 0
        assert result.coefficients == poly_from_ints([42])
        assert result.fits_all_points is True

    def test_k_equals_one_with_extra_points(self, driver) -> None:
        """k=1: константа по наименьшему x; остальные точки не совпадают"""
        doc = make_document(2, 1, {"5": ("10", "42"), "7": ("10", "43")})
        result = driver.reconstruct(doc)
        assert result.coefficients == poly_from_ints([42])
        assert result.fits_all_points is False

    def test_rational_coefficients(self, driver) -> None:
        """(0, 0), (2, 1) → y = x/2; (4, 2) тоже на прямой"""
        doc = make_document(3, 2, {"0": (10, "0"), "2": (10, "1"), "4": (10, "2")})
        result = driver.reconstruct(doc)
        assert result.coefficients == (Rational(0), Rational(1, 2))
        assert result.fits_all_points is True

    def test_non_integer_value_does_not_fit(self, driver) -> None:
        """y = x/2 в точке 3 даёт 3/2 — не целое, точка не совпадает"""
        doc = make_document(3, 2, {"0": (10, "0"), "2": (10, "1"), "3": (10, "1")})
        result = driver.reconstruct(doc)
        assert result.fits_all_points is False
        assert result.mismatched_x == (3,)

    def test_big_values(self, driver) -> None:
        """Коэффициенты за пределами 64 бит восстанавливаются точно"""
        coefficients = [2**127 - 1, 3**60, 1]
        shares = {}
        for x in (1, 2, 3, 4, 5):
            y = sum(c * x**i for i, c in enumerate(coefficients))
            shares[str(x)] = ("16", format(y, "x"))
        result = driver.reconstruct(make_document(5, 3, shares))
        assert result.coefficients == poly_from_ints(coefficients)
        assert result.fits_all_points is True

    def test_logs_mismatch(self, driver, caplog) -> None:
        doc = make_document(
            3, 2, {"1": ("10", "1"), "2": ("10", "2"), "3": ("10", "5")}
        )
        with caplog.at_level(logging.WARNING, logger="polyrecon.reconstruction.driver"):
            driver.reconstruct(doc)
        assert "does not fit 1 of 3 points" in caplog.text


class TestThreshold:
    """Тесты порога и объявленного n"""

    def test_k_greater_than_n(self, driver) -> None:
        doc = make_document(2, 3, {"1": ("10", "1"), "2": ("10", "2")})
        with pytest.raises(InsufficientPoints, match="1 <= k <= n"):
            driver.reconstruct(doc)

    def test_fewer_shares_than_k(self, driver) -> None:
        doc = make_document(3, 3, {"1": ("10", "1"), "2": ("10", "2")})
        with pytest.raises(InsufficientPoints, match="input contains 2"):
            driver.reconstruct(doc)

    def test_declared_count_mismatch_logged(self, driver, caplog) -> None:
        doc = make_document(5, 2, {"1": ("10", "1"), "2": ("10", "2")})
        with caplog.at_level(logging.WARNING):
            result = driver.reconstruct(doc)
        assert result.fits_all_points is True
        assert "Declared n=5" in caplog.text

    def test_declared_count_mismatch_strict(self) -> None:
        strict = ReconstructionDriver(ReconstructionConfig(require_declared_count=True))
        doc = make_document(5, 2, {"1": ("10", "1"), "2": ("10", "2")})
        with pytest.raises(DeclaredCountMismatch):
            strict.reconstruct(doc)

    def test_strict_accepts_matching_count(self, quadratic_document) -> None:
        strict = ReconstructionDriver(ReconstructionConfig(require_declared_count=True))
        assert strict.reconstruct(quadratic_document).fits_all_points

    def test_reconstruct_points_invalid_k(self, driver) -> None:
        with pytest.raises(InsufficientPoints):
            driver.reconstruct_points([Point(x=1, y=1)], 0)
        with pytest.raises(InsufficientPoints):
            driver.reconstruct_points([Point(x=1, y=1)], 2)


class TestFailures:
    """Тесты невосстановимых ошибок"""

    def test_invalid_digit(self, driver) -> None:
        doc = make_document(2, 2, {"1": ("2", "102"), "2": ("10", "7")})
        with pytest.raises(InvalidDigit, match="for base 2"):
            driver.reconstruct(doc)

    def test_duplicate_abscissa_among_selected(self, driver) -> None:
        """'1' и '01' — одна абсцисса с разными y"""
        doc = make_document(
            3, 2, {"1": ("10", "4"), "01": ("10", "5"), "3": ("10", "12")}
        )
        with pytest.raises(DuplicateAbscissa) as exc_info:
            driver.reconstruct(doc)
        assert exc_info.value.x == 1

    def test_duplicate_abscissa_outside_selection(self, driver) -> None:
        """Повтор x вне первых k — тоже нарушение целостности данных"""
        doc = make_document(
            4, 2, {"1": ("10", "1"), "2": ("10", "2"), "7": ("10", "7"), "07": ("10", "8")}
        )
        with pytest.raises(DuplicateAbscissa):
            driver.reconstruct(doc)


class TestRenderReport:
    """Тесты render_report"""

    def test_report_lines(self, driver, quadratic_document) -> None:
        report = render_report(driver.reconstruct(quadratic_document))
        assert report.splitlines() == [
            "degree m = 2",
            "fits all n points = true",
            "coefficients a_0..a_m (ascending powers):",
            "3 0 1",
        ]

    def test_report_false_and_fractions(self) -> None:
        result = ReconstructionResult(
            degree=1,
            fits_all_points=False,
            coefficients=(Rational(-1, 3), Rational(5, 2)),
            points_used=(Point(x=1, y=2), Point(x=4, y=9)),
            points_total=3,
            mismatched_x=(7,),
        )
        lines = render_report(result).splitlines()
        assert lines[1] == "fits all n points = false"
        assert lines[3] == "-1/3 5/2"

    def test_zero_trailing_coefficients_rendered(self, driver) -> None:
        doc = make_document(3, 3, {"1": ("10", "9"), "2": ("10", "9"), "3": ("10", "9")})
        report = render_report(driver.reconstruct(doc))
        assert report.splitlines()[-1] == "9 0 0"
