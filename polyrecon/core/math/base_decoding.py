"""
Base Decoding — строка цифр в произвольной системе счисления → int

Алфавит: '0'-'9', затем 'a'-'z' (регистр не важен) → значения 0..35.
Разбор от старшего разряда: acc = acc * base + digit_value.

Диапазон base (2..36) на этом уровне отдельно не проверяется: его
гарантирует граница ввода (ShareEntry). Здесь отвергается только цифра,
значение которой >= base, или символ вне алфавита.
"""

from typing import Final

from polyrecon.core.exceptions import PolyReconError

DIGIT_ALPHABET: Final[str] = "0123456789abcdefghijklmnopqrstuvwxyz"

MIN_BASE: Final[int] = 2
MAX_BASE: Final[int] = len(DIGIT_ALPHABET)

_DIGIT_VALUES: Final[dict[str, int]] = {ch: i for i, ch in enumerate(DIGIT_ALPHABET)}


class InvalidDigit(PolyReconError, ValueError):
    """Символ не является цифрой в заданной системе счисления."""

    def __init__(self, char: str, base: int):
        self.char = char
        self.base = base
        super().__init__(f"invalid digit '{char}' for base {base}")


def digit_value(char: str, base: int) -> int:
    """
    Значение одной цифры.

    Raises:
        InvalidDigit: символ вне алфавита или его значение >= base
    """
    value = _DIGIT_VALUES.get(char.lower())
    if value is None or value >= base:
        raise InvalidDigit(char, base)
    return value


def decode_in_base(digits: str, base: int) -> int:
    """
    Декодирование неотрицательного целого из строки цифр.

    Args:
        digits: Строка цифр (без знака, без префиксов вроде '0x')
        base: Основание системы счисления

    Returns:
        Целое произвольной точности; пустая строка даёт 0

    Raises:
        InvalidDigit: при первой недопустимой цифре

    Examples:
        >>> decode_in_base("213", 4)
        39
        >>> decode_in_base("111", 2)
        7
        >>> decode_in_base("FF", 16)
        255
    """
    acc = 0
    for char in digits:
        acc = acc * base + digit_value(char, base)
    return acc
