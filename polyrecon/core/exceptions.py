"""
Базовое исключение polyrecon.

Конкретные исключения определены рядом с кодом, который их выбрасывает
(rational, base_decoding, lagrange, contracts). Общий базовый класс нужен
только CLI: он перехватывает любую ошибку реконструкции одним except.
"""


class PolyReconError(Exception):
    """Любая невосстановимая ошибка реконструкции (прогон прерывается)."""

    pass
