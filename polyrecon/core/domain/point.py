"""
Point — декодированная доля (share)

Immutable Pydantic модель одной точки (x, y). Создаётся один раз при
декодировании ввода и дальше только читается.
"""

from pydantic import BaseModel, Field, field_validator


class Point(BaseModel):
    """
    Точка полинома: абсцисса x и значение y.

    Оба поля — целые произвольной точности. Дробные и строковые значения
    не принимаются (strict), чтобы float не мог просочиться в ядро.
    """

    x: int = Field(..., strict=True, description="Абсцисса доли")
    y: int = Field(..., strict=True, description="Значение полинома в x")

    model_config = {"frozen": True}

    @field_validator("x", "y", mode="before")
    @classmethod
    def reject_bool(cls, v):
        """bool — подкласс int, но координатой быть не может"""
        if isinstance(v, bool):
            raise ValueError("coordinate must be an integer, not bool")
        return v
