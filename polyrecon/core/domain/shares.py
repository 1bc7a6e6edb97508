"""
Shares — типизированная запись входного документа

Immutable Pydantic модели входа реконструкции. Сырой JSON имеет вид

    {
        "keys": {"n": 4, "k": 3},
        "1": {"base": "10", "value": "4"},
        "2": {"base": 2, "value": "111"},
        ...
    }

где каждый ключ, кроме "keys", — десятичная запись абсциссы x. Модель
SharesDocument раскладывает такой объект на явные поля keys и shares,
поэтому ядро никогда не видит произвольных ключей объекта.

Полная совместимость с JSON Schema (polyrecon/core/contracts/schema/shares_input.json).
"""

import re
from typing import Any, Final

from pydantic import BaseModel, Field, field_validator, model_validator

from polyrecon.core.math.base_decoding import MAX_BASE, MIN_BASE

# Ключ верхнего уровня с параметрами порога
KEYS_FIELD: Final[str] = "keys"

_ABSCISSA_PATTERN: Final[re.Pattern[str]] = re.compile(r"^-?[0-9]+$")
_BASE_PATTERN: Final[re.Pattern[str]] = re.compile(r"^[0-9]+$")


# =============================================================================
# NESTED MODELS
# =============================================================================


class ThresholdKeys(BaseModel):
    """
    Параметры порога: n — объявленное число долей, k — порог реконструкции.

    Соотношение k <= n проверяет драйвер (InsufficientPoints), а не модель.
    """

    n: int = Field(..., ge=1, description="Объявленное число долей")
    k: int = Field(..., ge=1, description="Порог (точек для реконструкции)")

    model_config = {"frozen": True}


class ShareEntry(BaseModel):
    """
    Одна закодированная доля: абсцисса, основание и строка цифр.

    base приходит строкой или числом и приводится к int.
    """

    x: int = Field(..., description="Абсцисса (из ключа объекта)")
    base: int = Field(..., ge=MIN_BASE, le=MAX_BASE, description="Основание системы счисления")
    value: str = Field(..., min_length=1, description="Значение y в системе base")

    model_config = {"frozen": True}

    @field_validator("base", mode="before")
    @classmethod
    def parse_base(cls, v: Any) -> Any:
        """Строковое основание допускается только как десятичная запись"""
        if isinstance(v, bool):
            raise ValueError("base must be an integer or a decimal string")
        if isinstance(v, str):
            if not _BASE_PATTERN.match(v.strip()):
                raise ValueError(f"base must be a decimal string, got {v!r}")
            return int(v.strip(), 10)
        return v


# =============================================================================
# DOCUMENT MODEL
# =============================================================================


class SharesDocument(BaseModel):
    """
    Входной документ реконструкции.

    shares хранится кортежем в порядке появления ключей; повторные x (например
    "1" и "01") сохраняются как есть — их отвергает драйвер как
    DuplicateAbscissa, а не граница ввода.
    """

    keys: ThresholdKeys
    shares: tuple[ShareEntry, ...] = Field(default_factory=tuple)

    model_config = {"frozen": True}

    @model_validator(mode="before")
    @classmethod
    def split_raw_object(cls, data: Any) -> Any:
        """Разбор сырого объекта {keys, "<x>": {...}, ...} в {keys, shares}"""
        if not isinstance(data, dict) or "shares" in data:
            return data

        shares = []
        for key, entry in data.items():
            if key == KEYS_FIELD:
                continue
            if not _ABSCISSA_PATTERN.match(key):
                raise ValueError(f"share key must be a decimal integer, got {key!r}")
            if not isinstance(entry, dict):
                raise ValueError(f"share {key!r} must be an object")
            shares.append({**entry, "x": int(key, 10)})

        return {KEYS_FIELD: data.get(KEYS_FIELD), "shares": shares}

    @property
    def n(self) -> int:
        return self.keys.n

    @property
    def k(self) -> int:
        return self.keys.k
