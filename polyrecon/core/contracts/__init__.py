"""
Contract Validation Module

Модуль для валидации JSON контракта входа реконструкции.
"""

from .validators import (
    ContractValidator,
    InputContractError,
    SchemaLoader,
    SharesInputValidator,
    parse_shares_document,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "SharesInputValidator",
    # Exceptions
    "InputContractError",
    # Functions
    "parse_shares_document",
]
