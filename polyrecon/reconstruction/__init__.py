"""Reconstruction — оркестрация декодирования, интерполяции и проверки долей."""

from .driver import (
    DeclaredCountMismatch,
    ReconstructionConfig,
    ReconstructionDriver,
    ReconstructionResult,
    render_report,
)

__all__ = [
    "DeclaredCountMismatch",
    "ReconstructionConfig",
    "ReconstructionDriver",
    "ReconstructionResult",
    "render_report",
]
