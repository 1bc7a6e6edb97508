"""
Domain models and value objects.

Contains the decoded Point and the typed input records (ThresholdKeys,
ShareEntry, SharesDocument).
"""

from polyrecon.core.domain.point import Point
from polyrecon.core.domain.shares import (
    KEYS_FIELD,
    ShareEntry,
    SharesDocument,
    ThresholdKeys,
)

__all__ = [
    # Point model
    "Point",
    # Input records
    "KEYS_FIELD",
    "ThresholdKeys",
    "ShareEntry",
    "SharesDocument",
]
