"""
Core composer infrastructure.

Custom exceptions are in pipeline.core.exceptions
Data models are in pipeline.models.core
"""

from pipeline.core.exceptions import DraftCompositionError, UnknownToneError

__all__ = [
    "DraftCompositionError",
    "UnknownToneError",
]
