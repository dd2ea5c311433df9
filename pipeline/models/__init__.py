"""
Models package for the draft composer

NOTE: plain dataclasses, not API schemas (see schemas/)
"""

from .core import (
    # Enums
    EmailTone,
    Cadence,

    # Core data models
    ToneProfile,
    EmailAgentInput,
    EmailDraft,
)

__all__ = [
    # Enums
    "EmailTone",
    "Cadence",

    # Core data models
    "ToneProfile",
    "EmailAgentInput",
    "EmailDraft",
]
