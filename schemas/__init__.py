"""
Pydantic schemas for request/response validation.
"""

from schemas.draft import (
    GenerateDraftRequest,
    DraftResponse,
    ToneOptionResponse,
    SampleScenarioResponse,
)

__all__ = [
    # Draft schemas
    "GenerateDraftRequest",
    "DraftResponse",
    "ToneOptionResponse",
    "SampleScenarioResponse",
]
