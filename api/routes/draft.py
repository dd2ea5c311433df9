"""
Draft generation API endpoints.

Synchronous composition: each request returns the finished draft.
No authentication, no persistence.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status
import logfire

from config.settings import Settings, get_settings
from pipeline.core.exceptions import DraftCompositionError
from schemas.draft import (
    DraftResponse,
    GenerateDraftRequest,
    SampleScenarioResponse,
    ToneOptionResponse,
)
from services.draft_service import compose_draft
from services.samples import get_sample, list_samples, list_tone_options


router = APIRouter(prefix="/api", tags=["Drafts"])


async def _compose_or_500(request: GenerateDraftRequest, settings: Settings) -> DraftResponse:
    """Run the composer, turning composer faults into a 500."""
    try:
        return await compose_draft(request, settings)
    except DraftCompositionError as e:
        logfire.error(
            "Draft composition failed",
            tone=request.tone.value,
            error=str(e),
            error_type=type(e).__name__
        )
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to compose draft"
        )


@router.post("/drafts", response_model=DraftResponse)
async def create_draft(
    request: GenerateDraftRequest,
    settings: Settings = Depends(get_settings),
):
    """
    Compose an email draft.

    Args:
        request: Tone, objective, key points and sender/recipient details
        settings: Application settings (injected by dependency)

    Returns:
        DraftResponse: Subject, body, preview, highlights and plain_text

    Raises:
        HTTPException 422: If request validation fails (e.g. unknown tone)
        HTTPException 500: If the composer fails
    """
    with logfire.span("api.create_draft", tone=request.tone.value):
        return await _compose_or_500(request, settings)


@router.get("/tones", response_model=List[ToneOptionResponse])
async def get_tones():
    """List selectable tones with label, tagline and cadence."""
    return list_tone_options()


@router.get("/samples", response_model=List[SampleScenarioResponse])
async def get_samples():
    """List sample scenarios (complete requests ready to POST to /api/drafts)."""
    return list_samples()


@router.post("/samples/{slug}/draft", response_model=DraftResponse)
async def create_sample_draft(
    slug: str,
    settings: Settings = Depends(get_settings),
):
    """
    Compose a draft from a sample scenario.

    Args:
        slug: Sample identifier (see GET /api/samples)
        settings: Application settings (injected by dependency)

    Raises:
        HTTPException 404: If no sample has this slug
    """
    with logfire.span("api.create_sample_draft", slug=slug):
        sample = get_sample(slug)
        if not sample:
            logfire.warning("Sample not found", slug=slug)
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Sample not found"
            )

        return await _compose_or_500(sample.request, settings)
