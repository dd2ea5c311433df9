"""Draft generation service: request preparation around the composer."""

import asyncio
import random
import re
from typing import List, Optional

import logfire

from config.settings import Settings
from pipeline.models.core import EmailAgentInput, EmailDraft
from pipeline.steps.email_composer.main import generate_email_draft
from schemas.draft import DraftResponse, GenerateDraftRequest

# Mid-line separators; a hyphen only counts as a bullet at the start of an item
_DELIMITERS = re.compile(r'[•|]')
_LEADING_BULLET = re.compile(r'^[-*]\s+')


def parse_key_points(raw: str) -> List[str]:
    """
    Split free-form key point text into individual points.

    Example:
        >>> parse_key_points("Beta shipped • Docs ready\\n- Pricing | Support")
        ['Beta shipped', 'Docs ready', 'Pricing', 'Support']
    """
    points = []
    for line in (raw or "").splitlines():
        for item in _DELIMITERS.split(line):
            item = _LEADING_BULLET.sub("", item.strip()).strip()
            if item:
                points.append(item)
    return points


def build_agent_input(request: GenerateDraftRequest, settings: Settings) -> EmailAgentInput:
    """
    Convert an API request into composer input.

    - Key points: explicit list if given, else parsed from key_points_input
    - Blank sender name falls back to settings.default_sender_name
    """
    if request.key_points is not None:
        key_points = request.key_points
    else:
        key_points = parse_key_points(request.key_points_input)

    return EmailAgentInput(
        sender_name=request.sender_name.strip() or settings.default_sender_name,
        tone=request.tone,
        objective=request.objective,
        key_points=key_points,
        subject=request.subject,
        recipient_name=request.recipient_name,
        recipient_role=request.recipient_role,
        sender_title=request.sender_title,
        call_to_action=request.call_to_action,
        include_postscript=request.include_postscript,
        extra_notes=request.extra_notes,
    )


def render_plain_text(draft: EmailDraft) -> str:
    """Copy-ready text: subject line, blank line, body."""
    return f"Subject: {draft.subject}\n\n{draft.body}"


def _resolve_rng(request_seed: Optional[int], settings: Settings) -> random.Random:
    """Request seed wins over the configured seed; neither means unseeded."""
    seed = request_seed if request_seed is not None else settings.random_seed
    return random.Random(seed)


async def compose_draft(request: GenerateDraftRequest, settings: Settings) -> DraftResponse:
    """
    Compose a draft for an API request.

    Waits settings.generation_delay_ms first so clients get the same
    pacing as the original interactive form.

    Args:
        request: Validated request body
        settings: Application settings

    Returns:
        DraftResponse including the copy-ready plain_text
    """
    with logfire.span("draft_service.compose", tone=request.tone.value):
        agent_input = build_agent_input(request, settings)

        if settings.generation_delay_ms:
            await asyncio.sleep(settings.generation_delay_ms / 1000)

        draft = generate_email_draft(agent_input, rng=_resolve_rng(request.seed, settings))

        logfire.info(
            "Draft ready",
            tone=request.tone.value,
            key_point_count=len(agent_input.key_points),
            preview_length=len(draft.preview),
            seeded=request.seed is not None or settings.random_seed is not None
        )

        return DraftResponse(
            tone=request.tone,
            subject=draft.subject,
            body=draft.body,
            preview=draft.preview,
            highlights=list(draft.highlights),
            plain_text=render_plain_text(draft),
        )
