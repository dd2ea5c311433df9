"""
Pydantic schemas for draft API endpoints.

These models validate API requests and responses for the draft
composer.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from pipeline.models.core import Cadence, EmailTone


# ===================================================================
# REQUEST SCHEMAS
# ===================================================================

class GenerateDraftRequest(BaseModel):
    """
    Request body for POST /api/drafts

    Key points may be sent as a list or as raw text in key_points_input
    (one per line, or separated by bullets / pipes). When both are given
    the list wins.
    """

    tone: EmailTone = Field(
        default=EmailTone.FRIENDLY,
        description="Voice of the draft"
    )

    sender_name: str = Field(
        default="",
        max_length=255,
        description="Sender name (blank uses the configured default)"
    )

    sender_title: Optional[str] = Field(None, max_length=255)

    subject: Optional[str] = Field(
        None,
        max_length=500,
        description="Leave blank to auto-generate"
    )

    recipient_name: Optional[str] = Field(None, max_length=255)

    recipient_role: Optional[str] = Field(None, max_length=255)

    objective: str = Field(
        default="",
        max_length=2000,
        description="What the email should accomplish (e.g. 'to align on launch timeline')"
    )

    key_points: Optional[List[str]] = Field(
        None,
        description="Pre-split key points"
    )

    key_points_input: str = Field(
        default="",
        max_length=5000,
        description="Raw key point text, split on line breaks and bullets"
    )

    call_to_action: Optional[str] = Field(None, max_length=500)

    include_postscript: bool = False

    extra_notes: Optional[str] = Field(None, max_length=1000)

    seed: Optional[int] = Field(
        None,
        description="Seed for reproducible greeting/CTA/closing choices"
    )

    @model_validator(mode="after")
    def normalize_key_points(self) -> "GenerateDraftRequest":
        """Normalize an explicit key point list: trim and drop blanks"""
        if self.key_points is not None:
            self.key_points = [point.strip() for point in self.key_points if point.strip()]
        return self

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "tone": "persuasive",
                "subject": "Upcoming launch timeline",
                "recipient_name": "Taylor",
                "recipient_role": "Director of Product Marketing",
                "objective": "align on the next steps for our beta launch",
                "key_points_input": "Beta feedback exceeded adoption targets\nLaunch checklist ready for your review",
                "call_to_action": "set up a quick sync this Thursday afternoon",
                "sender_name": "Jordan Rivers",
                "sender_title": "Product Lead",
                "include_postscript": True,
                "extra_notes": "Happy to share the launch dashboard if helpful"
            }
        }
    )


# ===================================================================
# RESPONSE SCHEMAS
# ===================================================================

class DraftResponse(BaseModel):
    """
    Response from POST /api/drafts

    plain_text is the copy-ready rendering ("Subject: ...", blank line, body).
    """

    tone: EmailTone
    subject: str
    body: str
    preview: str = Field(..., description="Whitespace-collapsed body, max 140 chars plus ellipsis")
    highlights: List[str] = Field(default_factory=list, max_length=3)
    plain_text: str

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "tone": "concise",
                "subject": "Concise Follow-Up",
                "body": "Hi there,\n\nQuick note to with a quick update.\n\nPlease let me know if this plan works.\n\nBest,\nSam",
                "preview": "Hi there, Quick note to with a quick update. Please let me know if this plan works. Best, Sam",
                "highlights": [],
                "plain_text": "Subject: Concise Follow-Up\n\nHi there,\n\n..."
            }
        }
    )


class ToneOptionResponse(BaseModel):
    """One selectable tone, as listed by GET /api/tones"""

    value: EmailTone
    label: str
    tagline: str
    cadence: Cadence


class SampleScenarioResponse(BaseModel):
    """A ready-made scenario, as listed by GET /api/samples"""

    slug: str
    label: str
    request: GenerateDraftRequest
