"""Tone options and sample scenarios offered to API clients."""

from typing import Any, Dict, List, Optional

from pipeline.models.core import EmailTone
from pipeline.steps.email_composer.tones import get_tone_profile
from schemas.draft import GenerateDraftRequest, SampleScenarioResponse, ToneOptionResponse


TONE_TAGLINES: Dict[EmailTone, str] = {
    EmailTone.FRIENDLY: "Warm and conversational",
    EmailTone.FORMAL: "Polished and structured",
    EmailTone.ENTHUSIASTIC: "Upbeat with momentum",
    EmailTone.EMPATHETIC: "Supportive and caring",
    EmailTone.PERSUASIVE: "Influential and confident",
    EmailTone.CONCISE: "Efficient and direct",
}

# Starting point of every request a sample is merged into
DEFAULT_FORM = GenerateDraftRequest(
    tone=EmailTone.FRIENDLY,
    sender_name="Jordan Rivers",
    sender_title="Customer Success Manager",
)

_SAMPLE_PAYLOADS: List[Dict[str, Any]] = [
    {
        "slug": "product-launch-update",
        "label": "Product launch update",
        "payload": {
            "subject": "Upcoming launch timeline",
            "tone": EmailTone.PERSUASIVE,
            "objective": "align on the next steps for our beta launch",
            "key_points_input": (
                "Beta feedback exceeded adoption targets\n"
                "Need approval on final messaging by Thursday\n"
                "Launch checklist ready for your review"
            ),
            "call_to_action": "set up a quick sync this Thursday afternoon",
            "recipient_role": "Director of Product Marketing",
            "recipient_name": "Taylor",
            "sender_title": "Product Lead",
            "sender_name": "Jordan Rivers",
            "include_postscript": True,
            "extra_notes": "Happy to share the launch dashboard if helpful",
        },
    },
    {
        "slug": "sales-follow-up",
        "label": "Sales follow-up",
        "payload": {
            "subject": "Follow-up on your platform trial",
            "tone": EmailTone.FRIENDLY,
            "objective": "check in after your two-week evaluation",
            "key_points_input": (
                "Usage highlights include automation workflows\n"
                "We unlocked the analytics workspace per your request\n"
                "New onboarding path aligns with your compliance needs"
            ),
            "call_to_action": "schedule a debrief to cover best-fit plan options",
            "recipient_name": "Morgan",
            "recipient_role": "Operations Lead at Northwind Logistics",
            "sender_title": "Account Executive",
            "sender_name": "Jamie Patel",
        },
    },
    {
        "slug": "support-apology",
        "label": "Support apology",
        "payload": {
            "subject": "We’re on the fix",
            "tone": EmailTone.EMPATHETIC,
            "objective": "acknowledge the recent outage impacting your workspace",
            "key_points_input": (
                "Root cause traced to a configuration drift in your region\n"
                "We deployed a patch and added guardrails to prevent recurrence\n"
                "Credit will appear on your next invoice automatically"
            ),
            "call_to_action": "walk through the remediation steps together",
            "recipient_name": "Alex",
            "recipient_role": "Head of IT",
            "sender_title": "Customer Reliability Team",
            "sender_name": "Sasha Nguyen",
            "include_postscript": True,
            "extra_notes": "Status page alerts now include SMS so you’ll get instant updates",
        },
    },
]


def list_tone_options() -> List[ToneOptionResponse]:
    """All tones in enumeration order, with label, tagline and cadence."""
    options = []
    for tone in EmailTone:
        profile = get_tone_profile(tone)
        options.append(
            ToneOptionResponse(
                value=tone,
                label=profile.label,
                tagline=TONE_TAGLINES[tone],
                cadence=profile.cadence,
            )
        )
    return options


def list_samples() -> List[SampleScenarioResponse]:
    """Sample scenarios, each already merged over DEFAULT_FORM."""
    return [
        SampleScenarioResponse(
            slug=sample["slug"],
            label=sample["label"],
            request=DEFAULT_FORM.model_copy(update=sample["payload"]),
        )
        for sample in _SAMPLE_PAYLOADS
    ]


def get_sample(slug: str) -> Optional[SampleScenarioResponse]:
    """
    Look up a sample scenario by slug.

    Returns:
        The scenario, or None if no sample has that slug
    """
    for sample in list_samples():
        if sample.slug == slug:
            return sample
    return None
