"""
Tone Profile Table

Static vocabulary for every EmailTone. The composer never branches on a
tone directly; all tone-specific behavior is read from these records.
"""

from types import MappingProxyType
from typing import Mapping, Union

from pipeline.core.exceptions import UnknownToneError
from pipeline.models.core import Cadence, EmailTone, ToneProfile


TONE_PROFILES: Mapping[EmailTone, ToneProfile] = MappingProxyType({
    EmailTone.FRIENDLY: ToneProfile(
        label="Friendly",
        greetings=("Hi", "Hello", "Hey"),
        closings=("Best", "Warm regards", "Take care"),
        reach_out_phrase="I'm reaching out",
        transition_starters=("I wanted to share that", "Also,", "Just to highlight"),
        cta_templates=(
            "Let me know {cta}.",
            "I'd love to {cta}, just say the word.",
            "Feel free to reply so we can {cta}.",
        ),
        default_cta="if that works for you",
        cadence=Cadence.WARM,
    ),
    EmailTone.FORMAL: ToneProfile(
        label="Formal",
        greetings=("Dear", "Hello"),
        closings=("Sincerely", "Kind regards", "Respectfully"),
        reach_out_phrase="I am reaching out",
        transition_starters=("To elaborate,", "In addition,", "Furthermore,"),
        cta_templates=(
            "Please advise if {cta}.",
            "Would you kindly confirm whether we can {cta}?",
            "I would appreciate guidance so we can {cta}.",
        ),
        default_cta="how you'd like to proceed",
        cadence=Cadence.MEASURED,
    ),
    EmailTone.ENTHUSIASTIC: ToneProfile(
        label="Enthusiastic",
        greetings=("Hello", "Hi", "Hey there"),
        closings=("Cheers", "All my best", "Talk soon"),
        reach_out_phrase="I'm thrilled to reach out",
        transition_starters=("What excites me most is", "Even better,", "On top of that,"),
        cta_templates=(
            "Can't wait to {cta}—let me know your thoughts!",
            "Let's {cta}; I'm ready when you are.",
            "How about we {cta}?",
        ),
        default_cta="if you're ready to move forward",
        cadence=Cadence.UPBEAT,
    ),
    EmailTone.EMPATHETIC: ToneProfile(
        label="Empathetic",
        greetings=("Hi", "Hello", "Dear"),
        closings=("Warm regards", "Take care", "With appreciation"),
        reach_out_phrase="I wanted to reach out",
        transition_starters=("I understand that", "It might help to know", "What I've been mindful of is"),
        cta_templates=(
            "Whenever you're ready, we can {cta}.",
            "Please let me know how I can support you so we can {cta}.",
            "I'm here to help if you'd like to {cta}.",
        ),
        default_cta="if there's anything else you need",
        cadence=Cadence.WARM,
    ),
    EmailTone.PERSUASIVE: ToneProfile(
        label="Persuasive",
        greetings=("Hello", "Hi", "Greetings"),
        closings=("Looking forward", "With anticipation", "Best regards"),
        reach_out_phrase="I'm reaching out because",
        transition_starters=("The key advantage is", "Additionally,", "This means"),
        cta_templates=(
            "Let's schedule time this week so we can {cta}.",
            "Can we set up next steps to {cta}?",
            "If you're open to it, I'd like to {cta}.",
        ),
        default_cta="if you're open to discussing next steps",
        cadence=Cadence.DIRECT,
    ),
    EmailTone.CONCISE: ToneProfile(
        label="Concise",
        greetings=("Hi", "Hello"),
        closings=("Best", "Thanks", "Regards"),
        reach_out_phrase="Quick note to",
        transition_starters=("Key points:", "Highlights:", "In short,"),
        cta_templates=(
            "Can you {cta}?",
            "Let me know if you can {cta}.",
            "Please confirm you can {cta}.",
        ),
        default_cta="if this plan works",
        cadence=Cadence.DIRECT,
    ),
})

# Shared positional connectors once a tone's own starters run out
FALLBACK_CONNECTORS = ("First", "Additionally", "On top of that", "Moreover", "Finally", "One more thing")

DEFAULT_CONNECTOR = "Additionally"


def get_tone_profile(tone: Union[EmailTone, str]) -> ToneProfile:
    """
    Resolve a tone to its profile.

    Args:
        tone: EmailTone member or its string value (e.g. "concise")

    Returns:
        The matching ToneProfile

    Raises:
        UnknownToneError: If the tone is outside the EmailTone enumeration
    """
    try:
        return TONE_PROFILES[EmailTone(tone)]
    except (ValueError, KeyError) as e:
        raise UnknownToneError(tone) from e
