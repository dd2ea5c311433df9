"""Core data models for the draft composer."""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple


class EmailTone(str, Enum):
    """Voice the composer adopts. Closed set: every tone has a profile."""
    FRIENDLY = "friendly"
    FORMAL = "formal"
    ENTHUSIASTIC = "enthusiastic"
    EMPATHETIC = "empathetic"
    PERSUASIVE = "persuasive"
    CONCISE = "concise"


class Cadence(str, Enum):
    """Paragraph-splitting and CTA phrasing style of a tone."""
    MEASURED = "measured"
    UPBEAT = "upbeat"
    DIRECT = "direct"
    WARM = "warm"


@dataclass(frozen=True)
class ToneProfile:
    """
    Static vocabulary for one tone.

    Profiles are defined once in the tone table and never mutated.
    """

    label: str
    """Display name (e.g. 'Friendly')"""

    greetings: Tuple[str, ...]
    """Salutation words, one picked at random per draft"""

    closings: Tuple[str, ...]
    """Sign-off words, one picked at random per draft"""

    reach_out_phrase: str
    """Opens the objective sentence (e.g. "I'm reaching out")"""

    transition_starters: Tuple[str, ...]
    """Connectors used positionally for the first key points"""

    cta_templates: Tuple[str, ...]
    """
    str.format templates with a single {cta} field.
    Example: "Let me know {cta}."
    """

    default_cta: str
    """Phrase used when no call-to-action is supplied"""

    cadence: Cadence

    def __post_init__(self):
        """Validation: vocabulary lists used for random picks must be non-empty"""
        if not self.greetings or not self.closings or not self.cta_templates:
            raise ValueError(f"ToneProfile '{self.label}' needs greetings, closings and cta_templates")


@dataclass
class EmailAgentInput:
    """
    Structured request for a single draft. Built fresh per generation.

    Key points are expected to be pre-split and trimmed by the caller;
    the composer still drops whitespace-only entries.
    """

    sender_name: str
    tone: EmailTone
    objective: str = ""
    key_points: List[str] = field(default_factory=list)
    subject: Optional[str] = None
    recipient_name: Optional[str] = None
    recipient_role: Optional[str] = None
    sender_title: Optional[str] = None
    call_to_action: Optional[str] = None
    include_postscript: bool = False
    extra_notes: Optional[str] = None


@dataclass(frozen=True)
class EmailDraft:
    """Composed draft returned to the caller."""

    subject: str
    body: str
    preview: str
    """Whitespace-collapsed body, at most 140 chars plus an ellipsis"""

    highlights: Tuple[str, ...] = ()
    """First (up to) three key points, original order"""
