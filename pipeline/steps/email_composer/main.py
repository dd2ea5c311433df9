"""
Email Composer Step

Turns an EmailAgentInput into an EmailDraft by picking tone-specific
phrases from the tone profile table and stitching them together.

Responsibilities:
- Derive the subject line
- Build greeting, objective sentence and role context
- Narrate key points into one or two paragraphs
- Pick the call-to-action sentence and sign-off
- Assemble body, preview and highlights

The only non-determinism is the random choice of greeting word, CTA
template and closing word. Pass a seeded random.Random to make drafts
reproducible.
"""

import math
import random
from typing import List, Optional, Sequence

import logfire

from pipeline.models.core import Cadence, EmailAgentInput, EmailDraft, EmailTone, ToneProfile

from .tones import get_tone_profile
from .utils import (
    ELLIPSIS,
    build_preview,
    clean_cta_phrase,
    connector_for,
    pick,
    sentence_case,
    story_sentence,
    strip_postscript_marker,
    strip_terminal_punctuation,
)


SUBJECT_MAX_LENGTH = 60
SUBJECT_CUTOFF = 55
HIGHLIGHT_COUNT = 3
PLACEHOLDER_NAME = "there"

# Objective openings that already read as a clause after the reach-out phrase
OBJECTIVE_MARKERS = ("to ", "about ", "regarding ", "because ", "for ")


# ===================================================================
# SENTENCE BUILDERS
# ===================================================================

def derive_subject(agent_input: EmailAgentInput, profile: ToneProfile) -> str:
    """
    Subject line for the draft. Deterministic.

    Uses the provided subject if any, otherwise the first key point,
    otherwise the objective. Falls back to "<Label> Follow-Up".
    """
    provided = (agent_input.subject or "").strip()
    if provided:
        return sentence_case(provided)

    hints = [point for point in agent_input.key_points if point and point.strip()]
    focus = hints[0] if hints else (agent_input.objective or "")
    if not focus.strip():
        return f"{profile.label} Follow-Up"

    cleaned = strip_terminal_punctuation(focus.strip())
    if not cleaned:
        return f"{profile.label} Follow-Up"

    if len(cleaned) < SUBJECT_MAX_LENGTH:
        return sentence_case(cleaned)

    return f"{sentence_case(cleaned[:SUBJECT_CUTOFF].strip())}{ELLIPSIS}"


def build_greeting(
    name: Optional[str],
    tone: EmailTone,
    rng: Optional[random.Random] = None
) -> str:
    """
    Salutation line, e.g. "Hi Taylor,".

    Args:
        name: Recipient name (blank falls back to "there")
        tone: Tone whose greeting words are used
        rng: Random source for the greeting word

    Returns:
        "<Greeting> <Name>,"
    """
    rng = rng or random.Random()
    profile = get_tone_profile(tone)
    recipient = (name or "").strip()

    # Formal drafts without a recipient name always open with "Hello"
    if EmailTone(tone) == EmailTone.FORMAL and not recipient:
        word = "Hello"
    else:
        word = pick(profile.greetings, rng)

    return f"{word} {recipient or PLACEHOLDER_NAME},"


def format_objective(objective: str, profile: ToneProfile) -> str:
    """
    Opening sentence built from the free-text objective.

    Example:
        >>> format_objective("to align on launch timeline", friendly)
        "I'm reaching out to align on launch timeline."
    """
    cleaned = strip_terminal_punctuation((objective or "").strip())
    if not cleaned:
        return f"{profile.reach_out_phrase} with a quick update."

    if cleaned.lower().startswith(OBJECTIVE_MARKERS):
        return f"{profile.reach_out_phrase} {cleaned}."

    return f"{profile.reach_out_phrase} to {cleaned}."


def build_role_sentence(role: Optional[str], profile: ToneProfile) -> str:
    """Context sentence about the recipient's role. Empty for direct cadence."""
    role = (role or "").strip()
    if not role or profile.cadence == Cadence.DIRECT:
        return ""

    preposition = "" if role.startswith("the ") else " in"
    return f"Given your role{preposition} {role}, I thought you'd appreciate the context."


def build_body(points: Sequence[str], profile: ToneProfile) -> str:
    """
    Narrate key points as connector-led sentences.

    Paragraph policy:
    - Direct cadence: everything in one paragraph
    - Otherwise up to 2 sentences stay together; more are split into two
      paragraphs at ceil(n / 2)

    Args:
        points: Key points in display order
        profile: Tone profile supplying connectors and cadence

    Returns:
        Zero, one or two paragraphs ("" when no point survives cleanup)
    """
    sentences = [
        story_sentence(point, connector_for(index, profile))
        for index, point in enumerate(points)
    ]
    sentences = [sentence for sentence in sentences if sentence]

    if not sentences:
        return ""

    if profile.cadence == Cadence.DIRECT or len(sentences) <= 2:
        return " ".join(sentences)

    midpoint = math.ceil(len(sentences) / 2)
    return f"{' '.join(sentences[:midpoint])}\n\n{' '.join(sentences[midpoint:])}"


def craft_cta(
    cta: Optional[str],
    profile: ToneProfile,
    rng: Optional[random.Random] = None
) -> str:
    """
    Call-to-action sentence.

    Without a CTA the tone's default phrase is used (shorter wording for
    direct cadence). With one, the text is lowercased and stripped of
    periods, then dropped into a randomly chosen template.
    """
    cleaned = clean_cta_phrase(cta)
    if not cleaned:
        if profile.cadence == Cadence.DIRECT:
            return f"Please let me know {profile.default_cta}."
        return f"I'd appreciate it if you could let me know {profile.default_cta}."

    rng = rng or random.Random()
    template = pick(profile.cta_templates, rng)
    return template.format(cta=cleaned)


def build_sender_block(sender_name: str, sender_title: Optional[str]) -> str:
    """Signature lines: name, then title when present."""
    title = (sender_title or "").strip()
    if title:
        return f"{sender_name}\n{title}"
    return sender_name


def build_postscript(include_postscript: bool, extra_notes: Optional[str]) -> str:
    """
    Trailing "P.S." block, including its leading blank line.

    Example:
        >>> build_postscript(True, "PS. dashboard link ready")
        '\\n\\nP.S. Dashboard link ready.'
    """
    notes = (extra_notes or "").strip()
    if not include_postscript or not notes:
        return ""

    text = sentence_case(strip_terminal_punctuation(strip_postscript_marker(notes)))
    if not text:
        return ""
    return f"\n\nP.S. {text}."


# ===================================================================
# ORCHESTRATION
# ===================================================================

class DraftComposer:
    """
    Composes complete drafts from EmailAgentInput.

    Holds only the random source; all other state is local to compose(),
    so one instance can serve concurrent callers.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        """
        Initialize composer.

        Args:
            rng: Random source for greeting/CTA/closing picks.
                 Defaults to an unseeded random.Random.
        """
        self.rng = rng or random.Random()

    def compose(self, agent_input: EmailAgentInput) -> EmailDraft:
        """
        Build the full draft.

        Steps:
        1. Resolve tone profile
        2. Subject, greeting, objective and role sentences
        3. Key-point paragraphs
        4. CTA, closing word, signature and postscript
        5. Body, preview and highlights
        """
        profile = get_tone_profile(agent_input.tone)

        with logfire.span(
            "composer.compose",
            tone=profile.label,
            key_point_count=len(agent_input.key_points)
        ):
            subject = derive_subject(agent_input, profile)
            greeting = build_greeting(agent_input.recipient_name, agent_input.tone, self.rng)
            intro_context = format_objective(agent_input.objective, profile)
            role_sentence = build_role_sentence(agent_input.recipient_role, profile)

            points = _clean_points(agent_input.key_points)
            body_content = build_body(points, profile)
            cta_sentence = craft_cta(agent_input.call_to_action, profile, self.rng)

            closing_word = pick(profile.closings, self.rng)
            sender_block = build_sender_block(agent_input.sender_name, agent_input.sender_title)
            postscript = build_postscript(agent_input.include_postscript, agent_input.extra_notes)

            opening = f"{greeting}\n\n{intro_context}"
            if role_sentence:
                opening = f"{opening} {role_sentence}"

            paragraphs = [
                opening,
                body_content,
                f"{cta_sentence}\n\n{closing_word},\n{sender_block}{postscript}",
            ]
            paragraphs = [paragraph for paragraph in paragraphs if paragraph]
            body = "\n\n".join(paragraphs)

            draft = EmailDraft(
                subject=subject,
                body=body,
                preview=build_preview(body),
                highlights=tuple(points[:HIGHLIGHT_COUNT]),
            )

            logfire.info(
                "Draft composed",
                tone=profile.label,
                paragraphs=len(paragraphs),
                body_length=len(body),
                highlight_count=len(draft.highlights),
                has_postscript=bool(postscript)
            )

            return draft


def generate_email_draft(
    agent_input: EmailAgentInput,
    rng: Optional[random.Random] = None
) -> EmailDraft:
    """
    Compose a draft in one call.

    Args:
        agent_input: Structured request (tone, objective, key points, ...)
        rng: Optional seeded random source for reproducible drafts

    Returns:
        EmailDraft with subject, body, preview and highlights

    Raises:
        UnknownToneError: If agent_input.tone is not an EmailTone
    """
    return DraftComposer(rng=rng).compose(agent_input)


def _clean_points(points: Sequence[str]) -> List[str]:
    """Trim key points and drop empty ones"""
    return [point.strip() for point in points if point and point.strip()]
