"""
Email Composer Utilities

String helpers shared by the draft composer: casing, punctuation
cleanup, connector lookup and preview truncation.
"""

import random
import re
from typing import Optional, Sequence

from pipeline.models.core import ToneProfile

from .tones import DEFAULT_CONNECTOR, FALLBACK_CONNECTORS


PREVIEW_LIMIT = 140
PREVIEW_CUTOFF = 137
ELLIPSIS = "…"

_TERMINAL_PUNCTUATION = re.compile(r'[.?!]+$')
_WHITESPACE_RUN = re.compile(r'\s+')
# Leading "P.S.", "PS", "p.s" etc. typed by the user into their own notes
_POSTSCRIPT_MARKER = re.compile(r'^p\.?\s*s\b\.?\s*', re.IGNORECASE)


def sentence_case(value: str) -> str:
    """
    Trim and uppercase the first character, leaving the rest untouched.

    Example:
        >>> sentence_case("  beta feedback was great ")
        'Beta feedback was great'
    """
    trimmed = value.strip()
    if not trimmed:
        return ""
    return trimmed[0].upper() + trimmed[1:]


def strip_terminal_punctuation(value: str) -> str:
    """Remove any run of trailing '.', '?' or '!' characters."""
    return _TERMINAL_PUNCTUATION.sub("", value)


def pick(options: Sequence[str], rng: random.Random) -> str:
    """Uniformly random choice from a non-empty sequence."""
    return options[rng.randrange(len(options))]


def connector_for(index: int, profile: ToneProfile) -> str:
    """
    Connector phrase for the key point at a 0-based position.

    Lookup order:
    1. The tone's own transition starters
    2. The shared fallback connectors
    3. DEFAULT_CONNECTOR

    Args:
        index: Position of the key point
        profile: Tone profile supplying the first choices

    Returns:
        Connector phrase (may end with ',' or ':')
    """
    for candidates in (profile.transition_starters, FALLBACK_CONNECTORS):
        if index < len(candidates):
            return candidates[index]
    return DEFAULT_CONNECTOR


def story_sentence(text: str, connector: str) -> str:
    """
    Turn one key point into a full sentence led by a connector.

    A comma follows the connector unless it already ends with ':' or ','.
    Returns "" when the point is empty after cleanup.
    """
    cleaned = strip_terminal_punctuation(text.strip())
    if not cleaned:
        return ""

    formatted = sentence_case(cleaned)
    if connector.endswith((":", ",")):
        return f"{connector} {formatted}."

    return f"{connector}, {formatted}."


def clean_cta_phrase(cta: Optional[str]) -> str:
    """Trim, drop every period and lowercase a user supplied call-to-action."""
    if not cta:
        return ""
    return cta.strip().replace(".", "").lower()


def strip_postscript_marker(notes: str) -> str:
    """Remove a leading P.S./PS marker so it is not rendered twice."""
    return _POSTSCRIPT_MARKER.sub("", notes.strip()).strip()


def collapse_whitespace(value: str) -> str:
    """Replace every whitespace run (newlines included) with one space."""
    return _WHITESPACE_RUN.sub(" ", value).strip()


def build_preview(body: str) -> str:
    """
    Short single-line preview of a draft body.

    Args:
        body: Full multi-paragraph body

    Returns:
        Collapsed body if it fits in PREVIEW_LIMIT chars, otherwise the
        first PREVIEW_CUTOFF chars (trimmed) followed by an ellipsis
    """
    clean = collapse_whitespace(body)
    if len(clean) <= PREVIEW_LIMIT:
        return clean
    return f"{clean[:PREVIEW_CUTOFF].rstrip()}{ELLIPSIS}"
