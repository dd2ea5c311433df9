"""
Email Composer Step

Builds tone-aware email drafts from structured input:
- Subject derivation and greeting selection
- Key-point narration with positional connectors
- Call-to-action, sign-off and optional postscript
"""

from .main import DraftComposer, generate_email_draft
from .tones import TONE_PROFILES, get_tone_profile

__all__ = ["DraftComposer", "generate_email_draft", "TONE_PROFILES", "get_tone_profile"]
