"""
Services module for request handling around the draft composer.
"""

from services.draft_service import compose_draft, parse_key_points
from services.samples import get_sample, list_samples, list_tone_options

__all__ = [
    "compose_draft",
    "parse_key_points",
    "get_sample",
    "list_samples",
    "list_tone_options",
]
