"""
Tests for the tone profile table and composer string helpers.

Run with:
    pytest pipeline/steps/email_composer/tests/test_composer_utils.py -v
"""

import dataclasses

import pytest

from pipeline.core.exceptions import UnknownToneError
from pipeline.models.core import Cadence, EmailTone, ToneProfile
from pipeline.steps.email_composer.tones import (
    FALLBACK_CONNECTORS,
    TONE_PROFILES,
    get_tone_profile,
)
from pipeline.steps.email_composer.utils import (
    build_preview,
    clean_cta_phrase,
    collapse_whitespace,
    connector_for,
    sentence_case,
    story_sentence,
    strip_postscript_marker,
    strip_terminal_punctuation,
)


pytestmark = pytest.mark.unit


# ===================================================================
# TESTS - Tone profile table
# ===================================================================

def test_table_covers_every_tone():
    assert set(TONE_PROFILES) == set(EmailTone)


@pytest.mark.parametrize("tone", list(EmailTone))
def test_profiles_have_usable_vocabulary(tone):
    profile = get_tone_profile(tone)

    assert profile.greetings and profile.closings and profile.cta_templates
    assert isinstance(profile.cadence, Cadence)
    for template in profile.cta_templates:
        assert "{cta}" in template


def test_direct_cadence_tones():
    direct = {tone for tone, profile in TONE_PROFILES.items() if profile.cadence == Cadence.DIRECT}
    assert direct == {EmailTone.PERSUASIVE, EmailTone.CONCISE}


def test_lookup_by_string_value():
    assert get_tone_profile("formal") is TONE_PROFILES[EmailTone.FORMAL]


def test_lookup_miss_raises():
    with pytest.raises(UnknownToneError) as exc_info:
        get_tone_profile("sarcastic")
    assert exc_info.value.tone == "sarcastic"


def test_table_is_read_only():
    with pytest.raises(TypeError):
        TONE_PROFILES[EmailTone.FRIENDLY] = TONE_PROFILES[EmailTone.FORMAL]

    with pytest.raises(dataclasses.FrozenInstanceError):
        TONE_PROFILES[EmailTone.FRIENDLY].label = "Chummy"


def test_profile_rejects_empty_vocabulary():
    with pytest.raises(ValueError):
        ToneProfile(
            label="Empty",
            greetings=(),
            closings=("Best",),
            reach_out_phrase="Hi",
            transition_starters=(),
            cta_templates=("{cta}",),
            default_cta="ok",
            cadence=Cadence.DIRECT,
        )


# ===================================================================
# TESTS - Connector fallback chain
# ===================================================================

def test_connector_prefers_tone_starters():
    profile = TONE_PROFILES[EmailTone.CONCISE]
    assert [connector_for(i, profile) for i in range(3)] == ["Key points:", "Highlights:", "In short,"]


def test_connector_falls_back_to_shared_list_by_index():
    profile = TONE_PROFILES[EmailTone.FRIENDLY]
    assert connector_for(3, profile) == "Moreover"
    assert connector_for(4, profile) == "Finally"
    assert connector_for(5, profile) == "One more thing"


def test_connector_default_when_both_lists_exhausted():
    profile = TONE_PROFILES[EmailTone.FRIENDLY]
    assert connector_for(len(FALLBACK_CONNECTORS), profile) == "Additionally"
    assert connector_for(50, profile) == "Additionally"


def test_connector_shared_list_for_profile_without_starters():
    profile = dataclasses.replace(TONE_PROFILES[EmailTone.FORMAL], transition_starters=())
    assert connector_for(0, profile) == "First"


# ===================================================================
# TESTS - String helpers
# ===================================================================

def test_sentence_case():
    assert sentence_case("  hello World ") == "Hello World"
    assert sentence_case("   ") == ""


def test_strip_terminal_punctuation():
    assert strip_terminal_punctuation("Ready?!.") == "Ready"
    assert strip_terminal_punctuation("v1.2 shipped") == "v1.2 shipped"


def test_story_sentence_comma_rules():
    assert story_sentence("launch moved", "First") == "First, Launch moved."
    assert story_sentence("launch moved", "Also,") == "Also, Launch moved."
    assert story_sentence("launch moved", "Highlights:") == "Highlights: Launch moved."
    assert story_sentence(" !! ", "First") == ""


def test_clean_cta_phrase():
    assert clean_cta_phrase("  Book a call at 3 p.m. ") == "book a call at 3 pm"
    assert clean_cta_phrase(None) == ""


def test_strip_postscript_marker():
    assert strip_postscript_marker("P.S. see attached") == "see attached"
    assert strip_postscript_marker("PS see attached") == "see attached"
    assert strip_postscript_marker("Please see attached") == "Please see attached"


def test_collapse_whitespace():
    assert collapse_whitespace(" Hi there,\n\nQuick  note.\t") == "Hi there, Quick note."


def test_preview_short_body_unchanged():
    body = "Hi there,\n\nQuick note."
    assert build_preview(body) == "Hi there, Quick note."


def test_preview_boundary():
    assert build_preview("x" * 140) == "x" * 140
    assert build_preview("x" * 141) == "x" * 137 + "…"


def test_preview_trims_before_ellipsis():
    body = "a" * 136 + " " + "b" * 20
    assert build_preview(body) == "a" * 136 + "…"
