"""Composer steps package.

This package contains the draft composition step:
- email_composer: Tone profile table, sentence helpers and draft assembly
"""
