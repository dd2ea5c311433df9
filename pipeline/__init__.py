"""
Draft composer entry points.

This module re-exports generate_email_draft() and the input/output
models so callers only import from `pipeline`.

Example:
    ```python
    import random

    from pipeline import EmailAgentInput, EmailTone, generate_email_draft

    draft = generate_email_draft(
        EmailAgentInput(
            sender_name="Jordan Rivers",
            tone=EmailTone.FRIENDLY,
            objective="to align on launch timeline",
            key_points=["Beta feedback exceeded adoption targets"],
        ),
        rng=random.Random(7),  # omit for varied greetings/closings
    )
    print(draft.subject)
    ```
"""

from pipeline.models.core import EmailAgentInput, EmailDraft, EmailTone
from pipeline.steps.email_composer.main import DraftComposer, generate_email_draft

__all__ = [
    "DraftComposer",
    "EmailAgentInput",
    "EmailDraft",
    "EmailTone",
    "generate_email_draft",
]
