"""
Custom exceptions for draft composition.

The composer is total over its documented input domain, so these only
signal contract violations by the caller.
"""


class DraftCompositionError(Exception):
    """
    Base exception for draft composition failures.

    API handlers can catch this to distinguish composer faults from
    request validation errors.
    """
    pass


class UnknownToneError(DraftCompositionError):
    """
    Raised when a tone has no entry in the tone profile table.

    Attributes:
        tone: The value that failed to resolve

    This is a programming error: request schemas restrict tone to
    EmailTone, so it is never recovered from inside the composer.
    """

    def __init__(self, tone: object):
        self.tone = tone
        super().__init__(f"No tone profile registered for '{tone}'")
