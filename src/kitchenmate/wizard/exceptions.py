"""
Wizard exceptions.

Raised by the session controller when an action is not allowed in the
current state. Surfaces (CLI, HTTP API) map these to user feedback.
"""


class WizardError(Exception):
    """Base exception for wizard errors."""
    pass


class StepError(WizardError):
    """Raised when an answer does not fit the current step."""
    pass


class StepNotReadyError(StepError):
    """Raised when advancing from a step whose required answers are missing."""
    pass


class ResultsError(WizardError):
    """Raised for invalid actions on the results view."""
    pass


class RatingError(ResultsError):
    """Raised when a rating cannot be submitted."""
    pass
