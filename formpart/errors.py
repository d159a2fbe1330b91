class FormpartError(Exception):
    """Base error for formpart."""


class InvalidArgument(FormpartError, ValueError):
    """Raised when a part or body is given a missing or unusable argument."""
