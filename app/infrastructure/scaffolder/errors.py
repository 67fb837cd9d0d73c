"""Errors for scaffolder actions."""


class InputError(ValueError):
    """Raised when action input is invalid or a precondition is not met.

    Always raised before any remote side effect takes place, so the caller
    can treat it as an immediate, non-retryable step failure.
    """
