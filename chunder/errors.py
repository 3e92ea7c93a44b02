"""
Errors raised by chunder.
"""


class InvalidArgumentError(ValueError):
    """Raised when a caller passes a combination of arguments that cannot be resolved."""
