"""Exceptions shared across features."""


class InvalidArgumentError(ValueError):
    """Raised when a caller passes an absent or empty required value."""
