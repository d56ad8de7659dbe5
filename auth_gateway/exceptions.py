"""Exceptions."""


class ConfigurationError(RuntimeError):
    """A required configuration parameter is missing or unusable."""


class InvalidBody(RuntimeError):
    """A request body could not be decoded to text."""
