"""
Exception classes for github_linkify.

Content never raises: a reference that cannot be linked is left as text.
These errors are only raised while loading configuration.
"""


class LinkifyError(Exception):
    """Base class for all github_linkify errors."""


class ConfigurationError(LinkifyError):
    """Raised when a configuration source is missing or unreadable."""


class ValidationError(LinkifyError):
    """Raised when configuration data has the wrong shape."""
