"""
Exceptions raised by the validator
"""


class RedirectValidatorError(Exception):
    """Base class for all validator errors"""


class InputError(RedirectValidatorError):
    """The URL list is missing or malformed. Fatal before any navigation."""


class NavigationError(RedirectValidatorError):
    """The browser could not start a navigation. Only the current task fails."""

    def __init__(self, url: str, reason: str):
        super().__init__(f"Navigation to {url} failed: {reason}")
        self.url = url
        self.reason = reason


class OutputError(RedirectValidatorError):
    """The result file could not be written. Fatal for the run."""
