"""
Exceptions raised by similarity services.

The analyzer recovers from all of these; they exist so failures can be told
apart in logs and tests.
"""

from typing import Optional


class AnalysisError(Exception):
    """Base class for similarity analysis failures."""


class ConfigurationAbsentError(AnalysisError):
    """Raised when a service is used without its API credential."""


class TransportError(AnalysisError):
    """Raised when the AI service call fails (network, timeout, HTTP error)."""

    def __init__(self, message: str, code: Optional[int] = None):
        super().__init__(message)
        self.code = code


class ResponseInvalidError(AnalysisError):
    """Raised when the AI response is not valid JSON or fails schema validation."""
