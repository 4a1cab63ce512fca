"""
Module: exceptions.py
Description: Error taxonomy for the hook dispatcher.

Only structural failures are exceptions. A hook that cannot be reached
is never raised; it shows up as a failed DeliveryOutcome in the report.
"""

from typing import Dict


class HookFanoutError(Exception):
    """
    Base exception for dispatcher errors.

    Attributes:
        message: Human-readable error description
        code: Machine-readable error code for API responses
    """

    code: str = "hookfanout_error"

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)

    def to_dict(self) -> Dict[str, Dict[str, str]]:
        """Convert exception to an API-friendly dictionary."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
            }
        }


class ConfigurationError(HookFanoutError, ValueError):
    """Invalid batch size, retry count or other startup setting."""

    code: str = "configuration_error"


class EndpointSourceError(HookFanoutError):
    """The list of registered hooks could not be read."""

    code: str = "endpoint_source_unavailable"
