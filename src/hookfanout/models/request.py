"""
Module: request.py
Description: API request models for the hook trigger endpoint.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class TriggerRequest(BaseModel):
    """
    Request body for POST /hooks/trigger.

    Attributes:
        ipadr: Client address to report to hooks; defaults to the caller's host
    """

    model_config = ConfigDict(
        str_strip_whitespace=True,
        json_schema_extra={
            "example": {"ipadr": "203.0.113.7"}
        }
    )

    ipadr: Optional[str] = Field(
        default=None,
        max_length=64,
        description="Client IP address forwarded to every hook"
    )

    @field_validator('ipadr')
    @classmethod
    def validate_ipadr(cls, v: Optional[str]) -> Optional[str]:
        """Treat blank addresses as missing."""
        if v is not None and not v:
            return None
        return v
