"""
Module: endpoint.py
Description: Hook endpoint and trigger payload models.

Key Components:
- Endpoint: Read-only copy of a registered hook
- TriggerPayload: Event data POSTed to every hook

Dependencies: pydantic, datetime
"""

from datetime import datetime, timezone
from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, Field


class Endpoint(BaseModel):
    """
    A registered hook the dispatcher should notify.

    Instances are immutable for the duration of a trigger; the endpoint
    source owns the registration and hands the dispatcher a copy.

    Attributes:
        endpoint_id: Opaque identifier of the registration
        name: Human-readable hook name
        url: Target URL receiving the POST
    """

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    endpoint_id: str = Field(..., min_length=1, description="Hook identifier")
    name: str = Field(default="", description="Hook display name")
    url: str = Field(..., min_length=1, description="Hook target URL")


class TriggerPayload(BaseModel):
    """
    Event data shared read-only by every delivery of one trigger.

    On the wire the payload keeps the field names receivers already
    expect: ``{"ipadr": "...", "timeStamp": 1700000000000}``.

    Attributes:
        client_address: Address of the client that caused the trigger
        timestamp: Trigger time in epoch milliseconds
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    client_address: str = Field(..., alias="ipadr", description="Client IP address")
    timestamp: int = Field(..., alias="timeStamp", ge=0, description="Epoch milliseconds")

    @classmethod
    def now(cls, client_address: str) -> "TriggerPayload":
        """Build a payload stamped with the current time."""
        millis = int(datetime.now(timezone.utc).timestamp() * 1000)
        return cls(client_address=client_address, timestamp=millis)

    def to_body(self) -> Dict[str, Any]:
        """JSON body sent to each hook."""
        return self.model_dump(by_alias=True)
