"""
Module: models
Description: Package initialization for Pydantic data models.

This package contains all data models used by the hook dispatcher:
- Endpoint, TriggerPayload: dispatch inputs
- DeliveryOutcome, RoundResult, TriggerReport: dispatch results
- TriggerRequest: API request body

All models are exported here for convenient importing.
"""

from .endpoint import Endpoint, TriggerPayload
from .report import DeliveryOutcome, RoundResult, TriggerReport
from .request import TriggerRequest

__all__ = [
    "Endpoint",
    "TriggerPayload",
    "DeliveryOutcome",
    "RoundResult",
    "TriggerReport",
    "TriggerRequest",
]
