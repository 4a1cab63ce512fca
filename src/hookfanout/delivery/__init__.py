"""
Package: delivery
Description: Hook delivery for the trigger fan-out.

Provides the single-hook push client, the concurrent batch runner, the
multi-round retry dispatcher and the trigger service built on them.
"""

from .batch import BatchRunner, group_outcomes
from .dispatcher import HookDispatcher
from .push import HookDeliveryClient
from .report import ReportAggregator
from .service import TriggerService

__all__ = [
    "BatchRunner",
    "group_outcomes",
    "HookDispatcher",
    "HookDeliveryClient",
    "ReportAggregator",
    "TriggerService",
]
