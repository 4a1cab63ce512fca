"""
Module: batch.py
Description: Concurrent delivery of one chunk of hooks.

Key Components:
- group_outcomes(): Stable partition of outcomes into succeeded/failed
- BatchRunner: Fires one delivery attempt per hook and partitions them

Dependencies: asyncio, typing
"""

import asyncio
from typing import Iterable, List, Optional, Sequence

from hookfanout.delivery.push import HookDeliveryClient
from hookfanout.models.endpoint import Endpoint, TriggerPayload
from hookfanout.models.report import DeliveryOutcome, RoundResult
from hookfanout.utils.logger import get_logger

logger = get_logger(__name__)


def group_outcomes(outcomes: Iterable[DeliveryOutcome]) -> RoundResult:
    """
    Partition outcomes by success, keeping their relative order.

    Args:
        outcomes: Delivery outcomes in attempt order

    Returns:
        RoundResult with the succeeded and failed outcomes
    """
    succeeded: List[DeliveryOutcome] = []
    failed: List[DeliveryOutcome] = []

    for outcome in outcomes:
        if outcome.succeeded:
            succeeded.append(outcome)
        else:
            failed.append(outcome)

    return RoundResult(succeeded=succeeded, failed=failed)


class BatchRunner:
    """Runs delivery attempts for a chunk of hooks concurrently."""

    def __init__(self, delivery_client: HookDeliveryClient):
        self.delivery_client = delivery_client

    async def run_batch(
        self,
        endpoints: Sequence[Endpoint],
        payload: TriggerPayload,
        limiter: Optional[asyncio.Semaphore] = None
    ) -> RoundResult:
        """
        Deliver the payload to every hook in the chunk.

        Args:
            endpoints: Hooks in this chunk
            payload: Trigger payload shared by all hooks
            limiter: Optional semaphore bounding requests in flight

        Returns:
            RoundResult covering every hook of the chunk exactly once
        """
        outcomes = await asyncio.gather(
            *(self._attempt(endpoint, payload, limiter) for endpoint in endpoints)
        )
        result = group_outcomes(outcomes)

        logger.debug(
            "Batch completed",
            size=len(endpoints),
            succeeded=len(result.succeeded),
            failed=len(result.failed)
        )
        return result

    async def _attempt(
        self,
        endpoint: Endpoint,
        payload: TriggerPayload,
        limiter: Optional[asyncio.Semaphore]
    ) -> DeliveryOutcome:
        if limiter is None:
            return await self.delivery_client.attempt(endpoint, payload)
        async with limiter:
            return await self.delivery_client.attempt(endpoint, payload)
