"""
Module: dispatcher.py
Description: Batched fan-out of a trigger payload with multi-round retry.

Round 0 delivers to every hook. Each of the following retry rounds
re-chunks only the hooks that failed the round before, so a hook that
acknowledged delivery is never contacted again. Rounds run strictly one
after another; the chunks inside a round are dispatched together, with
a shared semaphore bounding the requests in flight.

Key Components:
- HookDispatcher: Retry coordinator producing a TriggerReport

Dependencies: asyncio, httpx (through HookDeliveryClient)
Author: Hook Fanout Team
"""

import asyncio
from typing import List, Optional, Sequence

import httpx

from hookfanout.config.settings import DispatchConfig
from hookfanout.delivery.batch import BatchRunner
from hookfanout.delivery.push import HookDeliveryClient
from hookfanout.delivery.report import ReportAggregator
from hookfanout.exceptions import ConfigurationError
from hookfanout.models.endpoint import Endpoint, TriggerPayload
from hookfanout.models.report import RoundResult, TriggerReport
from hookfanout.utils.batch_helpers import chunk_list
from hookfanout.utils.logger import get_logger

logger = get_logger(__name__)


class HookDispatcher:
    """
    Retry coordinator for one trigger at a time.

    The dispatcher holds no per-trigger state; concurrent triggers may
    share an instance.

    Attributes:
        config: Batch size, retry count and concurrency parameters
        batch_runner: Runner delivering one chunk of hooks

    Example:
        >>> dispatcher = HookDispatcher.from_config(DispatchConfig(batch_size=10, retry_count=3))
        >>> report = await dispatcher.dispatch(endpoints, TriggerPayload.now("203.0.113.7"))
    """

    def __init__(self, config: DispatchConfig, batch_runner: BatchRunner):
        """
        Initialize the dispatcher.

        Args:
            config: Validated dispatch parameters
            batch_runner: Runner used for every chunk

        Raises:
            ConfigurationError: If config is not a DispatchConfig
        """
        if not isinstance(config, DispatchConfig):
            raise ConfigurationError("config must be a DispatchConfig instance")

        self.config = config
        self.batch_runner = batch_runner

    @classmethod
    def from_config(
        cls,
        config: DispatchConfig,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ) -> "HookDispatcher":
        """Build a dispatcher with an HTTP delivery client sized from config."""
        delivery_client = HookDeliveryClient(
            timeout_seconds=config.delivery_timeout,
            transport=transport
        )
        return cls(config, BatchRunner(delivery_client))

    async def dispatch(
        self,
        endpoints: Sequence[Endpoint],
        payload: TriggerPayload
    ) -> TriggerReport:
        """
        Deliver the payload to every hook, retrying failures.

        Args:
            endpoints: Hooks to notify, read once by the caller
            payload: Trigger payload shared by all deliveries

        Returns:
            TriggerReport placing every hook in exactly one bucket
        """
        retry_count = self.config.retry_count
        aggregator = ReportAggregator(retry_count)
        limiter = asyncio.Semaphore(self.config.concurrency_limit)

        pending = self._unique(endpoints)
        logger.info(
            "Dispatching trigger",
            hooks=len(pending),
            batch_size=self.config.batch_size,
            retry_count=retry_count
        )

        result = await self._run_round(0, pending, payload, limiter)
        aggregator.record_initial(result.succeeded)
        failed = result.failed

        for round_number in range(1, retry_count):
            if not failed:
                break

            if self.config.round_delay_seconds > 0:
                await self._pause(self.config.round_delay_seconds)

            retry_endpoints = [outcome.endpoint() for outcome in failed]
            result = await self._run_round(round_number, retry_endpoints, payload, limiter)
            aggregator.record_retry(round_number, result.succeeded)
            failed = result.failed

        report = aggregator.build(failed)

        logger.info(
            "Trigger dispatch completed",
            hooks=len(pending),
            delivered=len(report.initial),
            recovered=len(report.succeeded_ids()) - len(report.initial),
            failed=len(report.final_failed),
            failed_hooks=sorted(report.failed_ids())
        )
        return report

    async def _run_round(
        self,
        round_number: int,
        endpoints: List[Endpoint],
        payload: TriggerPayload,
        limiter: asyncio.Semaphore
    ) -> RoundResult:
        """Chunk the round's hooks and run every chunk together."""
        chunks = chunk_list(endpoints, self.config.batch_size)
        batch_results = await asyncio.gather(
            *(self.batch_runner.run_batch(chunk, payload, limiter) for chunk in chunks)
        )

        result = RoundResult()
        for batch_result in batch_results:
            result = result.merge(batch_result)

        logger.info(
            "Delivery round completed",
            round=round_number,
            chunks=len(chunks),
            attempted=result.attempted,
            succeeded=len(result.succeeded),
            failed=len(result.failed)
        )
        return result

    async def _pause(self, seconds: float) -> None:
        """Wait before a retry round."""
        await asyncio.sleep(seconds)

    @staticmethod
    def _unique(endpoints: Sequence[Endpoint]) -> List[Endpoint]:
        """Drop repeated hook ids so no hook is contacted twice per round."""
        seen = set()
        unique: List[Endpoint] = []

        for endpoint in endpoints:
            if endpoint.endpoint_id in seen:
                logger.warning(
                    "Duplicate hook skipped",
                    endpoint_id=endpoint.endpoint_id
                )
                continue
            seen.add(endpoint.endpoint_id)
            unique.append(endpoint)

        return unique
