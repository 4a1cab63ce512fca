"""
Module: service.py
Description: Trigger entry point combining the hook source and dispatcher.

A trigger reads the hook list once, builds the payload once and hands
both to the dispatcher. Callers receive either a complete report or a
single EndpointSourceError, never a partial report.
"""

from typing import Optional

from hookfanout.delivery.dispatcher import HookDispatcher
from hookfanout.models.endpoint import TriggerPayload
from hookfanout.models.report import TriggerReport
from hookfanout.storage.base import EndpointSource
from hookfanout.utils.logger import get_logger
from hookfanout.utils.metrics import MetricsClient

logger = get_logger(__name__)


class TriggerService:
    """Notifies every registered hook that a trigger occurred."""

    def __init__(
        self,
        source: EndpointSource,
        dispatcher: HookDispatcher,
        metrics_client: Optional[MetricsClient] = None
    ):
        """
        Args:
            source: Supplier of the registered hooks
            dispatcher: Retry coordinator used for the fan-out
            metrics_client: Optional CloudWatch publisher for report counts
        """
        self.source = source
        self.dispatcher = dispatcher
        self.metrics_client = metrics_client

    async def trigger(self, client_address: str) -> TriggerReport:
        """
        Dispatch a trigger caused by ``client_address``.

        Raises:
            EndpointSourceError: If the hook list cannot be read
        """
        payload = TriggerPayload.now(client_address)
        endpoints = await self.source.list_all()

        if not endpoints:
            # Dispatching nothing still yields every bucket, all empty
            logger.info("No hooks registered, nothing to dispatch")

        report = await self.dispatcher.dispatch(endpoints, payload)

        if self.metrics_client is not None:
            self.metrics_client.publish_report(report)

        return report
