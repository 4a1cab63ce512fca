"""
Module: push.py
Description: Push delivery of a trigger payload to one hook.

Implements a single HTTP POST attempt with timeout handling. Every
failure mode is folded into a failed DeliveryOutcome so one unreachable
hook can never abort the fan-out to the others.
"""

import time
from typing import Optional

import httpx

from hookfanout.models.endpoint import Endpoint, TriggerPayload
from hookfanout.models.report import DeliveryOutcome
from hookfanout.utils.logger import get_logger

logger = get_logger(__name__)

SUCCESS_STATUS = 200


class HookDeliveryClient:
    """
    HTTP client for pushing trigger payloads to hooks.

    Only an explicit 200 counts as delivered. Other statuses, timeouts
    and network errors are reported as failed outcomes, never raised.
    """

    def __init__(
        self,
        timeout_seconds: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        """
        Initialize hook delivery client.

        Args:
            timeout_seconds: Per-attempt HTTP timeout in seconds
            transport: Optional httpx transport (used to stub hooks in tests)

        Raises:
            ValueError: If timeout_seconds is not positive
        """
        if timeout_seconds <= 0:
            raise ValueError("timeout_seconds must be positive")

        self.timeout_seconds = timeout_seconds
        self.timeout = httpx.Timeout(timeout_seconds, connect=timeout_seconds)
        self._transport = transport

    async def attempt(self, endpoint: Endpoint, payload: TriggerPayload) -> DeliveryOutcome:
        """
        POST the payload to one hook and classify the result.

        Args:
            endpoint: Hook to notify
            payload: Trigger payload shared by all hooks

        Returns:
            DeliveryOutcome with succeeded=True only for a 200 response
        """
        start = time.monotonic()

        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                logger.debug(
                    "Attempting hook delivery",
                    endpoint_id=endpoint.endpoint_id,
                    url=endpoint.url
                )

                response = await client.post(
                    endpoint.url,
                    json=payload.to_body(),
                    headers={'Content-Type': 'application/json'}
                )

            elapsed_ms = (time.monotonic() - start) * 1000

            if response.status_code == SUCCESS_STATUS:
                logger.info(
                    "Hook delivered successfully",
                    endpoint_id=endpoint.endpoint_id,
                    status_code=response.status_code,
                    response_time_ms=elapsed_ms
                )
                return DeliveryOutcome.for_endpoint(
                    endpoint, succeeded=True, status_code=response.status_code
                )

            logger.warning(
                "Hook delivery rejected",
                endpoint_id=endpoint.endpoint_id,
                status_code=response.status_code,
                response=response.text[:500],
                response_time_ms=elapsed_ms
            )
            return DeliveryOutcome.for_endpoint(
                endpoint,
                succeeded=False,
                status_code=response.status_code,
                error=f"unexpected status {response.status_code}"
            )

        except httpx.TimeoutException:
            logger.warning(
                "Hook delivery timeout",
                endpoint_id=endpoint.endpoint_id,
                url=endpoint.url,
                timeout_seconds=self.timeout_seconds
            )
            return DeliveryOutcome.for_endpoint(endpoint, succeeded=False, error="timeout")

        except httpx.NetworkError as e:
            logger.warning(
                "Hook delivery network error",
                endpoint_id=endpoint.endpoint_id,
                url=endpoint.url,
                error=str(e)
            )
            return DeliveryOutcome.for_endpoint(endpoint, succeeded=False, error="network_error")

        except Exception as e:
            logger.error(
                "Hook delivery failed",
                endpoint_id=endpoint.endpoint_id,
                url=endpoint.url,
                error=str(e),
                error_type=type(e).__name__
            )
            return DeliveryOutcome.for_endpoint(
                endpoint, succeeded=False, error=type(e).__name__
            )
