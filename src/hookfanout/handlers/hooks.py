"""
Module: hooks.py
Description: Trigger endpoint for notifying registered hooks.

Implements the API action that fans a trigger out to every registered
hook and returns the per-round delivery report.

Key Components:
- trigger_hooks(): POST /hooks/trigger
- get_endpoint_source(), get_dispatcher(), get_metrics_client():
  dependency injection for the collaborators of a trigger
- Dispatch configuration validated at import time

Dependencies: FastAPI, typing, models, delivery, storage, config, utils
"""

from typing import Optional

from fastapi import APIRouter, Body, Depends, HTTPException, Request
from fastapi import status as status_codes

from hookfanout.config.settings import DispatchConfig, settings
from hookfanout.delivery.dispatcher import HookDispatcher
from hookfanout.delivery.service import TriggerService
from hookfanout.exceptions import EndpointSourceError
from hookfanout.models.report import TriggerReport
from hookfanout.models.request import TriggerRequest
from hookfanout.storage.base import EndpointSource
from hookfanout.storage.dynamodb import DynamoDBEndpointSource
from hookfanout.utils.logger import get_logger
from hookfanout.utils.metrics import MetricsClient

router = APIRouter(prefix="/hooks", tags=["hooks"])
logger = get_logger(__name__)

# Raises ConfigurationError on import so a bad config never serves traffic
dispatch_config = DispatchConfig.from_settings(settings)


def get_endpoint_source() -> EndpointSource:
    """
    Dependency to get the hook endpoint source.

    Returns:
        DynamoDB-backed source for the configured hooks table
    """
    return DynamoDBEndpointSource(
        table_name=settings.hooks_table_name,
        region_name=settings.aws_region
    )


def get_dispatcher() -> HookDispatcher:
    """Dependency to get a dispatcher built from the process-wide config."""
    return HookDispatcher.from_config(dispatch_config)


def get_metrics_client() -> Optional[MetricsClient]:
    """
    Dependency to get the CloudWatch metrics client.

    Returns:
        MetricsClient when metrics are enabled, None otherwise
    """
    if not settings.metrics_enabled:
        return None
    return MetricsClient(
        namespace=settings.metrics_namespace,
        region_name=settings.aws_region
    )


@router.post("/trigger", response_model=TriggerReport)
async def trigger_hooks(
    http_request: Request,
    request: Optional[TriggerRequest] = Body(default=None),
    source: EndpointSource = Depends(get_endpoint_source),
    dispatcher: HookDispatcher = Depends(get_dispatcher),
    metrics_client: Optional[MetricsClient] = Depends(get_metrics_client)
) -> TriggerReport:
    """
    Notify every registered hook and report the outcome.

    Args:
        http_request: Incoming request, used for the client address fallback
        request: Optional body with the client address to forward

    Returns:
        TriggerReport with initial successes, per-round recoveries and
        final failures

    Raises:
        HTTPException: 503 if the registered hooks cannot be read

    Example:
        POST /hooks/trigger
        {"ipadr": "203.0.113.7"}

        Response (200):
        {
            "initial": [{"endpoint_id": "hook_a", "succeeded": true, ...}],
            "retry_rounds": {"1": [], "2": []},
            "final_failed": []
        }
    """
    client_address = request.ipadr if request and request.ipadr else None
    if client_address is None:
        client_address = http_request.client.host if http_request.client else "unknown"

    service = TriggerService(source, dispatcher, metrics_client)

    try:
        report = await service.trigger(client_address)
    except EndpointSourceError as e:
        logger.error("Trigger aborted, hooks unavailable", error=e.message)
        raise HTTPException(
            status_code=status_codes.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Registered hooks are unavailable"
        )

    logger.info(
        "Trigger completed",
        client_address=client_address,
        delivered=len(report.initial),
        failed=len(report.final_failed)
    )
    return report
