"""
Module: dynamodb.py
Description: DynamoDB-backed source of registered hooks.

Reads the full hook table with a paginated scan. Transient AWS errors
are retried with exponential backoff; once retries are exhausted the
failure surfaces as EndpointSourceError.

Key Components:
- DynamoDBEndpointSource: list_all() over the hooks table
- Item conversion: hook_id/name/hook_url attributes to Endpoint

Dependencies: boto3, botocore, pydantic, tenacity, typing
Author: Hook Fanout Team
"""

from typing import Any, Dict, List, Optional

import boto3
from botocore.exceptions import BotoCoreError, ClientError
from pydantic import ValidationError
from tenacity import (
    AsyncRetrying,
    RetryError,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from hookfanout.exceptions import EndpointSourceError
from hookfanout.models.endpoint import Endpoint
from hookfanout.utils.logger import get_logger

logger = get_logger(__name__)


def _log_retry(retry_state) -> None:
    """Log each failed scan attempt before tenacity sleeps."""
    error = retry_state.outcome.exception() if retry_state.outcome else None
    logger.warning(
        "Hook table scan failed, retrying",
        attempt=retry_state.attempt_number,
        error=str(error)
    )


class DynamoDBEndpointSource:
    """
    Endpoint source reading hook registrations from DynamoDB.

    Attributes:
        table_name: Name of the DynamoDB hooks table
        dynamodb: boto3 DynamoDB resource
        table: boto3 DynamoDB table resource

    Example:
        >>> source = DynamoDBEndpointSource(table_name="hookfanout-hooks")
        >>> endpoints = await source.list_all()
    """

    def __init__(
        self,
        table_name: str,
        region_name: Optional[str] = None,
        max_attempts: int = 3,
        retry_wait_seconds: float = 0.5
    ):
        """
        Initialize the DynamoDB endpoint source.

        Args:
            table_name: Name of the DynamoDB hooks table
            region_name: AWS region of the table
            max_attempts: Scan attempts before giving up
            retry_wait_seconds: Base of the exponential wait between attempts

        Raises:
            ValueError: If table_name is empty or max_attempts is not positive
        """
        if not table_name or not isinstance(table_name, str):
            raise ValueError("table_name must be a non-empty string")
        if max_attempts < 1:
            raise ValueError("max_attempts must be positive")

        self.table_name = table_name
        self.max_attempts = max_attempts
        self.retry_wait_seconds = retry_wait_seconds
        self.dynamodb = boto3.resource('dynamodb', region_name=region_name)
        self.table = self.dynamodb.Table(table_name)

        logger.info(
            "DynamoDB endpoint source initialized",
            table_name=table_name
        )

    async def list_all(self) -> List[Endpoint]:
        """
        Read every registered hook.

        Returns:
            Hooks ordered by creation time, then id

        Raises:
            EndpointSourceError: If the table cannot be scanned
        """
        try:
            async for attempt in AsyncRetrying(
                stop=stop_after_attempt(self.max_attempts),
                wait=wait_exponential(multiplier=self.retry_wait_seconds, max=5),
                retry=retry_if_exception_type((ClientError, BotoCoreError)),
                before_sleep=_log_retry,
                reraise=False
            ):
                with attempt:
                    items = self._scan_all()
        except RetryError as e:
            error = e.last_attempt.exception()
            logger.error(
                "Failed to list hooks from DynamoDB",
                table_name=self.table_name,
                attempts=self.max_attempts,
                error=str(error)
            )
            raise EndpointSourceError(
                f"Unable to read hooks from table {self.table_name}: {error}"
            ) from error

        items.sort(key=lambda item: (str(item.get('created_at', '')), str(item.get('hook_id', ''))))
        endpoints = [
            endpoint for endpoint in (self._to_endpoint(item) for item in items)
            if endpoint is not None
        ]

        logger.info(
            "Hooks listed from DynamoDB",
            count=len(endpoints),
            table_name=self.table_name
        )
        return endpoints

    def _scan_all(self) -> List[Dict[str, Any]]:
        """Scan the whole table, following LastEvaluatedKey pagination."""
        items: List[Dict[str, Any]] = []
        kwargs: Dict[str, Any] = {}

        while True:
            response = self.table.scan(**kwargs)
            items.extend(response.get('Items', []))

            last_key = response.get('LastEvaluatedKey')
            if not last_key:
                return items
            kwargs['ExclusiveStartKey'] = last_key

    def _to_endpoint(self, item: Dict[str, Any]) -> Optional[Endpoint]:
        hook_id = item.get('hook_id')
        hook_url = item.get('hook_url')

        if not hook_id or not hook_url:
            logger.warning(
                "Skipping malformed hook item",
                hook_id=hook_id,
                table_name=self.table_name
            )
            return None

        try:
            return Endpoint(
                endpoint_id=str(hook_id),
                name=str(item.get('name', '')),
                url=str(hook_url)
            )
        except ValidationError as e:
            # Blank after whitespace stripping
            logger.warning(
                "Skipping malformed hook item",
                hook_id=hook_id,
                table_name=self.table_name,
                error=str(e)
            )
            return None
